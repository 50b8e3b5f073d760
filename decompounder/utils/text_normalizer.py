"""Text normalization utilities for German input text."""

import re
import unicodedata
import logging

logger = logging.getLogger(__name__)


class GermanTextNormalizer:
    """Normalize German text before tokenization."""

    # Characters that break words without being visible
    SOFT_HYPHEN = '\u00AD'
    ZERO_WIDTH = '[\u200B\u200C\u200D\u2060\uFEFF]'

    @classmethod
    def compose_umlauts(cls, text: str) -> str:
        """
        Convert text to Unicode NFC.

        Decomposed umlauts ("O" + combining diaeresis) become the single
        precomposed character, so "Ökosteuer" matches dictionary entries
        however the input was encoded.

        Args:
            text: Input text

        Returns:
            NFC-normalized text
        """
        if not text:
            return text
        return unicodedata.normalize('NFC', text)

    @classmethod
    def remove_invisible(cls, text: str) -> str:
        """
        Remove soft hyphens and zero-width characters.

        Args:
            text: Input text

        Returns:
            Text without invisible break characters
        """
        if not text:
            return text
        text = text.replace(cls.SOFT_HYPHEN, '')
        return re.sub(cls.ZERO_WIDTH, '', text)

    @classmethod
    def normalize_text(cls, text: str, remove_invisible: bool = True) -> str:
        """
        Main normalization function.

        Args:
            text: Input text
            remove_invisible: Whether to drop soft hyphens and zero-width characters

        Returns:
            Normalized text
        """
        if not text:
            return text

        text = cls.compose_umlauts(text)
        if remove_invisible:
            text = cls.remove_invisible(text)

        return text


def normalize_german_text(text: str, remove_invisible: bool = True) -> str:
    """
    Convenience function for normalizing German text.

    Args:
        text: Input text
        remove_invisible: Whether to drop soft hyphens and zero-width characters

    Returns:
        Normalized text
    """
    return GermanTextNormalizer.normalize_text(text, remove_invisible=remove_invisible)
