"""Morpheme dictionary with exact-match lookup."""

import logging
from pathlib import Path
from typing import Iterable

from .config import ConfigurationError

logger = logging.getLogger(__name__)


def read_word_list(path: str | Path) -> list[str]:
    """Read a word list with one entry per line.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        stripped = (line.strip() for line in f)
        return [line for line in stripped if line and not line.startswith("#")]


class Lexicon:
    """Immutable set of known morphemes.

    Lookups are exact and case-sensitive unless ``ignore_case`` is set, in
    which case entries and queries are compared by their casefolded form.
    """

    def __init__(self, words: Iterable[str], ignore_case: bool = False):
        """Initialize lexicon.

        Args:
            words: Morphemes to store; duplicates and blank entries are ignored
            ignore_case: Compare casefolded forms

        Raises:
            ConfigurationError: If no usable entry is given
        """
        self.ignore_case = ignore_case
        entries = set()
        for word in words:
            word = word.strip()
            if word:
                entries.add(self._key(word))
        if not entries:
            raise ConfigurationError("Lexicon must contain at least one word")
        self._entries = frozenset(entries)
        self.max_length = max(len(entry) for entry in self._entries)

    def _key(self, word: str) -> str:
        return word.casefold() if self.ignore_case else word

    @classmethod
    def from_file(cls, path: str | Path, ignore_case: bool = False) -> "Lexicon":
        """Load a lexicon from a word list with one entry per line.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file holds no entries
        """
        words = read_word_list(path)
        try:
            lexicon = cls(words, ignore_case=ignore_case)
        except ConfigurationError as e:
            raise ConfigurationError(f"{e}: {path}") from e
        logger.info(f"Loaded {len(lexicon)} entries from {path}")
        return lexicon

    def contains(self, word: str) -> bool:
        """Check whether a word is a known morpheme."""
        return self._key(word) in self._entries

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon(entries={len(self)}, ignore_case={self.ignore_case})"
