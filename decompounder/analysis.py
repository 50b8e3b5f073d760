"""Tokenizer, analyzer and construction of the engine from configuration."""

import logging
import re
from typing import Optional

from .config import Config
from .connectors import ConnectorRules
from .emitter import Emitter
from .filter import DecompoundFilter, Decompounder, KeywordGate
from .lexicon import Lexicon, read_word_list
from .models import EmittedToken, Token
from .normalizer import SuffixNormalizer
from .segmenter import DictionarySegmenter
from .utils.text_normalizer import normalize_german_text

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"\w+")


def tokenize(text: str) -> list[Token]:
    """Split text into word tokens with character offsets.

    Args:
        text: Input text

    Returns:
        Tokens in stream order
    """
    return [
        Token(match.group(0), match.start(), match.end())
        for match in WORD_PATTERN.finditer(text)
    ]


def load_lexicon(config: Config) -> Lexicon:
    """Build the lexicon from a dictionary file and/or inline words."""
    dictionary = config.dictionary
    words = list(dictionary.words)
    if dictionary.path is not None:
        words.extend(read_word_list(dictionary.path))
    lexicon = Lexicon(
        (normalize_german_text(w) for w in words),
        ignore_case=dictionary.ignore_case,
    )
    logger.info(f"Lexicon ready: {lexicon}")
    return lexicon


def load_keyword_gate(config: Config) -> KeywordGate:
    """Build the keyword gate from inline keywords and/or a keyword file."""
    keywords = config.keywords
    words = list(keywords.words)
    if keywords.path is not None:
        words.extend(read_word_list(keywords.path))
    return KeywordGate(
        (normalize_german_text(w) for w in words),
        respect_keywords=keywords.respect_keywords,
    )


def build_decompounder(config: Config, lexicon: Optional[Lexicon] = None) -> Decompounder:
    """Construct the decompounding engine from configuration.

    Args:
        config: Pipeline configuration
        lexicon: Preloaded lexicon to share between engines

    Returns:
        Configured Decompounder
    """
    settings = config.decompound
    if lexicon is None:
        lexicon = load_lexicon(config)
    segmenter = DictionarySegmenter(
        lexicon,
        connectors=ConnectorRules(settings.connectors),
        normalizer=SuffixNormalizer(
            settings.suffix_rules, min_length=settings.min_subword_length
        ),
        min_subword_length=settings.min_subword_length,
    )
    emitter = Emitter(
        min_subword_length=settings.min_subword_length,
        subwords_only=settings.subwords_only,
    )
    return Decompounder(segmenter, emitter)


class Analyzer:
    """Normalize, tokenize and decompound running text."""

    def __init__(self, decompound_filter: DecompoundFilter, normalize: bool = True):
        self.decompound_filter = decompound_filter
        self.normalize = normalize

    @classmethod
    def from_config(
        cls,
        config: Config,
        name: Optional[str] = None,
        lexicon: Optional[Lexicon] = None,
    ) -> "Analyzer":
        """Build an analyzer, optionally applying a named profile.

        Raises:
            ConfigurationError: If the named profile does not exist
        """
        config = config.resolve_analyzer(name)
        decompounder = build_decompounder(config, lexicon=lexicon)
        return cls(DecompoundFilter(decompounder, load_keyword_gate(config)))

    def analyze(self, text: str) -> list[EmittedToken]:
        """Return the output token sequence for a piece of text.

        Offsets refer to the normalized text.
        """
        if self.normalize:
            text = normalize_german_text(text)
        return list(self.decompound_filter.filter(tokenize(text)))

    def terms(self, text: str) -> list[str]:
        """Return only the texts of the output tokens."""
        return [token.text for token in self.analyze(text)]
