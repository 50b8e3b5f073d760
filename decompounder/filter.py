"""Keyword gate and token-stream decompounding filter."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .emitter import Emitter
from .lexicon import read_word_list
from .models import EmittedToken, Segmentation, Token
from .segmenter import DictionarySegmenter

logger = logging.getLogger(__name__)


class KeywordGate:
    """Decide whether a token is protected from decompounding.

    Protection only applies when ``respect_keywords`` is set; otherwise every
    token is eligible, including those in the keyword set.
    """

    def __init__(self, keywords: Iterable[str] = (), respect_keywords: bool = False):
        self.keywords = frozenset(k.strip() for k in keywords if k.strip())
        self.respect_keywords = respect_keywords

    @classmethod
    def from_file(cls, path: str | Path, respect_keywords: bool = False) -> "KeywordGate":
        """Load protected keywords from a file with one entry per line."""
        gate = cls(read_word_list(path), respect_keywords=respect_keywords)
        logger.info(f"Loaded {len(gate.keywords)} keywords from {path}")
        return gate

    def is_protected(self, text: str) -> bool:
        return self.respect_keywords and text in self.keywords


class Decompounder:
    """Decompounding engine: segmentation plus output assembly."""

    def __init__(self, segmenter: DictionarySegmenter, emitter: Optional[Emitter] = None):
        self.segmenter = segmenter
        self.emitter = emitter or Emitter(segmenter.min_subword_length)

    def decompose(self, text: str, protected: bool = False) -> Segmentation:
        """Segment a token unless it is protected."""
        if protected:
            return Segmentation()
        return self.segmenter.segment(text)

    def process_token(self, token: Token, protected: bool = False) -> list[EmittedToken]:
        """Expand one stream token into its output tokens."""
        segmentation = self.decompose(token.text, protected=protected)
        if segmentation:
            logger.debug(f"Decomposed {token.text!r} into {list(segmentation)}")
        return self.emitter.emit(token, segmentation)

    def process(self, text: str, protected: bool = False) -> list[EmittedToken]:
        """Expand a bare token text into its output tokens."""
        return self.process_token(Token(text, 0, len(text)), protected=protected)


class DecompoundFilter:
    """Apply a decompounder to every token of a stream."""

    def __init__(self, decompounder: Decompounder, gate: Optional[KeywordGate] = None):
        self.decompounder = decompounder
        self.gate = gate or KeywordGate()

    def filter(self, tokens: Iterable[Token]) -> Iterator[EmittedToken]:
        """Yield the expanded output for each input token, in order."""
        for token in tokens:
            protected = self.gate.is_protected(token.text)
            yield from self.decompounder.process_token(token, protected=protected)
