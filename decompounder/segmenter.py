"""Dictionary-based compound segmentation."""

from typing import Optional

from .config import ConfigurationError
from .connectors import ConnectorRules
from .lexicon import Lexicon
from .models import Segmentation
from .normalizer import SuffixNormalizer

# (part, start of the next part) or None; next start is None for the final part
Link = Optional[tuple[str, Optional[int]]]


class DictionarySegmenter:
    """Split a word into lexicon morphemes joined by connectors.

    The search runs left to right and tries the shortest known prefix first,
    so "Rechtsanwaltskanzleien" becomes Recht + anwalt + kanzlei rather than
    a longer first match. The first split whose tail segments successfully is
    accepted. Only the trailing fragment of a word is suffix-normalized;
    inner prefixes must be lexicon entries as they appear.

    Each call fills a table of suffix results from the end of the word to the
    start, without recursion, and prefixes are never longer than the longest
    lexicon entry, so work grows linearly with the word length. The segmenter
    holds no mutable state and can be shared between threads.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        connectors: Optional[ConnectorRules] = None,
        normalizer: Optional[SuffixNormalizer] = None,
        min_subword_length: int = 2,
    ):
        """Initialize segmenter.

        Args:
            lexicon: Known morphemes
            connectors: Glue strings tried between morphemes
            normalizer: Suffix rewrites for the trailing fragment
            min_subword_length: Minimum length of every emitted subword

        Raises:
            ConfigurationError: If min_subword_length is below 1
        """
        if min_subword_length < 1:
            raise ConfigurationError(
                f"min_subword_length must be at least 1, got {min_subword_length}"
            )
        self.lexicon = lexicon
        self.connectors = connectors or ConnectorRules()
        self.normalizer = normalizer or SuffixNormalizer(min_length=min_subword_length)
        self.min_subword_length = min_subword_length
        # A trailing fragment longer than this cannot reach a lexicon entry
        self._max_fragment_length = lexicon.max_length + max(
            [len(suffix) - len(replacement) for suffix, replacement in self.normalizer.rules]
            + [0]
        )

    def segment(self, word: str) -> Segmentation:
        """Decompose a word.

        Args:
            word: Token text already known to be eligible

        Returns:
            Segmentation with two or more parts for a compound, one part for a
            whole-word lexicon hit (possibly normalized), empty otherwise
        """
        if len(word) < self.min_subword_length:
            return Segmentation()

        # links[i] is (part, next start) for the accepted segmentation of
        # word[i:], with next start None for the final part; filled right to left
        links: list[Link] = [None] * (len(word) + 1)
        for start in range(len(word) - self.min_subword_length, -1, -1):
            link = self._split(word, start, links)
            if link is None:
                link = self._match_final(word[start:])
            links[start] = link

        parts = []
        start = 0
        while start is not None and links[start] is not None:
            part, start = links[start]
            parts.append(part)
        if start is not None:
            return Segmentation()
        return Segmentation(tuple(parts))

    def _split(self, word: str, start: int, links: list[Link]) -> Link:
        """Find the first split of word[start:], shortest prefix first."""
        min_len = self.min_subword_length
        if len(word) - start < 2 * min_len:
            return None

        last_end = min(len(word) - min_len, start + self.lexicon.max_length)
        for end in range(start + min_len, last_end + 1):
            prefix = word[start:end]
            if not self.lexicon.contains(prefix):
                continue
            for connector in self.connectors.candidates():
                if not word.startswith(connector, end):
                    continue
                tail_start = end + len(connector)
                if len(word) - tail_start < min_len:
                    continue
                if links[tail_start] is not None:
                    return (prefix, tail_start)
        return None

    def _match_final(self, fragment: str) -> Link:
        """Accept a trailing fragment, preferring a normalized lexicon form."""
        if len(fragment) < self.min_subword_length:
            return None
        if len(fragment) > self._max_fragment_length:
            return None
        for candidate in self.normalizer.variants(fragment):
            if len(candidate) < self.min_subword_length:
                continue
            if self.lexicon.contains(candidate):
                return (candidate, None)
        if self.lexicon.contains(fragment):
            return (fragment, None)
        return None
