"""Suffix rewrites mapping an inflected trailing fragment to its stem."""

from typing import Iterable, Iterator, Optional

from .config import DEFAULT_SUFFIX_RULES, ConfigurationError


class SuffixNormalizer:
    """Apply one rewrite from an ordered (suffix, replacement) table.

    Examples with the default table:
        "kanzleien" -> "kanzlei"   (drop plural "-en")
        "gekostet"  -> "gekosten"  ("-et" rewritten to "-en")
    """

    def __init__(
        self,
        rules: Optional[Iterable[tuple[str, str]]] = None,
        min_length: int = 1,
    ):
        """Initialize normalizer.

        Args:
            rules: Ordered (suffix, replacement) pairs
            min_length: Minimum length a rewritten fragment must keep

        Raises:
            ConfigurationError: If a rule has an empty suffix
        """
        if rules is None:
            rules = DEFAULT_SUFFIX_RULES
        parsed = []
        for rule in rules:
            try:
                suffix, replacement = rule
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"Suffix rule must be a (suffix, replacement) pair: {rule!r}"
                )
            if not suffix:
                raise ConfigurationError("Suffix rule needs a non-empty suffix")
            parsed.append((suffix, replacement))
        self.rules = tuple(parsed)
        self.min_length = min_length

    def variants(self, fragment: str) -> Iterator[str]:
        """Yield each single-rule rewrite of a fragment in table order."""
        for suffix, replacement in self.rules:
            if len(fragment) <= len(suffix) or not fragment.endswith(suffix):
                continue
            candidate = fragment[: -len(suffix)] + replacement
            if len(candidate) >= self.min_length and candidate != fragment:
                yield candidate

    def normalize(self, fragment: str) -> str:
        """Return the first rewrite of a fragment, or the fragment unchanged."""
        return next(self.variants(fragment), fragment)
