"""Connecting elements (Fugenelemente) skipped between two morphemes."""

from typing import Iterable, Optional

from .config import DEFAULT_CONNECTORS


class ConnectorRules:
    """Fixed, ordered set of glue strings.

    The empty string (direct concatenation) is always the first candidate.
    Order only decides which split is tried first.
    """

    def __init__(self, connectors: Optional[Iterable[str]] = None):
        if connectors is None:
            connectors = DEFAULT_CONNECTORS
        ordered = [""]
        for connector in connectors:
            if connector not in ordered:
                ordered.append(connector)
        self._candidates = tuple(ordered)

    def candidates(self) -> tuple[str, ...]:
        """Return the connectors in the order they are tried."""
        return self._candidates

    def __repr__(self) -> str:
        return f"ConnectorRules({list(self._candidates)})"
