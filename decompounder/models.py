"""Data models for the decompounding engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """A token from the host token stream."""

    text: str
    start: int = 0
    end: int = 0
    position_increment: int = 1


@dataclass(frozen=True)
class Segmentation:
    """Ordered subwords found for one input token.

    An empty segmentation means no decomposition was found and the token
    stays unsplit.
    """

    parts: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self):
        return iter(self.parts)


@dataclass(frozen=True)
class EmittedToken:
    """A token produced by the emitter."""

    text: str
    is_original: bool
    same_position: bool  # True for subwords sharing the original's position
    start: int = 0
    end: int = 0

    @property
    def position_increment(self) -> int:
        return 0 if self.same_position else 1

    def to_row(self) -> dict:
        """Convert to a flat dictionary for CSV output."""
        return {
            "Token": self.text,
            "Is_Original": self.is_original,
            "Same_Position": self.same_position,
            "Start_Index": self.start,
            "End_Index": self.end,
        }
