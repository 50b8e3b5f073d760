"""Assemble the output token sequence for one input token."""

from .models import EmittedToken, Segmentation, Token


class Emitter:
    """Expand a token into the original followed by its subwords.

    Subwords share the original's stream position and offsets, so phrase
    and positional queries downstream keep working.
    """

    def __init__(self, min_subword_length: int = 2, subwords_only: bool = False):
        """Initialize emitter.

        Args:
            min_subword_length: Subwords shorter than this are dropped
            subwords_only: Emit only the subwords when a segmentation exists
        """
        self.min_subword_length = min_subword_length
        self.subwords_only = subwords_only

    def emit(self, token: Token, segmentation: Segmentation) -> list[EmittedToken]:
        """Build the output sequence for a token and its segmentation.

        Args:
            token: The input token
            segmentation: Its decomposition (empty if none was found)

        Returns:
            Emitted tokens in output order
        """
        original = EmittedToken(
            text=token.text,
            is_original=True,
            same_position=token.position_increment == 0,
            start=token.start,
            end=token.end,
        )
        subwords = [
            part
            for part in segmentation
            if part and len(part) >= self.min_subword_length
        ]
        if not subwords:
            return [original]

        output = []
        if not self.subwords_only:
            output.append(original)
        for part in subwords:
            # Without the original, the first subword takes over its position
            same_position = bool(output) or original.same_position
            output.append(
                EmittedToken(
                    text=part,
                    is_original=False,
                    same_position=same_position,
                    start=token.start,
                    end=token.end,
                )
            )
        return output
