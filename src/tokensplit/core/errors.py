"""Errors raised while tokenizing."""

from typing import Tuple


class DecodeError(ValueError):
    """
    A scanned byte run is not valid text under the tokenizer's encoding.

    The error is local to one token: the tokenizer has already moved past the
    offending run, so calling ``next()`` again resumes with the following run.
    """

    def __init__(self, start: int, end: int, reason: str = ""):
        self.start = start
        self.end = end
        self.reason = reason
        message = f"Cannot decode bytes {start}..{end}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    @property
    def offset_range(self) -> Tuple[int, int]:
        """Byte range ``(start, end)`` of the failed run, end exclusive."""
        return (self.start, self.end)
