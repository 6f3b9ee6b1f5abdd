"""Lazy tokenizer splitting a byte buffer on a set of separator characters."""

import re
from typing import TYPE_CHECKING, Iterable, Optional, Union

from ..core.abc import Logger, Meter
from ..core.errors import DecodeError
from ..core.util import char_set, check_encoding, check_error_handler

if TYPE_CHECKING:
    from ..config.schema import TokenizerConfig

DEFAULT_SEPARATORS = frozenset(" \n\t\r")


class Tokenizer:
    """
    One-pass iterator over the tokens of an in-memory byte buffer.

    The buffer is scanned from a cursor: each step skips a run of separator
    bytes, then takes the following run of non-separator bytes and decodes it.
    Nothing beyond the current run is read or copied. Tokens are owned ``str``
    objects and stay valid after the buffer is released.
    """

    def __init__(self, buffer: Union[bytes, bytearray, memoryview],
                 separators: Union[str, Iterable[str]] = DEFAULT_SEPARATORS, *,
                 encoding: str = "utf-8", errors: str = "strict",
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize tokenizer over a borrowed buffer.

        Args:
            buffer: Input bytes; never modified
            separators: Separator characters, a str or any iterable of 1-char strs
            encoding: utf-8 or a single-byte codec keeping ASCII in place
            errors: Codec error handler; "strict" raises DecodeError per bad run
            logger: Optional structured logger
            meter: Optional metrics collector

        Raises:
            TypeError: If buffer is a str or a separator is not a str
            ValueError: On invalid separators, encoding or error handler
        """
        if isinstance(buffer, str):
            raise TypeError("Tokenizer needs bytes; use Tokenizer.from_text for str input")
        self.separators = char_set(separators, "separator")
        self.encoding = check_encoding(encoding)
        self.errors = check_error_handler(errors)
        self.log = logger
        self.meter = meter

        self._view = memoryview(buffer).cast("B")
        self._length = len(self._view)
        self._cursor = 0
        self._separator_run, self._separator = self._compile(self.separators, self.encoding)

    @classmethod
    def from_text(cls, text: str, separators: Union[str, Iterable[str]] = DEFAULT_SEPARATORS,
                  **kwargs) -> "Tokenizer":
        """Tokenize a str by encoding it first with the chosen encoding."""
        encoding = kwargs.get("encoding", "utf-8")
        return cls(text.encode(check_encoding(encoding)), separators, **kwargs)

    @classmethod
    def from_config(cls, buffer: Union[bytes, bytearray, memoryview],
                    config: "TokenizerConfig", **kwargs) -> "Tokenizer":
        """Build a tokenizer from a validated TokenizerConfig."""
        return cls(buffer, config.separators, encoding=config.encoding,
                   errors=config.errors, **kwargs)

    @staticmethod
    def _compile(separators, encoding):
        if not separators:
            return None, None
        try:
            encoded = {sep.encode(encoding) for sep in separators}
        except UnicodeEncodeError as e:
            raise ValueError(f"Separator cannot be encoded with {encoding}: {e}") from e
        # Longest first so multi-byte separators win over any prefix
        alternatives = b"|".join(re.escape(sep) for sep in sorted(encoded, key=len, reverse=True))
        return re.compile(b"(?:" + alternatives + b")+"), re.compile(alternatives)

    @property
    def position(self) -> int:
        """Byte offset of the next unscanned position."""
        return self._cursor

    @property
    def remaining(self) -> int:
        """Number of bytes not yet scanned."""
        return self._length - self._cursor

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> str:
        while True:
            start = self._skip_separators(self._cursor)
            if start >= self._length:
                self._cursor = self._length
                raise StopIteration
            end = self._find_separator(start)
            self._cursor = end

            try:
                token = str(self._view[start:end], self.encoding, self.errors)
            except UnicodeDecodeError as e:
                if self.meter:
                    self.meter.inc("tokensplit.decode_errors")
                if self.log:
                    self.log.warn("decode_error", start=start, end=end, reason=e.reason)
                raise DecodeError(start, end, e.reason) from e

            # An "ignore" handler may decode a run to nothing
            if token:
                if self.meter:
                    self.meter.inc("tokensplit.tokens")
                return token

    def _skip_separators(self, pos: int) -> int:
        if self._separator_run is None:
            return pos
        match = self._separator_run.match(self._view, pos)
        return match.end() if match else pos

    def _find_separator(self, pos: int) -> int:
        if self._separator is None:
            return self._length
        match = self._separator.search(self._view, pos)
        return match.start() if match else self._length

    def __repr__(self) -> str:
        return (f"Tokenizer(position={self._cursor}, length={self._length}, "
                f"separators={sorted(self.separators)!r}, encoding={self.encoding!r})")
