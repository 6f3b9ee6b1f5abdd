"""Protocol interfaces for dependency injection from the caller."""

from typing import Any, Iterator, Protocol


class TokenSource(Protocol):
    """Anything that yields text tokens lazily. A Tokenizer, a list of str, a generator..."""

    def __iter__(self) -> Iterator[str]:
        """
        Return an iterator over text tokens.

        Returns:
            Iterator[str]: Non-empty tokens in input order
        """
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...


class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
