"""Small validation helpers shared by the tokenizer, the splitter and the config schema."""

import codecs
from functools import lru_cache
from typing import FrozenSet, Iterable, Tuple, Union

SELF_SYNCHRONIZING = frozenset({"utf-8"})


def char_set(values: Union[str, Iterable[str]], kind: str) -> FrozenSet[str]:
    """
    Normalize a collection of single characters into a frozenset.

    A plain string is read as its characters, so ``" \\n\\t"`` is three separators.

    Raises:
        TypeError: If an element is not a str
        ValueError: If an element is not exactly one character
    """
    if isinstance(values, str):
        values = list(values)
    chars = set()
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{kind} must be a str, got {type(value).__name__}")
        if len(value) != 1:
            raise ValueError(f"{kind} must be a single character, got {value!r}")
        chars.add(value)
    return frozenset(chars)


def quote_marks(values: Iterable[str]) -> Tuple[str, ...]:
    """Validate quote marks: non-empty strings, order kept, duplicates dropped."""
    if isinstance(values, str):
        values = [values]
    marks = []
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"quote must be a str, got {type(value).__name__}")
        if not value:
            raise ValueError("quote must not be empty")
        if value not in marks:
            marks.append(value)
    return tuple(marks)


@lru_cache(maxsize=None)
def check_encoding(encoding: str) -> str:
    """
    Resolve a codec name and make sure byte-level boundary scanning is sound for it.

    Separators are matched on raw bytes, so a separator's byte form must never
    occur inside another character. That holds for UTF-8 and for single-byte
    codecs that keep ASCII in place; stateful and multi-byte codecs such as
    utf-7, shift_jis or gbk are rejected.

    Returns:
        str: Canonical codec name

    Raises:
        ValueError: If the codec is unknown, not a text codec, or unsafe to scan byte-wise
    """
    try:
        name = codecs.lookup(encoding).name
        ascii_probe = " \n".encode(name)
    except LookupError as e:
        raise ValueError(f"Unknown encoding: {encoding!r} ({e})") from e
    if ascii_probe != b" \n":
        raise ValueError(f"Encoding {encoding!r} is not ASCII-compatible")
    if name in SELF_SYNCHRONIZING:
        return name

    # Every byte must decode to one character by itself, ASCII bytes to themselves
    decoder_factory = codecs.getincrementaldecoder(name)
    for byte in range(256):
        decoded = decoder_factory(errors="replace").decode(bytes([byte]), final=False)
        if len(decoded) != 1 or (byte < 0x80 and decoded != chr(byte)):
            raise ValueError(f"Encoding {encoding!r} cannot be split byte-wise; "
                             f"use utf-8 or a single-byte codec")
    return name


def check_error_handler(errors: str) -> str:
    """Make sure ``errors`` names a registered codec error handler."""
    try:
        codecs.lookup_error(errors)
    except LookupError as e:
        raise ValueError(f"Unknown decode error handler: {errors!r}") from e
    return errors
