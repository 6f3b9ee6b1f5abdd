"""
tokensplit - lazy separator tokenizer and sentence splitter.

Cuts an in-memory byte buffer into decoded text tokens one run at a time,
and groups any token stream into sentences on terminal punctuation.
"""

from typing import Iterable, Union

from .core.errors import DecodeError
from .core.types import Sentence
from .segmenters.sentence import DEFAULT_TERMINATORS, SentenceSplitter
from .tokenizers.separator import DEFAULT_SEPARATORS, Tokenizer

__version__ = "0.1.0"


def tokenize(data: Union[str, bytes, bytearray, memoryview],
             separators: Union[str, Iterable[str]] = DEFAULT_SEPARATORS, **kwargs) -> Tokenizer:
    """Return a Tokenizer over ``data``; str input is encoded first."""
    if isinstance(data, str):
        return Tokenizer.from_text(data, separators, **kwargs)
    return Tokenizer(data, separators, **kwargs)


def split_sentences(data: Union[str, bytes, bytearray, memoryview],
                    separators: Union[str, Iterable[str]] = DEFAULT_SEPARATORS,
                    terminators: Iterable[str] = DEFAULT_TERMINATORS, *,
                    encoding: str = "utf-8", errors: str = "strict", **kwargs) -> SentenceSplitter:
    """Return a SentenceSplitter over ``tokenize(data, separators)``."""
    tokens = tokenize(data, separators, encoding=encoding, errors=errors,
                      logger=kwargs.get("logger"), meter=kwargs.get("meter"))
    return SentenceSplitter(tokens, terminators, **kwargs)


__all__ = [
    "DEFAULT_SEPARATORS",
    "DEFAULT_TERMINATORS",
    "DecodeError",
    "Sentence",
    "SentenceSplitter",
    "Tokenizer",
    "split_sentences",
    "tokenize",
]
