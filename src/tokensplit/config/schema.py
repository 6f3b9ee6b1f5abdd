"""Pydantic schemas for tokenizer and splitter settings."""

from pydantic import BaseModel, Field, field_validator
from typing import List

from ..core.util import char_set, check_encoding, check_error_handler, quote_marks
from ..segmenters.sentence import DEFAULT_TERMINATORS
from ..tokenizers.separator import DEFAULT_SEPARATORS


class TokenizerConfig(BaseModel):
    """How a byte buffer is cut into tokens."""
    separators: List[str] = Field(default_factory=lambda: sorted(DEFAULT_SEPARATORS),
                                  description="Single characters delimiting tokens")
    encoding: str = Field(default="utf-8", description="ASCII-compatible codec for token text")
    errors: str = Field(default="strict",
                        description="Codec error handler: strict|replace|backslashreplace|ignore")

    class Config:
        extra = "forbid"  # Strict validation

    @field_validator("separators")
    @classmethod
    def check_separators(cls, value: List[str]) -> List[str]:
        return sorted(char_set(value, "separator"))

    @field_validator("encoding")
    @classmethod
    def check_codec(cls, value: str) -> str:
        return check_encoding(value)

    @field_validator("errors")
    @classmethod
    def check_errors(cls, value: str) -> str:
        return check_error_handler(value)


class SplitterConfig(BaseModel):
    """Complete tokenizer plus sentence splitter configuration."""
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig,
                                       description="Token boundary settings")
    terminators: List[str] = Field(default_factory=lambda: sorted(DEFAULT_TERMINATORS),
                                   description="Characters closing a sentence at the end of a token")
    quotes: List[str] = Field(default_factory=list,
                              description="Quote marks spanning several tokens")
    continue_on_ellipsis: bool = Field(default=False,
                                       description="Do not close sentences on tokens ending in '..'")

    class Config:
        extra = "forbid"  # Strict validation

    @field_validator("terminators")
    @classmethod
    def check_terminators(cls, value: List[str]) -> List[str]:
        return sorted(char_set(value, "terminator"))

    @field_validator("quotes")
    @classmethod
    def check_quotes(cls, value: List[str]) -> List[str]:
        return list(quote_marks(value))
