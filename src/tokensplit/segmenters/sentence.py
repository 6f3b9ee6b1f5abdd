"""Sentence splitter grouping a token stream on terminal punctuation."""

from typing import TYPE_CHECKING, Iterable, List, Optional

from ..core.abc import Logger, Meter, TokenSource
from ..core.types import Sentence
from ..core.util import char_set, quote_marks

if TYPE_CHECKING:
    from ..config.schema import SplitterConfig

DEFAULT_TERMINATORS = frozenset(".!?")


class SentenceSplitter:
    """
    Pull-based iterator turning tokens into Sentence strings.

    A sentence closes on the first token whose last character is a terminator.
    Tokens are never re-read or re-classified once consumed. Works over any
    token source, not only a Tokenizer.
    """

    def __init__(self, token_source: TokenSource, terminators: Iterable[str] = DEFAULT_TERMINATORS, *,
                 quotes: Iterable[str] = (), continue_on_ellipsis: bool = False,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize splitter on top of a token source.

        Args:
            token_source: Iterable of text tokens, consumed lazily
            terminators: Characters closing a sentence when they end a token
            quotes: Quote marks; a token starting with one opens a quoted span
                that only a token ending with the same mark closes
            continue_on_ellipsis: Keep going past tokens ending in ".."
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.terminators = char_set(terminators, "terminator")
        self.quotes = quote_marks(quotes)
        self.continue_on_ellipsis = continue_on_ellipsis
        self.log = logger
        self.meter = meter

        self._tokens = iter(token_source)
        self._pending: List[str] = []
        self._quote: Optional[str] = None
        self._exhausted = False

    @classmethod
    def from_config(cls, token_source: TokenSource, config: "SplitterConfig", **kwargs) -> "SentenceSplitter":
        """Build a splitter from a validated SplitterConfig."""
        return cls(token_source, config.terminators, quotes=config.quotes,
                   continue_on_ellipsis=config.continue_on_ellipsis, **kwargs)

    @property
    def pending(self) -> int:
        """Number of tokens accumulated for the sentence in progress."""
        return len(self._pending)

    def __iter__(self) -> "SentenceSplitter":
        return self

    def __next__(self) -> Sentence:
        if self._exhausted:
            raise StopIteration
        while True:
            # Source errors propagate as-is; pending tokens survive for the next call
            try:
                token = next(self._tokens)
            except StopIteration:
                self._exhausted = True
                if self._pending:
                    return self._emit(terminated=False)
                raise
            self._pending.append(token)
            if self._closes(token):
                return self._emit(terminated=True)

    def _closes(self, token: str) -> bool:
        if self._quote is not None:
            return token.endswith(self._quote)

        for quote in self.quotes:
            if token.startswith(quote):
                if len(token) > len(quote) and token.endswith(quote):
                    return True
                self._quote = quote
                return False

        if self.continue_on_ellipsis and token.endswith(".."):
            return False
        return token[-1:] in self.terminators

    def _emit(self, terminated: bool) -> Sentence:
        sentence = Sentence(self._pending, terminated=terminated)
        self._pending.clear()
        self._quote = None

        if self.meter:
            self.meter.inc("tokensplit.sentences", terminated=str(terminated).lower())
            self.meter.observe("tokensplit.sentence_tokens", len(sentence.tokens))
        if self.log:
            self.log.info("sentence_emitted", tokens=len(sentence.tokens), terminated=terminated)
        return sentence
