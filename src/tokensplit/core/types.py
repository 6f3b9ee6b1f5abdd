"""Result structures produced by the splitters."""

from typing import Iterable, Tuple


class Sentence(str):
    """
    Sentence text: its tokens joined with a single space.

    Behaves as a plain ``str`` (comparison, hashing, slicing) and keeps the
    tokens it was built from, so tokens containing spaces stay recoverable.
    ``terminated`` is False when the sentence was closed by end of input; it
    does not take part in equality.
    """

    def __new__(cls, tokens: Iterable[str], terminated: bool = True) -> "Sentence":
        tokens = tuple(tokens)
        sentence = super().__new__(cls, " ".join(tokens))
        sentence._tokens = tokens
        sentence._terminated = terminated
        return sentence

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Tokens in input order."""
        return self._tokens

    @property
    def terminated(self) -> bool:
        """True when closed by a terminator or a closing quote."""
        return self._terminated

    @property
    def text(self) -> str:
        """The sentence as a plain str."""
        return str.__str__(self)

    def __getnewargs__(self):
        return (self._tokens, self._terminated)

    def __repr__(self) -> str:
        return f"Sentence({self.text!r}, terminated={self._terminated})"
