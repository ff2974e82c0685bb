"""Typed tokens and tokenized strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar, Iterator, Union

from .compare import compare_tokens
from .kinds import SizeRank, TokenKind
from .ordering import Ordering


@dataclass(frozen=True)
class Token:
    """A classified fragment of the input.

    ``raw`` is the surface text (a merged two-word size keeps a single
    space between its words); ``start``/``end`` are offsets into the
    original input and never take part in comparison.
    """

    kind: ClassVar[TokenKind]

    raw: str
    start: int
    end: int

    @property
    def key(self) -> object:
        return self.raw


@dataclass(frozen=True)
class TextToken(Token):
    kind: ClassVar[TokenKind] = TokenKind.TEXT


@dataclass(frozen=True, kw_only=True)
class NumberToken(Token):
    kind: ClassVar[TokenKind] = TokenKind.NUMBER

    value: Union[int, Decimal]

    @property
    def key(self) -> object:
        return self.value


@dataclass(frozen=True, kw_only=True)
class SizeToken(Token):
    kind: ClassVar[TokenKind] = TokenKind.SIZE

    rank: SizeRank

    @property
    def key(self) -> object:
        return self.rank


@dataclass(frozen=True)
class TokenizedString:
    """Immutable token sequence of one input string.

    Equality (``==``) is structural. The ordering operators use the
    natural order, so instances work directly as sort keys.
    """

    source: str
    tokens: tuple[Token, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def compare(self, other: TokenizedString) -> Ordering:
        return compare_tokens(self.tokens, other.tokens)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TokenizedString):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TokenizedString):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TokenizedString):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TokenizedString):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    def normalized(self) -> str:
        """Whitespace-normalized input rebuilt from the token spans."""
        parts: list[str] = []
        prev_end = None
        for token in self.tokens:
            if prev_end is not None and token.start > prev_end:
                parts.append(" ")
            parts.append(token.raw)
            prev_end = token.end
        return "".join(parts)
