"""Token and token-sequence comparators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .kinds import TokenKind
from .ordering import Ordering, cmp_ascii_ignore_case, cmp_values

if TYPE_CHECKING:
    from .tokens import Token


def compare_token(a: Token, b: Token) -> Ordering:
    """토큰 1개 비교.

    - 같은 종류: Text는 대소문자 무시, Number는 값, Size는 rank
    - 다른 종류: Number < Size < Text (종류 우선순위)
    """
    if a.kind is not b.kind:
        return cmp_values(a.kind, b.kind)

    if a.kind is TokenKind.TEXT:
        return cmp_ascii_ignore_case(a.raw, b.raw)
    if a.kind is TokenKind.NUMBER:
        return cmp_values(a.value, b.value)
    if a.kind is TokenKind.SIZE:
        return cmp_values(a.rank, b.rank)

    raise TypeError(f"unsupported token kind: {a.kind!r}")


def compare_tokens(a: Sequence[Token], b: Sequence[Token]) -> Ordering:
    """Compare token sequences position by position.

    The first non-equal pair decides; when one sequence is a prefix of
    the other, the shorter one sorts first.
    """
    for left, right in zip(a, b):
        ordering = compare_token(left, right)
        if ordering is not Ordering.EQUAL:
            return ordering

    return cmp_values(len(a), len(b))
