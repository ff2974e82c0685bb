"""Three-way ordering and the ASCII case-insensitive string comparator."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class Ordering(IntEnum):
    """Result of a three-way comparison.

    Values follow the ``cmp`` convention so results can be handed to
    ``functools.cmp_to_key`` directly.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


def cmp_values(a: Any, b: Any) -> Ordering:
    """Compare two mutually orderable values."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def _is_ascii_upper(code: int) -> bool:
    return 65 <= code <= 90


def _is_ascii_lower(code: int) -> bool:
    return 97 <= code <= 122


def cmp_ascii_ignore_case(a: str, b: str) -> Ordering:
    """ASCII 대소문자를 무시하고 비교합니다.

    - 대소문자만 다른 글자는 같은 글자로 취급
    - 그 외 첫 불일치는 코드포인트 비교로 즉시 결정
    - 접두사 관계면 짧은 쪽이 먼저
    - 대소문자 차이만 남으면 원문 비교 ("A" < "a")

    예: cmp_ascii_ignore_case("string one", "String One") -> GREATER
    """
    if a == b:
        return Ordering.EQUAL

    # str 코드포인트 순서 == UTF-8 바이트 순서
    for ca, cb in zip(a, b):
        if ca == cb:
            continue
        oa, ob = ord(ca), ord(cb)
        if _is_ascii_upper(oa) and _is_ascii_lower(ob):
            ob -= 32
        elif _is_ascii_lower(oa) and _is_ascii_upper(ob):
            ob += 32
        if oa != ob:
            return cmp_values(oa, ob)

    if len(a) != len(b):
        return cmp_values(len(a), len(b))

    return cmp_values(a, b)
