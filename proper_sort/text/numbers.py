"""Numeric literal parsing for the tokenizer."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterator, Optional, Union

from proper_sort.core.config import NumericMode
from proper_sort.core.exceptions import NotANumberError

Number = Union[int, Decimal]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+(?:,[0-9]+)*(?:\.[0-9]+)?")

# 단어 내부 분할: 숫자 런 / 비숫자 런
_INTEGER_RUNS_RE = re.compile(r"[0-9]+|[^0-9]+")
_DECIMAL_RUNS_RE = re.compile(r"[0-9]+(?:,[0-9]+)*(?:\.[0-9]+)?|[^0-9]+")


def parse_number(word: str, mode: NumericMode) -> Number:
    """단어 전체를 숫자로 파싱.

    - integer: 부호 + ASCII 숫자, int64 범위
    - decimal: 내부 ',' 구분자(제거) + 내부 '.' 1개 허용

    Raises:
        NotANumberError: 현재 모드에서 숫자가 아닐 때
    """
    if mode is NumericMode.INTEGER:
        if not _INTEGER_RE.fullmatch(word):
            raise NotANumberError(word, mode.value)
        value = int(word)
        if not INT64_MIN <= value <= INT64_MAX:
            raise NotANumberError(word, mode.value, {"word": word, "reason": "out of int64 range"})
        return value

    if not _DECIMAL_RE.fullmatch(word):
        raise NotANumberError(word, mode.value)
    return Decimal(word.replace(",", ""))


def classify_number(word: str, mode: NumericMode) -> Optional[Number]:
    """숫자면 값, 아니면 None."""
    try:
        return parse_number(word, mode)
    except NotANumberError:
        return None


def numeric_runs(word: str, mode: NumericMode) -> Iterator[tuple[int, str]]:
    """Split a word into maximal digit / non-digit runs.

    Yields ``(offset, run)`` pairs in order. In decimal mode a digit run
    also absorbs grouping commas and one decimal point that are followed
    by a digit, so "172.5mm" gives "172.5" and "mm".
    """
    pattern = _INTEGER_RUNS_RE if mode is NumericMode.INTEGER else _DECIMAL_RUNS_RE
    for match in pattern.finditer(word):
        yield match.start(), match.group()
