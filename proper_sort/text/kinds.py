"""Closed enumerations shared by the tokenizer and the comparators."""

from __future__ import annotations

from enum import IntEnum


class SizeRank(IntEnum):
    """Apparel size designators in ascending order.

    SM, ML and LXL are straddle sizes ("S/M", "M-L", "L/XL") sitting
    strictly between their neighbours.
    """

    XXXXS = 0
    XXXS = 1
    XXS = 2
    XS = 3
    S = 4
    SM = 5
    M = 6
    ML = 7
    L = 8
    LXL = 9
    XL = 10
    XXL = 11
    XXXL = 12
    XXXXL = 13


class TokenKind(IntEnum):
    """Token variants. Declaration order is the cross-kind precedence."""

    NUMBER = 0
    SIZE = 1
    TEXT = 2
