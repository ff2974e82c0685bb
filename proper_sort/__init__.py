"""Natural ordering for product titles with numbers, units and sizes.

Example:
    >>> from proper_sort import natural_sorted
    >>> natural_sorted(["T-Shirt L Black", "T-Shirt XS Black", "T-Shirt Medium Black"])
    ['T-Shirt XS Black', 'T-Shirt Medium Black', 'T-Shirt L Black']
"""

from proper_sort.core.config import NumericMode
from proper_sort.text import (
    NumberToken,
    Ordering,
    SizeRank,
    SizeToken,
    TextToken,
    Token,
    TokenizedString,
    Tokenizer,
    TokenKind,
    classify_size,
    cmp_ascii_ignore_case,
    compare,
    natural_sort,
    natural_sorted,
    sort_key,
    tokenize,
)

__version__ = "1.0.0"

__all__ = [
    "compare",
    "cmp_ascii_ignore_case",
    "tokenize",
    "classify_size",
    "sort_key",
    "natural_sorted",
    "natural_sort",
    "Tokenizer",
    "NumericMode",
    "Ordering",
    "SizeRank",
    "TokenKind",
    "Token",
    "TextToken",
    "NumberToken",
    "SizeToken",
    "TokenizedString",
]
