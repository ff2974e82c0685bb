"""Natural-order text utilities.

Public API is kept stable while implementation is organized under:
- kinds / ordering: enums and the ASCII case-insensitive comparator
- numbers / sizes: word classification
- tokens / tokenizer: tokenizer
- compare / natural: token, sequence and string comparators
"""

from .kinds import SizeRank, TokenKind
from .ordering import Ordering, cmp_ascii_ignore_case
from .numbers import classify_number, parse_number
from .sizes import classify_size, parse_size, size_table
from .compare import compare_token, compare_tokens
from .tokens import NumberToken, SizeToken, TextToken, Token, TokenizedString
from .tokenizer import Tokenizer, default_tokenizer, tokenize
from .natural import compare, natural_sort, natural_sorted, sort_key

__all__ = [
    # enums
    "Ordering",
    "SizeRank",
    "TokenKind",
    # classification
    "classify_number",
    "parse_number",
    "classify_size",
    "parse_size",
    "size_table",
    # tokens
    "Token",
    "TextToken",
    "NumberToken",
    "SizeToken",
    "TokenizedString",
    "Tokenizer",
    "default_tokenizer",
    "tokenize",
    # comparison
    "cmp_ascii_ignore_case",
    "compare_token",
    "compare_tokens",
    "compare",
    "sort_key",
    "natural_sorted",
    "natural_sort",
]
