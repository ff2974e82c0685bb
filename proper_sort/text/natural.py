"""Natural sort entry points (string comparator and sort helpers)."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

from .ordering import Ordering
from .tokenizer import default_tokenizer, tokenize
from .tokens import TokenizedString


def compare(a: str, b: str) -> Ordering:
    """Compare two strings in natural order.

    Example:
        >>> compare("item 90", "item 100")
        <Ordering.LESS: -1>
    """
    return default_tokenizer().compare(a, b)


def sort_key(text: str) -> TokenizedString:
    """``key=`` function for ``sorted``/``list.sort``."""
    return tokenize(text)


def _make_key(key: Optional[Callable[[Any], str]]) -> Callable[[Any], TokenizedString]:
    if key is None:
        return sort_key
    return lambda item: sort_key(key(item))


def natural_sorted(items: Iterable[Any], key: Optional[Callable[[Any], str]] = None,
                   reverse: bool = False) -> List[Any]:
    """Return a new list sorted in natural order.

    Args:
        items: strings, or arbitrary items when ``key`` is given
        key: function producing the string to sort each item by
        reverse: descending order

    Example:
        >>> natural_sorted(["Crank 180mm", "Crank 172.5mm", "Crank 170mm"])
        ['Crank 170mm', 'Crank 172.5mm', 'Crank 180mm']
    """
    return sorted(items, key=_make_key(key), reverse=reverse)


def natural_sort(items: List[Any], key: Optional[Callable[[Any], str]] = None,
                 reverse: bool = False) -> None:
    """Sort a list in place in natural order. See ``natural_sorted``."""
    items.sort(key=_make_key(key), reverse=reverse)
