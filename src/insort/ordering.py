from __future__ import annotations

import locale
from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


def _sign(one, other) -> int:
    if one < other:
        return -1
    if one > other:
        return 1
    return 0


def compare_str(one: Any, other: Any) -> int:
    # lexicographic on the string form: 10 sorts before 2
    return _sign(str(one), str(other))


def compare_natural(one: Any, other: Any) -> int:
    return _sign(one, other)


def compare_locale(one: Any, other: Any) -> int:
    """Collate the string forms with the current LC_COLLATE setting."""
    return _sign(locale.strcoll(str(one), str(other)), 0)


def reverse(cmp: Comparator) -> Comparator:
    def reversed_cmp(one: Any, other: Any) -> int:
        return cmp(other, one)

    reversed_cmp.__name__ = f"reversed_{getattr(cmp, '__name__', 'cmp')}"
    return reversed_cmp
