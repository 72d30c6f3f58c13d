from __future__ import annotations

import logging
from collections.abc import MutableSet
from typing import Any, Callable, Iterable, Iterator, Optional

from .index import OrderedIndex, unindex
from .ordering import Comparator, compare_str

logger = logging.getLogger(__name__)


def _rebuild(cls: type, values: list, cmp: Comparator, check: bool) -> "SortedSet":
    return cls(values, cmp=cmp, check=check)


class SortedSet(MutableSet):
    """Hash set iterated in comparator order.

    Same layout as ``SortedMap``: a private ``set`` answers membership and an
    ``OrderedIndex`` over the members drives iteration.
    """

    def __init__(self, values: Iterable[Any] = (), *, cmp: Comparator = compare_str, check: bool = False):
        store: set = set()
        members: list = []
        for value in values:
            if value not in store:
                store.add(value)
                members.append(value)
        self._store = store
        self._index: OrderedIndex = OrderedIndex(cmp, members)
        self._check = check
        logger.debug("built sorted set with %d members", len(store))
        if check:
            self.verify()

    def _from_iterable(self, it: Iterable[Any]) -> "SortedSet":
        # set algebra keeps the comparator of the left operand
        return type(self)(it, cmp=self.cmp, check=self._check)

    @property
    def cmp(self) -> Comparator:
        return self._index.cmp

    @property
    def size(self) -> int:
        return len(self._store)

    def add(self, value) -> "SortedSet":
        if value not in self._store:
            self._store.add(value)
            self._index.insert(value)
            if self._check:
                self.verify()
        return self

    def has(self, value) -> bool:
        return value in self._store

    def delete(self, value) -> bool:
        if value not in self._store:
            return False
        self._store.remove(value)
        unindex(self._index, value)
        if self._check:
            self.verify()
        return True

    def discard(self, value) -> None:
        self.delete(value)

    def clear(self) -> None:
        self._store.clear()
        self._index.clear()

    def values(self) -> Iterator[Any]:
        yield from self._index

    keys = values

    def entries(self) -> Iterator[tuple[Any, Any]]:
        for value in self._index:
            yield value, value

    def for_each(self, visitor: Callable[[Any, Any, "SortedSet"], Optional[object]]) -> None:
        for value in self._index:
            visitor(value, value, self)

    def verify(self) -> None:
        self._index.verify(self._store)

    def copy(self) -> "SortedSet":
        return self._from_iterable(self._index)

    def __contains__(self, value) -> bool:
        return value in self._store

    def __iter__(self) -> Iterator[Any]:
        return iter(self._index)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._index)

    def __len__(self) -> int:
        return len(self._store)

    def __reduce__(self):
        return _rebuild, (type(self), list(self._index), self.cmp, self._check)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._index)!r})"
