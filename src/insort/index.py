from __future__ import annotations

import logging
from bisect import bisect_left
from functools import cmp_to_key
from typing import Callable, Collection, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class OrderedIndex(Generic[T]):
    """Dense list of distinct keys kept sorted under a comparator.

    The index never checks membership itself: the owning container consults
    its hash store first and only calls ``insert`` for keys it just added and
    ``remove`` for keys it just dropped. Among keys that compare equal a new
    key lands in front of the existing ones (leftmost match).
    """

    def __init__(self, cmp: Callable[[T, T], int], keys: Iterable[T] = ()):
        self._cmp = cmp
        self._key = cmp_to_key(cmp)
        self._items: list[T] = sorted(keys, key=self._key)
        self._keys: list[object] = [self._key(item) for item in self._items]

    @property
    def cmp(self) -> Callable[[T, T], int]:
        return self._cmp

    def locate(self, item: T) -> int:
        # lower bound: every element before the result compares < item
        return bisect_left(self._keys, self._key(item))

    def insert(self, item: T) -> int:
        key_item = self._key(item)
        index = bisect_left(self._keys, key_item)
        self._items.insert(index, item)
        self._keys.insert(index, key_item)
        return index

    def remove(self, item: T) -> bool:
        index = self.locate(item)
        # walk the run of comparator-equal keys to find this exact one
        while index < len(self._items) and self._cmp(self._items[index], item) == 0:
            existing = self._items[index]
            if existing is item or existing == item:
                del self._items[index]
                del self._keys[index]
                return True
            index += 1
        return False

    def clear(self) -> None:
        self._items.clear()
        self._keys.clear()

    def verify(self, store: Collection[T]) -> None:
        if len(self._items) != len(store):
            raise ValueError(f"index holds {len(self._items)} keys but store holds {len(store)}")
        for pos in range(len(self._items) - 1):
            one, other = self._items[pos], self._items[pos + 1]
            if self._cmp(one, other) > 0:
                raise ValueError(f"index out of order at position {pos}: {one!r} > {other!r}")
        seen = set()
        for item in self._items:
            if item in seen:
                raise ValueError(f"duplicate key in index: {item!r}")
            if item not in store:
                raise ValueError(f"index key missing from store: {item!r}")
            seen.add(item)

    def __getitem__(self, pos: int) -> T:
        return self._items[pos]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"OrderedIndex({self._items!r})"


def unindex(index: OrderedIndex[T], item: T) -> None:
    if not index.remove(item):
        logger.warning("key %r held by the store was not found in the index; comparator may be inconsistent", item)
