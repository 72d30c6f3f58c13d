from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Iterable, Iterator, Optional

from .index import OrderedIndex, unindex
from .ordering import Comparator, compare_str

logger = logging.getLogger(__name__)


def _rebuild(cls: type, entries: list, cmp: Comparator, check: bool) -> "SortedMap":
    return cls(entries, cmp=cmp, check=check)


class SortedMap(MutableMapping):
    """Hash map whose iteration order follows a comparator over its keys.

    Lookups go straight to a private ``dict``; an ``OrderedIndex`` over the
    keys is updated whenever a key is added or dropped, so iteration never
    sorts. Overwriting the value of an existing key leaves the index alone.

    ``entries()``, ``keys()`` and ``values()`` return a fresh one-shot
    generator per call. Mutating the map while one of them is being consumed
    is undefined.
    """

    def __init__(
        self,
        entries: Mapping | Iterable[tuple[Any, Any]] = (),
        *,
        cmp: Comparator = compare_str,
        check: bool = False,
    ):
        if isinstance(entries, Mapping):
            entries = entries.items()
        store: dict = {}
        for key, value in entries:
            store[key] = value
        self._store = store
        self._index: OrderedIndex = OrderedIndex(cmp, store)
        self._check = check
        logger.debug("built sorted map with %d keys", len(store))
        if check:
            self.verify()

    @property
    def cmp(self) -> Comparator:
        return self._index.cmp

    @property
    def size(self) -> int:
        return len(self._store)

    def set(self, key, value) -> "SortedMap":
        is_new = key not in self._store
        self._store[key] = value
        if is_new:
            self._index.insert(key)
            if self._check:
                self.verify()
        return self

    def has(self, key) -> bool:
        return key in self._store

    def get(self, key, default=None):
        return self._store.get(key, default)

    def delete(self, key) -> bool:
        if key not in self._store:
            return False
        del self._store[key]
        unindex(self._index, key)
        if self._check:
            self.verify()
        return True

    def clear(self) -> None:
        self._store.clear()
        self._index.clear()

    def entries(self) -> Iterator[tuple[Any, Any]]:
        store = self._store
        for key in self._index:
            yield key, store[key]

    def keys(self) -> Iterator[Any]:
        yield from self._index

    def values(self) -> Iterator[Any]:
        store = self._store
        for key in self._index:
            yield store[key]

    def for_each(self, visitor: Callable[[Any, Any, "SortedMap"], Optional[object]]) -> None:
        for key in self._index:
            visitor(self._store[key], key, self)

    def verify(self) -> None:
        self._index.verify(self._store)

    def copy(self) -> "SortedMap":
        return type(self)(self.entries(), cmp=self.cmp, check=self._check)

    def __getitem__(self, key):
        return self._store[key]

    def __setitem__(self, key, value) -> None:
        self.set(key, value)

    def __delitem__(self, key) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __contains__(self, key) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[Any]:
        return iter(self._index)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._index)

    def __len__(self) -> int:
        return len(self._store)

    def __reduce__(self):
        return _rebuild, (type(self), list(self.entries()), self.cmp, self._check)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.entries())!r})"
