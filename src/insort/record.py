from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterator, Optional

from .index import OrderedIndex, unindex
from .ordering import Comparator, compare_str

logger = logging.getLogger(__name__)

# mangled slot names, so ordinary field names never hit the slots
_FIELDS = "_SortedRecord__fields"
_INDEX = "_SortedRecord__index"
_CHECK = "_SortedRecord__check"


def _check_name(name: object) -> str:
    if not isinstance(name, str):
        raise TypeError(f"field names must be str, not {type(name).__name__}")
    return name


def _rebuild(cls: type, fields: dict, cmp: Comparator, check: bool) -> "SortedRecord":
    return cls(fields, cmp=cmp, check=check)


class SortedRecord(MutableMapping):
    """Property bag whose fields enumerate in comparator order.

    Fields are written, read and deleted with plain attribute syntax::

        rec = SortedRecord({"b": 1, "a": 2})
        rec.c = 3
        del rec.a
        list(rec)  # ['b', 'c']

    Item syntax (``rec["some-name"]``) reaches the same storage and is the
    only way to read a field whose name is shadowed by a method such as
    ``keys``. Deleting a missing field is a no-op either way.

    ``json.dumps`` does not accept the record itself; serialize
    ``rec.to_dict()``, an insertion-ordered ``dict`` in index order.
    ``check=True`` runs ``verify()`` after every field added or removed.
    """

    __slots__ = ("__fields", "__index", "__check")

    def __init__(self, src: Optional[object] = None, *, cmp: Comparator = compare_str, check: bool = False):
        if src is None:
            items: Any = ()
        elif isinstance(src, Mapping):
            items = src.items()
        else:
            items = vars(src).items()
        fields = {_check_name(name): value for name, value in items}
        object.__setattr__(self, _FIELDS, fields)
        object.__setattr__(self, _INDEX, OrderedIndex(cmp, fields))
        object.__setattr__(self, _CHECK, check)
        logger.debug("built sorted record with %d fields", len(fields))
        if check:
            self.verify()

    @property
    def cmp(self) -> Comparator:
        return self.__index.cmp

    def to_dict(self) -> dict:
        fields = self.__fields
        return {name: fields[name] for name in self.__index}

    def verify(self) -> None:
        self.__index.verify(self.__fields)

    def clear(self) -> None:
        self.__fields.clear()
        self.__index.clear()

    def copy(self) -> "SortedRecord":
        return type(self)(self, cmp=self.cmp, check=self.__check)

    def __getattr__(self, name: str) -> Any:
        # only reached when regular lookup fails; avoid recursing while unset
        try:
            return object.__getattribute__(self, _FIELDS)[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        del self[name]

    def __getitem__(self, name: str) -> Any:
        return self.__fields[name]

    def __setitem__(self, name: str, value: Any) -> None:
        fields = self.__fields
        is_new = _check_name(name) not in fields
        fields[name] = value
        if is_new:
            self.__index.insert(name)
            if self.__check:
                self.verify()

    def __delitem__(self, name: str) -> None:
        fields = self.__fields
        if name in fields:
            del fields[name]
            unindex(self.__index, name)
            if self.__check:
                self.verify()

    def __contains__(self, name: object) -> bool:
        return name in self.__fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.__index)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self.__index)

    def __len__(self) -> int:
        return len(self.__fields)

    def __dir__(self) -> list[str]:
        return [*super().__dir__(), *self.__index]

    def __reduce__(self):
        return _rebuild, (type(self), self.to_dict(), self.cmp, self.__check)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
