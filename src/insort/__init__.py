from .index import OrderedIndex
from .maps import SortedMap
from .ordering import Comparator, compare_locale, compare_natural, compare_str, reverse
from .record import SortedRecord
from .sets import SortedSet

__all__ = [
    "SortedMap",
    "SortedSet",
    "SortedRecord",
    "OrderedIndex",
    "Comparator",
    "compare_str",
    "compare_natural",
    "compare_locale",
    "reverse",
]
