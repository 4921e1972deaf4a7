from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .sorting import _sort_key, _accessor

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._get_data()!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """chainable wrapper over the funqy free functions"""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.comb = CombinatoricsAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered enumerable class ---

SortLevel = Tuple[Callable[[T], Any], Optional[Comparator[Any]], bool]


class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, data_func: Callable[[], List[T]], sort_keys: List[SortLevel]):
        super().__init__(data_func)
        self._original_data_func = data_func
        self._sort_keys = sort_keys
        # reset cache flags after parent init
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """overrides base to apply all sorts at once using stable sort."""
        if not self._is_cached:
            data = list(self._original_data_func())
            # python's sort is stable, so we sort from the last key to the first
            for key_selector, comp, is_descending in reversed(self._sort_keys):
                key = _sort_key(comp)
                data = sorted(data, key=lambda item: key(key_selector(item)), reverse=is_descending)
            self._cached_result = data
            self._is_cached = True
        return self._cached_result

    def _then(self, key_selector, comp, descending) -> 'OrderedEnumerable[T]':
        new_keys = self._sort_keys + [(_accessor(key_selector), comp, descending)]
        return OrderedEnumerable(self._original_data_func, new_keys)

    def then_by(self, key_selector: Union[str, KeySelector[T, K]],
                comp: Optional[Comparator[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort ascending (comp is a less-than comparator over keys)"""
        return self._then(key_selector, comp, False)

    def then_by_descending(self, key_selector: Union[str, KeySelector[T, K]],
                           comp: Optional[Comparator[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return self._then(key_selector, comp, True)

    def sorted_index(self, item: T) -> int:
        """1-based position where item would be inserted to keep this ordering"""
        data = self._get_data()

        def before(a, b) -> bool:
            for key_selector, comp, is_descending in self._sort_keys:
                key = _sort_key(comp)
                ka, kb = key(key_selector(a)), key(key_selector(b))
                if ka == kb: continue
                return (kb < ka) if is_descending else (ka < kb)
            return False

        for i, value in enumerate(data, 1):
            if not before(value, item): return i
        return len(data) + 1
