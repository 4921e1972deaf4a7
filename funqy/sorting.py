"""
ordering with less-than comparators.

a comparator answers "should a come before b"; `_sort_key` turns one into a
python sort key, and python's sort is stable, so ties keep their input order.
"""
from __future__ import annotations
from functools import cmp_to_key
from .types import *
from .predicates import less, is_mapping
from .traversal import pairs, values_of, _require_sequence


def _sort_key(comp: Optional[Comparator[Any]] = None) -> Callable[[Any], Any]:
    comp = comp or less

    def compare(a, b) -> int:
        if comp(a, b): return -1
        if comp(b, a): return 1
        return 0

    return cmp_to_key(compare)


def _accessor(transform: Union[None, str, Callable[[T], Any]]) -> Callable[[T], Any]:
    if transform is None: return lambda item: item
    if isinstance(transform, str):
        return lambda item: item[transform] if is_mapping(item) else getattr(item, transform)
    return transform


def sort(array: List[T], comp: Optional[Comparator[T]] = None) -> List[T]:
    """sort in place with comp (default <) and return the same list"""
    _require_sequence(array, 'sort')
    array.sort(key=_sort_key(comp))
    return array


def sort_by(array: List[T], transform: Union[None, str, Callable[[T], Any]] = None,
            comp: Optional[Comparator[Any]] = None) -> List[T]:
    """
    sort in place by comp(transform(a), transform(b)) and return the same list.
    transform may be a key name for mapping elements, or a function.
    """
    _require_sequence(array, 'sort_by')
    f = _accessor(transform)
    key = _sort_key(comp)
    array.sort(key=lambda item: key(f(item)))
    return array


def sorted_index(array: List[T], value: T, comp: Optional[Comparator[T]] = None,
                 sort_first: bool = False) -> int:
    """
    1-based position where value would be inserted to keep array ordered:
    the first element not ordered before value, or len + 1.
    with sort_first the array is sorted in place beforehand.
    """
    _require_sequence(array, 'sorted_index')
    comp = comp or less
    if sort_first: sort(array, comp)
    for i, item in enumerate(array, 1):
        if not comp(item, value): return i
    return len(array) + 1


def nsorted(array: Sequence[T], n: int = 1, comp: Optional[Comparator[T]] = None) -> List[T]:
    """the first n values in comp order (the array is left alone)"""
    _require_sequence(array, 'nsorted')
    return sorted(array, key=_sort_key(comp))[:max(n, 0)]


def sortedk(t: Container[T], comp: Optional[Comparator[Any]] = None) -> Iterator[Tuple[Any, T]]:
    """(key, value) pairs in key order"""
    entries = sorted(pairs(t), key=lambda kv: _sort_key(comp)(kv[0]))
    return iter(entries)


def sortedv(t: Container[T], comp: Optional[Comparator[T]] = None) -> Iterator[Tuple[Any, T]]:
    """(key, value) pairs in value order"""
    entries = sorted(pairs(t), key=lambda kv: _sort_key(comp)(kv[1]))
    return iter(entries)


def max_(t: Container[T], transform: Optional[Callable[[T], Any]] = None) -> Any:
    """largest transformed value, none when empty"""
    f = _accessor(transform)
    return max((f(v) for v in values_of(t)), default=None)


def min_(t: Container[T], transform: Optional[Callable[[T], Any]] = None) -> Any:
    """smallest transformed value, none when empty"""
    f = _accessor(transform)
    return min((f(v) for v in values_of(t)), default=None)
