"""
set algebra over sequences.

membership is always structural (`is_equal`), so nested lists and dicts
compare by content. that makes every containment check a linear scan:
the operations below are O(n*m), not hash based.
results are duplicate free and keep first-appearance order.
"""
from __future__ import annotations
from .types import *
from .equality import include, find
from .traversal import _require_sequence


def unique(array: Sequence[T]) -> List[T]:
    """first occurrence of every distinct value"""
    _require_sequence(array, 'unique')
    result: List[T] = []
    for value in array:
        if find(result, value) is None:
            result.append(value)
    return result


def is_unique(array: Sequence[T]) -> bool:
    return len(array) == len(unique(array))


def duplicates(array: Sequence[T]) -> List[T]:
    """values occurring more than once, in order of first occurrence"""
    _require_sequence(array, 'duplicates')
    dups: List[T] = []
    for i, value in enumerate(array, 1):
        if find(dups, value) is None and find(array, value, i + 1) is not None:
            dups.append(value)
    return dups


def union(*arrays: Sequence[T]) -> List[T]:
    """distinct values of all arrays, flattened at call time"""
    from .arrays import flatten
    return unique(flatten(list(arrays)))


def intersection(*arrays: Sequence[T]) -> List[T]:
    """distinct values of the first array present in every other array"""
    if not arrays: return []
    first, others = arrays[0], arrays[1:]
    _require_sequence(first, 'intersection')
    return unique([value for value in first if all(include(other, Literal(value)) for other in others)])


def difference(array: Sequence[T], other: Optional[Sequence[T]] = None) -> List[T]:
    """distinct values of array not present in other"""
    _require_sequence(array, 'difference')
    if other is None: return unique(array)
    return unique([value for value in array if not include(other, Literal(value))])


def symmetric_difference(array: Sequence[T], other: Sequence[T]) -> List[T]:
    """values in exactly one of the two arrays"""
    return difference(union(array, other), intersection(array, other))


def disjoint(*arrays: Sequence[T]) -> bool:
    """no value is shared by all arrays"""
    return not intersection(*arrays)
