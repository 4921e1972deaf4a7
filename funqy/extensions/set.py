from __future__ import annotations
import typing
from ..types import *
from .. import sets

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    set algebra with structural equality.
    elements are compared by content, so nested lists and dicts work as
    members; every result is duplicate free in first-appearance order.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def unique(self) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: sets.unique(self._enumerable._get_data()))

    distinct = unique

    def duplicates(self) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: sets.duplicates(self._enumerable._get_data()))

    def union(self, *others: Iterable[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: sets.union(self._enumerable._get_data(), *(list(o) for o in others)))

    def intersection(self, *others: Iterable[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: sets.intersection(self._enumerable._get_data(), *(list(o) for o in others)))

    def difference(self, other: Iterable[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: sets.difference(self._enumerable._get_data(), list(other)))

    def symmetric_difference(self, other: Iterable[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: sets.symmetric_difference(self._enumerable._get_data(), list(other)))

    def is_unique(self) -> bool:
        return sets.is_unique(self._enumerable._get_data())

    def disjoint(self, *others: Iterable[T]) -> bool:
        return sets.disjoint(self._enumerable._get_data(), *(list(o) for o in others))
