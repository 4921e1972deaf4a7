from __future__ import annotations
import typing
from ..types import *
from .. import traversal, arrays, sorting, objects, functions

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    def select(self: 'Enumerable[T]', predicate: Predicate) -> 'Enumerable[T]':
        """keep elements passing predicate(value, position)"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: traversal.select(self._get_data(), predicate))

    where = select

    def reject(self: 'Enumerable[T]', predicate: Predicate) -> 'Enumerable[T]':
        """drop elements passing predicate(value, position)"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: traversal.reject(self._get_data(), predicate))

    def map(self: 'Enumerable[T]', transform: Transform) -> 'Enumerable[U]':
        """project each element with transform(value, position)"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: traversal.map_(self._get_data(), transform))

    def flatten(self: 'Enumerable[T]', shallow: bool = False) -> 'Enumerable[Any]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.flatten(self._get_data(), shallow))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.reverse(self._get_data()))

    def sort_by(self: 'Enumerable[T]', transform: Union[None, str, Callable[[T], Any]] = None,
                comp: Optional[Comparator[Any]] = None) -> 'Enumerable[T]':
        """sorted copy; the wrapped data itself is left alone"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: sorting.sort_by(list(self._get_data()), transform, comp))

    def order_by(self: 'Enumerable[T]', key_selector: Union[str, Callable[[T], K]],
                 comp: Optional[Comparator[K]] = None) -> 'OrderedEnumerable[T]':
        """start a stable multi-level ordering"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data, [(sorting._accessor(key_selector), comp, False)])

    def order_by_descending(self: 'Enumerable[T]', key_selector: Union[str, Callable[[T], K]],
                            comp: Optional[Comparator[K]] = None) -> 'OrderedEnumerable[T]':
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data, [(sorting._accessor(key_selector), comp, True)])

    def first(self: 'Enumerable[T]', n: int = 1) -> 'Enumerable[T]':
        """the first n elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.first(self._get_data(), n))

    take = first

    def rest(self: 'Enumerable[T]', index: int = 1) -> 'Enumerable[T]':
        """elements from 1-based position index on"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.rest(self._get_data(), index))

    def slice(self: 'Enumerable[T]', start: int = 1, finish: Optional[int] = None) -> 'Enumerable[T]':
        """positions start..finish, inclusive"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.slice_(self._get_data(), start, finish))

    def compact(self: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.compact(self._get_data()))

    def append(self: 'Enumerable[T]', *others: Iterable[T]) -> 'Enumerable[T]':
        """concatenate other sequences after this one"""
        from ..enumerable import Enumerable
        def append_data():
            data = list(self._get_data())
            for other in others:
                data = arrays.append(data, list(other))
            return data
        return Enumerable(append_data)

    def prepend(self: 'Enumerable[T]', *values: T) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.prepend(self._get_data(), *values))

    def interpose(self: 'Enumerable[T]', value: T) -> 'Enumerable[T]':
        """put value between neighbours (on a copy)"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.interpose(list(self._get_data()), value))

    def tap(self: 'Enumerable[T]', f: Callable[[List[T]], Any]) -> 'Enumerable[T]':
        """call f with the materialised data when it is produced"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: objects.tap(self._get_data(), f))

    def pipe(self: 'Enumerable[T]', *fs: Callable[[List[T]], Iterable[U]]) -> 'Enumerable[U]':
        """run the data through fs left to right; the last result must be iterable"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(functions.pipe(self._get_data(), *fs)))
