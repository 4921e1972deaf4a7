from __future__ import annotations
import typing
from ..types import *
from .. import traversal, arrays

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: Callable[..., K]) -> Dict[K, List[T]]:
        """group elements by key_selector(value, position)"""
        return traversal.group_by(self._enumerable._get_data(), key_selector)

    def count_by(self, key_selector: Callable[..., K]) -> Dict[K, int]:
        """count elements per key_selector(value, position)"""
        return traversal.count_by(self._enumerable._get_data(), key_selector)

    def chunk(self, key_selector: Optional[Callable[..., Any]] = None) -> 'Enumerable[List[T]]':
        """runs of consecutive elements sharing the same key"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.chunk(self._enumerable._get_data(), key_selector))
