from __future__ import annotations
import typing
from ..types import *
from .. import stats, sorting

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Callable[[T], Any]] = None) -> List[Any]:
        """helper to extract values for statistical operations."""
        if selector: return self._enumerable.map(selector).to.list()
        return self._enumerable.to.list()

    def sum(self, selector: Optional[Callable[[T], Any]] = None) -> Any:
        return stats.sum_(self._get_values(selector))

    def product(self, selector: Optional[Callable[[T], Any]] = None) -> Any:
        return stats.product(self._get_values(selector))

    def mean(self, selector: Optional[Callable[[T], Any]] = None) -> Optional[float]:
        """none for an empty sequence"""
        return stats.mean(self._get_values(selector))

    average = mean

    def median(self, selector: Optional[Callable[[T], Any]] = None) -> Optional[Any]:
        return stats.median(self._get_values(selector))

    def min(self, transform: Union[None, str, Callable[[T], Any]] = None) -> Any:
        """smallest (transformed) value"""
        return sorting.min_(self._enumerable._get_data(), transform)

    def max(self, transform: Union[None, str, Callable[[T], Any]] = None) -> Any:
        return sorting.max_(self._enumerable._get_data(), transform)
