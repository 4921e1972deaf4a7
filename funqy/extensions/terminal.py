from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .. import traversal, equality

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """operations that leave the chain and return plain values"""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set (elements must be hashable)"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Callable[[T], V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, value: Any = MISSING) -> int:
        """number of elements, or of elements structurally equal to value"""
        return equality.count(self._enumerable._get_data(), value)

    def include(self, value: Any) -> bool:
        """value or predicate, as in funqy.include"""
        return equality.include(self._enumerable._get_data(), value)

    def detect(self, value: Any) -> Optional[int]:
        """1-based position of the first match"""
        return equality.detect(self._enumerable._get_data(), value)

    def find(self, value: T, from_: int = 1) -> Optional[int]:
        return equality.find(self._enumerable._get_data(), value, from_)

    def all(self, predicate: Predicate) -> bool:
        return traversal.all_(self._enumerable._get_data(), predicate)

    def reduce(self, f: Accumulator[U, T], state: Any = MISSING) -> Optional[U]:
        """left fold; none for an empty sequence without a seed"""
        return traversal.reduce(self._enumerable._get_data(), f, state)

    def reduce_right(self, f: Accumulator[U, T], state: Any = MISSING) -> Optional[U]:
        return traversal.reduce_right(self._enumerable._get_data(), f, state)

    def best(self, f: Comparator[T]) -> Optional[T]:
        return traversal.best(self._enumerable._get_data(), f)

    def first(self, predicate: Optional[Predicate] = None) -> Optional[T]:
        """first element (passing predicate), none if there is none"""
        data = self._enumerable._get_data()
        if predicate is None: return data[0] if data else None
        position = equality.find_index(data, predicate)
        return data[position - 1] if position is not None else None
