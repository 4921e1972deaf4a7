from __future__ import annotations
from functools import reduce as _fold
import numpy as np
from .types import *
from .config import get_config
from .operators import add, mul
from .traversal import values_of


def _floats(values: List[Any]) -> bool:
    # ints stay in python so they never wrap at int64
    if not get_config().use_numpy: return False
    return all(isinstance(v, float) for v in values)


def _scalar(result: Any) -> Any:
    return result.item() if hasattr(result, 'item') else result


def sum_(t: Container[T]) -> Any:
    """sum of the values; 0 when empty. non-numbers are folded with +"""
    values = values_of(t)
    if not values: return 0
    if _floats(values): return _scalar(np.sum(values))
    return _fold(add, values)


def product(t: Container[T]) -> Any:
    """product of the values; 1 when empty"""
    values = values_of(t)
    if not values: return 1
    if _floats(values): return _scalar(np.prod(values))
    return _fold(mul, values)


def mean(t: Container[T]) -> Optional[float]:
    """arithmetic mean, none when empty"""
    values = values_of(t)
    if not values: return None
    if _floats(values): return _scalar(np.mean(values))
    return sum_(values) / len(values)


def median(t: Container[T]) -> Optional[Any]:
    """middle value, or the mean of the two middle values for an even count; none when empty"""
    values = values_of(t)
    if not values: return None
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2: return ordered[mid]
    if _floats(values): return _scalar(np.median(values))
    return (ordered[mid - 1] + ordered[mid]) / 2
