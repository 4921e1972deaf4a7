import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(data))

def from_range(start: Optional[float] = None, stop: Optional[float] = None,
               step: Optional[float] = None) -> 'Enumerable[float]':
    """create enumerable from an inclusive range (see funqy.range_)"""
    from .enumerable import Enumerable
    from .arrays import range_
    return Enumerable(lambda: range_(start, stop, step))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    from .arrays import rep
    return Enumerable(lambda: rep(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

def generate(generator_func: Callable[[int], T], count: int) -> 'Enumerable[T]':
    """generator_func(1) .. generator_func(count)"""
    from .enumerable import Enumerable
    from .functions import times
    return Enumerable(lambda: times(generator_func, count))

# --- aliases ---
funqy = from_iterable
F = from_iterable
