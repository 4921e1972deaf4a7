"""
array helpers.

positions are 1-based and ranges are inclusive, so slice_(a, 2, 4) returns
the 2nd, 3rd and 4th elements. functions documented as "in place" mutate and
return their argument; everything else returns a new list.
"""
from __future__ import annotations
import math
import random
from itertools import chain
from .types import *
from .predicates import is_sequence
from .equality import is_equal
from .traversal import as_callback


# --- random access ---

def shuffle(array: Sequence[T], seed: Optional[int] = None) -> List[T]:
    """shuffled copy (inside-out fisher-yates); a seed makes it reproducible"""
    rng = random.Random(seed)
    shuffled: List[T] = []
    for i, value in enumerate(array):
        j = rng.randint(0, i)
        if j == i:
            shuffled.append(value)
        else:
            shuffled.append(shuffled[j])
            shuffled[j] = value
    return shuffled


def sample(array: Sequence[T], n: int = 1, seed: Optional[int] = None) -> List[T]:
    """n random elements, without replacement"""
    if n <= 0 or not array: return []
    if n == 1:
        return [random.Random(seed).choice(list(array))]
    return shuffle(array, seed)[:n]


def sample_prob(array: Sequence[T], prob: float, seed: Optional[int] = None) -> List[T]:
    """keep each element with probability prob"""
    rng = random.Random(seed)
    return [value for value in array if rng.random() < prob]


def pack(*values: T) -> List[T]:
    return list(values)


# --- building ---

def reverse(array: Sequence[T]) -> List[T]:
    return list(array)[::-1]


def fill(array: List[T], value: T, i: int = 1, j: Optional[int] = None) -> List[T]:
    """
    in place: set positions i..j to value, growing the list when j runs past the end.
    fill([1, 2, 3, 4, 5], 0, 2, 4) -> [1, 0, 0, 0, 5]
    """
    j = len(array) if j is None else j
    if i > len(array) + 1:
        raise ValueError(f"fill start {i} is past the end of an array of length {len(array)}")
    for position in range(max(i, 1), j + 1):
        if position <= len(array):
            array[position - 1] = value
        else:
            array.append(value)
    return array


def vector(value: T, n: int) -> List[T]:
    return fill([], value, 1, n)


def zeros(n: int) -> List[int]:
    return vector(0, n)


def ones(n: int) -> List[int]:
    return vector(1, n)


def rep(value: T, n: int) -> List[T]:
    return [value] * max(n, 0)


def _signum(a) -> int:
    return 1 if a >= 0 else -1


def range_(start: Optional[float] = None, stop: Optional[float] = None,
           step: Optional[float] = None) -> List[float]:
    """
    inclusive numeric range with an inferred step direction.
    range_(3) -> [1, 2, 3], range_(-3) -> [-1, -2, -3], range_(5, 1) -> [5, 4, 3, 2, 1],
    range_(0, 2, 0.7) -> [0, 0.7, 1.4]
    """
    if start is None and stop is None and step is None: return []
    if stop is None and step is None:
        start, stop, step = _signum(start), start, _signum(start)
    elif step is None:
        step = _signum(stop - start)
    if step == 0: raise ValueError("range step cannot be zero")
    steps = max(math.floor((stop - start) / step), 0)
    return [start] + [start + step * i for i in range(1, steps + 1)]


# --- conditional prefixes ---

def select_while(array: Sequence[T], f: Predicate) -> List[T]:
    """leading elements passing f(value, position)"""
    call = as_callback(f)
    result: List[T] = []
    for i, value in enumerate(array, 1):
        if not call(value, i): break
        result.append(value)
    return result


def drop_while(array: Sequence[T], f: Predicate) -> List[T]:
    """everything after the leading run passing f(value, position)"""
    call = as_callback(f)
    for i, value in enumerate(array, 1):
        if not call(value, i): return list(array[i - 1:])
    return []


# --- in place edits ---

def add_top(array: List[T], *values: T) -> List[T]:
    """in place: insert each value at the front, so the last one ends up first"""
    for value in values:
        array.insert(0, value)
    return array


def push(array: List[T], *values: T) -> List[T]:
    """in place: append values"""
    array.extend(values)
    return array


def prepend(array: Sequence[T], *values: T) -> List[T]:
    """new list with values in front of array"""
    return list(values) + list(array)


def shift(array: List[T], n: int = 1) -> Union[None, T, List[T]]:
    """in place: remove n values from the front; one value comes back bare, several as a list"""
    n = min(n, len(array))
    removed = [array.pop(0) for _ in range(n)]
    if not removed: return None
    return removed[0] if len(removed) == 1 else removed


pop = shift


def unshift(array: List[T], n: int = 1) -> Union[None, T, List[T]]:
    """in place: remove n values from the back, last first"""
    n = min(n, len(array))
    removed = [array.pop() for _ in range(n)]
    if not removed: return None
    return removed[0] if len(removed) == 1 else removed


def pull(array: List[T], *values: T) -> List[T]:
    """in place: remove every element structurally equal to one of values"""
    for i in range(len(array) - 1, -1, -1):
        if any(is_equal(array[i], value) for value in values):
            del array[i]
    return array


def remove_range(array: List[T], start: int = 1, finish: Optional[int] = None) -> List[T]:
    """in place: delete positions start..finish"""
    finish = len(array) if finish is None else finish
    if start > finish:
        raise ValueError("start cannot be greater than finish.")
    del array[max(start, 1) - 1:finish]
    return array


def interpose(array: List[T], value: T) -> List[T]:
    """in place: put value between every pair of neighbours"""
    for k in range(len(array) - 1, 0, -1):
        array.insert(k, value)
    return array


intersperse = interpose


# --- slicing ---

def chunk(array: Sequence[T], f: Optional[Callable[..., Any]] = None) -> List[List[T]]:
    """
    split into runs of consecutive elements sharing the same f(value, position).
    chunk([1, 5, 2, 4, 3, 3, 4], lambda v: v % 2 == 0) -> [[1, 5], [2, 4], [3, 3], [4]]
    """
    call = as_callback(f) if f is not None else (lambda value, key: value)
    chunks: List[List[T]] = []
    previous = MISSING
    for i, value in enumerate(array, 1):
        current = call(value, i)
        if chunks and current == previous:
            chunks[-1].append(value)
        else:
            chunks.append([value])
        previous = current
    return chunks


def slice_(array: Sequence[T], start: int = 1, finish: Optional[int] = None) -> List[T]:
    """positions start..finish inclusive, clipped to the array"""
    finish = len(array) if finish is None else finish
    return list(array[max(start, 1) - 1:max(finish, 0)])


def first(array: Sequence[T], n: int = 1) -> List[T]:
    return list(array[:max(n, 0)])


head = take = first


def initial(array: Sequence[T], n: Optional[int] = None) -> List[T]:
    """all but the last n (default 1)"""
    n = 1 if n is None else min(n, len(array))
    return list(array[:len(array) - n])


def last(array: Sequence[T], n: Optional[int] = None) -> List[T]:
    """the last n values (all of them by default)"""
    n = len(array) if n is None else min(n, len(array))
    return list(array[len(array) - n:]) if n > 0 else []


def rest(array: Sequence[T], index: int = 1) -> List[T]:
    """everything from position index on"""
    return list(array[max(index, 1) - 1:])


tail = rest


def nth(array: Sequence[T], index: int) -> Optional[T]:
    """value at 1-based position, none when out of range"""
    if 1 <= index <= len(array): return array[index - 1]
    return None


def compact(array: Sequence[T]) -> List[T]:
    """truthy values only"""
    return [value for value in array if value]


def flatten(array: Sequence[Any], shallow: bool = False) -> List[Any]:
    """flatten nested sequences; shallow stops after one level"""
    flat: List[Any] = []
    for value in array:
        if is_sequence(value):
            flat.extend(value if shallow else flatten(value))
        else:
            flat.append(value)
    return flat


# --- combining ---

def append(array: Sequence[T], other: Sequence[T]) -> List[T]:
    return list(chain(array, other))


def zip_(*arrays: Sequence[Any]) -> List[List[Any]]:
    """
    group values by position. shorter arrays simply contribute nothing,
    so rows may be ragged: zip_([1, 2], ['a']) -> [[1, 'a'], [2]]
    """
    n = max((len(a) for a in arrays), default=0)
    return [[a[i] for a in arrays if i < len(a)] for i in range(n)]


transpose = zip_


def zip_with(f: Callable[..., U], *arrays: Sequence[Any]) -> List[U]:
    """f applied to each row of zip_"""
    return [f(*row) for row in zip_(*arrays)]


def interleave(*arrays: Sequence[T]) -> List[T]:
    """round-robin merge: interleave([1, 2, 3], ['a', 'b']) -> [1, 'a', 2, 'b', 3]"""
    return [value for row in zip_(*arrays) for value in row]


def concat(array: Sequence[Any], sep: str = '', i: int = 1, j: Optional[int] = None) -> str:
    """join str() of positions i..j"""
    return sep.join(str(value) for value in slice_(array, i, j))


def xprod(array: Sequence[T], other: Sequence[U]) -> List[List[Any]]:
    """cartesian product as [a, b] pairs"""
    return [[a, b] for a in array for b in other]


def xpairs(value: T, array: Sequence[U]) -> List[List[Any]]:
    return [[value, v] for v in array]


def xpairs_right(value: T, array: Sequence[U]) -> List[List[Any]]:
    return [[v, value] for v in array]
