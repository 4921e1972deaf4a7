"""
lazy, single-pass producers.

every factory call returns a fresh generator; a generator cannot be
restarted once consumed and always terminates. each yielded chunk is a new
list, so callers may keep or mutate what they receive.
"""
from __future__ import annotations
from .types import *
from .traversal import pairs, _require_sequence


def _windows(array: Sequence[T], n: int, step: int) -> Iterator[Tuple[int, List[T]]]:
    """(start, chunk) for starts 0, step, 2*step, ... up to len(array); chunks are truncated at the end"""
    for start in range(0, len(array) + 1, step):
        yield start, list(array[start:start + n])


def _padded(chunk: List[T], n: int, pad: Any) -> List[T]:
    if pad is not None and len(chunk) < n:
        chunk.extend([pad] * (n - len(chunk)))
    return chunk


def partition(array: Sequence[T], n: int = 1, pad: Optional[T] = None) -> Iterator[List[T]]:
    """
    non-overlapping chunks of size n. the last chunk is padded to n with pad
    when pad is given, otherwise it comes out short.
    partition([1, 2, 3, 4, 5], 2) -> [1, 2], [3, 4], [5]
    """
    _require_sequence(array, 'partition')
    if n <= 0: raise ValueError("partition size must be positive")
    return (_padded(chunk, n, pad) for _, chunk in _windows(array, n, n) if chunk)


def overlapping(array: Sequence[T], n: int = 2, pad: Optional[T] = None) -> Iterator[List[T]]:
    """
    chunks of size n sharing one element with the previous chunk.
    a trailing chunk is produced only if it starts before the last element.
    overlapping([1, 2, 3, 4, 5, 6], 3) -> [1, 2, 3], [3, 4, 5], [5, 6]
    """
    _require_sequence(array, 'overlapping')
    if n <= 1: raise ValueError("overlapping size must be greater than 1")
    return (_padded(chunk, n, pad) for start, chunk in _windows(array, n, n - 1)
            if chunk and start + 1 < len(array))


def aperture(array: Sequence[T], n: int = 2) -> Iterator[List[T]]:
    """
    every contiguous window of size n, sliding by one. windows running past
    the end are not produced.
    aperture([1, 2, 3, 4], 3) -> [1, 2, 3], [2, 3, 4]
    """
    _require_sequence(array, 'aperture')
    if n <= 1: raise ValueError("aperture size must be greater than 1")
    return (list(array[start:start + n]) for start in range(0, len(array) - n + 1))


sliding = aperture


def pairwise(array: Sequence[T]) -> Iterator[List[T]]:
    """adjacent pairs: aperture of size 2"""
    return aperture(array, 2)


def permutation(array: Sequence[T]) -> Iterator[List[T]]:
    """
    all n! orderings of the array, each as a snapshot.
    works on a private copy by swapping in place and swapping back, so the
    input is left untouched.
    """
    _require_sequence(array, 'permutation')
    work = list(array)

    def permute(n: int) -> Iterator[List[T]]:
        if n == 0:
            yield list(work)
            return
        for i in range(n):
            work[n - 1], work[i] = work[i], work[n - 1]
            yield from permute(n - 1)
            work[n - 1], work[i] = work[i], work[n - 1]

    return permute(len(work))


def powerset(array: Sequence[T]) -> Iterator[List[T]]:
    """
    every subset exactly once, 2^n in total.
    each new element extends a copy of every subset seen so far, then appears
    on its own; the empty set comes last.
    """
    _require_sequence(array, 'powerset')
    values = list(array)

    def grow() -> Iterator[List[T]]:
        seen: List[List[T]] = []
        for value in values:
            for subset in seen[:]:
                extended = subset + [value]
                seen.append(extended)
                yield list(extended)
            seen.append([value])
            yield [value]
        yield []

    return grow()


def cycle(t: Container[T], n: int = 1) -> Iterator[Tuple[T, Any]]:
    """(value, key) over the container, n full loops"""
    entries = list(pairs(t))
    for _ in range(max(n, 0)):
        for key, value in entries:
            yield value, key


def iterator(f: Callable[[T], T], value: T, n: Optional[int] = None) -> Iterator[T]:
    """f(value), f(f(value)), ... at most n times, forever without n"""
    produced = 0
    while n is None or produced < n:
        value = f(value)
        produced += 1
        yield value


def skip(it: Iterator[T], n: int = 1) -> Optional[Iterator[T]]:
    """advance it by n items; none if it runs dry before that"""
    sentinel = object()
    for _ in range(n):
        if next(it, sentinel) is sentinel: return None
    return it


def tabulate(it: Iterable[T]) -> List[T]:
    """drain an iterator into a list"""
    return list(it)


def iterlen(it: Iterable[Any]) -> int:
    """drain an iterator and count what it produced"""
    return sum(1 for _ in it)
