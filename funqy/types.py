from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Mapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks receive (value, key); one-argument callables get the value only
Predicate = Callable[..., bool]
Transform = Callable[..., Any]
KeySelector = Callable[[T], K]
Comparator = Callable[[T, T], bool]
Accumulator = Callable[[U, T], U]

# a container is either a sequence (1-based positions) or a mapping
Container = Union[Sequence[T], Mapping[Any, T]]


class _Missing:
    """marks an argument that was not supplied (none is a legal value)"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"


MISSING = _Missing()


class Placeholder:
    """
    slot marker for partial application.
    partial(f, _, 2)(1) calls f(1, 2).
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "_"


_ = Placeholder()


class Literal(Generic[T]):
    """matcher that always compares by structural equality, even for callables"""

    def __init__(self, value: T):
        self.value = value

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


class Match(Generic[T]):
    """matcher that always runs a predicate against each candidate"""

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    def __repr__(self) -> str:
        return f"Match({getattr(self.predicate, '__name__', self.predicate)!r})"
