"""
the traversal engine: every other module walks containers through here.

sequences are visited as (value, position) with 1-based positions, mappings
as (value, key). callbacks are adapted once per call so that one-argument
callables such as `len` or `str.upper` can be passed directly.
"""
from __future__ import annotations
import inspect
from collections import defaultdict
from .types import *
from .predicates import is_mapping, is_sequence, is_table, is_integer

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


# --- primitives ---

def pairs(t: Container[T]) -> Iterator[Tuple[Any, T]]:
    """yield (key, value) for every entry; sequences use 1-based positions"""
    if is_mapping(t):
        yield from t.items()
    else:
        yield from enumerate(t, 1)


def ipairs(t: Container[T]) -> Iterator[Tuple[int, T]]:
    """yield the array part: positions 1, 2, ... until the first gap"""
    if not is_mapping(t):
        yield from enumerate(t, 1)
        return
    i = 1
    while i in t:
        yield i, t[i]
        i += 1


def values_of(t: Container[T]) -> List[T]:
    return list(t.values()) if is_mapping(t) else list(t)


def as_callback(f: Callable[..., U]) -> Callable[[Any, Any], U]:
    """adapt f so it can always be called as f(value, key)"""
    try:
        params = inspect.signature(f).parameters.values()
    except (TypeError, ValueError):
        # builtins and classes without an introspectable signature take the value only
        return lambda value, key: f(value)
    positional = 0
    for p in params:
        if p.kind is inspect.Parameter.VAR_POSITIONAL: return f
        if p.kind in _POSITIONAL: positional += 1
    if positional >= 2: return f
    if positional == 1: return lambda value, key: f(value)
    return lambda value, key: f()


def _require_sequence(t: Any, operation: str) -> None:
    if not is_sequence(t):
        raise TypeError(f"{operation} expects a sequence, got {type(t).__name__}")


def _has_key(t: Container[Any], key: Any) -> bool:
    if is_mapping(t): return key in t
    return is_integer(key) and 1 <= key <= len(t)


def _get(t: Container[T], key: Any, default: Any = None) -> Optional[T]:
    if is_mapping(t): return t.get(key, default)
    return t[int(key) - 1] if _has_key(t, key) else default


# --- visiting ---

def each(t: Container[T], f: Callable[..., Any]) -> None:
    """call f(value, key) on every entry, in container order"""
    call = as_callback(f)
    for key, value in pairs(t):
        call(value, key)


def eachi(t: Container[T], f: Callable[..., Any]) -> None:
    """
    call f(value, key) on integer keys only, lowest key first.
    works on sparse mappings, including zero and negative keys.
    """
    call = as_callback(f)
    if not is_mapping(t):
        for key, value in enumerate(t, 1):
            call(value, key)
        return
    for key in sorted(k for k in t if is_integer(k)):
        call(t[key], key)


def at(t: Container[T], *keys: Any) -> List[Optional[T]]:
    """values found at the given keys (none where missing)"""
    return [_get(t, key) for key in keys]


def adjust(t: Container[T], key: Any, f: Union[Callable[[T], T], T]) -> Container[T]:
    """copy of t where the value at key is replaced by f(value), or by f itself when not callable"""
    from .objects import clone
    if not _has_key(t, key):
        raise KeyError(f"key not existing in table: {key!r}")
    copy = clone(t)
    slot = key if is_mapping(copy) else int(key) - 1
    copy[slot] = f(copy[slot]) if callable(f) else f
    return copy


# --- mapping ---

def map_(t: Container[T], f: Transform) -> Container[U]:
    """shape-preserving map: lists stay lists, mappings keep their keys"""
    call = as_callback(f)
    if is_mapping(t):
        return {key: call(value, key) for key, value in t.items()}
    return [call(value, key) for key, value in enumerate(t, 1)]


def mapv(t: Container[T], f: Transform) -> Dict[Any, U]:
    """rewrite values only; the result is always keyed like the input"""
    call = as_callback(f)
    return {key: call(value, key) for key, value in pairs(t)}


def mapkv(t: Container[T], f: Callable[..., Optional[Tuple[K, V]]]) -> Dict[K, V]:
    """
    rewrite keys and values. f returns a (key, value) pair;
    returning none (or a none key) drops the entry.
    """
    call = as_callback(f)
    result = {}
    for key, value in pairs(t):
        produced = call(value, key)
        if produced is None: continue
        new_key, new_value = produced
        if new_key is not None:
            result[new_key] = new_value
    return result


def mapi(t: Container[T], f: Transform) -> List[U]:
    """map over the array part only, returning a list"""
    call = as_callback(f)
    return [call(value, key) for key, value in ipairs(t)]


mapiv = mapi


def mapikv(t: Container[T], f: Callable[..., Optional[Tuple[K, V]]]) -> Dict[K, V]:
    """mapkv restricted to the array part"""
    call = as_callback(f)
    result = {}
    for key, value in ipairs(t):
        produced = call(value, key)
        if produced is None: continue
        new_key, new_value = produced
        if new_key is not None:
            result[new_key] = new_value
    return result


# --- folding ---

def reduce(t: Container[T], f: Accumulator[U, T], state: Any = MISSING) -> Optional[U]:
    """
    fold left to right with f(state, value).
    without a seed the first value seeds the fold; an empty container then gives none.
    """
    for _, value in pairs(t):
        if state is MISSING:
            state = value
        else:
            state = f(state, value)
    return None if state is MISSING else state


def reduce_by(t: Container[T], f: Accumulator[U, T], pred: Predicate, state: Any = MISSING) -> Optional[U]:
    """reduce only the values passing pred(value, key)"""
    return reduce(select(t, pred), f, state)


def reduce_right(t: Container[T], f: Accumulator[U, T], state: Any = MISSING) -> Optional[U]:
    """fold right to left (materialises a reversed copy)"""
    return reduce(values_of(t)[::-1], f, state)


def map_reduce(t: Container[T], f: Accumulator[U, T], state: Any = MISSING) -> Container[U]:
    """every intermediate state of a left fold, keyed like the input"""
    def running():
        nonlocal state
        for key, value in pairs(t):
            state = value if state is MISSING else f(state, value)
            yield key, state

    if is_mapping(t): return dict(running())
    return [s for _, s in running()]


def map_reduce_right(t: Container[T], f: Accumulator[U, T], state: Any = MISSING) -> List[U]:
    return map_reduce(values_of(t)[::-1], f, state)


def best(t: Container[T], f: Comparator[T]) -> Optional[T]:
    """
    keep the incumbent while f(incumbent, challenger) holds, else switch.
    the result is always one of the inputs; none for an empty container.
    """
    state = MISSING
    for _, value in pairs(t):
        if state is MISSING or not f(state, value):
            state = value
    return None if state is MISSING else state


# --- filtering ---

def select(t: Container[T], f: Predicate) -> List[T]:
    """values passing f(value, key)"""
    call = as_callback(f)
    return [value for key, value in pairs(t) if call(value, key)]


def reject(t: Container[T], f: Predicate) -> List[T]:
    """values failing f(value, key)"""
    call = as_callback(f)
    return [value for key, value in pairs(t) if not call(value, key)]


def all_(t: Container[T], f: Predicate) -> bool:
    call = as_callback(f)
    return all(call(value, key) for key, value in pairs(t))


# --- projection ---

def _attribute(value: Any, name: Any) -> Any:
    if is_table(value): return _get(value, name)
    return getattr(value, name, None) if isinstance(name, str) else None


def invoke(t: Container[T], method: Union[str, Callable[..., U]]) -> Container[Any]:
    """
    call a method on every value. a name is looked up on each value (mapping key or attribute)
    and called when callable; a callable is applied as method(value, key).
    """
    fallback = as_callback(method) if callable(method) else None

    def call(value, key):
        if isinstance(method, str):
            member = _attribute(value, method)
            if member is not None:
                if not callable(member): return member
                # functions stored in mappings are unbound, hand them their owner
                return member(value) if is_mapping(value) else member()
        if fallback is not None:
            return fallback(value, key)
        return None

    return map_(t, call)


def pluck(t: Container[T], key: Any) -> List[Any]:
    """the value at key for every element, skipping elements where it is none"""
    plucked = (_attribute(value, key) for _, value in pairs(t))
    return [v for v in plucked if v is not None]


# --- classification ---

def group_by(t: Container[T], f: Callable[..., K]) -> Dict[K, List[T]]:
    """split values into lists keyed by f(value, key)"""
    call = as_callback(f)
    groups = defaultdict(list)
    for key, value in pairs(t):
        groups[call(value, key)].append(value)
    return dict(groups)


def count_by(t: Container[T], f: Callable[..., K]) -> Dict[K, int]:
    """count values per f(value, key)"""
    call = as_callback(f)
    counts = defaultdict(int)
    for key, value in pairs(t):
        counts[call(value, key)] += 1
    return dict(counts)


# --- keys ---

def size(*args: Any) -> int:
    """entries in a single container argument, otherwise the number of arguments"""
    if args and is_table(args[0]): return len(args[0])
    return len(args)


def _keys(t: Container[Any]) -> Iterable[Any]:
    return t.keys() if is_mapping(t) else range(1, len(t) + 1)


def contains_keys(t: Container[Any], other: Container[Any]) -> bool:
    """every key of other is also a key of t"""
    return all(_has_key(t, key) for key in _keys(other))


def same_keys(a: Container[Any], b: Container[Any]) -> bool:
    return contains_keys(a, b) and contains_keys(b, a)
