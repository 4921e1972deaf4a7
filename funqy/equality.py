"""
structural equality and linear search.

`is_equal` descends into mappings and sequences and compares everything
else natively. there is no cycle detection: comparing self-referential
structures recurses until python gives up.
"""
from __future__ import annotations
import logging
from collections import abc
from .types import *
from .predicates import is_mapping, is_sequence
from .traversal import pairs, as_callback, _require_sequence

logger = logging.getLogger(__name__)

# __eq__ implementations that mean "compare contents", i.e. no custom hook
_STRUCTURAL_EQ = (object.__eq__, dict.__eq__, list.__eq__, tuple.__eq__, abc.Mapping.__eq__)


def _kind(obj: Any) -> str:
    if is_mapping(obj): return 'mapping'
    if is_sequence(obj): return 'sequence'
    return 'scalar'


def _eq_hook(obj: Any) -> Optional[Callable[[Any, Any], Any]]:
    method = type(obj).__eq__
    if any(method is builtin for builtin in _STRUCTURAL_EQ): return None
    return method


def _compare_with_hooks(a: Any, b: Any) -> Optional[bool]:
    """run custom __eq__ hooks; none means neither side has one"""
    hook_a, hook_b = _eq_hook(a), _eq_hook(b)
    if hook_a is None and hook_b is None: return None
    for hook, left, right in ((hook_a, a, b), (hook_b, b, a)):
        if hook is None: continue
        try:
            result = hook(left, right)
        except Exception as e:
            logger.debug(f"equality hook of {type(left).__name__} failed ({e!r}), falling back")
            continue
        if result is not NotImplemented:
            return bool(result)
    return a is b


def is_equal(a: Any, b: Any, use_hook: bool = False) -> bool:
    """
    deep structural equality.
    mappings must have the same size and pairwise equal values under the same keys,
    sequences must match element by element. scalars use ==, except that booleans
    never equal numbers. with use_hook, containers whose type defines its own __eq__
    are compared with it instead (identity if the hook fails on both sides).
    """
    kind = _kind(a)
    if kind != _kind(b): return False
    if kind == 'scalar':
        if isinstance(a, bool) != isinstance(b, bool): return False
        return a == b

    if use_hook:
        hooked = _compare_with_hooks(a, b)
        if hooked is not None: return hooked

    if len(a) != len(b): return False

    if kind == 'sequence':
        return all(is_equal(x, y, use_hook) for x, y in zip(a, b))

    for key, value in a.items():
        if key not in b or not is_equal(value, b[key], use_hook): return False
    for key in b:
        if key not in a: return False
    return True


def _matcher(value: Any) -> Callable[[Any], bool]:
    """resolve the value-or-predicate argument of include/detect"""
    if isinstance(value, Literal):
        literal = value.value
        return lambda candidate: is_equal(candidate, literal)
    if isinstance(value, Match):
        return value.predicate
    if callable(value):
        return value
    return lambda candidate: is_equal(candidate, value)


def include(t: Container[T], value: Any) -> bool:
    """
    true when some element matches. a callable is used as a predicate on each
    element, anything else is compared with is_equal. wrap in Literal to search
    for a callable itself.
    """
    match = _matcher(value)
    return any(match(candidate) for _, candidate in pairs(t))


def detect(t: Container[T], value: Any) -> Optional[Any]:
    """key (1-based position for sequences) of the first match, else none"""
    match = _matcher(value)
    for key, candidate in pairs(t):
        if match(candidate): return key
    return None


def find(array: Sequence[T], value: T, from_: int = 1) -> Optional[int]:
    """1-based position of the first element equal to value, scanning from from_"""
    _require_sequence(array, 'find')
    for i in range(max(from_, 1), len(array) + 1):
        if is_equal(array[i - 1], value): return i
    return None


def _has_props(candidate: Any, props: Mapping[Any, Any]) -> bool:
    if not is_mapping(candidate): return False
    return all(key in candidate and candidate[key] == expected for key, expected in props.items())


def where(t: Container[T], props: Mapping[Any, Any]) -> Optional[List[T]]:
    """elements carrying every key/value of props, or none if nothing matches"""
    matches = [v for _, v in pairs(t) if _has_props(v, props)]
    return matches or None


def find_where(t: Container[T], props: Mapping[Any, Any]) -> Optional[T]:
    """first element carrying every key/value of props"""
    for _, v in pairs(t):
        if _has_props(v, props): return v
    return None


def same(a: Container[T], b: Container[T]) -> bool:
    """same elements regardless of order (containment checked both ways)"""
    return (all(include(b, v) for _, v in pairs(a))
            and all(include(a, v) for _, v in pairs(b)))


def all_equal(t: Container[T], comp: Optional[Comparator[T]] = None) -> bool:
    """every value equals the first one (by comp when given)"""
    test = comp or is_equal
    items = iter(pairs(t))
    first = next(items, None)
    if first is None: return True
    pivot = first[1]
    return all(test(pivot, v) for _, v in items)


def count(t: Container[T], value: Any = MISSING) -> int:
    """occurrences of value (structural), or the size of t when no value is given"""
    if value is MISSING: return len(t)
    return sum(1 for _, v in pairs(t) if is_equal(v, value))


def countf(t: Container[T], f: Predicate) -> int:
    """entries passing f(value, key)"""
    call = as_callback(f)
    return sum(1 for k, v in pairs(t) if call(v, k))


# --- positional searches ---

def index_of(array: Sequence[T], value: T) -> Optional[int]:
    """1-based position of the first == match"""
    _require_sequence(array, 'index_of')
    for i, v in enumerate(array, 1):
        if v == value: return i
    return None


def last_index_of(array: Sequence[T], value: T) -> Optional[int]:
    _require_sequence(array, 'last_index_of')
    for i in range(len(array), 0, -1):
        if array[i - 1] == value: return i
    return None


def find_index(array: Sequence[T], pred: Predicate) -> Optional[int]:
    """1-based position of the first element passing pred(value, position)"""
    _require_sequence(array, 'find_index')
    call = as_callback(pred)
    for i, v in enumerate(array, 1):
        if call(v, i): return i
    return None


def find_last_index(array: Sequence[T], pred: Predicate) -> Optional[int]:
    _require_sequence(array, 'find_last_index')
    call = as_callback(pred)
    for i in range(len(array), 0, -1):
        if call(array[i - 1], i): return i
    return None
