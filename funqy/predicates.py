"""type predicates and the default order relations"""
import inspect
import math
from collections.abc import Mapping, Sequence, Iterable
from numbers import Number
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)


# --- order relations ---

def less(a, b) -> bool:
    """natural ordering, the default comparator everywhere"""
    return a < b


def greater(a, b) -> bool:
    return a > b


# --- container shapes ---

def is_mapping(obj: Any) -> bool:
    return isinstance(obj, Mapping)


def is_sequence(obj: Any) -> bool:
    """list-like containers; strings and bytes are scalars here"""
    return isinstance(obj, Sequence) and not isinstance(obj, _TEXT_TYPES)


def is_table(obj: Any) -> bool:
    """true for either container shape"""
    return is_mapping(obj) or is_sequence(obj)


def is_array(obj: Any) -> bool:
    """sequences, or mappings keyed exactly by 1..n"""
    if is_sequence(obj): return True
    if not is_mapping(obj): return False
    return all(i in obj for i in range(1, len(obj) + 1))


def is_iterable(obj: Any) -> bool:
    return isinstance(obj, Iterable)


def is_empty(obj: Any) -> bool:
    """none, empty strings and empty containers are empty; other scalars count as empty too"""
    if obj is None: return True
    if isinstance(obj, _TEXT_TYPES) or is_table(obj): return len(obj) == 0
    return True


# --- callables ---

def is_callable(obj: Any) -> bool:
    return callable(obj)


def is_function(obj: Any) -> bool:
    """plain functions, methods and builtins (not arbitrary callable objects)"""
    return inspect.isroutine(obj)


# --- scalars ---

def is_string(obj: Any) -> bool:
    return isinstance(obj, str)


def is_none(obj: Any) -> bool:
    return obj is None


def is_boolean(obj: Any) -> bool:
    return isinstance(obj, bool)


def is_number(obj: Any) -> bool:
    return isinstance(obj, Number) and not isinstance(obj, bool)


def is_nan(obj: Any) -> bool:
    return is_number(obj) and obj != obj


def is_finite(obj: Any) -> bool:
    if not is_number(obj) or isinstance(obj, complex): return False
    return math.isfinite(obj)


def is_integer(obj: Any) -> bool:
    """ints and integral floats, never booleans"""
    if isinstance(obj, bool): return False
    if isinstance(obj, int): return True
    return isinstance(obj, float) and obj.is_integer()
