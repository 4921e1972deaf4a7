"""operator functions, handy as reducers and comparators"""
import math
from typing import Any


def add(a, b): return a + b


def sub(a, b): return a - b


def mul(a, b): return a * b


def div(a, b): return a / b


def mod(a, b): return a % b


def exp(a, b): return a ** b


pow_ = exp


def unm(a): return -a


neg = unm


def floordiv(a, b): return a // b


def intdiv(a, b):
    """integer division truncated toward zero"""
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return -q if (a < 0) != (b < 0) else q
    return math.trunc(a / b)


def eq(a, b) -> bool: return a == b


def neq(a, b) -> bool: return a != b


def lt(a, b) -> bool: return a < b


def gt(a, b) -> bool: return a > b


def le(a, b) -> bool: return a <= b


def ge(a, b) -> bool: return a >= b


def land(a, b) -> Any: return a and b


def lor(a, b) -> Any: return a or b


def lnot(a) -> bool: return not a


def concat(a, b) -> str: return f"{a}{b}"


def length(a) -> int: return len(a)


len_ = length
