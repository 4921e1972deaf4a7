"""
function combinators.

everything here builds a new callable out of existing ones. the stateful
wrappers (once, before, after, memoize, curry) own their state privately;
nothing is shared between two wrappers built from the same function.
"""
from __future__ import annotations
import functools
import itertools
import logging
import threading
import time as _time
from .types import *
from .types import _
from .memo import MemoCache, make_cache

logger = logging.getLogger(__name__)


# --- basics ---

def noop(*args, **kwargs) -> None:
    return None


def identity(value: T) -> T:
    return value


def call(f: Callable[..., U], *args: Any) -> U:
    return f(*args)


def constant(value: T) -> Callable[..., T]:
    """function returning value whatever it is called with"""
    return lambda *args, **kwargs: value


always = constant


def apply_spec(specs: Mapping[K, Callable[..., Any]]) -> Callable[..., Dict[K, Any]]:
    """function returning {key: f(*args)} for every f of specs"""
    def applied(*args):
        return {key: f(*args) for key, f in specs.items()}
    return applied


# --- call-count state machines ---

def once(f: Callable[..., U]) -> Callable[..., U]:
    """
    capture the arguments of the first call and replay them on every call.
    f still runs each time; only its arguments are frozen.
    """
    captured: Optional[Tuple[tuple, dict]] = None

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        nonlocal captured
        if captured is None: captured = (args, kwargs)
        return f(*captured[0], **captured[1])
    return wrapper


def before(f: Callable[..., U], count: int) -> Callable[..., U]:
    """
    follow the caller's arguments for the first count calls, then keep
    replaying the count-th call's arguments.
    """
    calls = 0
    captured: Tuple[tuple, dict] = ((), {})

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        nonlocal calls, captured
        calls += 1
        if calls <= count: captured = (args, kwargs)
        return f(*captured[0], **captured[1])
    return wrapper


def after(f: Callable[..., U], count: int) -> Callable[..., Optional[U]]:
    """no-op (returning none) until the count-th call, then a plain call through"""
    calls = 0

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        nonlocal calls
        calls += 1
        if calls >= count: return f(*args, **kwargs)
        return None
    return wrapper


def memoize(f: Callable[[T], U], cache: Optional[MemoCache] = None) -> Callable[[T], U]:
    """
    cache f's result per argument (the argument must be hashable).
    cache defaults to the configured policy; the cache is exposed as `.cache`.
    """
    store = cache if cache is not None else make_cache()
    name = getattr(f, '__name__', repr(f))

    @functools.wraps(f)
    def wrapper(key):
        result = store.lookup(key)
        if result is MISSING:
            logger.debug(f"memoize miss for {name}({key!r})")
            result = f(key)
            store.store(key, result)
        return result

    wrapper.cache = store
    return wrapper


def curry(f: Callable[..., U], arity: int = 2) -> Callable[[Any], Any]:
    """
    one argument at a time: curry(f, 3)(1)(2)(3) == f(1, 2, 3).
    every intermediate step is a new continuation holding its own arguments,
    so a curried function can be completed any number of times.
    """
    if arity < 1: raise ValueError("curry arity must be at least 1")

    def collect(collected: tuple) -> Callable[[Any], Any]:
        def step(value):
            args = collected + (value,)
            if len(args) >= arity: return f(*args)
            return collect(args)
        return step

    return collect(())


# --- partial application ---

def _fill(template: tuple, supplied: List[Any], name: str) -> List[Any]:
    filled = []
    for arg in template:
        if arg is _:
            if not supplied:
                raise TypeError(f"{name}: not enough arguments to fill placeholders")
            filled.append(supplied.pop(0))
        else:
            filled.append(arg)
    return filled


def partial(f: Callable[..., U], *bound: Any) -> Callable[..., U]:
    """
    prefill leading arguments; each `_` takes the next call-time argument
    and whatever is left over is appended.
    partial(sub, _, 5)(20) == 15
    """
    @functools.wraps(f)
    def applied(*args, **kwargs):
        supplied = list(args)
        filled = _fill(bound, supplied, 'partial')
        return f(*filled, *supplied, **kwargs)
    return applied


def partial_right(f: Callable[..., U], *bound: Any) -> Callable[..., U]:
    """prefill trailing arguments; leftover call-time arguments go in front"""
    @functools.wraps(f)
    def applied(*args, **kwargs):
        supplied = list(args)
        filled = _fill(bound, supplied, 'partial_right')
        return f(*supplied, *filled, **kwargs)
    return applied


def bind(f: Callable[..., U], value: Any) -> Callable[..., U]:
    """bind the first argument"""
    return lambda *args: f(value, *args)


def bind2(f: Callable[..., U], value: Any) -> Callable[..., U]:
    """bind the second argument"""
    return lambda first, *args: f(first, value, *args)


def bindn(f: Callable[..., U], *values: Any) -> Callable[..., U]:
    """bind leading arguments"""
    return lambda *args: f(*values, *args)


def bindall(obj: Any, *names: str) -> Any:
    """
    turn the named functions of a mapping (or attributes of an object) into
    closures over obj itself. missing names are ignored.
    """
    from .predicates import is_mapping
    for name in names:
        if is_mapping(obj):
            method = obj.get(name)
            if method is not None: obj[name] = bind(method, obj)
        else:
            method = getattr(obj, name, None)
            if method is not None: setattr(obj, name, bind(method, obj))
    return obj


# --- composition ---

def compose(*fs: Callable[..., Any]) -> Callable[..., Any]:
    """
    right to left: compose(f, g, h)(x) == f(g(h(x))).
    the innermost function may take any arguments, the rest take one.
    """
    if not fs: return identity
    inner, outer = fs[-1], fs[-2::-1]

    def composed(*args, **kwargs):
        result = inner(*args, **kwargs)
        for f in outer:
            result = f(result)
        return result
    return composed


def pipe(value: Any, *fs: Callable[[Any], Any]) -> Any:
    """left to right: pipe(x, f, g, h) == h(g(f(x)))"""
    for f in fs:
        value = f(value)
    return value


def thread(value: Any, *forms: Union[Callable[[Any], Any], tuple]) -> Any:
    """
    pipe with fold steps. a callable maps the state, a tuple (f, *args)
    folds args into the state as f(state, arg).
    thread(2, inc, (mul, 3), (pow_, 2)) == 81
    """
    from .traversal import reduce
    state = value
    for form in forms:
        if callable(form):
            state = form(state)
        else:
            f, *args = form
            state = reduce(args, f, state)
    return state


def thread_right(value: Any, *forms: Union[Callable[[Any], Any], tuple]) -> Any:
    """like thread, but a tuple (f, *args) folds [*args, state] without a seed"""
    from .traversal import reduce
    state = value
    for form in forms:
        if callable(form):
            state = form(state)
        else:
            f, *args = form
            state = reduce([*args, state], f)
    return state


def dispatch(*fs: Callable[..., Any]) -> Callable[..., Any]:
    """first result that is not none, trying fs in order"""
    def dispatched(*args):
        for f in fs:
            result = f(*args)
            if result is not None: return result
        return None
    return dispatched


def unfold(f: Callable[[Any], Optional[Tuple[T, Any]]], seed: Any) -> List[T]:
    """
    build a list from a seed. f returns (value, next_seed), or none to stop.
    unfold(lambda v: (v, v * 2) if v < 100 else None, 10) -> [10, 20, 40, 80]
    """
    result: List[T] = []
    while True:
        step = f(seed)
        if step is None: return result
        value, seed = step
        if value is None: return result
        result.append(value)


def complement(f: Callable[..., Any]) -> Callable[..., bool]:
    return lambda *args, **kwargs: not f(*args, **kwargs)


def juxtapose(value: Any, *fs: Callable[[Any], Any]) -> Tuple[Any, ...]:
    """(f(value) for each f)"""
    return tuple(f(value) for f in fs)


def wrap(f: Callable[..., Any], wrapper: Callable[..., U]) -> Callable[..., U]:
    """wrapper(f, *args) on every call"""
    return lambda *args: wrapper(f, *args)


def times(f: Callable[[int], U], n: int = 1) -> List[U]:
    """[f(1), ..., f(n)]"""
    return [f(i) for i in range(1, n + 1)]


def cond(conditions: Sequence[Tuple[Callable[..., Any], Callable[..., U]]]) -> Callable[..., Optional[U]]:
    """run the action of the first (predicate, action) pair whose predicate passes"""
    def chosen(*args):
        for predicate, action in conditions:
            if predicate(*args): return action(*args)
        return None
    return chosen


def both(*fs: Callable[..., Any]) -> Callable[..., bool]:
    return lambda *args: all(f(*args) for f in fs)


def either(*fs: Callable[..., Any]) -> Callable[..., bool]:
    return lambda *args: any(f(*args) for f in fs)


def neither(*fs: Callable[..., Any]) -> Callable[..., bool]:
    return lambda *args: not any(f(*args) for f in fs)


# process-wide id source, never reset
_ids = itertools.count(0)
_ids_lock = threading.Lock()


def unique_id(template: Union[None, str, Callable[[int], Any]] = None) -> Any:
    """
    next process-wide id, starting at 0. a str template is rendered with
    str.format (unique_id('id{}') -> 'id3'), a callable one is called with the id.
    """
    with _ids_lock:
        current = next(_ids)
    if isinstance(template, str): return template.format(current)
    if callable(template): return template(current)
    return current


# --- argument shaping ---

def flip(f: Callable[..., U]) -> Callable[..., U]:
    """call f with the arguments reversed"""
    return lambda *args: f(*reversed(args))


def nth_arg(n: int) -> Callable[..., Any]:
    """the n-th argument, 1-based; negative n counts from the end"""
    def pick(*args):
        index = n - 1 if n > 0 else len(args) + n
        return args[index] if 0 <= index < len(args) else None
    return pick


def unary(f: Callable[[Any], U]) -> Callable[..., U]:
    return lambda *args: f(args[0] if args else None)


def ary(f: Callable[..., U], n: int = 1) -> Callable[..., U]:
    """call f with at most n arguments"""
    return lambda *args: f(*args[:n])


def noarg(f: Callable[[], U]) -> Callable[..., U]:
    return lambda *args: f()


def rearg(f: Callable[..., U], indexes: Sequence[int]) -> Callable[..., U]:
    """reorder arguments: the i-th argument passed to f is the indexes[i]-th received (1-based)"""
    def rearranged(*args):
        return f(*(args[i - 1] if 1 <= i <= len(args) else None for i in indexes))
    return rearranged


def over(*fs: Callable[..., Any]) -> Callable[..., List[Any]]:
    """[f(*args) for each f]"""
    return lambda *args: [f(*args) for f in fs]


def over_every(*fs: Callable[..., Any]) -> Callable[..., bool]:
    """every f passes on the same arguments"""
    return lambda *args: all(over(*fs)(*args))


def over_some(*fs: Callable[..., Any]) -> Callable[..., bool]:
    return lambda *args: any(over(*fs)(*args))


def over_args(f: Callable[..., U], *transforms: Callable[[Any], Any]) -> Callable[..., U]:
    """transform the i-th argument with the i-th transform before calling f"""
    def transformed(*args):
        args = [t(arg) for t, arg in zip(transforms, args)] + list(args[len(transforms):])
        return f(*args)
    return transformed


def converge(f: Callable[[Any, Any], U], g: Callable[..., Any], h: Callable[..., Any]) -> Callable[..., U]:
    """f(g(*args), h(*args))"""
    return lambda *args: f(g(*args), h(*args))


def time(f: Callable[..., U], *args: Any) -> Tuple[float, U]:
    """(elapsed seconds, result) of f(*args)"""
    start = _time.perf_counter()
    result = f(*args)
    return _time.perf_counter() - start, result
