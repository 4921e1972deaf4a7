"""
helpers for mappings and plain objects.

mapping functions also accept sequences, whose keys are 1-based positions.
`spread_path`, `flatten_path`, `extend` and `template` change their
argument in place; the rest build new containers.
"""
from __future__ import annotations
import inspect
from .types import *
from .predicates import is_mapping, is_table
from .traversal import pairs, _has_key, _get


def keys(obj: Container[Any]) -> List[Any]:
    return [key for key, _ in pairs(obj)]


def values(obj: Container[T]) -> List[T]:
    return [value for _, value in pairs(obj)]


def path(obj: Container[Any], *steps: Any) -> Optional[Any]:
    """follow nested keys; none as soon as one is missing"""
    value = obj
    for step in steps:
        if not is_table(value): return None
        value = _get(value, step)
        if value is None: return None
    return value


def spread_path(obj: Dict[Any, Any], *steps: Any) -> Dict[Any, Any]:
    """in place: move the entries of each nested mapping at steps up into obj"""
    for step in steps:
        nested = obj.get(step)
        if is_mapping(nested):
            for key in list(nested):
                obj[key] = nested.pop(key)
    return obj


def flatten_path(obj: Dict[Any, Any], *steps: Any) -> Dict[Any, Any]:
    """in place: copy the entries of each nested mapping at steps up into obj"""
    for step in steps:
        nested = obj.get(step)
        if is_mapping(nested):
            obj.update(nested)
    return obj


def kvpairs(obj: Container[T]) -> List[List[Any]]:
    """[[key, value], ...]"""
    return [[key, value] for key, value in pairs(obj)]


def to_obj(kv: Iterable[Sequence[Any]]) -> Dict[Any, Any]:
    """inverse of kvpairs"""
    return {pair[0]: pair[1] for pair in kv}


def invert(obj: Container[Any]) -> Dict[Any, Any]:
    """
    swap keys and values. values must be hashable; when two keys share a
    value the later one wins, so the round trip only holds for unique values.
    """
    return {value: key for key, value in pairs(obj)}


def property_(key: Any) -> Callable[[Any], Any]:
    """function reading key from whatever it is given"""
    return lambda obj: _get(obj, key) if is_table(obj) else getattr(obj, key, None)


def property_of(obj: Any) -> Callable[[Any], Any]:
    """function reading any key from obj"""
    return lambda key: _get(obj, key) if is_table(obj) else getattr(obj, key, None)


def to_boolean(value: Any) -> bool:
    return bool(value)


def extend(dest: Dict[Any, Any], *sources: Any) -> Dict[Any, Any]:
    """in place: copy every entry of each mapping source into dest, later sources win"""
    for source in sources:
        if is_mapping(source):
            dest.update(source)
    return dest


def methods(obj: Any = None, inherited: bool = False) -> List[str]:
    """
    names of the callable members of obj (the funqy package by default).
    mappings report keys holding callables; objects report public attributes,
    including those found on their class when inherited is set.
    """
    if obj is None:
        import funqy
        obj = funqy
    if is_mapping(obj):
        return [key for key, value in obj.items() if callable(value)]
    names = vars(obj) if hasattr(obj, '__dict__') and not inherited else dir(obj)
    return [name for name in names
            if not name.startswith('_') and callable(getattr(obj, name, None))
            and not inspect.isclass(getattr(obj, name, None))]


def clone(obj: T, shallow: bool = False) -> T:
    """copy of a container; nested containers are copied too unless shallow"""
    if not is_table(obj): return obj
    copy_value = (lambda v: v) if shallow else (lambda v: clone(v))
    if is_mapping(obj):
        return {key: copy_value(value) for key, value in obj.items()}
    copied = [copy_value(value) for value in obj]
    return tuple(copied) if isinstance(obj, tuple) else copied


def tap(obj: T, f: Callable[[T], Any]) -> T:
    """call f(obj) and return obj"""
    f(obj)
    return obj


def has(obj: Any, key: Any) -> bool:
    """key is present with a value other than none"""
    if is_table(obj): return _has_key(obj, key) and _get(obj, key) is not None
    return isinstance(key, str) and getattr(obj, key, None) is not None


def _names(selection: tuple) -> List[Any]:
    from .arrays import flatten
    return flatten(list(selection))


def pick(obj: Container[Any], *selection: Any) -> Dict[Any, Any]:
    """entries of obj at the given keys (nested lists of keys allowed)"""
    picked = {}
    for key in _names(selection):
        value = _get(obj, key)
        if value is not None: picked[key] = value
    return picked


def omit(obj: Container[Any], *selection: Any) -> Dict[Any, Any]:
    """entries of obj except the given keys"""
    excluded = _names(selection)
    return {key: value for key, value in pairs(obj) if key not in excluded}


def template(obj: Dict[Any, Any], defaults: Optional[Mapping[Any, Any]] = None) -> Dict[Any, Any]:
    """in place: fill keys of obj that are missing or falsy from defaults"""
    if not defaults: return obj
    for key, value in defaults.items():
        if not obj.get(key): obj[key] = value
    return obj


def result(obj: Any, method: Union[str, Callable[[Any], U]]) -> Any:
    """
    obj's member called with obj when it is callable, the member itself otherwise;
    a callable method that is not a member is applied to obj.
    """
    member = _get(obj, method) if is_table(obj) else (getattr(obj, method, None) if isinstance(method, str) else None)
    if member is not None:
        if not callable(member): return member
        return member(obj) if is_table(obj) else member()
    if callable(method): return method(obj)
    return None


def cast_array(value: Any) -> Container[Any]:
    """containers as they are, anything else wrapped in a list"""
    return value if is_table(value) else [value]
