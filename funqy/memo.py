"""
cache policies for `memoize`.

a cache maps one argument to one result. `UnboundedCache` never evicts,
`LRUCache` drops the least recently used entry past maxsize, `WeakCache`
lets the garbage collector reclaim results nobody else holds (best effort:
values that cannot be weakly referenced are kept strongly).
"""
from __future__ import annotations
import weakref
from abc import ABC, abstractmethod
from collections import OrderedDict
from .types import *


class MemoCache(ABC):
    """key -> result store used by memoize"""

    @abstractmethod
    def lookup(self, key: Any, default: Any = MISSING) -> Any: ...

    @abstractmethod
    def store(self, key: Any, value: Any) -> None: ...

    @abstractmethod
    def __contains__(self, key: Any) -> bool: ...

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def clear(self) -> None: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)})"


class UnboundedCache(MemoCache):
    def __init__(self):
        self._data: Dict[Any, Any] = {}

    def lookup(self, key, default=MISSING):
        return self._data.get(key, default)

    def store(self, key, value):
        self._data[key] = value

    def __contains__(self, key): return key in self._data

    def __len__(self): return len(self._data)

    def clear(self): self._data.clear()


class _Strong:
    """box for values that refuse weak references"""
    __slots__ = ('value',)

    def __init__(self, value): self.value = value

    def __call__(self): return self.value


class WeakCache(MemoCache):
    """entries vanish once their result is no longer referenced elsewhere"""

    def __init__(self):
        self._data: Dict[Any, Callable[[], Any]] = {}

    def _ref(self, key, value):
        def evict(_ref, key=key):
            if self._data.get(key) is _ref: del self._data[key]
        try:
            return weakref.ref(value, evict)
        except TypeError:
            return _Strong(value)

    def lookup(self, key, default=MISSING):
        ref = self._data.get(key)
        if ref is None: return default
        value = ref()
        return default if value is None and not isinstance(ref, _Strong) else value

    def store(self, key, value):
        self._data[key] = self._ref(key, value)

    def __contains__(self, key):
        return self.lookup(key) is not MISSING

    def __len__(self): return len(self._data)

    def clear(self): self._data.clear()


class LRUCache(MemoCache):
    def __init__(self, maxsize: int = 128):
        if maxsize <= 0: raise ValueError("lru maxsize must be positive")
        self.maxsize = maxsize
        self._data: OrderedDict = OrderedDict()

    def lookup(self, key, default=MISSING):
        if key not in self._data: return default
        self._data.move_to_end(key)
        return self._data[key]

    def store(self, key, value):
        self._data[key] = value
        self._data.move_to_end(key)
        while len(self._data) > self.maxsize:
            self._data.popitem(last=False)

    def __contains__(self, key): return key in self._data

    def __len__(self): return len(self._data)

    def clear(self): self._data.clear()

    def __repr__(self) -> str:
        return f"LRUCache(size={len(self)}, maxsize={self.maxsize})"


def make_cache(policy: Optional[str] = None, maxsize: Optional[int] = None) -> MemoCache:
    """build a cache for a policy name, defaulting to the process config"""
    from .config import get_config, MEMO_POLICIES
    config = get_config()
    policy = policy or config.memo_policy
    if policy == 'unbounded': return UnboundedCache()
    if policy == 'weak': return WeakCache()
    if policy == 'lru': return LRUCache(maxsize or config.memo_maxsize)
    raise ValueError(f"unknown memo policy '{policy}', expected one of {MEMO_POLICIES}")
