r"""
'    ________ ____ ___ _______   ________ _____.___.
'    \_   _____/    |   \\      \  \_____  \\__  |   |
'     |    __) |    |   //   |   \  /  / \  \/   |   |
'     |     \  |    |  //    |    \/   \_/.  \____   |
'     \___  /  |______/ \____|__  /\_____\ \_/ ______|
'         \/                    \/        \__>/

functional helpers for python containers: traversal, search, generators,
set algebra, combinators, plus a chainable Enumerable over all of it.
"""
import logging

from . import operators
from . import operators as op
from .config import FunqyConfig, get_config, configure
from .types import MISSING, Literal, Match, Placeholder, _

from .predicates import (
    less, greater, is_mapping, is_sequence, is_table, is_array, is_iterable, is_empty,
    is_callable, is_function, is_string, is_none, is_boolean, is_number, is_nan,
    is_finite, is_integer,
)
from .traversal import (
    pairs, ipairs, as_callback, each, eachi, at, adjust, map_, mapv, mapkv, mapi, mapiv,
    mapikv, reduce, reduce_by, reduce_right, map_reduce, map_reduce_right, best, select,
    reject, all_, invoke, pluck, group_by, count_by, size, contains_keys, same_keys,
)
from .equality import (
    is_equal, include, detect, find, where, find_where, same, all_equal, count, countf,
    index_of, last_index_of, find_index, find_last_index,
)
from .generators import (
    partition, overlapping, aperture, sliding, pairwise, permutation, powerset, cycle,
    iterator, skip, tabulate, iterlen,
)
from .sorting import sort, sort_by, sorted_index, nsorted, sortedk, sortedv, max_, min_
from .sets import (
    unique, is_unique, duplicates, union, intersection, difference, symmetric_difference,
    disjoint,
)
from .arrays import (
    shuffle, sample, sample_prob, pack, reverse, fill, vector, zeros, ones, rep, range_,
    select_while, drop_while, add_top, push, prepend, shift, pop, unshift, pull,
    remove_range, interpose, intersperse, chunk, slice_, first, head, take, initial, last,
    rest, tail, nth, compact, flatten, append, zip_, transpose, zip_with, interleave,
    concat, xprod, xpairs, xpairs_right,
)
from .stats import sum_, product, mean, median
from .memo import MemoCache, UnboundedCache, WeakCache, LRUCache, make_cache
from .functions import (
    noop, identity, call, constant, always, apply_spec, once, before, after, memoize,
    curry, partial, partial_right, bind, bind2, bindn, bindall, compose, pipe, thread,
    thread_right, dispatch, unfold, complement, juxtapose, wrap, times, cond, both,
    either, neither, unique_id, flip, nth_arg, unary, ary, noarg, rearg, over,
    over_every, over_some, over_args, converge, time,
)
from .objects import (
    keys, values, path, spread_path, flatten_path, kvpairs, to_obj, invert, property_,
    property_of, to_boolean, extend, methods, clone, tap, has, pick, omit, template,
    result, cast_array,
)

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import from_iterable, from_range, repeat, empty, generate, funqy, F

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "operators", "op", "FunqyConfig", "get_config", "configure",
    "MISSING", "Literal", "Match", "Placeholder", "_",
    # predicates
    "less", "greater", "is_mapping", "is_sequence", "is_table", "is_array", "is_iterable",
    "is_empty", "is_callable", "is_function", "is_string", "is_none", "is_boolean",
    "is_number", "is_nan", "is_finite", "is_integer",
    # traversal
    "pairs", "ipairs", "as_callback", "each", "eachi", "at", "adjust", "map_", "mapv",
    "mapkv", "mapi", "mapiv", "mapikv", "reduce", "reduce_by", "reduce_right", "map_reduce",
    "map_reduce_right", "best", "select", "reject", "all_", "invoke", "pluck", "group_by",
    "count_by", "size", "contains_keys", "same_keys",
    # equality and search
    "is_equal", "include", "detect", "find", "where", "find_where", "same", "all_equal",
    "count", "countf", "index_of", "last_index_of", "find_index", "find_last_index",
    # generators
    "partition", "overlapping", "aperture", "sliding", "pairwise", "permutation",
    "powerset", "cycle", "iterator", "skip", "tabulate", "iterlen",
    # ordering and sets
    "sort", "sort_by", "sorted_index", "nsorted", "sortedk", "sortedv", "max_", "min_",
    "unique", "is_unique", "duplicates", "union", "intersection", "difference",
    "symmetric_difference", "disjoint",
    # arrays
    "shuffle", "sample", "sample_prob", "pack", "reverse", "fill", "vector", "zeros",
    "ones", "rep", "range_", "select_while", "drop_while", "add_top", "push", "prepend",
    "shift", "pop", "unshift", "pull", "remove_range", "interpose", "intersperse", "chunk",
    "slice_", "first", "head", "take", "initial", "last", "rest", "tail", "nth", "compact",
    "flatten", "append", "zip_", "transpose", "zip_with", "interleave", "concat", "xprod",
    "xpairs", "xpairs_right",
    # stats
    "sum_", "product", "mean", "median",
    # combinators
    "MemoCache", "UnboundedCache", "WeakCache", "LRUCache", "make_cache",
    "noop", "identity", "call", "constant", "always", "apply_spec", "once", "before",
    "after", "memoize", "curry", "partial", "partial_right", "bind", "bind2", "bindn",
    "bindall", "compose", "pipe", "thread", "thread_right", "dispatch", "unfold",
    "complement", "juxtapose", "wrap", "times", "cond", "both", "either", "neither",
    "unique_id", "flip", "nth_arg", "unary", "ary", "noarg", "rearg", "over",
    "over_every", "over_some", "over_args", "converge", "time",
    # objects
    "keys", "values", "path", "spread_path", "flatten_path", "kvpairs", "to_obj",
    "invert", "property_", "property_of", "to_boolean", "extend", "methods", "clone",
    "tap", "has", "pick", "omit", "template", "result", "cast_array",
    # chain
    "Enumerable", "OrderedEnumerable", "from_iterable", "from_range", "repeat", "empty",
    "generate", "funqy", "F",
]
