import logging
import suite
from funqy import (
    noop, identity, call, constant, apply_spec, once, before, after, memoize, curry, partial,
    partial_right, bind, bind2, bindn, bindall, compose, pipe, thread, thread_right, dispatch,
    unfold, complement, juxtapose, wrap, times, cond, both, either, neither, unique_id, flip,
    nth_arg, unary, ary, noarg, rearg, over, over_every, over_some, over_args, converge, time,
    last, LRUCache, _,
)
from funqy.operators import add, sub, mul, pow_

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


def square(x): return x ** 2
def inc(x): return x + 1
def half(x): return x / 2


# --- call-count state machines ---

@test("once replays the first arguments and still runs f every time")
def test_once():
    calls = []

    def record(x):
        calls.append(x)
        return x

    h = once(record)
    assert_that(h(5) == 5, "first call")
    assert_that(h(9) == 5, "replayed arguments")
    assert_that(len(calls) == 2, "f ran on both calls")


@test("once with identity")
def test_once_identity():
    h = once(identity)
    assert_that(h(1) == 1 and h(2) == 1, "first argument wins")


@test("before freezes the count-th arguments")
def test_before():
    greet = before(lambda name: f"hello {name}", 3)
    results = [greet(n) for n in ['john', 'moe', 'james', 'joseph', 'allan']]
    assert_equal(results, ['hello john', 'hello moe', 'hello james', 'hello james', 'hello james'])


@test("after is a no-op until the count-th call")
def test_after():
    f = after(identity, 3)
    assert_equal([f(1), f(2), f(3), f(4)], [None, None, 3, 4])


# --- memoize ---

@test("memoize computes once per argument")
def test_memoize():
    calls = []

    def slow_square(x):
        calls.append(x)
        return x * x

    fast = memoize(slow_square)
    assert_that(fast(4) == 16 and fast(4) == 16, "cached result")
    assert_that(calls == [4], "computed once")
    assert_that(len(fast.cache) == 1, "cache exposed")


@test("memoize caches none results")
def test_memoize_none():
    calls = []
    f = memoize(lambda x: calls.append(x))
    f(1)
    f(1)
    assert_that(len(calls) == 1, "none is a cached value")


@test("memoize speeds up recursive definitions")
def test_memoize_recursive():
    @memoize
    def fib(n):
        return n if n < 2 else fib(n - 1) + fib(n - 2)
    assert_that(fib(80) == 23416728348467685, "fib(80)")


@test("memoize with a bounded cache recomputes evicted entries")
def test_memoize_lru():
    calls = []
    f = memoize(lambda x: calls.append(x) or x, cache=LRUCache(1))
    f(1)
    f(2)
    f(1)
    assert_equal(calls, [1, 2, 1])


@test("memoize logs misses at debug level")
def test_memoize_logging():
    messages = []

    class Collect(logging.Handler):
        def emit(self, record): messages.append(record.getMessage())

    logger = logging.getLogger('funqy.functions')
    handler, previous = Collect(), logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        f = memoize(inc)
        f(1)
        f(1)
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
    assert_that(len([m for m in messages if 'memoize miss' in m]) == 1, "one miss logged")


# --- curry / partial ---

@test("curry collects one argument at a time")
def test_curry():
    add3 = curry(lambda x, y, z: x + y + z, 3)
    assert_that(add3(1)(2)(3) == 6, "three steps")
    assert_that(curry(mul)(5)(4) == 20, "default arity 2")


@test("curried functions do not share state between completions")
def test_curry_independent():
    g = curry(lambda x, y, z: x + y + z, 3)
    assert_that(g(1)(2)(3) == 6, "first completion")
    assert_that(g(10)(20)(30) == 60, "second completion starts fresh")
    step = g(1)
    assert_that(step(2)(3) == 6 and step(5)(5) == 11, "a partial step can branch")


@test("curry needs a positive arity")
def test_curry_invalid():
    assert_raises(ValueError, curry, add, 0)


@test("partial fills placeholders then appends")
def test_partial():
    assert_that(partial(sub, 20)(5) == 15, "leading argument")
    assert_that(partial(sub, _, 5)(20) == 15, "placeholder")


@test("partial_right puts call-time arguments in front")
def test_partial_right():
    join = lambda *args: ','.join(args)
    assert_that(partial_right(join, 'a', 'b', 'c')('d') == 'd,a,b,c', "plain")
    assert_that(partial_right(join, 'a', _, 'c')('d', 'b') == 'b,a,d,c', "placeholder")


@test("partial raises when placeholders go unfilled")
def test_partial_missing():
    assert_raises(TypeError, partial(sub, _, _), 1, match="placeholders")


@test("bind variants")
def test_bind():
    assert_that(bind(sub, 10)(3) == 7, "first argument")
    assert_equal(bind2(last, 2)([1, 2, 3, 4, 5, 6]), [5, 6])
    assert_that(bindn(lambda *a: ''.join(a), 'x', 'y')('z') == 'xyz', "leading arguments")


@test("bindall closes functions over their mapping")
def test_bindall():
    window = {
        'set_pos': lambda w, x, y: w.update(x=x, y=y),
        'get_x': lambda w: w['x'],
    }
    bindall(window, 'set_pos', 'get_x', 'missing')
    window['set_pos'](10, 15)
    assert_that(window['x'] == 10 and window['y'] == 15, "bound to the mapping")
    assert_that(window['get_x']() == 10, "getter bound")


# --- composition ---

@test("compose runs right to left, pipe left to right")
def test_compose_pipe():
    assert_that(compose(square, inc, half)(10) == 36, "square(inc(half(10)))")
    assert_that(pipe(10, half, inc, square) == 36, "same chain written forwards")
    assert_that(compose()(3) == 3, "empty composition is identity")


@test("compose lets the innermost function take several arguments")
def test_compose_multi():
    assert_that(compose(inc, add)(2, 3) == 6, "inc(add(2, 3))")


@test("thread folds tuple forms into the state")
def test_thread():
    assert_that(thread(2, inc, half, square) == 2.25, "plain functions")
    assert_that(thread(2, inc, (mul, 3), (pow_, 2)) == 81, "fold steps")
    assert_that(thread_right(2, inc, (mul, 3), (pow_, 2)) == 512, "right fold puts the state last")


@test("dispatch returns the first non-none result")
def test_dispatch():
    f = dispatch(noop, lambda v: v + 1 if v > 5 else None, lambda v: v * 2)
    assert_that(f(7) == 8 and f(3) == 6, "first answer wins")


@test("unfold builds a list from a seed")
def test_unfold():
    assert_equal(unfold(lambda v: (v, v * 2) if v < 100 else None, 10), [10, 20, 40, 80])


# --- small combinators ---

@test("basic helpers")
def test_basics():
    assert_that(noop(1, 2) is None, "noop")
    assert_that(call(add, 1, 2) == 3, "call")
    assert_that(constant(7)('anything') == 7, "constant")
    stats = apply_spec({'min': min, 'max': max})
    assert_equal(stats(5, 4, 10, 1, 8), {'min': 1, 'max': 10})


@test("predicate combinators")
def test_predicates():
    assert_that(complement(lambda: True)() is False, "complement")
    in_range = both(lambda x: x > 0, lambda x: x < 10, lambda x: x % 2 == 0)
    assert_that(in_range(2) and not in_range(9), "both")
    some = either(lambda x: x > 0, lambda x: x % 2 == 0)
    assert_that(some(0) and not some(-3), "either")
    none_of = neither(lambda x: x > 10, lambda x: x % 2 == 0)
    assert_that(none_of(7) and not none_of(12) and not none_of(8), "neither")


@test("cond picks the first matching branch")
def test_cond():
    describe = cond([
        (lambda v: v % 2 == 0, lambda v: f"{v} is even"),
        (lambda v: v % 3 == 0, lambda v: f"{v} is a multiple of 3"),
    ])
    assert_that(describe(4) == '4 is even', "first branch")
    assert_that(describe(9) == '9 is a multiple of 3', "second branch")
    assert_that(describe(7) is None, "no branch")


@test("juxtapose, wrap, times and converge")
def test_fanning():
    assert_equal(juxtapose(10, square, inc, half), (100, 11, 5.0))
    shout = wrap(str.upper, lambda f, s: f(s) + '!')
    assert_that(shout('hi') == 'HI!', "wrap")
    assert_equal(times(square, 3), [1, 4, 9])
    assert_that(converge(add, square, lambda x: x ** 3)(5) == 150, "converge")


@test("unique_id counts up and renders templates")
def test_unique_id():
    a, b = unique_id(), unique_id()
    assert_that(a >= 0 and b == a + 1, "monotonic")
    assert_that(unique_id('id{}') == f"id{b + 1}", "format template")
    assert_that(unique_id(lambda n: f"${n}$") == f"${b + 2}$", "callable template")


@test("argument shaping")
def test_argument_shaping():
    collect = lambda *args: args
    assert_that(flip(lambda *a: ''.join(a))('a', 'b', 'c') == 'cba', "flip")
    assert_that(nth_arg(3)('a', 'b', 'c') == 'c' and nth_arg(-2)('a', 'b', 'c') == 'b', "nth_arg")
    assert_equal(unary(collect)('a', 'b'), ('a',))
    assert_equal(ary(collect, 2)(1, 2, 3, 4), (1, 2))
    assert_that(noarg(lambda x='default': x)(1) == 'default', "noarg")
    assert_equal(rearg(collect, [3, 2, 1])('a', 'b', 'c'), ('c', 'b', 'a'))


@test("over family")
def test_over():
    assert_equal(over(min, max)(5, 10, 12, 4, 3), [3, 12])
    all_even = lambda *a: all(v % 2 == 0 for v in a)
    all_positive = lambda *a: all(v >= 0 for v in a)
    assert_that(not over_every(all_even, all_positive)(2, 4, -1, 8), "over_every fails")
    assert_that(over_every(all_even, all_positive)(8, 4, 6, 10), "over_every passes")
    assert_that(over_some(all_even, all_positive)(10, 3, 2, 6), "over_some passes")
    assert_that(not over_some(all_even, all_positive)(-1, -5, -3), "over_some fails")
    assert_equal(over_args(collect_two, lambda x: x * 3, square)(1, 2, 3), (3, 4, 3))


def collect_two(*args): return args


@test("time reports elapsed seconds and the result")
def test_time():
    elapsed, result = time(sum, range(1000))
    assert_that(elapsed >= 0 and result == 499500, "timing")


if __name__ == "__main__":
    suite.run(title="funqy functions test suite")
