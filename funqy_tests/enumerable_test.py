import numpy as np
import pandas as pd
import suite
from funqy import F, Enumerable, from_iterable, from_range, repeat, empty, generate
from funqy.enumerable import OrderedEnumerable
from dgen import from_schema

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

employee_schema = {
    'name': 'first_name',
    'team': {'_dgen_provider': 'choice', 'from': ['core', 'data', 'ops']},
    'level': ('pyint', {'min_value': 1, 'max_value': 4}),
    'salary': ('pyint', {'min_value': 40000, 'max_value': 160000}),
}


# --- chains ---

@test("select, map and terminal list")
def test_basic_chain():
    result = F([1, 2, 3, 4, 5, 6]).select(lambda v: v % 2 == 0).map(lambda v: v * 10).to.list()
    assert_equal(result, [20, 40, 60])


@test("callbacks may take the 1-based position")
def test_positions():
    result = F(['a', 'b', 'c']).map(lambda v, k: f"{k}:{v}").to.list()
    assert_equal(result, ['1:a', '2:b', '3:c'])


@test("nothing runs until a terminal call, and data is produced once")
def test_lazy_cached():
    calls = []

    def produce():
        calls.append(1)
        return [3, 1, 2]

    source = Enumerable(produce)
    chain = source.map(lambda v: v + 1)
    assert_that(calls == [], "lazy")
    chain.to.list()
    chain.to.list()
    source.to.count()
    assert_that(calls == [1], "produced once")


@test("core operations")
def test_core_operations():
    data = F([0, 1, [2, [3]], None, 4])
    assert_equal(data.compact().to.list(), [1, [2, [3]], 4])
    assert_equal(data.flatten().to.list(), [0, 1, 2, 3, None, 4])
    assert_equal(F([1, 2, 3]).reverse().to.list(), [3, 2, 1])
    assert_equal(F([1, 2, 3, 4]).take(2).to.list(), [1, 2])
    assert_equal(F([1, 2, 3, 4]).rest(3).to.list(), [3, 4])
    assert_equal(F([1, 2, 3, 4]).slice(2, 3).to.list(), [2, 3])
    assert_equal(F([1, 2]).append([3], [4]).prepend(0).to.list(), [0, 1, 2, 3, 4])
    assert_equal(F([1, 2, 3]).interpose(0).to.list(), [1, 0, 2, 0, 3])
    assert_equal(F([1, 2, 3]).reject(lambda v: v == 2).to.list(), [1, 3])
    assert_equal(F([3, 1, 2]).pipe(sorted, reversed).to.list(), [3, 2, 1])


@test("sort_by leaves the source data alone")
def test_sort_by_copy():
    source = [3, 1, 2]
    assert_equal(F(source).sort_by().to.list(), [1, 2, 3])
    assert_equal(source, [3, 1, 2])


# --- ordering ---

@test("order_by then_by sorts on several keys")
def test_order_by_then_by():
    people = from_schema(employee_schema, seed=21).list(30)
    ordered = F(people).order_by('team').then_by_descending('salary').to.list()
    for a, b in zip(ordered, ordered[1:]):
        assert_that(a['team'] <= b['team'], "teams ascending")
        if a['team'] == b['team']:
            assert_that(a['salary'] >= b['salary'], "salary descending within a team")


@test("order_by accepts a comparator")
def test_order_by_comparator():
    longer_first = lambda a, b: len(a) > len(b)
    words = F(['bb', 'a', 'ccc', 'dd']).order_by(lambda w: w, longer_first).to.list()
    assert_equal(words, ['ccc', 'bb', 'dd', 'a'])


@test("ties keep their input order")
def test_order_stable():
    rows = [{'k': 1, 'id': 'a'}, {'k': 0, 'id': 'b'}, {'k': 1, 'id': 'c'}, {'k': 0, 'id': 'd'}]
    ids = F(rows).order_by('k').map(lambda r: r['id']).to.list()
    assert_equal(ids, ['b', 'd', 'a', 'c'])


@test("sorted_index finds the 1-based insertion point")
def test_sorted_index():
    ordered = F([5, 1, 3]).order_by(lambda v: v)
    assert_that(isinstance(ordered, OrderedEnumerable), "ordered chain")
    assert_that(ordered.sorted_index(2) == 2, "between 1 and 3")
    assert_that(ordered.sorted_index(9) == 4, "past the end")
    assert_that(F([5, 1, 3]).order_by_descending(lambda v: v).sorted_index(4) == 2, "descending")


@test("ordering a chain reuses data already produced")
def test_order_after_materialise():
    chain = F(v for v in [3, 1, 2])
    assert_equal(chain.to.list(), [3, 1, 2])
    assert_equal(chain.order_by(lambda v: v).to.list(), [1, 2, 3])
    assert_equal(chain.order_by_descending(lambda v: v).then_by(lambda v: v).to.list(), [3, 2, 1])


# --- accessors ---

@test("set accessor")
def test_set_accessor():
    assert_equal(F([1, 2, 2, 3]).set.union([3, 4]).to.list(), [1, 2, 3, 4])
    assert_equal(F([[1], [2], [1]]).set.unique().to.list(), [[1], [2]])
    assert_equal(F([1, 2, 3]).set.intersection([2, 3, 4]).to.list(), [2, 3])
    assert_equal(F([1, 2, 3]).set.difference([2]).to.list(), [1, 3])
    assert_that(F([1, 2]).set.disjoint([3]) and not F([1, 1]).set.is_unique(), "predicates")


@test("combinatorics accessor")
def test_comb_accessor():
    assert_equal(F([1, 2, 3, 4, 5]).comb.partitions(2).to.list(), [[1, 2], [3, 4], [5]])
    assert_that(F([1, 2, 3]).comb.permutations().to.count() == 6, "3! orderings")
    assert_that(F([1, 2, 3]).comb.powerset().to.count() == 8, "2^3 subsets")
    assert_equal(F([1, 2, 3]).comb.windows(2).to.list(), [[1, 2], [2, 3]])
    assert_that(F([1, 2, 3, 4]).comb.binomial_coefficient(2) == 6, "4 choose 2")


@test("grouping accessor")
def test_group_accessor():
    people = from_schema(employee_schema, seed=5).list(25)
    groups = F(people).group.group_by(lambda p: p['team'])
    assert_that(sum(len(g) for g in groups.values()) == 25, "every record grouped once")
    counts = F(people).group.count_by(lambda p: p['team'])
    assert_that(all(counts[team] == len(groups[team]) for team in groups), "counts agree")


@test("stats accessor")
def test_stats_accessor():
    assert_that(F([1, 2, 3, 4]).stats.mean() == 2.5, "mean")
    assert_that(F([{'x': 2}, {'x': 5}]).stats.sum(lambda r: r['x']) == 7, "selector")
    assert_that(empty().stats.mean() is None, "empty mean")


# --- terminals ---

@test("numpy and pandas conversions")
def test_conversions():
    arr = F([1, 2, 3]).to.array()
    assert_that(isinstance(arr, np.ndarray) and arr.sum() == 6, "array")
    people = from_schema(employee_schema, seed=8).list(6)
    frame = F(people).to.df()
    assert_that(isinstance(frame, pd.DataFrame) and len(frame) == 6, "dataframe")
    assert_that(list(frame.columns) == ['name', 'team', 'level', 'salary'], "columns")
    assert_that(isinstance(F([1]).to.pandas(), pd.Series), "series")


@test("terminal folds and lookups")
def test_terminal():
    data = F([1, 2, 3, 4])
    assert_that(data.to.reduce(lambda acc, v: acc + v) == 10, "reduce")
    assert_that(data.to.reduce_right(lambda acc, v: acc + str(v), '') == '4321', "reduce_right")
    assert_that(data.to.first(lambda v: v > 2) == 3, "first passing")
    assert_that(data.to.first(lambda v: v > 9) is None, "nothing passes")
    assert_that(data.to.include(3) and data.to.detect(3) == 3, "membership")
    assert_that(data.to.all(lambda v: v > 0), "all")
    assert_that(data.to.count(2) == 1 and len(data) == 4, "counting")
    assert_equal(data.to.dict(lambda v: v, lambda v: v * v), {1: 1, 2: 4, 3: 9, 4: 16})


# --- factories ---

@test("factories")
def test_factories():
    assert_equal(from_range(3).to.list(), [1, 2, 3])
    assert_equal(from_range(2, 8, 3).to.list(), [2, 5, 8])
    assert_equal(repeat('x', 3).to.list(), ['x', 'x', 'x'])
    assert_that(empty().to.first() is None, "empty")
    assert_equal(generate(lambda i: i * i, 4).to.list(), [1, 4, 9, 16])
    assert_equal(from_iterable(iter([1, 2])).to.list(), [1, 2])


if __name__ == "__main__":
    suite.run(title="funqy enumerable test suite")
