import dataclasses
import suite
from funqy import sum_, product, mean, median, configure, get_config
from dgen import from_schema

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

reading_schema = {
    'sensor': 'word',
    'value': ('pyfloat', {'min_value': -50.0, 'max_value': 50.0}),
}


def _without_numpy(check):
    previous = get_config()
    configure(use_numpy=False)
    try:
        check()
    finally:
        configure(**dataclasses.asdict(previous))


@test("mean and median of small sequences")
def test_mean_median():
    assert_that(mean([1, 2, 3, 4, 5]) == 3, "mean")
    assert_that(median([1, 2, 3, 4]) == 2.5, "even median")
    assert_that(median([3, 1, 2]) == 2, "odd median")


@test("results are python scalars, not numpy ones")
def test_python_scalars():
    assert_that(type(sum_([1, 2, 3])) is int, "int sum")
    assert_that(type(mean([1, 2])) is float, "float mean")


@test("sum_ and product")
def test_sum_product():
    assert_that(sum_([1, 2, 3]) == 6, "sum")
    assert_that(product([1, 2, 3, 4]) == 24, "product")
    assert_that(sum_({'a': 1, 'b': 2}) == 3, "mapping values")
    assert_that(sum_([]) == 0 and product([]) == 1, "identities when empty")


@test("non-numeric values are folded with plain operators")
def test_non_numeric():
    assert_that(sum_(['a', 'b', 'c']) == 'abc', "string concatenation")
    assert_that(product(['ab', 2]) == 'abab', "string repetition")


@test("large ints are summed and multiplied exactly")
def test_large_ints():
    assert_that(product([10**10, 10**10]) == 10**20, "product past int64")
    assert_that(sum_([2**62, 2**62]) == 2**63, "sum past int64")
    assert_that(mean([2**62, 2**62]) == 2.0**62, "mean of large ints")


@test("median of an odd count is the middle element itself")
def test_median_odd():
    middle = median([3, 1, 2])
    assert_that(middle == 2 and type(middle) is int, "int stays int")
    assert_that(median([2.5, 0.5, 1.5]) == 1.5, "floats")


@test("mean and median of nothing are none")
def test_empty():
    assert_that(mean([]) is None, "mean")
    assert_that(median([]) is None, "median")


@test("mean of mixed text raises TypeError")
def test_mixed_types():
    assert_raises(TypeError, mean, [1, 'a'])


@test("numpy and plain python paths agree")
def test_paths_agree():
    values = [r['value'] for r in from_schema(reading_schema, seed=13).list(40)]
    with_numpy = (sum_(values), mean(values), median(values))
    results = []
    _without_numpy(lambda: results.append((sum_(values), mean(values), median(values))))
    for a, b in zip(with_numpy, results[0]):
        assert_that(abs(a - b) < 1e-9, f"{a} vs {b}")


if __name__ == "__main__":
    suite.run(title="funqy stats test suite")
