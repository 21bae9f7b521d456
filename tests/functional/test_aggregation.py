from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest
from fnkit.functional import aggregation as agg


def test_empty_aggregates():
    assert agg.sum([]) == 0.0
    assert agg.product([]) == 1.0
    assert agg.mean([]) == 0.0
    assert agg.min([]) is None
    assert agg.max([]) is None
    assert agg.min_by([], len) is None
    assert agg.max_by([], len) is None


@pytest.mark.parametrize("func", [agg.sum, agg.product, agg.mean])
@pytest.mark.parametrize("values", [[], [1, 2, 3], [2]])
def test_numeric_folds_always_return_float(func, values):
    assert type(func(values)) is float


def test_sum_and_product():
    assert agg.sum([1, 2, 3]) == 6.0
    assert agg.sum([0.1, 0.2]) == pytest.approx(0.3)
    assert agg.product([2, 3, 4]) == 24.0
    assert agg.product([5, 0, 2]) == 0.0


def test_sum_counts_booleans_and_numpy_scalars():
    assert agg.sum([True, True, False]) == 2.0
    assert agg.sum([np.int64(2), np.float32(0.5)]) == pytest.approx(2.5)


@pytest.mark.parametrize("func", [agg.sum, agg.product, agg.mean])
@pytest.mark.parametrize("values", [[1, None], ["1.5"], [2, "abc"], [1 + 2j]])
def test_numeric_folds_reject_non_real_values(func, values):
    with pytest.raises(TypeError, match=rf"{func.__name__}\(\) requires real numbers"):
        func(values)


def test_rejection_names_the_offending_index():
    with pytest.raises(TypeError, match="NoneType None at index 2"):
        agg.mean([1, 2, None])


def test_sum_accepts_decimal_and_fraction():
    assert agg.sum([Decimal("1.5"), Fraction(1, 2)]) == 2.0
    assert agg.product([Fraction(1, 2), np.bool_(True), 4]) == 2.0


def test_mean():
    assert agg.mean([1, 2, 3, 4]) == pytest.approx(2.5)
    assert agg.mean([-1, 1]) == 0.0


def test_min_and_max():
    assert agg.min([3, 1, 2]) == 1
    assert agg.max([3, 1, 2]) == 3
    assert agg.min(["b", "a"]) == "a"


def test_min_and_max_keep_first_on_ties():
    # 1.0 == 1, the float comes first
    assert type(agg.min([1.0, 1, 2])) is float
    assert type(agg.max([2.0, 2, 1])) is float


def test_min_by_and_max_by():
    words = ["bb", "a", "cc", "d"]
    assert agg.min_by(words, len) == "a"
    assert agg.max_by(words, len) == "bb"


def test_inputs_are_not_mutated():
    values = [3, 1, 2]
    agg.sum(values)
    agg.min(values)
    agg.max_by(values, lambda x: -x)
    assert values == [3, 1, 2]
