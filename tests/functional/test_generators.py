import pytest
from fnkit.functional import generators as gen


def test_range_single_argument_counts_from_zero():
    assert gen.range(5) == [0, 1, 2, 3, 4]
    assert gen.range(0) == []


def test_range_with_bounds_and_step():
    assert gen.range(0, 10, 2) == [0, 2, 4, 6, 8]
    assert gen.range(2, 5) == [2, 3, 4]


def test_range_descending():
    assert gen.range(10, 0, -3) == [10, 7, 4, 1]
    assert gen.range(2, -1, -1) == [2, 1, 0]


def test_range_step_away_from_end_is_empty():
    assert gen.range(0, 5, -1) == []
    assert gen.range(5, 0) == []


def test_range_zero_step_raises():
    with pytest.raises(ValueError, match="step"):
        gen.range(0, 10, 0)


def test_repeat_shares_the_same_value():
    value = {"k": 1}
    result = gen.repeat(value, 3)
    assert len(result) == 3
    assert all(item is value for item in result)
    assert gen.repeat("x", 0) == []
    assert gen.repeat("x", -2) == []


def test_times():
    assert gen.times(4, lambda i: i * i) == [0, 1, 4, 9]
    assert gen.times(0, lambda i: i) == []
