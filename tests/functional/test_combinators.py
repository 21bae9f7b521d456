import pytest
import fnkit as fk
from fnkit.functional import combinators as cb


def add_one(x):
    return x + 1


def double(x):
    return x * 2


def test_pipe_runs_left_to_right():
    assert cb.pipe([add_one, double])(5) == 12


def test_compose_runs_right_to_left():
    assert cb.compose([add_one, double])(5) == 11


def test_single_and_empty_chains():
    assert cb.pipe([double])(4) == 8
    assert cb.compose([double])(4) == 8
    assert cb.pipe([])(4) == 4
    assert cb.compose([])(4) == 4


def test_identity_returns_same_object():
    value = [1, 2]
    assert cb.identity(value) is value


def test_constant_ignores_arguments():
    always_five = cb.constant(5)
    assert always_five() == 5
    assert always_five(1, 2, key="x") == 5


def test_tap_returns_value_after_side_effect():
    seen = []
    value = {"a": 1}
    assert cb.tap(value, seen.append) is value
    assert seen == [value]


def test_partial_prepends_bound_arguments():
    def join(a, b, c, sep="-"):
        return sep.join([a, b, c])

    bound = cb.partial(join, ["x", "y"])
    assert bound("z") == "x-y-z"
    assert bound("z", sep="+") == "x+y+z"


def test_partial_captures_arguments_at_construction():
    args = [1]
    add = cb.partial(lambda a, b: a + b, args)
    args.append(99)
    assert add(2) == 3


def test_pipeline_of_library_operations():
    evens_doubled = fk.pipe(
        [
            lambda xs: fk.filter(xs, lambda x: x % 2 == 0),
            lambda xs: fk.map(xs, double),
            fk.sum,
        ]
    )
    assert evens_doubled(fk.range(1, 7)) == 24.0


def test_top_level_exports():
    for name in ["group_by", "partition_all", "merge", "compose", "mean", "range"]:
        assert name in fk.__all__
        assert callable(getattr(fk, name))


def test_callback_errors_propagate_through_pipe():
    def fail(x):
        raise KeyError("missing")

    with pytest.raises(KeyError):
        cb.pipe([add_one, fail])(1)
