import pytest

from chancekit.ranges import between_floats, resolve
from chancekit.types import RangeSpec


def test_plain_number_is_returned_unchanged():
    assert resolve(7) == 7
    assert resolve(-2.5) == -2.5


def test_degenerate_range_returns_its_bound():
    assert resolve({"min": 5, "max": 5}) == 5


def test_range_spec_uses_uniform_source():
    assert resolve(RangeSpec(min=10, max=20), random_fn=lambda: 0.25) == 12.5


def test_mapping_range_is_sampled_within_bounds():
    for _ in range(200):
        value = resolve({"min": 1.0, "max": 3.0})
        assert 1.0 <= value < 3.0


def test_reversed_range_is_not_validated():
    assert resolve({"min": 10, "max": 0}, random_fn=lambda: 0.5) == 5
    assert RangeSpec(min=3, max=1).span == -2


def test_between_floats():
    assert between_floats(-1.0, 1.0, random_fn=lambda: 0.0) == -1.0
    assert between_floats(-1.0, 1.0, random_fn=lambda: 0.75) == 0.5


@pytest.mark.parametrize(
    "value",
    [
        "7",
        None,
        True,
        {"min": 1},
        {"min": "low", "max": 2},
        {"min": "5", "max": "5"},
        {"min": True, "max": 3},
    ],
)
def test_unsupported_values_raise_type_error(value):
    with pytest.raises(TypeError):
        resolve(value)


def test_integer_bounds_are_accepted():
    assert resolve({"min": 2, "max": 4}, random_fn=lambda: 0.5) == 3
