from collections import Counter

import pytest

from chancekit.errors import (
    ChanceKitError,
    EmptySelectorError,
    InvalidWeightError,
    LengthMismatchError,
    NoValidEntriesError,
)
from chancekit.selectors.weighted import WeightedSelector, build_weighted


def _fixed(value: float):
    return lambda: value


def test_single_entry_is_always_drawn():
    selector = build_weighted(["only"], [1])

    assert [selector.draw() for _ in range(20)] == ["only"] * 20


def test_draw_returns_item_at_positive_index():
    items = ["a", "b", "c", "d", "e"]
    weights = [0, 2.5, -1, 0.5, 4]
    allowed = {"b", "d", "e"}

    for _ in range(500):
        assert build_weighted(items, weights).draw() in allowed


def test_zero_weight_is_never_selected():
    for _ in range(200):
        assert build_weighted(["a", "b"], [0, 5]).draw() == "b"


def test_equal_weights_are_roughly_uniform():
    trials = 3000
    counts = Counter(build_weighted(["a", "b", "c"], [1, 1, 1]).draw() for _ in range(trials))

    assert set(counts) == {"a", "b", "c"}
    for item in ("a", "b", "c"):
        assert abs(counts[item] / trials - 1 / 3) < 0.05


def test_pivot_is_fixed_at_construction():
    calls = []

    def source():
        calls.append(1)
        return 0.5

    selector = build_weighted(["a", "b", "c"], [1, 1, 1], random_fn=source)

    assert selector.pivot == 1.5
    assert selector.total == 3
    assert [selector.draw() for _ in range(5)] == ["b"] * 5
    assert len(calls) == 1


def test_boundary_goes_to_lower_index():
    # pivot lands exactly on the first prefix sum
    selector = build_weighted(["a", "b"], [2, 2], random_fn=_fixed(0.5))

    assert selector.draw() == "a"


def test_negative_weight_lowers_running_total():
    items = ["a", "b", "c"]
    weights = [1, -1, 1]

    assert build_weighted(items, weights, random_fn=_fixed(0.5)).draw() == "a"
    # running total drops back to 0 at "b", so the pivot 1.5 is never reached
    assert build_weighted(items, weights, random_fn=_fixed(0.75)).draw() == "c"


def test_length_mismatch_fails():
    with pytest.raises(LengthMismatchError) as excinfo:
        build_weighted(["a"], [1, 2])

    assert excinfo.value.items == 1
    assert excinfo.value.weights == 2
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    "items, weights",
    [
        (["a", "b"], [0, 0]),
        (["a", "b"], [-1, 0]),
        ([], []),
    ],
)
def test_no_positive_weight_fails(items, weights):
    with pytest.raises(NoValidEntriesError):
        build_weighted(items, weights)


@pytest.mark.parametrize("bad", ["1", None, True, [1], float("nan"), float("inf"), float("-inf")])
def test_non_numeric_weight_fails(bad):
    with pytest.raises(InvalidWeightError) as excinfo:
        build_weighted(["a", "b"], [1, bad])

    assert excinfo.value.index == 1
    assert isinstance(excinfo.value, ChanceKitError)


def test_trim_draws_each_item_once_then_fails():
    items = ["a", "b", "c"]
    weights = [1, 1, 1]
    selector = build_weighted(items, weights, trim=True)

    drawn = [selector.draw() for _ in range(3)]

    assert sorted(drawn) == ["a", "b", "c"]
    assert items == []
    assert weights == []
    with pytest.raises(EmptySelectorError):
        selector.draw()


def test_trim_replays_fixed_pivot():
    # pivot 2.5: "c" first, then the pivot overshoots the shrunken prefix sum
    # and the walk falls back to the last positive entry
    selector = build_weighted(["a", "b", "c"], [1, 1, 1], trim=True, random_fn=_fixed(2.5 / 3))

    assert [selector.draw(), selector.draw(), selector.draw()] == ["c", "b", "a"]


def test_trim_keeps_non_positive_entries():
    items = ["a", "b", "c"]
    weights = [0, 1, -2]
    selector = build_weighted(items, weights, trim=True)

    assert selector.draw() == "b"
    assert items == ["a", "c"]
    assert weights == [0, -2]
    with pytest.raises(EmptySelectorError):
        selector.draw()


def test_trim_requires_mutable_sequences():
    with pytest.raises(TypeError):
        build_weighted(("a", "b"), [1, 1], trim=True)

    # without trim, tuples are fine
    assert build_weighted(("a", "b"), (1, 0)).draw() == "a"


def test_iterating_trimming_selector_exhausts_it():
    selector = build_weighted(["x", "y", "z"], [3, 2, 1], trim=True)

    assert len(selector) == 3
    assert sorted(selector) == ["x", "y", "z"]
    assert len(selector) == 0


def test_selector_is_callable():
    selector = build_weighted(["a", "b"], [1, 3], random_fn=_fixed(0.9))

    assert isinstance(selector, WeightedSelector)
    assert selector() == "b"
    assert "trim=False" in repr(selector)
