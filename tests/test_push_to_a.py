import pytest
from hypothesis import given, strategies as st

from pushswap.push_to_a import (
    find_smallest_greater_in_a,
    find_smallest_less_in_a,
    plan_b_to_a,
)
from pushswap.stacks import Stacks
from pushswap.stats import RotationPlan


def _make(a, b):
    stacks = Stacks(a)
    stacks.b = list(b)
    return stacks


def _is_rotated_sorted(values):
    low = values.index(min(values))
    rotated = values[low:] + values[:low]
    return rotated == sorted(values)


def _run(stacks, plan):
    for name in plan.steps():
        getattr(stacks, name)(False)
    stacks.pa(False)


def test_smallest_greater_picks_closest_above():
    stacks = _make([5, 1, 9, 7], [6])
    idx = find_smallest_greater_in_a(stacks, 0)
    assert stacks.a[idx] == 7


def test_smallest_greater_none_when_all_smaller():
    stacks = _make([1, 2, 3], [10])
    assert find_smallest_greater_in_a(stacks, 0) is None


def test_smallest_less_picks_minimum_of_a():
    stacks = _make([4, 2, 8], [5])
    idx = find_smallest_less_in_a(stacks, 0)
    assert stacks.a[idx] == 2


def test_smallest_less_none_when_all_greater():
    stacks = _make([7, 8], [1])
    assert find_smallest_less_in_a(stacks, 0) is None


@given(
    st.lists(st.integers(-100, 100), min_size=1, max_size=12, unique=True),
    st.integers(-100, 100),
)
def test_smallest_greater_invariant(a, pivot):
    stacks = _make([v for v in a if v != pivot] or [pivot + 1], [pivot])
    idx = find_smallest_greater_in_a(stacks, 0)
    above = [v for v in stacks.a if v > pivot]
    if idx is None:
        assert above == []
    else:
        assert stacks.a[idx] == min(above)


@given(
    st.lists(st.integers(-100, 100), min_size=1, max_size=12, unique=True),
    st.integers(-100, 100),
)
def test_smallest_less_invariant(a, pivot):
    stacks = _make([v for v in a if v != pivot] or [pivot - 1], [pivot])
    idx = find_smallest_less_in_a(stacks, 0)
    below = [v for v in stacks.a if v < pivot]
    if idx is None:
        assert below == []
    else:
        assert stacks.a[idx] == min(below)


def test_plan_with_empty_b_is_empty():
    assert plan_b_to_a(_make([3, 1, 2], [])).is_empty


def test_plan_with_empty_a_raises():
    with pytest.raises(ValueError):
        plan_b_to_a(_make([], [4, 2]))


def test_plan_nothing_to_rotate_when_slot_is_on_top():
    assert plan_b_to_a(_make([3, 5], [1])) == RotationPlan()


def test_plan_places_element_in_order():
    stacks = _make([1, 3], [2])
    plan = plan_b_to_a(stacks)
    assert plan == RotationPlan(rra=1)
    _run(stacks, plan)
    assert _is_rotated_sorted(stacks.a)
    assert stacks.b == []


def test_plan_prefers_cheapest_element():
    stacks = _make([10, 20, 30, 40], [35, 15])
    plan = plan_b_to_a(stacks)
    _run(stacks, plan)
    assert stacks.a[0] == 35
    assert stacks.b == [15]
    assert _is_rotated_sorted(stacks.a)


def test_plan_empty_when_chosen_element_is_on_b_midpoint():
    stacks = _make([10, 20, 30, 40, 50, 60], [35, 36, 5])
    assert plan_b_to_a(stacks).is_empty


def test_plan_does_not_modify_stacks():
    stacks = _make([10, 20, 30, 40], [35, 15])
    plan_b_to_a(stacks)
    assert stacks.a == [10, 20, 30, 40]
    assert stacks.b == [35, 15]
    assert stacks.op_count == 0