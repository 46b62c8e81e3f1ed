import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stats import (
    RotationPlan,
    StackStats,
    compute_stats,
    is_sorted,
    middle_index,
)

unique_ints = st.lists(
    st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True
)


@pytest.mark.parametrize("length, expected", [(0, 0), (4, 2), (5, 3)])
def test_middle_index_examples(length, expected):
    assert middle_index(length) == expected


@given(st.integers(min_value=0, max_value=10_000))
def test_middle_index_rounds_up_half(length):
    mid = middle_index(length)
    assert mid * 2 >= length
    assert mid * 2 <= length + 1


def test_is_sorted_trivial_cases():
    assert is_sorted([]) is True
    assert is_sorted([42]) is True


def test_is_sorted_rejects_equal_neighbours():
    assert is_sorted([1, 1]) is False


def test_is_sorted_rejects_descending_pair():
    assert is_sorted([2, 1, 3]) is False


@given(unique_ints)
def test_is_sorted_true_for_sorted_unique(values):
    assert is_sorted(sorted(values)) is True


@given(unique_ints.filter(lambda v: len(v) >= 2))
def test_is_sorted_false_for_reverse_sorted(values):
    assert is_sorted(sorted(values, reverse=True)) is False


@given(unique_ints.filter(bool), unique_ints.filter(bool))
def test_compute_stats_matches_extremes(stack_a, stack_b):
    stats = compute_stats(stack_a, stack_b)
    assert stats.max_a == max(stack_a)
    assert stats.min_a == min(stack_a)
    assert stack_a[stats.idx_max_a] == stats.max_a
    assert stack_a[stats.idx_min_a] == stats.min_a
    assert stats.max_b == max(stack_b)
    assert stats.min_b == min(stack_b)
    assert stack_b[stats.idx_max_b] == stats.max_b
    assert stack_b[stats.idx_min_b] == stats.min_b
    assert stats.half_a == middle_index(len(stack_a))
    assert stats.half_b == middle_index(len(stack_b))


def test_compute_stats_concrete_stack():
    stats = compute_stats([3, 9, -4, 7], [5])
    assert stats == StackStats(
        max_a=9,
        idx_max_a=1,
        min_a=-4,
        idx_min_a=2,
        max_b=5,
        idx_max_b=0,
        min_b=5,
        idx_min_b=0,
        half_a=middle_index(4),
        half_b=middle_index(1),
    )


def test_compute_stats_empty_b():
    stats = compute_stats([1, 2], [])
    assert stats.max_b is None
    assert stats.min_b is None
    assert stats.idx_max_b == 0
    assert stats.idx_min_b == 0
    assert stats.half_b == 0


def test_compute_stats_first_occurrence_wins():
    stats = compute_stats([2, 8, 8, 2], [])
    assert stats.idx_max_a == 1
    assert stats.idx_min_a == 0


def test_rotation_plan_starts_empty():
    plan = RotationPlan()
    assert plan.is_empty is True
    assert list(plan.steps()) == []


def test_rotation_plan_steps_follow_execution_order():
    plan = RotationPlan(rrr=1, ra=2, rr=1, rb=1, rrb=1, rra=1, pb=1, pa=1)
    assert list(plan.steps()) == [
        "pa", "pb", "ra", "ra", "rb", "rr", "rra", "rrb", "rrr",
    ]
    assert plan.is_empty is False


def test_rotation_plan_swaps_are_not_executed():
    plan = RotationPlan(sa=2, sb=1, ss=3)
    assert list(plan.steps()) == []
    assert plan.is_empty is False


@given(
    st.integers(min_value=0, max_value=20),
    st.integers(min_value=0, max_value=20),
    st.integers(min_value=0, max_value=20),
)
def test_rotation_plan_step_counts(ra, rrb, rr):
    plan = RotationPlan(ra=ra, rrb=rrb, rr=rr)
    steps = list(plan.steps())
    assert len(steps) == ra + rrb + rr
    assert steps.count("ra") == ra
    assert steps.count("rrb") == rrb
    assert steps.count("rr") == rr