"""Choosing the cheapest element of stack A to push onto stack B."""

from __future__ import annotations

from typing import Optional

from .stacks import Stacks
from .stats import RotationPlan, StackStats


def find_largest_in_b(stacks: Stacks, i: int) -> Optional[int]:
    """Return the index of the largest value in B that is greater than ``a[i]``.

    Returns None when no value in B is greater.
    """
    pivot = stacks.a[i]
    best: Optional[int] = None
    for idx, value in enumerate(stacks.b):
        if value > pivot and (best is None or value > stacks.b[best]):
            best = idx
    return best


def find_smallest_in_b(stacks: Stacks, i: int) -> Optional[int]:
    """Return the index of the closest value in B below ``a[i]``.

    That is the largest of the values in B that are smaller than ``a[i]``.
    Returns None when no value in B is smaller.
    """
    pivot = stacks.a[i]
    best: Optional[int] = None
    for idx, value in enumerate(stacks.b):
        if value < pivot and (best is None or value > stacks.b[best]):
            best = idx
    return best


def _upper(i: int, target: int) -> tuple[int, RotationPlan]:
    """Both positions sit in the upper halves: rotate up together."""
    if i == target:
        return target, RotationPlan(rr=target)
    if i < target:
        return target, RotationPlan(rr=i, rb=target - i)
    return i, RotationPlan(rr=target, ra=i - target)


def _lower(i: int, target: int, len_a: int, len_b: int) -> tuple[int, RotationPlan]:
    """Both positions sit in the lower halves: rotate down together."""
    down_a = len_a - i
    down_b = len_b - target
    if down_a == down_b:
        return down_b, RotationPlan(rrr=down_b)
    if down_a < down_b:
        return down_b, RotationPlan(rrr=down_a, rrb=down_b - down_a)
    return down_a, RotationPlan(rrr=down_b, rra=down_a - down_b)


def _different(
    i: int, target: int, len_a: int, len_b: int, stats: StackStats
) -> tuple[int, RotationPlan]:
    """The positions sit in opposite halves: rotate each stack its own way."""
    if i < stats.half_a and target >= stats.half_b:
        return i + (len_b - target), RotationPlan(ra=i, rrb=len_b - target)
    if i >= stats.half_a and target < stats.half_b:
        return target + (len_a - i), RotationPlan(rb=target, rra=len_a - i)
    return 0, RotationPlan()


def _candidate(stacks: Stacks, i: int, stats: StackStats) -> tuple[int, RotationPlan]:
    target = find_smallest_in_b(stacks, i)
    if target is None:
        target = find_largest_in_b(stacks, i)
    if target is None:
        raise ValueError("stack B is empty")
    len_a, len_b = len(stacks.a), len(stacks.b)
    if i < stats.half_a and target < stats.half_b:
        return _upper(i, target)
    if i >= stats.half_a and target >= stats.half_b:
        return _lower(i, target, len_a, len_b)
    return _different(i, target, len_a, len_b, stats)


def plan_a_to_b(stacks: Stacks) -> RotationPlan:
    """Plan the rotations that bring the cheapest element of A and its slot in B to the top.

    Each element of A is paired with the closest smaller value in B, or with
    the largest value of B when none is smaller. The first element with the
    strictly lowest cost wins. The push itself is not part of the plan.
    Raises ValueError when A has elements but B is empty.
    """
    stats = stacks.stats()
    best_cost: Optional[int] = None
    best_plan = RotationPlan()
    for i in range(len(stacks.a)):
        cost, plan = _candidate(stacks, i, stats)
        if best_cost is None or cost < best_cost:
            best_cost, best_plan = cost, plan
    return best_plan