"""Choosing the cheapest element of stack B to push back onto stack A."""

from __future__ import annotations

from typing import Optional

from .stacks import Stacks
from .stats import RotationPlan, StackStats


def find_smallest_greater_in_a(stacks: Stacks, i: int) -> Optional[int]:
    """Return the index of the smallest value in A that is greater than ``b[i]``.

    Returns None when no value in A is greater.
    """
    pivot = stacks.b[i]
    best: Optional[int] = None
    for idx, value in enumerate(stacks.a):
        if value > pivot and (best is None or value < stacks.a[best]):
            best = idx
    return best


def find_smallest_less_in_a(stacks: Stacks, i: int) -> Optional[int]:
    """Return the index of the smallest value in A that is less than ``b[i]``.

    Returns None when no value in A is smaller.
    """
    pivot = stacks.b[i]
    best: Optional[int] = None
    for idx, value in enumerate(stacks.a):
        if value < pivot and (best is None or value < stacks.a[best]):
            best = idx
    return best


def _upper(i: int, target: int) -> tuple[int, RotationPlan]:
    """Both positions sit in the upper halves: rotate up together."""
    if i == target:
        return target, RotationPlan(rr=target)
    if i < target:
        return target, RotationPlan(rr=i, ra=target - i)
    return i, RotationPlan(rr=target, rb=i - target)


def _lower(i: int, target: int, len_a: int, len_b: int) -> tuple[int, RotationPlan]:
    """Both positions sit in the lower halves: rotate down together."""
    down_b = len_b - i
    down_a = len_a - target
    if down_b == down_a:
        return down_a, RotationPlan(rrr=down_a)
    if down_b < down_a:
        return down_a, RotationPlan(rrr=down_b, rra=down_a - down_b)
    return down_b, RotationPlan(rrr=down_a, rrb=down_b - down_a)


def _different(
    i: int, target: int, len_a: int, len_b: int, stats: StackStats
) -> tuple[int, RotationPlan]:
    """The positions sit in opposite halves: rotate each stack its own way.

    When ``i`` sits exactly on B's midpoint the cost is counted but no
    rotation is planned, and the upward rotation of A is taken as
    ``i - target``; both follow the established planning rules.
    """
    if i < stats.half_b and target >= stats.half_a:
        return i + (len_a - target), RotationPlan(rb=i, rra=len_a - target)
    if i >= stats.half_b and target < stats.half_a:
        cost = target + (len_b - i)
        if i > stats.half_b:
            return cost, RotationPlan(rrb=len_b - i, ra=i - target)
        return cost, RotationPlan()
    return 0, RotationPlan()


def _candidate(stacks: Stacks, i: int, stats: StackStats) -> tuple[int, RotationPlan]:
    target = find_smallest_greater_in_a(stacks, i)
    if target is None:
        target = find_smallest_less_in_a(stacks, i)
    if target is None:
        raise ValueError("stack A is empty")
    len_a, len_b = len(stacks.a), len(stacks.b)
    if i < stats.half_b and target < stats.half_a:
        return _upper(i, target)
    if i >= stats.half_b and target >= stats.half_a:
        return _lower(i, target, len_a, len_b)
    return _different(i, target, len_a, len_b, stats)


def plan_b_to_a(stacks: Stacks) -> RotationPlan:
    """Plan the rotations that bring the cheapest element of B and its slot in A to the top.

    Each element of B is paired with the smallest greater value in A, or with
    the smallest value of A when none is greater. The first element with the
    strictly lowest cost wins. The push itself is not part of the plan.
    Raises ValueError when B has elements but A is empty.
    """
    stats = stacks.stats()
    best_cost: Optional[int] = None
    best_plan = RotationPlan()
    for i in range(len(stacks.b)):
        cost, plan = _candidate(stacks, i, stats)
        if best_cost is None or cost < best_cost:
            best_cost, best_plan = cost, plan
    return best_plan