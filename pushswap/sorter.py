"""Sorting stack A with the fewest planned operations, and the sorting command."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Optional

from .errors import PushSwapError
from .parsing import parse_arguments
from .push_to_a import plan_b_to_a
from .push_to_b import plan_a_to_b
from .stacks import Stacks
from .stats import RotationPlan, is_sorted


def execute_plan(stacks: Stacks, plan: RotationPlan, target: str) -> None:
    """Run the rotations of ``plan``, then push onto stack ``target``.

    ``target`` is ``"b"`` to finish with ``pb`` or ``"a"`` to finish with
    ``pa``. Every operation is recorded.
    """
    pushes = {"a": stacks.pa, "b": stacks.pb}
    if target not in pushes:
        raise ValueError(f"unknown target stack: {target!r}")
    for name in plan.steps():
        getattr(stacks, name)(True)
    pushes[target](True)


def sort_three(stacks: Stacks) -> None:
    """Put the top three elements of A in ascending order.

    With fewer than three elements in A nothing is done.
    """
    if len(stacks.a) < 3:
        return
    first, second, third = stacks.a[:3]
    if first < second and first < third and second > third:
        stacks.sa(True)
        stacks.ra(True)
    elif first > second and first > third and second > third:
        stacks.sa(True)
        stacks.rra(True)
    elif first < second and first > third and second > third:
        stacks.rra(True)
    elif first > second and first > third and second < third:
        stacks.ra(True)
    elif first > second and first < third and second < third:
        stacks.sa(True)


def rotate_min_to_top(stacks: Stacks) -> None:
    """Rotate A the shorter way until its smallest value is on top."""
    stats = stacks.stats()
    step = stacks.ra if stats.half_a > stats.idx_min_a else stacks.rra
    while stats.idx_min_a > 0:
        step(True)
        stats = stacks.stats()


def sort_small(stacks: Stacks) -> bool:
    """Sort A when it holds at most three elements.

    Returns True when A was small enough to be handled here.
    """
    if len(stacks.a) > 3:
        return False
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa(True)
        elif len(stacks.a) == 3:
            sort_three(stacks)
    return True


def sort_stacks(stacks: Stacks) -> None:
    """Sort A by moving elements to B and back in the cheapest order found."""
    if is_sorted(stacks.a):
        return
    stacks.pb(True)
    stacks.pb(True)
    while len(stacks.a) > 3:
        execute_plan(stacks, plan_a_to_b(stacks), "b")
    sort_three(stacks)
    while stacks.b:
        execute_plan(stacks, plan_b_to_a(stacks), "a")
    rotate_min_to_top(stacks)


def push_swap(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values`` on stack A."""
    stacks = Stacks(values)
    if not sort_small(stacks):
        sort_stacks(stacks)
    return list(stacks.log)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations sorting the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in push_swap(values)))
    return 0