"""Summary figures about the two stacks and the rotation plan record."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, fields
from typing import Optional

# The order in which planned operations are carried out.
_EXECUTION_ORDER = ("pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


def middle_index(length: int) -> int:
    """Return the midpoint index of a stack of ``length`` elements.

    Even lengths give ``length / 2``; odd lengths round up.
    """
    half, odd = divmod(length, 2)
    return half + odd


def is_sorted(values: Sequence[int]) -> bool:
    """Return True when ``values`` is strictly ascending."""
    return all(left < right for left, right in zip(values, values[1:]))


def _extreme(values: Sequence[int], pick) -> tuple[Optional[int], int]:
    """Return the extreme value and the index of its first occurrence."""
    if not values:
        return None, 0
    value = pick(values)
    return value, values.index(value)


@dataclass(frozen=True)
class StackStats:
    """Extremes, their positions and midpoints of stacks A and B.

    For an empty stack the extreme values are ``None`` and their
    indices are 0.
    """

    max_a: Optional[int]
    idx_max_a: int
    min_a: Optional[int]
    idx_min_a: int
    max_b: Optional[int]
    idx_max_b: int
    min_b: Optional[int]
    idx_min_b: int
    half_a: int
    half_b: int


def compute_stats(stack_a: Sequence[int], stack_b: Sequence[int]) -> StackStats:
    """Gather the statistics of both stacks."""
    max_a, idx_max_a = _extreme(stack_a, max)
    min_a, idx_min_a = _extreme(stack_a, min)
    max_b, idx_max_b = _extreme(stack_b, max)
    min_b, idx_min_b = _extreme(stack_b, min)
    return StackStats(
        max_a=max_a,
        idx_max_a=idx_max_a,
        min_a=min_a,
        idx_min_a=idx_min_a,
        max_b=max_b,
        idx_max_b=idx_max_b,
        min_b=min_b,
        idx_min_b=idx_min_b,
        half_a=middle_index(len(stack_a)),
        half_b=middle_index(len(stack_b)),
    )


@dataclass
class RotationPlan:
    """How many times each operation is to be run before a push.

    Every count starts at zero.
    """

    sa: int = 0
    sb: int = 0
    ss: int = 0
    pa: int = 0
    pb: int = 0
    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0

    def steps(self) -> Iterator[str]:
        """Yield the operation names in execution order, each as often as planned."""
        for name in _EXECUTION_ORDER:
            for _ in range(getattr(self, name)):
                yield name

    @property
    def is_empty(self) -> bool:
        """True when no operation is planned."""
        return all(getattr(self, f.name) == 0 for f in fields(self))