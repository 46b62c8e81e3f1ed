"""The two stacks and the eleven operations that may be applied to them."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import PushSwapError
from .stats import StackStats, compute_stats

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


class Stacks:
    """Stack A, stack B, the operation counter and the log of recorded operations.

    Index 0 of each list is the top of the stack.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.op_count = 0
        self.log: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def stats(self) -> StackStats:
        """Return the current statistics of both stacks."""
        return compute_stats(self.a, self.b)

    def _done(self, name: str, record: bool) -> None:
        if record:
            self.log.append(name)
        self.op_count += 1

    @staticmethod
    def _swap_top(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if stack:
            stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if stack:
            stack.insert(0, stack.pop())

    def sa(self, record: bool = True) -> None:
        """Swap the top two elements of A; nothing happens with fewer than two."""
        if self._swap_top(self.a):
            self._done("sa", record)

    def sb(self, record: bool = True) -> None:
        """Swap the top two elements of B; nothing happens with fewer than two."""
        if self._swap_top(self.b):
            self._done("sb", record)

    def ss(self, record: bool = True) -> None:
        """Run ``sa`` and ``sb`` together, counted as one operation."""
        self.sa(False)
        self.sb(False)
        if record:
            self.log.append("ss")
        self.op_count -= 1

    def pa(self, record: bool = True) -> None:
        """Move the top of B onto A; nothing happens when B is empty."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._done("pa", record)

    def pb(self, record: bool = True) -> None:
        """Move the top of A onto B; nothing happens when A is empty."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._done("pb", record)

    def ra(self, record: bool = True) -> None:
        """Shift A up by one: the top element becomes the bottom one."""
        self._rotate(self.a)
        self._done("ra", record)

    def rb(self, record: bool = True) -> None:
        """Shift B up by one: the top element becomes the bottom one."""
        self._rotate(self.b)
        self._done("rb", record)

    def rr(self, record: bool = True) -> None:
        """Run ``ra`` and ``rb`` together, counted as one operation."""
        self.ra(False)
        self.rb(False)
        if record:
            self.log.append("rr")
        self.op_count -= 1

    def rra(self, record: bool = True) -> None:
        """Shift A down by one: the bottom element becomes the top one."""
        self._reverse_rotate(self.a)
        self._done("rra", record)

    def rrb(self, record: bool = True) -> None:
        """Shift B down by one: the bottom element becomes the top one."""
        self._reverse_rotate(self.b)
        self._done("rrb", record)

    def rrr(self, record: bool = True) -> None:
        """Run ``rra`` and ``rrb`` together, counted as one operation."""
        self.rra(False)
        self.rrb(False)
        if record:
            self.log.append("rrr")
        self.op_count -= 1

    def apply(self, name: str) -> None:
        """Run the operation called ``name`` without recording it.

        Raises PushSwapError for a name that is not an operation.
        """
        if name not in OPERATIONS:
            raise PushSwapError()
        getattr(self, name)(False)