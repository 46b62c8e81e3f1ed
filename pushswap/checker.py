"""Verifying that a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Optional

from .errors import PushSwapError
from .parsing import parse_arguments
from .stacks import Stacks
from .stats import is_sorted


def run_operations(stacks: Stacks, lines: Iterable[str]) -> None:
    """Apply each newline-terminated operation line to ``stacks``.

    Raises PushSwapError for a line that is not an operation name followed
    by a newline.
    """
    for line in lines:
        if not line.endswith("\n"):
            raise PushSwapError()
        stacks.apply(line[:-1])


def check(values: Iterable[int], lines: Iterable[str]) -> str:
    """Return ``"OK"`` if the operations leave A sorted and B empty, else ``"KO"``."""
    stacks = Stacks(values)
    run_operations(stacks, lines)
    return "OK" if is_sorted(stacks.a) and not stacks.b else "KO"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read operations from standard input and report whether they sort the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 1
    try:
        verdict = check(values, sys.stdin)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write(f"{verdict}\n")
    return 0