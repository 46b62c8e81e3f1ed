"""Validation and parsing of the command-line numbers for stack A."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import PushSwapError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_LEADING_SPACE = frozenset(" \t\n\v\f\r")
_ALLOWED = _DIGITS | {" ", "-", "+"}


def parse_int(text: str) -> int:
    """Convert ``text`` to a 32-bit signed integer.

    Leading whitespace and a single sign are accepted; every remaining
    character must be a decimal digit.
    """
    rest = text.lstrip("".join(_LEADING_SPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    if any(ch not in _DIGITS for ch in rest):
        raise PushSwapError()
    value = sign * int(rest) if rest else 0
    if not INT_MIN <= value <= INT_MAX:
        raise PushSwapError()
    return value


def validate_argument(arg: str) -> None:
    """Reject an argument holding anything but digits, spaces and signs.

    A sign must be immediately followed by a digit.
    """
    for pos, ch in enumerate(arg):
        if ch in "+-":
            following = arg[pos + 1 : pos + 2]
            if following not in _DIGITS or not following:
                raise PushSwapError()
        if ch not in _ALLOWED:
            raise PushSwapError()


def _split(arg: str) -> list[str]:
    return [piece for piece in arg.split(" ") if piece]


def count_numbers(args: Iterable[str]) -> int:
    """Validate every argument and return how many numbers they hold."""
    total = 0
    for arg in args:
        validate_argument(arg)
        pieces = _split(arg)
        if not pieces:
            raise PushSwapError()
        total += len(pieces)
    return total


def check_duplicates(values: Iterable[int]) -> list[int]:
    """Return ``values`` as a list, raising if any number repeats."""
    items = list(values)
    if len(set(items)) != len(items):
        raise PushSwapError()
    return items


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the arguments (program name excluded) into the contents of stack A."""
    arguments = list(args)
    count_numbers(arguments)
    values = [parse_int(piece) for arg in arguments for piece in _split(arg)]
    return check_duplicates(values)