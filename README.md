# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a fixed set of
operations, and check whether a given list of operations sorts the
numbers.

## Operations

| name  | effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the first two elements of `a`              |
| `sb`  | swap the first two elements of `b`              |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the first element becomes last   |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the last element becomes first |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

A swap on a stack with fewer than two elements, or a push from an empty
stack, does nothing.

## Installation

```
pip install .
```

Python 3.10 or later is required; the package has no dependencies.

## Sorting

Give the numbers as arguments, separately or as space-separated strings.
The operations that sort them are printed one per line:

```
$ push-swap 2 1 3
sa
$ push-swap "3 2 1"
sa
rra
```

Input that is already sorted prints nothing, and so does running the
command with no arguments. An argument holding anything other than
digits, spaces and signs, a sign not followed by a digit, an empty
argument, a number outside the 32-bit signed range, or a duplicate number
prints `Error` on standard error and ends with status 1.

## Checking

`push-swap-checker` takes the same arguments and reads operations from
standard input, one per line. It prints `OK` if they leave `a` sorted and
`b` empty, and `KO` otherwise.

```
$ push-swap 4 2 9 1 | push-swap-checker 4 2 9 1
OK
```

Invalid arguments print `Error` on standard error with status 1. A line
that is not one of the operation names, including a last line without a
terminating newline, prints `Error` on standard error and ends with
status 0.

## From Python

```python
from pushswap.sorter import push_swap
from pushswap.checker import check

values = [5, 1, 4, 2, 3]
ops = push_swap(values)                       # e.g. ["pb", "pb", ...]
assert check(values, [f"{op}\n" for op in ops]) == "OK"
```

- `pushswap.parsing.parse_arguments(args)` turns command-line strings
  into a list of integers, raising `pushswap.errors.PushSwapError` for
  invalid input.
- `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, index 0 is
  the top), an operation counter `op_count` and a `log` of recorded
  operations. It has one method per operation; `Stacks.apply(name)`
  performs an operation given by name and raises `PushSwapError` for an
  unknown name.
- `pushswap.sorter` has `push_swap(values)`, returning the list of
  operation names, plus the steps it is built from (`sort_small`,
  `sort_three`, `sort_stacks`, `execute_plan`, `rotate_min_to_top`).
- `pushswap.checker.check(values, lines)` returns `"OK"` or `"KO"`; each
  line must be an operation name followed by `"\n"`.
- `pushswap.push_to_b.plan_a_to_b` and `pushswap.push_to_a.plan_b_to_a`
  return the `pushswap.stats.RotationPlan` for the cheapest next move;
  `pushswap.stats.compute_stats` gives the extremes and midpoints of both
  stacks as a `StackStats`.