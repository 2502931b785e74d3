"""The checker command: run operations read from input and judge the result."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.stacks import Stacks, parse_op
from pushswap.validate import InputError, parse_numbers


def execute(stacks: Stacks, line: str) -> bool:
    """Run one newline-terminated command; return False if it is not one."""
    try:
        op = parse_op(line)
    except ValueError:
        return False
    stacks.apply(op)
    return True


def check(values: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply the command lines to values on stack a; True if a ends sorted and b empty.

    Raises ValueError at the first line that is not a command.
    """
    stacks = Stacks(list(values))
    for line in lines:
        if not execute(stacks, line):
            raise ValueError(f"invalid command: {line!r}")
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input and print OK, KO or Error."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 0
    try:
        solved = check(numbers, sys.stdin)
    except ValueError:
        sys.stdout.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())