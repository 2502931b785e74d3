"""The push_swap command: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.sorting import solve
from pushswap.validate import InputError, is_sorted, parse_numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the integer arguments.

    Invalid arguments print "Error"; no arguments or sorted ones print nothing.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 0
    if is_sorted(numbers):
        return 0
    sys.stdout.writelines(f"{op}\n" for op in solve(numbers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())