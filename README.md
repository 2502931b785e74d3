# pushswap

pushswap sorts a list of distinct integers with two stacks, **a** and **b**.
Only these operations are allowed:

| Op    | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of a                |
| `sb`  | swap the top two elements of b                |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of b onto a                      |
| `pb`  | move the top of a onto b                      |
| `ra`  | rotate a: the top goes to the bottom          |
| `rb`  | rotate b                                      |
| `rr`  | `ra` and `rb` together                        |
| `rra` | reverse rotate a: the bottom goes to the top  |
| `rrb` | reverse rotate b                              |
| `rrr` | `rra` and `rrb` together                      |

An operation that cannot apply does nothing. Swaps and rotations need at least
two elements, and a push needs a non-empty source stack. The combined
operations (`ss`, `rr`, `rrr`) do nothing unless both stacks have at least two
elements.

The first argument becomes the top of stack a.

## Installation

```
pip install .
```

## Solving

```
push-swap 3 2 5 1 4
```

This prints one operation per line. Those operations sort stack a in ascending
order and leave stack b empty. Nothing is printed in these cases:

- no arguments are given;
- the input is already sorted.

The command prints `Error` in these cases:

- an argument is not an optional `+` or `-` followed by digits;
- an argument falls outside the 32-bit signed range;
- an argument appears more than once.

Every number must be its own argument. A quoted list such as `"3 2 5"` is
rejected.

The method depends on the count. Two or three values are handled directly, and
up to five by parking the smallest values on b. Larger inputs use a chunk sort
with 1, 5, 10 or 15 chunks for up to 15, 100, 500 or more values.

## Checking

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker takes the same arguments and validates them the same way. It reads
operations from standard input, one name per line, and each line must end with
a newline. At the end it prints `OK` if stack a is sorted and stack b is empty,
and `KO` otherwise. At the first line that is not a known operation it prints
`Error` and stops. With no arguments it prints nothing and reads nothing.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import check

ops = solve([3, 2, 5, 1, 4])
print(check([3, 2, 5, 1, 4], (op.value + "\n" for op in ops)))  # True
```

- `pushswap.sorting.solve(values)` returns a list of `Op` values. It raises
  `InputError` on duplicates and returns an empty list for sorted input.
- `pushswap.sorting.sort_stacks(stacks)` sorts a `Stacks` whose stack a holds
  the ranks `0..n-1`. `pushswap.validate.normalize` turns values into such
  ranks.
- `pushswap.checker.check(values, lines)` returns whether the command lines
  sort the values. It raises `ValueError` on a line that is not a command.
- `pushswap.validate.parse_numbers(args)` validates command-line style
  arguments and raises `InputError` (a `ValueError`) on bad input.
- `pushswap.stacks.Stacks` holds lists `a` and `b`, top first.
  `apply(op)` returns whether the operation changed anything and records it in
  `history`. `is_solved()` tells whether a is ascending and b is empty.
- `pushswap.stacks.parse_op(line)` turns a newline-terminated name into an
  `Op`.

## Limitations

The package has no visualiser or interactive mode. The only user interfaces are
the two line-oriented commands above.