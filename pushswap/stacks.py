"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from itertools import pairwise


class Op(str, Enum):
    """An operation on the stacks, valued by its command name."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_op(line: str) -> Op:
    """Parse one command line, which must be an operation name and a newline."""
    if not line.endswith("\n"):
        raise ValueError(f"unterminated operation: {line!r}")
    try:
        return Op(line[:-1])
    except ValueError:
        raise ValueError(f"unknown operation: {line!r}") from None


def _swap(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


def _push(source: list[int], target: list[int]) -> bool:
    if not source:
        return False
    target.insert(0, source.pop(0))
    return True


def _both(
    action: Callable[[list[int]], bool], a: list[int], b: list[int]
) -> bool:
    # The combined operations do nothing unless both stacks can take part.
    if len(a) < 2 or len(b) < 2:
        return False
    action(a)
    action(b)
    return True


_ACTIONS: dict[Op, Callable[["Stacks"], bool]] = {
    Op.SA: lambda s: _swap(s.a),
    Op.SB: lambda s: _swap(s.b),
    Op.SS: lambda s: _both(_swap, s.a, s.b),
    Op.PA: lambda s: _push(s.b, s.a),
    Op.PB: lambda s: _push(s.a, s.b),
    Op.RA: lambda s: _rotate(s.a),
    Op.RB: lambda s: _rotate(s.b),
    Op.RR: lambda s: _both(_rotate, s.a, s.b),
    Op.RRA: lambda s: _reverse_rotate(s.a),
    Op.RRB: lambda s: _reverse_rotate(s.b),
    Op.RRR: lambda s: _both(_reverse_rotate, s.a, s.b),
}


@dataclass
class Stacks:
    """Stacks a and b, top first, with the operations that took effect."""

    a: list[int]
    b: list[int] = field(default_factory=list)
    capacity: int = field(init=False)
    history: list[Op] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)
        self.capacity = len(self.a) + len(self.b)

    def apply(self, op: Op | str) -> bool:
        """Perform an operation; return whether it changed anything."""
        op = Op(op)
        applied = _ACTIONS[op](self)
        if applied:
            self.history.append(op)
        return applied

    def is_solved(self) -> bool:
        """True when a is in ascending order and b is empty."""
        return not self.b and all(x <= y for x, y in pairwise(self.a))