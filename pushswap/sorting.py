"""Choosing operations that sort stack a, from three-value cases to chunk sort."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pushswap.stacks import Op, Stacks
from pushswap.validate import InputError, is_sorted, normalize


def sort_two(stacks: Stacks) -> None:
    """Order the two values of stack a."""
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Op.SA)


def sort_three(stacks: Stacks) -> None:
    """Order the top three values of stack a with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("stack a holds fewer than three values")
    x, y, z = stacks.a[:3]
    if x < y < z:
        return
    if x > y and y < z and x < z:
        stacks.apply(Op.SA)
    elif x > y > z:
        stacks.apply(Op.SA)
        stacks.apply(Op.RRA)
    elif x > y and y < z and x > z:
        stacks.apply(Op.RA)
    elif x < y and y > z and x < z:
        stacks.apply(Op.SA)
        stacks.apply(Op.RA)
    elif x < y and y > z and x > z:
        stacks.apply(Op.RRA)


def sort_five(stacks: Stacks) -> None:
    """Sort up to five values by parking the smallest on b."""
    while len(stacks.a) > 3:
        min_index = stacks.a.index(min(stacks.a))
        size = len(stacks.a)
        if min_index <= size // 2:
            for _ in range(min_index):
                stacks.apply(Op.RA)
        else:
            for _ in range(size - min_index):
                stacks.apply(Op.RRA)
        stacks.apply(Op.PB)
    sort_three(stacks)
    while stacks.b:
        stacks.apply(Op.PA)


@dataclass
class _Chunk:
    index: int
    size: int
    count: int
    min_num: int
    max_num: int
    next_min: int
    next_max: int

    @classmethod
    def at(cls, index: int, size: int, count: int, capacity: int) -> _Chunk:
        last = capacity - 4
        max_num = last if index == count - 1 else (index + 1) * size - 1
        if index + 1 < count - 1:
            next_min = (index + 1) * size
            next_max = last if index + 2 == count else (index + 2) * size - 1
        else:
            next_min = next_max = -1
        return cls(index, size, count, index * size, max_num, next_min, next_max)


def _has_in_range(values: Sequence[int], low: int, high: int) -> bool:
    return any(low <= value <= high for value in values)


def _top_in_range(values: Sequence[int], low: int, high: int) -> bool:
    if low == -1 or high == -1 or not values:
        return False
    return low <= values[0] <= high


def _rotate_after_push(stacks: Stacks, chunk: _Chunk, chunk_left: bool) -> None:
    if chunk_left:
        low, high = chunk.min_num, chunk.max_num
    elif chunk.index + 1 < chunk.count - 1:
        low, high = chunk.next_min, chunk.next_max
    else:
        stacks.apply(Op.RB)
        return
    if _top_in_range(stacks.a, low, high):
        stacks.apply(Op.RB)
    else:
        stacks.apply(Op.RR)


def _push_chunk_to_b(stacks: Stacks, chunk: _Chunk) -> None:
    low, high = chunk.min_num, chunk.max_num
    while _has_in_range(stacks.a, low, high) and len(stacks.a) > 3:
        if _top_in_range(stacks.a, low, high):
            stacks.apply(Op.PB)
            if stacks.b[0] < (low + high) // 2:
                chunk_left = _has_in_range(stacks.a, low, high)
                _rotate_after_push(stacks, chunk, chunk_left)
        else:
            stacks.apply(Op.RA)


def _steps_to_top(values: Sequence[int], value: int) -> int:
    try:
        index = values.index(value)
    except ValueError:
        return -1
    size = len(values)
    return index if index <= size // 2 else size - index


def count_targets(stacks: Stacks, max_value: int) -> int:
    """Count how many values below max_value in b lie ever closer to its top."""
    b = stacks.b
    if len(b) == 1:
        return 0
    count = 0
    while max_value - count >= 0:
        current = _steps_to_top(b, max_value - count)
        following = _steps_to_top(b, max_value - count - 1)
        if current > following:
            count += 1
        else:
            break
    return count


def should_use_rrb(values: Sequence[int], value: int) -> bool:
    """Whether value is reached faster by reverse rotation.

    A negative value never is; a value that is absent always is.
    """
    if value < 0:
        return False
    try:
        index = values.index(value)
    except ValueError:
        return True
    return index > len(values) // 2


def rotate_to_top(stacks: Stacks, value: int) -> None:
    """Rotate stack b until value is on top."""
    b = stacks.b
    if value not in b:
        raise ValueError(f"{value} is not on stack b")
    if b[0] == value:
        return
    op = Op.RRB if should_use_rrb(b, value) else Op.RB
    while stacks.b[0] != value:
        stacks.apply(op)


def _push_to_a(stacks: Stacks, num_targets: int, max_value: int) -> None:
    while 0 < len(stacks.b) <= 2:
        stacks.apply(Op.PA)
    for i in range(num_targets + 1):
        if not stacks.b:
            break
        current = max_value - num_targets + i
        rotate_to_top(stacks, current)
        stacks.apply(Op.PA)
        if i < num_targets - 1:
            if should_use_rrb(stacks.b, current):
                stacks.apply(Op.RA)
            else:
                stacks.apply(Op.RR)


def _swap_tops(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    if len(a) >= 2 and a[0] > a[1]:
        if len(b) >= 2 and b[0] < b[1]:
            stacks.apply(Op.SS)
        else:
            stacks.apply(Op.SA)


def _restore_bottom(stacks: Stacks, num_targets: int, max_value: int) -> None:
    following = max_value - count_targets(stacks, max_value)
    if following < 0:
        following = -1
    for _ in range(num_targets - 1):
        if stacks.a[-1] >= stacks.capacity - 1:
            break
        if should_use_rrb(stacks.b, following):
            stacks.apply(Op.RRR)
        else:
            stacks.apply(Op.RRA)


def _merge_back(stacks: Stacks) -> None:
    max_value = stacks.capacity - 4
    while stacks.b:
        num_targets = count_targets(stacks, max_value)
        _push_to_a(stacks, num_targets, max_value)
        _swap_tops(stacks)
        max_value -= num_targets + 1
        _restore_bottom(stacks, num_targets, max_value)


def chunk_sort(stacks: Stacks, chunk_count: int) -> None:
    """Sort ranks 0..n-1 on a: push all but the top three to b by chunks, then merge."""
    if chunk_count < 1:
        raise ValueError("chunk_count must be positive")
    size = stacks.capacity // chunk_count or 1
    for index in range(chunk_count):
        chunk = _Chunk.at(index, size, chunk_count, stacks.capacity)
        _push_chunk_to_b(stacks, chunk)
    sort_three(stacks)
    _merge_back(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack a, which holds the ranks 0..n-1, choosing a method by size."""
    size = len(stacks.a)
    if size < 2:
        return
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        if stacks.capacity <= 15:
            chunk_count = 1
        elif stacks.capacity <= 100:
            chunk_count = 5
        elif stacks.capacity <= 500:
            chunk_count = 10
        else:
            chunk_count = 15
        chunk_sort(stacks, chunk_count)


def solve(values: Sequence[int]) -> list[Op]:
    """Return the operations that sort the given distinct values."""
    values = list(values)
    if len(set(values)) != len(values):
        raise InputError()
    if is_sorted(values):
        return []
    stacks = Stacks(normalize(values))
    sort_stacks(stacks)
    return list(stacks.history)