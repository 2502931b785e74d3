import random
from itertools import permutations

import pytest

from pushswap.sorting import (
    chunk_sort,
    count_targets,
    rotate_to_top,
    should_use_rrb,
    solve,
    sort_five,
    sort_stacks,
    sort_three,
    sort_two,
)
from pushswap.stacks import Op, Stacks
from pushswap.validate import InputError


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        assert stacks.apply(op)
    return stacks


def _shuffled(size, seed):
    values = list(range(size))
    random.Random(seed).shuffle(values)
    return values


def test_sort_two_swaps_when_out_of_order():
    stacks = Stacks([1, 0])
    sort_two(stacks)
    assert stacks.a == [0, 1]
    assert stacks.history == [Op.SA]


def test_sort_two_leaves_ordered_pair():
    stacks = Stacks([0, 1])
    sort_two(stacks)
    assert stacks.history == []


@pytest.mark.parametrize("values", list(permutations(range(3))))
def test_sort_three_all_orders(values):
    stacks = Stacks(list(values))
    sort_three(stacks)
    assert stacks.a == [0, 1, 2]
    assert len(stacks.history) <= 2


def test_sort_three_needs_three_values():
    with pytest.raises(ValueError):
        sort_three(Stacks([1, 0]))


@pytest.mark.parametrize("values", list(permutations(range(5))))
def test_sort_five_all_orders(values):
    stacks = Stacks(list(values))
    sort_five(stacks)
    assert stacks.is_solved()
    assert len(stacks.history) <= 12


@pytest.mark.parametrize("values", list(permutations(range(4))))
def test_sort_five_with_four(values):
    stacks = Stacks(list(values))
    sort_five(stacks)
    assert stacks.is_solved()


def test_chunk_sort_rejects_zero_chunks():
    with pytest.raises(ValueError):
        chunk_sort(Stacks(_shuffled(8, 1)), 0)


@pytest.mark.parametrize("seed", range(20))
def test_sort_stacks_random_small(seed):
    size = random.Random(seed).randint(2, 40)
    values = _shuffled(size, seed)
    stacks = Stacks(values)
    sort_stacks(stacks)
    assert stacks.is_solved()
    assert _replay(values, stacks.history).a == stacks.a


def test_sort_stacks_single_value_is_noop():
    stacks = Stacks([0])
    sort_stacks(stacks)
    assert stacks.history == []
    assert stacks.a == [0]


@pytest.mark.parametrize("size", [100, 500])
def test_solve_large_inputs(size):
    values = _shuffled(size, size)
    ops = solve(values)
    assert _replay(values, ops).is_solved()


def test_solve_arbitrary_integers():
    values = [42, -7, 2147483647, -2147483648, 0, 13, 99, -1]
    ops = solve(values)
    final = _replay(values, ops)
    assert final.is_solved()
    assert final.a == sorted(values)


def test_solve_sorted_input_needs_nothing():
    assert solve([-3, 0, 5, 9]) == []
    assert solve([7]) == []


def test_solve_rejects_duplicates():
    with pytest.raises(InputError):
        solve([3, 1, 3])


def test_should_use_rrb_negative_value():
    assert should_use_rrb([0, 1, 2, 3], -1) is False


def test_should_use_rrb_missing_value():
    assert should_use_rrb([0, 1, 2, 3], 9) is True


def test_should_use_rrb_halves():
    values = [5, 4, 3, 2, 1]
    assert should_use_rrb(values, 5) is False
    assert should_use_rrb(values, 1) is True


@pytest.mark.parametrize("value", range(7))
def test_rotate_to_top_brings_value_up(value):
    start = [3, 6, 0, 5, 1, 4, 2]
    stacks = Stacks([], start)
    rotate_to_top(stacks, value)
    assert stacks.b[0] == value
    assert sorted(stacks.b) == sorted(start)
    assert set(stacks.history) <= {Op.RB, Op.RRB}


def test_rotate_to_top_missing_value():
    stacks = Stacks([], [1, 2, 3])
    with pytest.raises(ValueError):
        rotate_to_top(stacks, 8)


def test_count_targets_single_value():
    assert count_targets(Stacks([], [4]), 4) == 0


def test_count_targets_empty_b():
    assert count_targets(Stacks([0, 1]), 3) == 0


def test_count_targets_max_on_top():
    stacks = Stacks([], [5, 0, 1, 2, 3, 4])
    assert count_targets(stacks, 5) == 0