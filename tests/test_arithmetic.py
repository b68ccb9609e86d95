import pytest

from cfkit.arithmetic import (
    alternating_sum,
    borrow_needed,
    can_distribute_coins,
    can_split_evenly,
    elephant_steps,
    is_square_sum,
    max_dominoes,
    max_expression,
    odd_then_even,
    problems_before_party,
    theatre_square,
    years_to_outgrow,
)


@pytest.mark.parametrize("n,m,a", [(6, 6, 4), (1, 1, 1), (10, 3, 3), (7, 20, 5), (1, 1, 10)])
def test_theatre_square_covers_minimally(n, m, a):
    tiles = theatre_square(n, m, a)
    assert tiles * a * a >= n * m
    assert theatre_square(m, n, a) == tiles


def test_theatre_square_worked_example():
    assert theatre_square(6, 6, 4) == 4


def test_theatre_square_unit_tiles_count_cells():
    assert theatre_square(7, 9, 1) == 7 * 9


def test_theatre_square_rejects_non_positive_tile():
    with pytest.raises(ValueError):
        theatre_square(5, 5, 0)


def test_max_expression_examples():
    assert max_expression(1, 2, 3) == 9
    assert max_expression(2, 10, 3) == 60


@pytest.mark.parametrize("a,b,c", [(1, 1, 1), (1, 2, 3), (5, 1, 5), (10, 10, 10), (3, 1, 1)])
def test_max_expression_bounds_and_symmetry(a, b, c):
    best = max_expression(a, b, c)
    assert best >= a + b + c
    assert best >= a * b * c
    assert best == max_expression(c, b, a)


@pytest.mark.parametrize("n", range(2, 30))
def test_alternating_sum_step(n):
    assert alternating_sum(n) - alternating_sum(n - 1) == (-1) ** n * n


def test_alternating_sum_base():
    assert alternating_sum(1) == -1
    assert alternating_sum(0) == 0


def test_can_split_evenly_rejects_odd_and_two():
    assert not any(can_split_evenly(w) for w in range(1, 100, 2))
    assert not can_split_evenly(2)


def test_can_split_evenly_accepts_even_above_two():
    assert all(can_split_evenly(w) for w in range(4, 101, 2))


@pytest.mark.parametrize("m,n", [(2, 4), (3, 3), (1, 1), (16, 16), (5, 7)])
def test_max_dominoes_bounds(m, n):
    count = max_dominoes(m, n)
    assert 2 * count <= m * n < 2 * count + 2


def test_borrow_needed_never_negative_and_monotone():
    results = [borrow_needed(3, n, 4) for n in range(0, 50)]
    assert all(r >= 0 for r in results)
    assert results == sorted(results, reverse=True)
    assert results[-1] == 0


def test_borrow_needed_with_no_money_is_total_cost():
    assert borrow_needed(3, 0, 4) - borrow_needed(3, 10, 4) == 10


def test_borrow_needed_no_bananas():
    assert borrow_needed(3, 17, 0) == 0


@pytest.mark.parametrize("x", [1, 4, 5, 6, 12, 999999])
def test_elephant_steps_bounds(x):
    steps = elephant_steps(x)
    assert 5 * (steps - 1) < x <= 5 * steps


@pytest.mark.parametrize("a,b", [(4, 7), (4, 9), (1, 1), (1, 10), (10, 10)])
def test_years_to_outgrow(a, b):
    years = years_to_outgrow(a, b)
    assert a * 3**years > b * 2**years
    assert a * 3 ** (years - 1) <= b * 2 ** (years - 1)


def test_years_to_outgrow_already_heavier():
    assert years_to_outgrow(9, 3) == 0


def test_years_to_outgrow_rejects_never_ending():
    with pytest.raises(ValueError):
        years_to_outgrow(0, 5)


@pytest.mark.parametrize("n", [1, 2, 7, 10])
def test_odd_then_even_order(n):
    sequence = [odd_then_even(n, k) for k in range(1, n + 1)]
    assert sorted(sequence) == list(range(1, n + 1))
    odd_count = sum(1 for value in sequence if value % 2)
    assert all(value % 2 == 1 for value in sequence[:odd_count])
    assert sequence[odd_count:] == sorted(sequence[odd_count:])


@pytest.mark.parametrize("k", [0, 11])
def test_odd_then_even_rejects_out_of_range(k):
    with pytest.raises(ValueError):
        odd_then_even(10, k)


def test_can_distribute_coins_equal_purses():
    assert can_distribute_coins(4, 4, 4, 0)
    assert can_distribute_coins(4, 4, 4, 3)
    assert not can_distribute_coins(4, 4, 4, 1)


@pytest.mark.parametrize("a,b,c,n", [(5, 3, 2, 8), (1, 2, 3, 3), (1, 1, 10, 18), (10, 1, 1, 6)])
def test_can_distribute_coins_implies_divisible_total(a, b, c, n):
    if can_distribute_coins(a, b, c, n):
        assert (a + b + c + n) % 3 == 0
    else:
        assert (a + b + c + n) % 3 != 0 or n < 3 * max(a, b, c) - (a + b + c)


def test_problems_before_party_no_time():
    assert problems_before_party(10, 240) == 0


@pytest.mark.parametrize("n,k", [(3, 222), (4, 190), (7, 1), (10, 100)])
def test_problems_before_party_fits(n, k):
    solved = problems_before_party(n, k)
    assert 0 <= solved <= n
    assert 5 * solved * (solved + 1) // 2 <= 240 - k
    if solved < n:
        assert 5 * (solved + 1) * (solved + 2) // 2 > 240 - k


def test_problems_before_party_monotone_in_k():
    counts = [problems_before_party(10, k) for k in range(0, 241, 10)]
    assert counts == sorted(counts, reverse=True)


@pytest.mark.parametrize("root", [0, 1, 3, 12, 100000])
def test_is_square_sum(root):
    assert is_square_sum([root * root])
    assert is_square_sum([root * root - 1, 1])
    if root > 0:
        assert not is_square_sum([root * root, 1])


def test_is_square_sum_negative_total():
    assert not is_square_sum([-4])