"""Closed-form and small-loop arithmetic puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import accumulate, takewhile

CONTEST_MINUTES = 240
MINUTES_PER_PROBLEM_STEP = 5


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def theatre_square(n: int, m: int, a: int) -> int:
    """Number of a-by-a flagstones needed to cover an n-by-m square."""
    if a <= 0:
        raise ValueError("flagstone size must be positive")
    return _ceil_div(n, a) * _ceil_div(m, a)


def max_expression(a: int, b: int, c: int) -> int:
    """Largest value obtainable by combining a, b, c in order with + and * and brackets."""
    return max(
        0,
        a + b + c,
        a * b + c,
        a + b * c,
        a * b * c,
        a * (b + c),
        (a + b) * c,
    )


def alternating_sum(n: int) -> int:
    """Value of -1 + 2 - 3 + ... + (-1)^n * n."""
    if n == 1:
        return -1
    if n == 0:
        return 0
    if n % 2 == 0:
        return _trunc_div(n, 2)
    return _trunc_div(n - 1, 2) - n


def can_split_evenly(w: int) -> bool:
    """Whether w splits into two positive even parts."""
    return any(i % 2 == 0 and (w - i) % 2 == 0 for i in range(1, w))


def max_dominoes(m: int, n: int) -> int:
    """Most 2x1 dominoes that fit on an m-by-n board."""
    return _trunc_div(m * n, 2)


def borrow_needed(k: int, n: int, w: int) -> int:
    """Money to borrow to buy w bananas, the i-th costing i*k, holding n."""
    total_cost = sum(i * k for i in range(1, w + 1))
    return max(total_cost - n, 0)


def elephant_steps(x: int) -> int:
    """Fewest moves of length at most five to travel a positive distance x."""
    return _ceil_div(x, 5)


def years_to_outgrow(a: int, b: int) -> int:
    """Years until a, tripling yearly, exceeds b, doubling yearly."""
    if a <= b and a <= 0:
        raise ValueError("the first weight must be positive to ever exceed the second")
    years = 0
    while a <= b:
        a *= 3
        b *= 2
        years += 1
    return years


def odd_then_even(n: int, k: int) -> int:
    """k-th number when 1..n is listed odd numbers first, then even ones."""
    if not 1 <= k <= n:
        raise ValueError(f"position {k} is outside 1..{n}")
    odd_count = (n + 1) // 2
    if k <= odd_count:
        return 2 * k - 1
    return 2 * (k - odd_count)


def can_distribute_coins(a: int, b: int, c: int, n: int) -> bool:
    """Whether n coins can be shared out so that three purses become equal."""
    required = 3 * max(a, b, c) - (a + b + c)
    return n >= required and (n - required) % 3 == 0


def problems_before_party(n: int, k: int) -> int:
    """Problems solvable when the i-th takes 5*i minutes and k minutes must remain."""
    budget = CONTEST_MINUTES - k
    elapsed = accumulate(MINUTES_PER_PROBLEM_STEP * i for i in range(1, n + 1))
    return sum(1 for _ in takewhile(lambda total: total <= budget, elapsed))


def is_square_sum(values: Iterable[int]) -> bool:
    """Whether the values add up to a perfect square."""
    total = sum(values)
    if total < 0:
        return False
    return math.isqrt(total) ** 2 == total