"""Puzzles about the decimal digits of numbers."""

from __future__ import annotations

LUCKY_DIGITS = frozenset("47")
LARGEST_DISTINCT_DIGITS = 9876543210


def is_lucky(n: int) -> bool:
    """Whether every decimal digit of n is 4 or 7."""
    if n < 0:
        return False
    return n == 0 or set(str(n)) <= LUCKY_DIGITS


def is_almost_lucky(n: int) -> bool:
    """Whether some lucky number between 1 and n divides n."""
    return any(n % i == 0 for i in range(1, n + 1) if is_lucky(i))


def is_nearly_lucky(digits: str | int) -> bool:
    """Whether the count of 4s and 7s among the digits is itself lucky."""
    count = sum(1 for digit in str(digits) if digit in LUCKY_DIGITS)
    return count > 0 and is_lucky(count)


def has_distinct_digits(year: int) -> bool:
    """Whether no decimal digit repeats in year."""
    if year <= 0:
        return True
    text = str(year)
    return len(set(text)) == len(text)


def next_distinct_year(year: int) -> int:
    """Smallest year after the given one whose digits are all distinct."""
    if year >= LARGEST_DISTINCT_DIGITS:
        raise ValueError(f"no year after {year} has distinct digits")
    candidate = year + 1
    while not has_distinct_digits(candidate):
        candidate += 1
    return candidate


def wrong_subtract(n: int, k: int) -> int:
    """Subtract one k times, dropping a trailing zero instead of decrementing."""
    for _ in range(k):
        if n == 0:
            break
        n = n // 10 if n % 10 == 0 else n - 1
    return n