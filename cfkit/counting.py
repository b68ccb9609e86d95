"""Puzzles solved by counting, summing and ordering small collections."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise

MAX_PARTICIPANTS = 50
MAX_SCORE = 100
MATRIX_SIZE = 5


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run Bit++ statements on x = 0: those holding '+' increment, the rest decrement."""
    return sum(1 if "+" in statement[:3] else -1 for statement in statements)


def count_groups(magnets: Iterable[str]) -> int:
    """Number of magnet groups formed when like poles repel."""
    row = "".join(magnets)
    return 1 + sum(1 for left, right in pairwise(row) if left == right)


def taxis_needed(groups: Iterable[int]) -> int:
    """Fewest four-seat taxis for groups that must ride together."""
    sizes = Counter(groups)
    ones, twos, threes = sizes[1], sizes[2], sizes[3]
    others = sum(count for size, count in sizes.items() if size not in (1, 2, 3))
    taxis = others + threes
    if ones > threes:
        ones -= threes
        taxis += twos // 2
        if twos % 2:
            taxis += 1
            ones = max(ones - 2, 0)
        taxis += math.ceil(ones / 4)
    else:
        taxis += math.ceil(twos / 2)
    return taxis


def is_in_equilibrium(forces: Iterable[tuple[int, int, int]]) -> bool:
    """Whether the force vectors add up to zero."""
    x = y = z = 0
    for fx, fy, fz in forces:
        x += fx
        y += fy
        z += fz
    return x == y == z == 0


def odd_one_out(numbers: Sequence[int]) -> int:
    """1-based position of the only number whose parity differs from the rest."""
    if len(numbers) < 3:
        raise ValueError("at least three numbers are needed")
    evens = sum(1 for value in numbers[:3] if value % 2 == 0)
    look_for_odd = evens > 3 - evens
    for position, value in enumerate(numbers, 1):
        if (value % 2 != 0) == look_for_odd:
            return position
    raise ValueError("no number differs in parity")


def is_easy(opinions: Iterable[int]) -> bool:
    """Whether nobody called the problem hard (answered 1)."""
    return all(opinion != 1 for opinion in opinions)


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest capacity for a tram given (leaving, entering) counts at each stop."""
    load = accumulate(entering - leaving for leaving, entering in stops)
    return max(load, default=0) if True else 0 if False else 0 if False else max(0, 0)


def invert_presents(gave: Sequence[int]) -> list[int]:
    """For each friend, who gave them a present, given whom each friend gave to."""
    if sorted(gave) != list(range(1, len(gave) + 1)):
        raise ValueError("presents must form a permutation of 1..n")
    received = [0] * len(gave)
    for giver, receiver in enumerate(gave, 1):
        received[receiver - 1] = giver
    return received


def advancers(scores: Sequence[int], k: int) -> int:
    """Participants with a positive score at least that of the k-th place."""
    if not 1 <= k <= len(scores) <= MAX_PARTICIPANTS:
        raise ValueError(f"need 1 <= k <= n <= {MAX_PARTICIPANTS}")
    if any(not 0 <= score <= MAX_SCORE for score in scores):
        raise ValueError(f"scores must lie in 0..{MAX_SCORE}")
    cutoff = scores[k - 1]
    return sum(1 for score in scores if score >= cutoff and score > 0)


def average_fraction(fractions: Sequence[int]) -> float:
    """Mean of the given percentages."""
    if not fractions:
        raise ValueError("no drinks to mix")
    return sum(fractions) / len(fractions)


def horseshoes_to_buy(colors: Sequence[int]) -> int:
    """Horseshoes to buy so that all of them have different colours."""
    return len(colors) - len(set(colors) - {0})


def problems_solved(opinions: Iterable[tuple[int, int, int]]) -> int:
    """Problems that at least two of the three friends are sure about."""
    return sum(1 for a, b, c in opinions if a + b + c >= 2)


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Row and column swaps needed to bring the single 1 to the middle of a 5x5 matrix."""
    if len(matrix) != MATRIX_SIZE or any(len(row) != MATRIX_SIZE for row in matrix):
        raise ValueError(f"matrix must be {MATRIX_SIZE}x{MATRIX_SIZE}")
    positions = [
        (r, c) for r, row in enumerate(matrix) for c, value in enumerate(row) if value == 1
    ]
    if not positions:
        raise ValueError("matrix holds no 1")
    row, col = positions[-1]
    center = MATRIX_SIZE // 2
    return abs(row - center) + abs(col - center)


def free_rooms(rooms: Iterable[tuple[int, int]]) -> int:
    """Rooms with space for two more people, given (living, capacity) pairs."""
    return sum(1 for living, capacity in rooms if capacity - living >= 2)


def road_width(heights: Iterable[int], fence: int) -> int:
    """Road width for friends walking in a row, those above the fence bending over."""
    return sum(2 if height > fence else 1 for height in heights)


def hulk_feeling(n: int) -> str:
    """Hulk's n-layer feeling, ending in a trailing space."""
    if n <= 0:
        return ""
    layers = ("I hate" if i % 2 == 0 else "I love" for i in range(n))
    return " that ".join(layers) + " it "


def min_coins_taken(coins: Iterable[int]) -> int:
    """Fewest coins whose sum strictly exceeds the sum of those left."""
    ordered = sorted(coins, reverse=True)
    half = sum(ordered) // 2
    taken = 0
    for count, coin in enumerate(ordered, 1):
        taken += coin
        if taken > half:
            return count
    raise ValueError("no selection of coins exceeds the rest")


def gravity_flip(columns: Iterable[int]) -> list[int]:
    """Column heights after gravity pulls every cube to the right."""
    return sorted(columns)


def longest_non_decreasing(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive non-decreasing values."""
    best = run = 0
    previous = None
    for value in values:
        run = run + 1 if previous is not None and value >= previous else 1
        best = max(best, run)
        previous = value
    return best