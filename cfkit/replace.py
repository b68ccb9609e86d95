"""Make one character replacement that leaves the fewest distinct permutations."""

from __future__ import annotations

from collections import Counter


def _candidates(s: str, exclude: str | None) -> list[tuple[int, str, int]]:
    counts = Counter(s)
    return [(index, ch, counts[ch]) for index, ch in enumerate(s) if ch != exclude]


def most_repeated(s: str, exclude: str | None = None) -> tuple[str, int]:
    """The most frequent character other than exclude and the index of its first occurrence.

    On a tie the character seen first wins.
    """
    candidates = _candidates(s, exclude)
    if not candidates:
        raise ValueError("no character left to choose from")
    index, ch, _ = max(candidates, key=lambda item: item[2])
    return ch, index


def least_repeated(s: str, exclude: str | None = None) -> tuple[str, int]:
    """The least frequent character other than exclude and the index of its first occurrence.

    On a tie the character seen first wins.
    """
    candidates = _candidates(s, exclude)
    if not candidates:
        raise ValueError("no character left to choose from")
    index, ch, _ = min(candidates, key=lambda item: item[2])
    return ch, index


def replace_character(s: str) -> str:
    """Overwrite one occurrence of the rarest character with the most common one."""
    if len(s) <= 1:
        return s
    if len(s) == 2:
        return s[0] * 2
    if len(set(s)) == 1:
        return s
    most, most_index = most_repeated(s)
    _, least_index = least_repeated(s)
    if least_index == most_index:
        _, least_index = least_repeated(s, exclude=most)
    return s[:least_index] + s[most_index] + s[least_index + 1:]