from collections import Counter

import pytest

from cfkit.replace import least_repeated, most_repeated, replace_character

SAMPLES = ["abacaba", "xyz", "aabbccc", "qwertyqwe", "zzzzy", "abcdabcdd"]


@pytest.mark.parametrize("s", SAMPLES)
def test_most_repeated_picks_a_most_frequent_char_at_first_index(s):
    ch, index = most_repeated(s)
    counts = Counter(s)
    assert counts[ch] == max(counts.values())
    assert s[index] == ch
    assert index == min(s.index(c) for c in counts if counts[c] == counts[ch])


@pytest.mark.parametrize("s", SAMPLES)
def test_least_repeated_picks_a_least_frequent_char_at_first_index(s):
    ch, index = least_repeated(s)
    counts = Counter(s)
    assert counts[ch] == min(counts.values())
    assert s[index] == ch
    assert index == min(s.index(c) for c in counts if counts[c] == counts[ch])


@pytest.mark.parametrize("s", SAMPLES)
def test_exclusion_is_respected(s):
    most, _ = most_repeated(s)
    least, least_index = least_repeated(s, exclude=most)
    assert least != most
    assert s[least_index] == least
    other, _ = most_repeated(s, exclude=least)
    assert other != least


def test_excluding_every_character_raises():
    with pytest.raises(ValueError):
        most_repeated("aaaa", exclude="a")
    with pytest.raises(ValueError):
        least_repeated("aaaa", exclude="a")


def test_single_character_is_unchanged():
    assert replace_character("k") == "k"


def test_two_characters_become_the_first_twice():
    assert replace_character("ab") == "aa"


def test_all_same_is_unchanged():
    assert replace_character("bbbbb") == "bbbbb"


def test_known_replacement():
    assert replace_character("abc") == "aac"


@pytest.mark.parametrize("s", SAMPLES)
def test_replacement_changes_at_most_one_position(s):
    result = replace_character(s)
    assert len(result) == len(s)
    assert sum(1 for a, b in zip(s, result) if a != b) <= 1
    assert len(set(result)) <= len(set(s))
    assert set(result) <= set(s)