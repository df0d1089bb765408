from itertools import combinations
from math import comb

from combos import count_combos, gen_combos


def test_gen_combos_longest_first_in_input_order() -> None:
    combos = list(gen_combos(list("abc"), 1, 3))
    assert combos == ["abc", "ab", "ac", "bc", "a", "b", "c"]


def test_gen_combos_count_per_length_is_binomial() -> None:
    letters = list("abcdefg")
    combos = list(gen_combos(letters, 0, len(letters)))
    for length in range(len(letters) + 1):
        assert sum(1 for c in combos if len(c) == length) == comb(len(letters), length)
    assert len(combos) == 2 ** len(letters)
    assert count_combos(len(letters), 0, len(letters)) == len(combos)


def test_gen_combos_never_repeats_a_position_subset() -> None:
    letters = list("abcdef")
    combos = list(gen_combos(letters, 3, 3))
    assert len(combos) == len(set(combos))
    expected = {"".join(letters[i] for i in picked) for picked in combinations(range(6), 3)}
    assert set(combos) == expected


def test_gen_combos_does_not_need_sorted_input() -> None:
    assert list(gen_combos(list("cba"), 2, 2)) == ["cb", "ca", "ba"]


def test_gen_combos_repeated_letters_are_positional() -> None:
    assert list(gen_combos(list("aab"), 2, 2)) == ["aa", "ab", "ab"]


def test_gen_combos_zero_length_is_empty_string() -> None:
    assert list(gen_combos(list("ab"), 0, 0)) == [""]
    assert list(gen_combos([], 0, 2)) == [""]


def test_gen_combos_lengths_past_input_yield_nothing() -> None:
    assert list(gen_combos(list("ab"), 3, 5)) == []
    assert list(gen_combos(list("ab"), 2, 5)) == ["ab"]


def test_gen_combos_inverted_or_negative_bounds_are_empty() -> None:
    assert list(gen_combos(list("abc"), 3, 1)) == []
    assert list(gen_combos(list("abc"), -2, -1)) == []
    assert count_combos(3, 3, 1) == 0


def test_count_combos_matches_sum_of_binomials() -> None:
    assert count_combos(3, 1, 3) == 7
    assert count_combos(10, 3, 8) == sum(comb(10, k) for k in range(3, 9))
    assert count_combos(4, 2, 10) == comb(4, 2) + comb(4, 3) + comb(4, 4)
