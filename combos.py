"""
Letter combination enumerator.

Produces every choice of letter positions (not permutations) for each length
in a range. Output grows as sum(C(n, L)) over the range, which is exponential
in the number of input letters: around 15 letters is the practical ceiling
for a full range. Use :func:`count_combos` to see the cost before enumerating.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from math import comb


def count_combos(n: int, min_length: int, max_length: int) -> int:
    """Number of combinations :func:`gen_combos` yields for ``n`` letters."""
    return sum(comb(n, length) for length in range(max(min_length, 0), min(max_length, n) + 1))


def gen_combos(letters: Sequence[str], min_length: int, max_length: int) -> Iterator[str]:
    """
    Yield in-order letter combinations, longest lengths first.

    For each length L from ``max_length`` down to ``min_length`` this yields
    letters[i1] + ... + letters[iL] for every i1 < ... < iL. Lengths that are
    negative or longer than ``letters`` yield nothing; length 0 yields "".
    """
    for length in range(max_length, min_length - 1, -1):
        if length < 0 or length > len(letters):
            continue
        yield from _gen_combo(letters, length, 0, "")


def _gen_combo(letters: Sequence[str], remaining: int, start: int, prefix: str) -> Iterator[str]:
    if remaining == 0:
        yield prefix
        return
    # Leave enough positions after idx to fill the rest of the combination.
    for idx in range(start, len(letters) - remaining + 1):
        yield from _gen_combo(letters, remaining - 1, idx + 1, prefix + letters[idx])
