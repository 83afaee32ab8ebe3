"""Counting "windy" numbers: adjacent digits differ by at least two."""

from __future__ import annotations

from collections import defaultdict
from functools import lru_cache


def _digits(limit):
    return [int(c) for c in str(limit)]


def count_windy(limit):
    """Number of windy integers in 1..limit, by a forward table over digit states."""
    if limit <= 0:
        return 0
    # state: (last digit, a non-zero digit has been placed, still bounded by limit)
    states = {(0, False, True): 1}
    for digit in _digits(limit):
        following = defaultdict(int)
        for (last, started, tight), ways in states.items():
            top = digit if tight else 9
            for y in range(top + 1):
                if started and abs(y - last) < 2:
                    continue
                following[(y, started or y != 0, tight and y == top)] += ways
        states = following
    return sum(ways for (_, started, _), ways in states.items() if started)


def count_windy_recursive(limit):
    """Number of windy integers in 1..limit, by memoised search over digit positions."""
    if limit <= 0:
        return 0
    digits = _digits(limit)

    @lru_cache(maxsize=None)
    def count(pos, last, started, tight):
        if pos == len(digits):
            return int(started)
        top = digits[pos] if tight else 9
        return sum(
            count(pos + 1, y, started or y != 0, tight and y == top)
            for y in range(top + 1)
            if not started or abs(y - last) >= 2
        )

    return count(0, 0, False, True)


def count_windy_between(low, high):
    """Number of windy integers in low..high inclusive."""
    if low > high:
        raise ValueError("low must not exceed high")
    return count_windy(high) - count_windy(low - 1)