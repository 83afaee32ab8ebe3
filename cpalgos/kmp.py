"""Knuth-Morris-Pratt string matching."""

from __future__ import annotations


def failure_table(pattern):
    """For each prefix length 1..m, the length of its longest proper border."""
    table = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        while j and pattern[i] != pattern[j]:
            j = table[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
        table[i] = j
    return table


def find_all(text, pattern):
    """Zero-based start positions of every (possibly overlapping) occurrence of pattern."""
    if not pattern:
        raise ValueError("pattern must be non-empty")
    table = failure_table(pattern)
    m = len(pattern)
    positions = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = table[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == m:
            positions.append(i - m + 1)
            j = table[j - 1]
    return positions