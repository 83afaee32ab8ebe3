"""Segment trees: range add / range sum, and longest alternating run under point flips."""

from __future__ import annotations


class RangeAddSumTree:
    """Lazy segment tree over half-open index ranges."""

    def __init__(self, values):
        values = list(values)
        self._n = len(values)
        size = max(1, 4 * self._n)
        self._sum = [0] * size
        self._lazy = [0] * size
        if self._n:
            self._build(values, 0, self._n, 0)

    def __len__(self):
        return self._n

    def _build(self, values, l, r, u):
        if r - l == 1:
            self._sum[u] = values[l]
            return
        mid = (l + r) // 2
        self._build(values, l, mid, 2 * u + 1)
        self._build(values, mid, r, 2 * u + 2)
        self._sum[u] = self._sum[2 * u + 1] + self._sum[2 * u + 2]

    def _push(self, l, r, u):
        tag = self._lazy[u]
        if not tag:
            return
        mid = (l + r) // 2
        left, right = 2 * u + 1, 2 * u + 2
        self._sum[left] += tag * (mid - l)
        self._sum[right] += tag * (r - mid)
        self._lazy[left] += tag
        self._lazy[right] += tag
        self._lazy[u] = 0

    def _check(self, lo, hi):
        if not 0 <= lo <= hi <= self._n:
            raise IndexError("range out of bounds")

    def add(self, lo, hi, delta) -> None:
        """Add delta to every element with index in [lo, hi)."""
        self._check(lo, hi)
        if lo < hi:
            self._add(lo, hi, delta, 0, self._n, 0)

    def _add(self, lo, hi, delta, l, r, u):
        if hi <= l or r <= lo:
            return
        if lo <= l and r <= hi:
            self._sum[u] += delta * (r - l)
            self._lazy[u] += delta
            return
        self._push(l, r, u)
        mid = (l + r) // 2
        self._add(lo, hi, delta, l, mid, 2 * u + 1)
        self._add(lo, hi, delta, mid, r, 2 * u + 2)
        self._sum[u] = self._sum[2 * u + 1] + self._sum[2 * u + 2]

    def sum(self, lo, hi):
        """Sum of the elements with index in [lo, hi)."""
        self._check(lo, hi)
        if lo == hi:
            return 0
        return self._query(lo, hi, 0, self._n, 0)

    def _query(self, lo, hi, l, r, u):
        if hi <= l or r <= lo:
            return 0
        if lo <= l and r <= hi:
            return self._sum[u]
        self._push(l, r, u)
        mid = (l + r) // 2
        return self._query(lo, hi, l, mid, 2 * u + 1) + self._query(lo, hi, mid, r, 2 * u + 2)


class AlternatingRunTree:
    """A 0/1 sequence, initially all zeros, tracking its longest run of alternating bits."""

    def __init__(self, size):
        if size < 1:
            raise ValueError("size must be positive")
        self._n = size
        self._bits = [0] * size
        self._best = [0] * (4 * size)
        self._prefix = [0] * (4 * size)
        self._suffix = [0] * (4 * size)
        self._build(0, size, 0)

    def __len__(self):
        return self._n

    def _pull(self, l, r, u):
        mid = (l + r) // 2
        a, b = 2 * u + 1, 2 * u + 2
        best = max(self._best[a], self._best[b])
        prefix = self._prefix[a]
        suffix = self._suffix[b]
        if self._bits[mid - 1] != self._bits[mid]:
            best = max(best, self._suffix[a] + self._prefix[b])
            if self._prefix[a] == mid - l:
                prefix = mid - l + self._prefix[b]
            if self._suffix[b] == r - mid:
                suffix = r - mid + self._suffix[a]
        self._best[u] = best
        self._prefix[u] = prefix
        self._suffix[u] = suffix

    def _build(self, l, r, u):
        if r - l == 1:
            self._best[u] = self._prefix[u] = self._suffix[u] = 1
            return
        mid = (l + r) // 2
        self._build(l, mid, 2 * u + 1)
        self._build(mid, r, 2 * u + 2)
        self._pull(l, r, u)

    def toggle(self, index) -> None:
        """Flip the bit at index."""
        if not 0 <= index < self._n:
            raise IndexError("index out of range")
        self._toggle(index, 0, self._n, 0)

    def _toggle(self, index, l, r, u):
        if r - l == 1:
            self._bits[index] ^= 1
            return
        mid = (l + r) // 2
        if index < mid:
            self._toggle(index, l, mid, 2 * u + 1)
        else:
            self._toggle(index, mid, r, 2 * u + 2)
        self._pull(l, r, u)

    def longest(self):
        """Length of the longest contiguous stretch with no two equal neighbours."""
        return self._best[0]