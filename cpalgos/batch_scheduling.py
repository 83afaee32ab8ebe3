"""Batch scheduling cost minimisation with a convex-hull-optimised DP."""

from __future__ import annotations

from collections import deque
from itertools import accumulate


def min_batch_cost(startup, jobs):
    """Minimum cost of running jobs (time, cost_factor) in order, split into batches.

    Each batch takes `startup` plus the sum of its times; every job in it finishes
    when the batch does and costs its factor times that finishing moment.
    """
    jobs = list(jobs)
    if startup < 0 or any(t < 0 or f < 0 for t, f in jobs):
        raise ValueError("startup, times and cost factors must be non-negative")
    n = len(jobs)
    if n == 0:
        return 0
    times = [0, *accumulate(t for t, _ in jobs)]
    factors = [0, *accumulate(f for _, f in jobs)]
    best = [0] * (n + 1)

    def dx(i, j):
        return factors[i] - factors[j]

    def dy(i, j):
        return best[i] - best[j]

    hull = deque()
    for i in range(1, n + 1):
        cand = i - 1
        while len(hull) >= 2 and dy(cand, hull[-1]) * dx(hull[-1], hull[-2]) <= dy(
            hull[-1], hull[-2]
        ) * dx(cand, hull[-1]):
            hull.pop()
        hull.append(cand)
        slope = times[i] + startup
        while len(hull) >= 2 and dy(hull[1], hull[0]) <= dx(hull[1], hull[0]) * slope:
            hull.popleft()
        j = hull[0]
        best[i] = (
            best[j]
            + times[i] * (factors[i] - factors[j])
            + startup * (factors[n] - factors[j])
        )
    return best[n]