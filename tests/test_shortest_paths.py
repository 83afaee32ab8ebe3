import pytest

from cpalgos.shortest_paths import (
    NegativeCycleError,
    PositiveCycleError,
    bellman_ford,
    congruence_reachable_count,
    solve_difference_constraints,
    spfa_longest,
)


def test_difference_constraints_solution_satisfies():
    cons = [(1, 2, 3), (2, 3, -2), (1, 3, 1)]
    sol = solve_difference_constraints(3, cons)
    assert sol == [0, -2, 0]
    assert all(sol[u - 1] - sol[v - 1] <= w for u, v, w in cons)


def test_no_constraints_all_zero():
    assert bellman_ford(3, []) == [0, 0, 0]


def test_negative_cycle():
    with pytest.raises(NegativeCycleError):
        bellman_ford(2, [(1, 2, -1), (2, 1, -1)])


def test_spfa_longest_path():
    g = [[(1, 2), (2, 1)], [(2, 3)], []]
    dist = [0, -10**9, -10**9]
    assert spfa_longest(g, dist, 0) == [0, 2, 5]


def test_spfa_positive_cycle():
    g = [[(1, 1)], [(0, 1)]]
    with pytest.raises(PositiveCycleError):
        spfa_longest(g, [0, 0], 0)


def test_spfa_size_mismatch():
    with pytest.raises(ValueError):
        spfa_longest([[]], [0, 0], 0)


def test_congruence_all_floors_with_step_one():
    assert congruence_reachable_count(10, 1, 1, 1) == 10


def test_congruence_brute_force():
    h, x, y, z = 30, 4, 6, 9
    reach = {1}
    stack = [1]
    while stack:
        f = stack.pop()
        for s in (x, y, z):
            if f + s <= h and f + s not in reach:
                reach.add(f + s)
                stack.append(f + s)
    assert congruence_reachable_count(h, x, y, z) == len(reach)