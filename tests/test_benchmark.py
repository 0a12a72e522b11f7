import numpy as np
import pytest

from gridsearch import Grid
from gridsearch.benchmark import compare_strategies, corridor_grid, open_grid, random_grid, run_suite


def test_random_grid_is_reproducible():
    a = random_grid(10, 8, 0.3, seed=7)
    b = random_grid(10, 8, 0.3, seed=7)
    assert a == b
    assert a.shape == (10, 8)


def test_random_grid_keeps_endpoints_free():
    grid = random_grid(6, 6, 1.0, seed=1, keep_free=[(0, 0), (5, 5)])
    assert grid.passable(0, 0) and grid.passable(5, 5)
    assert int(grid.blocked.sum()) == 34


def test_random_grid_rejects_bad_density():
    with pytest.raises(ValueError):
        random_grid(3, 3, 1.5)


def test_corridor_grid_has_one_gap_per_wall():
    grid = corridor_grid(9, spacing=3)
    for c in (2, 5, 8):
        assert int((~grid.blocked[:, c]).sum()) == 1


def test_compare_strategies_reports_both_engines():
    reports = compare_strategies(open_grid(16), (0, 0), (15, 15))
    assert [r.strategy for r in reports] == ["A*", "JPS"]
    astar, jps = reports
    assert jps.cost == pytest.approx(astar.cost)
    assert jps.operations < astar.operations
    assert all(r.elapsed_ms >= 0 for r in reports)


def test_compare_strategies_on_unreachable_goal():
    grid = Grid(np.array([[False, True], [True, True]]))
    reports = compare_strategies(grid, (0, 0), (1, 1))
    assert all(r.cost == -1 and r.operations == 0 for r in reports)


def test_run_suite_covers_every_family():
    results = run_suite(size=16, seed=3)
    assert set(results) == {"open", "sparse", "dense", "corridor"}
    for reports in results.values():
        costs = [r.cost for r in reports]
        assert costs[0] == pytest.approx(costs[1])
