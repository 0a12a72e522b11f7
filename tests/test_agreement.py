"""A* and JPS must agree on reachability and cost under every movement model."""

import itertools

import numpy as np
import pytest

from gridsearch import UNREACHABLE, AStarSearch, JumpPointSearch
from gridsearch.benchmark import corridor_grid, random_grid
from gridsearch.reconstruction import path_cost


def free_cells(grid, count, seed):
    rng = np.random.default_rng(seed)
    cells = np.argwhere(~grid.blocked)
    picks = rng.choice(len(cells), size=min(count, len(cells)), replace=False)
    return [tuple(int(v) for v in cells[i]) for i in picks]


def assert_valid_path(result, config):
    grid = result.grid
    cells = result.path()
    assert cells[0] == result.start
    assert cells[-1] == result.end
    for (y0, x0), (y1, x1) in zip(cells, cells[1:]):
        dy, dx = y1 - y0, x1 - x0
        assert max(abs(dy), abs(dx)) == 1
        assert grid.can_step(y0, x0, dy, dx, config.corner_cutting)
    assert path_cost(cells, config) == pytest.approx(result.cost, abs=1e-9)


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("density", [0.2, 0.35])
def test_random_grids(any_config, seed, density):
    grid = random_grid(12, 14, density, seed=seed)
    astar, jps = AStarSearch(any_config), JumpPointSearch(any_config)

    for start, end in itertools.permutations(free_cells(grid, 5, seed), 2):
        expected = astar.search(grid, start, end)
        actual = jps.search(grid, start, end)

        assert expected.reached == actual.reached, (start, end)
        if expected.reached:
            assert actual.cost == pytest.approx(expected.cost, abs=1e-9), (start, end)
            assert_valid_path(expected, any_config)
            assert_valid_path(actual, any_config)
        else:
            assert expected.cost == actual.cost == UNREACHABLE


def test_corridor_grid(any_config):
    grid = corridor_grid(20, spacing=3)
    start, end = (0, 0), (19, 19)
    expected = AStarSearch(any_config).search(grid, start, end)
    actual = JumpPointSearch(any_config).search(grid, start, end)

    assert expected.reached and actual.reached
    assert actual.cost == pytest.approx(expected.cost, abs=1e-9)


def test_every_pair_on_the_reference_map(reference_map, any_config):
    astar, jps = AStarSearch(any_config), JumpPointSearch(any_config)
    cells = [(y, x) for y in range(5) for x in range(5)]
    for start, end in itertools.product(cells, repeat=2):
        expected = astar.shortest_path(reference_map, start, end)
        actual = jps.shortest_path(reference_map, start, end)
        assert actual == pytest.approx(expected, abs=1e-9), (start, end)
        assert actual >= 0 or actual == UNREACHABLE
