import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from gridsearch import (
    UNREACHABLE,
    AStarSearch,
    JumpPointSearch,
    NoPathComputedError,
    SearchConfig,
    StepCost,
)

SQRT2 = math.sqrt(2)

EXPECTED_JUMP_PATH = [(4, 4), (3, 4), (2, 4), (1, 3), (0, 2), (0, 1), (1, 0)]


def test_shortest_path_with_uniform_steps(reference_map, uniform_config):
    jps = JumpPointSearch(uniform_config)
    assert jps.shortest_path(reference_map, (4, 4), (1, 0)) == 6


def test_shortest_path_with_euclidean_steps(reference_map):
    jps = JumpPointSearch()
    assert jps.shortest_path(reference_map, (4, 4), (1, 0)) == pytest.approx(3 + 3 * SQRT2)


def test_forbidding_corner_cutting_closes_the_only_exit(reference_map, forbid_config):
    jps = JumpPointSearch(forbid_config)
    assert jps.shortest_path(reference_map, (4, 4), (1, 0)) == UNREACHABLE


def test_returns_minus_one_when_path_is_not_found(reference_map, any_config):
    jps = JumpPointSearch(any_config)
    assert jps.shortest_path(reference_map, (0, 0), (4, 0)) == UNREACHABLE
    assert jps.get_operations() >= 1


def test_blocked_endpoints(reference_map):
    jps = JumpPointSearch()
    assert jps.shortest_path(reference_map, (1, 1), (0, 0)) == UNREACHABLE
    assert jps.shortest_path(reference_map, (0, 0), (2, 2)) == UNREACHABLE
    assert jps.get_operations() == 0


def test_start_equals_end(reference_map):
    jps = JumpPointSearch()
    assert jps.shortest_path(reference_map, (3, 3), (3, 3)) == 0
    assert jps.get_operations() == 2


def test_jump_points_are_expanded_into_every_cell(reference_map):
    jps = JumpPointSearch()
    jps.shortest_path(reference_map, (4, 4), (1, 0))

    result = jps.last_result
    jump_points = [node.position for node in result.tree.lineage(result.goal_index)][::-1]
    assert jump_points == [(4, 4), (2, 4), (1, 3), (0, 2), (0, 1), (1, 0)]
    assert jps.get_path_cells() == EXPECTED_JUMP_PATH


def test_get_path_renders_the_marked_grid(reference_map):
    jps = JumpPointSearch()
    jps.shortest_path(reference_map, (4, 4), (1, 0))
    rendered = ["".join(row) for row in jps.get_path()]
    assert rendered == [
        ".**..",
        "*@.*@",
        ".@@@*",
        "@@..*",
        ".@..*",
    ]


def test_get_path_before_search_is_guarded():
    with pytest.raises(NoPathComputedError):
        JumpPointSearch().get_path()


def test_requires_diagonal_movement():
    with pytest.raises(ValueError, match="8-directional"):
        JumpPointSearch(SearchConfig(diagonal=False))


def test_open_grid_needs_far_fewer_operations():
    open_map = np.zeros((30, 30), dtype=bool)
    astar, jps = AStarSearch(), JumpPointSearch()

    assert jps.shortest_path(open_map, (0, 0), (29, 29)) == pytest.approx(29 * SQRT2)
    assert astar.shortest_path(open_map, (0, 0), (29, 29)) == pytest.approx(29 * SQRT2)
    # root insert + extract, goal insert + extract
    assert jps.get_operations() == 4
    assert jps.get_operations() < astar.get_operations()


def test_long_corridor_does_not_recurse():
    corridor = ["." * 5000]
    jps = JumpPointSearch(SearchConfig(step_cost=StepCost.UNIFORM))
    assert jps.shortest_path(corridor, (0, 0), (0, 4999)) == 4999
    assert len(jps.get_path_cells()) == 5000


def test_long_open_diagonal():
    size = 300
    jps = JumpPointSearch()
    assert jps.shortest_path(np.zeros((size, size), dtype=bool), (0, 0), (size - 1, size - 1)) \
        == pytest.approx((size - 1) * SQRT2)


def test_forced_neighbor_around_a_wall():
    grid = [
        ".....",
        "..@..",
        "..@..",
        "..@..",
        ".....",
    ]
    astar, jps = AStarSearch(), JumpPointSearch()
    expected = astar.shortest_path(grid, (2, 0), (2, 4))
    assert expected == pytest.approx(4 * SQRT2)
    assert jps.shortest_path(grid, (2, 0), (2, 4)) == pytest.approx(expected)

    cells = jps.get_path_cells()
    assert cells[0] == (2, 0) and cells[-1] == (2, 4)
    assert all(grid[y][x] == '.' for y, x in cells)


def test_search_is_safe_across_threads(reference_map):
    jps = JumpPointSearch()
    queries = [((4, 4), (1, 0)), ((0, 0), (4, 0)), ((0, 0), (3, 4)), ((4, 2), (0, 4))] * 8
    expected = [jps.search(reference_map, start, end).cost for start, end in queries]

    with ThreadPoolExecutor(max_workers=4) as pool:
        costs = list(pool.map(lambda q: jps.search(reference_map, *q).cost, queries))
    assert costs == expected
