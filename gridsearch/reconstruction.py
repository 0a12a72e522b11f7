"""Turn the parent chain of a finished search into a contiguous cell path."""

from typing import List

import numpy as np

from gridsearch.config import SearchConfig
from gridsearch.grid import Coordinate, Direction, Grid
from gridsearch.node import SearchTree


def segment_cells(source: Coordinate, target: Coordinate) -> List[Coordinate]:
    """
    Cells strictly after `source` up to and including `target`.

    The segment must be straight: orthogonal or exactly diagonal, which is
    always the case between a node and its parent.
    """
    dy, dx = Direction.between(source, target)
    span_y = abs(target[0] - source[0])
    span_x = abs(target[1] - source[1])
    if span_y and span_x and span_y != span_x:
        raise ValueError(f"segment {source} -> {target} is neither orthogonal nor diagonal")

    cells = []
    y, x = source
    while (y, x) != target:
        y += dy
        x += dx
        cells.append((y, x))
    return cells


def reconstruct_path(tree: SearchTree, goal_index: int) -> List[Coordinate]:
    """
    Walk parent links from the goal node to the root.

    Jump points produced by JPS can be several cells apart; every intermediate
    cell of each segment is filled in, so the result is a contiguous
    start-to-goal sequence for either strategy.
    """
    jump_path = [node.position for node in tree.lineage(goal_index)]
    jump_path.reverse()

    full_path = [jump_path[0]]
    for previous, current in zip(jump_path, jump_path[1:]):
        full_path.extend(segment_cells(previous, current))
    return full_path


def path_cost(path: List[Coordinate], config: SearchConfig) -> float:
    """Sum of the step costs along a contiguous path."""
    return sum(
        config.step_length(b[0] - a[0], b[1] - a[1])
        for a, b in zip(path, path[1:])
    )


def render_path(grid: Grid, path: List[Coordinate], config: SearchConfig) -> np.ndarray:
    """Render the grid as one-character markers with the path cells marked."""
    rendered = grid.render(free=config.free_marker, blocked=config.blocked_marker)
    for y, x in path:
        rendered[y, x] = config.path_marker
    return rendered
