from typing import Optional

from gridsearch.config import SearchConfig
from gridsearch.grid import Direction
from gridsearch.node import Node
from gridsearch.search import GridSearch, _SearchState


class AStarSearch(GridSearch):
    """
    Classical A* over unit steps.

    Every dequeued node pushes each legal neighbour (4 or 8 directions,
    depending on config.diagonal) whose cost improves on the best known one.
    Diagonal steps obey the same corner-cutting policy as JumpPointSearch.
    """

    name = "A*"

    def __init__(self, config: Optional[SearchConfig] = None):
        super().__init__(config)
        self.directions = Direction.ALL if self.config.diagonal else Direction.CARDINAL

    def expand(self, state: _SearchState, node: Node) -> None:
        grid = state.grid
        policy = self.config.corner_cutting
        for dy, dx in grid.neighbors(node.y, node.x, self.directions, policy):
            ny, nx = node.y + dy, node.x + dx
            if state.visited[ny, nx]:
                continue
            state.relax(node, ny, nx, node.g + self.config.step_length(dy, dx))
