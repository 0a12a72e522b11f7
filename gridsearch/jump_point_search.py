from typing import List, Optional, Tuple

from gridsearch.config import SearchConfig
from gridsearch.grid import Coordinate, Direction
from gridsearch.node import Node
from gridsearch.search import GridSearch, _SearchState


class JumpPointSearch(GridSearch):
    """
    Jump Point Search over 8-connected grids.

    CORE ALGORITHM:
    1. Prune the neighbours of a node using the direction it was reached from
    2. From each remaining neighbour, scan in a straight line for a jump point
    3. Queue jump points instead of every intermediate cell
    4. Costs of the straight segments between jump points are exact, so the
       result equals the A* cost under the same movement model
    """

    name = "JPS"

    def __init__(self, config: Optional[SearchConfig] = None):
        super().__init__(config)
        if not self.config.diagonal:
            raise ValueError("JumpPointSearch requires 8-directional movement (config.diagonal=True)")

    def expand(self, state: _SearchState, node: Node) -> None:
        self.successors(state, node)

    def successors(self, state: _SearchState, node: Node) -> None:
        """Queue every unvisited jump point reachable from `node` whose cost improves."""
        for dy, dx in self.find_neighbors(state, node):
            jump_point = self.jump(state, node.y + dy, node.x + dx, dy, dx)
            if jump_point is None:
                continue

            jy, jx = jump_point
            if state.visited[jy, jx]:
                continue

            g = node.g + self.config.step_length(jy - node.y, jx - node.x)
            state.relax(node, jy, jx, g)

    def find_neighbors(self, state: _SearchState, node: Node) -> List[Tuple[int, int]]:
        """
        Directions worth scanning from `node`.

        PRUNING RULES:
        - Start node: all 8 directions
        - Diagonal arrival: both cardinal components, the diagonal continuation,
          and the forced diagonals behind a blocked cardinal cell
        - Cardinal arrival: the continuation and the forced diagonals beside a
          blocked side cell
        Only steps legal under the corner-cutting policy are returned.
        """
        grid = state.grid
        policy = self.config.corner_cutting
        y, x = node.y, node.x

        parent = state.tree.parent_of(node)
        if parent is None:
            return list(grid.neighbors(y, x, Direction.ALL, policy))

        dy, dx = Direction.between(parent.position, node.position)
        candidates = []
        if Direction.is_diagonal(dy, dx):
            candidates.extend([(dy, 0), (0, dx), (dy, dx)])
            if not grid.passable(y - dy, x):
                candidates.append((-dy, dx))
            if not grid.passable(y, x - dx):
                candidates.append((dy, -dx))
        elif dx == 0:
            candidates.append((dy, 0))
            if not grid.passable(y, x + 1):
                candidates.append((dy, 1))
            if not grid.passable(y, x - 1):
                candidates.append((dy, -1))
        else:
            candidates.append((0, dx))
            if not grid.passable(y + 1, x):
                candidates.append((1, dx))
            if not grid.passable(y - 1, x):
                candidates.append((-1, dx))

        return list(grid.neighbors(y, x, candidates, policy))

    def jump(self, state: _SearchState, y: int, x: int, dy: int, dx: int) -> Optional[Coordinate]:
        """
        Scan from (y, x) in direction (dy, dx) for the next jump point.

        ALGORITHM LOGIC:
        1. Stop with no result on a blocked or out-of-bounds cell
        2. Stop on the goal
        3. Stop on a cell with a forced neighbour
        4. Diagonal scans also stop where a cardinal scan from the cell finds
           a jump point
        5. Otherwise advance one cell and repeat

        Cardinal scans never start further scans, so the call depth stays at
        two however long the corridor is.
        """
        grid = state.grid
        goal = state.goal
        passable = grid.passable

        while True:
            if not passable(y, x):
                return None

            if (y, x) == goal:
                return y, x

            if dy != 0 and dx != 0:
                if (passable(y + dy, x - dx) and not passable(y, x - dx)
                        or passable(y - dy, x + dx) and not passable(y - dy, x)):
                    return y, x
                if (self.jump(state, y + dy, x, dy, 0) is not None
                        or self.jump(state, y, x + dx, 0, dx) is not None):
                    return y, x
                if not grid.can_step(y, x, dy, dx, self.config.corner_cutting):
                    return None
            elif dx == 0:
                if (passable(y + dy, x + 1) and not passable(y, x + 1)
                        or passable(y + dy, x - 1) and not passable(y, x - 1)):
                    return y, x
            else:
                if (passable(y + 1, x + dx) and not passable(y + 1, x)
                        or passable(y - 1, x + dx) and not passable(y - 1, x)):
                    return y, x

            y += dy
            x += dx
