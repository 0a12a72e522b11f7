"""
Shared machinery of the grid search strategies.

GridSearch owns the best-first expansion loop. Strategies only decide how a
dequeued node is expanded (unit neighbours for A*, jump points for JPS).
Everything a single search mutates lives in a _SearchState created per call,
so one engine can serve several threads through search().
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np
from loguru import logger

from gridsearch.config import SearchConfig
from gridsearch.exceptions import NoPathComputedError, SearchBudgetExceeded
from gridsearch.grid import Coordinate, Grid, GridLike
from gridsearch.heap import MinHeap
from gridsearch.heuristics import Heuristic
from gridsearch.node import Node, SearchTree
from gridsearch.reconstruction import reconstruct_path, render_path

UNREACHABLE = -1.0


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search call."""
    cost: float
    operations: int
    expanded: int
    start: Coordinate
    end: Coordinate
    grid: Grid = field(repr=False)
    config: SearchConfig = field(repr=False)
    tree: SearchTree = field(default_factory=SearchTree, repr=False, compare=False)
    goal_index: Optional[int] = None

    @property
    def reached(self) -> bool:
        return self.goal_index is not None

    def path(self) -> List[Coordinate]:
        """Contiguous list of cells from start to end."""
        if not self.reached:
            raise NoPathComputedError(f"no path from {self.start} to {self.end}")
        return reconstruct_path(self.tree, self.goal_index)

    def render(self) -> np.ndarray:
        return render_path(self.grid, self.path(), self.config)


class _SearchState:
    """Per-call mutable state: distance table, visited set, heap and node arena."""

    def __init__(self, grid: Grid, goal: Coordinate, config: SearchConfig):
        self.grid = grid
        self.goal = goal
        self.heuristic = Heuristic.for_config(goal, config)
        self.distance = np.full(grid.shape, np.inf)
        self.visited = np.zeros(grid.shape, dtype=bool)
        self.heap = MinHeap()
        self.tree = SearchTree()
        self.expanded = 0

    def push_root(self, y: int, x: int) -> Node:
        root = self.tree.add(y, x, 0.0, self.heuristic(y, x))
        self.distance[y, x] = 0.0
        self.heap.insert(root)
        return root

    def relax(self, parent: Node, y: int, x: int, g: float) -> Optional[Node]:
        """Record g for (y, x) and queue a child of `parent` if g improves the best known cost."""
        if g >= self.distance[y, x]:
            return None
        self.distance[y, x] = g
        child = self.tree.add(y, x, g, self.heuristic(y, x), parent.index)
        self.heap.insert(child)
        return child


def as_coordinate(value: Sequence[int], label: str) -> Coordinate:
    try:
        y, x = value
    except (TypeError, ValueError) as e:
        raise ValueError(f"{label} must be a (row, col) pair, got {value!r}") from e
    for v in (y, x):
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
            raise ValueError(f"{label} must hold integers, got {value!r}")
    return int(y), int(x)


class GridSearch:
    """
    Base class of the shortest-path engines.

    Subclasses implement expand(state, node), which pushes the successors of a
    dequeued node. The loop, endpoint checks, operation counting and result
    retention are shared.

    search() keeps no state on the engine. shortest_path() additionally keeps
    the result so that get_path() and get_operations() can report on it.
    """

    name = "grid search"

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config if config is not None else SearchConfig()
        self._last_result: Optional[SearchResult] = None

    def search(self, grid: GridLike, start: Sequence[int], end: Sequence[int]) -> SearchResult:
        """
        Run one search and return its result.

        Args:
            grid: map in any encoding accepted by Grid.coerce
            start: (row, col) of the start cell
            end: (row, col) of the goal cell

        Returns:
            SearchResult whose cost is UNREACHABLE when no path exists

        Raises:
            MalformedGridError: the map cannot be turned into a rectangular grid
            ValueError: start or end is not a pair of integers
            SearchBudgetExceeded: config.max_expansions was hit
        """
        grid = Grid.coerce(grid, self.config)
        start = as_coordinate(start, "start")
        end = as_coordinate(end, "end")

        for label, (y, x) in (("start", start), ("end", end)):
            if not grid.passable(y, x):
                logger.warning(f"[{self.name}] {label} {(y, x)} is out of bounds or blocked on {grid}")
                return self._unreachable(grid, start, end, operations=0, expanded=0)

        state = _SearchState(grid, end, self.config)
        state.push_root(*start)
        limit = self.config.max_expansions
        logger.debug(f"[{self.name}] searching {start} -> {end} on {grid}")

        while not state.heap.is_empty():
            node = state.heap.extract_min()
            if state.visited[node.y, node.x]:
                continue
            if limit is not None and state.expanded >= limit:
                logger.warning(f"[{self.name}] expansion budget of {limit} exhausted: {start} -> {end}")
                raise SearchBudgetExceeded(limit)
            state.visited[node.y, node.x] = True
            state.expanded += 1

            if node.position == end:
                logger.debug(
                    f"[{self.name}] reached {end}: cost={node.g:.4f}, "
                    f"operations={state.heap.operations}, expanded={state.expanded}"
                )
                return SearchResult(
                    cost=node.g,
                    operations=state.heap.operations,
                    expanded=state.expanded,
                    start=start,
                    end=end,
                    grid=grid,
                    config=self.config,
                    tree=state.tree,
                    goal_index=node.index,
                )
            self.expand(state, node)

        logger.debug(f"[{self.name}] no path {start} -> {end}, operations={state.heap.operations}")
        return self._unreachable(grid, start, end, state.heap.operations, state.expanded)

    def expand(self, state: _SearchState, node: Node) -> None:
        raise NotImplementedError

    def _unreachable(self, grid: Grid, start: Coordinate, end: Coordinate,
                     operations: int, expanded: int) -> SearchResult:
        return SearchResult(
            cost=UNREACHABLE,
            operations=operations,
            expanded=expanded,
            start=start,
            end=end,
            grid=grid,
            config=self.config,
        )

    def shortest_path(self, grid: GridLike, start: Sequence[int], end: Sequence[int]) -> float:
        """
        Returns the length of the shortest path from start to end.

        Returns:
            the path cost if a path is found, else UNREACHABLE (-1)
        """
        self._last_result = None
        self._last_result = self.search(grid, start, end)
        return self._last_result.cost

    @property
    def last_result(self) -> Optional[SearchResult]:
        return self._last_result

    def _require_path(self) -> SearchResult:
        result = self._last_result
        if result is None:
            raise NoPathComputedError("shortest_path() has not been called")
        if not result.reached:
            raise NoPathComputedError(f"last search found no path from {result.start} to {result.end}")
        return result

    def get_path(self) -> np.ndarray:
        """Grid of the last successful search with the path cells marked."""
        return self._require_path().render()

    def get_path_cells(self) -> List[Coordinate]:
        return self._require_path().path()

    def get_operations(self) -> int:
        """
        Number of heap inserts and extractions performed by the last
        shortest_path() call, 0 if there was none.
        """
        if self._last_result is None:
            return 0
        return self._last_result.operations
