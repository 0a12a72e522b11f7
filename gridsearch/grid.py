from enum import Enum
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from gridsearch.config import CornerCutting, SearchConfig
from gridsearch.exceptions import MalformedGridError

Coordinate = Tuple[int, int]  # (row, col)


class CellType(Enum):
    FREE = 0
    BLOCKED = 1


class Direction:
    """
    Unit steps for 8-connectivity movement, as (dy, dx).

    - Cardinal: N, S, W, E (one row or one column)
    - Diagonal: NW, NE, SE, SW
    """
    NORTH = (-1, 0)
    SOUTH = (1, 0)
    WEST = (0, -1)
    EAST = (0, 1)

    NORTHWEST = (-1, -1)
    NORTHEAST = (-1, 1)
    SOUTHEAST = (1, 1)
    SOUTHWEST = (1, -1)

    CARDINAL = [NORTH, SOUTH, WEST, EAST]
    DIAGONAL = [NORTHWEST, NORTHEAST, SOUTHEAST, SOUTHWEST]
    ALL = CARDINAL + DIAGONAL

    @staticmethod
    def is_diagonal(dy: int, dx: int) -> bool:
        return dy != 0 and dx != 0

    @staticmethod
    def between(source: Coordinate, target: Coordinate) -> Tuple[int, int]:
        """Normalized direction from source towards target (each component in -1, 0, 1)."""
        dy = target[0] - source[0]
        dx = target[1] - source[1]
        return (dy > 0) - (dy < 0), (dx > 0) - (dx < 0)


GridLike = Union['Grid', np.ndarray, Sequence[Sequence[str]], Sequence[str]]


class Grid:
    """
    Immutable view over a map of free and blocked cells.

    The map is held as a read-only boolean numpy array where True marks a
    blocked cell. A Grid never changes for the duration of a search.
    """

    def __init__(self, blocked: np.ndarray):
        blocked = np.array(blocked, dtype=bool)
        if blocked.ndim != 2:
            raise MalformedGridError(f"grid must be two-dimensional, got {blocked.ndim} dimension(s)")
        if blocked.shape[0] == 0 or blocked.shape[1] == 0:
            raise MalformedGridError(f"grid must have at least one row and one column, got shape {blocked.shape}")
        blocked.setflags(write=False)
        self.blocked = blocked
        self.rows, self.cols = blocked.shape

    @classmethod
    def parse(cls, rows: Sequence[Sequence[str]], free: str = ".", blocked: str = "@") -> 'Grid':
        """
        Build a grid from rows of one-character markers.

        Each row may be a string or any sequence of markers. Every row must
        have the same length and every cell must be either `free` or `blocked`.

        Raises:
            MalformedGridError: empty input, ragged rows or unknown markers
        """
        rows = list(rows)
        if not rows:
            raise MalformedGridError("grid has no rows")

        width = len(rows[0])
        mask = []
        for r, row in enumerate(rows):
            cells = list(row)
            if len(cells) != width:
                raise MalformedGridError(
                    f"grid is not rectangular: row {r} has {len(cells)} cells, expected {width}"
                )
            mask_row = []
            for c, cell in enumerate(cells):
                if cell == blocked:
                    mask_row.append(True)
                elif cell == free:
                    mask_row.append(False)
                else:
                    raise MalformedGridError(
                        f"unknown marker {cell!r} at ({r}, {c}); expected {free!r} or {blocked!r}"
                    )
            mask.append(mask_row)
        return cls(np.array(mask, dtype=bool).reshape(len(rows), width))

    @classmethod
    def coerce(cls, grid: GridLike, config: SearchConfig) -> 'Grid':
        """
        Accept any supported map encoding.

        - Grid: returned unchanged
        - boolean numpy array: True is blocked
        - numeric numpy array: 0 is free, anything else is blocked
        - rows of markers: parsed with the config's free/blocked markers
        """
        if isinstance(grid, Grid):
            return grid
        if isinstance(grid, np.ndarray):
            if grid.dtype == bool:
                return cls(grid)
            if np.issubdtype(grid.dtype, np.number):
                return cls(grid != 0)
        return cls.parse(grid, free=config.free_marker, blocked=config.blocked_marker)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def in_bounds(self, y: int, x: int) -> bool:
        return 0 <= y < self.rows and 0 <= x < self.cols

    def passable(self, y: int, x: int) -> bool:
        """Check if (y, x) is inside the grid and not blocked"""
        return 0 <= y < self.rows and 0 <= x < self.cols and not self.blocked[y, x]

    def cell(self, y: int, x: int) -> CellType:
        return CellType.BLOCKED if self.blocked[y, x] else CellType.FREE

    def can_step(self, y: int, x: int, dy: int, dx: int, policy: CornerCutting) -> bool:
        """
        Check the single step (y, x) -> (y + dy, x + dx).

        The target must be passable. Under CornerCutting.FORBID a diagonal step
        also needs at least one of its two orthogonal cells to be passable.
        """
        if not self.passable(y + dy, x + dx):
            return False
        if dy != 0 and dx != 0 and policy == CornerCutting.FORBID:
            return self.passable(y + dy, x) or self.passable(y, x + dx)
        return True

    def neighbors(self, y: int, x: int, directions: List[Tuple[int, int]],
                  policy: CornerCutting) -> Iterator[Tuple[int, int]]:
        """Yield the legal step directions out of (y, x)."""
        for dy, dx in directions:
            if self.can_step(y, x, dy, dx, policy):
                yield dy, dx

    def render(self, free: str = ".", blocked: str = "@") -> np.ndarray:
        """Return the map as an array of one-character markers."""
        return np.where(self.blocked, blocked, free).astype('<U1')

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.blocked, other.blocked))

    def __hash__(self):
        return hash((self.shape, self.blocked.tobytes()))

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols}, blocked={int(self.blocked.sum())})"
