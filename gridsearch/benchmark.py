"""
Compare A* and JPS on the same maps.

The heap operation count (inserts + extractions) is the work proxy: it does
not depend on machine load, unlike wall-clock time, which is reported too.

Usage: python -m gridsearch.benchmark
"""

import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from gridsearch.a_star import AStarSearch
from gridsearch.config import SearchConfig
from gridsearch.grid import Coordinate, Grid, GridLike
from gridsearch.jump_point_search import JumpPointSearch
from gridsearch.search import GridSearch


@dataclass(frozen=True)
class StrategyReport:
    strategy: str
    cost: float
    operations: int
    expanded: int
    elapsed_ms: float


def random_grid(rows: int, cols: int, density: float, seed: Optional[int] = None,
                keep_free: Sequence[Coordinate] = ()) -> Grid:
    """
    Reproducible random map.

    Args:
        rows, cols: grid dimensions
        density: probability of each cell being blocked, in [0, 1]
        seed: seed for numpy's default_rng
        keep_free: cells forced to stay passable (typically start and goal)
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    rng = np.random.default_rng(seed)
    blocked = rng.random((rows, cols)) < density
    for y, x in keep_free:
        blocked[y, x] = False
    return Grid(blocked)


def corridor_grid(size: int, spacing: int = 3) -> Grid:
    """Vertical walls every `spacing` columns, each with a single gap."""
    blocked = np.zeros((size, size), dtype=bool)
    for i, c in enumerate(range(spacing - 1, size, spacing)):
        blocked[:, c] = True
        blocked[(i * 7) % size, c] = False
    return Grid(blocked)


def open_grid(size: int) -> Grid:
    return Grid(np.zeros((size, size), dtype=bool))


def default_strategies(config: Optional[SearchConfig] = None) -> List[GridSearch]:
    return [AStarSearch(config), JumpPointSearch(config)]


def compare_strategies(grid: GridLike, start: Coordinate, end: Coordinate,
                       config: Optional[SearchConfig] = None,
                       strategies: Optional[List[GridSearch]] = None) -> List[StrategyReport]:
    """Run every strategy on one query and report cost and work for each."""
    if strategies is None:
        strategies = default_strategies(config)

    reports = []
    for strategy in strategies:
        started = time.perf_counter()
        result = strategy.search(grid, start, end)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        reports.append(StrategyReport(
            strategy=strategy.name,
            cost=result.cost,
            operations=result.operations,
            expanded=result.expanded,
            elapsed_ms=elapsed_ms,
        ))
    return reports


def run_suite(size: int = 64, seed: int = 42,
              config: Optional[SearchConfig] = None) -> Dict[str, List[StrategyReport]]:
    """Compare the strategies corner to corner on a few map families."""
    start, end = (0, 0), (size - 1, size - 1)
    maps: List[Tuple[str, Grid]] = [
        ('open', open_grid(size)),
        ('sparse', random_grid(size, size, 0.15, seed=seed, keep_free=(start, end))),
        ('dense', random_grid(size, size, 0.30, seed=seed + 1, keep_free=(start, end))),
        ('corridor', corridor_grid(size)),
    ]

    results = {}
    for family, grid in maps:
        reports = compare_strategies(grid, start, end, config)
        results[family] = reports
        for report in reports:
            logger.info(
                f"{family:<9} {report.strategy:<4} cost={report.cost:9.3f} "
                f"operations={report.operations:6d} expanded={report.expanded:6d} "
                f"time={report.elapsed_ms:8.2f} ms"
            )
    return results


if __name__ == "__main__":
    run_suite()
