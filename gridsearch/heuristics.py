"""
Distance heuristics towards a fixed goal cell.

Each metric is admissible and consistent for exactly one movement model:

- euclidean: 8 directions, diagonal step costs sqrt(2)
- chebyshev: 8 directions, every step costs 1
- manhattan: 4 directions, every step costs 1
"""

import math
from typing import Callable

from gridsearch.config import SearchConfig, StepCost
from gridsearch.grid import Coordinate

Metric = Callable[[int, int], float]


def euclidean(dy: int, dx: int) -> float:
    return math.hypot(dy, dx)


def chebyshev(dy: int, dx: int) -> float:
    return float(max(abs(dy), abs(dx)))


def manhattan(dy: int, dx: int) -> float:
    return float(abs(dy) + abs(dx))


def metric_for(config: SearchConfig) -> Metric:
    """Pick the metric that stays consistent under the configured movement model."""
    if not config.diagonal:
        return manhattan
    if config.step_cost == StepCost.UNIFORM:
        return chebyshev
    return euclidean


class Heuristic:
    """Estimated remaining cost from (y, x) to the goal."""

    def __init__(self, goal: Coordinate, metric: Metric = euclidean):
        self.goal = goal
        self.metric = metric

    @classmethod
    def for_config(cls, goal: Coordinate, config: SearchConfig) -> 'Heuristic':
        return cls(goal, metric_for(config))

    def __call__(self, y: int, x: int) -> float:
        return self.metric(y - self.goal[0], x - self.goal[1])
