"""Shortest-path search on uniform-cost grids with A* and Jump Point Search."""

from gridsearch.a_star import AStarSearch
from gridsearch.config import CornerCutting, SearchConfig, StepCost, load_config
from gridsearch.exceptions import (
    EmptyQueueError,
    GridSearchError,
    MalformedGridError,
    NoPathComputedError,
    SearchBudgetExceeded,
)
from gridsearch.grid import CellType, Direction, Grid
from gridsearch.heap import MinHeap
from gridsearch.heuristics import Heuristic
from gridsearch.jump_point_search import JumpPointSearch
from gridsearch.node import Node, SearchTree
from gridsearch.reconstruction import reconstruct_path, render_path
from gridsearch.search import UNREACHABLE, GridSearch, SearchResult

__all__ = [
    "AStarSearch",
    "CellType",
    "CornerCutting",
    "Direction",
    "EmptyQueueError",
    "Grid",
    "GridSearch",
    "GridSearchError",
    "Heuristic",
    "JumpPointSearch",
    "MalformedGridError",
    "MinHeap",
    "NoPathComputedError",
    "Node",
    "SearchBudgetExceeded",
    "SearchConfig",
    "SearchResult",
    "SearchTree",
    "StepCost",
    "UNREACHABLE",
    "load_config",
    "reconstruct_path",
    "render_path",
]
