"""Errors raised by the grid search engine."""


class GridSearchError(Exception):
    """Base class for every error raised by gridsearch."""


class MalformedGridError(GridSearchError, ValueError):
    """The input map is empty, non-rectangular or uses an unknown marker."""


class EmptyQueueError(GridSearchError, IndexError):
    """extract_min() was called on an empty heap."""


class NoPathComputedError(GridSearchError, RuntimeError):
    """A path was requested before any successful search."""


class SearchBudgetExceeded(GridSearchError, RuntimeError):
    """The search expanded more nodes than SearchConfig.max_expansions allows."""

    def __init__(self, limit: int):
        super().__init__(f"search exceeded the expansion budget of {limit} nodes")
        self.limit = limit
