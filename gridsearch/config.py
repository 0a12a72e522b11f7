"""
Search configuration.

A single SearchConfig fixes the movement model (connectivity, step costs,
corner-cutting policy) and the text encoding of grids. Both search strategies
read the same model, so their answers are comparable.
"""

import math
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator


class StepCost(str, Enum):
    EUCLIDEAN = "euclidean"  # diagonal step costs sqrt(2)
    UNIFORM = "uniform"      # every step costs 1


class CornerCutting(str, Enum):
    """
    Policy for diagonal steps next to blocked cells.

    ALLOW: a diagonal step only needs a passable target, even when both
        orthogonal cells beside it are blocked.
    FORBID: a diagonal step between two blocked orthogonal cells is illegal.
    """
    ALLOW = "allow"
    FORBID = "forbid"


class SearchConfig(BaseModel):
    """Movement model and grid encoding shared by every search strategy."""

    model_config = ConfigDict(frozen=True)

    diagonal: bool = Field(True, description="8-directional movement; False restricts A* to 4 directions")
    step_cost: StepCost = Field(StepCost.EUCLIDEAN, description="cost model for diagonal steps")
    corner_cutting: CornerCutting = Field(CornerCutting.ALLOW, description="diagonal squeeze policy")
    free_marker: str = Field(".", description="marker of a passable cell")
    blocked_marker: str = Field("@", description="marker of a blocked cell")
    path_marker: str = Field("*", description="marker written on path cells by get_path()")
    max_expansions: Optional[int] = Field(None, gt=0, description="optional cap on expanded nodes per search")

    @field_validator('free_marker', 'blocked_marker', 'path_marker')
    @classmethod
    def validate_marker(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"marker must be a single character: {v!r}")
        return v

    @model_validator(mode='after')
    def validate_distinct_markers(self) -> 'SearchConfig':
        markers = (self.free_marker, self.blocked_marker, self.path_marker)
        if len(set(markers)) != len(markers):
            raise ValueError(f"free, blocked and path markers must differ: {markers}")
        return self

    @property
    def diagonal_cost(self) -> float:
        if self.step_cost == StepCost.UNIFORM:
            return 1.0
        return math.sqrt(2)

    def step_length(self, dy: int, dx: int) -> float:
        """Cost of a straight segment of max(|dy|, |dx|) unit steps in direction (dy, dx)."""
        steps = max(abs(dy), abs(dx))
        if dy != 0 and dx != 0:
            return steps * self.diagonal_cost
        return float(steps)


def load_config(config_path: Union[str, Path]) -> SearchConfig:
    """
    Load a SearchConfig from a YAML file.

    Args:
        config_path: path of the YAML file

    Returns:
        the validated SearchConfig

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: the file is empty, is not a YAML mapping or fails validation
    """
    config_path = Path(config_path)
    if not config_path.exists():
        error_msg = f"config file not found: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"invalid YAML in {config_path}: {e}"
        logger.error(error_msg)
        raise ValueError(error_msg) from e

    if raw_config is None:
        error_msg = f"config file is empty: {config_path}"
        logger.error(error_msg)
        raise ValueError(error_msg)
    if not isinstance(raw_config, dict):
        error_msg = f"config file must hold a mapping, got {type(raw_config).__name__}"
        logger.error(error_msg)
        raise ValueError(error_msg)

    try:
        config = SearchConfig(**raw_config)
    except ValidationError as e:
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise ValueError(f"invalid search config in {config_path}:\n{e}") from e

    logger.info(f"loaded search config: {config_path}")
    return config
