"""Symbolic (BDD) reachability for a bordered Game of Life board."""

from golreach.config import RunConfig
from golreach.engine import Engine, Formula
from golreach.errors import (
    ConfigurationError,
    FixpointLimitError,
    FormulaReleasedError,
    GolReachError,
    RelationBuildError,
)
from golreach.runner import run

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Engine",
    "FixpointLimitError",
    "Formula",
    "FormulaReleasedError",
    "GolReachError",
    "RelationBuildError",
    "RunConfig",
    "run",
]
