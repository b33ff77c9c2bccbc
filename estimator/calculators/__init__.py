"""
Deterministic materials estimation engine.

Pure Python math. No I/O, no state.
Given a project type and three dimensions in meters, produce an ordered
list of material quantities with their units.
"""

import logging

from .base import (
    Dimensions,
    EstimationResult,
    MaterialQuantity,
    Unit,
    format_number,
    parse_dimension,
    validate_dimensions,
)
from .errors import EstimationError, InvalidInput, UnknownProjectType
from .registry import ProjectType, get_calculator, list_calculators, resolve_project_type

logger = logging.getLogger(__name__)

__all__ = [
    "Dimensions",
    "EstimationError",
    "EstimationResult",
    "InvalidInput",
    "MaterialQuantity",
    "ProjectType",
    "Unit",
    "UnknownProjectType",
    "estimate",
    "format_number",
    "list_calculators",
    "parse_dimension",
    "validate_dimensions",
]


def estimate(project_type, length, width, height) -> EstimationResult:
    """
    Estimate materials for one project.

    Dimensions are validated before the project type, and both before any
    math runs, so a failure never leaves a partial result.

    Raises InvalidInput or UnknownProjectType.
    """
    dims = validate_dimensions(length, width, height)
    calculator = get_calculator(resolve_project_type(project_type))
    logger.debug("Estimating %s for %s", calculator.project_type, dims)
    return calculator.calculate(dims)
