"""
Calculator registry — maps ProjectType members to calculator classes.

The set of project types is closed: every ProjectType member has exactly one
calculator, and anything else raises UnknownProjectType.
"""

import enum

from .base import BaseCalculator
from .column import ColumnCalculator
from .errors import UnknownProjectType
from .floor import FloorCalculator
from .slab import SlabCalculator
from .wall import WallCalculator


class ProjectType(str, enum.Enum):
    SLAB = "slab"
    WALL = "wall"
    FLOOR = "floor"
    COLUMN = "column"


# Selector tokens used by the Spanish site form
PROJECT_TYPE_ALIASES = {
    "losa": ProjectType.SLAB,
    "muro": ProjectType.WALL,
    "firme": ProjectType.FLOOR,
    "columna": ProjectType.COLUMN,
}

CALCULATOR_REGISTRY: dict[ProjectType, type] = {
    ProjectType.SLAB: SlabCalculator,
    ProjectType.WALL: WallCalculator,
    ProjectType.FLOOR: FloorCalculator,
    ProjectType.COLUMN: ColumnCalculator,
}


def resolve_project_type(value) -> ProjectType:
    """Turn a selector ('slab', 'Losa', ProjectType.WALL) into a ProjectType."""
    if isinstance(value, ProjectType):
        return value
    if not isinstance(value, str):
        raise UnknownProjectType(value, list_calculators())
    token = value.strip().lower()
    if token in PROJECT_TYPE_ALIASES:
        return PROJECT_TYPE_ALIASES[token]
    try:
        return ProjectType(token)
    except ValueError:
        raise UnknownProjectType(value, list_calculators())


def get_calculator(project_type) -> BaseCalculator:
    """Returns an instance of the calculator for a project type, or raises UnknownProjectType."""
    return CALCULATOR_REGISTRY[resolve_project_type(project_type)]()


def list_calculators() -> list[str]:
    """List all registered project types."""
    return [project_type.value for project_type in CALCULATOR_REGISTRY]


def aliases_for(project_type: ProjectType) -> list[str]:
    return [alias for alias, member in PROJECT_TYPE_ALIASES.items() if member is project_type]
