"""
Abstract base class for all project-type calculators.

Input: validated Dimensions (meters)
Output: EstimationResult — ordered (label, value, unit) records
"""

import enum
import logging
import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Iterator, Optional

from .errors import InvalidInput

logger = logging.getLogger(__name__)

# Products are rounded to this many places before ceiling so float noise
# (0.1 * 3 = 0.30000000000000004) doesn't buy an extra bag.
CEIL_PRECISION = 9

# Largest accepted dimension (10 km). Keeps every derived quantity finite and
# well inside Decimal precision.
MAX_DIMENSION_M = 10_000.0

# Plain decimal as typed in a form: "4", "2.5", ".5", "1e3". No "1_0", "inf", "nan".
NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class Unit(str, enum.Enum):
    CUBIC_METERS = "m³"
    SQUARE_METERS = "m²"
    KILOGRAMS = "kg"
    BAGS = "sacos"
    PIECES = "piezas"


# Decimal places shown per unit. Bags and pieces are whole-unit counts.
UNIT_DECIMALS = {
    Unit.CUBIC_METERS: 2,
    Unit.SQUARE_METERS: 2,
    Unit.KILOGRAMS: 0,
    Unit.BAGS: 0,
    Unit.PIECES: 0,
}

# Bags and blocks are bought whole: always round these up.
CEILED_UNITS = {Unit.BAGS, Unit.PIECES}


def round_half_up(value: float, decimals: int = 0) -> Decimal:
    """Round like JavaScript's toFixed: ties go away from zero."""
    with localcontext() as ctx:
        ctx.prec = 60
        exponent = Decimal(1).scaleb(-decimals)
        return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def ceil_units(quantity: float) -> int:
    """Round a quantity UP to the next whole unit."""
    return math.ceil(round(quantity, CEIL_PRECISION))


def format_number(value: float, decimals: int = 2) -> str:
    """Format a number with thousands grouping (es-MX style: 1,234.50)."""
    return f"{round_half_up(value, decimals):,.{decimals}f}"


@dataclass(frozen=True)
class Dimensions:
    """Length, width and height in meters. All strictly positive."""

    length: float
    width: float
    height: float

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    @property
    def area(self) -> float:
        """Plan area (length × width)."""
        return self.length * self.width

    @property
    def face_area(self) -> float:
        """Elevation area (length × height), used for walls."""
        return self.length * self.height


def parse_dimension(name: str, value) -> float:
    """
    Parse one dimension from user input. Accepts numbers or numeric strings
    like '4', ' 2.5 '. Raises InvalidInput for anything that isn't a
    positive finite number no larger than MAX_DIMENSION_M.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInput(name, value, "is required")
    if isinstance(value, bool):
        raise InvalidInput(name, value, "must be a number")
    if isinstance(value, str):
        if not NUMBER_RE.fullmatch(value.strip()):
            raise InvalidInput(name, value, "must be a number")
        number = float(value.strip())
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        raise InvalidInput(name, value, "must be a number")
    if not math.isfinite(number):
        raise InvalidInput(name, value, "must be finite")
    if number <= 0:
        raise InvalidInput(name, value, "must be greater than zero")
    if number > MAX_DIMENSION_M:
        raise InvalidInput(name, value, f"must be at most {MAX_DIMENSION_M:,.0f} m")
    return number


def validate_dimensions(length, width, height) -> Dimensions:
    """Check all three dimensions and build a Dimensions record."""
    return Dimensions(
        length=parse_dimension("length", length),
        width=parse_dimension("width", width),
        height=parse_dimension("height", height),
    )


@dataclass(frozen=True)
class MaterialQuantity:
    label: str
    value: float
    unit: Unit

    @property
    def display(self) -> str:
        """Quantity with unit suffix, e.g. '1.51 m³' or '10 sacos'."""
        decimals = UNIT_DECIMALS[self.unit]
        return f"{self.value:.{decimals}f} {self.unit.value}"

    @property
    def formatted(self) -> str:
        """Display string with thousands grouping, e.g. '1,234.50 m³'."""
        return f"{format_number(self.value, UNIT_DECIMALS[self.unit])} {self.unit.value}"


@dataclass(frozen=True)
class EstimationResult:
    project_type: str
    items: tuple

    def __iter__(self) -> Iterator[MaterialQuantity]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def labels(self) -> list[str]:
        return [item.label for item in self.items]

    def get(self, label: str) -> Optional[MaterialQuantity]:
        for item in self.items:
            if item.label == label:
                return item
        return None

    def as_dict(self) -> dict:
        """Ordered {label: display} mapping, in construction order."""
        return {item.label: item.display for item in self.items}


class BaseCalculator(ABC):
    """All project-type calculators inherit from this."""

    # Concrete waste factor, 5% overage on poured volume
    CONCRETE_WASTE = 1.05

    project_type: str = ""

    @abstractmethod
    def calculate(self, dims: Dimensions) -> EstimationResult:
        """
        Takes validated dimensions.
        Returns an EstimationResult with one item per material, in order.
        """
        pass

    # --- Helper methods for all calculators ---

    def ceil_units(self, quantity: float) -> int:
        """Always round UP to next whole unit."""
        return ceil_units(quantity)

    def concrete_volume(self, volume: float) -> float:
        """Poured volume with the waste factor applied."""
        return volume * self.CONCRETE_WASTE

    def make_material_item(self, label: str, quantity: float, unit: Unit) -> MaterialQuantity:
        """Round a raw quantity according to its unit and wrap it."""
        if unit in CEILED_UNITS:
            value = self.ceil_units(quantity)
        elif UNIT_DECIMALS[unit] == 0:
            value = int(round_half_up(quantity, 0))
        else:
            value = float(round_half_up(quantity, UNIT_DECIMALS[unit]))
        return MaterialQuantity(label=label, value=value, unit=unit)

    def make_result(self, items: list) -> EstimationResult:
        """Build the EstimationResult, enforcing unique labels."""
        labels = [item.label for item in items]
        if len(set(labels)) != len(labels):
            raise ValueError(f"Duplicate material labels in {self.project_type}: {labels}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s estimate: %s", self.project_type,
                         ", ".join(f"{i.label}={i.display}" for i in items))
        return EstimationResult(project_type=self.project_type, items=tuple(items))
