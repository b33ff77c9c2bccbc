"""
Concrete floor (firme) calculator.

Thin poured floor: less cement per m³ than a slab, no reinforcement,
polyethylene vapor barrier under the full plan area.
"""

from .base import BaseCalculator, Dimensions, EstimationResult, Unit


class FloorCalculator(BaseCalculator):

    project_type = "floor"

    CEMENT_BAGS_PER_M3 = 5.5
    SAND_M3_PER_M3 = 0.6
    GRAVEL_M3_PER_M3 = 0.8
    BARRIER_OVERLAP = 1.1

    def calculate(self, dims: Dimensions) -> EstimationResult:
        volume = dims.volume

        return self.make_result([
            self.make_material_item("Concreto", self.concrete_volume(volume), Unit.CUBIC_METERS),
            self.make_material_item("Cemento", volume * self.CEMENT_BAGS_PER_M3, Unit.BAGS),
            self.make_material_item("Arena", volume * self.SAND_M3_PER_M3, Unit.CUBIC_METERS),
            self.make_material_item("Grava", volume * self.GRAVEL_M3_PER_M3, Unit.CUBIC_METERS),
            self.make_material_item("Polietileno", dims.area * self.BARRIER_OVERLAP, Unit.SQUARE_METERS),
        ])
