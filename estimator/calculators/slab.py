"""
Slab (losa) calculator.

Poured concrete slab, computed by volume. Steel and welded mesh by plan area.
"""

from .base import BaseCalculator, Dimensions, EstimationResult, Unit


class SlabCalculator(BaseCalculator):

    project_type = "slab"

    CEMENT_BAGS_PER_M3 = 6.5
    SAND_M3_PER_M3 = 0.5
    GRAVEL_M3_PER_M3 = 0.7
    STEEL_KG_PER_M2 = 8.0
    MESH_OVERLAP = 1.1      # 10% overlap on welded mesh

    def calculate(self, dims: Dimensions) -> EstimationResult:
        volume = dims.volume
        area = dims.area

        return self.make_result([
            self.make_material_item("Concreto", self.concrete_volume(volume), Unit.CUBIC_METERS),
            self.make_material_item("Cemento", volume * self.CEMENT_BAGS_PER_M3, Unit.BAGS),
            self.make_material_item("Arena", volume * self.SAND_M3_PER_M3, Unit.CUBIC_METERS),
            self.make_material_item("Grava", volume * self.GRAVEL_M3_PER_M3, Unit.CUBIC_METERS),
            self.make_material_item("Varilla", area * self.STEEL_KG_PER_M2, Unit.KILOGRAMS),
            self.make_material_item("Armex", area * self.MESH_OVERLAP, Unit.SQUARE_METERS),
        ])
