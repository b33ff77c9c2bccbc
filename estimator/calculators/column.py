"""
Column (columna) calculator.

Poured concrete column. High longitudinal steel ratio by volume,
stirrups by height, tie wire from the unrounded longitudinal steel.
"""

from .base import BaseCalculator, Dimensions, EstimationResult, Unit


class ColumnCalculator(BaseCalculator):

    project_type = "column"

    CEMENT_BAGS_PER_M3 = 7
    SAND_M3_PER_M3 = 0.45
    GRAVEL_M3_PER_M3 = 0.65
    STEEL_KG_PER_M3 = 120
    STIRRUP_KG_PER_M = 2
    STEEL_KG_PER_KG_WIRE = 100

    def calculate(self, dims: Dimensions) -> EstimationResult:
        volume = dims.volume
        steel_kg = volume * self.STEEL_KG_PER_M3

        return self.make_result([
            self.make_material_item("Concreto", self.concrete_volume(volume), Unit.CUBIC_METERS),
            self.make_material_item("Cemento", volume * self.CEMENT_BAGS_PER_M3, Unit.BAGS),
            self.make_material_item("Arena", volume * self.SAND_M3_PER_M3, Unit.CUBIC_METERS),
            self.make_material_item("Grava", volume * self.GRAVEL_M3_PER_M3, Unit.CUBIC_METERS),
            self.make_material_item("Varilla longitudinal", steel_kg, Unit.KILOGRAMS),
            self.make_material_item("Estribos", dims.height * self.STIRRUP_KG_PER_M, Unit.KILOGRAMS),
            self.make_material_item("Alambre recocido",
                                    self.ceil_units(steel_kg / self.STEEL_KG_PER_KG_WIRE),
                                    Unit.KILOGRAMS),
        ])
