"""
Block wall (muro) calculator.

Works on the wall face: area = length × height. Width (wall thickness) is
not used; block size already fixes it.
"""

from .base import BaseCalculator, Dimensions, EstimationResult, Unit


class WallCalculator(BaseCalculator):

    project_type = "wall"

    BLOCKS_PER_M2 = 13
    MORTAR_M3_PER_M2 = 0.02
    CEMENT_BAGS_PER_M3_MORTAR = 8
    SAND_M3_PER_M3_MORTAR = 4
    CASTLE_SPACING_M = 3.0      # one vertical reinforcement every 3 m
    STEEL_KG_PER_M_HEIGHT = 4
    BLOCKS_PER_KG_WIRE = 50

    def calculate(self, dims: Dimensions) -> EstimationResult:
        area = dims.face_area

        blocks = self.ceil_units(area * self.BLOCKS_PER_M2)
        mortar_m3 = area * self.MORTAR_M3_PER_M2
        # Vertical reinforcement
        steel_kg = (dims.length / self.CASTLE_SPACING_M) * dims.height * self.STEEL_KG_PER_M_HEIGHT

        return self.make_result([
            self.make_material_item("Blocks", blocks, Unit.PIECES),
            self.make_material_item("Mortero", mortar_m3, Unit.CUBIC_METERS),
            self.make_material_item("Cemento", mortar_m3 * self.CEMENT_BAGS_PER_M3_MORTAR, Unit.BAGS),
            self.make_material_item("Arena", mortar_m3 * self.SAND_M3_PER_M3_MORTAR, Unit.CUBIC_METERS),
            self.make_material_item("Varilla", steel_kg, Unit.KILOGRAMS),
            self.make_material_item("Alambre recocido",
                                    self.ceil_units(blocks / self.BLOCKS_PER_KG_WIRE),
                                    Unit.KILOGRAMS),
        ])
