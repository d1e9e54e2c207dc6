"""Wall girts: horizontal nailers on the outside face of the posts."""

from __future__ import annotations

from postframe.core import solver
from postframe.rules.base import SIDES, FramingRule
from postframe.models import (
    BuildingContext, Dimensions, ElementCategory, Point3D, StructuralElement,
)


class GirtRule(FramingRule):
    """Girt rows on all four walls, continuous across openings."""

    priority = 45

    def get_id(self) -> str:
        return "wall.girts"

    def get_name(self) -> str:
        return "Wall Girts"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        tg = spec.girt_thickness
        gw = spec.girt_width

        elements: list[StructuralElement] = []
        for y in solver.girt_elevations(spec):
            for side in SIDES:
                elements.append(StructuralElement(
                    category=ElementCategory.GIRT,
                    position=Point3D(x=(spec.width / 2 - tg / 2) * side, y=y, z=0),
                    dimensions=Dimensions(length=tg, width=gw, thickness=layout.rounded_length),
                    group="left" if side < 0 else "right",
                    tags={"role": "sidewall"},
                ))
            for side_z in SIDES:
                elements.append(StructuralElement(
                    category=ElementCategory.GIRT,
                    position=Point3D(x=0, y=y, z=(layout.half_length - tg / 2) * side_z),
                    dimensions=Dimensions(length=spec.width, width=gw, thickness=tg),
                    group="back" if side_z < 0 else "front",
                    tags={"role": "endwall"},
                ))
        return elements
