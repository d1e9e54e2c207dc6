"""Truss carriers: continuous headers bolted to both faces of each sidewall post line."""

from __future__ import annotations

from postframe.rules.base import SIDES, FramingRule
from postframe.models import (
    BuildingContext, Dimensions, ElementCategory, Point3D, StructuralElement,
)


class BearerRule(FramingRule):
    """Two full-length bearers per sidewall, top flush with the eave."""

    priority = 30
    dependencies = ["wall.sidewall_posts"]

    def get_id(self) -> str:
        return "roof.bearers"

    def get_name(self) -> str:
        return "Truss Bearers"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        tg = spec.girt_thickness
        face_offset = spec.post_thickness / 2 + tg / 2
        y = spec.eave_height - spec.bearer_width / 2

        elements: list[StructuralElement] = []
        for side in SIDES:
            post_x = layout.post_line_x * side
            for face, x in (("outer", post_x + face_offset * side), ("inner", post_x - face_offset * side)):
                elements.append(StructuralElement(
                    category=ElementCategory.BEARER,
                    position=Point3D(x=x, y=y, z=0),
                    dimensions=Dimensions(
                        length=tg, width=spec.bearer_width, thickness=layout.rounded_length,
                    ),
                    group="left" if side < 0 else "right",
                    tags={"role": face},
                ))
        return elements
