"""Sidewall and gable-end columns.

Sidewall posts sit on the post grid along both long walls. Gable posts
fill the endwalls between the corner posts and grow with the roof line.
"""

from __future__ import annotations
import math

from postframe.core import solver
from postframe.rules.base import SIDES, FramingRule
from postframe.models import (
    Axis, BuildingContext, Dimensions, ElementCategory, Point3D, StructuralElement,
)


class SidewallPostRule(FramingRule):
    """One post per bay line on each sidewall, ends pulled in to the building line."""

    priority = 20

    def get_id(self) -> str:
        return "wall.sidewall_posts"

    def get_name(self) -> str:
        return "Sidewall Posts"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        tp = spec.post_thickness
        height = solver.sidewall_post_height(spec)

        elements: list[StructuralElement] = []
        for z in layout.row_positions(spec.post_spacing):
            for side in SIDES:
                elements.append(StructuralElement(
                    category=ElementCategory.POST,
                    position=Point3D(x=layout.post_line_x * side, y=height / 2, z=z),
                    dimensions=Dimensions(length=tp, width=height, thickness=tp),
                    group="left" if side < 0 else "right",
                    tags={"role": "sidewall"},
                ))
        return elements


class EndwallPostRule(FramingRule):
    """Intermediate gable posts, each reaching the underside of the rake."""

    priority = 25
    dependencies = ["wall.sidewall_posts"]

    def get_id(self) -> str:
        return "wall.endwall_posts"

    def get_name(self) -> str:
        return "Endwall Posts"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        tp = spec.post_thickness
        end_z = layout.half_length - layout.end_inset

        elements: list[StructuralElement] = []
        for side_z in SIDES:
            for x in layout.endwall_post_xs:
                height = solver.endwall_post_height(spec, x)
                elements.append(StructuralElement(
                    category=ElementCategory.POST,
                    position=Point3D(x=x, y=height / 2, z=end_z * side_z),
                    dimensions=Dimensions(length=tp, width=height, thickness=tp),
                    rotation=math.pi / 2,
                    rotation_axis=Axis.Y,
                    group="back" if side_z < 0 else "front",
                    tags={"role": "endwall"},
                ))
        return elements
