"""Roof purlins: laid flat across the trusses, stepping down the slope."""

from __future__ import annotations
import math

from postframe.core import solver
from postframe.rules.base import SIDES, FramingRule
from postframe.models import (
    Axis, BuildingContext, Dimensions, ElementCategory, Point3D, StructuralElement,
)


class PurlinRule(FramingRule):
    """Purlin rows at purlin-spacing along the horizontal run, ridge to eave edge."""

    priority = 50
    dependencies = ["roof.trusses"]

    def get_id(self) -> str:
        return "roof.purlins"

    def get_name(self) -> str:
        return "Roof Purlins"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        length = layout.rounded_length + 2 * spec.gable_overhang
        half_depth = solver.slope_depth(spec, spec.girt_thickness) / 2

        elements: list[StructuralElement] = []
        for row, d in enumerate(purlin_offsets(context)):
            y = solver.roof_surface_height(spec, d) - half_depth
            for side in SIDES:
                elements.append(StructuralElement(
                    category=ElementCategory.PURLIN,
                    position=Point3D(x=d * side, y=y, z=0),
                    dimensions=Dimensions(
                        length=spec.girt_width, width=spec.girt_thickness, thickness=length,
                    ),
                    rotation=-side * layout.rafter_angle,
                    rotation_axis=Axis.Z,
                    group="left" if side < 0 else "right",
                    tags={"row": str(row)},
                ))
        return elements


def purlin_offsets(context: BuildingContext) -> list[float]:
    """
    Horizontal distances from the ridge line to each purlin center.

    The first purlin's edge touches the ridge line and the last one's
    edge is flush with the rafter tail, so the eave fascia can cap it.
    """
    spec = context.spec
    layout = context.layout
    half = spec.girt_width / 2 * math.cos(layout.rafter_angle)
    first = half
    last = layout.eave_run - half

    positions = [first]
    pos = first + spec.purlin_spacing
    while pos < last - 0.01:
        positions.append(pos)
        pos += spec.purlin_spacing
    if last - positions[-1] > 0.05:
        positions.append(last)
    else:
        positions[-1] = last
    return positions
