"""Roof trusses: a bottom chord and two mirrored top-chord rafters per truss line."""

from __future__ import annotations

from postframe.core import solver
from postframe.rules.base import SIDES, FramingRule
from postframe.models import (
    Axis, BuildingContext, Dimensions, ElementCategory, Point3D,
    StructuralElement, centroid,
)


class TrussRule(FramingRule):
    """
    One truss per truss-spacing line along the rounded length.

    Each rafter is described by a parallelogram with plumb cuts at the
    ridge and at the tail: two points on the ridge line, two at the end of
    the eave overhang, separated vertically by the chord's slope depth.
    """

    priority = 40
    dependencies = ["roof.bearers"]

    def get_id(self) -> str:
        return "roof.trusses"

    def get_name(self) -> str:
        return "Roof Trusses"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)

        elements: list[StructuralElement] = []
        for i, z in enumerate(layout.row_positions(spec.truss_spacing)):
            group = f"truss-{i}"
            elements.append(StructuralElement(
                category=ElementCategory.TRUSS_CHORD,
                position=Point3D(x=0, y=spec.eave_height + spec.chord_width / 2, z=z),
                dimensions=Dimensions(
                    length=spec.width, width=spec.chord_width, thickness=spec.girt_thickness,
                ),
                group=group,
                tags={"role": "bottom_chord"},
            ))
            for side in SIDES:
                elements.append(self._rafter(context, z, side, group))
        return elements

    def _rafter(self, context: BuildingContext, z: float, side: int, group: str) -> StructuralElement:
        spec = context.spec
        layout = self.layout_of(context)
        tail = layout.eave_run
        depth = solver.slope_depth(spec, spec.chord_width)
        ridge_y = solver.rafter_underside(spec, 0.0)
        tail_y = solver.rafter_underside(spec, tail)

        profile = (
            Point3D(x=0.0, y=ridge_y, z=z),
            Point3D(x=0.0, y=ridge_y + depth, z=z),
            Point3D(x=tail * side, y=tail_y + depth, z=z),
            Point3D(x=tail * side, y=tail_y, z=z),
        )
        return StructuralElement(
            category=ElementCategory.TRUSS_RAFTER,
            position=centroid(profile),
            dimensions=Dimensions(
                length=solver.rafter_length(spec, tail),
                width=spec.chord_width,
                thickness=spec.girt_thickness,
            ),
            rotation=-side * layout.rafter_angle,
            rotation_axis=Axis.Z,
            profile=profile,
            group=group,
            tags={"role": "left_rafter" if side < 0 else "right_rafter"},
        )
