"""Fascia trim along the eaves and up both rakes.

Positions come straight from the roof-surface function rather than from
the purlin elements, so the top edge of every board lies in the purlin
plane at the eave edge and along each gable.
"""

from __future__ import annotations

from postframe.core import solver
from postframe.rules.base import SIDES, FramingRule
from postframe.models import (
    Axis, BuildingContext, Dimensions, ElementCategory, Point3D, StructuralElement,
)


class FasciaRule(FramingRule):
    """Two eave boards and four rake boards."""

    priority = 60

    def get_id(self) -> str:
        return "roof.fascia"

    def get_name(self) -> str:
        return "Fascia"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        return self._eave_boards(context) + self._rake_boards(context)

    def _eave_boards(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        tg = spec.girt_thickness
        top = solver.roof_surface_height(spec, layout.eave_run)
        run_length = layout.rounded_length + 2 * spec.gable_overhang

        return [
            StructuralElement(
                category=ElementCategory.FASCIA,
                position=Point3D(
                    x=(layout.eave_run + tg / 2) * side,
                    y=top - spec.fascia_width / 2,
                    z=0,
                ),
                dimensions=Dimensions(length=tg, width=spec.fascia_width, thickness=run_length),
                group="left" if side < 0 else "right",
                tags={"role": "eave"},
            )
            for side in SIDES
        ]

    def _rake_boards(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        tg = spec.girt_thickness
        # Ridge to the outside face of the eave fascia
        run = spec.width / 2 + spec.eave_overhang
        mid = run / 2
        y = solver.roof_surface_height(spec, mid) - solver.slope_depth(spec, spec.fascia_width) / 2
        z = layout.half_length + spec.gable_overhang + tg / 2

        elements: list[StructuralElement] = []
        for side_z in SIDES:
            for side in SIDES:
                elements.append(StructuralElement(
                    category=ElementCategory.FASCIA,
                    position=Point3D(x=mid * side, y=y, z=z * side_z),
                    dimensions=Dimensions(
                        length=solver.rafter_length(spec, run),
                        width=spec.fascia_width,
                        thickness=tg,
                    ),
                    rotation=-side * layout.rafter_angle,
                    rotation_axis=Axis.Z,
                    group="back" if side_z < 0 else "front",
                    tags={"role": "rake"},
                ))
        return elements
