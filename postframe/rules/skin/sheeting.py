"""Exterior sheeting: flat wall panels, single-fold gable panels and two roof planes."""

from __future__ import annotations

from postframe.core import solver
from postframe.rules.base import SIDES, FramingRule
from postframe.models import (
    Axis, BuildingContext, Dimensions, ElementCategory, Point3D, StructuralElement,
)


class WallSkinRule(FramingRule):
    """One panel per sidewall and a pentagon panel per gable end, outside the girts."""

    priority = 80
    dependencies = ["wall.girts"]

    def get_id(self) -> str:
        return "skin.walls"

    def get_name(self) -> str:
        return "Wall Sheeting"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        st = spec.sheeting_thickness
        wall_h = solver.rafter_base(spec)
        peak = solver.peak_height(spec)
        half_w = spec.width / 2

        elements: list[StructuralElement] = []
        for side in SIDES:
            elements.append(StructuralElement(
                category=ElementCategory.WALL_SKIN,
                position=Point3D(x=(half_w + st / 2) * side, y=wall_h / 2, z=0),
                dimensions=Dimensions(length=st, width=wall_h, thickness=layout.rounded_length),
                group="left" if side < 0 else "right",
            ))
        for side_z in SIDES:
            z = (layout.half_length + st / 2) * side_z
            profile = (
                Point3D(x=-half_w, y=0.0, z=z),
                Point3D(x=half_w, y=0.0, z=z),
                Point3D(x=half_w, y=wall_h, z=z),
                Point3D(x=0.0, y=wall_h + peak, z=z),
                Point3D(x=-half_w, y=wall_h, z=z),
            )
            elements.append(StructuralElement(
                category=ElementCategory.WALL_SKIN,
                position=Point3D(x=0, y=(wall_h + peak) / 2, z=z),
                dimensions=Dimensions(length=spec.width, width=wall_h + peak, thickness=st),
                profile=profile,
                group="back" if side_z < 0 else "front",
            ))
        return elements


class RoofSkinRule(FramingRule):
    """Two sloped roof panels resting on the purlin plane."""

    priority = 85
    dependencies = ["roof.purlins", "roof.fascia"]

    def get_id(self) -> str:
        return "skin.roof"

    def get_name(self) -> str:
        return "Roof Sheeting"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        st = spec.sheeting_thickness
        run = spec.width / 2 + spec.eave_overhang
        mid = run / 2
        y = solver.roof_surface_height(spec, mid) + solver.slope_depth(spec, st) / 2
        length = layout.rounded_length + 2 * (spec.gable_overhang + spec.girt_thickness)

        return [
            StructuralElement(
                category=ElementCategory.ROOF_SKIN,
                position=Point3D(x=mid * side, y=y, z=0),
                dimensions=Dimensions(
                    length=solver.rafter_length(spec, run), width=st, thickness=length,
                ),
                rotation=-side * layout.rafter_angle,
                rotation_axis=Axis.Z,
                group="left" if side < 0 else "right",
            )
            for side in SIDES
        ]
