"""Concrete slab under the whole footprint."""

from __future__ import annotations

from postframe.rules.base import FramingRule
from postframe.models import (
    BuildingContext, Dimensions, ElementCategory, Point3D, StructuralElement,
)


class SlabRule(FramingRule):
    """One slab, top face at y=0, covering the rounded footprint."""

    priority = 10

    def get_id(self) -> str:
        return "foundation.slab"

    def get_name(self) -> str:
        return "Slab"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        layout = self.layout_of(context)
        return [StructuralElement(
            category=ElementCategory.SLAB,
            position=Point3D(x=0, y=-spec.slab_thickness / 2, z=0),
            dimensions=Dimensions(
                length=spec.width,
                width=spec.slab_thickness,
                thickness=layout.rounded_length,
            ),
        )]
