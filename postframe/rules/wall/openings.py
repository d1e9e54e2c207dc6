"""Rough-opening framing: header, sill and jambs around each opening.

Front/back openings lie in the endwall girt planes and run along x from
the left corner. Left/right openings lie in the sidewall girt planes and
run along z from the back corner, turned 90° about y.
"""

from __future__ import annotations
import math

from postframe.rules.base import FramingRule
from postframe.models import (
    Axis, BuildingContext, Dimensions, ElementCategory, Opening, Point3D,
    StructuralElement, WallSide,
)


class OpeningFrameRule(FramingRule):
    """Four framing members per opening, one girt thickness outside the rough opening."""

    priority = 70
    dependencies = ["wall.girts"]

    def get_id(self) -> str:
        return "wall.openings"

    def applies(self, context: BuildingContext) -> bool:
        return super().applies(context) and len(context.spec.openings) > 0

    def get_name(self) -> str:
        return "Opening Framing"

    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        elements: list[StructuralElement] = []
        for opening in context.spec.openings:
            elements.extend(self._frame_opening(opening, context))
        return elements

    def _frame_opening(self, opening: Opening, context: BuildingContext) -> list[StructuralElement]:
        spec = context.spec
        tg = spec.girt_thickness
        gw = spec.girt_width
        wall = opening.wall

        start = -context.wall_span(wall) / 2 + opening.offset
        center = start + opening.width / 2
        sill = opening.sill_elevation
        top = sill + opening.height

        # (along-wall position, y, length along wall, vertical size, role)
        pieces = [
            (center, top + tg / 2, opening.width + 2 * tg, tg, "header"),
            (center, sill - tg / 2, opening.width + 2 * tg, tg, "sill"),
            (start - tg / 2, sill + opening.height / 2, tg, opening.height + 2 * tg, "jamb"),
            (start + opening.width + tg / 2, sill + opening.height / 2, tg, opening.height + 2 * tg, "jamb"),
        ]

        elements: list[StructuralElement] = []
        for along, y, run, rise, role in pieces:
            elements.append(StructuralElement(
                category=ElementCategory.OPENING_FRAME,
                position=self._place(wall, along, y, context),
                dimensions=Dimensions(length=run, width=rise, thickness=gw),
                rotation=0.0 if wall.is_endwall else math.pi / 2,
                rotation_axis=Axis.Y,
                group=opening.id,
                tags={"role": role, "wall": wall.value},
            ))
        return elements

    def _place(self, wall: WallSide, along: float, y: float, context: BuildingContext) -> Point3D:
        spec = context.spec
        layout = self.layout_of(context)
        tg = spec.girt_thickness
        if wall == WallSide.FRONT:
            return Point3D(x=along, y=y, z=layout.half_length - tg / 2)
        if wall == WallSide.BACK:
            return Point3D(x=along, y=y, z=-(layout.half_length - tg / 2))
        if wall == WallSide.LEFT:
            return Point3D(x=-(spec.width / 2 - tg / 2), y=y, z=along)
        return Point3D(x=spec.width / 2 - tg / 2, y=y, z=along)
