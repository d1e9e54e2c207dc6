"""Takeoff counted straight off the generated frame.

This is the authoritative strategy: every number here describes an
element the renderer actually draws.
"""

from __future__ import annotations
import logging

from postframe.takeoff.base import (
    BEARERS, ENDWALL_POSTS, FASCIA, GIRTS, OPENING_FRAMING, OPENING_KITS, PURLINS,
    ROOF_SHEETING, SIDEWALL_POSTS, TRUSSES, WALL_SHEETING, QuantityTakeoff,
)
from postframe.models import (
    DimensionalSpec, ElementCategory, FrameModel, StructuralElement, TakeoffLine,
)

logger = logging.getLogger(__name__)


def face_area(element: StructuralElement) -> float:
    """Area of a sheet element: its outline when it has one, else its two largest extents."""
    if element.profile:
        pts = element.profile
        twice = sum(
            pts[i].x * pts[(i + 1) % len(pts)].y - pts[(i + 1) % len(pts)].x * pts[i].y
            for i in range(len(pts))
        )
        return abs(twice) / 2
    d = element.dimensions
    extents = sorted((d.length, d.width, d.thickness))
    return extents[1] * extents[2]


class GeometryTakeoff(QuantityTakeoff):

    def get_id(self) -> str:
        return "geometry"

    def takeoff(self, spec: DimensionalSpec, frame: FrameModel | None = None) -> list[TakeoffLine]:
        if frame is None:
            raise ValueError("geometry takeoff needs a generated frame")

        posts = frame.of_category(ElementCategory.POST)
        framed_openings = {e.group for e in frame.of_category(ElementCategory.OPENING_FRAME)}
        opening_area = sum(o.area for o in spec.openings if o.id in framed_openings)

        lines: list[TakeoffLine] = []
        self._count(lines, SIDEWALL_POSTS, sum(1 for p in posts if p.role == "sidewall"))
        self._count(lines, ENDWALL_POSTS, sum(1 for p in posts if p.role == "endwall"))
        self._count(lines, TRUSSES, frame.stats.count(ElementCategory.TRUSS_CHORD))
        self._linear(lines, BEARERS, self._span(frame, ElementCategory.BEARER))
        self._linear(lines, GIRTS, self._span(frame, ElementCategory.GIRT))
        self._linear(lines, PURLINS, self._span(frame, ElementCategory.PURLIN))
        self._linear(lines, FASCIA, self._span(frame, ElementCategory.FASCIA))
        self._linear(lines, OPENING_FRAMING, self._span(frame, ElementCategory.OPENING_FRAME))
        self._count(lines, OPENING_KITS, len(framed_openings))
        self._area(lines, WALL_SHEETING, max(0.0, self._area_of(frame, ElementCategory.WALL_SKIN) - opening_area))
        self._area(lines, ROOF_SHEETING, self._area_of(frame, ElementCategory.ROOF_SKIN))
        self._concrete(lines, sum(e.dimensions.volume for e in frame.of_category(ElementCategory.SLAB)))

        logger.debug("Geometry takeoff: %d lines from %d elements", len(lines), len(frame.elements))
        return lines

    @staticmethod
    def _span(frame: FrameModel, category: ElementCategory) -> float:
        return sum(e.dimensions.span for e in frame.of_category(category))

    @staticmethod
    def _area_of(frame: FrameModel, category: ElementCategory) -> float:
        return sum(face_area(e) for e in frame.of_category(category))
