"""Closed-form takeoff that never builds the frame.

Faster than counting elements and good enough for a first number. Post
and gable-post positions come from the same solver functions the layout
uses, so post and truss counts match the geometry takeoff under the
default endwall clearance. Purlin rows are estimated from a ratio instead
of laid out, so odd widths or spacings can differ by a piece or two.
"""

from __future__ import annotations
import logging
import math

from postframe.core import solver
from postframe.takeoff.base import (
    BEARERS, ENDWALL_POSTS, FASCIA, GIRTS, OPENING_FRAMING, OPENING_KITS, PURLINS,
    ROOF_SHEETING, SIDEWALL_POSTS, TRUSSES, WALL_SHEETING, QuantityTakeoff,
)
from postframe.models import DimensionalSpec, FrameModel, TakeoffLine

logger = logging.getLogger(__name__)


class ParametricTakeoff(QuantityTakeoff):

    def get_id(self) -> str:
        return "parametric"

    def takeoff(self, spec: DimensionalSpec, frame: FrameModel | None = None) -> list[TakeoffLine]:
        length = solver.rounded_length(spec)
        roof_length = length + 2 * spec.gable_overhang
        wall_h = solver.rafter_base(spec)
        tg = spec.girt_thickness

        post_bays = round(length / spec.post_spacing)
        truss_bays = int(length / spec.truss_spacing + 1e-9)
        gable_posts = len(solver.endwall_post_positions(spec))
        purlin_rows = math.ceil(solver.eave_run(spec) / spec.purlin_spacing) + 1
        rake = solver.rafter_length(spec, spec.width / 2 + spec.eave_overhang)

        opening_lf = sum(2 * (o.width + 2 * tg) + 2 * (o.height + 2 * tg) for o in spec.openings)
        opening_area = sum(o.area for o in spec.openings)
        wall_area = (
            2 * length * wall_h
            + 2 * (spec.width * wall_h + spec.width * solver.peak_height(spec) / 2)
        )
        roof_area = 2 * rake * (roof_length + 2 * tg)

        lines: list[TakeoffLine] = []
        self._count(lines, SIDEWALL_POSTS, (post_bays + 1) * 2)
        self._count(lines, ENDWALL_POSTS, gable_posts * 2)
        self._count(lines, TRUSSES, truss_bays + 1)
        self._linear(lines, BEARERS, 4 * length)
        self._linear(lines, GIRTS, len(solver.girt_elevations(spec)) * 2 * (length + spec.width))
        self._linear(lines, PURLINS, 2 * purlin_rows * roof_length)
        self._linear(lines, FASCIA, 2 * roof_length + 4 * rake)
        self._linear(lines, OPENING_FRAMING, opening_lf)
        self._count(lines, OPENING_KITS, len(spec.openings))
        self._area(lines, WALL_SHEETING, max(0.0, wall_area - opening_area))
        self._area(lines, ROOF_SHEETING, roof_area)
        self._concrete(lines, spec.width * length * spec.slab_thickness)

        logger.debug("Parametric takeoff: %d lines", len(lines))
        return lines
