"""Spec analysis: validation, derived layout, opening bounds checks."""

from __future__ import annotations
import logging
import math

from postframe.core import solver
from postframe.core.errors import InvalidSpec, OpeningOutOfBounds
from postframe.models import (
    BuildingContext, DimensionalSpec, FrameLayout, GenerationWarning,
)

logger = logging.getLogger(__name__)


POSITIVE_FIELDS = (
    "width", "length", "eave_height",
    "post_spacing", "truss_spacing", "purlin_spacing", "girt_interval",
    "post_thickness", "girt_thickness", "girt_width", "chord_width",
    "bearer_width", "fascia_width", "slab_thickness", "sheeting_thickness",
)
NON_NEGATIVE_FIELDS = (
    "pitch", "heel_height", "eave_overhang", "gable_overhang", "girt_top_clearance",
)


def validate_spec(spec: DimensionalSpec) -> None:
    """Raise InvalidSpec listing every problem, or return silently."""
    problems: list[str] = []

    for name in POSITIVE_FIELDS + NON_NEGATIVE_FIELDS:
        value = getattr(spec, name)
        if not math.isfinite(value):
            problems.append(f"{name} must be a finite number (got {value})")
        elif name in POSITIVE_FIELDS and value <= 0:
            problems.append(f"{name} must be > 0 (got {value:g})")
        elif name in NON_NEGATIVE_FIELDS and value < 0:
            problems.append(f"{name} must be >= 0 (got {value:g})")

    # Anything below depends on the scalars above being usable
    if problems:
        raise InvalidSpec(problems)

    min_width = 2 * (spec.girt_thickness + spec.post_thickness)
    if spec.width <= min_width:
        problems.append(f"width must exceed two girts plus two posts ({min_width:g})")

    length = solver.rounded_length(spec)
    if spec.truss_spacing > length:
        problems.append(f"truss_spacing {spec.truss_spacing:g} exceeds building length {length:g}")
    if spec.purlin_spacing > solver.eave_run(spec):
        problems.append(
            f"purlin_spacing {spec.purlin_spacing:g} exceeds roof run {solver.eave_run(spec):g}"
        )

    seen: set[str] = set()
    for opening in spec.openings:
        if opening.id in seen:
            problems.append(f"duplicate opening id {opening.id!r}")
        seen.add(opening.id)
        for name in ("offset", "width", "height", "sill_elevation"):
            if not math.isfinite(getattr(opening, name)):
                problems.append(f"opening {opening.id!r} {name} must be a finite number")
        if opening.width <= 0 or opening.height <= 0:
            problems.append(f"opening {opening.id!r} must have positive width and height")
        if opening.sill_elevation < 0:
            problems.append(f"opening {opening.id!r} sill_elevation must be >= 0")

    if problems:
        raise InvalidSpec(problems)


class SpecAnalyzer:
    """Validates the spec and derives the layout every rule builds on."""

    def analyze(self, context: BuildingContext) -> None:
        """Run all analysis passes and populate the context."""
        validate_spec(context.spec)
        context.layout = self._compute_layout(context)
        self._check_openings(context)

    def _compute_layout(self, context: BuildingContext) -> FrameLayout:
        spec = context.spec
        return FrameLayout(
            rounded_length=solver.rounded_length(spec),
            rafter_angle=solver.rafter_angle(spec),
            rafter_run=solver.rafter_run(spec),
            eave_run=solver.eave_run(spec),
            post_line_x=solver.post_line_x(spec),
            end_inset=spec.post_thickness / 2 + spec.girt_thickness,
            endwall_post_xs=solver.endwall_post_positions(
                spec, context.config.endwall_post_clearance,
            ),
        )

    def _check_openings(self, context: BuildingContext) -> None:
        """Flag openings that leave their wall; geometry is never clamped."""
        for opening in context.spec.openings:
            span = context.wall_span(opening.wall)
            if opening.offset >= 0 and opening.end <= span + 1e-9:
                continue
            if context.config.strict_openings:
                raise OpeningOutOfBounds(
                    opening.id, opening.wall.value, opening.offset, opening.width, span,
                )
            message = (
                f"Opening {opening.id!r} on {opening.wall.value} wall spans "
                f"{opening.offset:g}..{opening.end:g} outside 0..{span:g}"
            )
            logger.warning(message)
            context.warn(GenerationWarning(
                code="opening_out_of_bounds",
                message=message,
                opening_id=opening.id,
            ))
