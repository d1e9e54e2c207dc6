"""Gable roof geometry: pure functions of a DimensionalSpec.

Every placement decision in the layout rules goes through these so the
frame, the fascia and the takeoff all agree on one roof. Distances are in
feet, angles in radians. ``d`` is always a horizontal distance measured
from the ridge line toward an eave.
"""

from __future__ import annotations
import math

from postframe.models import DimensionalSpec
from postframe.models.parameters import DEFAULT_ENDWALL_POST_CLEARANCE


def rounded_length(spec: DimensionalSpec) -> float:
    """Length grown to the next full post bay."""
    return math.ceil(spec.length / spec.post_spacing) * spec.post_spacing


def rafter_angle(spec: DimensionalSpec) -> float:
    return math.atan(spec.pitch / 12)


def rafter_run(spec: DimensionalSpec) -> float:
    """Horizontal run from the ridge line to the bearer face (outside girt reference)."""
    return spec.width / 2 - spec.girt_thickness


def eave_run(spec: DimensionalSpec) -> float:
    """Horizontal run from the ridge line to the rafter tail."""
    return rafter_run(spec) + spec.eave_overhang


def ridge_rise(spec: DimensionalSpec, run: float) -> float:
    return run * (spec.pitch / 12)


def peak_height(spec: DimensionalSpec) -> float:
    return ridge_rise(spec, spec.width / 2)


def rafter_length(spec: DimensionalSpec, run: float) -> float:
    """Sloped length covering a horizontal run (overhang included by the caller)."""
    return run / math.cos(rafter_angle(spec))


def slope_depth(spec: DimensionalSpec, depth: float) -> float:
    """Vertical extent of a member of ``depth`` lying on the roof slope."""
    return depth / math.cos(rafter_angle(spec))


def rafter_base(spec: DimensionalSpec) -> float:
    """Underside of the top chord at the bearer line."""
    return spec.eave_height + spec.heel_height


def rafter_underside(spec: DimensionalSpec, d: float) -> float:
    return rafter_base(spec) + ridge_rise(spec, rafter_run(spec) - d)


def roof_surface_height(spec: DimensionalSpec, d: float) -> float:
    """Top of the purlin plane: rafter top plus one purlin thickness, both on the slope."""
    return (
        rafter_underside(spec, d)
        + slope_depth(spec, spec.chord_width)
        + slope_depth(spec, spec.girt_thickness)
    )


def girt_elevations(spec: DimensionalSpec) -> list[float]:
    """Girt rows at each interval above the slab, stopping short of the eave."""
    top = spec.eave_height - spec.girt_top_clearance
    rows = int(spec.eave_height / spec.girt_interval)
    return [j * spec.girt_interval for j in range(1, rows + 1) if j * spec.girt_interval < top]


def sidewall_post_height(spec: DimensionalSpec) -> float:
    """Slab to eave, plus heel and chord allowances so the post reaches the truss line."""
    return spec.eave_height + spec.heel_height + spec.chord_width


def endwall_post_height(spec: DimensionalSpec, distance_from_ridge_line: float) -> float:
    """Gable-end post height; tallest at the ridge, sidewall height at the bearer line."""
    run_to_post = rafter_run(spec) - abs(distance_from_ridge_line)
    return spec.eave_height + spec.heel_height + ridge_rise(spec, run_to_post) + spec.chord_width


def post_line_x(spec: DimensionalSpec) -> float:
    """|x| of the sidewall post centers, just inside the outside girts."""
    return spec.width / 2 - spec.girt_thickness - spec.post_thickness / 2


def endwall_post_positions(
    spec: DimensionalSpec, clearance: float = DEFAULT_ENDWALL_POST_CLEARANCE,
) -> list[float]:
    """
    x of each intermediate gable post on the post grid.

    A grid point is dropped when it comes within ``post_thickness + clearance``
    of the sidewall post line, so corners never get a doubled post.
    """
    line_x = post_line_x(spec)
    tolerance = spec.post_thickness + clearance
    positions: list[float] = []
    for k in range(1, int(spec.width / spec.post_spacing) + 1):
        x = k * spec.post_spacing - spec.width / 2
        if line_x - abs(x) > tolerance:
            positions.append(x)
    return positions
