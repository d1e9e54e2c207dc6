"""Geometric primitives used throughout the generator."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel, ConfigDict


class Point3D(BaseModel):
    """Point in 3D space (Three.js convention: x across width, y up, z along length)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.z))


class Dimensions(BaseModel):
    """Box extents along the element's local x, y and z axes (before rotation)."""
    model_config = ConfigDict(frozen=True)

    length: float     # local x
    width: float      # local y
    thickness: float  # local z

    @property
    def span(self) -> float:
        """Longest extent; the cut length of a framing member."""
        return max(self.length, self.width, self.thickness)

    @property
    def volume(self) -> float:
        return self.length * self.width * self.thickness

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.length, self.width, self.thickness))


class Axis(str, Enum):
    Y = "y"  # 90° wall turns
    Z = "z"  # roof slope


def centroid(points: list[Point3D] | tuple[Point3D, ...]) -> Point3D:
    """Average of a set of control points."""
    n = len(points)
    return Point3D(
        x=sum(p.x for p in points) / n,
        y=sum(p.y for p in points) / n,
        z=sum(p.z for p in points) / n,
    )
