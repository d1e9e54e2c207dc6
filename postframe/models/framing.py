"""Structural frame output models."""

from __future__ import annotations
import math
from enum import Enum
from types import MappingProxyType
from typing import Mapping
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .geometry import Axis, Dimensions, Point3D


def _read_only(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


class ElementCategory(str, Enum):
    SLAB = "Slab"
    POST = "Post"
    BEARER = "Bearer"
    TRUSS_CHORD = "TrussChord"
    TRUSS_RAFTER = "TrussRafter"
    GIRT = "Girt"
    PURLIN = "Purlin"
    FASCIA = "Fascia"
    OPENING_FRAME = "OpeningFrame"
    WALL_SKIN = "WallSkin"
    ROOF_SKIN = "RoofSkin"


class StructuralElement(BaseModel):
    """A single positioned, dimensioned piece of the building."""
    model_config = ConfigDict(frozen=True)

    category: ElementCategory
    position: Point3D                       # Center of the element
    dimensions: Dimensions
    rotation: float = 0.0                   # Radians
    rotation_axis: Axis = Axis.Z
    profile: tuple[Point3D, ...] = ()       # Control points for non-box outlines
    group: str = ""                         # Wall side, truss index, opening id
    tags: Mapping[str, str] = Field(default_factory=dict, validate_default=True)  # Rule that created it, role, etc.

    @field_validator("tags")
    @classmethod
    def freeze_tags(cls, tags: Mapping[str, str]) -> Mapping[str, str]:
        return _read_only(tags)

    @field_serializer("tags")
    def dump_tags(self, tags: Mapping[str, str]) -> dict[str, str]:
        return dict(tags)

    @property
    def role(self) -> str:
        return self.tags.get("role", "")

    def with_tags(self, **tags: str) -> StructuralElement:
        """Copy of this element with extra tags merged in."""
        return self.model_copy(update={"tags": _read_only({**self.tags, **tags})})

    def is_finite(self) -> bool:
        return (
            self.position.is_finite()
            and self.dimensions.is_finite()
            and all(p.is_finite() for p in self.profile)
            and math.isfinite(self.rotation)
        )


class GenerationWarning(BaseModel):
    """A non-fatal condition the caller should act on."""
    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    opening_id: str = ""


class FrameStats(BaseModel):
    """Summary statistics for a generated frame."""
    model_config = ConfigDict(frozen=True)

    total_elements: int = 0
    by_category: Mapping[str, int] = Field(default_factory=dict, validate_default=True)

    @field_validator("by_category")
    @classmethod
    def freeze_counts(cls, counts: Mapping[str, int]) -> Mapping[str, int]:
        return _read_only(counts)

    @field_serializer("by_category")
    def dump_counts(self, counts: Mapping[str, int]) -> dict[str, int]:
        return dict(counts)

    @classmethod
    def from_elements(cls, elements: tuple[StructuralElement, ...] | list[StructuralElement]) -> FrameStats:
        counts: dict[str, int] = {}
        for e in elements:
            counts[e.category.value] = counts.get(e.category.value, 0) + 1
        return cls(total_elements=len(elements), by_category=counts)

    def count(self, category: ElementCategory) -> int:
        return self.by_category.get(category.value, 0)


class FrameModel(BaseModel):
    """The complete generated building; an immutable snapshot of one generation pass."""
    model_config = ConfigDict(frozen=True)

    elements: tuple[StructuralElement, ...]
    stats: FrameStats = None  # type: ignore[assignment]
    warnings: tuple[GenerationWarning, ...] = ()

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            object.__setattr__(self, "stats", FrameStats.from_elements(self.elements))

    def of_category(self, category: ElementCategory) -> list[StructuralElement]:
        return [e for e in self.elements if e.category == category]
