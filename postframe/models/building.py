"""Building input models: the dimensional spec and its wall openings."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict


class WallSide(str, Enum):
    FRONT = "front"  # gable endwall at +z
    BACK = "back"    # gable endwall at -z
    LEFT = "left"    # sidewall at -x
    RIGHT = "right"  # sidewall at +x

    @property
    def is_endwall(self) -> bool:
        return self in (WallSide.FRONT, WallSide.BACK)


class Opening(BaseModel):
    """A rough opening (door, window, overhead door) in one wall."""
    model_config = ConfigDict(frozen=True)

    id: str
    wall: WallSide
    offset: float          # Distance from the wall's reference corner to the opening edge (ft)
    width: float
    height: float
    sill_elevation: float = 0.0

    @property
    def end(self) -> float:
        return self.offset + self.width

    @property
    def area(self) -> float:
        return self.width * self.height


class DimensionalSpec(BaseModel):
    """
    Complete input for one estimate. All lengths in feet.

    Replaced wholesale on every edit; use ``model_copy(update=...)`` to
    derive a changed spec. Validation happens in the analysis phase of
    generation so that bad values surface as ``InvalidSpec``.
    """
    model_config = ConfigDict(frozen=True)

    width: float = 35.0
    length: float = 56.0
    eave_height: float = 14.0
    pitch: float = 4.0              # Rise per 12 of run

    # Actual lumber sizes
    post_thickness: float = 0.458   # 6x6 column (5.5")
    girt_thickness: float = 0.125   # 2x lumber laid flat (1.5")
    girt_width: float = 0.292       # 2x4 face (3.5")
    chord_width: float = 0.458      # 2x6 truss chord (5.5")
    bearer_width: float = 0.771     # 2x10 carrier (9.25")
    fascia_width: float = 0.5       # 2x6 fascia board face
    heel_height: float = 0.5
    eave_overhang: float = 1.5
    gable_overhang: float = 1.0
    slab_thickness: float = 0.5
    sheeting_thickness: float = 0.04

    # On-center spacing
    post_spacing: float = 8.0
    truss_spacing: float = 4.0
    purlin_spacing: float = 2.0
    girt_interval: float = 2.0
    girt_top_clearance: float = 1.5  # No girt row this close to the eave

    openings: tuple[Opening, ...] = ()

    def get_opening(self, opening_id: str) -> Opening | None:
        for o in self.openings:
            if o.id == opening_id:
                return o
        return None
