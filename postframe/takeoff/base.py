"""Quantity takeoff interface and the rounding rules every strategy shares.

Counts are always rounded up. Linear trades get the waste factor before
they are cut into stock-length pieces; sheeting gets it before it is
divided into panels.
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod
from typing import NamedTuple

from postframe.models import DimensionalSpec, FrameModel, TakeoffConfig, TakeoffLine


class LineItem(NamedTuple):
    sku: str
    category: str
    description: str


SIDEWALL_POSTS = LineItem("POST-6X6-LAM", "Structural", "Sidewall posts, 6x6 laminated column")
ENDWALL_POSTS = LineItem("POST-6X6-LAM", "Structural", "Endwall posts, 6x6 laminated column")
TRUSSES = LineItem("TRUSS-PF", "Structural", "Post-frame trusses")
BEARERS = LineItem("LBR-2X10-16", "Structural", "Truss bearers, 2x10")
GIRTS = LineItem("LBR-2X4-16", "Framing", "Wall girts, 2x4")
PURLINS = LineItem("LBR-2X4-16", "Framing", "Roof purlins, 2x4")
FASCIA = LineItem("TRIM-FASCIA-16", "Trim", "Eave and rake fascia")
OPENING_FRAMING = LineItem("LBR-2X4-16", "Openings", "Opening headers, sills and jambs, 2x4")
OPENING_KITS = LineItem("OPENING-KIT", "Openings", "Rough opening trim kits")
WALL_SHEETING = LineItem("PANEL-WALL-29GA", "Sheeting", "Wall panels, 29 ga steel")
ROOF_SHEETING = LineItem("PANEL-ROOF-29GA", "Sheeting", "Roof panels, 29 ga steel")
CONCRETE = LineItem("CONC-4000", "Concrete", "Slab concrete, 4000 psi")

CUBIC_FEET_PER_YARD = 27.0


def ceil_units(value: float) -> int:
    """Round up, ignoring float noise below a millionth of a unit."""
    return max(0, math.ceil(round(value, 6)))


def pieces_for(linear_feet: float, stock_length: float, waste_factor: float = 1.0) -> int:
    return ceil_units(linear_feet * waste_factor / stock_length)


def panels_for(area: float, coverage: float, waste_factor: float = 1.0) -> int:
    return ceil_units(area * waste_factor / coverage)


class QuantityTakeoff(ABC):
    """Turns a spec (and optionally its generated frame) into takeoff lines."""

    def __init__(self, config: TakeoffConfig | None = None) -> None:
        self.config = config or TakeoffConfig()

    @abstractmethod
    def get_id(self) -> str:
        ...

    @abstractmethod
    def takeoff(self, spec: DimensionalSpec, frame: FrameModel | None = None) -> list[TakeoffLine]:
        ...

    # Line builders shared by the strategies; zero quantities are dropped

    def _count(self, lines: list[TakeoffLine], item: LineItem, count: int) -> None:
        if count <= 0:
            return
        lines.append(TakeoffLine(
            sku=item.sku, category=item.category, description=item.description,
            quantity=count, measure=float(count), measure_unit="ea",
        ))

    def _linear(self, lines: list[TakeoffLine], item: LineItem, linear_feet: float) -> None:
        stock = self.config.stock_length
        pieces = pieces_for(linear_feet, stock, self.config.waste_factor)
        if pieces <= 0:
            return
        lines.append(TakeoffLine(
            sku=item.sku, category=item.category,
            description=f"{item.description}, {stock:g}' stock",
            quantity=pieces, measure=round(linear_feet, 2), measure_unit="lf",
            stock_length=stock,
        ))

    def _area(self, lines: list[TakeoffLine], item: LineItem, area: float) -> None:
        panels = panels_for(area, self.config.panel_coverage, self.config.waste_factor)
        if panels <= 0:
            return
        lines.append(TakeoffLine(
            sku=item.sku, category=item.category, description=item.description,
            quantity=panels, measure=round(area, 2), measure_unit="sf",
        ))

    def _concrete(self, lines: list[TakeoffLine], cubic_feet: float) -> None:
        yards = cubic_feet / CUBIC_FEET_PER_YARD
        quantity = ceil_units(yards * self.config.concrete_waste_factor)
        if quantity <= 0:
            return
        lines.append(TakeoffLine(
            sku=CONCRETE.sku, category=CONCRETE.category, description=CONCRETE.description,
            quantity=quantity, measure=round(yards, 2), measure_unit="cy",
        ))
