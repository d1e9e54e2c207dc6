"""Takeoff, bill-of-materials and estimate models."""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from .building import DimensionalSpec
from .framing import FrameModel, GenerationWarning


class TakeoffLine(BaseModel):
    """A counted, purchasable quantity before pricing."""
    model_config = ConfigDict(frozen=True)

    sku: str
    category: str                      # Material group (Structural, Framing, Trim, ...)
    description: str
    quantity: int                      # Pieces / panels / units, always rounded up
    measure: float = 0.0               # Raw measured amount before rounding
    measure_unit: str = "ea"           # ea | lf | sf | cy
    stock_length: float | None = None  # Piece length when linear feet were cut into pieces


class BOMLine(BaseModel):
    """One priced line of the bill of materials."""
    model_config = ConfigDict(frozen=True)

    category: str
    spec_description: str
    sku: str
    quantity: int
    unit_price: float                  # Per purchasable unit, already normalized

    @property
    def subtotal(self) -> float:
        return round(self.quantity * self.unit_price, 2)


class PricedBOM(BaseModel):
    """Priced lines plus the grand total."""
    model_config = ConfigDict(frozen=True)

    lines: tuple[BOMLine, ...] = ()
    total: float = 0.0
    unpriced: tuple[str, ...] = ()     # SKUs missing from the catalog

    def by_category(self) -> dict[str, float]:
        totals: dict[str, float] = {}
        for line in self.lines:
            totals[line.category] = round(totals.get(line.category, 0.0) + line.subtotal, 2)
        return totals


class Estimate(BaseModel):
    """Everything produced for one spec in one estimating pass."""
    spec: DimensionalSpec
    strategy: str
    frame: FrameModel | None = None
    takeoff: list[TakeoffLine] = []
    bom: PricedBOM = Field(default_factory=PricedBOM)
    budget_price: float = 0.0
    warnings: list[GenerationWarning] = []

    @property
    def total(self) -> float:
        return self.bom.total


class EstimateSnapshot(BaseModel):
    """Immutable record of a saved estimate, handed to persistence as one unit."""
    model_config = ConfigDict(frozen=True)

    spec: DimensionalSpec
    lines: tuple[BOMLine, ...]
    total_cost: float
    budget_price: float = 0.0
    strategy: str = "geometry"
    quote_id: str | None = None        # Links the saved estimate to a quote, when there is one
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_record(self) -> dict[str, Any]:
        """Flatten into the single row the persistence collaborator appends."""
        spec = self.spec
        return {
            "width": spec.width,
            "length": spec.length,
            "eave_height": spec.eave_height,
            "pitch": spec.pitch,
            "post_spacing": spec.post_spacing,
            "truss_spacing": spec.truss_spacing,
            "purlin_spacing": spec.purlin_spacing,
            "heel_height": spec.heel_height,
            "overhang": spec.eave_overhang,
            "model_data": spec.model_dump(mode="json"),
            "bom": [
                {**line.model_dump(mode="json"), "subtotal": line.subtotal}
                for line in self.lines
            ],
            "estimated_cost": self.total_cost,
            "budget_price": self.budget_price,
            "strategy": self.strategy,
            "quote_id": self.quote_id,
            "created_at": self.created_at.isoformat(),
        }
