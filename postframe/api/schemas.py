"""API request/response schemas."""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel

from postframe.models import (
    BOMLine, DimensionalSpec, FrameModel, GenerationConfig, GenerationWarning,
    PricingConfig, TakeoffConfig, TakeoffLine,
)
from postframe.pricing.catalog import CatalogItem


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    spec: DimensionalSpec
    config: GenerationConfig = GenerationConfig()


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    frame: FrameModel
    rounded_length: float
    rule_count: int                    # Rules that produced elements this pass


class EstimateRequest(BaseModel):
    """Request body for the /estimate endpoint."""
    spec: DimensionalSpec
    generation: GenerationConfig = GenerationConfig()
    takeoff: TakeoffConfig = TakeoffConfig()
    pricing: PricingConfig = PricingConfig()


class SnapshotRequest(EstimateRequest):
    """Request body for the /snapshot endpoint."""
    quote_id: str | None = None        # Quote the saved estimate belongs to


class BOMLineOut(BaseModel):
    category: str
    spec_description: str
    sku: str
    quantity: int
    unit_price: float
    subtotal: float

    @classmethod
    def from_line(cls, line: BOMLine) -> BOMLineOut:
        return cls(**line.model_dump(), subtotal=line.subtotal)


class EstimateResponse(BaseModel):
    """Response from the /estimate endpoint."""
    strategy: str
    takeoff: list[TakeoffLine]
    bom: list[BOMLineOut]
    totals_by_category: dict[str, float]
    total: float
    budget_price: float
    unpriced: list[str]
    warnings: list[GenerationWarning]


class SnapshotResponse(BaseModel):
    record: dict[str, Any]


class RuleInfo(BaseModel):
    id: str
    name: str


class CatalogResponse(BaseModel):
    items: list[CatalogItem]
