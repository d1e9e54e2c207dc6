"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from postframe.core import solver
from postframe.services.estimate_service import EstimateService
from postframe.api.schemas import (
    BOMLineOut, CatalogResponse, EstimateRequest, EstimateResponse,
    GenerateRequest, GenerateResponse, RuleInfo, SnapshotRequest, SnapshotResponse,
)

router = APIRouter()

# Shared service instance
_service = EstimateService()


@router.post("/generate", response_model=GenerateResponse)
async def generate_frame(request: GenerateRequest) -> GenerateResponse:
    """Generate the structural frame for a building spec."""
    frame = _service.generate(request.spec, request.config)
    return GenerateResponse(
        frame=frame,
        rounded_length=solver.rounded_length(request.spec),
        rule_count=len({e.tags["rule"] for e in frame.elements}),
    )


@router.post("/estimate", response_model=EstimateResponse)
async def estimate(request: EstimateRequest) -> EstimateResponse:
    """Take off and price a building."""
    result = _service.estimate(request.spec, request.generation, request.takeoff, request.pricing)
    return EstimateResponse(
        strategy=result.strategy,
        takeoff=result.takeoff,
        bom=[BOMLineOut.from_line(line) for line in result.bom.lines],
        totals_by_category=result.bom.by_category(),
        total=result.total,
        budget_price=result.budget_price,
        unpriced=list(result.bom.unpriced),
        warnings=result.warnings,
    )


@router.post("/snapshot", response_model=SnapshotResponse)
async def snapshot(request: SnapshotRequest) -> SnapshotResponse:
    """Build the record a caller persists when the user saves an estimate."""
    result = _service.estimate(request.spec, request.generation, request.takeoff, request.pricing)
    return SnapshotResponse(record=_service.snapshot(result, request.quote_id).to_record())


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all layout rules in execution order."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/strategies", response_model=list[str])
async def list_strategies() -> list[str]:
    return _service.list_strategies()


@router.get("/catalog", response_model=CatalogResponse)
async def catalog() -> CatalogResponse:
    return CatalogResponse(items=_service.catalog.items())


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
