"""High-level estimating service: facade for the API layer."""

from __future__ import annotations

import logging

from postframe import config as settings
from postframe.core.analyzer import validate_spec
from postframe.core.generator import FrameGenerator
from postframe.core.registry import RuleRegistry, create_default_registry
from postframe.pricing.catalog import InMemoryCatalog, MaterialCatalog, default_catalog
from postframe.pricing.engine import PricingEngine
from postframe.takeoff.strategies import STRATEGIES, create_takeoff
from postframe.models import (
    DimensionalSpec, Estimate, EstimateSnapshot, FrameModel, GenerationConfig,
    PricingConfig, TakeoffConfig, TakeoffLine,
)

logger = logging.getLogger(__name__)


def load_catalog() -> MaterialCatalog:
    """Catalog from ``POSTFRAME_CATALOG`` if set, else the embedded seed data."""
    path = settings.catalog_path()
    if path is None:
        return default_catalog()
    return InMemoryCatalog.from_json(path)


class EstimateService:
    """Runs generation, takeoff and pricing for one spec at a time."""

    def __init__(
        self,
        catalog: MaterialCatalog | None = None,
        registry: RuleRegistry | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.generator = FrameGenerator(self.registry)
        self.catalog = catalog or load_catalog()

    def generate(
        self,
        spec: DimensionalSpec,
        config: GenerationConfig | None = None,
    ) -> FrameModel:
        return self.generator.generate(spec, config or GenerationConfig())

    def takeoff(
        self,
        spec: DimensionalSpec,
        config: TakeoffConfig | None = None,
        frame: FrameModel | None = None,
    ) -> list[TakeoffLine]:
        config = config or TakeoffConfig()
        if config.strategy == "geometry" and frame is None:
            frame = self.generate(spec)
        return create_takeoff(config).takeoff(spec, frame)

    def estimate(
        self,
        spec: DimensionalSpec,
        generation: GenerationConfig | None = None,
        takeoff: TakeoffConfig | None = None,
        pricing: PricingConfig | None = None,
    ) -> Estimate:
        takeoff = takeoff or TakeoffConfig()

        frame: FrameModel | None = None
        if takeoff.strategy == "geometry":
            frame = self.generate(spec, generation)
        else:
            # No frame, but bad specs must still fail the same way
            validate_spec(spec)

        lines = create_takeoff(takeoff).takeoff(spec, frame)
        engine = PricingEngine(self.catalog, pricing)
        bom = engine.price(lines)

        estimate = Estimate(
            spec=spec,
            strategy=takeoff.strategy,
            frame=frame,
            takeoff=lines,
            bom=bom,
            budget_price=engine.budget_price(spec),
            warnings=list(frame.warnings) if frame else [],
        )
        logger.info(
            "Estimated %gx%gx%g ft building via %s takeoff: %d lines, $%.2f",
            spec.width, spec.length, spec.eave_height, takeoff.strategy,
            len(bom.lines), bom.total,
        )
        return estimate

    def snapshot(self, estimate: Estimate, quote_id: str | None = None) -> EstimateSnapshot:
        return EstimateSnapshot(
            quote_id=quote_id,
            spec=estimate.spec,
            lines=estimate.bom.lines,
            total_cost=estimate.total,
            budget_price=estimate.budget_price,
            strategy=estimate.strategy,
        )

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]

    def list_strategies(self) -> list[str]:
        return list(STRATEGIES)
