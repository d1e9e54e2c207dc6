"""Tests for the estimating service facade and saved-estimate records."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from postframe.core.errors import InvalidSpec
from postframe.models import (
    DimensionalSpec, GenerationConfig, Opening, PricingConfig, TakeoffConfig, WallSide,
)
from postframe.pricing.catalog import InMemoryCatalog
from postframe.services.estimate_service import EstimateService, load_catalog


class TestEstimate:

    def test_geometry_estimate_carries_frame(self, service, reference_spec):
        result = service.estimate(reference_spec)
        assert result.strategy == "geometry"
        assert result.frame is not None
        assert result.total == result.bom.total > 0
        assert result.budget_price == pytest.approx(176960.0)

    def test_parametric_estimate_skips_frame(self, service, reference_spec):
        result = service.estimate(reference_spec, takeoff=TakeoffConfig(strategy="parametric"))
        assert result.strategy == "parametric"
        assert result.frame is None
        assert result.warnings == []

    def test_strategies_price_the_reference_building_the_same(self, service, reference_spec):
        geometric = service.estimate(reference_spec)
        parametric = service.estimate(reference_spec, takeoff=TakeoffConfig(strategy="parametric"))
        assert geometric.total == pytest.approx(parametric.total)

    def test_invalid_spec_rejected_by_both_strategies(self, service):
        bad = DimensionalSpec(width=-5)
        with pytest.raises(InvalidSpec):
            service.estimate(bad)
        with pytest.raises(InvalidSpec):
            service.estimate(bad, takeoff=TakeoffConfig(strategy="parametric"))

    def test_opening_warnings_surface(self, service, reference_spec):
        door = Opening(id="big", wall=WallSide.FRONT, offset=30, width=10, height=10)
        spec = reference_spec.model_copy(update={"openings": (door,)})
        result = service.estimate(spec)
        assert [w.opening_id for w in result.warnings] == ["big"]

    def test_pricing_config_changes_budget_only(self, service, reference_spec):
        cheap = service.estimate(reference_spec, pricing=PricingConfig(base_unit_cost=1, height_cost=0))
        assert cheap.budget_price == pytest.approx(35 * 56)
        assert cheap.total == pytest.approx(service.estimate(reference_spec).total)

    def test_disabled_rule_drops_its_lines(self, service, reference_spec):
        result = service.estimate(
            reference_spec, generation=GenerationConfig(disabled_rules=["roof.fascia"]),
        )
        assert all(line.category != "Trim" for line in result.takeoff)

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError):
            TakeoffConfig(strategy="guess")


class TestTakeoff:

    def test_geometry_takeoff_builds_its_own_frame(self, service, reference_spec):
        lines = service.takeoff(reference_spec)
        assert any(line.sku == "TRUSS-PF" and line.quantity == 15 for line in lines)


class TestSnapshot:

    @pytest.fixture
    def record(self, service, reference_spec):
        return service.snapshot(service.estimate(reference_spec)).to_record()

    def test_record_fields(self, record):
        for key in (
            "width", "length", "eave_height", "pitch", "post_spacing", "truss_spacing",
            "purlin_spacing", "heel_height", "overhang", "model_data", "bom",
            "estimated_cost", "budget_price", "strategy", "quote_id", "created_at",
        ):
            assert key in record
        assert record["width"] == 35
        assert record["overhang"] == 1.5

    def test_record_is_json_ready(self, record):
        restored = json.loads(json.dumps(record))
        assert restored["model_data"]["length"] == 56
        assert restored["bom"][0]["subtotal"] == record["bom"][0]["subtotal"]

    def test_total_matches_lines(self, record):
        assert record["estimated_cost"] == pytest.approx(
            sum(line["subtotal"] for line in record["bom"]), abs=0.01,
        )

    def test_quote_id_passes_through(self, service, reference_spec):
        snapshot = service.snapshot(service.estimate(reference_spec), quote_id="Q-7")
        assert snapshot.quote_id == "Q-7"
        assert snapshot.to_record()["quote_id"] == "Q-7"

    def test_snapshot_is_immutable(self, service, reference_spec):
        snapshot = service.snapshot(service.estimate(reference_spec))
        with pytest.raises(ValidationError):
            snapshot.total_cost = 0  # type: ignore[misc]


class TestCatalogLoading:

    def test_default_catalog_when_unset(self, monkeypatch):
        monkeypatch.delenv("POSTFRAME_CATALOG", raising=False)
        assert load_catalog().lookup("TRUSS-PF") is not None

    def test_catalog_from_env(self, monkeypatch, tmp_path):
        path = tmp_path / "prices.json"
        path.write_text(json.dumps([{"sku": "TRUSS-PF", "description": "truss", "unit_price": 400}]))
        monkeypatch.setenv("POSTFRAME_CATALOG", str(path))
        catalog = load_catalog()
        assert isinstance(catalog, InMemoryCatalog)
        assert catalog.lookup("TRUSS-PF").unit_price == 400
        assert catalog.lookup("POST-6X6-LAM") is None

    def test_missing_prices_flagged_in_estimate(self, reference_spec, tmp_path, monkeypatch):
        path = tmp_path / "prices.json"
        path.write_text(json.dumps([{"sku": "TRUSS-PF", "description": "truss", "unit_price": 400}]))
        monkeypatch.setenv("POSTFRAME_CATALOG", str(path))
        result = EstimateService().estimate(reference_spec)
        assert result.total == pytest.approx(15 * 400)
        assert "POST-6X6-LAM" in result.bom.unpriced


class TestIntrospection:

    def test_rules_in_execution_order(self, service):
        ids = [r["id"] for r in service.list_rules()]
        assert ids[0] == "foundation.slab"
        assert ids.index("roof.trusses") < ids.index("roof.purlins") < ids.index("skin.roof")
        assert len(ids) == 11

    def test_strategies(self, service):
        assert service.list_strategies() == ["geometry", "parametric"]
