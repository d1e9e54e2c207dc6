"""Shared fixtures for estimator tests."""

from __future__ import annotations

import pytest

from postframe.core.generator import FrameGenerator
from postframe.core.registry import create_default_registry
from postframe.models import DimensionalSpec, FrameModel
from postframe.pricing.catalog import default_catalog
from postframe.services.estimate_service import EstimateService


@pytest.fixture
def reference_spec() -> DimensionalSpec:
    """35' x 56' x 14' building with a 4/12 roof and no openings."""
    return DimensionalSpec(width=35, length=56, eave_height=14, pitch=4)


@pytest.fixture
def generator() -> FrameGenerator:
    return FrameGenerator(create_default_registry())


@pytest.fixture
def reference_frame(generator: FrameGenerator, reference_spec: DimensionalSpec) -> FrameModel:
    return generator.generate(reference_spec)


@pytest.fixture
def service() -> EstimateService:
    return EstimateService(catalog=default_catalog())
