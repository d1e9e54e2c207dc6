"""Tests for quantity takeoff: rounding rules and agreement between strategies."""

from __future__ import annotations

import math

import pytest

from postframe.models import DimensionalSpec, Opening, TakeoffConfig, WallSide
from postframe.takeoff.base import ceil_units, panels_for, pieces_for
from postframe.takeoff.geometry import GeometryTakeoff
from postframe.takeoff.parametric import ParametricTakeoff
from postframe.takeoff.strategies import create_takeoff


def _quantities(lines) -> dict[str, int]:
    return {line.description: line.quantity for line in lines}


def _line(lines, prefix: str):
    return next(line for line in lines if line.description.startswith(prefix))


class TestRounding:

    def test_just_over_one_stock_length_needs_two_pieces(self):
        assert pieces_for(16.01, 16) == 2

    def test_exact_stock_length_is_one_piece(self):
        assert pieces_for(16.0, 16) == 1

    @pytest.mark.parametrize("value", [0.01, 1.5, 2.49, 2.51, 7.0001, 99.99])
    def test_ceil_never_round_or_floor(self, value):
        assert ceil_units(value) == math.ceil(value)

    def test_waste_applied_before_cutting(self):
        assert pieces_for(16.0, 16, waste_factor=1.10) == 2
        assert pieces_for(160.0, 16, waste_factor=1.10) == 11

    def test_float_noise_does_not_add_a_piece(self):
        assert pieces_for(0.1 + 0.2, 0.3) == 1

    def test_panels(self):
        assert panels_for(48.0, 48.0) == 1
        assert panels_for(48.5, 48.0) == 2


class TestGeometryTakeoff:

    def test_reference_counts(self, reference_spec, reference_frame):
        lines = GeometryTakeoff().takeoff(reference_spec, reference_frame)
        assert _line(lines, "Sidewall posts").quantity == 16
        assert _line(lines, "Endwall posts").quantity == 8
        assert _line(lines, "Post-frame trusses").quantity == 15

    def test_linear_trades_round_up_after_waste(self, reference_spec, reference_frame):
        lines = GeometryTakeoff().takeoff(reference_spec, reference_frame)
        girts = _line(lines, "Wall girts")
        assert girts.measure == pytest.approx(6 * 2 * (56 + 35))
        assert girts.measure_unit == "lf"
        assert girts.stock_length == 16
        assert girts.quantity == 76
        assert _line(lines, "Truss bearers").quantity == 16

    def test_every_linear_line_covers_measure(self, reference_spec, reference_frame):
        config = TakeoffConfig()
        for line in GeometryTakeoff(config).takeoff(reference_spec, reference_frame):
            if line.measure_unit != "lf":
                continue
            needed = line.measure * config.waste_factor / config.stock_length
            assert needed - 1e-6 <= line.quantity < needed + 1.01

    def test_no_opening_lines_without_openings(self, reference_spec, reference_frame):
        categories = {line.category for line in GeometryTakeoff().takeoff(reference_spec, reference_frame)}
        assert "Openings" not in categories

    def test_opening_area_removed_from_wall_sheeting(self, generator, reference_spec, reference_frame):
        door = Opening(id="oh", wall=WallSide.FRONT, offset=10, width=12, height=12)
        spec = reference_spec.model_copy(update={"openings": (door,)})
        plain = _line(GeometryTakeoff().takeoff(reference_spec, reference_frame), "Wall panels")
        cut = _line(GeometryTakeoff().takeoff(spec, generator.generate(spec)), "Wall panels")
        assert plain.measure - cut.measure == pytest.approx(144, abs=0.01)

    def test_opening_lines(self, generator, reference_spec):
        doors = (
            Opening(id="a", wall=WallSide.FRONT, offset=10, width=12, height=12),
            Opening(id="b", wall=WallSide.LEFT, offset=4, width=3, height=7),
        )
        spec = reference_spec.model_copy(update={"openings": doors})
        lines = GeometryTakeoff().takeoff(spec, generator.generate(spec))
        assert _line(lines, "Rough opening").quantity == 2
        assert _line(lines, "Opening headers").measure > 0

    def test_requires_frame(self, reference_spec):
        with pytest.raises(ValueError):
            GeometryTakeoff().takeoff(reference_spec)


class TestStrategyConsistency:

    def test_reference_post_counts_agree(self, reference_spec, reference_frame):
        geometric = GeometryTakeoff().takeoff(reference_spec, reference_frame)
        parametric = ParametricTakeoff().takeoff(reference_spec)
        for prefix in ("Sidewall posts", "Endwall posts", "Post-frame trusses"):
            assert _line(geometric, prefix).quantity == _line(parametric, prefix).quantity

    def test_reference_building_agrees_on_every_line(self, reference_spec, reference_frame):
        geometric = GeometryTakeoff().takeoff(reference_spec, reference_frame)
        parametric = ParametricTakeoff().takeoff(reference_spec)
        assert _quantities(geometric) == _quantities(parametric)

    def test_agree_with_openings(self, generator, reference_spec):
        doors = (Opening(id="a", wall=WallSide.BACK, offset=10, width=12, height=12),)
        spec = reference_spec.model_copy(update={"openings": doors})
        geometric = GeometryTakeoff().takeoff(spec, generator.generate(spec))
        parametric = ParametricTakeoff().takeoff(spec)
        assert _quantities(geometric) == _quantities(parametric)

    @pytest.mark.parametrize("width,length,height,pitch", [
        (24, 32, 10, 3),
        (40, 80, 16, 6),
        (30, 45, 12, 0),
        (33, 56, 14, 4),
        (33.5, 56, 14, 4),
    ])
    def test_posts_and_trusses_agree(self, generator, width, length, height, pitch):
        spec = DimensionalSpec(width=width, length=length, eave_height=height, pitch=pitch)
        geometric = GeometryTakeoff().takeoff(spec, generator.generate(spec))
        parametric = ParametricTakeoff().takeoff(spec)
        for prefix in ("Sidewall posts", "Endwall posts", "Post-frame trusses"):
            assert _line(geometric, prefix).quantity == _line(parametric, prefix).quantity


class TestStrategySelection:

    def test_default_is_geometry(self):
        assert create_takeoff().get_id() == "geometry"

    def test_parametric(self):
        takeoff = create_takeoff(TakeoffConfig(strategy="parametric", waste_factor=1.0))
        assert isinstance(takeoff, ParametricTakeoff)
        assert takeoff.config.waste_factor == 1.0

    def test_lower_waste_never_orders_more(self, reference_spec):
        lean = _quantities(ParametricTakeoff(TakeoffConfig(waste_factor=1.0)).takeoff(reference_spec))
        padded = _quantities(ParametricTakeoff(TakeoffConfig(waste_factor=1.2)).takeoff(reference_spec))
        for description, quantity in lean.items():
            assert quantity <= padded[description]
