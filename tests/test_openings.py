"""Tests for rough-opening framing and opening bounds handling."""

from __future__ import annotations

import math

import pytest

from postframe.core.errors import InvalidSpec, OpeningOutOfBounds
from postframe.models import (
    Axis, DimensionalSpec, ElementCategory, GenerationConfig, Opening, WallSide,
)


def _spec_with(*openings: Opening) -> DimensionalSpec:
    return DimensionalSpec(width=35, length=56, eave_height=14, pitch=4, openings=openings)


def _members(frame, opening_id: str, role: str) -> list:
    return [
        e for e in frame.of_category(ElementCategory.OPENING_FRAME)
        if e.group == opening_id and e.role == role
    ]


class TestFrontWallOpening:

    @pytest.fixture
    def frame(self, generator):
        door = Opening(id="door-1", wall=WallSide.FRONT, offset=8, width=4, height=7)
        return generator.generate(_spec_with(door))

    def test_four_members(self, frame):
        members = [e for e in frame.of_category(ElementCategory.OPENING_FRAME) if e.group == "door-1"]
        assert len(members) == 4
        assert len(_members(frame, "door-1", "jamb")) == 2

    def test_header_and_sill_centered_on_opening(self, frame):
        expected_x = -35 / 2 + 8 + 4 / 2
        header = _members(frame, "door-1", "header")[0]
        sill = _members(frame, "door-1", "sill")[0]
        assert header.position.x == pytest.approx(expected_x)
        assert sill.position.x == pytest.approx(expected_x)

    def test_sized_with_girt_margin(self, frame):
        tg = DimensionalSpec().girt_thickness
        header = _members(frame, "door-1", "header")[0]
        jamb = _members(frame, "door-1", "jamb")[0]
        assert header.dimensions.length == pytest.approx(4 + 2 * tg)
        assert jamb.dimensions.width == pytest.approx(7 + 2 * tg)
        assert header.position.y == pytest.approx(7 + tg / 2)

    def test_jambs_outside_rough_opening(self, frame):
        tg = DimensionalSpec().girt_thickness
        xs = sorted(j.position.x for j in _members(frame, "door-1", "jamb"))
        assert xs == pytest.approx([-9.5 - tg / 2, -5.5 + tg / 2])

    def test_in_front_girt_plane(self, frame):
        tg = DimensionalSpec().girt_thickness
        for member in _members(frame, "door-1", "header"):
            assert member.position.z == pytest.approx(28 - tg / 2)
            assert member.rotation == 0


class TestSidewallOpening:

    def test_left_wall_runs_along_length_and_turns(self, generator):
        window = Opening(id="win-1", wall=WallSide.LEFT, offset=10, width=12, height=4, sill_elevation=3)
        frame = generator.generate(_spec_with(window))
        tg = DimensionalSpec().girt_thickness
        header = _members(frame, "win-1", "header")[0]
        assert header.position.z == pytest.approx(-28 + 10 + 6)
        assert header.position.x == pytest.approx(-(17.5 - tg / 2))
        assert header.position.y == pytest.approx(3 + 4 + tg / 2)
        assert header.rotation == pytest.approx(math.pi / 2)
        assert header.rotation_axis == Axis.Y

    def test_back_wall_mirrors_front(self, generator):
        door = Opening(id="d", wall=WallSide.BACK, offset=2, width=10, height=10)
        frame = generator.generate(_spec_with(door))
        header = _members(frame, "d", "header")[0]
        assert header.position.z < 0
        assert header.position.x == pytest.approx(-17.5 + 7)


class TestOutOfBounds:

    def test_overrun_is_flagged_not_clamped(self, generator):
        door = Opening(id="wide", wall=WallSide.FRONT, offset=33, width=4, height=7)
        frame = generator.generate(_spec_with(door))
        assert [w.code for w in frame.warnings] == ["opening_out_of_bounds"]
        assert frame.warnings[0].opening_id == "wide"
        header = _members(frame, "wide", "header")[0]
        assert header.position.x + header.dimensions.length / 2 > 17.5

    def test_negative_offset_is_flagged(self, generator):
        door = Opening(id="neg", wall=WallSide.RIGHT, offset=-1, width=4, height=7)
        frame = generator.generate(_spec_with(door))
        assert frame.warnings[0].code == "opening_out_of_bounds"

    def test_sidewall_uses_rounded_length(self, generator):
        # 50' grows to 56', so an opening ending at 54' still fits
        door = Opening(id="ok", wall=WallSide.LEFT, offset=44, width=10, height=10)
        spec = DimensionalSpec(length=50, openings=(door,))
        assert generator.generate(spec).warnings == ()

    def test_strict_mode_raises(self, generator):
        door = Opening(id="wide", wall=WallSide.FRONT, offset=33, width=4, height=7)
        with pytest.raises(OpeningOutOfBounds) as exc_info:
            generator.generate(_spec_with(door), GenerationConfig(strict_openings=True))
        assert exc_info.value.opening_id == "wide"

    def test_in_bounds_has_no_warnings(self, generator):
        door = Opening(id="fits", wall=WallSide.FRONT, offset=31, width=4, height=7)
        assert generator.generate(_spec_with(door)).warnings == ()


class TestInvalidOpenings:

    def test_duplicate_ids_rejected(self, generator):
        a = Opening(id="x", wall=WallSide.FRONT, offset=1, width=3, height=7)
        b = Opening(id="x", wall=WallSide.BACK, offset=1, width=3, height=7)
        with pytest.raises(InvalidSpec):
            generator.generate(_spec_with(a, b))

    def test_zero_width_rejected(self, generator):
        with pytest.raises(InvalidSpec):
            generator.generate(_spec_with(Opening(id="z", wall=WallSide.FRONT, offset=1, width=0, height=7)))

    def test_negative_sill_rejected(self, generator):
        with pytest.raises(InvalidSpec):
            generator.generate(_spec_with(
                Opening(id="s", wall=WallSide.FRONT, offset=1, width=3, height=3, sill_elevation=-1),
            ))
