"""Tests for layout.position — absolute, centered and relative resolution."""

from __future__ import annotations

import pytest

from aisvg.errors import UnknownReferenceError
from aisvg.ir.spec import CanvasSize, Position
from aisvg.layout.position import align, resolve_center
from aisvg.layout.types import Bounds, Point, ResolvedPlacement
from aisvg.types import Alignment

CANVAS = CanvasSize(width=400, height=400)

# Circle of radius 30 centered at (200, 200).
CIRCLE = ResolvedPlacement(id="c", center=Point(200, 200), bounds=Bounds(170, 230, 170, 230))


def placements() -> dict[str, ResolvedPlacement]:
    return {"c": CIRCLE}


class TestAbsoluteAndCentered:
    def test_absolute_verbatim(self):
        assert resolve_center(Position.absolute(12.5, -40), CANVAS, {}) == Point(12.5, -40)

    def test_absolute_outside_canvas_allowed(self):
        assert resolve_center(Position.absolute(9000, 9000), CANVAS, {}) == Point(9000, 9000)

    @pytest.mark.parametrize("width,height", [(400, 400), (300, 120), (1, 3)])
    def test_centered(self, width, height):
        canvas = CanvasSize(width=width, height=height)
        assert resolve_center(Position.centered(), canvas, placements()) == Point(width / 2, height / 2)


class TestRelative:
    @pytest.mark.parametrize(
        "alignment,expected",
        [
            (Alignment.TipTouchesLeft, Point(170, 200)),
            (Alignment.TipTouchesRight, Point(230, 200)),
            (Alignment.TipTouchesTop, Point(200, 170)),
            (Alignment.TipTouchesBottom, Point(200, 230)),
            (Alignment.CenterAligned, Point(200, 200)),
            (Alignment.AdjacentLeft, Point(170, 200)),
            (Alignment.AdjacentRight, Point(230, 200)),
            (Alignment.Unknown, Point(200, 200)),
            (None, Point(200, 200)),
        ],
    )
    def test_alignment_without_offset(self, alignment, expected):
        pos = Position.relative("c", alignment=alignment)
        assert resolve_center(pos, CANVAS, placements()) == expected

    def test_tip_touches_right_radius_30(self):
        pos = Position.relative("c", alignment=Alignment.TipTouchesRight, offset=0)
        assert resolve_center(pos, CANVAS, placements()) == Point(230, 200)

    def test_tip_touches_left_adds_offset(self):
        assert align(CIRCLE, Alignment.TipTouchesLeft, 10) == Point(180, 200)

    def test_adjacent_left_subtracts_offset(self):
        assert align(CIRCLE, Alignment.AdjacentLeft, 10) == Point(160, 200)

    def test_adjacent_right_adds_offset(self):
        assert align(CIRCLE, Alignment.AdjacentRight, 10) == Point(240, 200)

    def test_vertical_offsets(self):
        assert align(CIRCLE, Alignment.TipTouchesTop, 5) == Point(200, 175)
        assert align(CIRCLE, Alignment.TipTouchesBottom, -5) == Point(200, 225)

    def test_center_aligned_ignores_offset(self):
        assert align(CIRCLE, Alignment.CenterAligned, 99) == Point(200, 200)

    @pytest.mark.parametrize(
        "edge,tip",
        [
            (Alignment.EdgeTouchesLeft, Alignment.TipTouchesLeft),
            (Alignment.EdgeTouchesRight, Alignment.TipTouchesRight),
            (Alignment.EdgeTouchesTop, Alignment.TipTouchesTop),
            (Alignment.EdgeTouchesBottom, Alignment.TipTouchesBottom),
        ],
    )
    def test_edge_touches_matches_tip_touches(self, edge, tip):
        assert align(CIRCLE, edge, 7) == align(CIRCLE, tip, 7)

    def test_unknown_reference(self):
        pos = Position.relative("missing", alignment=Alignment.CenterAligned)
        with pytest.raises(UnknownReferenceError) as exc:
            resolve_center(pos, CANVAS, placements())
        assert exc.value.missing_id == "missing"
        assert "missing" in str(exc.value)

    def test_mapping_not_mutated(self):
        mapping = placements()
        resolve_center(Position.relative("c", alignment=Alignment.TipTouchesLeft), CANVAS, mapping)
        assert mapping == {"c": CIRCLE}


class TestAlignmentParse:
    def test_known_value(self):
        assert Alignment.parse("adjacent_left") == Alignment.AdjacentLeft

    def test_unknown_value(self):
        assert Alignment.parse("hovering_above") == Alignment.Unknown

    def test_none(self):
        assert Alignment.parse(None) is None
