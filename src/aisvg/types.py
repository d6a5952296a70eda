"""Shared type definitions for aisvg.

Enums used across parsers, IR, layout, and renderers. Enum values are the
exact strings used in the JSON documents.
"""

from __future__ import annotations

from enum import Enum


class ShapeKind(Enum):
    Triangle = "triangle"
    Rectangle = "rectangle"
    Circle = "circle"
    Ellipse = "ellipse"
    Line = "line"
    Diamond = "diamond"


class TriangleKind(Enum):
    Equilateral = "equilateral"
    Isosceles = "isosceles"  # placeholder geometry
    Right = "right"  # placeholder geometry


class Orientation(Enum):
    Up = "pointing_up"
    Down = "pointing_down"
    Left = "pointing_left"
    Right = "pointing_right"


class PositionKind(Enum):
    Absolute = "absolute"
    Centered = "centered"
    Relative = "relative"


class Alignment(Enum):
    TipTouchesLeft = "tip_touches_left"
    TipTouchesRight = "tip_touches_right"
    TipTouchesTop = "tip_touches_top"
    TipTouchesBottom = "tip_touches_bottom"
    EdgeTouchesLeft = "edge_touches_left"
    EdgeTouchesRight = "edge_touches_right"
    EdgeTouchesTop = "edge_touches_top"
    EdgeTouchesBottom = "edge_touches_bottom"
    CenterAligned = "center_aligned"
    AdjacentLeft = "adjacent_left"
    AdjacentRight = "adjacent_right"
    Unknown = "unknown"  # unrecognised input; resolves like CenterAligned

    @classmethod
    def parse(cls, value: str | None) -> Alignment | None:
        """Map a raw alignment string to an Alignment, or Unknown if unrecognised."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return cls.Unknown


class ElementKind(Enum):
    """SVG element types accepted in coordinate documents."""

    Rect = "rect"
    Circle = "circle"
    Ellipse = "ellipse"
    Line = "line"
    Polyline = "polyline"
    Polygon = "polygon"
    Path = "path"
    Text = "text"
