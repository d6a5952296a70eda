"""Geometry kernel — bounds and vertices for each shape kind around a center."""

from __future__ import annotations

import math

from aisvg.ir.spec import (
    CircleShape,
    DiamondShape,
    EllipseShape,
    LineShape,
    RectangleShape,
    ShapeDefinition,
    TriangleShape,
)
from aisvg.layout.types import Bounds, Point
from aisvg.types import Orientation, TriangleKind

# Half-extent of the box used for lines and for triangle kinds without real geometry.
PLACEHOLDER_HALF: float = 50.0


def triangle_height(size: float) -> float:
    """Height of an equilateral triangle with the given side."""
    return size * math.sqrt(3) / 2


def bounds_for(shape: ShapeDefinition, center: Point) -> Bounds:
    """Axis-aligned bounding box of ``shape`` centered on ``center``."""
    if isinstance(shape, CircleShape):
        return Bounds.around(center, shape.radius, shape.radius)
    elif isinstance(shape, RectangleShape):
        return Bounds.around(center, shape.width / 2, shape.height / 2)
    elif isinstance(shape, EllipseShape):
        return Bounds.around(center, shape.radius_x, shape.radius_y)
    elif isinstance(shape, DiamondShape):
        # Pre-rotation square, smaller than the rotated shape's real extent.
        return Bounds.around(center, shape.size / 2, shape.size / 2)
    elif isinstance(shape, TriangleShape):
        return _triangle_bounds(shape, center)
    elif isinstance(shape, LineShape):
        # Lines get the placeholder box regardless of length and angle.
        return Bounds.around(center, PLACEHOLDER_HALF, PLACEHOLDER_HALF)
    raise TypeError(f"Unknown shape type: {type(shape).__name__}")


def _triangle_bounds(shape: TriangleShape, center: Point) -> Bounds:
    if shape.triangle_type != TriangleKind.Equilateral:
        return Bounds.around(center, PLACEHOLDER_HALF, PLACEHOLDER_HALF)
    half = shape.size / 2
    if shape.orientation in (Orientation.Left, Orientation.Right):
        return Bounds.around(center, half, triangle_height(shape.size) / 2)
    return Bounds.around(center, half, half)


def vertices_for(shape: ShapeDefinition, center: Point) -> list[Point]:
    """Polygon vertices for triangles and diamonds, endpoints for lines.

    Other shapes have no vertex list and return an empty list.
    """
    if isinstance(shape, TriangleShape):
        return triangle_vertices(shape, center)
    elif isinstance(shape, DiamondShape):
        return diamond_vertices(shape, center)
    elif isinstance(shape, LineShape):
        return list(line_endpoints(shape, center))
    elif isinstance(shape, (CircleShape, RectangleShape, EllipseShape)):
        return []
    raise TypeError(f"Unknown shape type: {type(shape).__name__}")


def triangle_vertices(shape: TriangleShape, center: Point) -> list[Point]:
    cx, cy = center.x, center.y
    if shape.triangle_type != TriangleKind.Equilateral:
        p = PLACEHOLDER_HALF
        return [Point(cx, cy - p), Point(cx - p, cy + p), Point(cx + p, cy + p)]

    s = shape.size
    h = triangle_height(s)
    if shape.orientation == Orientation.Right:
        return [Point(cx - s / 2, cy - h / 2), Point(cx - s / 2, cy + h / 2), Point(cx + s / 2, cy)]
    elif shape.orientation == Orientation.Left:
        return [Point(cx + s / 2, cy - h / 2), Point(cx + s / 2, cy + h / 2), Point(cx - s / 2, cy)]
    elif shape.orientation == Orientation.Up:
        return [Point(cx, cy - h / 2), Point(cx - s / 2, cy + h / 2), Point(cx + s / 2, cy + h / 2)]
    else:  # Down
        return [Point(cx, cy + h / 2), Point(cx - s / 2, cy - h / 2), Point(cx + s / 2, cy - h / 2)]


def diamond_vertices(shape: DiamondShape, center: Point) -> list[Point]:
    half = shape.size / 2
    cx, cy = center.x, center.y
    return [Point(cx, cy - half), Point(cx + half, cy), Point(cx, cy + half), Point(cx - half, cy)]


def line_endpoints(shape: LineShape, center: Point) -> tuple[Point, Point]:
    """Start and end of a line; the angle is a plain trigonometric angle in degrees."""
    theta = math.radians(shape.angle)
    dx = math.cos(theta) * shape.length / 2
    dy = math.sin(theta) * shape.length / 2
    return Point(center.x - dx, center.y - dy), Point(center.x + dx, center.y + dy)
