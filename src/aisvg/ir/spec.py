"""Specification data structures for semantic SVG documents.

These types represent the parsed form of the input document: a closed set
of shape dataclasses (one per ShapeKind), Position, Style, Layer, and the
top-level Specification.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from aisvg.types import Alignment, Orientation, PositionKind, ShapeKind, TriangleKind


@dataclass
class Style:
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    opacity: float | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.fill is not None:
            out["fill"] = self.fill
        if self.stroke is not None:
            out["stroke"] = self.stroke
        if self.stroke_width is not None:
            out["strokeWidth"] = self.stroke_width
        if self.opacity is not None:
            out["opacity"] = self.opacity
        return out


# ─── Shapes ──────────────────────────────────────────────────────────────────


@dataclass
class TriangleShape:
    size: float
    orientation: Orientation = Orientation.Up
    triangle_type: TriangleKind = TriangleKind.Equilateral
    kind = ShapeKind.Triangle

    def to_dict(self) -> dict[str, Any]:
        return {
            "shapeType": self.kind.value,
            "triangleType": self.triangle_type.value,
            "orientation": self.orientation.value,
            "size": self.size,
        }


@dataclass
class RectangleShape:
    width: float
    height: float
    rounded: float | None = None
    kind = ShapeKind.Rectangle

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"shapeType": self.kind.value, "width": self.width, "height": self.height}
        if self.rounded is not None:
            out["rounded"] = self.rounded
        return out


@dataclass
class CircleShape:
    radius: float
    kind = ShapeKind.Circle

    def to_dict(self) -> dict[str, Any]:
        return {"shapeType": self.kind.value, "radius": self.radius}


@dataclass
class EllipseShape:
    radius_x: float
    radius_y: float
    kind = ShapeKind.Ellipse

    def to_dict(self) -> dict[str, Any]:
        return {"shapeType": self.kind.value, "radiusX": self.radius_x, "radiusY": self.radius_y}


@dataclass
class LineShape:
    length: float
    angle: float = 0.0  # degrees, 0 = pointing right
    kind = ShapeKind.Line

    def to_dict(self) -> dict[str, Any]:
        return {"shapeType": self.kind.value, "length": self.length, "angle": self.angle}


@dataclass
class DiamondShape:
    size: float  # side of the square before the 45° rotation
    kind = ShapeKind.Diamond

    def to_dict(self) -> dict[str, Any]:
        return {"shapeType": self.kind.value, "size": self.size}


ShapeDefinition = Union[TriangleShape, RectangleShape, CircleShape, EllipseShape, LineShape, DiamondShape]


# ─── Positions ───────────────────────────────────────────────────────────────


@dataclass
class Position:
    kind: PositionKind
    x: float = 0.0
    y: float = 0.0
    relative_to: str | None = None
    alignment: Alignment | None = None
    offset: float | None = None

    @classmethod
    def absolute(cls, x: float, y: float) -> Position:
        return cls(kind=PositionKind.Absolute, x=x, y=y)

    @classmethod
    def centered(cls) -> Position:
        return cls(kind=PositionKind.Centered)

    @classmethod
    def relative(cls, relative_to: str, alignment: Alignment | None = None, offset: float | None = None) -> Position:
        return cls(kind=PositionKind.Relative, relative_to=relative_to, alignment=alignment, offset=offset)

    def referent(self) -> str | None:
        """The id this position depends on, if any."""
        if self.kind == PositionKind.Relative:
            return self.relative_to
        return None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.kind.value}
        if self.kind == PositionKind.Absolute:
            out["x"] = self.x
            out["y"] = self.y
        elif self.kind == PositionKind.Relative:
            out["relativeTo"] = self.relative_to
            if self.alignment is not None and self.alignment != Alignment.Unknown:
                out["alignment"] = self.alignment.value
            if self.offset is not None:
                out["offset"] = self.offset
        return out


# ─── Layers and specification ────────────────────────────────────────────────


@dataclass
class Layer:
    id: str
    shape: ShapeDefinition
    position: Position = field(default_factory=Position.centered)
    style: Style = field(default_factory=Style)
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "shape": self.shape.to_dict(),
            "position": self.position.to_dict(),
            "style": self.style.to_dict(),
        }
        if self.description is not None:
            out["description"] = self.description
        return out


@dataclass
class CanvasSize:
    width: float
    height: float


@dataclass
class Specification:
    name: str
    description: str
    canvas: CanvasSize
    layers: list[Layer] = field(default_factory=list)

    def layer_ids(self) -> list[str]:
        return [layer.id for layer in self.layers]

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the JSON document shape accepted by the parser."""
        return {
            "name": self.name,
            "description": self.description,
            "canvasSize": {"width": self.canvas.width, "height": self.canvas.height},
            "layers": [layer.to_dict() for layer in self.layers],
        }
