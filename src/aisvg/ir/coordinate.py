"""Coordinate document structures: SVG elements with explicit coordinates.

Layers are drawn in the order given (first = bottom). Each element kind has a
fixed attribute table, ``ELEMENT_ATTRS``, listing its document keys, the SVG
attribute each maps to, and whether it is required.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from aisvg.ir.spec import Style
from aisvg.types import ElementKind


@dataclass(frozen=True)
class AttrSpec:
    key: str  # document key
    attr: str  # SVG attribute
    required: bool = True
    numeric: bool = True


ELEMENT_ATTRS: dict[ElementKind, tuple[AttrSpec, ...]] = {
    ElementKind.Rect: (
        AttrSpec("x", "x"),
        AttrSpec("y", "y"),
        AttrSpec("width", "width"),
        AttrSpec("height", "height"),
        AttrSpec("rx", "rx", required=False),
        AttrSpec("ry", "ry", required=False),
    ),
    ElementKind.Circle: (AttrSpec("cx", "cx"), AttrSpec("cy", "cy"), AttrSpec("r", "r")),
    ElementKind.Ellipse: (
        AttrSpec("cx", "cx"),
        AttrSpec("cy", "cy"),
        AttrSpec("rx", "rx"),
        AttrSpec("ry", "ry"),
    ),
    ElementKind.Line: (AttrSpec("x1", "x1"), AttrSpec("y1", "y1"), AttrSpec("x2", "x2"), AttrSpec("y2", "y2")),
    ElementKind.Polyline: (AttrSpec("points", "points", numeric=False),),
    ElementKind.Polygon: (AttrSpec("points", "points", numeric=False),),
    ElementKind.Path: (AttrSpec("d", "d", numeric=False),),
    ElementKind.Text: (
        AttrSpec("x", "x"),
        AttrSpec("y", "y"),
        AttrSpec("fontSize", "font-size", required=False),
        AttrSpec("fontFamily", "font-family", required=False, numeric=False),
        AttrSpec("textAnchor", "text-anchor", required=False, numeric=False),
        AttrSpec("dominantBaseline", "dominant-baseline", required=False, numeric=False),
    ),
}


@dataclass
class ViewBox:
    width: float
    height: float
    min_x: float = 0
    min_y: float = 0


@dataclass
class CoordinateLayer:
    id: str
    kind: ElementKind
    props: dict[str, Any] = field(default_factory=dict)  # geometry only, keyed as in ELEMENT_ATTRS
    style: Style = field(default_factory=Style)
    transform: str | None = None
    text: str | None = None  # content of a text element
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        props: dict[str, Any] = {**self.style.to_dict(), **self.props}
        if self.transform is not None:
            props["transform"] = self.transform
        if self.text is not None:
            props["text"] = self.text
        out: dict[str, Any] = {"id": self.id, "type": self.kind.value, "props": props}
        if self.description is not None:
            out["description"] = self.description
        return out


@dataclass
class CoordinateSpec:
    name: str
    description: str
    view_box: ViewBox
    layers: list[CoordinateLayer] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "viewBox": {
                "width": self.view_box.width,
                "height": self.view_box.height,
                "minX": self.view_box.min_x,
                "minY": self.view_box.min_y,
            },
            "layers": [layer.to_dict() for layer in self.layers],
        }
