"""Parser for semantic documents (JSON text or an already decoded mapping).

Keys follow the camelCase shape of the documents returned by the
text-generation service (``canvasSize``, ``shapeType``, ``relativeTo`` ...).
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from typing import Any

from aisvg.errors import SpecError
from aisvg.ir.spec import (
    CanvasSize,
    CircleShape,
    DiamondShape,
    EllipseShape,
    Layer,
    LineShape,
    Position,
    RectangleShape,
    ShapeDefinition,
    Specification,
    Style,
    TriangleShape,
)
from aisvg.types import Alignment, Orientation, PositionKind, ShapeKind, TriangleKind

_FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*\n?")
_FENCE_CLOSE_RE = re.compile(r"\n?```\s*$")


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence, if present."""
    text = text.strip()
    if text.startswith("```"):
        text = _FENCE_OPEN_RE.sub("", text)
        text = _FENCE_CLOSE_RE.sub("", text)
    return text


class SemanticParser:
    """Parser for semantic (relationally positioned) documents."""

    def parse(self, src: str) -> Specification:
        try:
            doc = json.loads(strip_code_fence(src))
        except json.JSONDecodeError as e:
            raise SpecError(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e
        return self.parse_mapping(doc)

    def parse_mapping(self, doc: Any) -> Specification:
        if not isinstance(doc, Mapping):
            raise SpecError("Specification must be a JSON object")

        canvas_doc = _require(doc, "canvasSize", "specification")
        if not isinstance(canvas_doc, Mapping):
            raise SpecError("canvasSize must be an object")
        canvas = CanvasSize(
            width=_number(canvas_doc, "width", "canvasSize"),
            height=_number(canvas_doc, "height", "canvasSize"),
        )

        layers_doc = doc.get("layers", [])
        if not isinstance(layers_doc, list):
            raise SpecError("layers must be a list")

        layers: list[Layer] = []
        seen: set[str] = set()
        for i, layer_doc in enumerate(layers_doc):
            layer = _parse_layer(layer_doc, i)
            if layer.id in seen:
                raise SpecError(f"Duplicate layer id '{layer.id}'")
            seen.add(layer.id)
            layers.append(layer)

        return Specification(
            name=str(doc.get("name", "untitled")),
            description=str(doc.get("description", "")),
            canvas=canvas,
            layers=layers,
        )


# ─── Helpers ─────────────────────────────────────────────────────────────────


def _require(doc: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in doc:
        raise SpecError(f"{where}: missing required key '{key}'")
    return doc[key]


def _number(doc: Mapping[str, Any], key: str, where: str) -> float:
    value = _require(doc, key, where)
    return _as_number(value, key, where)


def _optional_number(doc: Mapping[str, Any], key: str, where: str) -> float | None:
    value = doc.get(key)
    if value is None:
        return None
    return _as_number(value, key, where)


def _as_number(value: Any, key: str, where: str) -> float:
    # bool is an int subclass but never a valid dimension
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SpecError(f"{where}: '{key}' must be a number, got {value!r}")
    try:
        finite = math.isfinite(float(value))
    except OverflowError:
        finite = False
    if not finite:
        raise SpecError(f"{where}: '{key}' must be a finite number")
    return value


def _enum(enum_cls: type, value: Any, key: str, where: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise SpecError(f"{where}: unknown {key} {value!r} (expected one of: {allowed})") from None


def _parse_layer(doc: Any, index: int) -> Layer:
    if not isinstance(doc, Mapping):
        raise SpecError(f"layers[{index}] must be an object")
    layer_id = _require(doc, "id", f"layers[{index}]")
    if not isinstance(layer_id, str) or not layer_id:
        raise SpecError(f"layers[{index}]: 'id' must be a non-empty string")
    where = f"layer '{layer_id}'"

    shape_doc = _require(doc, "shape", where)
    position_doc = doc.get("position", {"type": "centered"})
    style_doc = doc.get("style") or {}
    if not isinstance(shape_doc, Mapping) or not isinstance(position_doc, Mapping):
        raise SpecError(f"{where}: shape and position must be objects")
    if not isinstance(style_doc, Mapping):
        raise SpecError(f"{where}: style must be an object")

    description = doc.get("description")
    return Layer(
        id=layer_id,
        shape=_parse_shape(shape_doc, where),
        position=_parse_position(position_doc, where),
        style=_parse_style(style_doc, where),
        description=str(description) if description is not None else None,
    )


def _parse_shape(doc: Mapping[str, Any], where: str) -> ShapeDefinition:
    kind = _enum(ShapeKind, _require(doc, "shapeType", where), "shapeType", where)

    if kind == ShapeKind.Triangle:
        return TriangleShape(
            size=_number(doc, "size", where),
            orientation=_enum(Orientation, doc.get("orientation", "pointing_up"), "orientation", where),
            triangle_type=_enum(TriangleKind, doc.get("triangleType", "equilateral"), "triangleType", where),
        )
    elif kind == ShapeKind.Rectangle:
        return RectangleShape(
            width=_number(doc, "width", where),
            height=_number(doc, "height", where),
            rounded=_optional_number(doc, "rounded", where),
        )
    elif kind == ShapeKind.Circle:
        return CircleShape(radius=_number(doc, "radius", where))
    elif kind == ShapeKind.Ellipse:
        return EllipseShape(radius_x=_number(doc, "radiusX", where), radius_y=_number(doc, "radiusY", where))
    elif kind == ShapeKind.Line:
        return LineShape(length=_number(doc, "length", where), angle=_optional_number(doc, "angle", where) or 0.0)
    else:  # Diamond
        return DiamondShape(size=_number(doc, "size", where))


def _parse_position(doc: Mapping[str, Any], where: str) -> Position:
    kind = _enum(PositionKind, doc.get("type", "centered"), "position type", where)

    if kind == PositionKind.Absolute:
        return Position.absolute(_number(doc, "x", where), _number(doc, "y", where))
    elif kind == PositionKind.Centered:
        return Position.centered()

    ref = doc.get("relativeTo")
    if not isinstance(ref, str) or not ref:
        raise SpecError(f"{where}: relative position needs a 'relativeTo' layer id")
    alignment = doc.get("alignment")
    return Position.relative(
        ref,
        alignment=Alignment.parse(str(alignment)) if alignment is not None else None,
        offset=_optional_number(doc, "offset", where),
    )


def _parse_style(doc: Mapping[str, Any], where: str) -> Style:
    fill = doc.get("fill")
    stroke = doc.get("stroke")
    return Style(
        fill=str(fill) if fill is not None else None,
        stroke=str(stroke) if stroke is not None else None,
        stroke_width=_optional_number(doc, "strokeWidth", where),
        opacity=_optional_number(doc, "opacity", where),
    )
