"""Parser for coordinate documents, where every layer is an SVG element with explicit coordinates."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from aisvg.errors import SpecError
from aisvg.ir.coordinate import ELEMENT_ATTRS, CoordinateLayer, CoordinateSpec, ViewBox
from aisvg.parsers.semantic import _enum, _number, _optional_number, _parse_style, _require, strip_code_fence
from aisvg.types import ElementKind


class CoordinateParser:
    """Parser for coordinate documents (``viewBox`` plus typed SVG layers)."""

    def parse(self, src: str) -> CoordinateSpec:
        try:
            doc = json.loads(strip_code_fence(src))
        except json.JSONDecodeError as e:
            raise SpecError(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e
        return self.parse_mapping(doc)

    def parse_mapping(self, doc: Any) -> CoordinateSpec:
        if not isinstance(doc, Mapping):
            raise SpecError("Specification must be a JSON object")

        vb = _require(doc, "viewBox", "specification")
        if not isinstance(vb, Mapping):
            raise SpecError("viewBox must be an object")
        view_box = ViewBox(
            width=_number(vb, "width", "viewBox"),
            height=_number(vb, "height", "viewBox"),
            min_x=_optional_number(vb, "minX", "viewBox") or 0,
            min_y=_optional_number(vb, "minY", "viewBox") or 0,
        )

        layers_doc = doc.get("layers", [])
        if not isinstance(layers_doc, list):
            raise SpecError("layers must be a list")

        layers: list[CoordinateLayer] = []
        seen: set[str] = set()
        for i, layer_doc in enumerate(layers_doc):
            layer = _parse_layer(layer_doc, i)
            if layer.id in seen:
                raise SpecError(f"Duplicate layer id '{layer.id}'")
            seen.add(layer.id)
            layers.append(layer)

        return CoordinateSpec(
            name=str(doc.get("name", "untitled")),
            description=str(doc.get("description", "")),
            view_box=view_box,
            layers=layers,
        )


def _parse_layer(doc: Any, index: int) -> CoordinateLayer:
    if not isinstance(doc, Mapping):
        raise SpecError(f"layers[{index}] must be an object")
    layer_id = _require(doc, "id", f"layers[{index}]")
    if not isinstance(layer_id, str) or not layer_id:
        raise SpecError(f"layers[{index}]: 'id' must be a non-empty string")
    where = f"layer '{layer_id}'"

    kind = _enum(ElementKind, _require(doc, "type", where), "type", where)
    props = doc.get("props") or {}
    if not isinstance(props, Mapping):
        raise SpecError(f"{where}: props must be an object")

    geometry: dict[str, Any] = {}
    for attr in ELEMENT_ATTRS[kind]:
        if attr.numeric:
            value = _number(props, attr.key, where) if attr.required else _optional_number(props, attr.key, where)
        else:
            value = _require(props, attr.key, where) if attr.required else props.get(attr.key)
            if value is not None and not isinstance(value, str):
                raise SpecError(f"{where}: '{attr.key}' must be a string, got {value!r}")
        if value is not None:
            geometry[attr.key] = value

    text = None
    if kind == ElementKind.Text:
        text = str(_require(props, "text", where))

    transform = props.get("transform")
    description = doc.get("description")
    return CoordinateLayer(
        id=layer_id,
        kind=kind,
        props=geometry,
        style=_parse_style(props, where),
        transform=str(transform) if transform is not None else None,
        text=text,
        description=str(description) if description is not None else None,
    )
