"""Tests for parsers.coordinate — coordinate documents to CoordinateSpec."""

import json

import pytest

from aisvg.errors import SpecError
from aisvg.ir.coordinate import CoordinateLayer, ViewBox
from aisvg.ir.spec import Style
from aisvg.parsers import parse
from aisvg.parsers.coordinate import CoordinateParser
from aisvg.types import ElementKind


def _doc(*layers: dict, **view_box) -> str:
    return json.dumps(
        {
            "name": "pipe",
            "description": "pipe segment",
            "viewBox": {"width": 200, "height": 100, **view_box},
            "layers": list(layers),
        }
    )


def _layer(id: str, type: str, **props) -> dict:
    return {"id": id, "type": type, "props": props}


class TestViewBox:
    def test_defaults_to_origin(self):
        spec = parse(_doc())
        assert spec.view_box == ViewBox(200, 100)
        assert (spec.name, spec.description, spec.layers) == ("pipe", "pipe segment", [])

    def test_min_offsets(self):
        spec = parse(_doc(minX=-20, minY=5.5))
        assert (spec.view_box.min_x, spec.view_box.min_y) == (-20, 5.5)

    def test_missing_height(self):
        with pytest.raises(SpecError, match="viewBox: missing required key 'height'"):
            CoordinateParser().parse(json.dumps({"viewBox": {"width": 1}, "layers": []}))

    def test_view_box_not_an_object(self):
        with pytest.raises(SpecError, match="viewBox must be an object"):
            CoordinateParser().parse_mapping({"viewBox": [0, 0, 10, 10]})

    def test_invalid_json(self):
        with pytest.raises(SpecError, match="Invalid JSON"):
            CoordinateParser().parse("{viewBox")


class TestElements:
    def test_each_element_kind(self):
        spec = parse(
            _doc(
                _layer("r", "rect", x=1, y=2, width=3, height=4, rx=1),
                _layer("c", "circle", cx=5, cy=6, r=7),
                _layer("e", "ellipse", cx=5, cy=6, rx=7, ry=8),
                _layer("l", "line", x1=0, y1=0, x2=10, y2=10),
                _layer("pl", "polyline", points="0,0 5,5 10,0"),
                _layer("pg", "polygon", points="0,0 5,5 10,0"),
                _layer("p", "path", d="M0 0 L10 10"),
                _layer("t", "text", x=1, y=2, text="P-101", fontSize=12, textAnchor="middle"),
            )
        )
        assert [lyr.kind for lyr in spec.layers] == list(ElementKind)
        assert spec.layers[0].props == {"x": 1, "y": 2, "width": 3, "height": 4, "rx": 1}
        assert spec.layers[4].props == {"points": "0,0 5,5 10,0"}
        assert spec.layers[7].text == "P-101"
        assert spec.layers[7].props == {"x": 1, "y": 2, "fontSize": 12, "textAnchor": "middle"}

    def test_style_and_transform_split_from_geometry(self):
        layer = _layer("c", "circle", cx=0, cy=0, r=2, fill="red", strokeWidth=3, transform="rotate(45)")
        spec = parse(_doc(layer))
        c = spec.layers[0]
        assert c.props == {"cx": 0, "cy": 0, "r": 2}
        assert c.style == Style(fill="red", stroke_width=3)
        assert c.transform == "rotate(45)"

    def test_unknown_props_ignored(self):
        spec = parse(_doc(_layer("c", "circle", cx=0, cy=0, r=2, glow=True)))
        assert "glow" not in spec.layers[0].props

    def test_missing_geometry_names_layer(self):
        with pytest.raises(SpecError, match="layer 'r': missing required key 'height'"):
            parse(_doc(_layer("r", "rect", x=0, y=0, width=4)))

    def test_text_needs_content(self):
        with pytest.raises(SpecError, match="layer 't': missing required key 'text'"):
            parse(_doc(_layer("t", "text", x=0, y=0)))

    def test_path_data_must_be_string(self):
        with pytest.raises(SpecError, match="'d' must be a string"):
            parse(_doc(_layer("p", "path", d=[1, 2])))

    def test_unknown_element_type(self):
        with pytest.raises(SpecError, match="type"):
            parse(_doc(_layer("s", "star")))

    def test_non_finite_coordinate(self):
        with pytest.raises(SpecError, match="'cx' must be a finite number"):
            parse(_doc(_layer("c", "circle", cx=10**400, cy=0, r=1)))

    def test_duplicate_ids(self):
        with pytest.raises(SpecError, match="Duplicate layer id 'a'"):
            parse(_doc(_layer("a", "circle", cx=0, cy=0, r=1), _layer("a", "circle", cx=0, cy=0, r=1)))

    def test_document_order_kept(self):
        spec = parse(_doc(_layer("top", "circle", cx=0, cy=0, r=1), _layer("bottom", "circle", cx=0, cy=0, r=2)))
        assert [lyr.id for lyr in spec.layers] == ["top", "bottom"]


class TestRoundTrip:
    def test_to_dict_parses_back_to_same_spec(self):
        spec = parse(
            _doc(
                _layer("body", "rect", x=0, y=40, width=200, height=20, fill="#ccc", transform="translate(0,1)"),
                {**_layer("tag", "text", x=100, y=30, text="A & B"), "description": "label"},
                minX=-10,
            )
        )
        assert CoordinateParser().parse_mapping(spec.to_dict()) == spec

    def test_layer_to_dict_merges_props(self):
        layer = CoordinateLayer("c", ElementKind.Circle, {"cx": 1, "cy": 2, "r": 3}, Style(stroke="#000"), "scale(2)")
        assert layer.to_dict() == {
            "id": "c",
            "type": "circle",
            "props": {"stroke": "#000", "cx": 1, "cy": 2, "r": 3, "transform": "scale(2)"},
        }
