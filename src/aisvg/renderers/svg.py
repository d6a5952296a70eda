"""SVG markup renderer."""

from __future__ import annotations

from html import escape

from aisvg.ir.coordinate import ELEMENT_ATTRS, CoordinateLayer, CoordinateSpec
from aisvg.ir.spec import Style
from aisvg.layout.types import LayoutResult, Point, RenderRecord
from aisvg.types import ElementKind, ShapeKind

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'
SVG_NS = "http://www.w3.org/2000/svg"

DRAW_ORDERS = ("dependency", "declaration")


def fmt_number(value: float) -> str:
    """Format a coordinate: integral values without '.0', others to 6 decimals."""
    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def fmt_points(points: list[Point]) -> str:
    return " ".join(f"{fmt_number(p.x)},{fmt_number(p.y)}" for p in points)


def _comment(text: str) -> str:
    # "--" is not allowed inside an XML comment
    return f"<!-- {escape(text, quote=False).replace('--', '- -')} -->"


def _style_attrs(record: RenderRecord) -> list[str]:
    return _common_attrs(record.id, record.style)


def _common_attrs(layer_id: str, style: Style, transform: str | None = None) -> list[str]:
    attrs = [f'id="{escape(layer_id)}"']
    if style.fill is not None:
        attrs.append(f'fill="{escape(style.fill)}"')
    if style.stroke is not None:
        attrs.append(f'stroke="{escape(style.stroke)}"')
    if style.stroke_width is not None:
        attrs.append(f'stroke-width="{fmt_number(style.stroke_width)}"')
    if style.opacity is not None:
        attrs.append(f'opacity="{fmt_number(style.opacity)}"')
    if transform is not None:
        attrs.append(f'transform="{escape(transform)}"')
    return attrs


def element_for(record: RenderRecord) -> str:
    """The SVG element line for one record, without any annotation comment."""
    attrs = _style_attrs(record)
    kind = record.kind

    if kind in (ShapeKind.Triangle, ShapeKind.Diamond):
        attrs.append(f'points="{fmt_points(record.points)}"')
        return f"  <polygon {' '.join(attrs)} />"
    elif kind == ShapeKind.Circle:
        c = record.center
        attrs += [f'cx="{fmt_number(c.x)}"', f'cy="{fmt_number(c.y)}"', f'r="{fmt_number(record.radius)}"']
        return f"  <circle {' '.join(attrs)} />"
    elif kind == ShapeKind.Rectangle:
        o = record.origin
        attrs += [
            f'x="{fmt_number(o.x)}"',
            f'y="{fmt_number(o.y)}"',
            f'width="{fmt_number(record.width)}"',
            f'height="{fmt_number(record.height)}"',
        ]
        if record.rounded:
            attrs.append(f'rx="{fmt_number(record.rounded)}"')
        return f"  <rect {' '.join(attrs)} />"
    elif kind == ShapeKind.Ellipse:
        c = record.center
        attrs += [
            f'cx="{fmt_number(c.x)}"',
            f'cy="{fmt_number(c.y)}"',
            f'rx="{fmt_number(record.radius_x)}"',
            f'ry="{fmt_number(record.radius_y)}"',
        ]
        return f"  <ellipse {' '.join(attrs)} />"
    elif kind == ShapeKind.Line:
        start, end = record.points
        attrs += [
            f'x1="{fmt_number(start.x)}"',
            f'y1="{fmt_number(start.y)}"',
            f'x2="{fmt_number(end.x)}"',
            f'y2="{fmt_number(end.y)}"',
        ]
        return f"  <line {' '.join(attrs)} />"
    raise TypeError(f"Unknown shape type: {kind}")


class SvgRenderer:
    """Flattens a LayoutResult into SVG markup, one element per record."""

    def __init__(self, draw_order: str = "dependency") -> None:
        if draw_order not in DRAW_ORDERS:
            raise ValueError(f"Unknown draw order '{draw_order}'; use dependency or declaration")
        self.draw_order = draw_order

    def render(self, result: LayoutResult) -> str:
        lines = _header(0, 0, result.canvas.width, result.canvas.height, result.description)

        records = result.declaration_order() if self.draw_order == "declaration" else result.records
        for record in records:
            if record.description:
                lines.append(f"  {_comment(record.description)}")
            lines.append(element_for(record))

        lines.append("</svg>")
        return "\n".join(lines)


def _header(min_x: float, min_y: float, width: float, height: float, description: str) -> list[str]:
    w = fmt_number(width)
    h = fmt_number(height)
    view_box = f"{fmt_number(min_x)} {fmt_number(min_y)} {w} {h}"
    return [
        XML_HEADER,
        f'<svg xmlns="{SVG_NS}" viewBox="{view_box}" width="{w}" height="{h}">',
        f"  {_comment(description)}",
        "",
    ]


def coordinate_element_for(layer: CoordinateLayer) -> str:
    """The SVG element line for one coordinate layer; attributes follow ELEMENT_ATTRS order."""
    attrs = _common_attrs(layer.id, layer.style, layer.transform)
    for attr in ELEMENT_ATTRS[layer.kind]:
        value = layer.props.get(attr.key)
        if value is None:
            continue
        text = fmt_number(value) if attr.numeric else escape(value)
        attrs.append(f'{attr.attr}="{text}"')

    tag = layer.kind.value
    if layer.kind == ElementKind.Text:
        return f"  <{tag} {' '.join(attrs)}>{escape(layer.text or '', quote=False)}</{tag}>"
    return f"  <{tag} {' '.join(attrs)} />"


class CoordinateSvgRenderer:
    """Flattens a coordinate document into SVG markup, layers in document order."""

    def render(self, spec: CoordinateSpec) -> str:
        vb = spec.view_box
        lines = _header(vb.min_x, vb.min_y, vb.width, vb.height, spec.description)
        for layer in spec.layers:
            if layer.description:
                lines.append(f"  {_comment(layer.description)}")
            lines.append(coordinate_element_for(layer))
        lines.append("</svg>")
        return "\n".join(lines)
