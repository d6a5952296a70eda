"""aisvg: semantic shape descriptions to SVG markup."""

from aisvg.errors import CyclicReferenceError, LayoutError, SpecError, UnknownReferenceError
from aisvg.ir.coordinate import CoordinateSpec
from aisvg.ir.spec import Specification
from aisvg.layout.engine import full_layout
from aisvg.parsers import parse
from aisvg.renderers.svg import CoordinateSvgRenderer, SvgRenderer


def render_spec(spec: Specification, draw_order: str = "dependency") -> str:
    """Lay out a Specification and render it to SVG markup.

    Args:
        spec: The parsed specification.
        draw_order: 'dependency' (layout order) or 'declaration' (document order).

    Returns:
        The SVG document as a string.

    Raises:
        UnknownReferenceError: If a relative position names an undeclared layer.
        CyclicReferenceError: If relative positions reference each other in a cycle.
    """
    result = full_layout(spec)
    return SvgRenderer(draw_order=draw_order).render(result)


def render_json(src: str, draw_order: str = "dependency") -> str:
    """Parse a semantic or coordinate JSON document and render it to SVG markup.

    Coordinate documents skip layout and ignore ``draw_order``.

    Raises:
        SpecError: If the document cannot be parsed.
        LayoutError: If the layers cannot be laid out.
    """
    spec = parse(src)
    if isinstance(spec, CoordinateSpec):
        return CoordinateSvgRenderer().render(spec)
    return render_spec(spec, draw_order=draw_order)


__all__ = [
    "CoordinateSpec",
    "CyclicReferenceError",
    "LayoutError",
    "SpecError",
    "Specification",
    "UnknownReferenceError",
    "render_json",
    "render_spec",
]
