"""Output renderers for laid-out and coordinate specifications."""

from aisvg.renderers.base import Renderer
from aisvg.renderers.svg import (
    DRAW_ORDERS,
    CoordinateSvgRenderer,
    SvgRenderer,
    coordinate_element_for,
    element_for,
    fmt_number,
    fmt_points,
)

__all__ = [
    "DRAW_ORDERS",
    "CoordinateSvgRenderer",
    "Renderer",
    "SvgRenderer",
    "coordinate_element_for",
    "element_for",
    "fmt_number",
    "fmt_points",
]
