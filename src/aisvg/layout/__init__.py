"""Semantic layout: ordering, position resolution, geometry, and the engine."""

from __future__ import annotations

from aisvg.layout.engine import SemanticLayout, build_record, full_layout
from aisvg.layout.geometry import (
    PLACEHOLDER_HALF,
    bounds_for,
    diamond_vertices,
    line_endpoints,
    triangle_height,
    triangle_vertices,
    vertices_for,
)
from aisvg.layout.order import dependency_order, order_layers
from aisvg.layout.position import align, canvas_center, resolve_center
from aisvg.layout.types import Bounds, LayoutResult, Point, RenderRecord, ResolvedPlacement

__all__ = [
    "PLACEHOLDER_HALF",
    "Bounds",
    "LayoutResult",
    "Point",
    "RenderRecord",
    "ResolvedPlacement",
    "SemanticLayout",
    "align",
    "bounds_for",
    "build_record",
    "canvas_center",
    "dependency_order",
    "diamond_vertices",
    "full_layout",
    "line_endpoints",
    "order_layers",
    "resolve_center",
    "triangle_height",
    "triangle_vertices",
    "vertices_for",
]
