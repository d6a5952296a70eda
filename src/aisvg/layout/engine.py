"""Semantic layout engine.

Phases, per layout call:
  1. Build the reference graph and order layers by dependency
  2. Resolve each layer's center against the placements made so far
  3. Compute bounds and rendering primitives from the shape
  4. Record the placement for later relative lookups

The placement mapping lives only for the duration of one ``layout`` call.
"""

from __future__ import annotations

import logging

from aisvg.ir.graph import LayerGraph
from aisvg.ir.spec import (
    CircleShape,
    DiamondShape,
    EllipseShape,
    Layer,
    LineShape,
    RectangleShape,
    Specification,
    TriangleShape,
)
from aisvg.layout.geometry import bounds_for, vertices_for
from aisvg.layout.order import dependency_order
from aisvg.layout.position import resolve_center
from aisvg.layout.types import Bounds, LayoutResult, Point, RenderRecord, ResolvedPlacement

logger = logging.getLogger(__name__)


class SemanticLayout:
    """Resolves relational positions into concrete geometry."""

    def layout(self, spec: Specification) -> LayoutResult:
        graph = LayerGraph.from_spec(spec)
        logger.debug(
            "reference graph for %s: %d layers, %d references", spec.name, graph.node_count(), graph.edge_count()
        )
        ordered = dependency_order(graph)

        placements: dict[str, ResolvedPlacement] = {}
        records: list[RenderRecord] = []

        for layer in ordered:
            center = resolve_center(layer.position, spec.canvas, placements)
            bounds = bounds_for(layer.shape, center)
            placements[layer.id] = ResolvedPlacement(id=layer.id, center=center, bounds=bounds)
            records.append(build_record(layer, center, bounds))
            logger.debug("placed %s (%s) at %s,%s", layer.id, layer.shape.kind.value, center.x, center.y)

        logger.debug("laid out %d layers for %s", len(records), spec.name)
        return LayoutResult(
            name=spec.name,
            description=spec.description,
            canvas=spec.canvas,
            records=records,
            placements=placements,
            declared_ids=spec.layer_ids(),
        )


def build_record(layer: Layer, center: Point, bounds: Bounds) -> RenderRecord:
    """Render-ready record for one placed layer."""
    shape = layer.shape
    record = RenderRecord(
        id=layer.id,
        kind=shape.kind,
        center=center,
        bounds=bounds,
        style=layer.style,
        description=layer.description,
    )

    if isinstance(shape, (TriangleShape, DiamondShape, LineShape)):
        record.points = vertices_for(shape, center)
    elif isinstance(shape, CircleShape):
        record.radius = shape.radius
    elif isinstance(shape, EllipseShape):
        record.radius_x = shape.radius_x
        record.radius_y = shape.radius_y
    elif isinstance(shape, RectangleShape):
        record.origin = Point(center.x - shape.width / 2, center.y - shape.height / 2)
        record.width = shape.width
        record.height = shape.height
        record.rounded = shape.rounded
    else:
        raise TypeError(f"Unknown shape type: {type(shape).__name__}")
    return record


def full_layout(spec: Specification) -> LayoutResult:
    """Run the layout pipeline over one specification."""
    return SemanticLayout().layout(spec)
