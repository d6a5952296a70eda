"""Intermediate representation: specification types and the reference graph."""

from aisvg.ir.coordinate import CoordinateLayer, CoordinateSpec, ViewBox
from aisvg.ir.graph import LayerGraph
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

__all__ = [
    "CanvasSize",
    "CircleShape",
    "CoordinateLayer",
    "CoordinateSpec",
    "DiamondShape",
    "EllipseShape",
    "Layer",
    "LayerGraph",
    "LineShape",
    "Position",
    "RectangleShape",
    "ShapeDefinition",
    "Specification",
    "Style",
    "TriangleShape",
    "ViewBox",
]
