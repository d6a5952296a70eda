"""Layout types shared between the layout engine and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field

from aisvg.ir.spec import CanvasSize, Style
from aisvg.types import ShapeKind


@dataclass(frozen=True)
class Point:
    """A 2D point in canvas units."""

    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned bounding box."""

    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def around(cls, center: Point, half_width: float, half_height: float) -> Bounds:
        return cls(
            left=center.x - half_width,
            right=center.x + half_width,
            top=center.y - half_height,
            bottom=center.y + half_height,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class ResolvedPlacement:
    """Computed center and bounds for one layer within one layout run."""

    id: str
    center: Point
    bounds: Bounds


@dataclass
class RenderRecord:
    """A positioned layer with the primitives its renderer needs.

    Which primitive fields are set depends on ``kind``: ``radius`` for
    circles, ``radius_x``/``radius_y`` for ellipses, ``origin``/``width``/
    ``height``/``rounded`` for rectangles, and ``points`` for triangles,
    diamonds (vertices) and lines (start and end point).
    """

    id: str
    kind: ShapeKind
    center: Point
    bounds: Bounds
    style: Style = field(default_factory=Style)
    description: str | None = None
    points: list[Point] = field(default_factory=list)
    radius: float | None = None
    radius_x: float | None = None
    radius_y: float | None = None
    origin: Point | None = None
    width: float | None = None
    height: float | None = None
    rounded: float | None = None


@dataclass
class LayoutResult:
    """Self-contained layout output — everything renderers need."""

    name: str
    description: str
    canvas: CanvasSize
    records: list[RenderRecord]
    placements: dict[str, ResolvedPlacement]
    declared_ids: list[str] = field(default_factory=list)

    def declaration_order(self) -> list[RenderRecord]:
        """Records re-sorted into the order the layers were declared."""
        rank = {layer_id: i for i, layer_id in enumerate(self.declared_ids)}
        return sorted(self.records, key=lambda r: rank.get(r.id, len(rank)))
