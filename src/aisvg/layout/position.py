"""Turns a layer's Position into a center point.

Relative alignments follow two conventions. The ``tip_touches_*`` family
moves the center onto the named edge of the referent and adds the offset
along that axis. The ``adjacent_*`` family moves the center onto the named
edge and pushes it away from the referent by the offset, so
``adjacent_left`` subtracts. ``edge_touches_*`` currently resolves exactly
like the matching ``tip_touches_*``.
"""

from __future__ import annotations

from collections.abc import Mapping

from aisvg.errors import UnknownReferenceError
from aisvg.ir.spec import CanvasSize, Position
from aisvg.layout.types import Point, ResolvedPlacement
from aisvg.types import Alignment, PositionKind


def canvas_center(canvas: CanvasSize) -> Point:
    return Point(canvas.width / 2, canvas.height / 2)


def resolve_center(
    position: Position,
    canvas: CanvasSize,
    placements: Mapping[str, ResolvedPlacement],
) -> Point:
    """Return the center point for ``position``; ``placements`` is only read."""
    if position.kind == PositionKind.Absolute:
        return Point(position.x, position.y)
    elif position.kind == PositionKind.Centered:
        return canvas_center(canvas)
    elif position.kind == PositionKind.Relative:
        ref_id = position.relative_to
        if ref_id is None or ref_id not in placements:
            raise UnknownReferenceError(str(ref_id))
        return align(placements[ref_id], position.alignment, position.offset or 0.0)
    raise ValueError(f"Unknown position type: {position.kind}")


def align(ref: ResolvedPlacement, alignment: Alignment | None, offset: float = 0.0) -> Point:
    """Center point for an alignment against a resolved referent."""
    b = ref.bounds
    cx, cy = ref.center.x, ref.center.y

    if alignment in (Alignment.TipTouchesLeft, Alignment.EdgeTouchesLeft):
        return Point(b.left + offset, cy)
    elif alignment in (Alignment.TipTouchesRight, Alignment.EdgeTouchesRight):
        return Point(b.right + offset, cy)
    elif alignment in (Alignment.TipTouchesTop, Alignment.EdgeTouchesTop):
        return Point(cx, b.top + offset)
    elif alignment in (Alignment.TipTouchesBottom, Alignment.EdgeTouchesBottom):
        return Point(cx, b.bottom + offset)
    elif alignment == Alignment.AdjacentLeft:
        return Point(b.left - offset, cy)
    elif alignment == Alignment.AdjacentRight:
        return Point(b.right + offset, cy)
    # CenterAligned, Unknown and a missing alignment all land on the referent's center.
    return Point(cx, cy)
