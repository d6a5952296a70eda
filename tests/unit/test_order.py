"""Tests for layout.order — dependency ordering and cycle detection."""

from __future__ import annotations

import pytest

from aisvg.errors import CyclicReferenceError
from aisvg.ir.graph import LayerGraph
from aisvg.ir.spec import CanvasSize, CircleShape, Layer, Position, Specification
from aisvg.layout.order import dependency_order, order_layers
from aisvg.types import Alignment

# ─── Helpers ──────────────────────────────────────────────────────────────────


def layer(id: str, ref: str | None = None) -> Layer:
    pos = Position.relative(ref, alignment=Alignment.CenterAligned) if ref else Position.centered()
    return Layer(id=id, shape=CircleShape(radius=5), position=pos)


def spec(*layers: Layer) -> Specification:
    return Specification(name="t", description="", canvas=CanvasSize(100, 100), layers=list(layers))


def ids(layers: list[Layer]) -> list[str]:
    return [lyr.id for lyr in layers]


# ─── Ordering ─────────────────────────────────────────────────────────────────


class TestOrdering:
    def test_empty(self):
        assert order_layers(spec()) == []

    def test_no_references_keeps_declaration_order(self):
        s = spec(layer("c"), layer("a"), layer("b"))
        assert ids(order_layers(s)) == ["c", "a", "b"]

    def test_referent_moves_before_referencer(self):
        s = spec(layer("left", "circle"), layer("circle"), layer("right", "circle"))
        assert ids(order_layers(s)) == ["circle", "left", "right"]

    def test_chain(self):
        s = spec(layer("a", "b"), layer("b", "c"), layer("c"))
        assert ids(order_layers(s)) == ["c", "b", "a"]

    def test_each_layer_once_and_referents_first(self):
        s = spec(
            layer("e", "d"),
            layer("a"),
            layer("d", "b"),
            layer("b", "a"),
            layer("c", "a"),
            layer("f"),
        )
        result = ids(order_layers(s))
        assert sorted(result) == sorted(s.layer_ids())
        pos = {layer_id: i for i, layer_id in enumerate(result)}
        for lyr in s.layers:
            ref = lyr.position.referent()
            if ref is not None:
                assert pos[ref] < pos[lyr.id]

    def test_unknown_reference_is_left_for_resolver(self):
        s = spec(layer("a", "ghost"), layer("b"))
        assert ids(order_layers(s)) == ["a", "b"]

    def test_accepts_prebuilt_graph(self):
        graph = LayerGraph.from_spec(spec(layer("x", "y"), layer("y")))
        assert ids(dependency_order(graph)) == ["y", "x"]

    def test_long_chain_does_not_recurse(self):
        n = 5000
        layers = [layer(f"n{i}", f"n{i + 1}") for i in range(n)] + [layer(f"n{n}")]
        result = ids(order_layers(spec(*layers)))
        assert result[0] == f"n{n}"
        assert result[-1] == "n0"


# ─── Cycles ───────────────────────────────────────────────────────────────────


class TestCycles:
    def test_self_reference(self):
        with pytest.raises(CyclicReferenceError) as exc:
            order_layers(spec(layer("a", "a")))
        assert exc.value.cycle_ids == ("a",)

    def test_two_cycle(self):
        with pytest.raises(CyclicReferenceError) as exc:
            order_layers(spec(layer("a", "b"), layer("b", "a")))
        assert exc.value.cycle_ids == ("a", "b")
        assert "a -> b -> a" in str(exc.value)

    def test_three_cycle_behind_tail(self):
        s = spec(layer("tail", "a"), layer("a", "b"), layer("b", "c"), layer("c", "a"))
        with pytest.raises(CyclicReferenceError) as exc:
            order_layers(s)
        assert exc.value.cycle_ids == ("a", "b", "c")

    def test_cycle_after_independent_layers(self):
        s = spec(layer("ok"), layer("x", "y"), layer("y", "z"), layer("z", "x"))
        with pytest.raises(CyclicReferenceError) as exc:
            order_layers(s)
        assert set(exc.value.cycle_ids) == {"x", "y", "z"}
