"""Dependency ordering of layers by their relative-position referents.

Depth-first post-order over the declaration sequence. Each layer has at
most one referent, so the descent is a walk up a single reference chain and
runs without recursion. Layers on the current walk are marked as visiting;
reaching a visiting layer again means the chain closes on itself.
"""

from __future__ import annotations

from aisvg.errors import CyclicReferenceError
from aisvg.ir.graph import LayerGraph
from aisvg.ir.spec import Layer, Specification

_VISITING = 1
_DONE = 2


def dependency_order(graph: LayerGraph) -> list[Layer]:
    """Order layers so every declared referent precedes its referencer.

    Ties between independent layers keep declaration order. References to
    undeclared ids are ignored here; the position resolver reports them.

    Raises:
        CyclicReferenceError: If the relative positions form a cycle.
    """
    state: dict[str, int] = {}
    ordered: list[Layer] = []

    for layer in graph.layers():
        if state.get(layer.id) == _DONE:
            continue

        path: list[str] = []
        node: str | None = layer.id
        while node is not None and state.get(node) != _DONE:
            if state.get(node) == _VISITING:
                raise CyclicReferenceError(tuple(path[path.index(node) :]))
            state[node] = _VISITING
            path.append(node)
            node = graph.referent(node)

        for node_id in reversed(path):
            state[node_id] = _DONE
            ordered.append(graph.layer(node_id))

    return ordered


def order_layers(spec: Specification) -> list[Layer]:
    """Convenience wrapper: build the reference graph and order it."""
    return dependency_order(LayerGraph.from_spec(spec))
