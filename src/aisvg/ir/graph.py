"""Layer reference graph — wraps a networkx DiGraph of relative positions.

Nodes are layer ids in declaration order, each carrying its Layer under the
``data`` attribute. An edge runs from a referent to every layer positioned
relative to it. References to ids that are not declared add no edge; the
position resolver reports those when it looks them up.
"""

from __future__ import annotations

import networkx as nx

from aisvg.errors import SpecError
from aisvg.ir.spec import Layer, Specification


class LayerGraph:
    """The reference graph built from a Specification."""

    def __init__(self, digraph: nx.DiGraph) -> None:
        self.digraph = digraph

    @classmethod
    def from_spec(cls, spec: Specification) -> LayerGraph:
        """Build a LayerGraph. Duplicate layer ids raise SpecError."""
        digraph: nx.DiGraph = nx.DiGraph()

        for layer in spec.layers:
            if layer.id in digraph:
                raise SpecError(f"Duplicate layer id '{layer.id}'")
            digraph.add_node(layer.id, data=layer)

        for layer in spec.layers:
            ref = layer.position.referent()
            if ref is not None and ref in digraph:
                digraph.add_edge(ref, layer.id)

        return cls(digraph)

    def layers(self) -> list[Layer]:
        """All layers in declaration order."""
        return [self.digraph.nodes[n]["data"] for n in self.digraph.nodes]

    def layer(self, layer_id: str) -> Layer:
        return self.digraph.nodes[layer_id]["data"]

    def referent(self, layer_id: str) -> str | None:
        """The declared layer that ``layer_id`` is positioned against, if any."""
        preds = list(self.digraph.predecessors(layer_id))
        return preds[0] if preds else None

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()
