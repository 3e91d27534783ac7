from __future__ import annotations

import math
from typing import Dict, Hashable, Iterator

from griso.graph.graph import Graph
from griso.graph.node import Node, NodeKind
from griso.isomorphism.compare import isomorphism_from_labellings, labellings_match
from griso.labelling.labeller import GraphLabeller


def automorphisms(graph: Graph) -> Iterator[Dict[Node, Node]]:
    """Yield every automorphism of *graph* as a node -> node mapping.

    Each automorphism sends the first labelling to a distinct labelling of
    the same graph, so collecting the labellings that match the first one
    enumerates the automorphism group. Edge nodes are included: two
    parallel edges with the same name give a swap that fixes all vertices.
    """
    if graph.number_of_nodes() == 0:
        yield {}
        return

    labeller = GraphLabeller(graph)
    first = labeller.next_labelling()
    yield {node: node for node in first}
    for labelling in labeller:
        if labellings_match(first, labelling):
            yield isomorphism_from_labellings((first, labelling))


def vertex_permutation(automorphism: Dict[Node, Node]) -> Dict[Hashable, Hashable]:
    """Restrict a node mapping to vertex ids."""
    return {
        src.node_id: dst.node_id
        for src, dst in automorphism.items()
        if src.kind is NodeKind.VERTEX
    }


def automorphism_count(graph: Graph) -> int:
    """Compute |Aut(G)| of the internal node model of *graph*."""
    return sum(1 for _ in automorphisms(graph))


def orbit_size(graph: Graph) -> int:
    """Orbit size of the node model under the S_n action on its nodes.

    Equals n! / |Aut(G)| where n is the number of nodes.
    """
    return math.factorial(graph.number_of_nodes()) // automorphism_count(graph)
