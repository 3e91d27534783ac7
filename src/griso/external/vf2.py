"""Reference isomorphism checks backed by NetworkX's VF2 matcher."""
from __future__ import annotations

from typing import Optional

import networkx as nx
from networkx.algorithms.isomorphism import DiGraphMatcher

from griso.graph.graph import Graph
from griso.io.networkx import to_networkx


def _node_match(x: dict, y: dict) -> bool:
    return (
        x["kind"] == y["kind"]
        and type(x["name"]) is type(y["name"])
        and x["name"] == y["name"]
    )


def _matcher(GA: nx.DiGraph, GB: nx.DiGraph) -> DiGraphMatcher:
    return DiGraphMatcher(GA, GB, node_match=_node_match)


def vf2_is_isomorphic(a: Optional[Graph], b: Optional[Graph]) -> bool:
    """Decide isomorphism of the node models of *a* and *b* with VF2.

    Follows the same conventions as
    :func:`griso.isomorphism.compare.is_isomorphic`.
    """
    if a is b:
        return a is not None
    if a is None or b is None:
        return False
    if a.number_of_nodes() != b.number_of_nodes():
        return False
    return _matcher(to_networkx(a), to_networkx(b)).is_isomorphic()


def vf2_automorphism_count(graph: Graph) -> int:
    """|Aut(G)| of the node model of *graph*, counted by VF2."""
    G = to_networkx(graph)
    return sum(1 for _ in _matcher(G, G).isomorphisms_iter())
