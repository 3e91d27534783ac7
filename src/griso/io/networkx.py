from __future__ import annotations

from typing import Hashable

import networkx as nx

from griso.graph.graph import Graph


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Export the internal node model of *graph* as a NetworkX DiGraph.

    Nodes are keyed by their index in *graph* and carry the attributes
    ``kind`` ("vertex" or "edge"), ``name`` and ``node_id``. Arcs become
    directed edges; named edges appear as nodes of kind "edge".
    """
    G = nx.DiGraph()
    for node in graph.nodes:
        G.add_node(node.index, kind=node.kind.value, name=node.name, node_id=node.node_id)
    for node in graph.nodes:
        for target in node.out_arcs:
            G.add_edge(node.index, target.index)
    return G


def from_networkx(
    G: nx.Graph,
    *,
    name_attr: str = "name",
    edge_name_attr: str = "name",
) -> Graph:
    """
    Build a :class:`Graph` from a NetworkX graph.

    Vertex ids are the NetworkX nodes and vertex names are read from
    *name_attr* (absent -> None). Edges carrying *edge_name_attr* become
    named edges. Undirected inputs give undirected edges.
    """
    graph = Graph()
    for v, data in G.nodes(data=True):
        graph.add_vertex(v, data.get(name_attr))

    add_edge = graph.add_directed_edge if G.is_directed() else graph.add_undirected_edge
    for u, v, data in G.edges(data=True):
        if edge_name_attr in data:
            add_edge(u, v, data[edge_name_attr])
        else:
            add_edge(u, v)
    return graph


def vertex_name_map(graph: Graph) -> dict[Hashable, Hashable]:
    """Vertex id -> vertex name."""
    return {vid: graph.vertex(vid).name for vid in graph.vertex_ids}
