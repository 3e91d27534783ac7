from __future__ import annotations

import networkx as nx


def base_layout(G: nx.DiGraph, seed: int = 7):
    """
    Choose a reasonable layout for a node-model graph:
      - planar_layout if the underlying undirected graph is planar
      - otherwise spring_layout
    """
    if G.number_of_nodes() == 0:
        return {}
    U = G.to_undirected()
    is_planar, _ = nx.check_planarity(U)
    if is_planar:
        return nx.planar_layout(U)
    return nx.spring_layout(G, seed=seed, iterations=300)
