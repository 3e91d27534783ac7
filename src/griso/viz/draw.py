from __future__ import annotations

import logging
import os
from typing import Optional

import matplotlib
import networkx as nx

from griso.graph.graph import Graph
from griso.io.networkx import to_networkx
from griso.isomorphism.compare import LabellingPair, find_matching_labellings
from griso.labelling.labelling import Labelling
from .layouts import base_layout

GRISO_MPL_BACKEND = os.environ.get("GRISO_MPL_BACKEND")
if GRISO_MPL_BACKEND:
    matplotlib.use(GRISO_MPL_BACKEND)

import matplotlib.pyplot as plt  # noqa: E402

logger = logging.getLogger(__name__)


def _node_text(graph: Graph, labelling: Optional[Labelling]) -> dict:
    text = {}
    for node in graph.nodes:
        name = "" if node.name is None else str(node.name)
        if labelling is not None:
            name = f"{name}\n{labelling[node]}"
        text[node.index] = name
    return text


def _draw_one(ax, graph: Graph, labelling, *, title, seed, node_size, max_nodes_to_draw):
    G = to_networkx(graph)
    ax.set_title(title)
    ax.set_axis_off()

    if G.number_of_nodes() > max_nodes_to_draw:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={G.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )
        return

    pos = base_layout(G, seed=seed)
    colors = ["tab:blue" if G.nodes[v]["kind"] == "vertex" else "tab:orange" for v in G]
    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        labels=_node_text(graph, labelling),
        node_color=colors,
        node_size=node_size,
        font_size=8,
    )


def draw_graph_pair(
    a: Graph,
    b: Graph,
    *,
    seed: int = 7,
    node_size: int = 600,
    max_nodes_to_draw: int = 200,
    save_path: str | None = None,
) -> Optional[LabellingPair]:
    """
    Draw the node models of *a* and *b* side by side.

    Vertices are blue, edge nodes orange. If the graphs are isomorphic the
    nodes are annotated with the labels of the matching labelling pair,
    so corresponding nodes carry the same label.

    If save_path is set, saves a PNG there; otherwise shows the figure.
    Returns the matching labelling pair, or None.
    """
    pair = find_matching_labellings(a, b)
    if pair is None:
        logger.info("graphs are not isomorphic; drawing without labels")
        la = lb = None
    else:
        la, lb = pair

    fig, (axA, axB) = plt.subplots(1, 2, figsize=(12, 6))
    verdict = "isomorphic" if pair is not None else "not isomorphic"
    _draw_one(
        axA, a, la,
        title=f"A: |V|={a.number_of_vertices()}  nodes={a.number_of_nodes()}  ({verdict})",
        seed=seed, node_size=node_size, max_nodes_to_draw=max_nodes_to_draw,
    )
    _draw_one(
        axB, b, lb,
        title=f"B: |V|={b.number_of_vertices()}  nodes={b.number_of_nodes()}",
        seed=seed, node_size=node_size, max_nodes_to_draw=max_nodes_to_draw,
    )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return pair
