"""Isomorphism test by cross-comparing discrete labellings."""
from __future__ import annotations

import logging
from typing import AbstractSet, Dict, Hashable, Iterable, Optional, Tuple

from griso.graph.graph import Graph
from griso.graph.node import Node, NodeKind
from griso.labelling.label import Label
from griso.labelling.labeller import GraphLabeller
from griso.labelling.labelling import Labelling

logger = logging.getLogger(__name__)

LabellingPair = Tuple[Labelling, Labelling]


def _neighbour_labels(nodes: Iterable[Node], labelling: Labelling) -> AbstractSet[Label]:
    return frozenset(labelling[node] for node in nodes)


def labellings_match(a: Labelling, b: Labelling) -> bool:
    """True if *a* and *b* describe the same structure.

    For every label, the nodes carrying it must have equal names and kinds,
    and their out- and in-neighbours must carry the same labels.
    """
    if a.labels() != b.labels():
        return False

    for label in a.labels():
        node_a = a.node_for(label)
        node_b = b.node_for(label)

        if not node_a.is_equivalent(node_b):
            return False
        if _neighbour_labels(node_a.out_arcs, a) != _neighbour_labels(node_b.out_arcs, b):
            return False
        if _neighbour_labels(node_a.in_arcs, a) != _neighbour_labels(node_b.in_arcs, b):
            return False
    return True


def find_matching_labellings(a: Graph, b: Optional[Graph]) -> Optional[LabellingPair]:
    """Search for a labelling of *a* and a labelling of *b* that match.

    Returns the first matching pair, or None if the graphs are not
    isomorphic. Every labelling of *a* is compared against every
    labelling of *b*; a fresh labeller of *b* is used for each labelling
    of *a*, so no labelling is kept longer than needed.
    """
    if b is None:
        return None
    if a.number_of_nodes() != b.number_of_nodes():
        logger.debug("node counts differ: %d vs %d", a.number_of_nodes(), b.number_of_nodes())
        return None
    if a.number_of_nodes() == 0:
        return Labelling({}), Labelling({})
    if b is a:
        first = GraphLabeller(a).next_labelling()
        return first, first

    for i, labelling_a in enumerate(GraphLabeller(a)):
        for j, labelling_b in enumerate(GraphLabeller(b)):
            if labellings_match(labelling_a, labelling_b):
                logger.debug("labellings %d and %d match", i, j)
                return labelling_a, labelling_b
    logger.debug("no matching labellings")
    return None


def is_isomorphic(a: Optional[Graph], b: Optional[Graph]) -> bool:
    """Decide whether *a* and *b* are isomorphic.

    A graph is isomorphic to itself and never to None. Two empty graphs
    are isomorphic.
    """
    if a is b:
        return a is not None
    if a is None or b is None:
        return False
    return find_matching_labellings(a, b) is not None


def isomorphism_from_labellings(pair: LabellingPair) -> Dict[Node, Node]:
    """Node-to-node mapping induced by a matching labelling pair."""
    a, b = pair
    return {a.node_for(label): b.node_for(label) for label in a.labels()}


def find_isomorphism(a: Graph, b: Optional[Graph]) -> Optional[Dict[Hashable, Hashable]]:
    """Map the vertex ids of *a* onto the vertex ids of *b*.

    Returns None if the graphs are not isomorphic.
    """
    pair = find_matching_labellings(a, b)
    if pair is None:
        return None
    return {
        node_a.node_id: node_b.node_id
        for node_a, node_b in isomorphism_from_labellings(pair).items()
        if node_a.kind is NodeKind.VERTEX
    }
