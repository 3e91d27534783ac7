"""Grouping of graphs into isomorphism classes."""
from __future__ import annotations

import logging
from collections import Counter, defaultdict
from typing import Dict, Hashable, List, Sequence, Tuple

from griso.graph.graph import Graph
from griso.graph.node import NodeKind
from griso.isomorphism.compare import is_isomorphic

logger = logging.getLogger(__name__)

Signature = Tuple[int, int, frozenset, Tuple[int, ...], Tuple[int, ...]]


def signature(graph: Graph) -> Signature:
    """Cheap isomorphism invariant used to bucket graphs.

    (vertex count, edge-node count, name multiset, sorted in-degrees,
    sorted out-degrees). Isomorphic graphs always share a signature.
    """
    nodes = graph.nodes
    n_vertices = sum(1 for node in nodes if node.kind is NodeKind.VERTEX)
    names: Counter[Tuple[NodeKind, Hashable]] = Counter((node.kind, node.name) for node in nodes)
    indeg = tuple(sorted(len(node.in_arcs) for node in nodes))
    outdeg = tuple(sorted(len(node.out_arcs) for node in nodes))
    return (n_vertices, len(nodes) - n_vertices, frozenset(names.items()), indeg, outdeg)


def isomorphism_classes(graphs: Sequence[Graph]) -> Tuple[Dict[int, List[int]], List[Graph]]:
    """
    Partition *graphs* into isomorphism classes.

    Returns
    -------
    classes : dict[int, list[int]]
        Class id -> indices into *graphs*, in input order.
    representatives : list[Graph]
        First member of each class, indexed by class id.
    """
    buckets: Dict[Signature, List[int]] = defaultdict(list)
    for i, graph in enumerate(graphs):
        buckets[signature(graph)].append(i)

    classes: List[List[int]] = []
    for idxs in buckets.values():
        in_bucket: List[List[int]] = []
        for i in idxs:
            for members in in_bucket:
                if is_isomorphic(graphs[members[0]], graphs[i]):
                    members.append(i)
                    break
            else:
                in_bucket.append([i])
        classes.extend(in_bucket)

    classes.sort(key=lambda members: members[0])
    logger.debug("%d graph(s) in %d class(es)", len(graphs), len(classes))
    mapping = {cid: members for cid, members in enumerate(classes)}
    reps = [graphs[members[0]] for members in classes]
    return mapping, reps
