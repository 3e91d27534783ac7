"""Colour refinement (1-WL) on the internal node model.

A partition is a dict mapping each label to the list of nodes carrying
it. Dict and list order follow insertion, so every pass visits nodes in a
deterministic order.
"""
from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterable, List, Optional

from griso.graph.node import Node
from griso.labelling.label import Label, LabelFactory

logger = logging.getLogger(__name__)

# Distinct odd multipliers keep outgoing and incoming neighbours apart.
CONNECTION_TO = 31
CONNECTION_FROM = 43

# All nodes without a name share this hash bucket.
ABSENT_NAME_HASH = 0

Partition = Dict[Label, List[Node]]


def name_hash(name: Optional[Hashable]) -> int:
    if name is None:
        return ABSENT_NAME_HASH
    return hash(name)


def initial_partition(nodes: Iterable[Node]) -> Partition:
    """Group nodes by the hash of their name."""
    groups: Partition = {}
    for node in nodes:
        groups.setdefault(LabelFactory.fixed(name_hash(node.name)), []).append(node)
    return groups


def copy_partition(groups: Partition) -> Partition:
    return {label: list(members) for label, members in groups.items()}


def label_map(groups: Partition) -> Dict[Node, Label]:
    """Invert a partition into a node -> label mapping."""
    return {node: label for label, members in groups.items() for node in members}


def ambiguous_nodes(groups: Partition) -> List[Node]:
    """Nodes sharing their label with at least one other node, in group order."""
    return [node for members in groups.values() if len(members) > 1 for node in members]


def is_discrete(groups: Partition) -> bool:
    """True if every group has exactly one member."""
    return all(len(members) == 1 for members in groups.values())


def move_node(groups: Partition, node: Node, old: Label, new: Label) -> None:
    """Move *node* from group *old* to group *new*, dropping emptied groups."""
    members = groups[old]
    members.remove(node)
    if not members:
        del groups[old]
    groups.setdefault(new, []).append(node)


def _compute_label(node: Node, labels: Dict[Node, Label]) -> Label:
    value = name_hash(node.name)
    for target in node.out_arcs:
        value += CONNECTION_TO * hash(labels[target])
    for source in node.in_arcs:
        value += CONNECTION_FROM * hash(labels[source])
    return LabelFactory.fixed(value)


def _refine_once(groups: Partition) -> bool:
    """One synchronous round over the ambiguous nodes.

    New labels are computed from the labelling as it was at the start of
    the round. Returns True if any node changed group.
    """
    labels = label_map(groups)
    changed = False
    for node in ambiguous_nodes(groups):
        old = labels[node]
        new = _compute_label(node, labels)
        if new != old:
            move_node(groups, node, old, new)
            changed = True
    return changed


def refine_partition(groups: Partition, max_rounds: int) -> int:
    """Refine *groups* in place until stable or *max_rounds* have run.

    Only nodes in ambiguous groups are relabelled; singleton groups keep
    their label. Returns the number of rounds that changed the partition.

    Parameters
    ----------
    groups : Partition
        Partition to refine. Modified in place.
    max_rounds : int
        Upper bound on the number of rounds. The labeller uses the number
        of nodes, which exceeds the length of any shortest path.
    """
    rounds = 0
    while rounds < max_rounds:
        if not _refine_once(groups):
            break
        rounds += 1
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "refinement: %d round(s), %d group(s), %d ambiguous node(s)",
            rounds, len(groups), len(ambiguous_nodes(groups)),
        )
    return rounds
