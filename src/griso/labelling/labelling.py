"""Immutable node-to-label bijections produced by the labeller."""
from __future__ import annotations

from collections.abc import Mapping
from typing import AbstractSet, Dict, Iterator

from griso.errors import UnsupportedMutationError
from griso.graph.node import Node
from griso.labelling.label import Label


class Labelling(Mapping):
    """Read-only bijection from nodes to labels.

    Keys are compared by identity. Use :meth:`node_for` for the inverse
    lookup.
    """

    __slots__ = ("_labels", "_nodes")

    def __init__(self, labels: Mapping[Node, Label]):
        self._labels: Dict[Node, Label] = dict(labels)
        self._nodes: Dict[Label, Node] = {
            label: node for node, label in self._labels.items()
        }
        if len(self._nodes) != len(self._labels):
            raise ValueError("labels are not unique; a labelling must be a bijection")

    def __getitem__(self, node: Node) -> Label:
        return self._labels[node]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __setitem__(self, node, label) -> None:
        raise UnsupportedMutationError("labellings cannot be modified")

    def __delitem__(self, node) -> None:
        raise UnsupportedMutationError("labellings cannot be modified")

    def node_for(self, label: Label) -> Node:
        """The node carrying *label*. Raises KeyError if unused."""
        return self._nodes[label]

    def labels(self) -> AbstractSet[Label]:
        return self._nodes.keys()

    def __repr__(self) -> str:
        pairs = ", ".join(f"{node.node_id!r}: {label}" for node, label in self._labels.items())
        return f"Labelling({{{pairs}}})"
