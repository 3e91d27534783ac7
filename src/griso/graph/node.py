"""Internal node model shared by vertices and named edges."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Hashable, Optional, Tuple


class NodeKind(str, Enum):
    """What a node stands for in the user's graph."""

    VERTEX = "vertex"
    EDGE = "edge"


class Node:
    """A vertex or a named edge of a :class:`~griso.graph.graph.Graph`.

    Nodes are connected to each other by unnamed arcs. A named edge of the
    user's graph becomes a node of kind ``EDGE`` sitting between its two
    endpoints.

    Two nodes are equal only if they are the same object. Use
    :meth:`is_equivalent` to compare kind and name.

    ``index`` is the node's position in its graph and fixes the traversal
    order used by the labeller. ``node_id`` is for display only.
    """

    __slots__ = ("kind", "name", "node_id", "index", "_out", "_in")

    def __init__(
        self,
        kind: NodeKind,
        name: Optional[Hashable],
        node_id: Hashable,
        index: int,
    ):
        self.kind = kind
        self.name = name
        self.node_id = node_id
        self.index = index
        # dicts keep insertion order and drop duplicate arcs
        self._out: Dict[Node, None] = {}
        self._in: Dict[Node, None] = {}

    @property
    def out_arcs(self) -> Tuple[Node, ...]:
        return tuple(self._out)

    @property
    def in_arcs(self) -> Tuple[Node, ...]:
        return tuple(self._in)

    def has_name(self) -> bool:
        return self.name is not None

    def is_equivalent(self, other: Node) -> bool:
        """True if both nodes have the same kind and the same name.

        Names must also share a type, so 1, 1.0 and True are different names.
        """
        return (
            self.kind is other.kind
            and type(self.name) is type(other.name)
            and self.name == other.name
        )

    def connect(self, to_node: Node) -> Node:
        """Add an arc from this node to *to_node*.

        Returns *to_node* so that paths can be chained:
        ``a.connect(x).connect(b)``.
        """
        self._out[to_node] = None
        to_node._in[self] = None
        return to_node

    def __repr__(self) -> str:
        return f"Node({self.kind.value}, {self.node_id!r}, name={self.name!r})"
