"""User-facing graph with named vertices and optionally named edges."""
from __future__ import annotations

from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from griso.errors import DuplicateVertexError, MissingVertexError
from griso.graph.node import Node, NodeKind


# Marks an edge created without a name. ``name=None`` is different: it
# creates an edge node whose name is absent.
UNNAMED = object()


class Graph:
    """A graph of named vertices connected by directed or undirected edges.

    From the user's perspective a graph consists of vertices and edges.
    Internally it is a set of nodes connected by unnamed arcs:

      - a directed unnamed edge is a single arc ``a -> b``;
      - an undirected unnamed edge is the pair of arcs ``a -> b``, ``b -> a``;
      - a named edge is an ``EDGE`` node ``x`` with arcs ``a -> x -> b``
        (plus ``b -> x -> a`` when undirected).

    The graph must be fully built before it is labelled or compared.
    """

    def __init__(self):
        self._vertices: Dict[Hashable, Node] = {}
        self._nodes: List[Node] = []

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """All nodes (vertices and edge nodes) in insertion order."""
        return tuple(self._nodes)

    @property
    def vertex_ids(self) -> Tuple[Hashable, ...]:
        return tuple(self._vertices)

    def vertex(self, vertex_id: Hashable) -> Node:
        """Return the node of vertex *vertex_id*.

        Raises MissingVertexError if there is no such vertex.
        """
        node = self._vertices.get(vertex_id)
        if node is None:
            raise MissingVertexError(vertex_id)
        return node

    def number_of_nodes(self) -> int:
        return len(self._nodes)

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def __len__(self) -> int:
        """Number of vertices; edge nodes are not counted."""
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={self.number_of_vertices()}, "
            f"nodes={self.number_of_nodes()})"
        )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_vertex(self, vertex_id: Hashable, name: Optional[Hashable] = None) -> Node:
        """Add a vertex called *name* under the unique id *vertex_id*.

        Raises DuplicateVertexError if *vertex_id* is already in use.
        """
        if vertex_id in self._vertices:
            raise DuplicateVertexError(vertex_id)
        node = self._new_node(NodeKind.VERTEX, name, vertex_id)
        self._vertices[vertex_id] = node
        return node

    def add_directed_edge(
        self,
        from_id: Hashable,
        to_id: Hashable,
        name: object = UNNAMED,
    ) -> None:
        """Add an edge from *from_id* to *to_id*.

        Without *name* the vertices are joined by a plain arc. With a name
        (``None`` included) an edge node is placed between them.

        Raises MissingVertexError if either vertex does not exist.
        """
        from_node = self.vertex(from_id)
        to_node = self.vertex(to_id)

        if name is UNNAMED:
            from_node.connect(to_node)
            return

        edge_node = self._new_node(NodeKind.EDGE, name, f"{from_id}->{to_id}")
        from_node.connect(edge_node).connect(to_node)

    def add_undirected_edge(
        self,
        vertex1: Hashable,
        vertex2: Hashable,
        name: object = UNNAMED,
    ) -> None:
        """Add an edge between *vertex1* and *vertex2*.

        The edge node of a named undirected edge is connected in both
        directions, so swapping the endpoints gives the same structure.

        Raises MissingVertexError if either vertex does not exist.
        """
        node1 = self.vertex(vertex1)
        node2 = self.vertex(vertex2)

        if name is UNNAMED:
            node1.connect(node2)
            node2.connect(node1)
            return

        edge_node = self._new_node(NodeKind.EDGE, name, f"{vertex1}--{vertex2}")
        node1.connect(edge_node).connect(node2)
        node2.connect(edge_node).connect(node1)

    def _new_node(self, kind: NodeKind, name, node_id: Hashable) -> Node:
        node = Node(kind, name, node_id, len(self._nodes))
        self._nodes.append(node)
        return node

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def is_isomorphic(self, other: Optional[Graph]) -> bool:
        """True if *other* is isomorphic to this graph.

        Vertex ids are ignored; names, kinds and connections must match.
        """
        # deferred: griso.isomorphism imports this module
        from griso.isomorphism.compare import is_isomorphic

        return is_isomorphic(self, other)
