from .node import Node, NodeKind
from .graph import Graph, UNNAMED

__all__ = [
    "Node",
    "NodeKind",
    "Graph",
    "UNNAMED",
]
