from .layouts import base_layout
from .draw import draw_graph_pair

__all__ = [
    "base_layout",
    "draw_graph_pair",
]
