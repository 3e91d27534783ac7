from .networkx import to_networkx, from_networkx, vertex_name_map

__all__ = [
    "to_networkx",
    "from_networkx",
    "vertex_name_map",
]
