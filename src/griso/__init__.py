"""
griso: isomorphism testing for graphs with named vertices and named,
directed or undirected edges, via colour refinement and backtracking
canonical labelling.
"""

from .errors import (
    GrisoError,
    DuplicateVertexError,
    MissingVertexError,
    LabellingsExhaustedError,
    UnsupportedMutationError,
)
from .graph import Graph, Node, NodeKind, UNNAMED
from .labelling import GraphLabeller, Label, Labelling, Provenance
from .isomorphism import (
    is_isomorphic,
    find_isomorphism,
    find_matching_labellings,
    labellings_match,
    automorphisms,
    automorphism_count,
    isomorphism_classes,
)
from .io import to_networkx, from_networkx
from .external import vf2_is_isomorphic, vf2_automorphism_count

__all__ = [
    # Errors
    "GrisoError",
    "DuplicateVertexError",
    "MissingVertexError",
    "LabellingsExhaustedError",
    "UnsupportedMutationError",
    # Graph
    "Graph",
    "Node",
    "NodeKind",
    "UNNAMED",
    # Labelling
    "GraphLabeller",
    "Label",
    "Labelling",
    "Provenance",
    # Isomorphism
    "is_isomorphic",
    "find_isomorphism",
    "find_matching_labellings",
    "labellings_match",
    "automorphisms",
    "automorphism_count",
    "isomorphism_classes",
    # IO
    "to_networkx",
    "from_networkx",
    # Reference checks
    "vf2_is_isomorphic",
    "vf2_automorphism_count",
]
