from .compare import (
    labellings_match,
    find_matching_labellings,
    is_isomorphic,
    isomorphism_from_labellings,
    find_isomorphism,
)
from .automorphisms import automorphisms, automorphism_count, orbit_size, vertex_permutation
from .classify import signature, isomorphism_classes

__all__ = [
    "labellings_match",
    "find_matching_labellings",
    "is_isomorphic",
    "isomorphism_from_labellings",
    "find_isomorphism",
    "automorphisms",
    "automorphism_count",
    "orbit_size",
    "vertex_permutation",
    "signature",
    "isomorphism_classes",
]
