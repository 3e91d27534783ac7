from .vf2 import vf2_is_isomorphic, vf2_automorphism_count

__all__ = [
    "vf2_is_isomorphic",
    "vf2_automorphism_count",
]
