from .label import Label, LabelFactory, Provenance
from .labelling import Labelling
from .refine import (
    ABSENT_NAME_HASH,
    CONNECTION_FROM,
    CONNECTION_TO,
    ambiguous_nodes,
    initial_partition,
    is_discrete,
    label_map,
    name_hash,
    refine_partition,
)
from .labeller import GraphLabeller

__all__ = [
    "Label",
    "LabelFactory",
    "Provenance",
    "Labelling",
    "ABSENT_NAME_HASH",
    "CONNECTION_FROM",
    "CONNECTION_TO",
    "ambiguous_nodes",
    "initial_partition",
    "is_discrete",
    "label_map",
    "name_hash",
    "refine_partition",
    "GraphLabeller",
]
