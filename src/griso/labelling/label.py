"""Labels assigned to nodes during canonical labelling."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Provenance(str, Enum):
    """Where a label's value came from."""

    FIXED = "fixed"          # derived from names and neighbourhoods
    GENERATED = "generated"  # assigned to break a tie


@dataclass(frozen=True)
class Label:
    """
    Opaque, hashable node label.

    Two labels are equal iff provenance and value both match, so a
    generated label never collides with a fixed one.
    """

    provenance: Provenance
    value: int

    def __str__(self) -> str:
        return f"{self.value}({self.provenance.name})"


class LabelFactory:
    """
    Creates labels for one labeller.

    The generated-value counter is local to the factory. The labeller saves
    it with every branching frame and restores it on backtrack, so values
    increase along each search path and repeat across sibling branches.
    """

    def __init__(self, generated_value: int = 1):
        self.generated_value = generated_value

    @staticmethod
    def fixed(value: int) -> Label:
        return Label(Provenance.FIXED, value)

    def generate(self) -> Label:
        self.generated_value += 1
        return Label(Provenance.GENERATED, self.generated_value)
