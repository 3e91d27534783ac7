"""Exceptions raised by griso."""
from __future__ import annotations

from typing import Hashable


class GrisoError(Exception):
    """Base class for all griso errors."""


class DuplicateVertexError(GrisoError, ValueError):
    """Raised when a vertex id is added to a graph twice."""

    def __init__(self, vertex_id: Hashable):
        self.vertex_id = vertex_id
        super().__init__(f"A vertex with id {vertex_id!r} exists already")


class MissingVertexError(GrisoError, KeyError):
    """Raised when an edge refers to a vertex id the graph does not know."""

    def __init__(self, vertex_id: Hashable):
        self.vertex_id = vertex_id
        super().__init__(f"No vertex with id {vertex_id!r} exists")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class LabellingsExhaustedError(GrisoError, LookupError):
    """Raised when a labeller is advanced past its last labelling."""


class UnsupportedMutationError(GrisoError, TypeError):
    """Raised on attempts to modify a labelling that has been handed out."""
