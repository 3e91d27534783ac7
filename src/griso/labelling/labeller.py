"""Enumeration of all discrete labellings of a graph.

Colour refinement alone cannot tell apart nodes that are swapped by a
symmetry of the graph. When refinement stalls, the labeller individualizes
one ambiguous node by giving it a generated label, refines again, and
backtracks over every ambiguous node in turn. Each leaf of this search
tree is one discrete labelling.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Iterator, List, Optional

from griso.errors import LabellingsExhaustedError
from griso.graph.graph import Graph
from griso.graph.node import Node
from griso.labelling.label import LabelFactory
from griso.labelling.labelling import Labelling
from griso.labelling.refine import (
    Partition,
    ambiguous_nodes,
    copy_partition,
    initial_partition,
    label_map,
    move_node,
    refine_partition,
)

logger = logging.getLogger(__name__)


class _State(Enum):
    INIT = "init"
    REFINING = "refining"
    BRANCHING = "branching"
    DONE = "done"


@dataclass
class _Frame:
    """A branching point: the stalled partition and the nodes left to try."""

    groups: Partition
    alternatives: Deque[Node] = field(default_factory=deque)
    generated_value: int = 1


class GraphLabeller:
    """
    Lazy, finite iterator over the discrete labellings of *graph*.

    Use :meth:`has_more` / :meth:`next_labelling`, or plain iteration.
    The labeller cannot be restarted; create a new one to enumerate again.
    It must not be shared between threads, and the graph must not change
    while it is in use.

    Parameters
    ----------
    graph : Graph
        Fully constructed graph to label.
    max_rounds : int, optional
        Bound on refinement rounds per step. Defaults to the number of nodes.
    """

    def __init__(self, graph: Graph, *, max_rounds: Optional[int] = None):
        nodes = graph.nodes
        if max_rounds is None:
            max_rounds = len(nodes)
        elif max_rounds < 0:
            raise ValueError(f"max_rounds must be >= 0, got {max_rounds}")

        self._max_rounds = max_rounds
        self._factory = LabelFactory()
        self._groups: Partition = initial_partition(nodes)
        self._frames: List[_Frame] = []
        self._state = _State.INIT if nodes else _State.DONE
        self._emitted = 0

    @property
    def emitted(self) -> int:
        """Number of labellings returned so far."""
        return self._emitted

    def has_more(self) -> bool:
        """True if :meth:`next_labelling` will return another labelling."""
        if self._state is _State.INIT:
            return True
        if self._state is _State.DONE:
            return False
        return self._has_alternatives()

    def next_labelling(self) -> Labelling:
        """Return the next discrete labelling.

        Raises LabellingsExhaustedError when every labelling has been returned.
        """
        if self._state is _State.DONE:
            raise LabellingsExhaustedError("no more labellings")
        if self._state is _State.BRANCHING:
            self._select_next_alternative()
        self._state = _State.REFINING

        while not self._refine():
            self._push_frame()
            self._select_next_alternative()

        self._state = _State.BRANCHING if self._has_alternatives() else _State.DONE
        self._emitted += 1
        logger.debug(
            "labelling #%d emitted at depth %d", self._emitted, len(self._frames)
        )
        return Labelling(label_map(self._groups))

    def _has_alternatives(self) -> bool:
        return any(frame.alternatives for frame in self._frames)

    def __iter__(self) -> Iterator[Labelling]:
        return self

    def __next__(self) -> Labelling:
        if not self.has_more():
            raise StopIteration
        return self.next_labelling()

    # -------------------------------------------------------------------------
    # Search steps
    # -------------------------------------------------------------------------

    def _refine(self) -> bool:
        """Refine the current partition; True if it ended up discrete."""
        refine_partition(self._groups, self._max_rounds)
        return not ambiguous_nodes(self._groups)

    def _push_frame(self) -> None:
        alternatives = deque(ambiguous_nodes(self._groups))
        self._frames.append(
            _Frame(self._groups, alternatives, self._factory.generated_value)
        )
        logger.debug(
            "branching at depth %d over %d node(s)", len(self._frames), len(alternatives)
        )

    def _select_next_alternative(self) -> None:
        """Individualize the next untried node, backtracking as needed."""
        while self._frames and not self._frames[-1].alternatives:
            self._frames.pop()
        if not self._frames:
            self._state = _State.DONE
            raise LabellingsExhaustedError("no more labellings")

        frame = self._frames[-1]
        node = frame.alternatives.popleft()
        self._groups = copy_partition(frame.groups)
        self._factory.generated_value = frame.generated_value

        old = label_map(self._groups)[node]
        move_node(self._groups, node, old, self._factory.generate())
