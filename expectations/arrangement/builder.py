"""
ArrangementBuilder - shorthand for writing arrangements.

Usage:
    b = ArrangementBuilder()
    greeting = b.sequence(
        "greeting",
        b.event("alice", move("greet", "bob")),
        b.event("bob", move("greet", "alice")),
    )

Nodes built without an explicit id get a generated one
("_Sequence_#0", "_IndefiniteEvent_#3", ...). Every id a builder hands out
is unique within that builder.
"""

from typing import Any

from expectations.domain import AgentId, DialogueEvent, DialogueMove, create_move

from .conditional import Condition, Conditional
from .conjunction import Conjunction
from .disjunction import Disjunction
from .divergence import Divergence
from .indefinite_event import IndefiniteEvent
from .node import Node
from .repetition import Repetition
from .sequence import Sequence


_NODE_TYPES: tuple[type[Node], ...] = (
    IndefiniteEvent,
    Conditional,
    Conjunction,
    Disjunction,
    Divergence,
    Repetition,
    Sequence,
)


def move(move_type: str, *addressees: str, properties: Any = None) -> DialogueMove:
    """Shorthand for create_move()."""
    return create_move(move_type, *addressees, properties=properties)


def dialogue_event(
    move_type: str,
    source: str,
    *addressees: str,
    properties: Any = None,
) -> DialogueEvent:
    """Build the event of `source` realizing a move of the given type."""
    return DialogueEvent(
        source_id=AgentId(source),
        move=create_move(move_type, *addressees, properties=properties),
    )


class ArrangementBuilder:
    """Builds arrangement nodes while keeping their ids unique."""

    def __init__(self):
        self._node_ids: set[str] = set()
        self._counts: dict[type[Node], int] = {node_type: 0 for node_type in _NODE_TYPES}

    @property
    def node_ids(self) -> frozenset[str]:
        """Ids handed out so far."""
        return frozenset(self._node_ids)

    def _register(self, node_type: type[Node], node_id: str | None) -> str:
        if node_id is None:
            node_id = f"_{node_type.__name__}_#{self._counts[node_type]}"
            while node_id in self._node_ids:
                self._counts[node_type] += 1
                node_id = f"_{node_type.__name__}_#{self._counts[node_type]}"
        elif not node_id.strip():
            raise ValueError("node id must not be blank")
        elif node_id in self._node_ids:
            raise ValueError(f"node id already in use: {node_id!r}")

        self._node_ids.add(node_id)
        self._counts[node_type] += 1
        return node_id

    # =========================================================================
    # Atomics
    # =========================================================================

    def indefinite_event(
        self,
        source_or_event: str | DialogueEvent,
        dialogue_move: DialogueMove | None = None,
        *,
        node_id: str | None = None,
    ) -> IndefiniteEvent:
        """
        Build an IndefiniteEvent.

        Args:
            source_or_event: A DialogueEvent, or the id of the agent expected to act
            dialogue_move: The expected move (required when a source id is given)
            node_id: Explicit id (generated when omitted)
        """
        if isinstance(source_or_event, DialogueEvent):
            event = source_or_event
        else:
            if dialogue_move is None:
                raise TypeError("dialogue_move is required when a source id is given")
            event = DialogueEvent(source_id=AgentId(source_or_event), move=dialogue_move)
        return IndefiniteEvent(self._register(IndefiniteEvent, node_id), event)

    event = indefinite_event

    # =========================================================================
    # Composites
    # =========================================================================

    def conditional(
        self,
        condition: Condition,
        body: Node,
        *,
        node_id: str | None = None,
    ) -> Conditional:
        return Conditional(self._register(Conditional, node_id), body, condition)

    if_ = conditional

    def conjunction(self, node_id: str | None, *children: Node) -> Conjunction:
        return Conjunction(self._register(Conjunction, node_id), children)

    all_of = conjunction

    def disjunction(self, node_id: str | None, *children: Node) -> Disjunction:
        return Disjunction(self._register(Disjunction, node_id), children)

    any_of = disjunction

    def divergence(self, node_id: str | None, *children: Node) -> Divergence:
        return Divergence(self._register(Divergence, node_id), children)

    one_of = divergence

    def repetition(self, body: Node, *, node_id: str | None = None) -> Repetition:
        return Repetition(self._register(Repetition, node_id), body)

    def sequence(self, node_id: str | None, *children: Node) -> Sequence:
        return Sequence(self._register(Sequence, node_id), children)
