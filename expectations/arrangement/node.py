"""
Node - base class of every expectation arrangement node.

An arrangement is a tree describing which continuations of a dialogue are
still possible. Each node consumes dialogue events through process() and
reports a Resolution:

- PENDING: more events are needed
- SATISFACTION: the node's expectation was met
- FAILURE: the node's expectation can no longer be met

Resolved nodes are frozen: process() returns the stored resolution without
running the node's own logic until reset() is called.

Nodes own their children exclusively and hold no parent pointers, so every
traversal (expected events, scope-carrier chain) runs top-down.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator

from expectations.domain import DialogueEvent, NodeId
from expectations.logging_config import log_resolution

from .resolution import Resolution


logger = logging.getLogger(__name__)

NodeCallback = Callable[["Node"], None]


def add_expected(result: list[DialogueEvent], event: DialogueEvent) -> None:
    """Append an event to an expected-events list unless already present."""
    if event not in result:
        result.append(event)


class Node(ABC):
    """
    Base class for arrangement nodes.

    Subclasses implement _process() (and usually _collect_expected_events())
    and may override scope_carrier_index and _on_reset().
    """

    def __init__(self, node_id: str, children: Iterable["Node"] = ()):
        """
        Initialize the node.

        Args:
            node_id: Identifier, unique within one arrangement
            children: Ordered child nodes (owned by this node)

        Raises:
            TypeError: If node_id, children or any child is None
            ValueError: If node_id is blank
        """
        if node_id is None:
            raise TypeError("node_id must not be None")
        if not node_id.strip():
            raise ValueError("node_id must not be blank")
        if children is None:
            raise TypeError("children must not be None")

        children = tuple(children)
        if any(child is None for child in children):
            raise TypeError("children must not contain None")

        self._id = NodeId(node_id)
        self._children: tuple[Node, ...] = children
        self._resolution = Resolution.PENDING

        self._resolved_callbacks: list[NodeCallback] = []
        self._failed_callbacks: list[NodeCallback] = []
        self._satisfied_callbacks: list[NodeCallback] = []

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def id(self) -> NodeId:
        return self._id

    @property
    def children(self) -> tuple["Node", ...]:
        return self._children

    @property
    def resolution(self) -> Resolution:
        return self._resolution

    @property
    def is_pending(self) -> bool:
        return self._resolution is Resolution.PENDING

    @property
    def is_resolved(self) -> bool:
        return self._resolution is not Resolution.PENDING

    @property
    def is_failed(self) -> bool:
        return self._resolution is Resolution.FAILURE

    @property
    def is_satisfied(self) -> bool:
        return self._resolution is Resolution.SATISFACTION

    @property
    def scope_carrier_index(self) -> int | None:
        """Index of the child currently in scope, if any."""
        return None

    # =========================================================================
    # Notifications
    # =========================================================================

    def on_resolved(self, callback: NodeCallback) -> None:
        """Register a callback fired when the node leaves PENDING."""
        self._resolved_callbacks.append(callback)

    def on_failed(self, callback: NodeCallback) -> None:
        """Register a callback fired after on_resolved callbacks on failure."""
        self._failed_callbacks.append(callback)

    def on_satisfied(self, callback: NodeCallback) -> None:
        """Register a callback fired after on_resolved callbacks on satisfaction."""
        self._satisfied_callbacks.append(callback)

    def _notify(self, callbacks: list[NodeCallback]) -> None:
        for callback in callbacks:
            try:
                callback(self)
            except Exception as e:
                logger.error(f"Node callback error | node={self._id} | {e}", exc_info=True)

    # =========================================================================
    # State transitions
    # =========================================================================

    def fail(self) -> None:
        """Resolve with FAILURE."""
        self._resolution = Resolution.FAILURE
        log_resolution(logger, self._id, self._resolution.value)
        self._notify(self._resolved_callbacks)
        self._notify(self._failed_callbacks)

    def satisfy(self) -> None:
        """Resolve with SATISFACTION."""
        self._resolution = Resolution.SATISFACTION
        log_resolution(logger, self._id, self._resolution.value)
        self._notify(self._resolved_callbacks)
        self._notify(self._satisfied_callbacks)

    def reset(self, recurse: bool = True) -> None:
        """
        Return the node to PENDING.

        Args:
            recurse: Whether to reset the whole subtree (children first)
        """
        if recurse:
            for child in self._children:
                child.reset()
        self._resolution = Resolution.PENDING
        self._on_reset()

    def _on_reset(self) -> None:
        """Hook for variant-specific reinitialization."""

    def process(self, event: DialogueEvent) -> Resolution:
        """
        Process a dialogue event.

        Args:
            event: The event that just occurred

        Returns:
            The node's resolution after processing
        """
        if event is None:
            raise TypeError("event must not be None")
        if self.is_resolved:
            return self._resolution

        outcome = self._process(event)
        if outcome is Resolution.FAILURE:
            self.fail()
        elif outcome is Resolution.SATISFACTION:
            self.satisfy()
        return self._resolution

    @abstractmethod
    def _process(self, event: DialogueEvent) -> Resolution:
        """Variant logic; only called while the node is pending."""
        ...

    # =========================================================================
    # Queries
    # =========================================================================

    def get_expected_events(self, result: list[DialogueEvent]) -> None:
        """
        Append the events that would currently advance this node to result.

        result stays duplicate-free and in discovery order. Does nothing
        once the node is resolved.
        """
        if result is None:
            raise TypeError("result must not be None")
        if self.is_resolved:
            return
        self._collect_expected_events(result)

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        """Variant logic for get_expected_events(); only called while pending."""

    def expected_events(self) -> list[DialogueEvent]:
        """Get the events that would currently advance this node."""
        result: list[DialogueEvent] = []
        self.get_expected_events(result)
        return result

    def get_scope_carrier_chain(self, result: list["Node"]) -> None:
        """Append this node and, recursively, its scope carrier to result."""
        if result is None:
            raise TypeError("result must not be None")
        node: Node | None = self
        while node is not None:
            result.append(node)
            index = node.scope_carrier_index
            node = node.children[index] if index is not None else None

    def scope_carrier_chain(self) -> list["Node"]:
        """Get the chain of nodes currently in scope, starting at this node."""
        result: list[Node] = []
        self.get_scope_carrier_chain(result)
        return result

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants, depth-first pre-order."""
        yield self
        for child in self._children:
            yield from child.walk()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id='{self._id}', resolution={self._resolution.value})"
