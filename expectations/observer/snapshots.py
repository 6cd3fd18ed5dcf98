"""
Display snapshots - read-only views of an agent's dialogue state.

These types are optimized for display and logging, not for domain logic.
They flatten the live arrangement into plain immutable values.
"""

from dataclasses import dataclass

from expectations.arrangement import Divergence, IndefiniteEvent, Node, Sequence
from expectations.domain import DialogueMove


@dataclass(frozen=True)
class NodeSnapshot:
    """One arrangement node and its subtree, as currently resolved."""

    id: str
    kind: str
    resolution: str
    scope_carrier_index: int | None
    children: tuple["NodeSnapshot", ...]

    # Variant-specific
    expected_event: str | None = None
    active_child_index: int | None = None
    selected_child_index: int | None = None

    @classmethod
    def from_node(cls, node: Node) -> "NodeSnapshot":
        """Create from a live arrangement node (recursively)."""
        if node is None:
            raise TypeError("node must not be None")

        expected_event = None
        active_child_index = None
        selected_child_index = None
        if isinstance(node, IndefiniteEvent):
            expected_event = str(node.event)
        elif isinstance(node, Sequence):
            active_child_index = node.active_child_index
        elif isinstance(node, Divergence):
            selected_child_index = node.selected_child_index

        return cls(
            id=node.id,
            kind=type(node).__name__,
            resolution=node.resolution.value,
            scope_carrier_index=node.scope_carrier_index,
            children=tuple(cls.from_node(child) for child in node.children),
            expected_event=expected_event,
            active_child_index=active_child_index,
            selected_child_index=selected_child_index,
        )

    @property
    def is_pending(self) -> bool:
        return self.resolution == "pending"

    def find(self, node_id: str) -> "NodeSnapshot | None":
        """Find a snapshot in this subtree by node id."""
        if self.id == node_id:
            return self
        for child in self.children:
            found = child.find(node_id)
            if found is not None:
                return found
        return None


@dataclass(frozen=True)
class SystemSnapshot:
    """The step loop's bookkeeping for display."""

    step_count: int
    recent_move: str | None
    target_move: str
    is_active: bool

    @classmethod
    def from_values(
        cls,
        step_count: int,
        recent_move: DialogueMove | None,
        target_move: DialogueMove,
        is_active: bool,
    ) -> "SystemSnapshot":
        return cls(
            step_count=step_count,
            recent_move=str(recent_move) if recent_move is not None else None,
            target_move=str(target_move),
            is_active=is_active,
        )
