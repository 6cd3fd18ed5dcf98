"""Sequence - children that must be satisfied one after the other."""

from typing import Iterable

from expectations.domain import DialogueEvent

from .node import Node
from .resolution import Resolution


class Sequence(Node):
    """
    Feeds events to the active child only.

    When the active child is satisfied the active index moves forward,
    skipping successors that are already satisfied. The sequence is
    satisfied once the index passes the last child, and fails as soon as
    the active child fails (including a successor landed on that had
    already failed).
    """

    def __init__(self, node_id: str, children: Iterable[Node]):
        if children is None:
            raise TypeError("children must not be None")
        super().__init__(node_id, children)
        if len(self.children) < 2:
            raise ValueError("Sequence requires at least 2 children")
        self._active_child_index = 0

    @property
    def active_child_index(self) -> int:
        return self._active_child_index

    @property
    def active_child(self) -> Node | None:
        """The child being waited on, or None once every child was passed."""
        if self._active_child_index >= len(self.children):
            return None
        return self.children[self._active_child_index]

    @property
    def scope_carrier_index(self) -> int | None:
        if self.is_resolved:
            return None
        return self._active_child_index

    def _on_reset(self) -> None:
        self._active_child_index = 0

    def _process(self, event: DialogueEvent) -> Resolution:
        child = self.children[self._active_child_index]
        child.process(event)
        if not child.is_satisfied:
            return child.resolution

        self._active_child_index += 1
        while (
            self._active_child_index < len(self.children)
            and self.children[self._active_child_index].is_satisfied
        ):
            self._active_child_index += 1

        if self._active_child_index == len(self.children):
            return Resolution.SATISFACTION
        if self.children[self._active_child_index].is_failed:
            return Resolution.FAILURE
        return Resolution.PENDING

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        self.children[self._active_child_index].get_expected_events(result)

    def __repr__(self) -> str:
        return (
            f"Sequence(id='{self.id}', active_child_index={self._active_child_index}, "
            f"resolution={self.resolution.value})"
        )
