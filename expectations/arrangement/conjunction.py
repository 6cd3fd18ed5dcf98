"""Conjunction - satisfied once every child is satisfied, in any order."""

from typing import Iterable

from expectations.domain import DialogueEvent

from .node import Node
from .resolution import Resolution


class Conjunction(Node):
    """
    Every unresolved child sees every event.

    Fails as soon as any child fails; satisfied once all children are
    satisfied. No single child carries the scope.
    """

    def __init__(self, node_id: str, children: Iterable[Node]):
        if children is None:
            raise TypeError("children must not be None")
        super().__init__(node_id, children)
        if len(self.children) < 2:
            raise ValueError("Conjunction requires at least 2 children")

    def _process(self, event: DialogueEvent) -> Resolution:
        all_satisfied = True
        for child in self.children:
            if not child.is_resolved:
                child.process(event)
            if child.is_failed:
                return Resolution.FAILURE
            if child.is_pending:
                all_satisfied = False
        return Resolution.SATISFACTION if all_satisfied else Resolution.PENDING

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        for child in self.children:
            if not child.is_resolved:
                child.get_expected_events(result)
