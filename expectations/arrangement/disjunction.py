"""Disjunction - satisfied by whichever child is satisfied first."""

from typing import Iterable

from expectations.domain import DialogueEvent

from .node import Node
from .resolution import Resolution


class Disjunction(Node):
    """
    Every unresolved child sees every event.

    Satisfied as soon as any child is satisfied; fails only once all
    children have failed. No single child carries the scope.
    """

    def __init__(self, node_id: str, children: Iterable[Node]):
        if children is None:
            raise TypeError("children must not be None")
        super().__init__(node_id, children)
        if len(self.children) < 2:
            raise ValueError("Disjunction requires at least 2 children")

    def _process(self, event: DialogueEvent) -> Resolution:
        all_failed = True
        for child in self.children:
            if not child.is_resolved:
                child.process(event)
            if child.is_satisfied:
                return Resolution.SATISFACTION
            if child.is_pending:
                all_failed = False
        return Resolution.FAILURE if all_failed else Resolution.PENDING

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        for child in self.children:
            if not child.is_resolved:
                child.get_expected_events(result)
