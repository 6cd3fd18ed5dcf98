"""
Divergence - alternative branches, committed to once one of them starts.

Before a branch is selected the children behave like a Disjunction: every
child sees every event, the divergence fails once all of them have failed
and is satisfied if any of them is satisfied outright.

A branch is selected when the endpoint of its scope-carrier chain (as it
was when the divergence was built) becomes satisfied. From then on only
that child is processed and queried, and the divergence mirrors it.
"""

from typing import Iterable

from expectations.domain import DialogueEvent

from .disjunction import Disjunction
from .node import Node
from .resolution import Resolution


class Divergence(Node):
    """Commits to the first child whose scope-carrier endpoint is satisfied."""

    def __init__(self, node_id: str, children: Iterable[Node]):
        if children is None:
            raise TypeError("children must not be None")
        super().__init__(node_id, children)
        if len(self.children) < 2:
            raise ValueError("Divergence requires at least 2 children")

        self._scope_carrier_endpoints: tuple[Node, ...] = tuple(
            child.scope_carrier_chain()[-1] for child in self.children
        )
        self._disjunction = Disjunction(f"{node_id}.disjunction", self.children)
        self._selected_child_index: int | None = None

    @property
    def selected_child_index(self) -> int | None:
        return self._selected_child_index

    @property
    def selected_child(self) -> Node | None:
        if self._selected_child_index is None:
            return None
        return self.children[self._selected_child_index]

    @property
    def scope_carrier_endpoints(self) -> tuple[Node, ...]:
        """Endpoint of each child's scope-carrier chain, fixed at construction."""
        return self._scope_carrier_endpoints

    @property
    def scope_carrier_index(self) -> int | None:
        if self.is_resolved:
            return None
        return self._selected_child_index

    def _on_reset(self) -> None:
        self._disjunction.reset(recurse=False)
        self._selected_child_index = None

    def _process(self, event: DialogueEvent) -> Resolution:
        selected = self.selected_child
        if selected is not None:
            return selected.process(event)

        self._disjunction.process(event)
        if self._disjunction.is_resolved:
            return self._disjunction.resolution

        for index, endpoint in enumerate(self._scope_carrier_endpoints):
            if endpoint.is_satisfied:
                self._selected_child_index = index
                break
        return Resolution.PENDING

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        selected = self.selected_child
        if selected is not None:
            selected.get_expected_events(result)
        else:
            self._disjunction.get_expected_events(result)

    def __repr__(self) -> str:
        return (
            f"Divergence(id='{self.id}', selected_child_index={self._selected_child_index}, "
            f"resolution={self.resolution.value})"
        )
