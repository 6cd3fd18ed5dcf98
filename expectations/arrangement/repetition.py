"""Repetition - a body that may be gone through any number of times."""

from expectations.domain import DialogueEvent

from .node import Node
from .resolution import Resolution


class Repetition(Node):
    """
    Never satisfied by itself; fails when its body fails.

    Each time the body is satisfied it is reset and the repetition stays
    pending, ready for the next round.
    """

    def __init__(self, node_id: str, body: Node):
        if body is None:
            raise TypeError("body must not be None")
        super().__init__(node_id, (body,))

    @property
    def body(self) -> Node:
        return self.children[0]

    @property
    def scope_carrier_index(self) -> int | None:
        if self.is_resolved:
            return None
        return 0

    def _process(self, event: DialogueEvent) -> Resolution:
        body = self.body
        body.process(event)
        if not body.is_satisfied:
            return body.resolution
        body.reset()
        return Resolution.PENDING

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        self.body.get_expected_events(result)
