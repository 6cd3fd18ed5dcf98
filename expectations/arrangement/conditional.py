"""Conditional - a body that only takes part in the dialogue while a condition holds."""

from typing import Callable

from expectations.domain import DialogueEvent

from .node import Node
from .resolution import Resolution


Condition = Callable[[], bool]


class Conditional(Node):
    """
    Mirrors its body's resolution while the condition is true.

    While the condition is false the body is neither processed nor asked
    for expected events, and the conditional stays pending.
    """

    def __init__(self, node_id: str, body: Node, condition: Condition):
        if body is None:
            raise TypeError("body must not be None")
        if condition is None:
            raise TypeError("condition must not be None")
        super().__init__(node_id, (body,))
        self._condition = condition

    @property
    def body(self) -> Node:
        return self.children[0]

    @property
    def condition(self) -> Condition:
        return self._condition

    @property
    def scope_carrier_index(self) -> int | None:
        if self.is_resolved or not self._condition():
            return None
        return 0

    def _process(self, event: DialogueEvent) -> Resolution:
        if not self._condition():
            return Resolution.PENDING
        return self.body.process(event)

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        if self._condition():
            self.body.get_expected_events(result)
