"""IndefiniteEvent - waits, for as long as it takes, for one specific event."""

from expectations.domain import DialogueEvent

from .node import Node, add_expected
from .resolution import Resolution


class IndefiniteEvent(Node):
    """
    Satisfied by an event equal to the expected one; never fails.

    Any other event leaves the node pending.
    """

    def __init__(self, node_id: str, event: DialogueEvent):
        super().__init__(node_id)
        if event is None:
            raise TypeError("event must not be None")
        self._event = event

    @property
    def event(self) -> DialogueEvent:
        return self._event

    def _process(self, event: DialogueEvent) -> Resolution:
        if event == self._event:
            return Resolution.SATISFACTION
        return Resolution.PENDING

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        add_expected(result, self._event)

    def __repr__(self) -> str:
        return (
            f"IndefiniteEvent(id='{self.id}', event={self._event}, "
            f"resolution={self.resolution.value})"
        )
