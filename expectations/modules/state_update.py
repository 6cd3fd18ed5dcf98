"""
ArrangementUpdate - folds each step's perception into the information state.

This is the only writer of the arrangement: every reported dialogue event
is processed by the interaction root, in perception order.
"""

import logging

from expectations.arrangement import Node
from expectations.domain import CurrentActivity, RecentActivity, SystemActivity
from expectations.state import (
    CURRENT_ACTIVITY,
    SOCIAL_CONTEXT,
    SocialContext,
    StateMutator,
)

from .base import StateUpdate


logger = logging.getLogger(__name__)


class ArrangementUpdate(StateUpdate):
    """Stores the current activity report and feeds recent events to the arrangement."""

    def __init__(self):
        super().__init__()
        self._interaction: Node | None = None

    def setup(self) -> None:
        self._interaction = self.state.get(SOCIAL_CONTEXT, SocialContext).interaction

    def perform_update(
        self,
        recent_activity: RecentActivity,
        current_activity: CurrentActivity,
        system_activity: SystemActivity,
        state_mutator: StateMutator,
    ) -> None:
        if recent_activity is None or current_activity is None:
            raise TypeError("activity reports must not be None")
        if state_mutator is None:
            raise TypeError("state_mutator must not be None")

        state_mutator.set(CURRENT_ACTIVITY, current_activity)

        for event in recent_activity.events:
            before = self._interaction.resolution
            after = self._interaction.process(event)
            logger.debug(
                f"Processed {event} | root={self._interaction.id} | "
                f"{before.value} -> {after.value}"
            )

        if self._interaction.is_resolved:
            logger.info(
                f"Interaction {self._interaction.id} resolved | "
                f"resolution={self._interaction.resolution.value}"
            )
