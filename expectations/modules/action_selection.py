"""
ActionSelectionModule - picks the next move from the arrangement's expectations.

The candidates are the moves of every currently expected event whose source
is the agent itself. With a single candidate that move is chosen outright;
with several, a pluggable selector decides.
"""

import logging
from typing import Callable

from expectations.arrangement import Node
from expectations.domain import IDLE, AgentId, DialogueMove
from expectations.state import SOCIAL_CONTEXT, SocialContext, StateAccessor

from .base import ActionSelection


logger = logging.getLogger(__name__)

# (candidates, state) -> index of the chosen candidate, or None for idle
SelectionMethod = Callable[[list[DialogueMove], StateAccessor], int | None]


def select_first(candidates: list[DialogueMove], state: StateAccessor) -> int | None:
    """Default selector: the first candidate."""
    return 0


class ActionSelectionModule(ActionSelection):
    """Selects moves the arrangement currently expects from this agent."""

    def __init__(self, candidate_selector: SelectionMethod = select_first):
        """
        Initialize the module.

        Args:
            candidate_selector: Chooses among two or more candidates
        """
        super().__init__()
        if candidate_selector is None:
            raise TypeError("candidate_selector must not be None")
        self._candidate_selector = candidate_selector
        self._self_id: AgentId | None = None
        self._interaction: Node | None = None

    @property
    def candidate_selector(self) -> SelectionMethod:
        return self._candidate_selector

    def setup(self) -> None:
        context = self.state.get(SOCIAL_CONTEXT, SocialContext)
        self._self_id = context.self_id
        self._interaction = context.interaction

    def candidate_moves(self) -> list[DialogueMove]:
        """Moves currently expected from this agent, in discovery order."""
        return [
            event.move
            for event in self._interaction.expected_events()
            if event.source_id == self._self_id
        ]

    def select_move(self) -> DialogueMove:
        if self._interaction.is_resolved:
            return IDLE

        candidates = self.candidate_moves()
        if not candidates:
            return IDLE
        if len(candidates) == 1:
            return candidates[0]

        index = self._candidate_selector(list(candidates), self.state)
        if index is None:
            logger.debug(f"Selector declined | agent={self._self_id} | candidates={len(candidates)}")
            return IDLE
        logger.debug(
            f"Selector chose {index} | agent={self._self_id} | candidates={len(candidates)}"
        )
        return candidates[index]
