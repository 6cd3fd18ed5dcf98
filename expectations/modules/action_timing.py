"""
ActionTimingModule - decides whether now is a valid time to realize a move.

Free floor, or a floor held by this agent alone, means yes. A contested
floor is settled by voting over the interruption rules attached to the
nodes currently in scope (the root's scope-carrier chain):

- Not active: vote on initiating an interruption (INTERRUPT means go)
- Active while someone else is too: vote on the response (IGNORE means go)

Without attached rules, conflict avoidance applies: never interrupt,
always surrender.
"""

import logging
from typing import Iterable, Mapping

from expectations.arrangement import Node
from expectations.domain import AgentId, DialogueMove
from expectations.state import SOCIAL_CONTEXT, SocialContext
from expectations.timing import (
    CONFLICT_AVOIDANCE,
    InitiationRule,
    InterruptionInitiation,
    InterruptionResponse,
    InterruptionRules,
    ResponseRule,
    evaluate_for,
)

from .base import ActionTiming


logger = logging.getLogger(__name__)


class ActionTimingModule(ActionTiming):
    """Turn-taking by interruption votes attached to arrangement nodes."""

    def __init__(
        self,
        interruption_rules: Mapping[str, InterruptionRules]
        | Iterable[tuple[str, InterruptionRules]]
        | None = None,
    ):
        """
        Initialize the module.

        Args:
            interruption_rules: Rules keyed by the id of the node they attach to
        """
        super().__init__()
        self._interruption_rules: dict[str, InterruptionRules] = dict(interruption_rules or {})
        self._self_id: AgentId | None = None
        self._interaction: Node | None = None

    @property
    def interruption_rules(self) -> Mapping[str, InterruptionRules]:
        return dict(self._interruption_rules)

    def setup(self) -> None:
        context = self.state.get(SOCIAL_CONTEXT, SocialContext)
        self._self_id = context.self_id
        self._interaction = context.interaction

    def active_scope_ids(self) -> list[str]:
        """Ids of the nodes on the root's current scope-carrier chain."""
        return [node.id for node in self._interaction.scope_carrier_chain()]

    def _initiation_rules(self, scope: list[str]) -> list[InitiationRule]:
        rules: list[InitiationRule] = []
        for node_id in scope:
            if node_id in self._interruption_rules:
                rules.extend(self._interruption_rules[node_id].initiation)
        return rules or list(CONFLICT_AVOIDANCE.initiation)

    def _response_rules(self, scope: list[str]) -> list[ResponseRule]:
        rules: list[ResponseRule] = []
        for node_id in scope:
            if node_id in self._interruption_rules:
                rules.extend(self._interruption_rules[node_id].response)
        return rules or list(CONFLICT_AVOIDANCE.response)

    def is_valid_move_now(self, move: DialogueMove) -> bool:
        if move is None:
            raise TypeError("move must not be None")
        if self._interaction.is_resolved:
            return False

        activity = self.state.current_activity
        self_active = self._self_id in activity.active_ids
        floor_free = activity.active_count == 0
        self_alone_active = activity.active_count == 1 and self_active
        if floor_free or self_alone_active:
            return True

        scope = self.active_scope_ids()
        if not self_active:
            decision = evaluate_for(self._initiation_rules(scope), self._self_id)
            logger.debug(
                f"Initiation vote | agent={self._self_id} | move={move} | "
                f"scope={scope} | decision={decision}"
            )
            return decision is InterruptionInitiation.INTERRUPT

        decision = evaluate_for(self._response_rules(scope), self._self_id)
        logger.debug(
            f"Response vote | agent={self._self_id} | move={move} | "
            f"scope={scope} | decision={decision}"
        )
        return decision is InterruptionResponse.IGNORE
