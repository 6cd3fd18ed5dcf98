"""
ObserverAPI - read-only inspection of an agent's dialogue state.

All methods are queries (get_*/format_*): safe to call any number of times,
between steps, without changing the arrangement or the system.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from expectations.arrangement import Node
from expectations.domain import DialogueEvent, DialogueMove
from expectations.state import SocialContext

from .snapshots import NodeSnapshot, SystemSnapshot

if TYPE_CHECKING:
    from expectations.system import AgencySystem

logger = logging.getLogger(__name__)


class ObserverAPI:
    """Queries over a system and the social context it acts in."""

    def __init__(self, system: "AgencySystem", context: SocialContext):
        if system is None:
            raise TypeError("system must not be None")
        if context is None:
            raise TypeError("context must not be None")
        self._system = system
        self._context = context

    @property
    def interaction(self) -> Node:
        return self._context.interaction

    # =========================================================================
    # QUERIES (Read-Only)
    # =========================================================================

    # --- Arrangement ---

    def get_arrangement_snapshot(self) -> NodeSnapshot:
        """Get the whole arrangement for display."""
        return NodeSnapshot.from_node(self._context.interaction)

    def get_expected_events(self) -> list[DialogueEvent]:
        """Events that would currently advance the interaction, in discovery order."""
        return self._context.interaction.expected_events()

    def get_candidate_moves(self) -> list[DialogueMove]:
        """Expected moves sourced by this agent."""
        return [
            event.move
            for event in self.get_expected_events()
            if event.source_id == self._context.self_id
        ]

    def get_scope_chain_ids(self) -> list[str]:
        """Ids of the nodes currently in scope, root first."""
        return [node.id for node in self._context.interaction.scope_carrier_chain()]

    # --- System ---

    def get_system_snapshot(self) -> SystemSnapshot:
        """Get the step loop's bookkeeping."""
        return SystemSnapshot.from_values(
            step_count=self._system.step_count,
            recent_move=self._system.recent_move,
            target_move=self._system.target_move,
            is_active=self._system.is_active,
        )

    # =========================================================================
    # Formatting
    # =========================================================================

    def format_tree(self, indent: str = "  ") -> str:
        """
        Render the arrangement as indented text, one node per line.

        Nodes on the current scope chain are marked with '*'.
        """
        in_scope = set(self.get_scope_chain_ids())
        lines: list[str] = []

        def render(snapshot: NodeSnapshot, depth: int) -> None:
            marker = "*" if snapshot.id in in_scope else " "
            line = f"{indent * depth}{marker} {snapshot.kind} {snapshot.id} [{snapshot.resolution}]"
            if snapshot.expected_event is not None:
                line += f" {snapshot.expected_event}"
            lines.append(line)
            for child in snapshot.children:
                render(child, depth + 1)

        render(self.get_arrangement_snapshot(), 0)
        return "\n".join(lines)
