"""Dialogue domain models: moves, events and activity reports."""

from .types import AgentId, NodeId, ComponentId
from .moves import (
    IDLE,
    IDLE_MOVE_TYPE,
    DialogueMove,
    DialogueEvent,
    create_move,
    is_idle,
    get_addressee,
)
from .activity import (
    ActivityStatus,
    RealizationStatus,
    RecentActivity,
    CurrentActivity,
    SystemActivity,
)

__all__ = [
    # Types
    "AgentId",
    "NodeId",
    "ComponentId",
    # Moves
    "IDLE",
    "IDLE_MOVE_TYPE",
    "DialogueMove",
    "DialogueEvent",
    "create_move",
    "is_idle",
    "get_addressee",
    # Activity
    "ActivityStatus",
    "RealizationStatus",
    "RecentActivity",
    "CurrentActivity",
    "SystemActivity",
]
