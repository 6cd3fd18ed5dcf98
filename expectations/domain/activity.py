"""
Activity reports exchanged between the step loop and its modules.

- RecentActivity: dialogue events completed since the previous step
- CurrentActivity: who is realizing a move right now and who is not
- SystemActivity: the agent's own bookkeeping from the previous step
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .moves import DialogueEvent, DialogueMove, is_idle
from .types import AgentId


class ActivityStatus(Enum):
    PASSIVE = "passive"
    ACTIVE = "active"


class RealizationStatus(Enum):
    """Outcome of one attempt to realize a move."""
    COMPLETE = "complete"
    IN_PROGRESS = "in_progress"


class RecentActivity(BaseModel):
    """
    Events perceived since the previous step, in perception order.

    Idle moves and duplicates are never recorded.
    """
    model_config = ConfigDict(frozen=True)

    events: tuple[DialogueEvent, ...] = ()

    @field_validator("events")
    @classmethod
    def _drop_idle_and_duplicates(
        cls, value: tuple[DialogueEvent, ...]
    ) -> tuple[DialogueEvent, ...]:
        kept: list[DialogueEvent] = []
        for event in value:
            if not is_idle(event.move) and event not in kept:
                kept.append(event)
        return tuple(kept)

    def with_event(self, event: DialogueEvent) -> "RecentActivity":
        """Add an event; idle moves and duplicates leave the report unchanged."""
        if event is None:
            raise TypeError("event must not be None")
        if is_idle(event.move) or event in self.events:
            return self
        return self.model_copy(update={"events": (*self.events, event)})

    def with_events(self, events) -> "RecentActivity":
        """Add several events."""
        report = self
        for event in events:
            report = report.with_event(event)
        return report


class CurrentActivity(BaseModel):
    """Which agents currently hold the floor (active) and which do not."""
    model_config = ConfigDict(frozen=True)

    active_ids: frozenset[AgentId] = Field(default_factory=frozenset)
    passive_ids: frozenset[AgentId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def _disjoint(self) -> "CurrentActivity":
        overlap = self.active_ids & self.passive_ids
        if overlap:
            raise ValueError(f"agents both active and passive: {sorted(overlap)}")
        return self

    @property
    def active_count(self) -> int:
        return len(self.active_ids)

    @property
    def is_floor_free(self) -> bool:
        """Whether nobody is currently active."""
        return not self.active_ids

    def contains(self, agent_id: AgentId) -> bool:
        """Whether the agent appears in the report at all."""
        if agent_id is None:
            raise TypeError("agent_id must not be None")
        return agent_id in self.active_ids or agent_id in self.passive_ids

    def get_status(self, agent_id: AgentId) -> ActivityStatus:
        """Get an agent's status; raises ValueError for agents not in the report."""
        if agent_id is None:
            raise TypeError("agent_id must not be None")
        if agent_id in self.passive_ids:
            return ActivityStatus.PASSIVE
        if agent_id in self.active_ids:
            return ActivityStatus.ACTIVE
        raise ValueError(f"agent {agent_id!r} is not in the activity report")

    def with_active(self, agent_id: AgentId) -> "CurrentActivity":
        """Mark an agent active unless it is already reported."""
        if self.contains(agent_id):
            return self
        return self.model_copy(update={"active_ids": self.active_ids | {agent_id}})

    def with_passive(self, agent_id: AgentId) -> "CurrentActivity":
        """Mark an agent passive unless it is already reported."""
        if self.contains(agent_id):
            return self
        return self.model_copy(update={"passive_ids": self.passive_ids | {agent_id}})


class SystemActivity(BaseModel):
    """The agent's own activity as of the end of the previous step."""
    model_config = ConfigDict(frozen=True)

    recent_move: DialogueMove | None
    target_move: DialogueMove
    is_active: bool

    @property
    def is_passive(self) -> bool:
        return not self.is_active
