"""Do-nothing implementations of every module role, used as bundle defaults."""

from expectations.domain import (
    IDLE,
    CurrentActivity,
    DialogueMove,
    RealizationStatus,
    RecentActivity,
    SystemActivity,
)
from expectations.state import StateMutator

from .base import (
    ActionRealization,
    ActionSelection,
    ActionTiming,
    CurrentActivityPerception,
    RecentActivityPerception,
    StateUpdate,
)


class RecentActivityStub(RecentActivityPerception):
    def perceive_activity(self) -> RecentActivity:
        return RecentActivity()


class CurrentActivityStub(CurrentActivityPerception):
    def perceive_activity(self) -> CurrentActivity:
        return CurrentActivity()


class StateUpdateStub(StateUpdate):
    def perform_update(
        self,
        recent_activity: RecentActivity,
        current_activity: CurrentActivity,
        system_activity: SystemActivity,
        state_mutator: StateMutator,
    ) -> None:
        pass


class ActionSelectionStub(ActionSelection):
    def select_move(self) -> DialogueMove:
        return IDLE


class ActionTimingStub(ActionTiming):
    def is_valid_move_now(self, move: DialogueMove) -> bool:
        return True


class ActionRealizationStub(ActionRealization):
    def realize_move(self, move: DialogueMove) -> RealizationStatus:
        return RealizationStatus.COMPLETE
