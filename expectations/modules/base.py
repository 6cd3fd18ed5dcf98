"""
Module roles of the agent's step loop.

Each step calls the six roles in a fixed order:

1. RecentActivityPerception - which dialogue events just completed
2. CurrentActivityPerception - who is active right now
3. StateUpdate - the only writer of the information state
4. ActionSelection - which move to pursue next
5. ActionTiming - whether now is a valid time to realize it
6. ActionRealization - attempt to realize the move

Modules receive read access to the information state once, through
initialize(), and then get a chance to cache what they need in setup().
"""

from abc import ABC, abstractmethod

from expectations.domain import (
    CurrentActivity,
    DialogueMove,
    RealizationStatus,
    RecentActivity,
    SystemActivity,
)
from expectations.state import StateAccessor, StateMutator


class ModuleStateError(RuntimeError):
    """Raised when a module is used before, or initialized after, initialization."""

    pass


class Module(ABC):
    """Base class for all module roles."""

    def __init__(self):
        self._state: StateAccessor | None = None

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> StateAccessor:
        """Read access to the information state (available after initialize())."""
        if self._state is None:
            raise ModuleStateError(f"{type(self).__name__} is not initialized")
        return self._state

    def initialize(self, state: StateAccessor) -> None:
        """
        Bind the module to an information state, then run setup().

        Raises:
            ModuleStateError: If the module is already initialized
            TypeError: If state is None
        """
        if self.is_initialized:
            raise ModuleStateError(f"{type(self).__name__} is already initialized")
        if state is None:
            raise TypeError("state must not be None")
        self._state = state
        self.setup()

    def setup(self) -> None:
        """Hook run once, right after initialize()."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(initialized={self.is_initialized})"


class RecentActivityPerception(Module):
    @abstractmethod
    def perceive_activity(self) -> RecentActivity:
        """Report the dialogue events completed since the previous step."""
        ...


class CurrentActivityPerception(Module):
    @abstractmethod
    def perceive_activity(self) -> CurrentActivity:
        """Report who is currently active and who is passive."""
        ...


class StateUpdate(Module):
    @abstractmethod
    def perform_update(
        self,
        recent_activity: RecentActivity,
        current_activity: CurrentActivity,
        system_activity: SystemActivity,
        state_mutator: StateMutator,
    ) -> None:
        """Fold the step's perception reports into the information state."""
        ...


class ActionSelection(Module):
    @abstractmethod
    def select_move(self) -> DialogueMove:
        """Choose the move to pursue next (IDLE for none)."""
        ...


class ActionTiming(Module):
    @abstractmethod
    def is_valid_move_now(self, move: DialogueMove) -> bool:
        """Whether a non-idle move may be realized right now."""
        ...


class ActionRealization(Module):
    @abstractmethod
    def realize_move(self, move: DialogueMove) -> RealizationStatus:
        """Attempt to realize a move (IDLE included)."""
        ...
