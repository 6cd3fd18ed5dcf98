"""
Modules layer - the six roles of the step loop and their implementations.

Arrangement-driven implementations:
- ArrangementUpdate: feeds perceived events to the arrangement
- ActionSelectionModule: chooses among expected moves
- ActionTimingModule: settles contested floors by interruption votes
"""

from .base import (
    Module,
    ModuleStateError,
    RecentActivityPerception,
    CurrentActivityPerception,
    StateUpdate,
    ActionSelection,
    ActionTiming,
    ActionRealization,
)
from .stubs import (
    RecentActivityStub,
    CurrentActivityStub,
    StateUpdateStub,
    ActionSelectionStub,
    ActionTimingStub,
    ActionRealizationStub,
)
from .action_selection import ActionSelectionModule, SelectionMethod, select_first
from .action_timing import ActionTimingModule
from .state_update import ArrangementUpdate
from .scripted import RecordingRealization, ScriptedRecentActivity, ScriptedCurrentActivity

__all__ = [
    # Roles
    "Module",
    "ModuleStateError",
    "RecentActivityPerception",
    "CurrentActivityPerception",
    "StateUpdate",
    "ActionSelection",
    "ActionTiming",
    "ActionRealization",
    # Stubs
    "RecentActivityStub",
    "CurrentActivityStub",
    "StateUpdateStub",
    "ActionSelectionStub",
    "ActionTimingStub",
    "ActionRealizationStub",
    # Arrangement-driven
    "ActionSelectionModule",
    "SelectionMethod",
    "select_first",
    "ActionTimingModule",
    "ArrangementUpdate",
    # Scripted collaborators
    "RecordingRealization",
    "ScriptedRecentActivity",
    "ScriptedCurrentActivity",
]
