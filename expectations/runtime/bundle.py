"""
ModuleBundle - the six modules an agent runs each step.

Built through ModuleBundle.Builder; roles left unset get their stubs.

Usage:
    modules = (
        ModuleBundle.Builder()
        .with_action_selection(ActionSelectionModule())
        .with_action_timing(ActionTimingModule(rules))
        .build()
    )
"""

from dataclasses import dataclass
from typing import Iterator

from expectations.modules import (
    ActionRealization,
    ActionRealizationStub,
    ActionSelection,
    ActionSelectionStub,
    ActionTiming,
    ActionTimingStub,
    CurrentActivityPerception,
    CurrentActivityStub,
    Module,
    RecentActivityPerception,
    RecentActivityStub,
    StateUpdate,
    StateUpdateStub,
)
from expectations.state import BuilderStateError


@dataclass(frozen=True)
class ModuleBundle:
    """One module per role, iterated in step order."""

    recent_activity_perception: RecentActivityPerception
    current_activity_perception: CurrentActivityPerception
    state_update: StateUpdate
    action_selection: ActionSelection
    action_timing: ActionTiming
    action_realization: ActionRealization

    def __iter__(self) -> Iterator[Module]:
        yield self.recent_activity_perception
        yield self.current_activity_perception
        yield self.state_update
        yield self.action_selection
        yield self.action_timing
        yield self.action_realization

    class Builder:
        """Collects modules for a new ModuleBundle."""

        def __init__(self):
            self._modules: dict[str, Module] = {}
            self._is_built = False

        @property
        def is_built(self) -> bool:
            return self._is_built

        def _with(self, role: str, module: Module, expected: type) -> "ModuleBundle.Builder":
            if self._is_built:
                raise BuilderStateError("ModuleBundle is already built")
            if module is None:
                raise TypeError(f"{role} must not be None")
            if not isinstance(module, expected):
                raise TypeError(f"{role} must be a {expected.__name__}")
            if module.is_initialized:
                raise ValueError(f"{type(module).__name__} is already initialized")
            self._modules[role] = module
            return self

        def with_recent_activity_perception(
            self, module: RecentActivityPerception
        ) -> "ModuleBundle.Builder":
            return self._with("recent_activity_perception", module, RecentActivityPerception)

        def with_current_activity_perception(
            self, module: CurrentActivityPerception
        ) -> "ModuleBundle.Builder":
            return self._with("current_activity_perception", module, CurrentActivityPerception)

        def with_state_update(self, module: StateUpdate) -> "ModuleBundle.Builder":
            return self._with("state_update", module, StateUpdate)

        def with_action_selection(self, module: ActionSelection) -> "ModuleBundle.Builder":
            return self._with("action_selection", module, ActionSelection)

        def with_action_timing(self, module: ActionTiming) -> "ModuleBundle.Builder":
            return self._with("action_timing", module, ActionTiming)

        def with_action_realization(
            self, module: ActionRealization
        ) -> "ModuleBundle.Builder":
            return self._with("action_realization", module, ActionRealization)

        def build(self) -> "ModuleBundle":
            """Create the bundle, filling unset roles with stubs."""
            if self._is_built:
                raise BuilderStateError("ModuleBundle is already built")
            self._is_built = True
            m = self._modules
            return ModuleBundle(
                recent_activity_perception=m.get("recent_activity_perception")
                or RecentActivityStub(),
                current_activity_perception=m.get("current_activity_perception")
                or CurrentActivityStub(),
                state_update=m.get("state_update") or StateUpdateStub(),
                action_selection=m.get("action_selection") or ActionSelectionStub(),
                action_timing=m.get("action_timing") or ActionTimingStub(),
                action_realization=m.get("action_realization") or ActionRealizationStub(),
            )
