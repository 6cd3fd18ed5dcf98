"""
UpdateStatePhase - hands the step's perception to the state update module.

The state update module is the only one given write access to the
information state.
"""

from expectations.runtime.bundle import ModuleBundle
from expectations.runtime.context import StepContext
from expectations.runtime.pipeline import BasePhase
from expectations.state import StateMutator


class UpdateStatePhase(BasePhase):
    def __init__(self, modules: ModuleBundle, state: StateMutator):
        self._modules = modules
        self._state = state

    def _execute(self, ctx: StepContext) -> StepContext:
        self._modules.state_update.perform_update(
            ctx.recent_activity,
            ctx.current_activity,
            ctx.system_activity,
            self._state,
        )
        return ctx
