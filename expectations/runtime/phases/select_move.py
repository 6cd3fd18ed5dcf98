"""
SelectMovePhase - asks action selection for the step's target move.

Selection must always answer with a move; IDLE stands for "nothing".
"""

import logging

from expectations.logging_config import log_move
from expectations.runtime.bundle import ModuleBundle
from expectations.runtime.context import StepContext
from expectations.runtime.pipeline import BasePhase, ProtocolViolation


logger = logging.getLogger(__name__)


class SelectMovePhase(BasePhase):
    def __init__(self, modules: ModuleBundle):
        self._modules = modules

    def _execute(self, ctx: StepContext) -> StepContext:
        target = self._modules.action_selection.select_move()
        if target is None:
            raise ProtocolViolation(
                f"{type(self._modules.action_selection).__name__}.select_move() returned None"
            )
        log_move(logger, ctx.step, "selected", target)
        return ctx.with_target_move(target)
