"""
TimeMovePhase - decides whether the target move is realized this step.

Timing is only consulted for non-idle targets.
"""

import logging

from expectations.domain import is_idle
from expectations.runtime.bundle import ModuleBundle
from expectations.runtime.context import StepContext
from expectations.runtime.pipeline import BasePhase


logger = logging.getLogger(__name__)


class TimeMovePhase(BasePhase):
    def __init__(self, modules: ModuleBundle):
        self._modules = modules

    def _execute(self, ctx: StepContext) -> StepContext:
        if is_idle(ctx.target_move):
            return ctx.with_is_active(False)

        is_active = bool(self._modules.action_timing.is_valid_move_now(ctx.target_move))
        logger.debug(
            f"Timing | step={ctx.step} | move={ctx.target_move} | "
            f"{'go' if is_active else 'wait'}"
        )
        return ctx.with_is_active(is_active)
