"""
RealizePhase - hands the actual move to action realization.

The actual move is the target when the agent is active, IDLE otherwise.
Realization is called every step, IDLE included.
"""

import logging

from expectations.domain import IDLE
from expectations.logging_config import log_move
from expectations.runtime.bundle import ModuleBundle
from expectations.runtime.context import StepContext
from expectations.runtime.pipeline import BasePhase, ProtocolViolation


logger = logging.getLogger(__name__)


class RealizePhase(BasePhase):
    def __init__(self, modules: ModuleBundle):
        self._modules = modules

    def _execute(self, ctx: StepContext) -> StepContext:
        actual = ctx.target_move if ctx.is_active else IDLE
        status = self._modules.action_realization.realize_move(actual)
        if status is None:
            raise ProtocolViolation(
                f"{type(self._modules.action_realization).__name__}.realize_move() returned None"
            )
        if ctx.is_active:
            log_move(logger, ctx.step, "realized", actual, f"status={status.value}")
        return ctx.with_realization(actual, status)
