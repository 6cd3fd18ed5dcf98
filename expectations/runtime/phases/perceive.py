"""
PerceivePhase - asks both perception modules what happened.

Recent activity is perceived before current activity.
"""

import logging

from expectations.runtime.bundle import ModuleBundle
from expectations.runtime.context import StepContext
from expectations.runtime.pipeline import BasePhase


logger = logging.getLogger(__name__)


class PerceivePhase(BasePhase):
    """Collect the recent and current activity reports."""

    def __init__(self, modules: ModuleBundle):
        self._modules = modules

    def _execute(self, ctx: StepContext) -> StepContext:
        recent = self._modules.recent_activity_perception.perceive_activity()
        current = self._modules.current_activity_perception.perceive_activity()
        if recent is None or current is None:
            raise TypeError("perception modules must not report None")

        if recent.events:
            logger.debug(
                f"Perceived {len(recent.events)} events | step={ctx.step} | "
                f"events=[{', '.join(str(e) for e in recent.events)}]"
            )
        logger.debug(
            f"Floor | step={ctx.step} | active={sorted(current.active_ids)} | "
            f"passive={sorted(current.passive_ids)}"
        )
        return ctx.with_perception(recent, current)
