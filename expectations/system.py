"""
AgencySystem - the agent's step loop.

Owns the information state and the module bundle, runs the step pipeline,
and keeps the bookkeeping that carries from one step to the next:

- recent_move: the move completed in the previous step (None while one is in progress)
- target_move: the move selected in the previous step
- is_active: whether the agent is still realizing a move

Usage:
    system = AgencySystem(state, modules)
    system.on_step(lambda result: print(result.actual_move))
    result = system.step()
"""

import logging
from typing import Callable

from expectations.domain import IDLE, DialogueMove, SystemActivity
from expectations.logging_config import log_step
from expectations.runtime import (
    ModuleBundle,
    PerceivePhase,
    RealizePhase,
    SelectMovePhase,
    StepContext,
    StepPipeline,
    StepResult,
    TimeMovePhase,
    UpdateStatePhase,
)
from expectations.observer import ObserverAPI
from expectations.runtime.pipeline import PipelineMetrics
from expectations.state import SOCIAL_CONTEXT, InformationState, SocialContext


logger = logging.getLogger(__name__)


class AgencySystem:
    """Runs an agent's modules against its information state, one step at a time."""

    def __init__(self, state: InformationState, modules: ModuleBundle):
        """
        Initialize the system and every module in the bundle.

        Args:
            state: The agent's information state
            modules: The agent's modules (none of them initialized yet)
        """
        if state is None:
            raise TypeError("state must not be None")
        if modules is None:
            raise TypeError("modules must not be None")

        self._state = state
        self._modules = modules
        for module in modules:
            module.initialize(state)

        self._pipeline = self._build_pipeline()

        # Observer API (lazy initialization)
        self._observer: ObserverAPI | None = None

        # Callbacks
        self._step_callbacks: list[Callable[[StepResult], None]] = []

        # Bookkeeping
        self._step_count = 0
        self._recent_move: DialogueMove | None = IDLE
        self._target_move: DialogueMove = IDLE
        self._is_active = False
        self._last_result: StepResult | None = None

        logger.info(
            f"AgencySystem ready | modules=[{', '.join(type(m).__name__ for m in modules)}]"
        )

    def _build_pipeline(self) -> StepPipeline:
        """Build the step execution pipeline."""
        phases = [
            PerceivePhase(self._modules),
            UpdateStatePhase(self._modules, self._state),
            SelectMovePhase(self._modules),
            TimeMovePhase(self._modules),
            RealizePhase(self._modules),
        ]
        return StepPipeline(phases)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> InformationState:
        return self._state

    @property
    def modules(self) -> ModuleBundle:
        return self._modules

    @property
    def step_count(self) -> int:
        """Number of completed steps."""
        return self._step_count

    @property
    def recent_move(self) -> DialogueMove | None:
        return self._recent_move

    @property
    def target_move(self) -> DialogueMove:
        return self._target_move

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def system_activity(self) -> SystemActivity:
        """The bookkeeping the next step will start from."""
        return SystemActivity(
            recent_move=self._recent_move,
            target_move=self._target_move,
            is_active=self._is_active,
        )

    @property
    def last_result(self) -> StepResult | None:
        return self._last_result

    @property
    def observer(self) -> ObserverAPI:
        """Read-only inspection API (requires a social context in the state)."""
        if self._observer is None:
            context = self._state.get(SOCIAL_CONTEXT, SocialContext)
            self._observer = ObserverAPI(self, context)
        return self._observer

    def get_metrics(self) -> PipelineMetrics | None:
        """Metrics from the last executed step."""
        return self._pipeline.get_metrics()

    # =========================================================================
    # Execution
    # =========================================================================

    def step(self) -> StepResult:
        """
        Execute one step.

        Bookkeeping is committed only if every phase succeeds; a failing
        phase raises PhaseError and leaves the system as it was.
        """
        ctx = StepContext(step=self._step_count + 1, system_activity=self.system_activity)
        log_step(logger, ctx.step, "start", str(ctx.system_activity))

        result = self._pipeline.execute(ctx)

        self._step_count = result.step
        self._recent_move = result.system_activity.recent_move
        self._target_move = result.system_activity.target_move
        self._is_active = result.system_activity.is_active
        self._last_result = result

        for callback in self._step_callbacks:
            try:
                callback(result)
            except Exception as e:
                logger.error(f"Step callback error: {e}")

        return result

    def run(self, steps: int) -> list[StepResult]:
        """Execute several steps and return their results."""
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        return [self.step() for _ in range(steps)]

    # =========================================================================
    # Callbacks
    # =========================================================================

    def on_step(self, callback: Callable[[StepResult], None]) -> None:
        """Register a callback for step completion."""
        self._step_callbacks.append(callback)
