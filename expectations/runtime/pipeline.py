"""
StepPipeline - runs the phases of one step over a StepContext.

Every phase takes the context produced by the previous one and returns a
new context. The first failing phase aborts the step: its exception is
wrapped in PhaseError and nothing after it runs.
"""

import logging
import re
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from expectations.logging_config import log_phase

from .context import StepContext, StepResult


logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def phase_name_for(cls: type) -> str:
    """TimeMovePhase -> time_move"""
    name = cls.__name__
    if name.endswith("Phase"):
        name = name[: -len("Phase")]
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@runtime_checkable
class Phase(Protocol):
    """Anything with a name that maps a StepContext to a new StepContext."""

    @property
    def name(self) -> str:
        ...

    def execute(self, ctx: StepContext) -> StepContext:
        ...


@dataclass
class PhaseError(Exception):
    """A phase raised; the step was aborted."""

    phase_name: str
    original_error: Exception

    def __str__(self) -> str:
        return f"Phase '{self.phase_name}' failed: {self.original_error}"


class ProtocolViolation(RuntimeError):
    """Raised when a module breaks the step-loop contract."""

    pass


class BasePhase(ABC):
    """
    Phase with a derived name, start/complete logging and PhaseError wrapping.

    Subclasses implement _execute().
    """

    @property
    def name(self) -> str:
        return phase_name_for(type(self))

    @abstractmethod
    def _execute(self, ctx: StepContext) -> StepContext:
        ...

    def execute(self, ctx: StepContext) -> StepContext:
        log_phase(logger, ctx.step, self.name, "starting")
        started = time.perf_counter()
        try:
            updated = self._execute(ctx)
        except Exception as e:
            logger.error(f"Phase {self.name} failed at step {ctx.step}: {e}", exc_info=True)
            raise PhaseError(phase_name=self.name, original_error=e) from e
        log_phase(
            logger, ctx.step, self.name, "complete", (time.perf_counter() - started) * 1000
        )
        return updated


@dataclass
class PipelineMetrics:
    """Timings and counters of the last executed step."""

    total_duration_ms: float = 0.0
    phase_durations_ms: dict[str, float] = field(default_factory=dict)
    events_perceived: int = 0
    realized_move: bool = False


class StepPipeline:
    """
    Ordered phases plus the metrics of the last run.

    Usage:
        pipeline = StepPipeline([
            PerceivePhase(modules),
            UpdateStatePhase(modules, state),
            SelectMovePhase(modules),
            TimeMovePhase(modules),
            RealizePhase(modules),
        ])
        result = pipeline.execute(StepContext(step=1, system_activity=activity))
    """

    def __init__(self, phases: list[Phase]):
        self.phases = phases
        self._metrics: PipelineMetrics | None = None

    def execute(self, ctx: StepContext) -> StepResult:
        """
        Run every phase in order.

        Raises:
            PhaseError: From the first phase that fails
        """
        metrics = PipelineMetrics()
        self._metrics = metrics
        step_started = time.perf_counter()

        for phase in self.phases:
            phase_started = time.perf_counter()
            ctx = phase.execute(ctx)
            metrics.phase_durations_ms[phase.name] = (time.perf_counter() - phase_started) * 1000

        metrics.total_duration_ms = (time.perf_counter() - step_started) * 1000
        if ctx.recent_activity is not None:
            metrics.events_perceived = len(ctx.recent_activity.events)
        metrics.realized_move = ctx.is_active

        logger.info(
            f"Step {ctx.step} complete | {metrics.total_duration_ms:.1f}ms | "
            f"target={ctx.target_move} | actual={ctx.actual_move} | "
            f"events={metrics.events_perceived}"
        )
        return StepResult.from_context(ctx)

    def get_metrics(self) -> PipelineMetrics | None:
        """Metrics of the last execute() call, if any."""
        return self._metrics

    def get_phase(self, name: str) -> Phase | None:
        """Look a phase up by name."""
        return next((phase for phase in self.phases if phase.name == name), None)
