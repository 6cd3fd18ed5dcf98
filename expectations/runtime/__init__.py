"""
Runtime layer - the step pipeline and its phases.

Each step runs five phases in a fixed order, threading an immutable
StepContext through them; the system commits the resulting bookkeeping
only when every phase succeeded.
"""

from .context import StepContext, StepResult
from .pipeline import (
    Phase,
    BasePhase,
    PhaseError,
    ProtocolViolation,
    PipelineMetrics,
    StepPipeline,
)
from .bundle import ModuleBundle
from .phases import (
    PerceivePhase,
    UpdateStatePhase,
    SelectMovePhase,
    TimeMovePhase,
    RealizePhase,
)

__all__ = [
    # Context
    "StepContext",
    "StepResult",
    # Pipeline
    "Phase",
    "BasePhase",
    "PhaseError",
    "ProtocolViolation",
    "PipelineMetrics",
    "StepPipeline",
    # Modules
    "ModuleBundle",
    # Phases
    "PerceivePhase",
    "UpdateStatePhase",
    "SelectMovePhase",
    "TimeMovePhase",
    "RealizePhase",
]
