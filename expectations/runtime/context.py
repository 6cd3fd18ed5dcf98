"""
StepContext - immutable context passed through step phases.

The context carries the agent's bookkeeping from the previous step plus
everything the phases produce along the way. Each phase returns a new
context with its updates applied via the with_* methods.

The system commits the bookkeeping only after every phase has completed.
"""

from pydantic import BaseModel, ConfigDict

from expectations.domain import (
    CurrentActivity,
    DialogueMove,
    RealizationStatus,
    RecentActivity,
    SystemActivity,
)


class StepContext(BaseModel):
    """Immutable context passed through step phases."""

    model_config = ConfigDict(frozen=True)

    # --- Step identity ---
    step: int

    # --- Bookkeeping from the previous step ---
    system_activity: SystemActivity

    # --- Perception ---
    recent_activity: RecentActivity | None = None
    current_activity: CurrentActivity | None = None

    # --- Decision ---
    target_move: DialogueMove | None = None
    is_active: bool = False

    # --- Realization ---
    actual_move: DialogueMove | None = None
    realization_status: RealizationStatus | None = None

    # ==========================================================================
    # Transformation methods (return new context)
    # ==========================================================================

    def with_perception(
        self, recent_activity: RecentActivity, current_activity: CurrentActivity
    ) -> "StepContext":
        """Record both perception reports."""
        return self.model_copy(
            update={"recent_activity": recent_activity, "current_activity": current_activity}
        )

    def with_target_move(self, move: DialogueMove) -> "StepContext":
        """Set the move selected for this step."""
        return self.model_copy(update={"target_move": move})

    def with_is_active(self, is_active: bool) -> "StepContext":
        """Set whether the agent is realizing its target this step."""
        return self.model_copy(update={"is_active": is_active})

    def with_realization(
        self, actual_move: DialogueMove, status: RealizationStatus
    ) -> "StepContext":
        """Record what was handed to realization and how it went."""
        return self.model_copy(
            update={"actual_move": actual_move, "realization_status": status}
        )

    # ==========================================================================
    # Query helpers
    # ==========================================================================

    @property
    def recent_move(self) -> DialogueMove | None:
        """The move to remember as recent once this step completes."""
        if self.realization_status is RealizationStatus.COMPLETE:
            return self.actual_move
        return None

    def next_system_activity(self) -> SystemActivity:
        """Bookkeeping to carry into the next step."""
        if self.realization_status is RealizationStatus.COMPLETE:
            return SystemActivity(
                recent_move=self.actual_move,
                target_move=self.target_move,
                is_active=False,
            )
        return SystemActivity(
            recent_move=None,
            target_move=self.target_move,
            is_active=self.is_active,
        )


class StepResult(BaseModel):
    """
    Result of executing a step.

    This is what the system receives after pipeline execution.
    """

    model_config = ConfigDict(frozen=True)

    step: int
    recent_activity: RecentActivity
    current_activity: CurrentActivity
    target_move: DialogueMove
    is_active: bool
    actual_move: DialogueMove
    realization_status: RealizationStatus
    system_activity: SystemActivity

    @classmethod
    def from_context(cls, ctx: StepContext) -> "StepResult":
        """Create a StepResult from a completed StepContext."""
        return cls(
            step=ctx.step,
            recent_activity=ctx.recent_activity,
            current_activity=ctx.current_activity,
            target_move=ctx.target_move,
            is_active=ctx.is_active,
            actual_move=ctx.actual_move,
            realization_status=ctx.realization_status,
            system_activity=ctx.next_system_activity(),
        )
