"""Tests for expectations.runtime.context module."""

import pytest
from pydantic import ValidationError

from expectations.domain import IDLE, RealizationStatus, RecentActivity
from expectations.runtime import StepContext, StepResult


class TestStepContext:
    """Tests for StepContext transformations."""

    def test_defaults(self, step_context: StepContext):
        assert step_context.step == 1
        assert step_context.recent_activity is None
        assert step_context.target_move is None
        assert step_context.is_active is False

    def test_with_methods_return_new_context(self, step_context: StepContext, greet_bob):
        """Test transformations leave the original untouched."""
        updated = step_context.with_target_move(greet_bob).with_is_active(True)

        assert step_context.target_move is None
        assert updated.target_move == greet_bob
        assert updated.is_active

    def test_immutability(self, step_context: StepContext):
        with pytest.raises(ValidationError):
            step_context.step = 2  # type: ignore

    def test_complete_realization_bookkeeping(self, step_context: StepContext, greet_bob):
        """Test a completed move becomes recent and the agent turns passive."""
        ctx = (
            step_context.with_target_move(greet_bob)
            .with_is_active(True)
            .with_realization(greet_bob, RealizationStatus.COMPLETE)
        )

        activity = ctx.next_system_activity()

        assert activity.recent_move == greet_bob
        assert activity.target_move == greet_bob
        assert activity.is_active is False

    def test_in_progress_realization_bookkeeping(self, step_context: StepContext, greet_bob):
        """Test a move in progress leaves no recent move and keeps the agent active."""
        ctx = (
            step_context.with_target_move(greet_bob)
            .with_is_active(True)
            .with_realization(greet_bob, RealizationStatus.IN_PROGRESS)
        )

        activity = ctx.next_system_activity()

        assert activity.recent_move is None
        assert activity.is_active is True


class TestStepResult:
    """Tests for StepResult.from_context."""

    def test_from_context(self, step_context: StepContext, floor_free):
        ctx = (
            step_context.with_perception(RecentActivity(), floor_free)
            .with_target_move(IDLE)
            .with_is_active(False)
            .with_realization(IDLE, RealizationStatus.COMPLETE)
        )

        result = StepResult.from_context(ctx)

        assert result.step == 1
        assert result.actual_move == IDLE
        assert result.system_activity.recent_move == IDLE

    def test_incomplete_context_rejected(self, step_context: StepContext):
        """Test a context that skipped phases cannot become a result."""
        with pytest.raises(ValidationError):
            StepResult.from_context(step_context)
