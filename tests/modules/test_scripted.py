"""Tests for expectations.modules.scripted module."""

import pytest

from expectations.domain import IDLE, CurrentActivity, RealizationStatus
from expectations.modules import (
    RecordingRealization,
    ScriptedCurrentActivity,
    ScriptedRecentActivity,
)


class TestRecordingRealization:
    """Tests for RecordingRealization."""

    def test_records_every_move(self, greet_bob):
        realization = RecordingRealization()

        realization.realize_move(IDLE)
        realization.realize_move(greet_bob)

        assert realization.realized == [
            (IDLE, RealizationStatus.COMPLETE),
            (greet_bob, RealizationStatus.COMPLETE),
        ]

    def test_scripted_statuses_then_default(self, greet_bob):
        """Test scripted statuses are used first, then the default."""
        realization = RecordingRealization([RealizationStatus.IN_PROGRESS])

        assert realization.realize_move(greet_bob) is RealizationStatus.IN_PROGRESS
        assert realization.realize_move(greet_bob) is RealizationStatus.COMPLETE

    def test_drain_completed_skips_idle_and_in_progress(self, greet_bob):
        realization = RecordingRealization([RealizationStatus.IN_PROGRESS])
        realization.realize_move(greet_bob)
        realization.realize_move(IDLE)
        realization.realize_move(greet_bob)

        assert realization.drain_completed() == [greet_bob]
        assert realization.drain_completed() == []


class TestScriptedRecentActivity:
    """Tests for ScriptedRecentActivity."""

    def test_one_batch_per_call(self, alice_greets, bob_greets):
        perception = ScriptedRecentActivity([(bob_greets,), (), (alice_greets,)])

        assert perception.perceive_activity().events == (bob_greets,)
        assert perception.perceive_activity().events == ()
        assert perception.perceive_activity().events == (alice_greets,)
        assert perception.perceive_activity().events == ()

    def test_echoes_completed_moves_first(self, greet_bob, alice_greets, bob_greets):
        """Test moves completed by the echoed realization come back as own events."""
        realization = RecordingRealization()
        perception = ScriptedRecentActivity([(bob_greets,)], echo=realization, self_id="alice")
        realization.realize_move(greet_bob)

        assert perception.perceive_activity().events == (alice_greets, bob_greets)

    def test_echo_requires_self_id(self):
        with pytest.raises(ValueError):
            ScriptedRecentActivity(echo=RecordingRealization())


class TestScriptedCurrentActivity:
    """Tests for ScriptedCurrentActivity."""

    def test_script_then_empty(self, bob_speaking):
        perception = ScriptedCurrentActivity([bob_speaking])

        assert perception.perceive_activity() == bob_speaking
        assert perception.perceive_activity() == CurrentActivity()
