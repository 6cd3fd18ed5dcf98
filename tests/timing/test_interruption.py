"""Tests for expectations.timing.interruption module."""

import pytest

from expectations.timing import (
    CONFLICT_AVOIDANCE,
    CONFLICT_INDIFFERENCE,
    InterruptionInitiation,
    InterruptionResponse,
    InterruptionRules,
    SocialRule,
    affects_all,
    always,
    evaluate_for,
)


class TestInterruptionRules:
    """Tests for InterruptionRules."""

    def test_defaults_empty(self):
        rules = InterruptionRules()

        assert rules.initiation == ()
        assert rules.response == ()

    def test_sequences_frozen_to_tuples(self):
        """Test rule lists are copied into tuples."""
        initiation = [SocialRule(always, affects_all, InterruptionInitiation.INTERRUPT)]
        rules = InterruptionRules(initiation=initiation)
        initiation.clear()

        assert len(rules.initiation) == 1

    def test_none_rejected(self):
        with pytest.raises(TypeError):
            InterruptionRules(initiation=None)  # type: ignore


class TestPresets:
    """Tests for the conflict presets."""

    def test_conflict_avoidance(self):
        """Test avoidance never interrupts and always surrenders."""
        assert evaluate_for(CONFLICT_AVOIDANCE.initiation, "alice") is InterruptionInitiation.AVOID
        assert evaluate_for(CONFLICT_AVOIDANCE.response, "alice") is InterruptionResponse.SURRENDER

    def test_conflict_indifference(self):
        """Test indifference always interrupts and never surrenders."""
        assert (
            evaluate_for(CONFLICT_INDIFFERENCE.initiation, "alice")
            is InterruptionInitiation.INTERRUPT
        )
        assert evaluate_for(CONFLICT_INDIFFERENCE.response, "alice") is InterruptionResponse.IGNORE


class TestInterruptionVotes:
    """Tests for weighted interruption votes."""

    @pytest.mark.parametrize("reverse", [False, True])
    def test_heavier_interrupt_wins_in_any_order(self, reverse):
        """Test 2.0 for INTERRUPT beats 1.0 for AVOID whatever the listing order."""
        rules = [
            SocialRule(always, affects_all, InterruptionInitiation.AVOID, weight=1.0),
            SocialRule(always, affects_all, InterruptionInitiation.INTERRUPT, weight=2.0),
        ]
        if reverse:
            rules.reverse()

        assert evaluate_for(rules, "alice") is InterruptionInitiation.INTERRUPT

    def test_equal_weights_later_listed_wins(self):
        rules = [
            SocialRule(always, affects_all, InterruptionResponse.SURRENDER, weight=1.0),
            SocialRule(always, affects_all, InterruptionResponse.IGNORE, weight=1.0),
        ]

        assert evaluate_for(rules, "alice") is InterruptionResponse.IGNORE
