"""Tests for expectations.modules.action_timing module."""

import pytest

from expectations.domain import CurrentActivity
from expectations.modules import ActionTimingModule
from expectations.state import CURRENT_ACTIVITY
from expectations.timing import (
    CONFLICT_AVOIDANCE,
    CONFLICT_INDIFFERENCE,
    InterruptionInitiation,
    InterruptionRules,
    SocialRule,
    affects_only,
    always,
)


@pytest.fixture
def make_timing(make_state, greeting_exchange):
    """Factory for an initialized timing module over the greeting exchange."""

    def factory(rules=None, activity: CurrentActivity | None = None) -> ActionTimingModule:
        state = make_state(greeting_exchange)
        if activity is not None:
            state.set(CURRENT_ACTIVITY, activity)
        module = ActionTimingModule(rules)
        module.initialize(state)
        return module

    return factory


class TestUncontestedFloor:
    """Tests for floors that need no vote."""

    def test_empty_floor_valid(self, make_timing, greet_bob):
        """Test a free floor is always a valid time, whatever the rules."""
        module = make_timing({"exchange": CONFLICT_AVOIDANCE})

        assert module.is_valid_move_now(greet_bob) is True

    def test_passive_only_floor_valid(self, make_timing, floor_free, greet_bob):
        assert make_timing(activity=floor_free).is_valid_move_now(greet_bob) is True

    def test_alone_active_valid(self, make_timing, greet_bob):
        """Test holding the floor alone is a valid time."""
        activity = CurrentActivity(active_ids=frozenset({"alice"}))

        assert make_timing(activity=activity).is_valid_move_now(greet_bob) is True


class TestInitiationVote:
    """Tests for the vote on interrupting someone else."""

    def test_defaults_to_conflict_avoidance(self, make_timing, bob_speaking, greet_bob):
        """Test no attached rules means never interrupting."""
        assert make_timing(activity=bob_speaking).is_valid_move_now(greet_bob) is False

    def test_indifference_interrupts(self, make_timing, bob_speaking, greet_bob):
        module = make_timing({"exchange": CONFLICT_INDIFFERENCE}, bob_speaking)

        assert module.is_valid_move_now(greet_bob) is True

    def test_rules_on_out_of_scope_node_ignored(self, make_timing, bob_speaking, greet_bob):
        """Test rules attached to nodes off the scope chain do not vote."""
        module = make_timing({"bob-greets": CONFLICT_INDIFFERENCE}, bob_speaking)

        assert module.active_scope_ids() == ["exchange", "alice-greets"]
        assert module.is_valid_move_now(greet_bob) is False

    def test_votes_from_whole_chain_are_summed(self, make_timing, bob_speaking, greet_bob):
        """Test votes attached at different depths are tallied together."""
        interrupt = InterruptionRules(
            initiation=[SocialRule(always, affects_only("alice"), InterruptionInitiation.INTERRUPT, 2.0)]
        )
        module = make_timing(
            {"exchange": CONFLICT_AVOIDANCE, "alice-greets": interrupt}, bob_speaking
        )

        assert module.is_valid_move_now(greet_bob) is True

    def test_rules_not_affecting_self_fall_back(self, make_timing, bob_speaking, greet_bob):
        """Test rules for other agents leave no vote, which means waiting."""
        others = InterruptionRules(
            initiation=[SocialRule(always, affects_only("bob"), InterruptionInitiation.INTERRUPT)]
        )

        assert make_timing({"exchange": others}, bob_speaking).is_valid_move_now(greet_bob) is False


class TestResponseVote:
    """Tests for the vote on continuing while someone else starts."""

    def test_defaults_to_surrender(self, make_timing, both_speaking, greet_bob):
        assert make_timing(activity=both_speaking).is_valid_move_now(greet_bob) is False

    def test_indifference_ignores(self, make_timing, both_speaking, greet_bob):
        module = make_timing({"exchange": CONFLICT_INDIFFERENCE}, both_speaking)

        assert module.is_valid_move_now(greet_bob) is True


class TestEdgeCases:
    """Tests for resolved interactions and bad arguments."""

    def test_resolved_interaction_never_valid(
        self, make_timing, greeting_exchange, alice_greets, bob_greets, greet_bob
    ):
        module = make_timing()
        greeting_exchange.process(alice_greets)
        greeting_exchange.process(bob_greets)

        assert module.is_valid_move_now(greet_bob) is False

    def test_none_move_rejected(self, make_timing):
        with pytest.raises(TypeError):
            make_timing().is_valid_move_now(None)  # type: ignore

    def test_rules_accepted_as_pairs(self):
        module = ActionTimingModule([("exchange", CONFLICT_AVOIDANCE)])

        assert module.interruption_rules == {"exchange": CONFLICT_AVOIDANCE}
