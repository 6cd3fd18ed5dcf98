"""Tests for expectations.modules.state_update module."""

import pytest

from expectations.domain import RecentActivity
from expectations.modules import ArrangementUpdate
from expectations.state import SOCIAL_CONTEXT, InformationState


@pytest.fixture
def update(make_state, greeting_exchange):
    """An initialized ArrangementUpdate and its state."""
    state = make_state(greeting_exchange)
    module = ArrangementUpdate()
    module.initialize(state)
    return module, state


class TestArrangementUpdate:
    """Tests for ArrangementUpdate.perform_update."""

    def test_stores_current_activity(self, update, bob_speaking, initial_system_activity):
        """Test the current activity report replaces the stored one."""
        module, state = update

        module.perform_update(RecentActivity(), bob_speaking, initial_system_activity, state)

        assert state.current_activity == bob_speaking

    def test_events_processed_in_order(
        self, update, greeting_exchange, alice_greets, bob_greets, floor_free, initial_system_activity
    ):
        """Test recent events advance the arrangement in perception order."""
        module, state = update
        recent = RecentActivity(events=(alice_greets, bob_greets))

        module.perform_update(recent, floor_free, initial_system_activity, state)

        assert greeting_exchange.is_satisfied

    def test_wrong_order_does_not_advance(
        self, update, greeting_exchange, alice_greets, bob_greets, floor_free, initial_system_activity
    ):
        module, state = update
        recent = RecentActivity(events=(bob_greets, alice_greets))

        module.perform_update(recent, floor_free, initial_system_activity, state)

        assert greeting_exchange.is_pending
        assert greeting_exchange.active_child_index == 1

    def test_requires_social_context(self):
        """Test setup fails without a social context component."""
        with pytest.raises(KeyError):
            ArrangementUpdate().initialize(InformationState.Builder().build())

    def test_none_reports_rejected(self, update, floor_free, initial_system_activity):
        module, state = update

        with pytest.raises(TypeError):
            module.perform_update(None, floor_free, initial_system_activity, state)  # type: ignore
