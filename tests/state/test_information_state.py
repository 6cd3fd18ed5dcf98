"""Tests for expectations.state.information_state module."""

import pytest

from expectations.domain import CurrentActivity
from expectations.state import (
    CURRENT_ACTIVITY,
    SOCIAL_CONTEXT,
    BuilderStateError,
    InformationState,
    SocialContext,
    StateAccessor,
    StateKeyError,
    StateMutator,
    StateTypeError,
)


class TestBuilder:
    """Tests for InformationState.Builder."""

    def test_current_activity_seeded(self):
        """Test CURRENT_ACTIVITY exists even when not declared."""
        state = InformationState.Builder().build()

        assert CURRENT_ACTIVITY in state.component_ids
        assert state.current_activity == CurrentActivity()

    def test_duplicate_component_rejected(self):
        builder = InformationState.Builder().with_component("count", 1)

        with pytest.raises(ValueError):
            builder.with_component("count", 2)

    def test_blank_and_none_ids_rejected(self):
        with pytest.raises(ValueError):
            InformationState.Builder().with_component(" ", 1)
        with pytest.raises(TypeError):
            InformationState.Builder().with_component(None, 1)  # type: ignore

    def test_none_initial_value_rejected(self):
        with pytest.raises(TypeError):
            InformationState.Builder().with_component("x", None)

    def test_declared_type_must_match_value(self):
        with pytest.raises(StateTypeError):
            InformationState.Builder().with_component("x", "text", int)

    def test_builder_single_use(self):
        """Test a builder cannot be used after build()."""
        builder = InformationState.Builder()
        builder.build()

        assert builder.is_built
        with pytest.raises(BuilderStateError):
            builder.build()
        with pytest.raises(BuilderStateError):
            builder.with_component("x", 1)


class TestInformationState:
    """Tests for reading and writing components."""

    def test_get_and_set(self):
        state = InformationState.Builder().with_component("count", 1).build()

        state.set("count", 2)

        assert state.get("count", int) == 2

    def test_unknown_component(self):
        """Test unknown ids raise StateKeyError, which is a KeyError."""
        state = InformationState.Builder().build()

        with pytest.raises(StateKeyError):
            state.get("missing", int)
        with pytest.raises(KeyError):
            state.set("missing", 1)

    def test_get_with_wrong_type(self):
        """Test reading with another type raises StateTypeError, a TypeError."""
        state = InformationState.Builder().with_component("count", 1).build()

        with pytest.raises(StateTypeError):
            state.get("count", str)
        with pytest.raises(TypeError):
            state.get("count", float)

    def test_set_with_wrong_type(self):
        state = InformationState.Builder().with_component("count", 1).build()

        with pytest.raises(StateTypeError):
            state.set("count", "two")

    def test_set_none_rejected(self):
        state = InformationState.Builder().with_component("count", 1).build()

        with pytest.raises(TypeError):
            state.set("count", None)

    def test_current_activity_replaced(self, bob_speaking):
        state = InformationState.Builder().build()

        state.set(CURRENT_ACTIVITY, bob_speaking)

        assert state.current_activity == bob_speaking

    def test_implements_protocols(self):
        state = InformationState.Builder().build()

        assert isinstance(state, StateAccessor)
        assert isinstance(state, StateMutator)


class TestSocialContext:
    """Tests for SocialContext."""

    def test_stored_in_state(self, make_state, greeting_exchange):
        state = make_state(greeting_exchange)

        context = state.get(SOCIAL_CONTEXT, SocialContext)

        assert context.self_id == "alice"
        assert context.interaction is greeting_exchange

    def test_blank_self_id_rejected(self, greeting_exchange):
        with pytest.raises(ValueError):
            SocialContext(self_id=" ", interaction=greeting_exchange)

    def test_interaction_must_be_node(self):
        with pytest.raises(ValueError):
            SocialContext(self_id="alice", interaction="not a node")  # type: ignore
