"""Shared pytest fixtures for expectations tests."""

import pytest

from expectations.arrangement import ArrangementBuilder, Node, Resolution, dialogue_event
from expectations.domain import (
    IDLE,
    AgentId,
    CurrentActivity,
    DialogueEvent,
    DialogueMove,
    SystemActivity,
    create_move,
)
from expectations.runtime import ModuleBundle, StepContext
from expectations.state import SOCIAL_CONTEXT, InformationState, SocialContext


# =============================================================================
# Basic Types
# =============================================================================

@pytest.fixture
def alice() -> AgentId:
    """The agent under test."""
    return AgentId("alice")


@pytest.fixture
def bob() -> AgentId:
    """Alice's dialogue partner."""
    return AgentId("bob")


@pytest.fixture
def carol() -> AgentId:
    """A third party."""
    return AgentId("carol")


# =============================================================================
# Moves and Events
# =============================================================================

@pytest.fixture
def greet_bob() -> DialogueMove:
    """Alice's greeting, addressed to bob."""
    return create_move("greet", "bob")


@pytest.fixture
def alice_greets() -> DialogueEvent:
    return dialogue_event("greet", "alice", "bob")


@pytest.fixture
def bob_greets() -> DialogueEvent:
    return dialogue_event("greet", "bob", "alice")


@pytest.fixture
def alice_asks() -> DialogueEvent:
    return dialogue_event("ask", "alice", "bob", properties="how are you?")


@pytest.fixture
def bob_answers() -> DialogueEvent:
    return dialogue_event("answer", "bob", "alice")


@pytest.fixture
def bob_leaves() -> DialogueEvent:
    return dialogue_event("farewell", "bob", "alice")


# =============================================================================
# Arrangements
# =============================================================================

@pytest.fixture
def builder() -> ArrangementBuilder:
    return ArrangementBuilder()


@pytest.fixture
def greeting_exchange(
    builder: ArrangementBuilder,
    alice_greets: DialogueEvent,
    bob_greets: DialogueEvent,
) -> Node:
    """alice greets bob, then bob greets alice."""
    return builder.sequence(
        "exchange",
        builder.event(alice_greets, node_id="alice-greets"),
        builder.event(bob_greets, node_id="bob-greets"),
    )


# =============================================================================
# State
# =============================================================================

@pytest.fixture
def make_state():
    """Factory for an information state around an interaction."""

    def factory(interaction: Node, self_id: str = "alice") -> InformationState:
        return (
            InformationState.Builder()
            .with_component(
                SOCIAL_CONTEXT, SocialContext(self_id=self_id, interaction=interaction)
            )
            .build()
        )

    return factory


@pytest.fixture
def floor_free() -> CurrentActivity:
    """Nobody is active."""
    return CurrentActivity(passive_ids=frozenset({AgentId("alice"), AgentId("bob")}))


@pytest.fixture
def bob_speaking() -> CurrentActivity:
    """Only bob is active."""
    return CurrentActivity(
        active_ids=frozenset({AgentId("bob")}),
        passive_ids=frozenset({AgentId("alice")}),
    )


@pytest.fixture
def both_speaking() -> CurrentActivity:
    """alice and bob are both active."""
    return CurrentActivity(active_ids=frozenset({AgentId("alice"), AgentId("bob")}))


# =============================================================================
# Runtime
# =============================================================================

@pytest.fixture
def initial_system_activity() -> SystemActivity:
    return SystemActivity(recent_move=IDLE, target_move=IDLE, is_active=False)


@pytest.fixture
def step_context(initial_system_activity: SystemActivity) -> StepContext:
    """A fresh StepContext for step 1."""
    return StepContext(step=1, system_activity=initial_system_activity)


@pytest.fixture
def stub_bundle() -> ModuleBundle:
    """A bundle made only of stubs."""
    return ModuleBundle.Builder().build()


# =============================================================================
# Fake Nodes
# =============================================================================

class TripwireNode(Node):
    """Fails on one event, is satisfied by another, ignores the rest."""

    def __init__(
        self,
        node_id: str,
        fail_on: DialogueEvent | None = None,
        satisfy_on: DialogueEvent | None = None,
    ):
        super().__init__(node_id)
        self.fail_on = fail_on
        self.satisfy_on = satisfy_on
        self.processed: list[DialogueEvent] = []

    def _process(self, event: DialogueEvent) -> Resolution:
        self.processed.append(event)
        if event == self.fail_on:
            return Resolution.FAILURE
        if event == self.satisfy_on:
            return Resolution.SATISFACTION
        return Resolution.PENDING

    def _collect_expected_events(self, result: list[DialogueEvent]) -> None:
        if self.satisfy_on is not None:
            result.append(self.satisfy_on)


@pytest.fixture
def make_tripwire():
    """Factory for TripwireNode fakes."""

    def factory(node_id: str, fail_on=None, satisfy_on=None) -> TripwireNode:
        return TripwireNode(node_id, fail_on=fail_on, satisfy_on=satisfy_on)

    return factory
