"""Tests for IndefiniteEvent and Conditional nodes."""

import pytest

from expectations.arrangement import Conditional, IndefiniteEvent, Resolution


class TestIndefiniteEvent:
    """Tests for IndefiniteEvent."""

    def test_matching_event_satisfies(self, alice_greets):
        """Test the expected event satisfies the node."""
        node = IndefiniteEvent("a", alice_greets)

        assert node.process(alice_greets) is Resolution.SATISFACTION

    def test_other_events_keep_pending(self, alice_greets, bob_greets, alice_asks):
        """Test any other event leaves the node pending, indefinitely."""
        node = IndefiniteEvent("a", alice_greets)

        for _ in range(3):
            assert node.process(bob_greets) is Resolution.PENDING
            assert node.process(alice_asks) is Resolution.PENDING

    def test_expected_events(self, alice_greets):
        """Test the node expects exactly its event while pending."""
        assert IndefiniteEvent("a", alice_greets).expected_events() == [alice_greets]

    def test_none_event_rejected(self):
        """Test a None event raises TypeError."""
        with pytest.raises(TypeError):
            IndefiniteEvent("a", None)  # type: ignore


class TestConditional:
    """Tests for Conditional."""

    def test_mirrors_body_while_condition_holds(self, alice_greets):
        """Test the conditional resolves with its body."""
        node = Conditional("c", IndefiniteEvent("a", alice_greets), lambda: True)

        assert node.expected_events() == [alice_greets]
        assert node.process(alice_greets) is Resolution.SATISFACTION

    def test_false_condition_blocks_body(self, alice_greets):
        """Test the body is neither processed nor queried while the condition is false."""
        body = IndefiniteEvent("a", alice_greets)
        node = Conditional("c", body, lambda: False)

        assert node.expected_events() == []
        assert node.process(alice_greets) is Resolution.PENDING
        assert body.is_pending
        assert node.scope_carrier_index is None

    def test_condition_reevaluated_each_time(self, alice_greets):
        """Test the condition is read on every call."""
        gate = {"open": False}
        node = Conditional("c", IndefiniteEvent("a", alice_greets), lambda: gate["open"])

        assert node.process(alice_greets) is Resolution.PENDING
        gate["open"] = True
        assert node.scope_carrier_index == 0
        assert node.process(alice_greets) is Resolution.SATISFACTION

    def test_body_failure_propagates(self, make_tripwire, bob_greets):
        """Test a failing body fails the conditional."""
        node = Conditional("c", make_tripwire("t", fail_on=bob_greets), lambda: True)

        assert node.process(bob_greets) is Resolution.FAILURE

    def test_none_arguments_rejected(self, alice_greets):
        """Test None body or condition raises TypeError."""
        with pytest.raises(TypeError):
            Conditional("c", None, lambda: True)  # type: ignore
        with pytest.raises(TypeError):
            Conditional("c", IndefiniteEvent("a", alice_greets), None)  # type: ignore
