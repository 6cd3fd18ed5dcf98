"""
Social rules - weighted, conditionally active votes.

A rule votes for its implication when its precondition holds and it
affects the agent being decided for. evaluate_for() tallies the votes of a
collection of rules and returns the winning implication.
"""

import logging
from typing import Callable, Generic, Hashable, Iterable, TypeVar

from expectations.logging_config import log_vote


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

Predicate = Callable[[], bool]
Indicator = Callable[[str], bool]


# =============================================================================
# Predicate / indicator helpers
# =============================================================================


def always() -> bool:
    return True


def never() -> bool:
    return False


def affects_all(agent_id: str) -> bool:
    return True


def affects_none(agent_id: str) -> bool:
    return False


def affects_only(*agent_ids: str) -> Indicator:
    """Indicator that is true for the given agents only."""
    targets = frozenset(agent_ids)

    def indicator(agent_id: str) -> bool:
        return agent_id in targets

    return indicator


# =============================================================================
# Rules
# =============================================================================


class SocialRule(Generic[T]):
    """An immutable weighted vote for one implication."""

    __slots__ = ("_precondition", "_affects", "_implication", "_weight")

    def __init__(
        self,
        precondition: Predicate,
        affects: Indicator,
        implication: T,
        weight: float = 1.0,
    ):
        """
        Initialize the rule.

        Args:
            precondition: Whether the rule currently applies at all
            affects: Whether the rule applies to a given agent
            implication: What the rule votes for
            weight: Strength of the vote (non-negative)
        """
        if precondition is None:
            raise TypeError("precondition must not be None")
        if affects is None:
            raise TypeError("affects must not be None")
        if weight < 0:
            raise ValueError(f"weight must be non-negative, got {weight}")
        object.__setattr__(self, "_precondition", precondition)
        object.__setattr__(self, "_affects", affects)
        object.__setattr__(self, "_implication", implication)
        object.__setattr__(self, "_weight", float(weight))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def implication(self) -> T:
        return self._implication

    @property
    def weight(self) -> float:
        return self._weight

    def is_relevant(self) -> bool:
        """Whether the rule's precondition currently holds."""
        return self._precondition()

    def is_affecting(self, agent_id: str) -> bool:
        """Whether the rule applies to the given agent."""
        return self._affects(agent_id)

    def __repr__(self) -> str:
        return f"SocialRule(implication={self._implication!r}, weight={self._weight})"


def evaluate_for(rules: Iterable[SocialRule[T]], agent_id: str) -> T | None:
    """
    Tally the rules that are relevant and affect an agent.

    Weights are summed per implication. The implication with the highest
    total wins; on an exact tie the implication tallied later wins.

    Args:
        rules: Rules to evaluate
        agent_id: The agent the decision is for

    Returns:
        The winning implication, or None if no rule applies
    """
    if agent_id is None:
        raise TypeError("agent_id must not be None")
    if rules is None:
        raise TypeError("rules must not be None")

    ballot: dict[T, float] = {}
    for rule in rules:
        if not rule.is_relevant() or not rule.is_affecting(agent_id):
            continue
        ballot[rule.implication] = ballot.get(rule.implication, 0.0) + rule.weight

    if not ballot:
        log_vote(logger, agent_id, None, "no applicable rules")
        return None

    winner: T | None = None
    best = float("-inf")
    for implication, total in ballot.items():
        if total >= best:
            winner, best = implication, total

    tally = ", ".join(f"{k}={v:g}" for k, v in ballot.items())
    log_vote(logger, agent_id, str(winner), f"ballot=[{tally}]")
    return winner
