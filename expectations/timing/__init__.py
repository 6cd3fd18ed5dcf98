"""Timing layer - social rules and interruption voting."""

from .social_rule import (
    SocialRule,
    Predicate,
    Indicator,
    evaluate_for,
    always,
    never,
    affects_all,
    affects_none,
    affects_only,
)
from .interruption import (
    InterruptionInitiation,
    InterruptionResponse,
    InterruptionRules,
    InitiationRule,
    ResponseRule,
    CONFLICT_INDIFFERENCE,
    CONFLICT_AVOIDANCE,
)

__all__ = [
    # Rules
    "SocialRule",
    "Predicate",
    "Indicator",
    "evaluate_for",
    "always",
    "never",
    "affects_all",
    "affects_none",
    "affects_only",
    # Interruption
    "InterruptionInitiation",
    "InterruptionResponse",
    "InterruptionRules",
    "InitiationRule",
    "ResponseRule",
    "CONFLICT_INDIFFERENCE",
    "CONFLICT_AVOIDANCE",
]
