"""
Interruption rules - who may take or keep the floor when it is contested.

Initiation rules decide whether to start speaking over someone who holds
the floor. Response rules decide whether to give the floor up when someone
starts speaking over us.
"""

from enum import Enum
from typing import Iterable

from .social_rule import SocialRule, affects_all, always


class InterruptionInitiation(Enum):
    AVOID = "avoid"
    INTERRUPT = "interrupt"


class InterruptionResponse(Enum):
    IGNORE = "ignore"
    SURRENDER = "surrender"


InitiationRule = SocialRule[InterruptionInitiation]
ResponseRule = SocialRule[InterruptionResponse]


class InterruptionRules:
    """Initiation and response votes, evaluated separately."""

    __slots__ = ("_initiation", "_response")

    def __init__(
        self,
        initiation: Iterable[InitiationRule] = (),
        response: Iterable[ResponseRule] = (),
    ):
        if initiation is None:
            raise TypeError("initiation must not be None")
        if response is None:
            raise TypeError("response must not be None")
        self._initiation: tuple[InitiationRule, ...] = tuple(initiation)
        self._response: tuple[ResponseRule, ...] = tuple(response)

    @property
    def initiation(self) -> tuple[InitiationRule, ...]:
        return self._initiation

    @property
    def response(self) -> tuple[ResponseRule, ...]:
        return self._response

    def __repr__(self) -> str:
        return f"InterruptionRules(initiation={list(self._initiation)}, response={list(self._response)})"


# Always interrupt, never surrender
CONFLICT_INDIFFERENCE = InterruptionRules(
    initiation=(
        SocialRule(always, affects_all, InterruptionInitiation.INTERRUPT, weight=1.0),
    ),
    response=(
        SocialRule(always, affects_all, InterruptionResponse.IGNORE, weight=1.0),
    ),
)

# Never interrupt, always surrender
CONFLICT_AVOIDANCE = InterruptionRules(
    initiation=(
        SocialRule(always, affects_all, InterruptionInitiation.AVOID, weight=1.0),
    ),
    response=(
        SocialRule(always, affects_all, InterruptionResponse.SURRENDER, weight=1.0),
    ),
)
