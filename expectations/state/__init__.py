"""State layer - information state, well-known components and social context."""

from .component_ids import SOCIAL_CONTEXT, CURRENT_ACTIVITY
from .information_state import (
    InformationState,
    StateAccessor,
    StateMutator,
    StateError,
    StateKeyError,
    StateTypeError,
    BuilderStateError,
)
from .social_context import SocialContext

__all__ = [
    "SOCIAL_CONTEXT",
    "CURRENT_ACTIVITY",
    "InformationState",
    "StateAccessor",
    "StateMutator",
    "StateError",
    "StateKeyError",
    "StateTypeError",
    "BuilderStateError",
    "SocialContext",
]
