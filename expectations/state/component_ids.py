"""Well-known information state component ids."""

from expectations.domain import ComponentId


# SocialContext of the interaction the agent takes part in
SOCIAL_CONTEXT = ComponentId("expectations.state::SocialContext")

# Latest CurrentActivity report, written by the state update module
CURRENT_ACTIVITY = ComponentId("expectations.state::CurrentActivity")
