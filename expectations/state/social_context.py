"""SocialContext - who the agent is and which interaction it takes part in."""

from pydantic import BaseModel, ConfigDict, field_validator

from expectations.arrangement import Node
from expectations.domain import AgentId


class SocialContext(BaseModel):
    """
    The agent's id and the root of the interaction's arrangement.

    Read-only for the lifetime of the interaction. To abandon an
    interaction, build a new context around a new arrangement.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    self_id: AgentId
    interaction: Node

    @field_validator("self_id")
    @classmethod
    def _self_id_not_blank(cls, value: AgentId) -> AgentId:
        if not value.strip():
            raise ValueError("self_id must not be blank")
        return value
