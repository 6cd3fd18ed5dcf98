"""
Dialogue moves and dialogue events.

A move is a communicated meaning, independent of its surface form: a type
tag, the set of agents it is addressed to, and an optional payload. An
event records that some agent has completed realizing a move.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import AgentId


IDLE_MOVE_TYPE = "idle"


class DialogueMove(BaseModel):
    """A communicative act, compared structurally on all fields."""
    model_config = ConfigDict(frozen=True)

    type: str
    addressees: frozenset[AgentId] = Field(default_factory=frozenset)
    properties: Any = None

    @field_validator("type")
    @classmethod
    def _type_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("move type must not be blank")
        return value

    @field_validator("addressees")
    @classmethod
    def _addressees_not_blank(cls, value: frozenset[AgentId]) -> frozenset[AgentId]:
        if any(not agent_id.strip() for agent_id in value):
            raise ValueError("addressee ids must not be blank")
        return value

    def __str__(self) -> str:
        addressees = ", ".join(sorted(self.addressees))
        if self.properties is None:
            return f"{self.type}[{addressees}]"
        return f"{self.type}[{addressees}]({self.properties!r})"


class DialogueEvent(BaseModel):
    """An agent completed the realization of a move."""
    model_config = ConfigDict(frozen=True)

    source_id: AgentId
    move: DialogueMove

    @field_validator("source_id")
    @classmethod
    def _source_not_blank(cls, value: AgentId) -> AgentId:
        if not value.strip():
            raise ValueError("source id must not be blank")
        return value

    def __str__(self) -> str:
        return f"{self.source_id}:{self.move}"


# The move that means "do nothing"
IDLE = DialogueMove(type=IDLE_MOVE_TYPE)


def create_move(
    move_type: str,
    *addressees: str,
    properties: Any = None,
) -> DialogueMove:
    """
    Build a move from positional addressee ids.

    Args:
        move_type: The move's type tag (non-blank)
        *addressees: Ids of the agents the move is addressed to
        properties: Optional payload

    Returns:
        The new DialogueMove
    """
    return DialogueMove(
        type=move_type,
        addressees=frozenset(AgentId(a) for a in addressees),
        properties=properties,
    )


def is_idle(move: DialogueMove) -> bool:
    """Whether a move is the idle move."""
    return move == IDLE


def get_addressee(move: DialogueMove) -> AgentId | None:
    """Get the move's addressee if it has exactly one."""
    if len(move.addressees) == 1:
        return next(iter(move.addressees))
    return None
