"""Identifier aliases shared across the package."""

from typing import NewType

# Participant in a dialogue (the agent itself or anyone it talks with)
AgentId = NewType("AgentId", str)

# Node of an expectation arrangement, unique within one arrangement
NodeId = NewType("NodeId", str)

# Key of a component inside an information state
ComponentId = NewType("ComponentId", str)
