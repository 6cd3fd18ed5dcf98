"""
expectations - turn-taking for dialogue agents driven by expectation trees.

An agent keeps an arrangement of expected dialogue events. Each step it
perceives what happened, advances the arrangement, selects a move the
arrangement expects from it, and votes on whether now is the time to
realize that move.

Main entry points:
- AgencySystem: the agent's step loop
- ArrangementBuilder: builds expectation trees
- ObserverAPI: read-only inspection

Example usage:
    from expectations import AgencySystem, ModuleBundle

    system = AgencySystem(state, modules)
    result = system.step()
"""

from .system import AgencySystem
from .runtime import ModuleBundle, StepResult, PhaseError, ProtocolViolation
from .arrangement import ArrangementBuilder
from .observer import ObserverAPI
from .config import AgencySettings
from .logging_config import setup_logging

__all__ = [
    "AgencySystem",
    "ModuleBundle",
    "StepResult",
    "PhaseError",
    "ProtocolViolation",
    "ArrangementBuilder",
    "ObserverAPI",
    "AgencySettings",
    "setup_logging",
]
