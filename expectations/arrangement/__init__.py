"""
Arrangement layer - expectation trees over dialogue events.

Atomic node:
- IndefiniteEvent: waits for one specific event

Composite nodes:
- Conditional: body gated by a condition
- Conjunction: all children, any order
- Disjunction: any one child
- Divergence: alternatives, committed to once one starts
- Repetition: body repeated indefinitely
- Sequence: children in order
"""

from .resolution import Resolution
from .node import Node, NodeCallback, add_expected
from .indefinite_event import IndefiniteEvent
from .conditional import Conditional, Condition
from .conjunction import Conjunction
from .disjunction import Disjunction
from .divergence import Divergence
from .repetition import Repetition
from .sequence import Sequence
from .builder import ArrangementBuilder, move, dialogue_event

__all__ = [
    "Resolution",
    "Node",
    "NodeCallback",
    "add_expected",
    # Atomics
    "IndefiniteEvent",
    # Composites
    "Conditional",
    "Condition",
    "Conjunction",
    "Disjunction",
    "Divergence",
    "Repetition",
    "Sequence",
    # Builder
    "ArrangementBuilder",
    "move",
    "dialogue_event",
]
