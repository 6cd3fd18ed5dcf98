"""
Step phases, in execution order:

1. PerceivePhase - recent then current activity
2. UpdateStatePhase - fold perception into the information state
3. SelectMovePhase - choose the target move
4. TimeMovePhase - decide whether to realize it now
5. RealizePhase - realize the actual move
"""

from .perceive import PerceivePhase
from .update_state import UpdateStatePhase
from .select_move import SelectMovePhase
from .time_move import TimeMovePhase
from .realize import RealizePhase

__all__ = [
    "PerceivePhase",
    "UpdateStatePhase",
    "SelectMovePhase",
    "TimeMovePhase",
    "RealizePhase",
]
