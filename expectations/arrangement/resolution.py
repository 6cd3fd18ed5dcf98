from enum import Enum


class Resolution(Enum):
    """Outcome of an arrangement node. PENDING is initial, the others are terminal."""
    PENDING = "pending"
    FAILURE = "failure"
    SATISFACTION = "satisfaction"

    @property
    def is_terminal(self) -> bool:
        return self is not Resolution.PENDING
