"""Observer layer - read-only inspection for logs, demos and tests."""

from .api import ObserverAPI
from .snapshots import NodeSnapshot, SystemSnapshot

__all__ = [
    "ObserverAPI",
    "NodeSnapshot",
    "SystemSnapshot",
]
