"""
Scripted collaborators - perception and realization driven by fixed scripts.

Used by the demo runner and by tests to stand in for real perception and
realization of behavior. Each perception call consumes the next entry of
its script; exhausted scripts keep reporting nothing.
"""

import logging
from collections import deque
from typing import Iterable

from expectations.domain import (
    AgentId,
    CurrentActivity,
    DialogueEvent,
    DialogueMove,
    RealizationStatus,
    RecentActivity,
    is_idle,
)

from .base import ActionRealization, CurrentActivityPerception, RecentActivityPerception


logger = logging.getLogger(__name__)


class RecordingRealization(ActionRealization):
    """
    Records every move it is asked to realize.

    Returns the next status from `statuses`, then `default` once the script
    runs out. Completed non-idle moves are kept until drained, so that a
    ScriptedRecentActivity can echo them back as the agent's own events.
    """

    def __init__(
        self,
        statuses: Iterable[RealizationStatus] = (),
        default: RealizationStatus = RealizationStatus.COMPLETE,
    ):
        super().__init__()
        self._statuses = deque(statuses)
        self._default = default
        self.realized: list[tuple[DialogueMove, RealizationStatus]] = []
        self._completed: list[DialogueMove] = []

    def realize_move(self, move: DialogueMove) -> RealizationStatus:
        status = self._statuses.popleft() if self._statuses else self._default
        self.realized.append((move, status))
        if status is RealizationStatus.COMPLETE and not is_idle(move):
            self._completed.append(move)
            logger.debug(f"Realized {move}")
        return status

    def drain_completed(self) -> list[DialogueMove]:
        """Completed non-idle moves since the last drain."""
        completed, self._completed = self._completed, []
        return completed


class ScriptedRecentActivity(RecentActivityPerception):
    """
    Reports one scripted batch of events per step.

    When `echo` is given, moves it completed since the previous step are
    reported first, as events sourced by `self_id`.
    """

    def __init__(
        self,
        script: Iterable[Iterable[DialogueEvent]] = (),
        echo: RecordingRealization | None = None,
        self_id: str | None = None,
    ):
        super().__init__()
        if echo is not None and not self_id:
            raise ValueError("self_id is required to echo realized moves")
        self._script = deque(tuple(batch) for batch in script)
        self._echo = echo
        self._self_id = AgentId(self_id) if self_id else None

    def perceive_activity(self) -> RecentActivity:
        report = RecentActivity()
        if self._echo is not None:
            for move in self._echo.drain_completed():
                report = report.with_event(DialogueEvent(source_id=self._self_id, move=move))
        if self._script:
            report = report.with_events(self._script.popleft())
        return report


class ScriptedCurrentActivity(CurrentActivityPerception):
    """Reports one scripted CurrentActivity per step, then an empty floor."""

    def __init__(self, script: Iterable[CurrentActivity] = ()):
        super().__init__()
        self._script = deque(script)

    def perceive_activity(self) -> CurrentActivity:
        if self._script:
            return self._script.popleft()
        return CurrentActivity()
