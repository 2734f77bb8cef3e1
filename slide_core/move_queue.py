from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional

from .scheduler import Scheduler, TimerHandle
from .tile import Direction

logger = logging.getLogger(__name__)

Completion = Callable[[bool], None]


@dataclass(frozen=True)
class MoveCommand:
    direction: Direction
    on_completion: Optional[Completion] = None


class MoveQueue:
    """
    Serializes move requests so that at most one effective move is applied
    per pacing interval. Moves that change nothing complete immediately and
    the next command runs without waiting.

    States: Idle (no timer pending) and Scheduled (a processing cycle will
    run once the delay elapses). Requests made while Scheduled just wait.
    """

    def __init__(
        self,
        perform: Callable[[Direction], bool],
        scheduler: Scheduler,
        max_commands: int = 100,
        delay: float = 0.3,
    ) -> None:
        self._perform = perform
        self._scheduler = scheduler
        self.max_commands = max_commands
        self.delay = delay
        self._commands: Deque[MoveCommand] = deque()
        self._scheduled = False
        self._running = False
        self._timer: Optional[TimerHandle] = None

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def is_scheduled(self) -> bool:
        return self._scheduled

    def enqueue(self, direction: Direction, on_completion: Optional[Completion] = None) -> bool:
        """Queues a move; False if it was dropped because the queue is full."""
        if len(self._commands) >= self.max_commands:
            logger.debug("queue full (%d), dropping %s", len(self._commands), direction.value)
            return False
        self._commands.append(MoveCommand(direction, on_completion))
        if not self._scheduled and not self._running:
            self._process()
        return True

    def clear(self) -> None:
        """Drops every waiting command and cancels the pacing timer; the queue is Idle again."""
        self._commands.clear()
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._scheduled = False

    def _fire(self) -> None:
        self._timer = None
        self._scheduled = False
        self._process()

    def _process(self) -> None:
        changed = False
        self._running = True
        try:
            while self._commands:
                command = self._commands.popleft()
                changed = self._perform(command.direction)
                if command.on_completion is not None:
                    command.on_completion(changed)
                if changed:
                    break
        finally:
            self._running = False
        if changed:
            self._scheduled = True
            self._timer = self._scheduler.schedule(self._fire, self.delay)
            logger.debug("next move in %.3fs, %d waiting", self.delay, len(self._commands))
