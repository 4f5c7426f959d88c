"""
Virtual-clock task queue for the engine's delayed continuations.

Roll reveals, turn passes and AI pacing are all scheduled here instead of
on real timers. The host decides how time flows: tests call ``advance``,
the simulation script can sleep between tasks.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from loguru import logger


@dataclass(order=True, slots=True)
class ScheduledTask:
    due: float
    seq: int
    epoch: int = field(compare=False)
    callback: Callable[..., Any] = field(compare=False, repr=False)
    args: tuple = field(compare=False, default=(), repr=False)
    label: str = field(compare=False, default="")
    cancelled: bool = field(compare=False, default=False)


@dataclass(slots=True)
class TurnScheduler:
    now: float = 0.0
    epoch: int = 0
    _queue: List[ScheduledTask] = field(default_factory=list, repr=False)
    _counter: itertools.count = field(default_factory=itertools.count, repr=False)

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any, label: str = ""
    ) -> ScheduledTask:
        if delay < 0:
            raise ValueError("delay must be non-negative")
        task = ScheduledTask(
            due=self.now + delay,
            seq=next(self._counter),
            epoch=self.epoch,
            callback=callback,
            args=args,
            label=label or getattr(callback, "__name__", "task"),
        )
        heapq.heappush(self._queue, task)
        return task

    def cancel(self, task: Optional[ScheduledTask]) -> None:
        if task is not None:
            task.cancelled = True

    def invalidate(self) -> None:
        """Drop every queued task; anything created before this call never runs."""
        self.epoch += 1
        dropped = sum(1 for t in self._queue if not t.cancelled)
        self._queue.clear()
        if dropped:
            logger.debug(f"Scheduler epoch {self.epoch}: dropped {dropped} stale task(s)")

    @property
    def pending(self) -> int:
        return sum(1 for t in self._queue if self._is_live(t))

    def next_due(self) -> Optional[float]:
        self._discard_dead()
        return self._queue[0].due if self._queue else None

    def _is_live(self, task: ScheduledTask) -> bool:
        return not task.cancelled and task.epoch == self.epoch

    def _discard_dead(self) -> None:
        while self._queue and not self._is_live(self._queue[0]):
            heapq.heappop(self._queue)

    def run_next(self) -> bool:
        """Jump the clock to the next live task and run it."""
        self._discard_dead()
        if not self._queue:
            return False
        task = heapq.heappop(self._queue)
        self.now = max(self.now, task.due)
        task.callback(*task.args)
        return True

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every task that falls due."""
        deadline = self.now + seconds
        ran = 0
        while True:
            self._discard_dead()
            if not self._queue or self._queue[0].due > deadline:
                break
            self.run_next()
            ran += 1
        self.now = deadline
        return ran

    def run_until_idle(self, limit: int = 10_000) -> int:
        ran = 0
        while ran < limit and self.run_next():
            ran += 1
        return ran
