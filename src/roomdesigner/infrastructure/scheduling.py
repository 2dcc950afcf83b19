"""Concrete timing primitives for driving layout sessions.

- ManualScheduler: deterministic clock advanced explicitly. Used by the
  CLI to simulate an animation and by tests.
- AsyncioScheduler: real-time frames and delays on an asyncio loop.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from typing import Callable

from roomdesigner.contracts.protocols import FrameCallback

logger = logging.getLogger(__name__)

DEFAULT_FRAME_MS = 1000.0 / 60.0

__all__ = ["AsyncioScheduler", "DEFAULT_FRAME_MS", "ManualScheduler"]


class ManualScheduler:
    """Deterministic scheduler with a manually advanced clock.

    Frame callbacks queue until the next ``run_frame``; delayed callbacks
    fire when ``advance`` moves the clock past their due time.

    Example:
        ```python
        scheduler = ManualScheduler()
        session = LayoutSession(room, footprint, scheduler=scheduler)
        session.rotate(RotationDirection.CLOCKWISE)
        frames = scheduler.run_until_idle()
        ```
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._frames: list[FrameCallback] = []
        self._delayed: list[tuple[float, int, Callable[[], None]]] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        return self._now

    def request_frame(self, callback: FrameCallback) -> None:
        self._frames.append(callback)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        due = self._now + max(delay_ms, 0.0)
        heapq.heappush(self._delayed, (due, next(self._sequence), callback))

    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    @property
    def pending_delays(self) -> int:
        return len(self._delayed)

    @property
    def is_idle(self) -> bool:
        return not self._frames and not self._delayed

    def advance(self, ms: float) -> None:
        """Move the clock forward, firing delayed callbacks that come due."""
        if ms < 0:
            raise ValueError("Cannot move the clock backwards")
        target = self._now + ms
        while self._delayed and self._delayed[0][0] <= target:
            due, _, callback = heapq.heappop(self._delayed)
            self._now = max(self._now, due)
            callback()
        self._now = target

    def run_frame(self, frame_ms: float = DEFAULT_FRAME_MS) -> int:
        """Advance by one frame and run the callbacks queued before it.

        Returns:
            Number of frame callbacks run.
        """
        self.advance(frame_ms)
        frames, self._frames = self._frames, []
        for callback in frames:
            callback(self._now)
        return len(frames)

    def run_until_idle(
        self, frame_ms: float = DEFAULT_FRAME_MS, max_frames: int = 10_000
    ) -> int:
        """Run frames until nothing is queued, including pending delays.

        Returns:
            Number of frames run.

        Raises:
            RuntimeError: If work is still queued after ``max_frames``.
        """
        count = 0
        while not self.is_idle:
            if count >= max_frames:
                raise RuntimeError(f"Scheduler still busy after {max_frames} frames")
            self.run_frame(frame_ms)
            count += 1
        return count


class AsyncioScheduler:
    """Real-time scheduler on an asyncio event loop.

    Frames are approximated with ``loop.call_later`` at a fixed interval.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        frame_ms: float = DEFAULT_FRAME_MS,
    ) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self.frame_ms = frame_ms
        self._pending: set[asyncio.TimerHandle] = set()

    def now(self) -> float:
        return self._loop.time() * 1000.0

    def request_frame(self, callback: FrameCallback) -> None:
        self._schedule(self.frame_ms, lambda: callback(self.now()))

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        self._schedule(delay_ms, callback)

    @property
    def is_idle(self) -> bool:
        return not self._pending

    async def wait_idle(self, poll_ms: float = 5.0) -> None:
        """Wait until every scheduled callback has run."""
        while self._pending:
            await asyncio.sleep(poll_ms / 1000.0)

    def _schedule(self, delay_ms: float, callback: Callable[[], None]) -> None:
        handle: asyncio.TimerHandle | None = None

        def _run() -> None:
            self._pending.discard(handle)
            callback()

        handle = self._loop.call_later(max(delay_ms, 0.0) / 1000.0, _run)
        self._pending.add(handle)
