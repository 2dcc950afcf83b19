"""Timing protocols for driving the rotation animation.

The engine never owns a timing primitive. Anything that can report the
current time and call back "before the next paint" or "after a delay"
(a UI frame callback, an asyncio loop, a manual test clock) can drive it
by implementing these protocols.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

FrameCallback = Callable[[float], None]
"""Called with the frame timestamp in milliseconds."""


@runtime_checkable
class Clock(Protocol):
    """Monotonic time source in milliseconds."""

    def now(self) -> float:
        """Return the current time in milliseconds."""
        ...


@runtime_checkable
class FrameScheduler(Protocol):
    """Per-frame callback mechanism.

    Example:
        ```python
        class Frames:
            def request_frame(self, callback: FrameCallback) -> None:
                window.requestAnimationFrame(callback)
        ```
    """

    def request_frame(self, callback: FrameCallback) -> None:
        """Invoke ``callback`` once before the next paint."""
        ...


@runtime_checkable
class DelayScheduler(Protocol):
    """One-shot delayed callbacks."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        """Invoke ``callback`` once after ``delay_ms`` milliseconds."""
        ...


@runtime_checkable
class Scheduler(Clock, FrameScheduler, DelayScheduler, Protocol):
    """Combined timing surface used by a layout session."""
