"""Time-based rotation animation.

The animator is a two-state machine (IDLE -> ANIMATING -> IDLE) advanced
by ``tick(timestamp)``. Progress comes from elapsed wall-clock time, not
from the number of ticks, so any tick cadence yields the same curve.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from roomdesigner.contracts.protocols import Clock, FrameScheduler

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_DURATION_MS",
    "AnimatorPhase",
    "RotationAnimator",
    "ease_in_out_cosine",
]

DEFAULT_DURATION_MS = 300.0

ProgressCallback = Callable[[float], None]
CompleteCallback = Callable[[], None]


class AnimatorPhase(str, Enum):
    """Animator state."""

    IDLE = "idle"
    ANIMATING = "animating"


def ease_in_out_cosine(progress: float) -> float:
    """Smooth ease-in-out mapping [0, 1] onto [0, 1].

    Exact at both ends: 0 -> 0.0 and 1 -> 1.0.
    """
    return 0.5 - math.cos(progress * math.pi) / 2


def _clamp01(value: float) -> float:
    return max(0.0, min(value, 1.0))


class RotationAnimator:
    """Eased interpolation from a start angle to ``start + delta``.

    Each tick reports the current angle through the progress callback.
    When progress reaches 1 the final callback carries exactly
    ``start + delta`` and the completion callback fires once.

    Example:
        ```python
        animator = RotationAnimator()
        animator.start(0.0, 90.0, now=clock.now(),
                       on_progress=view.set_angle, on_complete=commit)
        while animator.tick(clock.now()):
            wait_for_next_frame()
        ```
    """

    def __init__(
        self,
        duration_ms: float = DEFAULT_DURATION_MS,
        easing: Callable[[float], float] = ease_in_out_cosine,
    ) -> None:
        if duration_ms <= 0:
            raise ValueError("Animation duration must be positive")
        self.duration_ms = duration_ms
        self._easing = easing
        self._phase = AnimatorPhase.IDLE
        self._start_time = 0.0
        self._start_angle = 0.0
        self._delta = 0.0
        self._current_angle = 0.0
        self._on_progress: ProgressCallback | None = None
        self._on_complete: CompleteCallback | None = None

    @property
    def phase(self) -> AnimatorPhase:
        return self._phase

    @property
    def is_animating(self) -> bool:
        return self._phase is AnimatorPhase.ANIMATING

    @property
    def current_angle(self) -> float:
        return self._current_angle

    def start(
        self,
        start_angle: float,
        delta: float,
        now: float,
        on_progress: ProgressCallback,
        on_complete: CompleteCallback,
    ) -> bool:
        """Enter ANIMATING.

        Returns:
            True if the animation started, False if one is already running.
            A running animation always runs to completion.
        """
        if self.is_animating:
            logger.debug("Animator busy, start request ignored")
            return False

        self._phase = AnimatorPhase.ANIMATING
        self._start_time = now
        self._start_angle = start_angle
        self._delta = delta
        self._current_angle = start_angle
        self._on_progress = on_progress
        self._on_complete = on_complete
        return True

    def progress_at(self, timestamp: float) -> float:
        """Linear progress in [0, 1] at ``timestamp``."""
        return _clamp01((timestamp - self._start_time) / self.duration_ms)

    def tick(self, timestamp: float) -> bool:
        """Advance the animation to ``timestamp``.

        Returns:
            True while more ticks are needed, False once IDLE.
        """
        if not self.is_animating:
            return False

        progress = self.progress_at(timestamp)
        if progress >= 1.0:
            self._current_angle = self._start_angle + self._delta
        else:
            eased = self._easing(progress)
            self._current_angle = self._start_angle + self._delta * eased

        if self._on_progress is not None:
            self._on_progress(self._current_angle)

        if progress < 1.0:
            return True

        self._phase = AnimatorPhase.IDLE
        on_complete = self._on_complete
        self._on_progress = None
        self._on_complete = None
        logger.debug(f"Rotation animation finished at {self._current_angle:.1f} deg")
        if on_complete is not None:
            on_complete()
        return False

    def run(
        self,
        start_angle: float,
        delta: float,
        on_progress: ProgressCallback,
        on_complete: CompleteCallback,
        clock: "Clock",
        frames: "FrameScheduler",
    ) -> bool:
        """Start and keep requesting frames until the animation completes.

        Returns:
            False if an animation was already running.
        """
        if not self.start(start_angle, delta, clock.now(), on_progress, on_complete):
            return False

        def _frame(timestamp: float) -> None:
            if self.tick(timestamp):
                frames.request_frame(_frame)

        frames.request_frame(_frame)
        return True
