"""Contracts between the engine and its timing collaborators."""

from roomdesigner.contracts.protocols import (
    Clock,
    DelayScheduler,
    FrameCallback,
    FrameScheduler,
    Scheduler,
)

__all__ = [
    "Clock",
    "DelayScheduler",
    "FrameCallback",
    "FrameScheduler",
    "Scheduler",
]
