"""Infrastructure layer - schedulers and output formatting."""

from .formatters import (
    BedSizeFormatter,
    FrameTraceFormatter,
    JsonLayoutFormatter,
    LayoutFormatter,
)
from .scheduling import AsyncioScheduler, ManualScheduler

__all__ = [
    "AsyncioScheduler",
    "BedSizeFormatter",
    "FrameTraceFormatter",
    "JsonLayoutFormatter",
    "LayoutFormatter",
    "ManualScheduler",
]
