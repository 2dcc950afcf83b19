"""Application layer - layout session and configuration."""

from .dtos import LayoutSnapshot
from .layout_session import DEFAULT_SETTLE_DELAY_MS, LayoutSession

__all__ = [
    "DEFAULT_SETTLE_DELAY_MS",
    "LayoutSession",
    "LayoutSnapshot",
]
