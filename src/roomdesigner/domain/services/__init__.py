"""Domain services for the layout engine.

This package provides the geometry and timing services behind a single
piece of furniture in a room:
- Effective footprint resolution
- Placement clamping
- Pointer to room-space mapping
- Rotation planning and animation
"""

from .footprint import resolve_footprint, resolve_with_extension
from .placement import clamp_axis, clamp_position
from .pointer_mapper import PointerMapper
from .rotation_animator import (
    DEFAULT_DURATION_MS,
    AnimatorPhase,
    RotationAnimator,
    ease_in_out_cosine,
)
from .rotation_planner import RotationPlanner

__all__ = [
    "DEFAULT_DURATION_MS",
    "AnimatorPhase",
    "PointerMapper",
    "RotationAnimator",
    "RotationPlanner",
    "clamp_axis",
    "clamp_position",
    "ease_in_out_cosine",
    "resolve_footprint",
    "resolve_with_extension",
]
