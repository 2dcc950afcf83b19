"""Value objects for the room designer domain.

This module provides immutable data types used throughout the layout
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Orientation and rotation direction
from ._orientation import (
    Orientation,
    RotationDirection,
)

# Room-space and viewport geometry
from ._geometry import (
    DisplayedRect,
    EffectiveFootprint,
    Extension,
    Footprint,
    GrabOffset,
    Point2D,
    Position,
    RoomBounds,
)

# Rotation planning and animation state
from ._rotation import (
    RotationPlan,
    RotationState,
)

__all__ = [
    "DisplayedRect",
    "EffectiveFootprint",
    "Extension",
    "Footprint",
    "GrabOffset",
    "Orientation",
    "Point2D",
    "Position",
    "RoomBounds",
    "RotationDirection",
    "RotationPlan",
    "RotationState",
]
