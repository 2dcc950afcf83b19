"""Domain layer - layout geometry and rotation."""

from .bed_sizes import (
    BED_SIZES,
    BedSize,
    BedSizeNotFoundError,
    get_bed_display_name,
    get_bed_size,
)
from .services import (
    PointerMapper,
    RotationAnimator,
    RotationPlanner,
    clamp_position,
    resolve_footprint,
)
from .value_objects import (
    DisplayedRect,
    EffectiveFootprint,
    Extension,
    Footprint,
    GrabOffset,
    Orientation,
    Position,
    RoomBounds,
    RotationDirection,
    RotationPlan,
    RotationState,
)

__all__ = [
    "BED_SIZES",
    "BedSize",
    "BedSizeNotFoundError",
    "DisplayedRect",
    "EffectiveFootprint",
    "Extension",
    "Footprint",
    "GrabOffset",
    "Orientation",
    "PointerMapper",
    "Position",
    "RoomBounds",
    "RotationAnimator",
    "RotationDirection",
    "RotationPlan",
    "RotationPlanner",
    "RotationState",
    "clamp_position",
    "get_bed_display_name",
    "get_bed_size",
    "resolve_footprint",
]
