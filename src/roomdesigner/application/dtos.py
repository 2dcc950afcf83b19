"""Data transfer objects handed to the view layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from roomdesigner.domain.value_objects import (
    EffectiveFootprint,
    Extension,
    Orientation,
    Position,
    RoomBounds,
)


@dataclass(frozen=True)
class LayoutSnapshot:
    """Outbound state of a layout session.

    Attributes:
        room: Current room bounds.
        orientation: Committed orientation.
        position: Committed top-left position.
        footprint: Effective footprint for the committed orientation.
        extension: Extension flag and size.
        is_animating: True while a rotation is in flight, including the
            settle window; the view suppresses dragging while set.
        animation_angle: Transient animation angle in degrees.
        display_name: Object label (catalogue name or raw size id).
    """

    room: RoomBounds
    orientation: Orientation
    position: Position
    footprint: EffectiveFootprint
    extension: Extension
    is_animating: bool
    animation_angle: float
    display_name: str

    @property
    def orientation_angle(self) -> float:
        return self.orientation.angle

    @property
    def visual_rotation(self) -> float:
        """Extra rotation to apply on top of the committed orientation.

        Zero when idle. During an animation this is the animation angle
        relative to the committed orientation, normalized to [-180, 180).
        """
        if not self.is_animating:
            return 0.0
        relative = self.animation_angle - self.orientation.angle
        return ((relative + 180.0) % 360.0) - 180.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "room": {"width": self.room.width, "length": self.room.length},
            "orientation": self.orientation.value,
            "orientation_angle": self.orientation_angle,
            "position": {"top": self.position.top, "left": self.position.left},
            "footprint": {
                "width": self.footprint.width,
                "total_length": self.footprint.total_length,
            },
            "extension": {
                "enabled": self.extension.enabled,
                "size": self.extension.size,
            },
            "is_animating": self.is_animating,
            "animation_angle": self.animation_angle,
            "visual_rotation": self.visual_rotation,
            "display_name": self.display_name,
        }
