"""Pointer to room-space mapping for drag and touch gestures."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from ..value_objects import (
    DisplayedRect,
    EffectiveFootprint,
    GrabOffset,
    Point2D,
    Position,
    RoomBounds,
)
from .placement import clamp_position

logger = logging.getLogger(__name__)

__all__ = ["PointerMapper"]


@dataclass
class PointerMapper:
    """Converts viewport pixel coordinates into room-space positions.

    The displayed room rectangle may be scaled differently on each axis,
    so the mapping uses independent x and y scale factors.
    """

    def scale(self, rect: DisplayedRect, room: RoomBounds) -> tuple[float, float]:
        """Room units per pixel along x and y."""
        return room.width / rect.width, room.length / rect.height

    def capture_grab_offset(
        self,
        pointer_x: float,
        pointer_y: float,
        position: Position,
        rect: DisplayedRect,
        room: RoomBounds,
    ) -> GrabOffset:
        """Pointer offset from the object's on-screen top-left, in pixels.

        Captured once at gesture start and reused for every move and drop
        of the same gesture, so the object keeps its grip point under the
        pointer.
        """
        scale_x, scale_y = self.scale(rect, room)
        object_left_px = rect.left + position.left / scale_x
        object_top_px = rect.top + position.top / scale_y
        return GrabOffset(x=pointer_x - object_left_px, y=pointer_y - object_top_px)

    def resolve_grab_offset(
        self,
        raw_x: Any,
        raw_y: Any,
        fallback: GrabOffset,
    ) -> GrabOffset:
        """Read a grab offset from gesture payload data.

        Payload values arrive as strings or numbers. Missing, unreadable,
        or NaN values fall back to the offset captured at gesture start.
        """
        x = _parse_offset(raw_x)
        y = _parse_offset(raw_y)
        if x is None or y is None:
            logger.warning(
                f"Unreadable drag offset ({raw_x!r}, {raw_y!r}), "
                f"using captured offset ({fallback.x}, {fallback.y})"
            )
            return fallback
        return GrabOffset(x=x, y=y)

    def pixel_to_room(
        self,
        pointer_x: float,
        pointer_y: float,
        grab: GrabOffset,
        rect: DisplayedRect,
        room: RoomBounds,
    ) -> Point2D:
        """Unclamped room-space top-left for a pointer location."""
        pixel_x = pointer_x - rect.left - grab.x
        pixel_y = pointer_y - rect.top - grab.y
        scale_x, scale_y = self.scale(rect, room)
        return Point2D(x=pixel_x * scale_x, y=pixel_y * scale_y)

    def to_room_space(
        self,
        pointer_x: float,
        pointer_y: float,
        grab: GrabOffset,
        rect: DisplayedRect,
        room: RoomBounds,
        footprint: EffectiveFootprint,
    ) -> Position:
        """Map a pointer location to a clamped top-left position.

        Args:
            pointer_x: Pointer x in viewport pixels.
            pointer_y: Pointer y in viewport pixels.
            grab: Grab offset captured at gesture start.
            rect: Displayed room rectangle in viewport pixels.
            room: Room bounds in room units.
            footprint: Effective footprint in the current orientation.

        Returns:
            The in-bounds Position for the object.
        """
        point = self.pixel_to_room(pointer_x, pointer_y, grab, rect, room)
        return clamp_position(Position(top=point.y, left=point.x), footprint, room)


def _parse_offset(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(parsed) or math.isinf(parsed):
        return None
    return parsed
