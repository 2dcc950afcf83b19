"""Placement clamping against room bounds."""

from __future__ import annotations

from ..value_objects import EffectiveFootprint, Position, RoomBounds

__all__ = ["clamp_position", "clamp_axis"]


def clamp_axis(value: float, extent: float, available: float) -> float:
    """Clamp one coordinate to ``[0, available - extent]``.

    When the object is larger than the available space the lower bound
    wins and the coordinate pins to 0; the object then overflows the room.
    """
    return max(0.0, min(value, available - extent))


def clamp_position(
    position: Position,
    footprint: EffectiveFootprint,
    room: RoomBounds,
) -> Position:
    """Return the nearest in-bounds top-left position.

    Args:
        position: Proposed top-left corner.
        footprint: Effective footprint in the current orientation.
        room: Room bounds.

    Returns:
        A Position with ``0 <= left <= room.width - footprint.width`` and
        ``0 <= top <= room.length - footprint.total_length`` whenever the
        footprint fits. Positions already in bounds are returned unchanged.
    """
    left = clamp_axis(position.left, footprint.width, room.width)
    top = clamp_axis(position.top, footprint.total_length, room.length)
    if left == position.left and top == position.top:
        return position
    return Position(top=top, left=left)
