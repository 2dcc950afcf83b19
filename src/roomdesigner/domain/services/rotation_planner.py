"""Rotation planning: next orientation, animation sweep and new position.

Rotation is anchored at the object's geometric center rather than its
top-left corner. The planner derives the new top-left from the shared
center point and then clamps it into the room, so a rotation next to a
wall slides the object back inside instead of pushing it out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..value_objects import (
    Footprint,
    Orientation,
    Position,
    RoomBounds,
    RotationDirection,
    RotationPlan,
)
from .footprint import resolve_footprint
from .placement import clamp_position

logger = logging.getLogger(__name__)

__all__ = ["RotationPlanner"]


@dataclass
class RotationPlanner:
    """Computes a RotationPlan for a single quarter turn."""

    def plan(
        self,
        direction: RotationDirection,
        orientation: Orientation,
        footprint: Footprint,
        position: Position,
        room: RoomBounds,
        has_extension: bool = False,
        extension_size: float = 0.0,
        is_animating: bool = False,
    ) -> RotationPlan | None:
        """Plan one rotation step.

        Args:
            direction: Clockwise or counterclockwise.
            orientation: Current committed orientation.
            footprint: Intrinsic base footprint.
            position: Current committed top-left position.
            room: Room bounds.
            has_extension: Whether the extension is present.
            extension_size: Extension depth.
            is_animating: Whether a rotation is already in flight.

        Returns:
            The RotationPlan, or None when a rotation is already in flight.
            Concurrent requests are dropped, not queued.
        """
        if is_animating:
            logger.debug(f"Rotation {direction.value} dropped: already animating")
            return None

        new_orientation = orientation.next(direction)
        start_angle = orientation.angle
        delta = direction.delta

        current = resolve_footprint(orientation, footprint, has_extension, extension_size)
        center = position.center(current)

        new_footprint = resolve_footprint(
            new_orientation, footprint, has_extension, extension_size
        )
        recentered = Position.centered_on(center, new_footprint)
        new_position = clamp_position(recentered, new_footprint, room)

        logger.debug(
            f"Planned {orientation.value} -> {new_orientation.value}: "
            f"center=({center.x:.2f}, {center.y:.2f}), "
            f"position=({new_position.left:.2f}, {new_position.top:.2f})"
        )

        return RotationPlan(
            direction=direction,
            previous_orientation=orientation,
            new_orientation=new_orientation,
            start_angle=start_angle,
            delta=delta,
            new_position=new_position,
            new_footprint=new_footprint,
        )
