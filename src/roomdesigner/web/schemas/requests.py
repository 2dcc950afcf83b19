"""Request schemas for the layout endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from roomdesigner.web.schemas.common import (
    DirectionEnum,
    DisplayedRectSchema,
    ExtensionSchema,
    FootprintSchema,
    OrientationEnum,
    PositionSchema,
    RoomSchema,
)


class FootprintRequest(BaseModel):
    """Resolve the effective footprint for an orientation."""

    orientation: OrientationEnum = OrientationEnum.NORTH
    footprint: FootprintSchema
    extension: ExtensionSchema = Field(default_factory=ExtensionSchema)


class ClampRequest(FootprintRequest):
    """Clamp a proposed position into the room."""

    room: RoomSchema
    position: PositionSchema


class PointerRequest(FootprintRequest):
    """Map a pointer location into room space.

    ``grab_x``/``grab_y`` carry the raw drag payload; unreadable values
    fall back to ``fallback_grab_x``/``fallback_grab_y``.
    """

    room: RoomSchema
    rect: DisplayedRectSchema
    pointer_x: float
    pointer_y: float
    grab_x: Any = None
    grab_y: Any = None
    fallback_grab_x: float = 0.0
    fallback_grab_y: float = 0.0


class RotationPlanRequest(FootprintRequest):
    """Plan one quarter-turn rotation."""

    direction: DirectionEnum = DirectionEnum.CLOCKWISE
    room: RoomSchema
    position: PositionSchema = Field(default_factory=PositionSchema)
    is_animating: bool = False
