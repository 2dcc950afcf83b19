"""Response schemas for the REST API."""

from pydantic import BaseModel

from roomdesigner.web.schemas.common import (
    EffectiveFootprintSchema,
    OrientationEnum,
    PositionSchema,
)


class BedSizeSchema(BaseModel):
    """A bed size catalogue entry."""

    id: str
    name: str
    label: str
    width: float
    length: float


class FootprintResponse(BaseModel):
    footprint: EffectiveFootprintSchema


class ClampResponse(BaseModel):
    position: PositionSchema
    footprint: EffectiveFootprintSchema
    fits_room: bool


class PointerResponse(BaseModel):
    unclamped: PositionSchema
    position: PositionSchema
    grab_x: float
    grab_y: float


class RotationPlanResponse(BaseModel):
    """Result of a rotation request; ``accepted`` is False when dropped."""

    accepted: bool
    new_orientation: OrientationEnum | None = None
    start_angle: float | None = None
    delta: float | None = None
    end_angle: float | None = None
    new_position: PositionSchema | None = None
    new_footprint: EffectiveFootprintSchema | None = None
