"""Pydantic schemas for the REST API."""

from roomdesigner.web.schemas.common import (
    DirectionEnum,
    DisplayedRectSchema,
    EffectiveFootprintSchema,
    ExtensionSchema,
    FootprintSchema,
    OrientationEnum,
    PositionSchema,
    RoomSchema,
)
from roomdesigner.web.schemas.requests import (
    ClampRequest,
    FootprintRequest,
    PointerRequest,
    RotationPlanRequest,
)
from roomdesigner.web.schemas.responses import (
    BedSizeSchema,
    ClampResponse,
    FootprintResponse,
    PointerResponse,
    RotationPlanResponse,
)

__all__ = [
    "BedSizeSchema",
    "ClampRequest",
    "ClampResponse",
    "DirectionEnum",
    "DisplayedRectSchema",
    "EffectiveFootprintSchema",
    "ExtensionSchema",
    "FootprintRequest",
    "FootprintResponse",
    "FootprintSchema",
    "OrientationEnum",
    "PointerRequest",
    "PointerResponse",
    "PositionSchema",
    "RoomSchema",
    "RotationPlanRequest",
    "RotationPlanResponse",
]
