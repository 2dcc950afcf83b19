"""Common Pydantic schemas shared across requests and responses."""

from enum import Enum

from pydantic import BaseModel, Field


class OrientationEnum(str, Enum):
    """Orientation options."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


class DirectionEnum(str, Enum):
    """Rotation direction options."""

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


class RoomSchema(BaseModel):
    """Room bounds in room units."""

    width: float = Field(..., gt=0, description="Room width")
    length: float = Field(..., gt=0, description="Room length")


class FootprintSchema(BaseModel):
    """Base footprint of the object."""

    width: float = Field(..., gt=0, description="Base width")
    length: float = Field(..., gt=0, description="Base length")


class ExtensionSchema(BaseModel):
    """Headboard presence and size."""

    enabled: bool = Field(default=False, description="Whether the headboard is present")
    size: float = Field(default=0.0, ge=0, description="Headboard depth")


class PositionSchema(BaseModel):
    """Top-left position in room units."""

    top: float = Field(default=0.0, description="Distance from the top wall")
    left: float = Field(default=0.0, description="Distance from the left wall")


class EffectiveFootprintSchema(BaseModel):
    """Occupied width and total length."""

    width: float
    total_length: float


class DisplayedRectSchema(BaseModel):
    """Displayed room rectangle in viewport pixels."""

    left: float = 0.0
    top: float = 0.0
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
