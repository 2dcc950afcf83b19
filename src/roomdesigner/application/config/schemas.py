"""Pydantic models for layout configuration files.

A configuration describes the room, the bed (catalogue size or explicit
dimensions), the headboard, the initial placement and the animation
timing. Defaults reproduce the designer's initial state.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from roomdesigner.domain.bed_sizes import (
    DEFAULT_BED_SIZE_ID,
    BedSizeNotFoundError,
    bed_size_ids,
    get_bed_size,
)
from roomdesigner.domain.value_objects import Orientation

# Supported schema versions for configuration files
# Version 1.0: Room, bed, headboard, placement and animation sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

MIN_ROOM_DIMENSION = 30.0
MIN_HEADBOARD_SIZE = 5.0
MAX_HEADBOARD_SIZE = 50.0


class RoomConfig(BaseModel):
    """Room interior dimensions in centimeters.

    Attributes:
        width: Extent along the x axis.
        length: Extent along the y axis.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=MIN_ROOM_DIMENSION, description="Room width")
    length: float = Field(..., ge=MIN_ROOM_DIMENSION, description="Room length")


class BedConfig(BaseModel):
    """Bed definition: either a catalogue size or explicit dimensions.

    Attributes:
        size: Catalogue identifier (single, double, queen, king).
        width: Explicit base width, used together with ``length``.
        length: Explicit base length, used together with ``width``.
    """

    model_config = ConfigDict(extra="forbid")

    size: str | None = None
    width: float | None = Field(default=None, gt=0)
    length: float | None = Field(default=None, gt=0)

    @field_validator("size")
    @classmethod
    def validate_size(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            get_bed_size(v)
        except BedSizeNotFoundError:
            raise ValueError(
                f"Unknown bed size '{v}'. Available: {', '.join(bed_size_ids())}"
            ) from None
        return v

    @model_validator(mode="after")
    def validate_source(self) -> "BedConfig":
        explicit = (self.width, self.length)
        if self.size is not None and any(d is not None for d in explicit):
            raise ValueError("Specify either 'size' or 'width'/'length', not both")
        if any(d is not None for d in explicit) and not all(
            d is not None for d in explicit
        ):
            raise ValueError("Both 'width' and 'length' are required for a custom bed")
        if self.size is None and self.width is None:
            self.size = DEFAULT_BED_SIZE_ID
        return self


class HeadboardConfig(BaseModel):
    """Headboard (extension) settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    size: float = Field(
        default=15.0, ge=MIN_HEADBOARD_SIZE, le=MAX_HEADBOARD_SIZE
    )


class PlacementConfig(BaseModel):
    """Initial orientation and top-left position.

    Orientation accepts compass names (north, east, south, west) or edge
    names (top, right, bottom, left).
    """

    model_config = ConfigDict(extra="forbid")

    orientation: Orientation = Orientation.NORTH
    top: float = Field(default=0.0, ge=0)
    left: float = Field(default=0.0, ge=0)

    @field_validator("orientation", mode="before")
    @classmethod
    def parse_orientation(cls, v: object) -> Orientation:
        if isinstance(v, str):
            return Orientation.parse(v)
        return v  # type: ignore[return-value]


class AnimationConfig(BaseModel):
    """Rotation animation timing in milliseconds."""

    model_config = ConfigDict(extra="forbid")

    duration_ms: float = Field(default=300.0, gt=0)
    settle_delay_ms: float = Field(default=100.0, ge=0)


class LayoutConfiguration(BaseModel):
    """Root configuration model.

    Example:
        ```json
        {
          "schema_version": "1.0",
          "room": {"width": 305, "length": 366},
          "bed": {"size": "queen"},
          "headboard": {"enabled": true, "size": 15}
        }
        ```
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    room: RoomConfig
    bed: BedConfig = Field(default_factory=BedConfig)
    headboard: HeadboardConfig = Field(default_factory=HeadboardConfig)
    placement: PlacementConfig = Field(default_factory=PlacementConfig)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
