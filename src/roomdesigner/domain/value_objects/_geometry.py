"""Room-space geometry value objects.

All linear quantities share the room's unit (centimeters in the bundled
bed catalogue). Pixel quantities only appear in ``DisplayedRect`` and
``GrabOffset``, which describe the on-screen viewport.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Footprint:
    """Intrinsic base size of the object, independent of orientation."""

    width: float
    length: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.length <= 0:
            raise ValueError("Footprint dimensions must be positive")


@dataclass(frozen=True)
class Extension:
    """Optional element attached to one end of the object (a headboard).

    Attributes:
        enabled: Whether the extension is present.
        size: Depth of the extension along the object's long axis.
    """

    enabled: bool = False
    size: float = 0.0

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("Extension size must be non-negative")

    @property
    def contribution(self) -> float:
        """Length added to the footprint, zero when absent."""
        return self.size if self.enabled else 0.0


@dataclass(frozen=True)
class EffectiveFootprint:
    """Occupied width and total length after orientation and extension."""

    width: float
    total_length: float

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_length(self) -> float:
        return self.total_length / 2


@dataclass(frozen=True)
class Point2D:
    """Point in room space. Unlike Position it carries no clamping intent."""

    x: float
    y: float


@dataclass(frozen=True)
class Position:
    """Top-left corner of the object in room space.

    ``left`` runs along the room width and ``top`` along the room length.
    Positions produced by the clamper are non-negative; intermediate
    positions (for instance re-centered after a rotation) may not be.
    """

    top: float
    left: float

    @classmethod
    def origin(cls) -> "Position":
        return cls(top=0.0, left=0.0)

    def center(self, footprint: EffectiveFootprint) -> Point2D:
        """Geometric center of an object with ``footprint`` placed here."""
        return Point2D(
            x=self.left + footprint.half_width,
            y=self.top + footprint.half_length,
        )

    @classmethod
    def centered_on(cls, center: Point2D, footprint: EffectiveFootprint) -> "Position":
        """Top-left corner that puts ``footprint``'s center at ``center``."""
        return cls(
            top=center.y - footprint.half_length,
            left=center.x - footprint.half_width,
        )


@dataclass(frozen=True)
class RoomBounds:
    """Interior size of the room: width (x axis) and length (y axis)."""

    width: float
    length: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.length <= 0:
            raise ValueError("Room dimensions must be positive")

    def fits(self, footprint: EffectiveFootprint) -> bool:
        """Check whether ``footprint`` fits inside the room at all."""
        return (
            footprint.width <= self.width
            and footprint.total_length <= self.length
        )


@dataclass(frozen=True)
class DisplayedRect:
    """On-screen bounding rectangle of the room viewport, in pixels."""

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Displayed rectangle must have a positive size")


@dataclass(frozen=True)
class GrabOffset:
    """Pointer position relative to the object's top-left at gesture start, in pixels."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "GrabOffset":
        return cls(x=0.0, y=0.0)
