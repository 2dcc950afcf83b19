"""Discrete facing orientations and rotation directions."""

from __future__ import annotations

from enum import Enum


class RotationDirection(str, Enum):
    """Direction of a single 90 degree rotation step."""

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"

    @property
    def delta(self) -> float:
        """Signed animation sweep in degrees for one step."""
        return 90.0 if self is RotationDirection.CLOCKWISE else -90.0


class Orientation(str, Enum):
    """Facing of the object inside the room.

    The extension (headboard) sits on the named side: NORTH puts it at
    the top edge, EAST at the right edge, and so on. Values are ordered
    clockwise, which is the cycle used by ``next``.
    """

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @classmethod
    def parse(cls, value: "str | Orientation") -> "Orientation":
        """Parse an orientation name, accepting edge aliases.

        Besides the compass names this accepts the edge names used by
        older layouts ("top", "right", "bottom", "left").

        Raises:
            ValueError: If the value names none of the four orientations.
        """
        if isinstance(value, Orientation):
            return value
        key = str(value).strip().lower()
        key = _EDGE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(o.value for o in cls)
            raise ValueError(
                f"Unknown orientation '{value}'. Expected one of: {valid}"
            ) from None

    def next(self, direction: RotationDirection) -> "Orientation":
        """Return the cyclically adjacent orientation."""
        members = _CYCLE
        index = members.index(self)
        if direction is RotationDirection.CLOCKWISE:
            return members[(index + 1) % 4]
        return members[(index + 3) % 4]

    @property
    def angle(self) -> float:
        """Angle in degrees, NORTH = 0 increasing clockwise."""
        return _ANGLES[self]

    @property
    def is_along_primary_axis(self) -> bool:
        """True when the base length runs along the room's length axis."""
        return self in (Orientation.NORTH, Orientation.SOUTH)

    @property
    def is_extension_at_start(self) -> bool:
        """True when the extension precedes the body along its layout axis."""
        return self in (Orientation.NORTH, Orientation.WEST)

    @property
    def label(self) -> str:
        return self.value.capitalize()


_CYCLE: tuple[Orientation, ...] = (
    Orientation.NORTH,
    Orientation.EAST,
    Orientation.SOUTH,
    Orientation.WEST,
)

_ANGLES: dict[Orientation, float] = {
    Orientation.NORTH: 0.0,
    Orientation.EAST: 90.0,
    Orientation.SOUTH: 180.0,
    Orientation.WEST: 270.0,
}

_EDGE_ALIASES: dict[str, str] = {
    "top": "north",
    "right": "east",
    "bottom": "south",
    "left": "west",
}
