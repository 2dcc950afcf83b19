"""Rotation plan and animation state value objects."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ._geometry import EffectiveFootprint, Position
from ._orientation import Orientation, RotationDirection


@dataclass(frozen=True)
class RotationPlan:
    """Everything needed to animate and then commit one rotation step.

    Attributes:
        direction: Requested rotation direction.
        previous_orientation: Orientation before the rotation.
        new_orientation: Orientation committed when the animation completes.
        start_angle: Animation start angle in degrees.
        delta: Signed sweep in degrees (+90 clockwise, -90 counterclockwise).
        new_position: Re-centered, clamped top-left committed on completion.
        new_footprint: Effective footprint in the new orientation.
    """

    direction: RotationDirection
    previous_orientation: Orientation
    new_orientation: Orientation
    start_angle: float
    delta: float
    new_position: Position
    new_footprint: EffectiveFootprint

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.delta


@dataclass(frozen=True)
class RotationState:
    """Transient animation state exposed to the view.

    ``current_angle`` is presentation only; the committed orientation is
    authoritative.
    """

    is_animating: bool = False
    current_angle: float = 0.0

    def with_angle(self, angle: float) -> "RotationState":
        return replace(self, current_angle=angle)

    def started(self, start_angle: float) -> "RotationState":
        return RotationState(is_animating=True, current_angle=start_angle)

    def settled(self) -> "RotationState":
        return replace(self, is_animating=False)
