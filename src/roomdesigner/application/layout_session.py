"""Layout session: the single owned state record for one furniture piece.

The session holds the room bounds, the object's base footprint and
extension, and its committed orientation and position. State changes
only through the commit points below, and every commit ends with a
re-clamp so a position made stale by a room or size change is pulled
back in bounds:

- ``commit_position`` and the drag/drop gesture methods
- rotation completion (orientation and position together)
- ``set_room_bounds``, ``set_footprint`` and ``select_bed_size``
- ``set_extension_enabled`` and ``set_extension_size``
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Callable

from roomdesigner.application.dtos import LayoutSnapshot
from roomdesigner.domain.bed_sizes import get_bed_display_name, get_bed_size
from roomdesigner.domain.services import (
    PointerMapper,
    RotationAnimator,
    RotationPlanner,
    clamp_position,
    resolve_with_extension,
)
from roomdesigner.domain.services.rotation_animator import DEFAULT_DURATION_MS
from roomdesigner.domain.value_objects import (
    DisplayedRect,
    EffectiveFootprint,
    Extension,
    Footprint,
    GrabOffset,
    Orientation,
    Position,
    RoomBounds,
    RotationDirection,
    RotationPlan,
    RotationState,
)

if TYPE_CHECKING:
    from roomdesigner.contracts.protocols import Scheduler

logger = logging.getLogger(__name__)

DEFAULT_SETTLE_DELAY_MS = 100.0

ChangeCallback = Callable[[LayoutSnapshot], None]


class LayoutSession:
    """Owns layout state and routes every mutation through the clamper.

    Rotations are animated on the injected scheduler. While a rotation is
    in flight (including the short settle window after it completes),
    further rotation requests and drag gestures are ignored.

    Example:
        ```python
        scheduler = ManualScheduler()
        session = LayoutSession(
            room=RoomBounds(width=305, length=366),
            footprint=Footprint(width=90, length=190),
            scheduler=scheduler,
        )
        session.rotate(RotationDirection.CLOCKWISE)
        scheduler.run_until_idle()
        session.orientation  # Orientation.EAST
        ```
    """

    def __init__(
        self,
        room: RoomBounds,
        footprint: Footprint,
        *,
        size_id: str | None = None,
        extension: Extension | None = None,
        orientation: Orientation = Orientation.NORTH,
        position: Position | None = None,
        scheduler: "Scheduler | None" = None,
        duration_ms: float = DEFAULT_DURATION_MS,
        settle_delay_ms: float = DEFAULT_SETTLE_DELAY_MS,
        on_change: ChangeCallback | None = None,
    ) -> None:
        if settle_delay_ms < 0:
            raise ValueError("Settle delay must be non-negative")
        if scheduler is None:
            from roomdesigner.infrastructure.scheduling import ManualScheduler

            scheduler = ManualScheduler()

        self._room = room
        self._footprint = footprint
        self._size_id = size_id
        self._extension = extension or Extension()
        self._orientation = orientation
        self._position = position or Position.origin()
        self._rotation = RotationState(current_angle=orientation.angle)
        self._grab: GrabOffset | None = None

        self._scheduler = scheduler
        self._settle_delay_ms = settle_delay_ms
        self._animator = RotationAnimator(duration_ms=duration_ms)
        self._planner = RotationPlanner()
        self._mapper = PointerMapper()
        self._on_change = on_change

        self._reclamp(notify=False)

    @classmethod
    def for_bed_size(
        cls, size_id: str, room: RoomBounds, **kwargs: Any
    ) -> "LayoutSession":
        """Create a session for a catalogue bed size.

        Raises:
            BedSizeNotFoundError: If ``size_id`` is not in the catalogue.
        """
        bed_size = get_bed_size(size_id)
        return cls(room=room, footprint=bed_size.dimensions, size_id=size_id, **kwargs)

    # ------------------------------------------------------------------
    # Outbound state
    # ------------------------------------------------------------------

    @property
    def room(self) -> RoomBounds:
        return self._room

    @property
    def footprint(self) -> Footprint:
        return self._footprint

    @property
    def size_id(self) -> str | None:
        return self._size_id

    @property
    def extension(self) -> Extension:
        return self._extension

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def position(self) -> Position:
        return self._position

    @property
    def rotation_state(self) -> RotationState:
        return self._rotation

    @property
    def is_animating(self) -> bool:
        return self._rotation.is_animating

    @property
    def is_dragging(self) -> bool:
        return self._grab is not None

    @property
    def effective_footprint(self) -> EffectiveFootprint:
        return resolve_with_extension(self._orientation, self._footprint, self._extension)

    @property
    def display_name(self) -> str:
        if self._size_id is None:
            return "Bed"
        return get_bed_display_name(self._size_id)

    def snapshot(self) -> LayoutSnapshot:
        return LayoutSnapshot(
            room=self._room,
            orientation=self._orientation,
            position=self._position,
            footprint=self.effective_footprint,
            extension=self._extension,
            is_animating=self._rotation.is_animating,
            animation_angle=self._rotation.current_angle,
            display_name=self.display_name,
        )

    # ------------------------------------------------------------------
    # Dimension and extension input
    # ------------------------------------------------------------------

    def set_room_bounds(self, room: RoomBounds) -> Position:
        """Replace the room bounds and re-clamp the position."""
        self._room = room
        return self._reclamp()

    def set_footprint(self, footprint: Footprint, size_id: str | None = None) -> Position:
        """Replace the base footprint and re-clamp the position."""
        self._footprint = footprint
        self._size_id = size_id
        return self._reclamp()

    def select_bed_size(self, size_id: str) -> Position:
        """Switch to a catalogue bed size.

        Raises:
            BedSizeNotFoundError: If ``size_id`` is unknown. State is left
                unchanged in that case.
        """
        bed_size = get_bed_size(size_id)
        return self.set_footprint(bed_size.dimensions, size_id=bed_size.id)

    def set_extension_enabled(self, enabled: bool) -> Position:
        self._extension = replace(self._extension, enabled=enabled)
        return self._reclamp()

    def set_extension_size(self, size: float) -> Position:
        self._extension = replace(self._extension, size=size)
        return self._reclamp()

    # ------------------------------------------------------------------
    # Drag gestures
    # ------------------------------------------------------------------

    def commit_position(self, position: Position) -> Position:
        """Commit a proposed position, clamped into the room."""
        self._position = position
        return self._reclamp()

    def begin_drag(
        self, pointer_x: float, pointer_y: float, rect: DisplayedRect
    ) -> GrabOffset | None:
        """Start a gesture and capture the grab offset.

        Returns:
            The captured offset, or None while a rotation is in flight.
        """
        if self.is_animating:
            return None
        self._grab = self._mapper.capture_grab_offset(
            pointer_x, pointer_y, self._position, rect, self._room
        )
        logger.debug(f"Drag started with grab offset ({self._grab.x:.1f}, {self._grab.y:.1f})")
        return self._grab

    def drag_move(
        self, pointer_x: float, pointer_y: float, rect: DisplayedRect
    ) -> Position | None:
        """Follow the pointer during a gesture, committing each step.

        Returns:
            The committed position, or None while a rotation is in flight
            or when no gesture was started with ``begin_drag``.
        """
        if self.is_animating:
            return None
        if self._grab is None:
            logger.debug("Drag move ignored: no gesture in progress")
            return None
        return self._commit_pointer(pointer_x, pointer_y, self._grab, rect)

    def drop(
        self,
        pointer_x: float,
        pointer_y: float,
        rect: DisplayedRect,
        offset_payload: tuple[Any, Any] | None = None,
    ) -> Position | None:
        """Finish a gesture at the pointer location.

        Args:
            pointer_x: Drop x in viewport pixels.
            pointer_y: Drop y in viewport pixels.
            rect: Displayed room rectangle.
            offset_payload: Raw grab offset carried by the drag payload.
                Unreadable values fall back to the offset captured by
                ``begin_drag``.

        Returns:
            The committed position, or None while a rotation is in flight.
        """
        if self.is_animating:
            return None
        grab = self._grab or GrabOffset.zero()
        if offset_payload is not None:
            grab = self._mapper.resolve_grab_offset(*offset_payload, fallback=grab)
        position = self._commit_pointer(pointer_x, pointer_y, grab, rect)
        self._grab = None
        return position

    def cancel_drag(self) -> None:
        self._grab = None

    def _commit_pointer(
        self, pointer_x: float, pointer_y: float, grab: GrabOffset, rect: DisplayedRect
    ) -> Position:
        position = self._mapper.to_room_space(
            pointer_x, pointer_y, grab, rect, self._room, self.effective_footprint
        )
        logger.debug(f"Drag commit at ({position.left:.2f}, {position.top:.2f})")
        return self.commit_position(position)

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def rotate(self, direction: RotationDirection) -> RotationPlan | None:
        """Start a quarter-turn rotation.

        Returns:
            The plan being animated, or None if a rotation is already in
            flight. Dropped requests change no state.
        """
        plan = self._planner.plan(
            direction,
            self._orientation,
            self._footprint,
            self._position,
            self._room,
            has_extension=self._extension.enabled,
            extension_size=self._extension.size,
            is_animating=self.is_animating,
        )
        if plan is None:
            logger.warning(f"Rotation {direction.value} ignored: rotation in flight")
            return None

        self._grab = None
        self._rotation = self._rotation.started(plan.start_angle)
        self._animator.run(
            plan.start_angle,
            plan.delta,
            on_progress=self._on_rotation_progress,
            on_complete=lambda: self._on_rotation_complete(plan),
            clock=self._scheduler,
            frames=self._scheduler,
        )
        self._notify()
        return plan

    def _on_rotation_progress(self, angle: float) -> None:
        self._rotation = self._rotation.with_angle(angle)
        self._notify()

    def _on_rotation_complete(self, plan: RotationPlan) -> None:
        self._orientation = plan.new_orientation
        self._position = plan.new_position
        logger.info(
            f"Rotated {plan.previous_orientation.value} -> {plan.new_orientation.value}"
        )
        self._reclamp()
        self._scheduler.call_later(self._settle_delay_ms, self._release_rotation)

    def _release_rotation(self) -> None:
        self._rotation = self._rotation.settled()
        self._notify()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reclamp(self, notify: bool = True) -> Position:
        clamped = clamp_position(self._position, self.effective_footprint, self._room)
        if clamped != self._position:
            logger.debug(
                f"Re-clamped ({self._position.left:.2f}, {self._position.top:.2f}) "
                f"-> ({clamped.left:.2f}, {clamped.top:.2f})"
            )
            self._position = clamped
        if notify:
            self._notify()
        return self._position

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())
