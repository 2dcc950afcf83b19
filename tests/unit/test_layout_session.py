"""Unit tests for LayoutSession.

These tests verify:
- Defaults and initial clamping
- Re-clamping after every dimension and extension commit
- Drag gestures, including payload fallback and rotation lockout
- Animated rotation, settle window and debounce
- Change notifications and snapshots
"""

from __future__ import annotations

import pytest

from roomdesigner.application import LayoutSession, LayoutSnapshot
from roomdesigner.domain.bed_sizes import BedSizeNotFoundError
from roomdesigner.domain.value_objects import (
    DisplayedRect,
    EffectiveFootprint,
    Extension,
    Footprint,
    Orientation,
    Position,
    RoomBounds,
    RotationDirection,
)
from roomdesigner.infrastructure import ManualScheduler

CW = RotationDirection.CLOCKWISE
CCW = RotationDirection.COUNTERCLOCKWISE
IDENTITY_RECT = DisplayedRect(left=0, top=0, width=305, height=366)


class TestSessionDefaults:
    """Tests for session construction."""

    def test_defaults(self, session: LayoutSession) -> None:
        assert session.orientation is Orientation.NORTH
        assert session.position == Position(top=0, left=0)
        assert not session.is_animating
        assert not session.is_dragging
        assert session.extension == Extension()
        assert session.display_name == "Single Bed"

    def test_initial_position_clamped(
        self, room: RoomBounds, single_bed: Footprint, scheduler: ManualScheduler
    ) -> None:
        session = LayoutSession(
            room, single_bed, position=Position(top=500, left=500), scheduler=scheduler
        )
        assert session.position == Position(top=176, left=215)

    def test_custom_bed_display_name(
        self, room: RoomBounds, scheduler: ManualScheduler
    ) -> None:
        session = LayoutSession(room, Footprint(100, 200), scheduler=scheduler)
        assert session.display_name == "Bed"

    def test_for_bed_size(self, room: RoomBounds) -> None:
        session = LayoutSession.for_bed_size("king", room)
        assert session.footprint == Footprint(180, 200)
        assert session.display_name == "King Bed"

    def test_for_bed_size_unknown(self, room: RoomBounds) -> None:
        with pytest.raises(BedSizeNotFoundError):
            LayoutSession.for_bed_size("emperor", room)

    def test_rejects_negative_settle_delay(
        self, room: RoomBounds, single_bed: Footprint
    ) -> None:
        with pytest.raises(ValueError):
            LayoutSession(room, single_bed, settle_delay_ms=-1)

    def test_default_scheduler_is_manual(
        self, room: RoomBounds, single_bed: Footprint
    ) -> None:
        session = LayoutSession(room, single_bed)
        assert session.rotate(CW) is not None


class TestReclamp:
    """Every commit ends with a re-clamp."""

    def test_room_shrink_reclamps(self, session: LayoutSession) -> None:
        session.commit_position(Position(top=150, left=200))
        session.set_room_bounds(RoomBounds(width=250, length=300))
        assert session.position == Position(top=110, left=160)

    def test_bigger_bed_reclamps(self, session: LayoutSession) -> None:
        session.commit_position(Position(top=176, left=215))
        session.select_bed_size("king")
        assert session.position == Position(top=166, left=125)
        assert session.display_name == "King Bed"

    def test_unknown_bed_size_leaves_state(self, session: LayoutSession) -> None:
        with pytest.raises(BedSizeNotFoundError):
            session.select_bed_size("emperor")
        assert session.footprint == Footprint(90, 190)
        assert session.size_id == "single"

    def test_set_footprint_clears_size_id(self, session: LayoutSession) -> None:
        session.set_footprint(Footprint(100, 210))
        assert session.size_id is None
        assert session.effective_footprint == EffectiveFootprint(100, 210)

    def test_enabling_extension_at_boundary_reclamps(
        self, session: LayoutSession
    ) -> None:
        session.set_extension_size(15)
        session.commit_position(Position(top=176, left=0))
        session.set_extension_enabled(True)
        assert session.effective_footprint.total_length == 205
        assert session.position.top == 161

    def test_disabling_extension_keeps_valid_position(
        self, session: LayoutSession
    ) -> None:
        session.set_extension_size(15)
        session.set_extension_enabled(True)
        session.commit_position(Position(top=161, left=0))
        session.set_extension_enabled(False)
        assert session.effective_footprint.total_length == 190
        assert session.position.top == 161

    def test_growing_extension_reclamps(self, session: LayoutSession) -> None:
        session.set_extension_enabled(True)
        session.set_extension_size(10)
        session.commit_position(Position(top=500, left=0))
        assert session.position.top == 166
        session.set_extension_size(50)
        assert session.position.top == 126

    def test_commit_position_clamps(self, session: LayoutSession) -> None:
        assert session.commit_position(Position(top=-5, left=999)) == Position(
            top=0, left=215
        )


class TestDrag:
    """Tests for drag and drop gestures."""

    def test_drag_keeps_grab_point(self, session: LayoutSession) -> None:
        session.commit_position(Position(top=50, left=40))
        grab = session.begin_drag(60, 70, IDENTITY_RECT)
        assert grab is not None
        assert (grab.x, grab.y) == (20, 20)
        assert session.is_dragging

        moved = session.drag_move(110, 120, IDENTITY_RECT)
        assert moved == Position(top=100, left=90)

        dropped = session.drop(130, 150, IDENTITY_RECT)
        assert dropped == Position(top=130, left=110)
        assert session.position == dropped
        assert not session.is_dragging

    def test_drop_uses_payload_offset(self, session: LayoutSession) -> None:
        session.begin_drag(10, 10, IDENTITY_RECT)
        dropped = session.drop(100, 100, IDENTITY_RECT, offset_payload=("30", "40"))
        assert dropped == Position(top=60, left=70)

    def test_drop_nan_payload_falls_back_to_captured(
        self, session: LayoutSession
    ) -> None:
        session.begin_drag(10, 10, IDENTITY_RECT)
        dropped = session.drop(
            100, 100, IDENTITY_RECT, offset_payload=("NaN", "not-a-number")
        )
        assert dropped == Position(top=90, left=90)

    def test_drop_without_gesture_uses_zero_offset(
        self, session: LayoutSession
    ) -> None:
        assert session.drop(100, 120, IDENTITY_RECT) == Position(top=120, left=100)

    def test_cancel_drag(self, session: LayoutSession) -> None:
        session.begin_drag(10, 10, IDENTITY_RECT)
        session.cancel_drag()
        assert not session.is_dragging
        assert session.drag_move(100, 100, IDENTITY_RECT) is None

    def test_move_without_gesture_does_not_jump(self, session: LayoutSession) -> None:
        session.commit_position(Position(top=50, left=40))
        assert session.drag_move(110, 120, IDENTITY_RECT) is None
        assert session.position == Position(top=50, left=40)

    def test_move_after_rotation_does_not_jump(
        self, session: LayoutSession, scheduler: ManualScheduler
    ) -> None:
        session.commit_position(Position(top=100, left=100))
        grab = session.begin_drag(120, 120, IDENTITY_RECT)
        assert grab is not None
        assert (grab.x, grab.y) == (20, 20)

        session.rotate(CW)
        scheduler.run_until_idle()
        assert session.position == Position(top=150, left=50)
        assert not session.is_dragging

        assert session.drag_move(121, 121, IDENTITY_RECT) is None
        assert session.position == Position(top=150, left=50)

    def test_drag_ignored_while_rotating(
        self, session: LayoutSession, scheduler: ManualScheduler
    ) -> None:
        session.rotate(CW)
        assert session.begin_drag(10, 10, IDENTITY_RECT) is None
        assert session.drag_move(100, 100, IDENTITY_RECT) is None
        assert session.drop(100, 100, IDENTITY_RECT) is None
        scheduler.run_until_idle()
        assert session.drop(100, 100, IDENTITY_RECT) is not None


class TestRotation:
    """Tests for animated rotation through the session."""

    def test_rotation_commits_on_completion(
        self, session: LayoutSession, scheduler: ManualScheduler
    ) -> None:
        plan = session.rotate(CW)
        assert plan is not None
        assert session.is_animating
        assert session.orientation is Orientation.NORTH

        scheduler.run_until_idle()

        assert session.orientation is Orientation.EAST
        assert session.position == Position(top=50, left=0)
        assert session.effective_footprint == EffectiveFootprint(190, 90)
        assert not session.is_animating

    def test_settle_window_blocks_rotation(
        self, session: LayoutSession, scheduler: ManualScheduler
    ) -> None:
        session.rotate(CW)
        while scheduler.pending_frames:
            scheduler.run_frame(16.0)
        assert session.orientation is Orientation.EAST
        assert session.is_animating
        assert session.rotate(CW) is None

        scheduler.advance(100.0)
        assert not session.is_animating
        assert session.rotate(CW) is not None

    def test_second_request_dropped(
        self, session: LayoutSession, scheduler: ManualScheduler
    ) -> None:
        session.rotate(CW)
        scheduler.run_frame(16.0)
        state_before = session.rotation_state
        assert session.rotate(CCW) is None
        assert session.rotation_state == state_before
        assert scheduler.pending_frames == 1

        scheduler.run_until_idle()
        assert session.orientation is Orientation.EAST

    def test_full_turn_returns_home(
        self, room: RoomBounds, single_bed: Footprint, scheduler: ManualScheduler
    ) -> None:
        session = LayoutSession(
            room, single_bed, position=Position(top=80, left=100), scheduler=scheduler
        )
        for _ in range(4):
            session.rotate(CCW)
            scheduler.run_until_idle()
        assert session.orientation is Orientation.NORTH
        assert session.position == Position(top=80, left=100)

    def test_angles_reported_through_on_change(
        self, room: RoomBounds, single_bed: Footprint, scheduler: ManualScheduler
    ) -> None:
        snapshots: list[LayoutSnapshot] = []
        session = LayoutSession(
            room, single_bed, scheduler=scheduler, on_change=snapshots.append
        )
        session.rotate(CCW)
        scheduler.run_until_idle()

        animating = [s.animation_angle for s in snapshots if s.is_animating]
        assert animating[0] == 0
        assert animating == sorted(animating, reverse=True)
        assert animating[-1] == -90
        assert not snapshots[-1].is_animating
        assert snapshots[-1].orientation is Orientation.WEST

    def test_room_change_during_animation_reclamped_on_commit(
        self, session: LayoutSession, scheduler: ManualScheduler
    ) -> None:
        session.commit_position(Position(top=200, left=100))
        session.rotate(CW)
        scheduler.run_frame(16.0)
        session.set_room_bounds(RoomBounds(width=200, length=250))
        scheduler.run_until_idle()
        footprint = session.effective_footprint
        assert session.position.left <= 200 - footprint.width
        assert session.position.top <= 250 - footprint.total_length


class TestSnapshot:
    """Tests for outbound snapshots."""

    def test_idle_snapshot(self, session: LayoutSession) -> None:
        snapshot = session.snapshot()
        assert snapshot.orientation_angle == 0
        assert snapshot.visual_rotation == 0
        assert snapshot.to_dict()["footprint"] == {"width": 90, "total_length": 190}

    def test_visual_rotation_during_animation(
        self, session: LayoutSession, scheduler: ManualScheduler
    ) -> None:
        session.rotate(CW)
        scheduler.run_frame(150.0)
        snapshot = session.snapshot()
        assert snapshot.is_animating
        assert snapshot.visual_rotation == pytest.approx(45.0)

    def test_visual_rotation_normalized_after_wrap(
        self, room: RoomBounds, single_bed: Footprint, scheduler: ManualScheduler
    ) -> None:
        session = LayoutSession(
            room, single_bed, orientation=Orientation.WEST, scheduler=scheduler
        )
        session.rotate(CW)
        while scheduler.pending_frames:
            scheduler.run_frame(16.0)
        snapshot = session.snapshot()
        assert snapshot.orientation is Orientation.NORTH
        assert snapshot.animation_angle == 360
        assert snapshot.visual_rotation == 0
