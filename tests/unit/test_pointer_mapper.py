"""Unit tests for pointer to room-space mapping."""

import math

import pytest

from roomdesigner.domain.services import PointerMapper
from roomdesigner.domain.value_objects import (
    DisplayedRect,
    EffectiveFootprint,
    GrabOffset,
    Point2D,
    Position,
    RoomBounds,
)

ROOM = RoomBounds(width=305, length=366)
RECT = DisplayedRect(left=10, top=10, width=300, height=360)
BED = EffectiveFootprint(width=90, total_length=190)


@pytest.fixture
def mapper() -> PointerMapper:
    return PointerMapper()


class TestScale:
    """Tests for per-axis scale factors."""

    def test_scale(self, mapper: PointerMapper) -> None:
        scale_x, scale_y = mapper.scale(RECT, ROOM)
        assert scale_x == pytest.approx(305 / 300)
        assert scale_y == pytest.approx(366 / 360)


class TestPixelToRoom:
    """Tests for unclamped mapping."""

    def test_drop_with_grab_offset(self, mapper: PointerMapper) -> None:
        point = mapper.pixel_to_room(120, 80, GrabOffset(20, 30), RECT, ROOM)
        assert point.x == pytest.approx(90 * 305 / 300)
        assert point.y == pytest.approx(40 * 366 / 360)
        assert point.x == pytest.approx(91.5)
        assert point.y == pytest.approx(40.67, abs=0.01)

    def test_identity_scale(self, mapper: PointerMapper) -> None:
        rect = DisplayedRect(left=0, top=0, width=305, height=366)
        point = mapper.pixel_to_room(50, 60, GrabOffset.zero(), rect, ROOM)
        assert point == Point2D(x=50, y=60)


class TestToRoomSpace:
    """Tests for clamped mapping."""

    def test_in_bounds(self, mapper: PointerMapper) -> None:
        position = mapper.to_room_space(120, 80, GrabOffset(20, 30), RECT, ROOM, BED)
        assert position.left == pytest.approx(91.5)
        assert position.top == pytest.approx(40 * 366 / 360)

    def test_clamped_past_far_corner(self, mapper: PointerMapper) -> None:
        position = mapper.to_room_space(1000, 1000, GrabOffset.zero(), RECT, ROOM, BED)
        assert position == Position(top=176, left=215)

    def test_clamped_before_origin(self, mapper: PointerMapper) -> None:
        position = mapper.to_room_space(0, 0, GrabOffset(20, 30), RECT, ROOM, BED)
        assert position == Position(top=0, left=0)


class TestGrabOffset:
    """Tests for capturing and reading grab offsets."""

    def test_capture_relative_to_object(self, mapper: PointerMapper) -> None:
        rect = DisplayedRect(left=10, top=20, width=305, height=366)
        grab = mapper.capture_grab_offset(
            70, 100, Position(top=50, left=40), rect, ROOM
        )
        assert grab.x == pytest.approx(20)
        assert grab.y == pytest.approx(30)

    def test_capture_then_drop_in_place_keeps_position(
        self, mapper: PointerMapper
    ) -> None:
        start = Position(top=100, left=60)
        grab = mapper.capture_grab_offset(150, 200, start, RECT, ROOM)
        position = mapper.to_room_space(150, 200, grab, RECT, ROOM, BED)
        assert position.left == pytest.approx(start.left)
        assert position.top == pytest.approx(start.top)

    @pytest.mark.parametrize(
        ("raw_x", "raw_y", "expected"),
        [
            ("12", "7", GrabOffset(12, 7)),
            (3.5, 4, GrabOffset(3.5, 4)),
            ("-2", "0", GrabOffset(-2, 0)),
        ],
    )
    def test_resolve_readable(
        self, mapper: PointerMapper, raw_x: object, raw_y: object, expected: GrabOffset
    ) -> None:
        assert mapper.resolve_grab_offset(raw_x, raw_y, GrabOffset(1, 1)) == expected

    @pytest.mark.parametrize(
        ("raw_x", "raw_y"),
        [
            ("", "7"),
            ("abc", "7"),
            (None, 4),
            (math.nan, 4),
            ("NaN", "NaN"),
            (3, math.inf),
            (True, 1),
        ],
    )
    def test_resolve_unreadable_falls_back(
        self, mapper: PointerMapper, raw_x: object, raw_y: object
    ) -> None:
        fallback = GrabOffset(20, 30)
        assert mapper.resolve_grab_offset(raw_x, raw_y, fallback) is fallback
