"""Pytest configuration and shared fixtures for room designer tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from roomdesigner.application import LayoutSession
from roomdesigner.domain.value_objects import (
    DisplayedRect,
    Extension,
    Footprint,
    RoomBounds,
)
from roomdesigner.infrastructure import ManualScheduler


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def room() -> RoomBounds:
    """The designer's default room, 305 x 366 cm."""
    return RoomBounds(width=305, length=366)


@pytest.fixture
def single_bed() -> Footprint:
    """Single bed base footprint, 90 x 190 cm."""
    return Footprint(width=90, length=190)


@pytest.fixture
def headboard() -> Extension:
    """Default headboard, 15 cm."""
    return Extension(enabled=True, size=15)


@pytest.fixture
def displayed_rect() -> DisplayedRect:
    return DisplayedRect(left=10, top=10, width=300, height=360)


# =============================================================================
# Session fixtures
# =============================================================================


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def session(
    room: RoomBounds, single_bed: Footprint, scheduler: ManualScheduler
) -> LayoutSession:
    """Session with a single bed, no headboard, North at the origin."""
    return LayoutSession(
        room=room, footprint=single_bed, size_id="single", scheduler=scheduler
    )


# =============================================================================
# Configuration file fixtures
# =============================================================================


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a configuration dict to a temporary JSON file."""

    def _write(data: dict[str, Any], name: str = "layout.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    return {"room": {"width": 305, "length": 366}}
