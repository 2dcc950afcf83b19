"""Conversion from configuration models to domain objects and sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roomdesigner.application.config.schemas import LayoutConfiguration
from roomdesigner.application.layout_session import ChangeCallback, LayoutSession
from roomdesigner.domain.bed_sizes import get_bed_size
from roomdesigner.domain.value_objects import (
    Extension,
    Footprint,
    Position,
    RoomBounds,
)

if TYPE_CHECKING:
    from roomdesigner.contracts.protocols import Scheduler


def config_to_room(config: LayoutConfiguration) -> RoomBounds:
    return RoomBounds(width=config.room.width, length=config.room.length)


def config_to_footprint(config: LayoutConfiguration) -> tuple[Footprint, str | None]:
    """Resolve the bed footprint and its catalogue id (None when custom)."""
    bed = config.bed
    if bed.size is not None:
        return get_bed_size(bed.size).dimensions, bed.size
    # validated: width and length are both set when size is absent
    return Footprint(width=bed.width, length=bed.length), None  # type: ignore[arg-type]


def config_to_extension(config: LayoutConfiguration) -> Extension:
    return Extension(enabled=config.headboard.enabled, size=config.headboard.size)


def config_to_session(
    config: LayoutConfiguration,
    scheduler: "Scheduler | None" = None,
    on_change: ChangeCallback | None = None,
) -> LayoutSession:
    """Build a LayoutSession from a validated configuration.

    The configured initial position passes through the clamper, so a
    position outside the room is pulled back in bounds.
    """
    footprint, size_id = config_to_footprint(config)
    placement = config.placement
    return LayoutSession(
        room=config_to_room(config),
        footprint=footprint,
        size_id=size_id,
        extension=config_to_extension(config),
        orientation=placement.orientation,
        position=Position(top=placement.top, left=placement.left),
        scheduler=scheduler,
        duration_ms=config.animation.duration_ms,
        settle_delay_ms=config.animation.settle_delay_ms,
        on_change=on_change,
    )
