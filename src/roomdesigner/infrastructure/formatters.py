"""Text and JSON formatters for layout output."""

from __future__ import annotations

import json
from typing import Sequence

from roomdesigner.application.dtos import LayoutSnapshot
from roomdesigner.domain.bed_sizes import BedSize


class LayoutFormatter:
    """Formats a layout snapshot as a short report."""

    def format(self, snapshot: LayoutSnapshot) -> str:
        footprint = snapshot.footprint
        lines = [
            "LAYOUT",
            "=" * 50,
            f"{'Object':<18} {snapshot.display_name}",
            f"{'Room':<18} {snapshot.room.width:g} x {snapshot.room.length:g}",
            f"{'Orientation':<18} {snapshot.orientation.label} "
            f"({snapshot.orientation_angle:g} deg)",
            f"{'Position':<18} left={snapshot.position.left:.2f} "
            f"top={snapshot.position.top:.2f}",
            f"{'Footprint':<18} {footprint.width:g} x {footprint.total_length:g}",
        ]
        if snapshot.extension.enabled:
            lines.append(f"{'Headboard':<18} {snapshot.extension.size:g}")
        else:
            lines.append(f"{'Headboard':<18} none")
        if not snapshot.room.fits(footprint):
            lines.append("-" * 50)
            lines.append("Warning: object is larger than the room and overflows it.")
        return "\n".join(lines)


class FrameTraceFormatter:
    """Formats the per-frame angles of an animation."""

    def format(self, angles: Sequence[float]) -> str:
        if not angles:
            return "No animation frames."
        lines = ["FRAMES", "-" * 30, f"{'Frame':<8} {'Angle (deg)'}"]
        for index, angle in enumerate(angles, start=1):
            lines.append(f"{index:<8} {angle:.2f}")
        return "\n".join(lines)


class BedSizeFormatter:
    """Formats the bed size catalogue."""

    def format(self, sizes: Sequence[BedSize]) -> str:
        lines = [f"{'Id':<10} {'Name':<14} {'Width':<8} {'Length'}", "-" * 42]
        for size in sizes:
            lines.append(
                f"{size.id:<10} {size.name:<14} "
                f"{size.dimensions.width:<8g} {size.dimensions.length:g}"
            )
        return "\n".join(lines)


class JsonLayoutFormatter:
    """Formats a layout snapshot as JSON."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def format(
        self, snapshot: LayoutSnapshot, frames: Sequence[float] | None = None
    ) -> str:
        data = snapshot.to_dict()
        if frames is not None:
            data["frames"] = list(frames)
        return json.dumps(data, indent=self._indent)
