"""Effective footprint resolution.

A quarter turn swaps which base dimension lies along which room axis.
The extension is attached to one end of the object's long side, so it
always lengthens the total length when present, whatever the facing.
"""

from __future__ import annotations

from ..value_objects import EffectiveFootprint, Extension, Footprint, Orientation

__all__ = ["resolve_footprint", "resolve_with_extension"]


def resolve_footprint(
    orientation: Orientation,
    footprint: Footprint,
    has_extension: bool = False,
    extension_size: float = 0.0,
) -> EffectiveFootprint:
    """Compute the occupied width and total length.

    Args:
        orientation: Current facing of the object.
        footprint: Intrinsic base width and length.
        has_extension: Whether the extension is present.
        extension_size: Extension depth in room units.

    Returns:
        EffectiveFootprint where ``width`` runs along the room width and
        ``total_length`` along the room length.
    """
    if orientation.is_along_primary_axis:
        width, length = footprint.width, footprint.length
    else:
        width, length = footprint.length, footprint.width

    total_length = length + (extension_size if has_extension else 0.0)
    return EffectiveFootprint(width=width, total_length=total_length)


def resolve_with_extension(
    orientation: Orientation,
    footprint: Footprint,
    extension: Extension,
) -> EffectiveFootprint:
    """Convenience wrapper taking an Extension value object."""
    return resolve_footprint(
        orientation, footprint, extension.enabled, extension.size
    )
