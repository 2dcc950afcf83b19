"""Catalogue of standard bed sizes.

Sizes are in centimeters. Lookup by identifier is the one engine path
that reports failure to its caller: an unknown identifier raises
BedSizeNotFoundError, and display helpers fall back to the raw id.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import Footprint


class BedSizeNotFoundError(Exception):
    """Raised when a requested bed size identifier does not exist."""

    def __init__(self, size_id: str) -> None:
        self.size_id = size_id
        super().__init__(f'Bed size with id "{size_id}" not found.')


@dataclass(frozen=True)
class BedSize:
    """A named catalogue entry."""

    id: str
    name: str
    dimensions: Footprint

    @property
    def label(self) -> str:
        """Listing label, e.g. "Single Bed (90 cm × 190 cm)"."""
        width = _format_cm(self.dimensions.width)
        length = _format_cm(self.dimensions.length)
        return f"{self.name} ({width} cm × {length} cm)"


BED_SIZES: tuple[BedSize, ...] = (
    BedSize("single", "Single Bed", Footprint(width=90, length=190)),
    BedSize("double", "Double Bed", Footprint(width=135, length=190)),
    BedSize("queen", "Queen Bed", Footprint(width=150, length=200)),
    BedSize("king", "King Bed", Footprint(width=180, length=200)),
)

DEFAULT_BED_SIZE_ID = "single"


def get_bed_size(size_id: str) -> BedSize:
    """Look up a catalogue entry by identifier.

    Raises:
        BedSizeNotFoundError: If no entry has this identifier.
    """
    for bed_size in BED_SIZES:
        if bed_size.id == size_id:
            return bed_size
    raise BedSizeNotFoundError(size_id)


def get_bed_display_name(size_id: str) -> str:
    """Return the entry's display name, or the raw id when unknown."""
    try:
        return get_bed_size(size_id).name
    except BedSizeNotFoundError:
        return size_id


def bed_size_ids() -> list[str]:
    return [bed_size.id for bed_size in BED_SIZES]


def _format_cm(value: float) -> str:
    return f"{value:g}"
