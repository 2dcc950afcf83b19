"""Bed size catalogue endpoints."""

from fastapi import APIRouter

from roomdesigner.domain.bed_sizes import BED_SIZES, BedSize, get_bed_size
from roomdesigner.web.schemas.responses import BedSizeSchema

router = APIRouter(prefix="/bed-sizes", tags=["bed-sizes"])


def _to_schema(bed_size: BedSize) -> BedSizeSchema:
    return BedSizeSchema(
        id=bed_size.id,
        name=bed_size.name,
        label=bed_size.label,
        width=bed_size.dimensions.width,
        length=bed_size.dimensions.length,
    )


@router.get("", response_model=list[BedSizeSchema])
async def list_bed_sizes() -> list[BedSizeSchema]:
    """List all catalogue bed sizes."""
    return [_to_schema(bed_size) for bed_size in BED_SIZES]


@router.get("/{size_id}", response_model=BedSizeSchema)
async def get_bed_size_by_id(size_id: str) -> BedSizeSchema:
    """Get one catalogue entry.

    Raises:
        BedSizeNotFoundError: Mapped to 404 by the exception handlers.
    """
    return _to_schema(get_bed_size(size_id))
