"""Stateless layout engine endpoints."""

from fastapi import APIRouter

from roomdesigner.domain.services import (
    PointerMapper,
    RotationPlanner,
    clamp_position,
    resolve_footprint,
)
from roomdesigner.domain.value_objects import (
    DisplayedRect,
    EffectiveFootprint,
    Footprint,
    GrabOffset,
    Orientation,
    Position,
    RoomBounds,
    RotationDirection,
)
from roomdesigner.web.schemas.common import (
    EffectiveFootprintSchema,
    OrientationEnum,
    PositionSchema,
)
from roomdesigner.web.schemas.requests import (
    ClampRequest,
    FootprintRequest,
    PointerRequest,
    RotationPlanRequest,
)
from roomdesigner.web.schemas.responses import (
    ClampResponse,
    FootprintResponse,
    PointerResponse,
    RotationPlanResponse,
)

router = APIRouter(prefix="/layout", tags=["layout"])


def _effective(request: FootprintRequest) -> EffectiveFootprint:
    return resolve_footprint(
        Orientation(request.orientation.value),
        Footprint(width=request.footprint.width, length=request.footprint.length),
        request.extension.enabled,
        request.extension.size,
    )


def _footprint_schema(footprint: EffectiveFootprint) -> EffectiveFootprintSchema:
    return EffectiveFootprintSchema(
        width=footprint.width, total_length=footprint.total_length
    )


def _position_schema(position: Position) -> PositionSchema:
    return PositionSchema(top=position.top, left=position.left)


@router.post("/footprint", response_model=FootprintResponse)
async def footprint(request: FootprintRequest) -> FootprintResponse:
    """Resolve the effective footprint for an orientation."""
    return FootprintResponse(footprint=_footprint_schema(_effective(request)))


@router.post("/clamp", response_model=ClampResponse)
async def clamp(request: ClampRequest) -> ClampResponse:
    """Clamp a proposed top-left position into the room."""
    effective = _effective(request)
    room = RoomBounds(width=request.room.width, length=request.room.length)
    position = clamp_position(
        Position(top=request.position.top, left=request.position.left),
        effective,
        room,
    )
    return ClampResponse(
        position=_position_schema(position),
        footprint=_footprint_schema(effective),
        fits_room=room.fits(effective),
    )


@router.post("/pointer", response_model=PointerResponse)
async def pointer(request: PointerRequest) -> PointerResponse:
    """Map a drop location in viewport pixels into room space."""
    mapper = PointerMapper()
    room = RoomBounds(width=request.room.width, length=request.room.length)
    rect = DisplayedRect(
        left=request.rect.left,
        top=request.rect.top,
        width=request.rect.width,
        height=request.rect.height,
    )
    grab = mapper.resolve_grab_offset(
        request.grab_x,
        request.grab_y,
        fallback=GrabOffset(x=request.fallback_grab_x, y=request.fallback_grab_y),
    )
    point = mapper.pixel_to_room(request.pointer_x, request.pointer_y, grab, rect, room)
    position = mapper.to_room_space(
        request.pointer_x, request.pointer_y, grab, rect, room, _effective(request)
    )
    return PointerResponse(
        unclamped=PositionSchema(top=point.y, left=point.x),
        position=_position_schema(position),
        grab_x=grab.x,
        grab_y=grab.y,
    )


@router.post("/rotation-plan", response_model=RotationPlanResponse)
async def rotation_plan(request: RotationPlanRequest) -> RotationPlanResponse:
    """Plan a quarter-turn rotation.

    Returns ``accepted=False`` when ``is_animating`` is set, mirroring how
    the engine drops concurrent rotation requests.
    """
    plan = RotationPlanner().plan(
        RotationDirection(request.direction.value),
        Orientation(request.orientation.value),
        Footprint(width=request.footprint.width, length=request.footprint.length),
        Position(top=request.position.top, left=request.position.left),
        RoomBounds(width=request.room.width, length=request.room.length),
        has_extension=request.extension.enabled,
        extension_size=request.extension.size,
        is_animating=request.is_animating,
    )
    if plan is None:
        return RotationPlanResponse(accepted=False)
    return RotationPlanResponse(
        accepted=True,
        new_orientation=OrientationEnum(plan.new_orientation.value),
        start_angle=plan.start_angle,
        delta=plan.delta,
        end_angle=plan.end_angle,
        new_position=_position_schema(plan.new_position),
        new_footprint=_footprint_schema(plan.new_footprint),
    )
