"""API routers for the REST API."""

from roomdesigner.web.routers.bed_sizes import router as bed_sizes_router
from roomdesigner.web.routers.layout import router as layout_router

__all__ = [
    "bed_sizes_router",
    "layout_router",
]
