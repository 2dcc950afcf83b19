"""FastAPI REST API for the room designer.

This module exposes the stateless layout engine operations (footprint,
clamping, pointer mapping, rotation planning) and the bed size catalogue.

Usage:
    uvicorn roomdesigner.web:app --reload
"""

from roomdesigner.web.app import app, create_app

__all__ = ["app", "create_app"]
