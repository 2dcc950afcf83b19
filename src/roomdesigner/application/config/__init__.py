"""Configuration loading and conversion for layout sessions."""

from roomdesigner.application.config.adapter import (
    config_to_extension,
    config_to_footprint,
    config_to_room,
    config_to_session,
)
from roomdesigner.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from roomdesigner.application.config.schemas import (
    SUPPORTED_VERSIONS,
    AnimationConfig,
    BedConfig,
    HeadboardConfig,
    LayoutConfiguration,
    PlacementConfig,
    RoomConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AnimationConfig",
    "BedConfig",
    "ConfigError",
    "HeadboardConfig",
    "LayoutConfiguration",
    "PlacementConfig",
    "RoomConfig",
    "config_to_extension",
    "config_to_footprint",
    "config_to_room",
    "config_to_session",
    "load_config",
    "load_config_from_dict",
]
