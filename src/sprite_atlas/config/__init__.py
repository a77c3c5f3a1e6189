"""Configuration loading and compatibility profiles."""

from sprite_atlas.config.schema import (
    CompatibilityProfile,
    Config,
    load_config,
    profile_config,
)

__all__ = [
    "CompatibilityProfile",
    "Config",
    "load_config",
    "profile_config",
]
