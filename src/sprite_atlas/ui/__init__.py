"""Web UI."""

from sprite_atlas.ui.app import create_app

__all__ = ["create_app"]
