"""Post-parse queries and teardown."""

from __future__ import annotations

from typing import Optional

from sprite_atlas.data import Atlas, Region


def find_region(atlas: Atlas, name: str) -> Optional[Region]:
    """Return the first region called ``name``, or None when there is none."""

    for region in atlas.regions():
        if region.name == name:
            return region
    return None


def release(atlas: Atlas) -> None:
    """Drop every page and region owned by ``atlas``."""

    for page in atlas.pages:
        for region in page.regions:
            region.page = None
        page.regions.clear()
    atlas.pages.clear()
