"""Core data structures for texture atlas descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple


class PixelFormat(Enum):
    """In-memory storage format of a page image."""

    ALPHA = "Alpha"
    INTENSITY = "Intensity"
    LUMINANCE_ALPHA = "LuminanceAlpha"
    RGB565 = "RGB565"
    RGBA4444 = "RGBA4444"
    RGB888 = "RGB888"
    RGBA8888 = "RGBA8888"


class TextureFilter(Enum):
    """Minification/magnification filter of a page."""

    NEAREST = "Nearest"
    LINEAR = "Linear"
    MIP_MAP = "MipMap"
    MIP_MAP_NEAREST_NEAREST = "MipMapNearestNearest"
    MIP_MAP_LINEAR_NEAREST = "MipMapLinearNearest"
    MIP_MAP_NEAREST_LINEAR = "MipMapNearestLinear"
    MIP_MAP_LINEAR_LINEAR = "MipMapLinearLinear"


class Wrap(Enum):
    """Texture wrap (repeat) setting of a page."""

    X = "x"
    Y = "y"
    XY = "xy"
    NONE = "none"


# left, right, top, bottom
NinePatch = Tuple[int, int, int, int]


@dataclass
class Region:
    """A named sprite rectangle packed inside a page."""

    name: str
    rotated: bool = False
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    original_width: int = 0
    original_height: int = 0
    offset_x: int = 0
    offset_y: int = 0
    index: int = -1
    splits: Optional[NinePatch] = None
    pads: Optional[NinePatch] = None
    page: Optional["Page"] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "page": self.page.name if self.page is not None else None,
            "rotated": self.rotated,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "original_width": self.original_width,
            "original_height": self.original_height,
            "offset_x": self.offset_x,
            "offset_y": self.offset_y,
            "index": self.index,
            "splits": list(self.splits) if self.splits is not None else None,
            "pads": list(self.pads) if self.pads is not None else None,
        }


@dataclass
class Page:
    """One packed image, its sampling settings and the regions inside it.

    ``resolved_path`` is derived from the descriptor location at read time and
    takes no part in equality, so two pages read from different directories
    compare equal when their descriptor text is equivalent.
    """

    name: str
    width: int
    height: int
    format: PixelFormat
    min_filter: TextureFilter
    mag_filter: TextureFilter
    wrap: Wrap
    regions: List[Region] = field(default_factory=list)
    resolved_path: Optional[Path] = field(default=None, compare=False)
    index: int = 0

    def add_region(self, region: Region) -> Region:
        """Append a region and bind its back-reference to this page."""

        if region.page is not None and region.page is not self:
            raise ValueError(
                f"Region '{region.name}' already belongs to page '{region.page.name}'."
            )
        region.page = self
        self.regions.append(region)
        return region

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "index": self.index,
            "resolved_path": str(self.resolved_path) if self.resolved_path else None,
            "width": self.width,
            "height": self.height,
            "format": self.format.value,
            "min_filter": self.min_filter.value,
            "mag_filter": self.mag_filter.value,
            "wrap": self.wrap.value,
            "regions": [region.to_dict() for region in self.regions],
        }


@dataclass
class Atlas:
    """Root container owning every page of a descriptor in file order."""

    pages: List[Page] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def add_page(self, page: Page) -> Page:
        page.index = len(self.pages)
        self.pages.append(page)
        return page

    def regions(self) -> Iterator[Region]:
        """Yield every region, pages in file order then regions in file order."""

        for page in self.pages:
            for region in page.regions:
                yield region

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page_count": self.page_count,
            "pages": [page.to_dict() for page in self.pages],
        }
