"""Atlas descriptor writing."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from sprite_atlas.config.schema import Config
from sprite_atlas.data import Atlas, Page, Region
from sprite_atlas.errors import AtlasIOError
from sprite_atlas.parsing import encode_bool, encode_filter, encode_format, encode_ints, encode_wrap

logger = logging.getLogger(__name__)

_INDENT = "  "


def _page_lines(page: Page) -> List[str]:
    return [
        "",
        page.name,
        f"size: {encode_ints((page.width, page.height))}",
        f"format: {encode_format(page.format)}",
        f"filter: {encode_filter(page.min_filter)},{encode_filter(page.mag_filter)}",
        f"repeat: {encode_wrap(page.wrap)}",
    ]


def _region_lines(region: Region) -> List[str]:
    attributes = [
        ("rotate", encode_bool(region.rotated)),
        ("xy", encode_ints((region.x, region.y))),
        ("size", encode_ints((region.width, region.height))),
    ]
    if region.splits is not None:
        attributes.append(("split", encode_ints(region.splits)))
    if region.pads is not None:
        attributes.append(("pad", encode_ints(region.pads)))
    attributes.extend(
        [
            ("orig", encode_ints((region.original_width, region.original_height))),
            ("offset", encode_ints((region.offset_x, region.offset_y))),
            ("index", str(region.index)),
        ]
    )
    return [region.name] + [f"{_INDENT}{key}: {value}" for key, value in attributes]


def format_atlas(atlas: Atlas) -> str:
    """Render an Atlas in the canonical descriptor layout."""

    lines: List[str] = []
    for page in atlas.pages:
        lines.extend(_page_lines(page))
        for region in page.regions:
            lines.extend(_region_lines(region))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


dumps = format_atlas


def write_atlas(atlas: Atlas, path: Union[str, Path], config: Optional[Config] = None) -> None:
    """Write an Atlas to ``path``, replacing any existing file.

    The text is encoded and written to a temporary sibling first, then moved
    over ``path``; on failure the destination is left untouched.
    """

    config = config or Config()
    path = Path(path)
    try:
        data = format_atlas(atlas).encode(config.encoding)
    except (LookupError, UnicodeEncodeError) as exc:
        raise AtlasIOError(
            f"Could not encode atlas as {config.encoding}: {exc}", filename=str(path)
        ) from exc

    try:
        fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        raise AtlasIOError(
            f"Could not write atlas file: {exc.strerror or exc}", filename=str(path)
        ) from exc

    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(temp_name, path)
    except OSError as exc:
        os.unlink(temp_name)
        raise AtlasIOError(
            f"Could not write atlas file: {exc.strerror or exc}", filename=str(path)
        ) from exc
    logger.info("Wrote %s (%d pages)", path, atlas.page_count)