"""Atlas descriptor reading."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from sprite_atlas.config.schema import Config
from sprite_atlas.data import Atlas, Page, PixelFormat, Region, TextureFilter, Wrap
from sprite_atlas.errors import (
    AtlasError,
    AtlasIOError,
    MalformedHeaderError,
    MalformedValueError,
    MissingFieldError,
    MissingNameError,
)
from sprite_atlas.parsing import (
    PAGE_DEPTH,
    REGION_DEPTH,
    decode_bool,
    decode_filter,
    decode_format,
    decode_ints,
    decode_wrap,
    is_blank,
    parse_attribute,
    read_name,
    strip_terminator,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class _LineCursor:
    """Hands out lines one at a time; None marks the end of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.line_number = 0

    def next(self) -> Optional[str]:
        line = next(self._lines, None)
        if line is not None:
            self.line_number += 1
        return line


@dataclass
class _PageDraft:
    """Page fields collected while its attribute block is being read."""

    name: str
    resolved_path: Path
    line_number: int
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[PixelFormat] = None
    min_filter: Optional[TextureFilter] = None
    mag_filter: Optional[TextureFilter] = None
    wrap: Optional[Wrap] = None

    def build(self) -> Page:
        """Return the finished page, or raise for the first unset field."""

        if self.width is None or self.height is None:
            raise MissingFieldError("size", page=self.name, line_number=self.line_number)
        if self.format is None:
            raise MissingFieldError("format", page=self.name, line_number=self.line_number)
        if self.wrap is None:
            raise MissingFieldError("repeat", page=self.name, line_number=self.line_number)
        if self.min_filter is None or self.mag_filter is None:
            raise MissingFieldError("filter", page=self.name, line_number=self.line_number)
        return Page(
            name=self.name,
            width=self.width,
            height=self.height,
            format=self.format,
            min_filter=self.min_filter,
            mag_filter=self.mag_filter,
            wrap=self.wrap,
            resolved_path=self.resolved_path,
        )


def _apply_page_attribute(draft: _PageDraft, key: str, value: str, config: Config) -> None:
    if key == "size":
        width, height = decode_ints(value, 2, key)
        draft.width = width
        draft.height = width if config.legacy_page_size else height
    elif key == "format":
        draft.format = decode_format(value, key)
    elif key == "filter":
        min_token, separator, mag_token = value.partition(",")
        if not separator:
            raise MalformedValueError(key, value, "two comma-separated filter tokens")
        if mag_token[:1].isspace():
            mag_token = mag_token[1:]
        draft.min_filter = decode_filter(min_token, key)
        draft.mag_filter = decode_filter(strip_terminator(mag_token), key)
    elif key == "repeat":
        draft.wrap = decode_wrap(value, key)
    else:
        logger.debug("Ignoring unknown page attribute '%s' on page '%s'", key, draft.name)


def _apply_region_attribute(region: Region, key: str, value: str) -> None:
    if key == "rotate":
        region.rotated = decode_bool(value, key)
    elif key == "xy":
        region.x, region.y = decode_ints(value, 2, key)
    elif key == "size":
        region.width, region.height = decode_ints(value, 2, key)
    elif key == "orig":
        region.original_width, region.original_height = decode_ints(value, 2, key)
    elif key == "offset":
        region.offset_x, region.offset_y = decode_ints(value, 2, key)
    elif key == "index":
        (region.index,) = decode_ints(value, 1, key)
    elif key == "split":
        region.splits = tuple(decode_ints(value, 4, key))
    elif key == "pad":
        region.pads = tuple(decode_ints(value, 4, key))
    else:
        logger.debug("Ignoring unknown region attribute '%s' on region '%s'", key, region.name)


class _AtlasParser:
    """Single-pass state machine turning descriptor lines into an Atlas."""

    def __init__(self, lines: Iterable[str], source_path: Path, config: Config) -> None:
        self.cursor = _LineCursor(lines)
        self.filename = str(source_path)
        self.base_dir = source_path.resolve().parent
        self.config = config
        self.page_name: Optional[str] = None
        self.region_name: Optional[str] = None

    def parse(self) -> Atlas:
        try:
            return self._parse()
        except AtlasError as exc:
            exc.add_context(
                filename=self.filename,
                line_number=self.cursor.line_number,
                page=self.page_name,
                region=self.region_name,
            )
            raise

    def _parse(self) -> Atlas:
        header = self.cursor.next()
        if not is_blank(header):
            raise MalformedHeaderError("Expected atlas file to start with an empty line")

        atlas = Atlas()
        page_name = read_name(self.cursor.next())
        if page_name is None:
            raise MissingNameError("Could not find page name")

        while page_name is not None:
            self.page_name = page_name
            self.region_name = None
            page, line = self._read_page(page_name)
            atlas.add_page(page)
            logger.debug("Read page '%s' (%dx%d)", page.name, page.width, page.height)

            line = self._read_regions(page, line)
            if line is None:
                break
            page_name = read_name(self.cursor.next())

        return atlas

    def _read_page(self, name: str) -> Tuple[Page, Optional[str]]:
        """Read the page attribute block; returns the page and the first line after it."""

        draft = _PageDraft(
            name=name,
            resolved_path=self.base_dir / name,
            line_number=self.cursor.line_number,
        )
        line = self.cursor.next()
        attribute = parse_attribute(line, PAGE_DEPTH)
        while attribute is not None:
            key, value = attribute
            _apply_page_attribute(draft, key, value, self.config)
            line = self.cursor.next()
            attribute = parse_attribute(line, PAGE_DEPTH)
        return draft.build(), line

    def _read_regions(self, page: Page, line: Optional[str]) -> Optional[str]:
        """Read regions starting at ``line``; returns the blank line or None that ended the page."""

        region_name = read_name(line)
        while region_name is not None:
            self.region_name = region_name
            region = Region(name=region_name)
            line = self.cursor.next()
            attribute = parse_attribute(line, REGION_DEPTH)
            while attribute is not None:
                key, value = attribute
                _apply_region_attribute(region, key, value)
                line = self.cursor.next()
                attribute = parse_attribute(line, REGION_DEPTH)
            page.add_region(region)

            if line is None or is_blank(line):
                break
            region_name = read_name(line)
        self.region_name = None
        return line


def parse_atlas(
    lines: Iterable[str],
    source_path: PathLike,
    config: Optional[Config] = None,
) -> Atlas:
    """Parse descriptor lines into an Atlas.

    ``source_path`` is the descriptor's location; page images resolve
    relative to its directory.
    """

    return _AtlasParser(lines, Path(source_path), config or Config()).parse()


def loads(text: str, source_path: PathLike = "atlas.atlas", config: Optional[Config] = None) -> Atlas:
    """Parse descriptor text held in memory."""

    return parse_atlas(io.StringIO(text, newline=None), source_path, config)


def read_atlas(path: PathLike, config: Optional[Config] = None) -> Atlas:
    """Read an atlas descriptor from disk."""

    config = config or Config()
    path = Path(path)
    if config.legacy_page_size:
        logger.warning("Reading %s with legacy page size handling", path)

    try:
        handle = path.open("r", encoding=config.encoding)
    except LookupError as exc:
        raise AtlasIOError(f"Unknown encoding '{config.encoding}'", filename=str(path)) from exc
    except OSError as exc:
        raise AtlasIOError(
            f"Could not open atlas file: {exc.strerror or exc}", filename=str(path)
        ) from exc

    with handle:
        try:
            atlas = parse_atlas(handle, path, config)
        except UnicodeDecodeError as exc:
            raise AtlasIOError(
                f"Could not decode atlas file as {config.encoding}", filename=str(path)
            ) from exc

    logger.info(
        "Read %s (%d pages, %d regions)",
        path,
        atlas.page_count,
        sum(len(page.regions) for page in atlas.pages),
    )
    return atlas
