"""Reading and writing of texture atlas descriptors."""

from sprite_atlas.config import Config, load_config
from sprite_atlas.data import Atlas, Page, PixelFormat, Region, TextureFilter, Wrap
from sprite_atlas.errors import (
    AtlasError,
    AtlasFormatError,
    AtlasIOError,
    MalformedHeaderError,
    MalformedValueError,
    MissingFieldError,
    MissingNameError,
    UnknownTokenError,
)
from sprite_atlas.io import dumps, format_atlas, loads, parse_atlas, read_atlas, write_atlas
from sprite_atlas.lookup import find_region, release

__all__ = [
    "Atlas",
    "AtlasError",
    "AtlasFormatError",
    "AtlasIOError",
    "Config",
    "MalformedHeaderError",
    "MalformedValueError",
    "MissingFieldError",
    "MissingNameError",
    "Page",
    "PixelFormat",
    "Region",
    "TextureFilter",
    "UnknownTokenError",
    "Wrap",
    "dumps",
    "find_region",
    "format_atlas",
    "load_config",
    "loads",
    "parse_atlas",
    "read_atlas",
    "release",
    "write_atlas",
]
