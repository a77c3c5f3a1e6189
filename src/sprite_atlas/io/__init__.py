"""Descriptor I/O."""

from sprite_atlas.io.reader import loads, parse_atlas, read_atlas
from sprite_atlas.io.writer import dumps, format_atlas, write_atlas

__all__ = ["dumps", "format_atlas", "loads", "parse_atlas", "read_atlas", "write_atlas"]
