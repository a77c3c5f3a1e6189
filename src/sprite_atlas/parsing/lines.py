"""Line-level tokenizing of atlas descriptors."""

from __future__ import annotations

from typing import Optional, Tuple

PAGE_DEPTH = 0
REGION_DEPTH = 2

_SEPARATOR = ":"
# Width of ": " between an attribute key and its value.
_SEPARATOR_WIDTH = 2


def strip_terminator(line: str) -> str:
    """Drop a trailing line terminator, if any."""

    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


def is_blank(line: Optional[str]) -> bool:
    """Return True for a line holding nothing but its terminator."""

    return line is not None and strip_terminator(line) == ""


def read_name(line: Optional[str]) -> Optional[str]:
    """Return a page/region name, or None for an empty or missing line."""

    if line is None:
        return None
    name = strip_terminator(line)
    return name or None


def parse_attribute(line: Optional[str], depth: int = PAGE_DEPTH) -> Optional[Tuple[str, str]]:
    """Split ``line`` into ``(key, value)`` if it is an attribute at ``depth``.

    ``depth`` is the number of leading spaces the line must carry. Returns None
    when the line is not a well-formed attribute line at that depth.
    """

    if line is None or len(line) < depth:
        return None
    if line[:depth] != " " * depth:
        return None

    content = strip_terminator(line[depth:])
    if not content:
        return None
    # Deeper indentation belongs to another block.
    if content[0].isspace():
        return None

    colon = content.find(_SEPARATOR)
    if colon < 0:
        return None
    return content[:colon], content[colon + _SEPARATOR_WIDTH:]
