"""Line tokenizing and value codecs."""

from sprite_atlas.parsing.lines import (
    PAGE_DEPTH,
    REGION_DEPTH,
    is_blank,
    parse_attribute,
    read_name,
    strip_terminator,
)
from sprite_atlas.parsing.tokens import (
    decode_bool,
    decode_filter,
    decode_format,
    decode_ints,
    decode_wrap,
    encode_bool,
    encode_filter,
    encode_format,
    encode_ints,
    encode_wrap,
)

__all__ = [
    "PAGE_DEPTH",
    "REGION_DEPTH",
    "decode_bool",
    "decode_filter",
    "decode_format",
    "decode_ints",
    "decode_wrap",
    "encode_bool",
    "encode_filter",
    "encode_format",
    "encode_ints",
    "encode_wrap",
    "is_blank",
    "parse_attribute",
    "read_name",
    "strip_terminator",
]
