"""Value codecs for atlas attributes."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Type, TypeVar

from sprite_atlas.data import PixelFormat, TextureFilter, Wrap
from sprite_atlas.errors import MalformedValueError, UnknownTokenError

E = TypeVar("E", bound=Enum)

_TRUE = "true"
_FALSE = "false"


def _lookup_table(enum_cls: Type[E]) -> Dict[str, E]:
    return {member.value: member for member in enum_cls}


_FORMATS = _lookup_table(PixelFormat)
_FILTERS = _lookup_table(TextureFilter)
_WRAPS = _lookup_table(Wrap)


def _decode(table: Dict[str, E], token: str, attribute: str) -> E:
    try:
        return table[token]
    except KeyError:
        raise UnknownTokenError(attribute, token) from None


def decode_format(token: str, attribute: str = "format") -> PixelFormat:
    return _decode(_FORMATS, token, attribute)


def encode_format(value: PixelFormat) -> str:
    return value.value


def decode_filter(token: str, attribute: str = "filter") -> TextureFilter:
    return _decode(_FILTERS, token, attribute)


def encode_filter(value: TextureFilter) -> str:
    return value.value


def decode_wrap(token: str, attribute: str = "repeat") -> Wrap:
    return _decode(_WRAPS, token, attribute)


def encode_wrap(value: Wrap) -> str:
    return value.value


def decode_bool(token: str, attribute: str) -> bool:
    if token == _TRUE:
        return True
    if token == _FALSE:
        return False
    raise MalformedValueError(attribute, token, "'true' or 'false'")


def encode_bool(value: bool) -> str:
    return _TRUE if value else _FALSE


def decode_ints(value: str, count: int, attribute: str) -> List[int]:
    """Decode exactly ``count`` comma-separated integers."""

    pieces = value.split(",")
    expected = f"{count} integer" + ("s" if count != 1 else "")
    if len(pieces) != count:
        raise MalformedValueError(attribute, value, expected)
    try:
        return [int(piece.strip(" \t")) for piece in pieces]
    except ValueError:
        raise MalformedValueError(attribute, value, expected) from None


def encode_ints(values: Iterable[int]) -> str:
    return ", ".join(str(int(v)) for v in values)
