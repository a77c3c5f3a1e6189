"""Failure types raised while reading or writing atlas descriptors."""

from __future__ import annotations

from typing import Any, Optional


class AtlasError(Exception):
    """Base class for every atlas read/write failure.

    Context attributes are filled in as the error travels up through the
    reader, so the message names the file, line, page and region when known.
    """

    def __init__(
        self,
        message: str,
        *,
        filename: Optional[str] = None,
        line_number: Optional[int] = None,
        page: Optional[str] = None,
        region: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.line_number = line_number
        self.page = page
        self.region = region

    def add_context(
        self,
        filename: Optional[str] = None,
        line_number: Optional[int] = None,
        page: Optional[str] = None,
        region: Optional[str] = None,
    ) -> "AtlasError":
        """Fill in context fields that are still unset."""

        if self.filename is None:
            self.filename = filename
        if self.line_number is None:
            self.line_number = line_number
        if self.page is None:
            self.page = page
        if self.region is None:
            self.region = region
        return self

    def __str__(self) -> str:
        parts = []
        if self.filename is not None:
            parts.append(f"file '{self.filename}'")
        if self.line_number is not None:
            parts.append(f"line {self.line_number}")
        if self.page is not None:
            parts.append(f"page '{self.page}'")
        if self.region is not None:
            parts.append(f"region '{self.region}'")
        if not parts:
            return self.message
        return f"{self.message} ({', '.join(parts)})"


class AtlasIOError(AtlasError):
    """The descriptor could not be opened, decoded or created."""


class AtlasFormatError(AtlasError, ValueError):
    """The descriptor text does not follow the atlas grammar."""


class MalformedHeaderError(AtlasFormatError):
    """The descriptor does not start with the required empty line."""


class MissingNameError(AtlasFormatError):
    """A page block has no name line."""


class MissingFieldError(AtlasFormatError):
    """A mandatory page attribute was absent from its attribute block."""

    def __init__(self, field: str, **context: Any) -> None:
        super().__init__(f"'{field}' value not properly set", **context)
        self.field = field


class UnknownTokenError(AtlasFormatError):
    """An enumeration token is not part of its vocabulary."""

    def __init__(self, attribute: str, token: str, **context: Any) -> None:
        super().__init__(f"Unknown '{attribute}' token value: '{token}'", **context)
        self.attribute = attribute
        self.token = token


class MalformedValueError(AtlasFormatError):
    """A value does not decode into the expected integers or boolean."""

    def __init__(self, attribute: str, value: str, expected: str, **context: Any) -> None:
        super().__init__(f"Could not read {expected} from '{attribute}' value: '{value}'", **context)
        self.attribute = attribute
        self.value = value
