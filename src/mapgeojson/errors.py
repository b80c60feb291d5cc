"""Parse errors raised by the GeoJSON decoder and parser entry points."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of the first validation problem found in a document."""

    SYNTAX = "syntax"
    INVALID_TYPE = "invalid_type"
    MALFORMED_COORDINATES = "malformed_coordinates"
    INVALID_RING = "invalid_ring"
    MISSING_FIELD = "missing_field"
    UNEXPECTED_MEMBER = "unexpected_member"


class GeoJsonParseError(Exception):
    """Raised when a GeoJSON document cannot be turned into a layer.

    Attributes:
        kind: The ErrorKind of the failure.
        path: JSON path of the offending node, e.g. "$.features[2].geometry".
        message: Human-readable description without the path prefix.
    """

    def __init__(self, kind: ErrorKind, message: str, path: str = "$") -> None:
        super().__init__(f"{path}: {message}")
        self.kind = kind
        self.path = path
        self.message = message
