"""Typed GeoJSON tree produced by the decoder.

All coordinates follow GeoJSON convention: longitude first, latitude second,
optional altitude third. Nodes are frozen; the mapper copies what it needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Union


class Position(NamedTuple):
    """A single [lng, lat] or [lng, lat, alt] position."""

    longitude: float
    latitude: float
    altitude: float | None = None

    @property
    def has_altitude(self) -> bool:
        return self.altitude is not None


@dataclass(frozen=True)
class Point:
    coordinates: Position


@dataclass(frozen=True)
class MultiPoint:
    points: tuple[Point, ...]


@dataclass(frozen=True)
class LineString:
    """Two or more positions."""

    coordinates: tuple[Position, ...]


@dataclass(frozen=True)
class MultiLineString:
    lines: tuple[LineString, ...]


@dataclass(frozen=True)
class Polygon:
    """One exterior ring followed by zero or more holes.

    Each ring is closed (first == last) and holds at least 4 positions.
    """

    rings: tuple[tuple[Position, ...], ...]

    @property
    def exterior(self) -> tuple[Position, ...]:
        return self.rings[0]

    @property
    def holes(self) -> tuple[tuple[Position, ...], ...]:
        return self.rings[1:]


@dataclass(frozen=True)
class MultiPolygon:
    polygons: tuple[Polygon, ...]


@dataclass(frozen=True)
class GeometryCollection:
    geometries: tuple[Geometry, ...]


@dataclass(frozen=True)
class Feature:
    """A geometry (or none) plus free-form properties.

    Attributes:
        geometry: Any geometry node, never a Feature or FeatureCollection.
        properties: The feature's "properties" object ({} when null or absent).
        feature_id: The optional "id" member, stringified.
    """

    geometry: Geometry | None
    properties: dict[str, Any] = field(default_factory=dict)
    feature_id: str | None = None


@dataclass(frozen=True)
class FeatureCollection:
    features: tuple[Feature, ...]


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]

GeoJsonNode = Union[Geometry, Feature, FeatureCollection]

GEOMETRY_TYPES: dict[str, type] = {
    "Point": Point,
    "MultiPoint": MultiPoint,
    "LineString": LineString,
    "MultiLineString": MultiLineString,
    "Polygon": Polygon,
    "MultiPolygon": MultiPolygon,
    "GeometryCollection": GeometryCollection,
}
