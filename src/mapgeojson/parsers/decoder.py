"""Decode a generic JSON tree (as produced by json.loads) into GeoJSON nodes.

Validation is fail-fast: the first structural problem raises
GeoJsonParseError carrying the JSON path of the node that failed, so a
layer is never built from a half-valid document.
"""

from __future__ import annotations

import math
from typing import Any

from mapgeojson.config import Settings, settings as default_settings
from mapgeojson.errors import ErrorKind, GeoJsonParseError
from mapgeojson.nodes import (
    GEOMETRY_TYPES,
    Feature,
    FeatureCollection,
    GeoJsonNode,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)

_KNOWN_TYPES = frozenset(GEOMETRY_TYPES) | {"Feature", "FeatureCollection"}

# Members RFC 7946 section 7.1 forbids on each kind of object
_FORBIDDEN_ON_GEOMETRY = ("geometry", "properties", "features")
_FORBIDDEN_ON_FEATURE = ("features",)
_FORBIDDEN_ON_COLLECTION = ("geometry", "properties", "coordinates", "geometries")


def decode(json_root: Any, settings: Settings | None = None) -> GeoJsonNode:
    """Decode a parsed JSON value into a typed GeoJSON node.

    Args:
        json_root: Output of json.loads (dicts, lists, str, numbers, None).
        settings: Validation settings; the module-level settings when omitted.

    Returns:
        A Feature, FeatureCollection or geometry node.

    Raises:
        GeoJsonParseError: On the first invalid node encountered.
    """
    return _Decoder(settings or default_settings).node(json_root, "$")


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class _Decoder:
    def __init__(self, settings: Settings) -> None:
        self._validate_ranges = settings.validate_coordinate_ranges

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def node(self, obj: Any, path: str) -> GeoJsonNode:
        type_name = self._type_of(obj, path)
        if type_name == "FeatureCollection":
            return self.feature_collection(obj, path)
        if type_name == "Feature":
            return self.feature(obj, path)
        return self.geometry(obj, path, type_name)

    def feature_collection(self, obj: dict, path: str) -> FeatureCollection:
        self._forbid(obj, path, "FeatureCollection", _FORBIDDEN_ON_COLLECTION)
        raw_features = self._member_array(obj, path, "features")

        features = []
        for idx, raw in enumerate(raw_features):
            sub = f"{path}.features[{idx}]"
            type_name = self._type_of(raw, sub)
            if type_name != "Feature":
                raise GeoJsonParseError(
                    ErrorKind.INVALID_TYPE,
                    f'GeoJSON features must have type "Feature", instead saw: "{type_name}"',
                    sub,
                )
            features.append(self.feature(raw, sub))
        return FeatureCollection(features=tuple(features))

    def feature(self, obj: dict, path: str) -> Feature:
        self._forbid(obj, path, "Feature", _FORBIDDEN_ON_FEATURE)

        if "geometry" not in obj:
            raise GeoJsonParseError(
                ErrorKind.MISSING_FIELD, 'Feature must have a "geometry" member', path
            )
        raw_geometry = obj["geometry"]
        geometry: Geometry | None = None
        if raw_geometry is not None:
            sub = f"{path}.geometry"
            type_name = self._type_of(raw_geometry, sub)
            if type_name not in GEOMETRY_TYPES:
                raise GeoJsonParseError(
                    ErrorKind.INVALID_TYPE,
                    f'Expected a GeoJSON Geometry type, instead saw: "{type_name}"',
                    sub,
                )
            geometry = self.geometry(raw_geometry, sub, type_name)

        properties = obj.get("properties")
        if properties is None:
            properties = {}
        elif not isinstance(properties, dict):
            raise GeoJsonParseError(
                ErrorKind.MISSING_FIELD,
                f'Feature "properties" must be an object or null, '
                f"instead saw: {_json_type(properties)}",
                f"{path}.properties",
            )

        feature_id = obj.get("id")
        if isinstance(feature_id, bool) or not isinstance(feature_id, (str, int, float)):
            feature_id = None
        elif not isinstance(feature_id, str):
            feature_id = str(feature_id)

        return Feature(geometry=geometry, properties=dict(properties), feature_id=feature_id)

    def geometry(self, obj: dict, path: str, type_name: str) -> Geometry:
        self._forbid(obj, path, type_name, _FORBIDDEN_ON_GEOMETRY)

        if type_name == "GeometryCollection":
            return self.geometry_collection(obj, path)

        if obj.get("coordinates") is None:
            raise GeoJsonParseError(
                ErrorKind.MALFORMED_COORDINATES,
                f'{type_name} must have a "coordinates" array',
                path,
            )
        coords = obj["coordinates"]
        cpath = f"{path}.coordinates"

        if type_name == "Point":
            return Point(coordinates=self.position(coords, cpath))
        if type_name == "MultiPoint":
            return MultiPoint(
                points=tuple(Point(coordinates=p) for p in self.positions(coords, cpath))
            )
        if type_name == "LineString":
            return self.line_string(coords, cpath)
        if type_name == "MultiLineString":
            lines = self._array(coords, cpath, "lines")
            return MultiLineString(
                lines=tuple(
                    self.line_string(line, f"{cpath}[{idx}]")
                    for idx, line in enumerate(lines)
                )
            )
        if type_name == "Polygon":
            return self.polygon(coords, cpath)
        if type_name == "MultiPolygon":
            polygons = self._array(coords, cpath, "polygons")
            return MultiPolygon(
                polygons=tuple(
                    self.polygon(rings, f"{cpath}[{idx}]")
                    for idx, rings in enumerate(polygons)
                )
            )
        raise GeoJsonParseError(
            ErrorKind.INVALID_TYPE, f'Unsupported geometry type: "{type_name}"', path
        )

    def geometry_collection(self, obj: dict, path: str) -> GeometryCollection:
        members = self._member_array(obj, path, "geometries")
        geometries = []
        for idx, raw in enumerate(members):
            sub = f"{path}.geometries[{idx}]"
            type_name = self._type_of(raw, sub)
            if type_name not in GEOMETRY_TYPES:
                raise GeoJsonParseError(
                    ErrorKind.INVALID_TYPE,
                    f'Expected a GeoJSON Geometry type, instead saw: "{type_name}"',
                    sub,
                )
            geometries.append(self.geometry(raw, sub, type_name))
        return GeometryCollection(geometries=tuple(geometries))

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    def line_string(self, value: Any, path: str) -> LineString:
        positions = self.positions(value, path)
        if len(positions) < 2:
            raise GeoJsonParseError(
                ErrorKind.MALFORMED_COORDINATES,
                f"LineString must contain at least 2 positions, instead saw: {len(positions)}",
                path,
            )
        return LineString(coordinates=positions)

    def polygon(self, value: Any, path: str) -> Polygon:
        raw_rings = self._array(value, path, "rings")
        if not raw_rings:
            raise GeoJsonParseError(
                ErrorKind.INVALID_RING, "Polygon must have an exterior ring", path
            )
        rings = []
        for idx, raw_ring in enumerate(raw_rings):
            ring_path = f"{path}[{idx}]"
            ring = self.positions(raw_ring, ring_path)
            _verify_ring(ring, ring_path)
            rings.append(ring)
        return Polygon(rings=tuple(rings))

    def positions(self, value: Any, path: str) -> tuple[Position, ...]:
        items = self._array(value, path, "positions")
        return tuple(self.position(item, f"{path}[{idx}]") for idx, item in enumerate(items))

    def position(self, value: Any, path: str) -> Position:
        if not isinstance(value, list):
            raise GeoJsonParseError(
                ErrorKind.MALFORMED_COORDINATES,
                f"Expected a position array, instead saw: {_json_type(value)}",
                path,
            )
        if len(value) not in (2, 3):
            raise GeoJsonParseError(
                ErrorKind.MALFORMED_COORDINATES,
                f"A position must have 2 or 3 numbers, instead saw: {len(value)}",
                path,
            )

        numbers = []
        for idx, component in enumerate(value):
            if isinstance(component, bool) or not isinstance(component, (int, float)):
                raise GeoJsonParseError(
                    ErrorKind.MALFORMED_COORDINATES,
                    f"Position components must be numbers, instead saw: {_json_type(component)}",
                    f"{path}[{idx}]",
                )
            try:
                number = float(component)
            except OverflowError:
                number = math.inf
            if not math.isfinite(number):
                raise GeoJsonParseError(
                    ErrorKind.MALFORMED_COORDINATES,
                    f"Position components must be finite, instead saw: {component}",
                    f"{path}[{idx}]",
                )
            numbers.append(number)

        position = Position(*numbers)
        if self._validate_ranges:
            if not -180.0 <= position.longitude <= 180.0:
                raise GeoJsonParseError(
                    ErrorKind.MALFORMED_COORDINATES,
                    f"Longitude must be in the range [-180, 180], instead saw: {position.longitude}",
                    path,
                )
            if not -90.0 <= position.latitude <= 90.0:
                raise GeoJsonParseError(
                    ErrorKind.MALFORMED_COORDINATES,
                    f"Latitude must be in the range [-90, 90], instead saw: {position.latitude}",
                    path,
                )
        return position

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _type_of(obj: Any, path: str) -> str:
        if not isinstance(obj, dict):
            raise GeoJsonParseError(
                ErrorKind.INVALID_TYPE,
                f"Expected a GeoJSON object, instead saw: {_json_type(obj)}",
                path,
            )
        type_name = obj.get("type")
        if type_name is None:
            raise GeoJsonParseError(
                ErrorKind.INVALID_TYPE, 'GeoJSON object must have a "type" member', path
            )
        if not isinstance(type_name, str):
            raise GeoJsonParseError(
                ErrorKind.INVALID_TYPE,
                f'"type" must be a string, instead saw: {_json_type(type_name)}',
                path,
            )
        if type_name not in _KNOWN_TYPES:
            raise GeoJsonParseError(
                ErrorKind.INVALID_TYPE, f'Unknown GeoJSON type: "{type_name}"', path
            )
        return type_name

    @staticmethod
    def _forbid(obj: dict, path: str, type_name: str, members: tuple[str, ...]) -> None:
        for member in members:
            if member in obj:
                raise GeoJsonParseError(
                    ErrorKind.UNEXPECTED_MEMBER,
                    f'{type_name} cannot have a "{member}" member',
                    path,
                )

    @staticmethod
    def _member_array(obj: dict, path: str, member: str) -> list:
        if member not in obj:
            raise GeoJsonParseError(
                ErrorKind.MISSING_FIELD, f'Missing required "{member}" member', path
            )
        value = obj[member]
        if not isinstance(value, list):
            raise GeoJsonParseError(
                ErrorKind.MISSING_FIELD,
                f'"{member}" must be an array, instead saw: {_json_type(value)}',
                f"{path}.{member}",
            )
        return value

    @staticmethod
    def _array(value: Any, path: str, what: str) -> list:
        if not isinstance(value, list):
            raise GeoJsonParseError(
                ErrorKind.MALFORMED_COORDINATES,
                f"Expected an array of {what}, instead saw: {_json_type(value)}",
                path,
            )
        return value


def _verify_ring(ring: tuple[Position, ...], path: str) -> None:
    if len(ring) < 4:
        raise GeoJsonParseError(
            ErrorKind.INVALID_RING,
            "Polygon ring must have at least 4 positions, and the first and last "
            f"position must be the same. Instead saw {len(ring)} positions",
            path,
        )
    first, last = ring[0], ring[-1]
    if (first.longitude, first.latitude, first.altitude or 0.0) != (
        last.longitude,
        last.latitude,
        last.altitude or 0.0,
    ):
        raise GeoJsonParseError(
            ErrorKind.INVALID_RING,
            "First and last position of each polygon ring must be the same. "
            f"Instead saw first: {_components(first)} last: {_components(last)}",
            path,
        )


def _components(position: Position) -> list[float]:
    return [c for c in position if c is not None]
