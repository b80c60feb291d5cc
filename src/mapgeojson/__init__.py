"""GeoJSON to map primitives.

Parses RFC 7946 GeoJSON into icons, polylines and polygons styled from
simplestyle feature properties, collected in a MapGeoJsonLayer that a host
map surface can restyle, filter and render.
"""

from mapgeojson.colors import Color, parse_color
from mapgeojson.config import Settings
from mapgeojson.errors import ErrorKind, GeoJsonParseError
from mapgeojson.layer import MapGeoJsonLayer
from mapgeojson.parsers import decode, map_to_primitives, parse, parse_or_none
from mapgeojson.primitives import (
    AltitudeReference,
    IconPrimitive,
    MapPrimitive,
    PolygonPrimitive,
    PolylinePrimitive,
    PrimitiveKind,
)
from mapgeojson.style import StyleAttributes, resolve_style

__all__ = [
    "AltitudeReference",
    "Color",
    "ErrorKind",
    "GeoJsonParseError",
    "IconPrimitive",
    "MapGeoJsonLayer",
    "MapPrimitive",
    "PolygonPrimitive",
    "PolylinePrimitive",
    "PrimitiveKind",
    "Settings",
    "StyleAttributes",
    "decode",
    "map_to_primitives",
    "parse",
    "parse_color",
    "parse_or_none",
    "resolve_style",
]
