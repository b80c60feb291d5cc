"""GeoJSON decoding, primitive mapping and parse entry points."""

from mapgeojson.parsers.decoder import decode
from mapgeojson.parsers.geojson import parse, parse_or_none
from mapgeojson.parsers.mapper import map_to_primitives

__all__ = ["decode", "map_to_primitives", "parse", "parse_or_none"]
