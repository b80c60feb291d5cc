"""Parse GeoJSON (RFC 7946) text into a MapGeoJsonLayer.

parse() raises GeoJsonParseError on the first problem; parse_or_none() is
the legacy shape that hands back (None, error) instead of raising. Either
way a caller gets a fully built layer or no layer at all.
"""

from __future__ import annotations

import json

from loguru import logger

from mapgeojson.config import Settings, settings as default_settings
from mapgeojson.errors import ErrorKind, GeoJsonParseError
from mapgeojson.layer import MapGeoJsonLayer
from mapgeojson.parsers.decoder import decode
from mapgeojson.parsers.mapper import map_to_primitives


def parse(geojson: str | bytes, settings: Settings | None = None) -> MapGeoJsonLayer:
    """Parse a GeoJSON document into a layer of styled primitives.

    Args:
        geojson: GeoJSON text, as str or UTF-8 bytes.
        settings: Style defaults and validation options; the module-level
            settings when omitted.

    Returns:
        MapGeoJsonLayer holding every primitive in document order.

    Raises:
        TypeError: If geojson is not str or bytes.
        GeoJsonParseError: If the text is not JSON or not valid GeoJSON.
    """
    if not isinstance(geojson, (str, bytes, bytearray)):
        raise TypeError(f"GeoJSON input must be str or bytes, got {type(geojson).__name__}")

    cfg = settings or default_settings
    try:
        data = json.loads(geojson)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors too
        raise GeoJsonParseError(ErrorKind.SYNTAX, f"Invalid JSON: {e}") from e

    root = decode(data, cfg)
    primitives = map_to_primitives(root, settings=cfg)
    layer = MapGeoJsonLayer(primitives)
    logger.debug(f"Parsed GeoJSON {type(root).__name__}: {layer!r}")
    return layer


def parse_or_none(
    geojson: str | bytes, settings: Settings | None = None
) -> tuple[MapGeoJsonLayer | None, GeoJsonParseError | None]:
    """Parse without raising on invalid documents.

    Returns:
        (layer, None) on success, (None, error) on failure.
    """
    try:
        return parse(geojson, settings), None
    except GeoJsonParseError as e:
        logger.warning(f"GeoJSON parse failed: {e}")
        return None, e
