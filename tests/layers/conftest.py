"""Shared fixtures for GeoJSON layer tests."""

from __future__ import annotations

import json

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def mixed_collection() -> str:
    """FeatureCollection producing 2 icons, 3 polylines and 1 polygon, interleaved."""
    return json.dumps({
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [-122.4194, 37.7749]},
                "properties": {"name": "HQ"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "MultiLineString",
                    "coordinates": [
                        [[-122.4, 37.77], [-122.41, 37.78]],
                        [[-122.5, 37.7], [-122.51, 37.71]],
                    ],
                },
                "properties": {"name": "Patrol Routes", "stroke": "#ff0000"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [
                        [[-122.4, 37.77], [-122.41, 37.78], [-122.42, 37.77], [-122.4, 37.77]]
                    ],
                },
                "properties": {"name": "Zone Alpha", "fill": "#00ff00"},
            },
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [-122.3, 37.6]},
                "properties": {"name": "Gate"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[-122.0, 37.0], [-122.1, 37.1], [-122.2, 37.2]],
                },
                "properties": {"name": "Perimeter"},
            },
        ],
    })
