"""Renderable map primitives produced from decoded GeoJSON.

Every primitive owns its positions (tuples copied out of the decoded tree)
and carries style fields resolved once at creation time. The layer's bulk
setters mutate those fields in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from mapgeojson.colors import Color
from mapgeojson.nodes import Position


class PrimitiveKind(Enum):
    ICON = "icon"
    POLYLINE = "polyline"
    POLYGON = "polygon"


class AltitudeReference(Enum):
    """How the host should interpret position altitudes.

    ELLIPSOID: every position of the source geometry carried an altitude.
    SURFACE: at least one did not; altitudes are 0 and sit on the surface.
    """

    ELLIPSOID = "ellipsoid"
    SURFACE = "surface"


@dataclass
class IconPrimitive:
    """A point marker.

    Attributes:
        position: [lng, lat, alt] location.
        color: Marker color (simplestyle "marker-color").
        title: Optional label ("title" or "name" property).
        subtitle: Optional secondary label ("description" property).
        visible: Whether the host should draw it.
        altitude_reference: Interpretation of position.altitude.
        feature_id: "id" of the source Feature, if any.
    """

    position: Position
    color: Color
    title: str | None = None
    subtitle: str | None = None
    visible: bool = True
    altitude_reference: AltitudeReference = AltitudeReference.SURFACE
    feature_id: str | None = None

    kind = PrimitiveKind.ICON


@dataclass
class PolylinePrimitive:
    """An open path of two or more positions."""

    path: tuple[Position, ...]
    stroke_color: Color
    stroke_width: float
    stroke_dashed: bool = False
    visible: bool = True
    altitude_reference: AltitudeReference = AltitudeReference.SURFACE
    feature_id: str | None = None

    kind = PrimitiveKind.POLYLINE


@dataclass
class PolygonPrimitive:
    """A filled area: one exterior ring plus holes, drawn as a unit."""

    exterior_ring: tuple[Position, ...]
    holes: tuple[tuple[Position, ...], ...]
    fill_color: Color
    stroke_color: Color
    stroke_width: float
    stroke_dashed: bool = False
    visible: bool = True
    altitude_reference: AltitudeReference = AltitudeReference.SURFACE
    feature_id: str | None = None

    kind = PrimitiveKind.POLYGON

    @property
    def rings(self) -> tuple[tuple[Position, ...], ...]:
        return (self.exterior_ring, *self.holes)


MapPrimitive = Union[IconPrimitive, PolylinePrimitive, PolygonPrimitive]
