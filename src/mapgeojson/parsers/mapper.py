"""Map decoded GeoJSON nodes to renderable primitives.

Traversal is depth-first in document order, so identical input always
yields primitives in the same order. Style is resolved once per feature and
copied onto every primitive that feature produces.

Altitudes: a geometry object whose positions all carry an altitude keeps
them (ELLIPSOID). If any position lacks one, the whole object is placed on
the surface and every altitude becomes 0. A Multi* geometry counts as a
single object; GeometryCollection members are judged separately.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from loguru import logger

from mapgeojson.config import Settings, settings as default_settings
from mapgeojson.nodes import (
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
from mapgeojson.primitives import (
    AltitudeReference,
    IconPrimitive,
    MapPrimitive,
    PolygonPrimitive,
    PolylinePrimitive,
)
from mapgeojson.style import StyleAttributes, resolve_style


def map_to_primitives(
    node: GeoJsonNode,
    inherited_properties: Mapping[str, Any] | None = None,
    settings: Settings | None = None,
) -> list[MapPrimitive]:
    """Produce primitives for a node and everything beneath it.

    Args:
        node: Any decoded GeoJSON node.
        inherited_properties: Properties applied to bare geometries (a
            Feature always uses its own properties instead).
        settings: Style and logging settings; module-level settings when omitted.

    Returns:
        Primitives in depth-first document order.
    """
    return _Mapper(settings or default_settings).node(node, inherited_properties or {})


class _Mapper:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._did_warn = False

    def node(self, node: GeoJsonNode, properties: Mapping[str, Any]) -> list[MapPrimitive]:
        if isinstance(node, FeatureCollection):
            primitives: list[MapPrimitive] = []
            for feature in node.features:
                primitives.extend(self.node(feature, properties))
            return primitives

        if isinstance(node, Feature):
            if node.geometry is None:
                return []
            style = resolve_style(node.properties, self._settings)
            return self.geometry(node.geometry, node.properties, style, node.feature_id)

        style = resolve_style(properties, self._settings)
        return self.geometry(node, properties, style, None)

    def geometry(
        self,
        geometry: Geometry,
        properties: Mapping[str, Any],
        style: StyleAttributes,
        feature_id: str | None,
    ) -> list[MapPrimitive]:
        if isinstance(geometry, Point):
            return self._icons([geometry.coordinates], properties, style, feature_id)

        if isinstance(geometry, MultiPoint):
            positions = [point.coordinates for point in geometry.points]
            return self._icons(positions, properties, style, feature_id)

        if isinstance(geometry, LineString):
            return self._polylines([geometry.coordinates], style, feature_id)

        if isinstance(geometry, MultiLineString):
            paths = [line.coordinates for line in geometry.lines]
            return self._polylines(paths, style, feature_id)

        if isinstance(geometry, Polygon):
            return self._polygons([geometry], style, feature_id)

        if isinstance(geometry, MultiPolygon):
            return self._polygons(list(geometry.polygons), style, feature_id)

        if isinstance(geometry, GeometryCollection):
            primitives: list[MapPrimitive] = []
            for member in geometry.geometries:
                primitives.extend(self.geometry(member, properties, style, feature_id))
            return primitives

        raise TypeError(f"Not a GeoJSON geometry node: {type(geometry).__name__}")

    # ------------------------------------------------------------------
    # Primitive factories
    # ------------------------------------------------------------------

    def _icons(
        self,
        positions: list[Position],
        properties: Mapping[str, Any],
        style: StyleAttributes,
        feature_id: str | None,
    ) -> list[MapPrimitive]:
        reference = self._reference(positions)
        title = _string(properties, "title") or _string(properties, "name")
        subtitle = _string(properties, "description")
        return [
            IconPrimitive(
                position=position,
                color=style.icon_color,
                title=title,
                subtitle=subtitle,
                visible=style.visible,
                altitude_reference=reference,
                feature_id=feature_id,
            )
            for position in _flatten(positions, reference)
        ]

    def _polylines(
        self,
        paths: list[tuple[Position, ...]],
        style: StyleAttributes,
        feature_id: str | None,
    ) -> list[MapPrimitive]:
        reference = self._reference(p for path in paths for p in path)
        return [
            PolylinePrimitive(
                path=_flatten(path, reference),
                stroke_color=style.stroke_color,
                stroke_width=style.stroke_width,
                stroke_dashed=style.stroke_dashed,
                visible=style.visible,
                altitude_reference=reference,
                feature_id=feature_id,
            )
            for path in paths
        ]

    def _polygons(
        self,
        polygons: list[Polygon],
        style: StyleAttributes,
        feature_id: str | None,
    ) -> list[MapPrimitive]:
        reference = self._reference(
            p for polygon in polygons for ring in polygon.rings for p in ring
        )
        return [
            PolygonPrimitive(
                exterior_ring=_flatten(polygon.exterior, reference),
                holes=tuple(_flatten(hole, reference) for hole in polygon.holes),
                fill_color=style.fill_color,
                stroke_color=style.stroke_color,
                stroke_width=style.stroke_width,
                stroke_dashed=style.stroke_dashed,
                visible=style.visible,
                altitude_reference=reference,
                feature_id=feature_id,
            )
            for polygon in polygons
        ]

    def _reference(self, positions: Iterable[Position]) -> AltitudeReference:
        if all(p.has_altitude for p in positions):
            return AltitudeReference.ELLIPSOID
        if self._settings.warn_on_surface_altitude and not self._did_warn:
            logger.warning(
                "Unless all positions in a geometry object contain an altitude, "
                "all altitudes are set to 0 at surface level for that object"
            )
            self._did_warn = True
        return AltitudeReference.SURFACE


def _flatten(
    positions: Iterable[Position], reference: AltitudeReference
) -> tuple[Position, ...]:
    if reference is AltitudeReference.SURFACE:
        return tuple(Position(p.longitude, p.latitude, 0.0) for p in positions)
    return tuple(positions)


def _string(properties: Mapping[str, Any], key: str) -> str | None:
    value = properties.get(key)
    return value if isinstance(value, str) and value else None
