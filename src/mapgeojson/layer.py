"""MapGeoJsonLayer: the ordered set of primitives produced by a parse.

Bulk setters change only the primitives held when they are called; later
additions keep their own resolved style. Removal by kind is a single pass
that keeps the relative order of both the removed and the remaining
primitives.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from loguru import logger

from mapgeojson.colors import Color, parse_color
from mapgeojson.primitives import (
    IconPrimitive,
    MapPrimitive,
    PolygonPrimitive,
    PolylinePrimitive,
    PrimitiveKind,
)


class MapGeoJsonLayer:
    """Insertion-ordered container of icons, polylines and polygons."""

    def __init__(self, primitives: Iterable[MapPrimitive] | None = None) -> None:
        self._primitives: list[MapPrimitive] = list(primitives or [])

    def __len__(self) -> int:
        return len(self._primitives)

    def __iter__(self) -> Iterator[MapPrimitive]:
        return iter(list(self._primitives))

    def __repr__(self) -> str:
        return (
            f"MapGeoJsonLayer(icons={len(self.icons)}, "
            f"polylines={len(self.polylines)}, polygons={len(self.polygons)})"
        )

    def add(self, primitive: MapPrimitive) -> None:
        """Append a primitive to the end of the layer."""
        self._primitives.append(primitive)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def primitives(self) -> list[MapPrimitive]:
        """All primitives in insertion order (a new list)."""
        return list(self._primitives)

    @property
    def icons(self) -> list[IconPrimitive]:
        return self._of_kind(PrimitiveKind.ICON)

    @property
    def polylines(self) -> list[PolylinePrimitive]:
        return self._of_kind(PrimitiveKind.POLYLINE)

    @property
    def polygons(self) -> list[PolygonPrimitive]:
        return self._of_kind(PrimitiveKind.POLYGON)

    # ------------------------------------------------------------------
    # Bulk style
    # ------------------------------------------------------------------

    def set_fill_color(self, color: Color | str) -> None:
        """Set the fill color of every polygon in the layer.

        Raises:
            ValueError: If color is a string that is not a valid color.
        """
        fill = _as_color(color)
        for primitive in self._primitives:
            if isinstance(primitive, PolygonPrimitive):
                primitive.fill_color = fill

    def set_stroke_color(self, color: Color | str) -> None:
        """Set the color used to draw polylines and outline polygons."""
        stroke = _as_color(color)
        for primitive in self._stroked():
            primitive.stroke_color = stroke

    def set_stroke_dashed(self, dashed: bool) -> None:
        """Set whether polyline and polygon outlines are dashed."""
        for primitive in self._stroked():
            primitive.stroke_dashed = dashed

    def set_stroke_width(self, width: float) -> None:
        """Set the line width of polylines and polygon outlines.

        Raises:
            ValueError: If width is negative or not finite.
        """
        if not math.isfinite(width) or width < 0:
            raise ValueError(f"Stroke width must be a finite number >= 0, got {width}")
        for primitive in self._stroked():
            primitive.stroke_width = width

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def set_polygons_visible(self, visible: bool) -> None:
        self._set_visible(PrimitiveKind.POLYGON, visible)

    def set_polylines_visible(self, visible: bool) -> None:
        self._set_visible(PrimitiveKind.POLYLINE, visible)

    def set_icons_visible(self, visible: bool) -> None:
        self._set_visible(PrimitiveKind.ICON, visible)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove_polygons(self) -> list[PolygonPrimitive]:
        """Remove all polygons from the layer and return them in order."""
        return self._remove(PrimitiveKind.POLYGON)

    def remove_polylines(self) -> list[PolylinePrimitive]:
        """Remove all polylines from the layer and return them in order."""
        return self._remove(PrimitiveKind.POLYLINE)

    def remove_icons(self) -> list[IconPrimitive]:
        """Remove all icons from the layer and return them in order."""
        return self._remove(PrimitiveKind.ICON)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _of_kind(self, kind: PrimitiveKind) -> list:
        return [p for p in self._primitives if p.kind is kind]

    def _stroked(self) -> list[PolylinePrimitive | PolygonPrimitive]:
        return [
            p for p in self._primitives
            if isinstance(p, (PolylinePrimitive, PolygonPrimitive))
        ]

    def _set_visible(self, kind: PrimitiveKind, visible: bool) -> None:
        for primitive in self._primitives:
            if primitive.kind is kind:
                primitive.visible = visible

    def _remove(self, kind: PrimitiveKind) -> list:
        removed: list[MapPrimitive] = []
        kept: list[MapPrimitive] = []
        for primitive in self._primitives:
            (removed if primitive.kind is kind else kept).append(primitive)
        self._primitives = kept
        logger.debug(f"Removed {len(removed)} {kind.value} primitives from layer")
        return removed


def _as_color(color: Color | str) -> Color:
    if isinstance(color, Color):
        return color
    return parse_color(color)
