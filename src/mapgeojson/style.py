"""Resolve simplestyle-like feature properties into concrete style attributes.

Recognised keys: marker-color, stroke, fill, fill-opacity, stroke-opacity,
stroke-width, stroke-dasharray and visible. Anything absent or malformed
falls back to the configured default; resolution never raises.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from loguru import logger

from mapgeojson.colors import Color, parse_color
from mapgeojson.config import Settings, settings as default_settings


@dataclass(frozen=True)
class StyleAttributes:
    """Visual attributes for every primitive produced from one feature."""

    icon_color: Color
    stroke_color: Color
    fill_color: Color
    stroke_width: float
    stroke_dashed: bool
    visible: bool


def resolve_style(
    properties: Mapping[str, Any] | None,
    settings: Settings | None = None,
) -> StyleAttributes:
    """Build StyleAttributes from a feature's properties.

    "marker-color" and "stroke" stand in for each other when only one is
    given: icons prefer "marker-color", strokes prefer "stroke".

    Args:
        properties: The feature's properties (None is treated as empty).
        settings: Defaults to use; the module-level settings when omitted.

    Returns:
        Fully populated StyleAttributes.
    """
    cfg = settings or default_settings
    props = properties or {}

    fill_opacity = _opacity(props, "fill-opacity", cfg.default_fill_opacity)
    stroke_opacity = _opacity(props, "stroke-opacity", cfg.default_stroke_opacity)

    marker = _color(props, "marker-color")
    stroke = _color(props, "stroke")
    fill = _color(props, "fill")
    fallback = parse_color(cfg.default_color)

    icon_color = marker or stroke or fallback
    stroke_color = (stroke or marker or fallback).with_alpha(stroke_opacity)
    fill_color = (fill or fallback).with_alpha(fill_opacity)

    return StyleAttributes(
        icon_color=icon_color,
        stroke_color=stroke_color,
        fill_color=fill_color,
        stroke_width=_stroke_width(props, cfg.default_stroke_width),
        stroke_dashed=props.get("stroke-dasharray") is not None,
        visible=_visible(props),
    )


def _color(props: Mapping[str, Any], key: str) -> Color | None:
    raw = props.get(key)
    if raw is None:
        return None
    try:
        return parse_color(raw)
    except ValueError:
        logger.debug(f"Ignoring malformed {key!r} value: {raw!r}")
        return None


def _number(props: Mapping[str, Any], key: str) -> float | None:
    raw = props.get(key)
    if raw is None:
        return None
    # bool is an int subclass but never a meaningful style number
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        logger.debug(f"Ignoring non-numeric {key!r} value: {raw!r}")
        return None
    try:
        value = float(raw)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        logger.debug(f"Ignoring non-finite {key!r} value: {raw!r}")
        return None
    return value


def _opacity(props: Mapping[str, Any], key: str, default: float) -> float:
    value = _number(props, key)
    if value is None:
        return default
    return min(max(value, 0.0), 1.0)


def _stroke_width(props: Mapping[str, Any], default: float) -> float:
    value = _number(props, "stroke-width")
    if value is None:
        return default
    return max(value, 0.0)


def _visible(props: Mapping[str, Any]) -> bool:
    raw = props.get("visible")
    if isinstance(raw, bool):
        return raw
    if raw is not None:
        logger.debug(f"Ignoring non-boolean 'visible' value: {raw!r}")
    return True
