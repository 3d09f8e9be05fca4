from typing import Any, Dict, List, Optional

from ..clock import TimeSample
from ..config import Configuration
from ..geometry import FrameGeometry, Marker
from .constants import (
    BACKGROUND,
    CENTER_DOT_DIAMETER,
    CENTER_DOT_FILL,
    FOOTER_FILL,
    FOOTER_MARGIN,
    FOOTER_SIZE,
    GUIDE_STROKE,
    GUIDE_STROKE_WEIGHT,
    TITLE_FILL,
    TITLE_SIZE,
    TITLE_TEXT,
    TITLE_Y,
)
from .status import status_line
from .styles import MarkerStyle, marker_style


def _circle(
    x: float,
    y: float,
    diameter: float,
    style: MarkerStyle,
    layer: str,
) -> Dict[str, Any]:
    return {
        "op": "circle",
        "layer": layer,
        "x": x,
        "y": y,
        "diameter": diameter,
        **style.as_dict(),
    }


def _text(text: str, x: float, y: float, size: float, fill: str, layer: str) -> Dict[str, Any]:
    return {"op": "text", "layer": layer, "text": text, "x": x, "y": y, "size": size, "fill": fill}


def _guide(cx: float, cy: float, radius: Optional[float], layer: str) -> Optional[Dict[str, Any]]:
    if radius is None:
        return None
    style = MarkerStyle(fill=None, stroke=GUIDE_STROKE, stroke_weight=GUIDE_STROKE_WEIGHT)
    return _circle(cx, cy, radius * 2, style, layer)


def _markers(markers: List[Marker], ring: str, color_hex: str) -> List[Dict[str, Any]]:
    return [
        _circle(m.x, m.y, m.diameter, marker_style(ring, m.is_active, color_hex), ring)
        for m in markers
    ]


def draw_list(
    geometry: FrameGeometry,
    config: Configuration,
    time: TimeSample,
    canvas_size: float,
) -> List[Dict[str, Any]]:
    """
    Ordered draw primitives for one frame, back to front. Text comes last so
    it sits above every circle.
    """
    cx, cy = geometry.center
    color_hex = config.active_color_hex
    radii = geometry.guide_radii

    commands: List[Dict[str, Any]] = [{"op": "background", "fill": BACKGROUND}]

    for radius, layer in ((radii.outer, "guide-outer"), (radii.middle, "guide-middle"), (radii.inner, "guide-inner")):
        guide = _guide(cx, cy, radius, layer)
        if guide is not None:
            commands.append(guide)

    commands.append(
        _circle(cx, cy, CENTER_DOT_DIAMETER, MarkerStyle(fill=CENTER_DOT_FILL), "center")
    )

    commands.extend(_markers(geometry.outer_markers, "outer", color_hex))
    commands.extend(_markers(geometry.middle_markers, "middle", color_hex))

    inner = geometry.inner_marker
    if inner is not None:
        commands.append(
            _circle(inner.x, inner.y, inner.diameter, marker_style("inner", True, color_hex), "inner")
        )

    commands.append(_text(TITLE_TEXT, cx, TITLE_Y, TITLE_SIZE, TITLE_FILL, "title"))
    commands.append(
        _text(status_line(time, config), cx, canvas_size - FOOTER_MARGIN, FOOTER_SIZE, FOOTER_FILL, "status")
    )
    return commands
