"""
Pure geometry for one clock frame: (time, configuration, canvas size) ->
FrameGeometry. Angles are in degrees, zero points right and angles grow
clockwise in screen space; every ring is rotated by -90 so index 0 sits at
the top of the face.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .clock import TimeSample
from .config import Configuration

NUM_HOURS = 12
NUM_MINUTES = 60
ANGLE_OFFSET = -90.0
# Growth drivers run 0..59 and must reach full size at 59.
GROWTH_DIVISOR = 59.0


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def cos_deg(angle: float) -> float:
    return math.cos(math.radians(angle))


def sin_deg(angle: float) -> float:
    return math.sin(math.radians(angle))


def polar_to_xy(cx: float, cy: float, radius: float, angle_deg: float) -> Tuple[float, float]:
    return cx + radius * cos_deg(angle_deg), cy + radius * sin_deg(angle_deg)


def ring_angles(count: int) -> np.ndarray:
    """Angles of ``count`` evenly spaced markers, index 0 at the top."""
    return np.arange(count, dtype=float) * (360.0 / count) + ANGLE_OFFSET


def growth_fraction(driver: int) -> float:
    return driver / GROWTH_DIVISOR


@dataclass(frozen=True)
class Marker:
    x: float
    y: float
    diameter: float
    is_active: bool

    def as_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "diameter": self.diameter, "isActive": self.is_active}


@dataclass(frozen=True)
class InnerMarker:
    x: float
    y: float
    diameter: float

    def as_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "diameter": self.diameter}


@dataclass(frozen=True)
class GuideRadii:
    outer: float
    middle: float
    inner: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        return {"outer": self.outer, "middle": self.middle, "inner": self.inner}


@dataclass(frozen=True)
class FrameGeometry:
    center: Tuple[float, float]
    outer_markers: List[Marker]
    middle_markers: List[Marker]
    inner_marker: Optional[InnerMarker]
    guide_radii: GuideRadii

    @property
    def active_outer(self) -> Optional[Marker]:
        return next((m for m in self.outer_markers if m.is_active), None)

    @property
    def active_middle(self) -> Optional[Marker]:
        return next((m for m in self.middle_markers if m.is_active), None)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "center": list(self.center),
            "outerMarkers": [m.as_dict() for m in self.outer_markers],
            "middleMarkers": [m.as_dict() for m in self.middle_markers],
            "innerMarker": self.inner_marker.as_dict() if self.inner_marker else None,
            "guideRadii": self.guide_radii.as_dict(),
        }


def ring_markers(
    count: int,
    center: Tuple[float, float],
    radius: float,
    current_index: int,
    growth_driver: int,
    min_size: float,
    max_size: float,
) -> List[Marker]:
    """
    Lay out one ring. Only the marker at ``current_index`` grows, from
    ``min_size`` at driver 0 to ``max_size`` at driver 59.
    """
    cx, cy = center
    radians = np.radians(ring_angles(count))
    xs = cx + radius * np.cos(radians)
    ys = cy + radius * np.sin(radians)
    active = np.arange(count) == current_index

    active_diameter = lerp(min_size, max_size, growth_fraction(growth_driver))
    diameters = np.where(active, active_diameter, min_size)

    return [
        Marker(x=float(x), y=float(y), diameter=float(d), is_active=bool(a))
        for x, y, d, a in zip(xs, ys, diameters, active)
    ]


def compute_frame(time: TimeSample, config: Configuration, canvas_size: float) -> FrameGeometry:
    center = (canvas_size / 2, canvas_size / 2)
    middle_r = config.middle_ring_radius
    inner_r = config.inner_ring_radius

    outer = ring_markers(
        NUM_HOURS, center, config.orbit, time.hour12, time.minute,
        config.min_size, config.max_size,
    )
    middle = ring_markers(
        NUM_MINUTES, center, middle_r, time.minute, time.second,
        config.min_size, config.max_size,
    )

    inner_marker: Optional[InnerMarker] = None
    inner_guide: Optional[float] = None
    if config.show_inner_ring:
        # One revolution per minute: 6 degrees per second.
        angle = time.second * (360.0 / NUM_MINUTES) + ANGLE_OFFSET
        x, y = polar_to_xy(center[0], center[1], inner_r, angle)
        inner_marker = InnerMarker(x=x, y=y, diameter=config.min_size)
        inner_guide = inner_r

    return FrameGeometry(
        center=center,
        outer_markers=outer,
        middle_markers=middle,
        inner_marker=inner_marker,
        guide_radii=GuideRadii(outer=config.orbit, middle=middle_r, inner=inner_guide),
    )
