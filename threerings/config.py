"""
Tunable parameters of the clock. A single Configuration lives for the whole
session; UI events write to it between frames and the geometry engine reads it
once per frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

RGB = Tuple[int, int, int]

COLOR_SWATCHES = ("#FFFFFF", "#FC5800")
DEFAULT_ACTIVE_COLOR = COLOR_SWATCHES[1]

# Control ranges; orbit is expressed as fractions of the canvas size.
MIN_SIZE_RANGE = (4, 40, 1, 18)
MAX_SIZE_RANGE = (20, 120, 5, 70)
ORBIT_FRACTIONS = (0.1, 0.5, 1, 0.38)
RING_RATIO_PERCENT_RANGE = (20, 95, 1, 58)


def parse_hex_color(value: str) -> RGB:
    """
    Convert ``#RRGGBB`` (leading ``#`` optional) into an (r, g, b) triple.
    """
    text = value.strip()
    if text.startswith("#"):
        text = text[1:]
    if len(text) != 6:
        raise ValueError(f"expected a #RRGGBB colour, got {value!r}")
    try:
        return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
    except ValueError:
        raise ValueError(f"expected a #RRGGBB colour, got {value!r}") from None


def to_hex_color(rgb: Iterable[int]) -> str:
    r, g, b = (int(c) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


class Configuration:
    """
    Current values of the six clock parameters. Writes are not validated;
    out-of-range values simply produce unusual geometry.
    """

    def __init__(
        self,
        min_size: float,
        max_size: float,
        orbit: float,
        ring_ratio: float,
        show_inner_ring: bool = True,
        active_color: Iterable[int] = parse_hex_color(DEFAULT_ACTIVE_COLOR),
    ) -> None:
        self.min_size = min_size
        self.max_size = max_size
        self.orbit = orbit
        self.ring_ratio = ring_ratio
        self.show_inner_ring = bool(show_inner_ring)
        self.active_color: RGB = tuple(int(c) for c in active_color)  # type: ignore[assignment]

    @property
    def middle_ring_radius(self) -> float:
        return self.orbit * self.ring_ratio

    @property
    def inner_ring_radius(self) -> float:
        return self.orbit * self.ring_ratio / 2

    @property
    def ring_ratio_percent(self) -> int:
        return int(round(self.ring_ratio * 100))

    def set_ring_ratio_percent(self, percent: float) -> None:
        """The ring ratio control is an integer percentage."""
        self.ring_ratio = percent / 100

    @property
    def active_color_hex(self) -> str:
        return to_hex_color(self.active_color)

    def set_active_color_hex(self, value: str) -> None:
        self.active_color = parse_hex_color(value)

    def copy(self) -> Configuration:
        return Configuration(
            min_size=self.min_size,
            max_size=self.max_size,
            orbit=self.orbit,
            ring_ratio=self.ring_ratio,
            show_inner_ring=self.show_inner_ring,
            active_color=self.active_color,
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "minSize": self.min_size,
            "maxSize": self.max_size,
            "orbit": self.orbit,
            "ringRatio": self.ring_ratio,
            "showInnerRing": self.show_inner_ring,
            "activeColor": self.active_color_hex,
            "middleRingRadius": self.middle_ring_radius,
            "innerRingRadius": self.inner_ring_radius,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return (
            f"Configuration(min_size={self.min_size!r}, max_size={self.max_size!r}, "
            f"orbit={self.orbit!r}, ring_ratio={self.ring_ratio!r}, "
            f"show_inner_ring={self.show_inner_ring!r}, active_color={self.active_color!r})"
        )


@dataclass
class ControlSpec:
    name: str
    minimum: float
    maximum: float
    step: float
    default: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "min": self.minimum,
            "max": self.maximum,
            "step": self.step,
            "default": self.default,
        }


def control_specs(canvas_size: float) -> List[ControlSpec]:
    """Slider parameters for a canvas of the given size."""
    lo, hi, step, default = ORBIT_FRACTIONS
    return [
        ControlSpec("minSize", *MIN_SIZE_RANGE),
        ControlSpec("maxSize", *MAX_SIZE_RANGE),
        ControlSpec("orbit", canvas_size * lo, canvas_size * hi, step, canvas_size * default),
        ControlSpec("ringRatioPercent", *RING_RATIO_PERCENT_RANGE),
    ]


def default_configuration(canvas_size: float) -> Configuration:
    defaults = {spec.name: spec.default for spec in control_specs(canvas_size)}
    config = Configuration(
        min_size=defaults["minSize"],
        max_size=defaults["maxSize"],
        orbit=defaults["orbit"],
        ring_ratio=0.0,
        show_inner_ring=True,
        active_color=parse_hex_color(DEFAULT_ACTIVE_COLOR),
    )
    config.set_ring_ratio_percent(defaults["ringRatioPercent"])
    return config
