from dataclasses import dataclass
from typing import Any, Dict, Optional

from .constants import BACKGROUND, INACTIVE_STROKE, INACTIVE_STROKE_WEIGHT


@dataclass(frozen=True)
class MarkerStyle:
    fill: Optional[str]
    stroke: Optional[str] = None
    stroke_weight: float = 0.0

    @property
    def visible(self) -> bool:
        return self.fill is not None or self.stroke is not None

    def as_dict(self) -> Dict[str, Any]:
        return {"fill": self.fill, "stroke": self.stroke, "strokeWeight": self.stroke_weight}


OUTER_INACTIVE = MarkerStyle(fill=BACKGROUND, stroke=INACTIVE_STROKE, stroke_weight=INACTIVE_STROKE_WEIGHT)
# Inactive minute markers keep their slot but draw nothing.
MIDDLE_INACTIVE = MarkerStyle(fill=None)


def active_style(color_hex: str) -> MarkerStyle:
    """Active markers are filled with the chosen colour and have no outline."""
    return MarkerStyle(fill=color_hex)


def marker_style(ring: str, is_active: bool, color_hex: str) -> MarkerStyle:
    if is_active or ring == "inner":
        return active_style(color_hex)
    if ring == "outer":
        return OUTER_INACTIVE
    return MIDDLE_INACTIVE
