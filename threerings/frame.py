"""
Turn request payloads into engine inputs: merge the requested configuration
onto the defaults and sample (or pin) the time for the frame.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .clock import TimeSample, sample_time
from .config import Configuration, default_configuration


def configuration_from_payload(
    payload: Optional[Dict[str, Any]], canvas_size: float
) -> Configuration:
    """
    Apply a partial mapping of camelCase configuration values onto the
    defaults for ``canvas_size``. Missing or null keys keep their default.
    """
    config = default_configuration(canvas_size)
    if not payload:
        return config

    if payload.get("minSize") is not None:
        config.min_size = payload["minSize"]
    if payload.get("maxSize") is not None:
        config.max_size = payload["maxSize"]
    if payload.get("orbit") is not None:
        config.orbit = payload["orbit"]
    if payload.get("ringRatioPercent") is not None:
        config.set_ring_ratio_percent(payload["ringRatioPercent"])
    if payload.get("ringRatio") is not None:
        config.ring_ratio = payload["ringRatio"]
    if payload.get("showInnerRing") is not None:
        config.show_inner_ring = bool(payload["showInnerRing"])
    if payload.get("activeColor") is not None:
        config.set_active_color_hex(payload["activeColor"])
    return config


def time_from_payload(payload: Optional[Dict[str, Any]]) -> TimeSample:
    if not payload:
        return sample_time()
    return TimeSample.from_hms(
        payload.get("hour") or 0,
        payload.get("minute") or 0,
        payload.get("second") or 0,
    )

