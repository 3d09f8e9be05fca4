"""
Wall-clock sampling. One TimeSample is taken per frame and never changes
while that frame is computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TimeSample:
    hour12: int
    minute: int
    second: int
    # Only used by the status readout.
    hour24: Optional[int] = None

    @classmethod
    def from_hms(cls, hour: int, minute: int, second: int) -> TimeSample:
        hour = int(hour)
        return cls(hour12=hour % 12, minute=int(minute), second=int(second), hour24=hour)

    @property
    def display_hour(self) -> int:
        return self.hour24 if self.hour24 is not None else self.hour12

    def as_dict(self) -> Dict[str, Any]:
        return {
            "hour12": self.hour12,
            "minute": self.minute,
            "second": self.second,
            "hour24": self.hour24,
        }


def sample_time(now: Optional[datetime] = None) -> TimeSample:
    """Read local time (or ``now``) and fold the hour onto the 12-hour face."""
    if now is None:
        now = datetime.now()
    return TimeSample.from_hms(now.hour, now.minute, now.second)
