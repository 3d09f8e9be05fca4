from ..clock import TimeSample
from ..config import Configuration


def format_number(value: float) -> str:
    """Integral values print without a decimal part, like the slider readout."""
    if abs(value - round(value)) < 1e-9:
        return str(int(round(value)))
    return f"{value:g}"


def clock_text(time: TimeSample) -> str:
    return f"{time.display_hour:02d}:{time.minute:02d}:{time.second:02d}"


def status_line(time: TimeSample, config: Configuration) -> str:
    return (
        f"{clock_text(time)} // min size: {format_number(config.min_size)}px   "
        f"max size: {format_number(config.max_size)}px   "
        f"orbit: {format_number(config.orbit)}px   "
        f"ring ratio: {config.ring_ratio:.2f}"
    )
