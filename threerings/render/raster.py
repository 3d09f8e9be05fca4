"""
Pillow rasteriser for draw lists. Useful for snapshots and for clients that
want a finished image instead of primitives.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Dict, List

from PIL import Image, ImageDraw, ImageFont

from .constants import BACKGROUND

logger = logging.getLogger(__name__)


def _draw_circle(draw: ImageDraw.ImageDraw, cmd: Dict[str, Any]) -> None:
    fill = cmd.get("fill")
    stroke = cmd.get("stroke")
    if fill is None and stroke is None:
        return
    r = abs(float(cmd["diameter"])) / 2
    x, y = float(cmd["x"]), float(cmd["y"])
    width = max(1, int(round(float(cmd.get("strokeWeight") or 0.0)))) if stroke else 0
    draw.ellipse((x - r, y - r, x + r, y + r), fill=fill, outline=stroke, width=width)


def _draw_text(draw: ImageDraw.ImageDraw, cmd: Dict[str, Any]) -> None:
    font = ImageFont.load_default(size=cmd.get("size", 12))
    text = cmd["text"]
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    # Centre on (x, y) like CENTER/CENTER text alignment.
    x = float(cmd["x"]) - (right - left) / 2 - left
    y = float(cmd["y"]) - (bottom - top) / 2 - top
    draw.text((x, y), text, fill=cmd.get("fill"), font=font)


def render_image(commands: List[Dict[str, Any]], canvas_size: int) -> Image.Image:
    size = int(canvas_size)
    img = Image.new("RGB", (size, size), BACKGROUND)
    draw = ImageDraw.Draw(img)

    for cmd in commands:
        op = cmd.get("op")
        if op == "background":
            draw.rectangle((0, 0, size, size), fill=cmd.get("fill", BACKGROUND))
        elif op == "circle":
            _draw_circle(draw, cmd)
        elif op == "text":
            _draw_text(draw, cmd)
        else:
            raise ValueError(f"Unknown draw op: {op!r}")
    return img


def render_png(commands: List[Dict[str, Any]], canvas_size: int) -> bytes:
    img = render_image(commands, canvas_size)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    data = buf.getvalue()
    logger.debug("rendered %d commands into %d PNG bytes", len(commands), len(data))
    return data
