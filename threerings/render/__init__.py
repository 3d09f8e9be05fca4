from .commands import draw_list
from .raster import render_png
from .status import status_line

__all__ = ["draw_list", "render_png", "status_line"]
