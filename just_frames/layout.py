import logging
import math
from typing import NamedTuple

from .ratios import resolve_aspect_ratio
from .settings import clamp_border_percent

logger = logging.getLogger(__name__)


class ImageSize(NamedTuple):
    width: int
    height: int


class LayoutResult(NamedTuple):
    """
    Geometry of the framed output.
    canvas_width/canvas_height are the expanded canvas, draw_x/draw_y the
    top-left corner of the untouched source on that canvas.
    """
    canvas_width: int
    canvas_height: int
    draw_x: int
    draw_y: int


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def border_pixels(source: ImageSize, border_percent: float) -> int:
    """Border thickness in pixels: a percentage of the shorter source side."""
    min_dimension = min(source.width, source.height)
    percent = clamp_border_percent(border_percent)
    return max(0, round_half_away(min_dimension * percent / 100))


def calculate_layout(source: ImageSize, border_percent: float, ratio: str) -> LayoutResult:
    """
    Pad the source symmetrically by the border, then grow the padded size
    along one axis until it matches the target ratio. The canvas never
    shrinks below the bordered image, so the frame only adds padding.
    """
    border = border_pixels(source, border_percent)
    # A zero-sized source still gets a 1x1 canvas
    base_width = max(1, source.width + border * 2)
    base_height = max(1, source.height + border * 2)
    target_ratio = resolve_aspect_ratio(ratio, source.width, source.height)

    canvas_width = base_width
    canvas_height = base_height

    if ratio != 'original':
        base_ratio = base_width / base_height
        if base_ratio > target_ratio:
            # Wider than the target: pad top and bottom
            canvas_height = round_half_away(base_width / target_ratio)
        else:
            # Taller than the target: pad left and right
            canvas_width = round_half_away(base_height * target_ratio)

    draw_x = round_half_away((canvas_width - source.width) / 2)
    draw_y = round_half_away((canvas_height - source.height) / 2)

    layout = LayoutResult(canvas_width, canvas_height, draw_x, draw_y)
    logger.debug("Layout for %sx%s (border %s px, ratio %s): %s",
                 source.width, source.height, border, ratio, layout)
    return layout


def calculate_canvas_scale(layout: LayoutResult, max_dimension: float) -> float:
    """
    Uniform downscale factor in (0, 1] that brings the longest canvas side
    down to max_dimension. A max_dimension <= 0 disables scaling.
    """
    if max_dimension <= 0:
        return 1.0

    longest = max(layout.canvas_width, layout.canvas_height)
    if longest <= max_dimension:
        return 1.0

    return max_dimension / longest


def ensure_minimum_border(layout: LayoutResult, required_border_pixels: float) -> bool:
    safe_border = max(0, math.floor(required_border_pixels))
    min_x = min(layout.draw_x, layout.canvas_width - layout.draw_x)
    min_y = min(layout.draw_y, layout.canvas_height - layout.draw_y)

    return min_x >= safe_border and min_y >= safe_border
