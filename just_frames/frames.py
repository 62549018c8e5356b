import logging
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from .layout import (ImageSize, LayoutResult, calculate_canvas_scale,
                     calculate_layout, round_half_away)
from .settings import BACKGROUND_COLOR, MAX_CANVAS_DIMENSION, FrameSettings

logger = logging.getLogger(__name__)


def render_frame(image: Image.Image, settings: FrameSettings,
                 max_dimension: int = MAX_CANVAS_DIMENSION,
                 background: Tuple[int, int, int] = BACKGROUND_COLOR) -> Image.Image:
    """
    Composite the image onto a background-filled canvas sized by the layout.
    If the canvas exceeds max_dimension, the whole composition (canvas,
    offset and image extents) is scaled down uniformly.
    """
    source = ImageSize(*image.size)
    layout = calculate_layout(source, settings.border_percent, settings.ratio)
    scale = calculate_canvas_scale(layout, max_dimension)

    canvas_w = max(1, round_half_away(layout.canvas_width * scale))
    canvas_h = max(1, round_half_away(layout.canvas_height * scale))
    logger.debug("Rendering %sx%s canvas (scale %.4f)", canvas_w, canvas_h, scale)

    frame = Image.new('RGB', (canvas_w, canvas_h), background)

    if scale < 1:
        target_w = max(1, round_half_away(source.width * scale))
        target_h = max(1, round_half_away(source.height * scale))
        image = image.resize((target_w, target_h), resample=Image.Resampling.LANCZOS)

    if image.mode != 'RGB':
        image = image.convert('RGB')

    paste_x = round_half_away(layout.draw_x * scale)
    paste_y = round_half_away(layout.draw_y * scale)
    frame.paste(image, (paste_x, paste_y))

    return frame


def detect_layout(image: Image.Image,
                  background: Tuple[int, int, int] = BACKGROUND_COLOR,
                  tolerance: int = 0) -> Optional[LayoutResult]:
    """
    Measure a rendered frame: find the bounding box of every pixel that
    differs from the background by more than tolerance in any channel.
    Returns None for an image that is background only.
    """
    pixels = np.asarray(image.convert('RGB'), dtype=np.int16)
    diff = np.abs(pixels - np.array(background, dtype=np.int16)).max(axis=2)
    coords = np.argwhere(diff > tolerance)
    if coords.size == 0:
        return None

    y_min, x_min = coords.min(axis=0)
    width, height = image.size
    return LayoutResult(width, height, int(x_min), int(y_min))
