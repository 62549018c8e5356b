from .exif import extract_exif_segment, insert_exif_segment
from .layout import (ImageSize, LayoutResult, calculate_canvas_scale, calculate_layout,
                     ensure_minimum_border)
from .pipeline import FramePipeline
from .ratios import resolve_aspect_ratio
from .settings import FrameSettings

__version__ = '0.1.0'
