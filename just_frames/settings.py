import math
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .ratios import RATIO_OPTIONS

# Border is a percentage of the shorter source side
BORDER_PERCENT_MIN = 0
BORDER_PERCENT_MAX = 20
DEFAULT_BORDER_PERCENT = 8
DEFAULT_RATIO = 'story'

# Longest canvas side before the renderer downscales
MAX_CANVAS_DIMENSION = 4096

JPEG_QUALITY = 92
BACKGROUND_COLOR = (255, 255, 255)
DEFAULT_OUTPUT_NAME = 'just-frame.jpg'


def clamp_border_percent(value: float) -> float:
    # Ints are always finite, and may be too large to convert to float
    if isinstance(value, float) and not math.isfinite(value):
        return DEFAULT_BORDER_PERCENT
    return min(BORDER_PERCENT_MAX, max(BORDER_PERCENT_MIN, value))


@dataclass(frozen=True)
class FrameSettings:
    """
    The editor state the geometry functions are evaluated against.
    Owned by the caller; every change produces a new value.
    """
    border_percent: float = DEFAULT_BORDER_PERCENT
    ratio: str = DEFAULT_RATIO

    def __post_init__(self):
        if self.ratio not in RATIO_OPTIONS:
            raise ValueError(f"Unknown aspect ratio: {self.ratio}. Available: {list(RATIO_OPTIONS)}")
        object.__setattr__(self, 'border_percent', clamp_border_percent(self.border_percent))

    def with_border(self, border_percent: float) -> 'FrameSettings':
        return replace(self, border_percent=border_percent)

    def with_ratio(self, ratio: str) -> 'FrameSettings':
        return replace(self, ratio=ratio)


def normalize_settings(value: Any) -> Optional[FrameSettings]:
    """
    Build settings from a loosely typed mapping (e.g. decoded JSON).
    Validation hook for callers that persist settings between sessions;
    the CLI gets typed values from argparse and builds FrameSettings directly.
    Returns None when the border is not a finite number or the ratio is unknown.
    """
    if not isinstance(value, Mapping):
        return None

    border = value.get('borderPercent', value.get('border_percent'))
    ratio = value.get('ratio')

    if isinstance(border, bool) or not isinstance(border, (int, float)):
        return None
    if isinstance(border, float) and not math.isfinite(border):
        return None
    if ratio not in RATIO_OPTIONS:
        return None

    return FrameSettings(border_percent=border, ratio=ratio)
