# Target ratios are width / height
ASPECT_RATIOS = {
    'story': 9 / 16,
    'square': 1.0,
    'post-vertical': 4 / 5,
    'post-horizontal': 1.91,
}

ASPECT_RATIO_LABELS = {
    'story': 'Instagram Story (9:16)',
    'square': 'Instagram Square (1:1)',
    'post-vertical': 'Instagram Post Vertical (4:5)',
    'post-horizontal': 'Instagram Post Horizontal (1.91:1)',
    'original': 'Original',
}

RATIO_OPTIONS = tuple(ASPECT_RATIO_LABELS.keys())


def resolve_aspect_ratio(option: str, source_width: int, source_height: int) -> float:
    """
    Resolve a ratio option to a numeric width / height ratio.
    'original' derives the ratio from the source and falls back to 1
    for a zero-height source.
    """
    if option == 'original':
        if source_height == 0:
            return 1.0
        return source_width / source_height

    if option not in ASPECT_RATIOS:
        raise ValueError(f"Unknown aspect ratio: {option}. Available: {list(RATIO_OPTIONS)}")

    return ASPECT_RATIOS[option]
