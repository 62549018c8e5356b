from PIL import Image

from just_frames.frames import detect_layout, render_frame
from just_frames.layout import LayoutResult, ensure_minimum_border
from just_frames.settings import FrameSettings

RED = (200, 30, 30)
WHITE = (255, 255, 255)


def test_render_original_ratio(photo):
    frame = render_frame(photo, FrameSettings(border_percent=10, ratio='original'), max_dimension=0)

    assert frame.size == (138, 108)
    assert frame.mode == 'RGB'
    assert frame.getpixel((0, 0)) == WHITE
    assert frame.getpixel((8, 8)) == WHITE
    assert frame.getpixel((9, 9)) == RED
    assert frame.getpixel((128, 98)) == RED
    assert frame.getpixel((129, 99)) == WHITE


def test_render_story_pads_top_and_bottom(photo):
    frame = render_frame(photo, FrameSettings(border_percent=12, ratio='story'))

    assert frame.size == (142, 252)
    assert detect_layout(frame) == LayoutResult(142, 252, 11, 81)


def test_render_uses_background_color(photo):
    frame = render_frame(photo, FrameSettings(border_percent=5, ratio='square'),
                         background=(0, 0, 0))
    assert frame.getpixel((0, 0)) == (0, 0, 0)


def test_render_downscales_large_canvas():
    image = Image.new('RGB', (400, 200), RED)
    frame = render_frame(image, FrameSettings(border_percent=0, ratio='original'), max_dimension=100)

    assert frame.size == (100, 50)
    assert detect_layout(frame) == LayoutResult(100, 50, 0, 0)


def test_render_scales_offsets_with_canvas():
    image = Image.new('RGB', (400, 400), RED)
    frame = render_frame(image, FrameSettings(border_percent=10, ratio='original'), max_dimension=240)

    # 480x480 canvas with a 40px border, halved
    assert frame.size == (240, 240)
    assert detect_layout(frame, tolerance=40) == LayoutResult(240, 240, 20, 20)


def test_render_converts_non_rgb_sources():
    image = Image.new('L', (50, 50), 0)
    frame = render_frame(image, FrameSettings(border_percent=20, ratio='original'))
    assert frame.getpixel((25, 25)) == (0, 0, 0)


def test_rendered_border_meets_minimum(photo):
    for ratio in ('story', 'square', 'post-vertical', 'post-horizontal', 'original'):
        frame = render_frame(photo, FrameSettings(border_percent=10, ratio=ratio))
        measured = detect_layout(frame)
        assert ensure_minimum_border(measured, 9), ratio


def test_detect_layout_on_blank_canvas():
    assert detect_layout(Image.new('RGB', (20, 20), WHITE)) is None
