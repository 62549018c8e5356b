import pytest
from PIL import Image

from tests.jpeg_helpers import encode_jpeg


@pytest.fixture
def photo():
    return Image.new('RGB', (120, 90), (200, 30, 30))


@pytest.fixture
def exif_jpeg(tmp_path, photo):
    path = tmp_path / 'photo.jpg'
    path.write_bytes(encode_jpeg(photo, make='TestCam'))
    return path
