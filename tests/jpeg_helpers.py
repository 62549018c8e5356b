import io

from PIL import Image

EXIF_SIGNATURE = b'Exif\x00\x00'
MAKE_TAG = 0x010F


def build_exif_segment(payload: bytes) -> bytes:
    length = len(payload) + len(EXIF_SIGNATURE) + 2
    return b'\xff\xe1' + length.to_bytes(2, 'big') + EXIF_SIGNATURE + payload


def build_segment(marker: int, payload: bytes) -> bytes:
    return bytes((0xFF, marker)) + (len(payload) + 2).to_bytes(2, 'big') + payload


def build_jpeg_stream(*segments: bytes) -> bytes:
    """A marker stream with a JFIF header, the given segments and a short scan."""
    app0 = build_segment(0xE0, b'JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00')
    sos = build_segment(0xDA, b'\x01\x01\x00\x00\x3f\x00')
    return b'\xff\xd8' + app0 + b''.join(segments) + sos + b'\x12\x34\x56' + b'\xff\xd9'


def encode_jpeg(image: Image.Image, make: str = None) -> bytes:
    out = io.BytesIO()
    if make is None:
        image.save(out, format='JPEG', quality=95)
    else:
        exif = Image.Exif()
        exif[MAKE_TAG] = make
        image.save(out, format='JPEG', quality=95, exif=exif.tobytes())
    return out.getvalue()
