import io
import logging
import os
from typing import Optional

from PIL import Image

from .exif import extract_exif_segment, insert_exif_segment
from .frames import render_frame
from .layout import ImageSize
from .settings import JPEG_QUALITY, MAX_CANVAS_DIMENSION, FrameSettings

logger = logging.getLogger(__name__)


class FramePipeline:
    def __init__(self, input_path: str):
        self.input_path = input_path
        self.image = None
        self._exif_segment = None

    @property
    def exif_segment(self) -> Optional[bytes]:
        """EXIF segment captured from the original file, kept for the photo's lifetime"""
        return self._exif_segment

    @property
    def size(self) -> Optional[ImageSize]:
        if self.image is None:
            return None
        return ImageSize(*self.image.size)

    def load(self):
        """Read the file, capture its EXIF segment and decode it"""
        if not os.path.exists(self.input_path):
            raise FileNotFoundError(f"Input file not found: {self.input_path}")

        with open(self.input_path, 'rb') as f:
            data = f.read()

        # Capture metadata before decoding; the re-encode on save drops it
        self._exif_segment = extract_exif_segment(data)
        if self._exif_segment:
            logger.debug("Captured %d byte EXIF segment from %s",
                         len(self._exif_segment), self.input_path)
        else:
            logger.debug("No EXIF segment in %s", self.input_path)

        image = Image.open(io.BytesIO(data))
        image.load()
        # Ensure we are in RGB mode (handle PNGs with transparency or Grayscale)
        if image.mode != 'RGB':
            image = image.convert('RGB')
        self.image = image
        return self

    def add_frame(self, settings: FrameSettings = FrameSettings(),
                  max_dimension: int = MAX_CANVAS_DIMENSION):
        """Add a border and pad to the requested aspect ratio"""
        if self.image:
            self.image = render_frame(self.image, settings, max_dimension=max_dimension)
        return self

    def to_bytes(self, quality: int = JPEG_QUALITY) -> bytes:
        """Encode as JPEG and put the original EXIF segment back"""
        if self.image is None:
            raise ValueError("No image loaded")

        out = io.BytesIO()
        self.image.save(out, format='JPEG', quality=quality)
        return bytes(insert_exif_segment(out.getvalue(), self._exif_segment))

    def save(self, output_path: str, quality: int = JPEG_QUALITY):
        """Save result to disk"""
        if self.image:
            with open(output_path, 'wb') as f:
                f.write(self.to_bytes(quality=quality))
        return self
