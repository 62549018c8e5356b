from enum import Enum
from typing import NamedTuple, Optional, Union

JPEG_MARKER_PREFIX = 0xFF
JPEG_MARKER_SOI = 0xD8
JPEG_MARKER_EOI = 0xD9
JPEG_MARKER_SOS = 0xDA
JPEG_MARKER_APP1 = 0xE1
EXIF_SIGNATURE = b'Exif\x00\x00'

SOI = bytes((JPEG_MARKER_PREFIX, JPEG_MARKER_SOI))

Buffer = Union[bytes, bytearray, memoryview]


class ScanState(Enum):
    SCANNING = 'scanning'
    FOUND = 'found'
    NOT_FOUND = 'not-found'


class ScanResult(NamedTuple):
    state: ScanState
    offset: int
    end: int = 0


def _starts_with_soi(data: bytes) -> bool:
    return data[:2] == SOI


def _step(data: bytes, offset: int) -> ScanResult:
    """
    Look at the segment starting at offset. Returns FOUND with the segment
    bounds, SCANNING with the offset of the next marker, or NOT_FOUND when
    the scan has to stop.
    """
    if offset + 4 > len(data):
        return ScanResult(ScanState.NOT_FOUND, offset)
    if data[offset] != JPEG_MARKER_PREFIX:
        return ScanResult(ScanState.NOT_FOUND, offset)

    marker = data[offset + 1]
    # Entropy-coded data follows SOS, nothing after it is marker-structured
    if marker in (JPEG_MARKER_EOI, JPEG_MARKER_SOS):
        return ScanResult(ScanState.NOT_FOUND, offset)

    # Length is big-endian and counts its own two bytes
    length = int.from_bytes(data[offset + 2:offset + 4], 'big')
    segment_start = offset + 4
    segment_end = segment_start + length - 2
    if segment_end > len(data):
        return ScanResult(ScanState.NOT_FOUND, offset)

    if marker == JPEG_MARKER_APP1 and \
            segment_end - segment_start >= len(EXIF_SIGNATURE) and \
            data[segment_start:segment_start + len(EXIF_SIGNATURE)] == EXIF_SIGNATURE:
        return ScanResult(ScanState.FOUND, offset, segment_end)

    return ScanResult(ScanState.SCANNING, segment_end)


def scan_exif_segment(buffer: Buffer) -> ScanResult:
    """
    Walk the JPEG marker stream and locate the EXIF APP1 segment.
    Truncated or non-JPEG input ends in NOT_FOUND rather than an error.
    """
    data = bytes(buffer)
    if len(data) < 4 or not _starts_with_soi(data):
        return ScanResult(ScanState.NOT_FOUND, 0)

    result = ScanResult(ScanState.SCANNING, 2)
    while result.state is ScanState.SCANNING:
        result = _step(data, result.offset)

    return result


def extract_exif_segment(buffer: Buffer) -> Optional[bytes]:
    """
    Return the complete EXIF segment (marker, length, signature and payload)
    or None if the stream carries none.
    """
    result = scan_exif_segment(buffer)
    if result.state is not ScanState.FOUND:
        return None
    return bytes(buffer[result.offset:result.end])


def insert_exif_segment(buffer: Buffer, segment: Optional[Buffer]) -> Buffer:
    """
    Splice an EXIF segment right after the SOI marker.
    Meant for freshly encoded JPEGs that carry no metadata: an existing
    EXIF segment in buffer is kept, so the result would hold two.
    Returns buffer unchanged when there is no segment or no SOI marker.
    """
    if not segment:
        return buffer

    data = bytes(buffer)
    if len(data) < 2 or not _starts_with_soi(data):
        return buffer

    return data[:2] + bytes(segment) + data[2:]
