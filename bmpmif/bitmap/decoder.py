from __future__ import annotations

import os
from typing import List, Tuple, Union

from ..errors import InvalidHeader, IoError, TruncatedData
from .types import Pixel, RawImage

HEADER_SIZE = 54
WIDTH_OFFSET = 18
HEIGHT_OFFSET = 22
MAX_DIMENSION = 65535

PathLike = Union[str, os.PathLike]


def read_int32_le(data: bytes, offset: int) -> int:
    """Decode a signed little-endian 32-bit integer at offset."""
    return int.from_bytes(data[offset : offset + 4], "little", signed=True)


def row_stride(width: int) -> int:
    """Bytes per stored row, padded to a 4-byte boundary."""
    return (width * 3 + 3) & ~3


def read_dimensions(header: bytes) -> Tuple[int, int]:
    if len(header) < HEADER_SIZE:
        raise TruncatedData(f"Bitmap header needs {HEADER_SIZE} bytes, got {len(header)}")
    width = read_int32_le(header, WIDTH_OFFSET)
    height = read_int32_le(header, HEIGHT_OFFSET)
    if width <= 0 or height <= 0:
        raise InvalidHeader(f"Bitmap dimensions must be positive, got {width}x{height}")
    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise InvalidHeader(f"Bitmap dimensions {width}x{height} exceed {MAX_DIMENSION}")
    return width, height


def decode_bitmap(data: bytes) -> RawImage:
    """Decode an uncompressed 24-bit bitmap held in memory.

    Rows are stored bottom-up with (blue, green, red) triples; the returned
    image is top-down RGB.
    """
    width, height = read_dimensions(data)
    stride = row_stride(width)
    expected = HEADER_SIZE + stride * height
    if len(data) < expected:
        raise TruncatedData(
            f"Bitmap declares {width}x{height} ({expected} bytes), only {len(data)} available"
        )
    pixels: List[Pixel] = [Pixel(0, 0, 0)] * (width * height)
    for src_row in range(height):
        base = HEADER_SIZE + src_row * stride
        dst = (height - 1 - src_row) * width
        for x in range(width):
            offset = base + x * 3
            pixels[dst + x] = Pixel(
                red=data[offset + 2],
                green=data[offset + 1],
                blue=data[offset],
            )
    return RawImage(width=width, height=height, pixels=pixels)


def read_bitmap(path: PathLike) -> RawImage:
    """Read and decode a bitmap file."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise IoError(f"Cannot read bitmap {os.fspath(path)}: {exc}") from exc
    return decode_bitmap(data)
