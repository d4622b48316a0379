from __future__ import annotations

from typing import Iterable, Iterator, List

from ..bitmap.types import Pixel
from ..errors import UnsupportedDepth
from ..sampling.base import SampledCell
from .types import MifRecord

SUPPORTED_DEPTHS = (1, 2, 3)


def check_depth(depth: int) -> int:
    """Return depth if it is a supported per-channel bit depth."""
    if depth not in SUPPORTED_DEPTHS:
        raise UnsupportedDepth(f"Channel depth must be 1, 2 or 3 bits, got {depth}")
    return depth


def quantize_channel(value: int, depth: int) -> int:
    """Truncate an 8-bit channel value to its top depth bits."""
    return (value & 0xFF) >> (8 - check_depth(depth))


def pack_color(pixel: Pixel, depth: int) -> int:
    """Pack the quantized channels as R:G:B, red in the high bits."""
    red = quantize_channel(pixel.red, depth)
    green = quantize_channel(pixel.green, depth)
    blue = quantize_channel(pixel.blue, depth)
    return (red << (2 * depth)) | (green << depth) | blue


def unpack_color(value: int, depth: int) -> Pixel:
    """Expand a packed word back to 8-bit channels, full scale at the top code."""
    check_depth(depth)
    mask = (1 << depth) - 1
    codes = ((value >> (2 * depth)) & mask, (value >> depth) & mask, value & mask)
    red, green, blue = (code * 255 // mask for code in codes)
    return Pixel(red, green, blue)


def cell_address(column: int, row: int, width: int, height: int) -> int:
    """Address of a cell; the top sampled row lives at the highest memory row."""
    return (height - 1 - row) * width + column


def encode_cells(
    cells: Iterable[SampledCell], width: int, height: int, depth: int
) -> Iterator[MifRecord]:
    check_depth(depth)
    for cell in cells:
        if not (0 <= cell.column < width and 0 <= cell.row < height):
            continue
        yield MifRecord(
            address=cell_address(cell.column, cell.row, width, height),
            value=pack_color(cell.pixel, depth),
        )


def ordered_records(records: Iterable[MifRecord]) -> List[MifRecord]:
    """Records in ascending address order, later writes to an address winning."""
    by_address = {}
    for record in records:
        by_address[record.address] = record
    return [by_address[address] for address in sorted(by_address)]
