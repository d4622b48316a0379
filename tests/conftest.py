from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest

Rgb = Tuple[int, int, int]

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def build_bmp(rows: Sequence[Sequence[Rgb]], width: int = None, height: int = None) -> bytes:
    """Build a 24-bit bitmap from top-down RGB rows.

    width/height override the declared header values so tests can lie.
    """
    actual_height = len(rows)
    actual_width = len(rows[0]) if rows else 0
    width = actual_width if width is None else width
    height = actual_height if height is None else height
    stride = (actual_width * 3 + 3) & ~3
    body = bytearray()
    for row in reversed(rows):
        line = bytearray()
        for red, green, blue in row:
            line += bytes([blue, green, red])
        line += bytes(stride - len(line))
        body += line
    header = bytearray(54)
    header[0:2] = b"BM"
    header[2:6] = (54 + len(body)).to_bytes(4, "little")
    header[10:14] = (54).to_bytes(4, "little")
    header[14:18] = (40).to_bytes(4, "little")
    header[18:22] = width.to_bytes(4, "little", signed=True)
    header[22:26] = height.to_bytes(4, "little", signed=True)
    header[26:28] = (1).to_bytes(2, "little")
    header[28:30] = (24).to_bytes(2, "little")
    header[34:38] = len(body).to_bytes(4, "little")
    return bytes(header + body)


def solid_rows(width: int, height: int, color: Rgb) -> List[List[Rgb]]:
    return [[color] * width for _ in range(height)]


@pytest.fixture
def bmp_file(tmp_path):
    def write(rows, name="image.bmp", **kwargs):
        path = tmp_path / name
        path.write_bytes(build_bmp(rows, **kwargs))
        return path

    return write
