from __future__ import annotations

import os
from typing import Union

from PIL import Image

from .errors import IoError, MifFormatError
from .mif import MifDocument, unpack_color

PathLike = Union[str, os.PathLike]

BACKGROUND = (0, 0, 0)


def render_preview(document: MifDocument, width: int, height: int, scale: int = 1) -> Image.Image:
    """Draw a MIF as the display would show it; missing words stay black."""
    if width * height != document.depth:
        raise MifFormatError(
            f"Grid {width}x{height} does not match DEPTH={document.depth}"
        )
    if document.word_width % 3:
        raise MifFormatError(f"WIDTH={document.word_width} is not three equal channels")
    depth = document.channel_depth
    img = Image.new("RGB", (width, height), BACKGROUND)
    pixels = img.load()
    for address, value in document.words.items():
        pixel = unpack_color(value, depth)
        x = address % width
        y = height - 1 - address // width
        pixels[x, y] = (pixel.red, pixel.green, pixel.blue)
    if scale > 1:
        img = img.resize((width * scale, height * scale), Image.NEAREST)
    return img


def write_preview(
    document: MifDocument, width: int, height: int, path: PathLike, scale: int = 1
) -> None:
    img = render_preview(document, width, height, scale)
    try:
        img.save(path, format="PNG")
    except OSError as exc:
        raise IoError(f"Cannot write preview {os.fspath(path)}: {exc}") from exc
