from __future__ import annotations

from typing import Iterator

from ..bitmap.types import RawImage
from .base import Resampler, SampledCell


class PointResampler(Resampler):
    """Nearest-neighbour sampling; every grid cell is visited exactly once."""

    name = "point"

    def sample(self, image: RawImage, width: int, height: int) -> Iterator[SampledCell]:
        image.validate()
        for y in range(height):
            src_y = self._clamp(y * image.height // height, image.height)
            for x in range(width):
                src_x = self._clamp(x * image.width // width, image.width)
                yield SampledCell(column=x, row=y, pixel=image.pixel(src_x, src_y))
