from __future__ import annotations

from typing import Iterator

from ..bitmap.types import Pixel, RawImage
from .base import Resampler, SampledCell


class BlockResampler(Resampler):
    """Average square blocks of source pixels, centring narrow images.

    Both axes share one stride so the picture is never stretched. When the
    scaled picture is narrower than the grid it is shifted right by half the
    spare columns. Blocks landing outside the grid are dropped, as are the
    trailing source pixels that do not fill a whole block.
    """

    name = "block"

    def sample(self, image: RawImage, width: int, height: int) -> Iterator[SampledCell]:
        image.validate()
        stride = self.stride(image, width, height)
        scaled_width = image.width // stride
        scaled_height = image.height // stride
        offset = self.column_offset(scaled_width, width)
        for block_y in range(min(scaled_height, height)):
            for block_x in range(scaled_width):
                column = block_x + offset
                if column >= width:
                    break
                pixel = self._average(image, block_x * stride, block_y * stride, stride)
                yield SampledCell(column=column, row=block_y, pixel=pixel)

    @staticmethod
    def stride(image: RawImage, width: int, height: int) -> int:
        stride_x = max(1, image.width // width)
        stride_y = max(1, image.height // height)
        return max(stride_x, stride_y)

    @staticmethod
    def column_offset(scaled_width: int, width: int) -> int:
        if scaled_width < width:
            return (width - scaled_width) // 2
        return 0

    def _average(self, image: RawImage, left: int, top: int, stride: int) -> Pixel:
        red = green = blue = 0
        bottom = self._clamp(top + stride - 1, image.height)
        right = self._clamp(left + stride - 1, image.width)
        count = (bottom - top + 1) * (right - left + 1)
        for y in range(top, bottom + 1):
            for pixel in image.row(y)[left : right + 1]:
                red += pixel.red
                green += pixel.green
                blue += pixel.blue
        return Pixel(red // count, green // count, blue // count)
