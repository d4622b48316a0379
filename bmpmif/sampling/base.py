from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from ..bitmap.types import Pixel, RawImage


@dataclass(frozen=True)
class SampledCell:
    """One output grid cell; row 0 is the top of the displayed image."""

    column: int
    row: int
    pixel: Pixel


class Resampler:
    name = ""

    def sample(self, image: RawImage, width: int, height: int) -> Iterator[SampledCell]:
        raise NotImplementedError

    @staticmethod
    def _clamp(value: int, upper: int) -> int:
        return max(0, min(upper - 1, value))
