from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..errors import InvalidHeader


@dataclass(frozen=True)
class Pixel:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class RawImage:
    """Row-major RGB pixel buffer, row 0 is the top of the picture."""

    width: int
    height: int
    pixels: List[Pixel]

    def validate(self) -> None:
        """Validate dimensions against the pixel count."""
        if self.width <= 0 or self.height <= 0:
            raise InvalidHeader(f"Invalid image size {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("Pixels length must equal width * height")

    def pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at column x of row y."""
        return self.pixels[y * self.width + x]

    def row(self, y: int) -> List[Pixel]:
        start = y * self.width
        return self.pixels[start : start + self.width]
