from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import List, Optional, Union

from .bitmap import RawImage, read_bitmap
from .mif import check_depth, encode_cells, ordered_records, render_mif, write_mif
from .mif.types import MifRecord
from .sampling import DEFAULT_POLICY, Resampler, get_resampler
from .targets import TargetProfile

DEFAULT_WIDTH = 60
DEFAULT_HEIGHT = 60
DEFAULT_DEPTH = 3

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class ConversionSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    depth: int = DEFAULT_DEPTH
    policy: str = DEFAULT_POLICY

    @classmethod
    def from_profile(cls, profile: TargetProfile) -> "ConversionSettings":
        return cls(
            width=profile.width,
            height=profile.height,
            depth=profile.depth,
            policy=profile.policy,
        )

    def override(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        depth: Optional[int] = None,
        policy: Optional[str] = None,
    ) -> "ConversionSettings":
        """Return a copy with every non-None argument replaced."""
        changes = {
            key: value
            for key, value in (("width", width), ("height", height), ("depth", depth), ("policy", policy))
            if value is not None
        }
        return replace(self, **changes)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Output grid must be positive, got {self.width}x{self.height}")
        check_depth(self.depth)
        get_resampler(self.policy)

    @property
    def word_count(self) -> int:
        return self.width * self.height

    @property
    def word_width(self) -> int:
        return 3 * self.depth


def output_filename(settings: ConversionSettings) -> str:
    """Default MIF name, e.g. ``bmp_60_9.mif`` for a 60-wide 9-bit target."""
    return f"bmp_{settings.width}_{settings.word_width}.mif"


class ConversionJob:
    """Carries one set of settings through decode, resample and encode."""

    def __init__(self, settings: Optional[ConversionSettings] = None) -> None:
        self.settings = settings or ConversionSettings()
        self.settings.validate()

    @property
    def resampler(self) -> Resampler:
        return get_resampler(self.settings.policy)

    def convert(self, image: RawImage) -> List[MifRecord]:
        settings = self.settings
        cells = self.resampler.sample(image, settings.width, settings.height)
        return ordered_records(encode_cells(cells, settings.width, settings.height, settings.depth))

    def render(self, image: RawImage) -> str:
        return render_mif(self.convert(image), self.settings.depth, self.settings.word_count)

    def convert_file(self, source: PathLike, destination: Optional[PathLike] = None) -> str:
        """Convert a bitmap file and return the path of the written MIF."""
        image = read_bitmap(source)
        records = self.convert(image)
        if destination is None:
            destination = output_filename(self.settings)
        write_mif(destination, records, self.settings.depth, self.settings.word_count)
        return os.fspath(destination)
