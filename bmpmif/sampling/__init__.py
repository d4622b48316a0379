from __future__ import annotations

from typing import Dict, Optional, Set

from ..errors import UnknownTarget
from .base import Resampler, SampledCell
from .block import BlockResampler
from .point import PointResampler

DEFAULT_POLICY = "point"


class ResamplerRegistry:
    def __init__(self, resamplers: Optional[Dict[str, Resampler]] = None) -> None:
        if resamplers is None:
            resamplers = {}
            for resampler in (PointResampler(), BlockResampler()):
                resamplers[resampler.name] = resampler
        self._resamplers = resamplers

    @property
    def policies(self) -> Set[str]:
        return set(self._resamplers.keys())

    def get(self, policy: str) -> Resampler:
        resampler = self._resamplers.get(policy)
        if not resampler:
            raise UnknownTarget(
                f"Unknown resampling policy '{policy}' (choose from {', '.join(sorted(self.policies))})"
            )
        return resampler


def get_resampler(policy: str) -> Resampler:
    return ResamplerRegistry().get(policy)


__all__ = [
    "BlockResampler",
    "DEFAULT_POLICY",
    "get_resampler",
    "PointResampler",
    "Resampler",
    "ResamplerRegistry",
    "SampledCell",
]
