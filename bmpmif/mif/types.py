from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class MifRecord:
    address: int
    value: int


@dataclass
class MifDocument:
    """Parsed MIF contents: word width, depth and the populated words."""

    word_width: int
    depth: int
    words: Dict[int, int] = field(default_factory=dict)

    @property
    def channel_depth(self) -> int:
        return self.word_width // 3
