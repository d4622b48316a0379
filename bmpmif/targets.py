from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .errors import UnknownTarget

DATA_PATH = Path(__file__).resolve().parent / "data" / "targets.json"
DEFAULT_TARGET = "de1-60"
TARGET_ENV_VAR = "BMPMIF_TARGET"


@dataclass(frozen=True)
class TargetProfile:
    name: str
    width: int
    height: int
    depth: int
    policy: str
    description: str = ""

    @property
    def word_width(self) -> int:
        return 3 * self.depth


class TargetRegistry:
    _cache: Dict[Path, "TargetRegistry"] = {}

    def __init__(self, targets: Iterable[TargetProfile]) -> None:
        self._targets = list(targets)

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "TargetRegistry":
        key = path.resolve()
        cached = cls._cache.get(key)
        if cached:
            return cached
        raw = json.loads(path.read_text(encoding="utf-8"))
        targets = [TargetProfile(**item) for item in raw]
        registry = cls(targets)
        cls._cache[key] = registry
        return registry

    @property
    def targets(self) -> List[TargetProfile]:
        return list(self._targets)

    def get(self, name: str) -> Optional[TargetProfile]:
        for target in self._targets:
            if target.name == name:
                return target
        return None

    def require(self, name: str) -> TargetProfile:
        target = self.get(name)
        if not target:
            raise UnknownTarget(f"Unknown target '{name}' (see --list-targets)")
        return target
