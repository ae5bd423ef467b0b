from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

EstimatedRates = dict[int, float | None]


@dataclass(frozen=True)
class Recommendation:
    item_id: int
    estimated_rate: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SoulMate:
    user_id: int
    afinimaki: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
