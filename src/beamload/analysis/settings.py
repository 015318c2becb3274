from __future__ import annotations

import numbers
from dataclasses import dataclass

DEFAULT_POINTS = 250


@dataclass
class DiagramSettings:
    points: int = DEFAULT_POINTS

    def validate(self) -> None:
        if isinstance(self.points, bool) or not isinstance(self.points, numbers.Integral):
            raise ValueError(f"points must be an integer, got {self.points!r}")
        if self.points < 1:
            raise ValueError("points must be at least 1")
