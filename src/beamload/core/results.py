from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple
import numpy as np

@dataclass
class Result:
    """
    Wraps a sampled distribution (x, values) to provide convenient accessors.
    Used for shear, moment, and deflection diagrams.
    """
    _x: np.ndarray
    _values: np.ndarray

    def __iter__(self):
        return zip(self._x.tolist(), self._values.tolist())

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return list(self)[idx]
        return (float(self._x[idx]), float(self._values[idx]))

    @property
    def max(self) -> float:
        return float(np.max(self._values))

    @property
    def min(self) -> float:
        return float(np.min(self._values))

    @property
    def abs_max(self) -> float:
        return float(np.max(np.abs(self._values)))

    def at(self, x_loc: float) -> float:
        """Interpolate the value at a specific position."""
        return float(np.interp(x_loc, self._x, self._values))


# (label, attribute, units) in presentation order
_SUMMARY_ROWS: Tuple[Tuple[str, str, str], ...] = (
    ("Max Shear", "shear", "k"),
    ("Max Positive Moment", "positive_moment", "k-ft"),
    ("Max Negative Moment", "negative_moment", "k-ft"),
    ("Max Deflection", "deflection", "in."),
    ("'L-over' Value", "l_over", ""),
)


@dataclass
class SummaryResult:
    """Extreme values for one beam-load case.

    Only the fields meaningful for the case are populated; e.g. cantilevers
    report `negative_moment` and leave `positive_moment` as None.
    Moments are magnitudes (k-ft), shear in k, deflection in inches.
    """
    shear: Optional[float] = None
    positive_moment: Optional[float] = None
    negative_moment: Optional[float] = None
    deflection: Optional[float] = None
    l_over: Optional[float] = None

    def __post_init__(self) -> None:
        for _, attr, _ in _SUMMARY_ROWS:
            value = getattr(self, attr)
            if value is not None:
                setattr(self, attr, float(value))

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            "shear": self.shear,
            "positiveMoment": self.positive_moment,
            "negativeMoment": self.negative_moment,
            "deflection": self.deflection,
            "lOver": self.l_over,
        }

    def rows(self) -> Iterator[Tuple[str, float, str]]:
        """Yield (label, value, units) for every populated, non-zero field."""
        for label, attr, units in _SUMMARY_ROWS:
            value = getattr(self, attr)
            if value:
                yield label, value, units


@dataclass(frozen=True)
class DiagramPoint:
    """Shear (k), moment (k-ft) and deflection (in) at one station (ft)."""
    beam_length: float
    shear: float
    moment: float
    deflection: Optional[float]

    @classmethod
    def zero(cls, beam_length: float = 0.0) -> "DiagramPoint":
        return cls(beam_length=beam_length, shear=0.0, moment=0.0, deflection=0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "beamLength": self.beam_length,
            "shear": self.shear,
            "moment": self.moment,
            "deflection": self.deflection,
        }


@dataclass(frozen=True)
class DiagramSeries:
    """Ordered diagram samples along the span."""
    points: Tuple[DiagramPoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[DiagramPoint]:
        return iter(self.points)

    def __getitem__(self, idx):
        return self.points[idx]

    @property
    def x(self) -> np.ndarray:
        return np.array([p.beam_length for p in self.points], dtype=float)

    @property
    def shear(self) -> Result:
        return Result(self.x, np.array([p.shear for p in self.points], dtype=float))

    @property
    def moment(self) -> Result:
        return Result(self.x, np.array([p.moment for p in self.points], dtype=float))

    @property
    def deflection(self) -> Optional[Result]:
        """Deflection distribution, or None when the beam has no stiffness."""
        values = [p.deflection for p in self.points]
        if any(v is None for v in values):
            return None
        return Result(self.x, np.array(values, dtype=float))

    def to_records(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.points]
