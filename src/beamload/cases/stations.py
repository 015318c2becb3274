"""
Shear, moment and deflection along the span for each beam-load case.

Every evaluator takes the full array of stations `x` (ft) and returns arrays,
evaluated on float64 so that overflow yields inf instead of raising; callers
wrap evaluation in `np.errstate`. Deflection is None when I*E is zero.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ..core.inputs import BeamInput

# (shear [k], moment [k-ft], deflection [in] or None)
StationValues = Tuple[np.ndarray, np.ndarray, Optional[np.ndarray]]

# ft^3 -> in^3 for deflection numerators
_IN3 = 12.0 ** 3


def _load_length(beam: BeamInput) -> Tuple[np.float64, np.float64]:
    return np.float64(beam.load), np.float64(beam.length)


def _deflection(numerator: np.ndarray, beam: BeamInput, factor) -> Optional[np.ndarray]:
    if not beam.has_stiffness:
        return None
    return numerator / (factor * np.float64(beam.stiffness))


def simple_uniform(beam: BeamInput, x: np.ndarray) -> StationValues:
    P, L = _load_length(beam)
    v = P * (L / 2.0 - x)
    m = (P * x / 2.0) * (L - x)
    d = _deflection(P * x * _IN3 * (L ** 3 - 2 * L * x ** 2 + x ** 3), beam, 24.0)
    return v, m, d


def simple_increasing(beam: BeamInput, x: np.ndarray) -> StationValues:
    P, L = _load_length(beam)
    total_load = P * L * 0.5
    v = total_load * (1 / 3.0 - x ** 2 / L ** 2)
    m = (total_load * x / (3.0 * L ** 2)) * (L ** 2 - x ** 2)
    d = _deflection(
        total_load * x * _IN3 * (3 * x ** 4 - 10 * L ** 2 * x ** 2 + 7 * L ** 4),
        beam,
        180.0 * L ** 2,
    )
    return v, m, d


def simple_center_point(beam: BeamInput, x: np.ndarray) -> StationValues:
    """Left half (x < L/2); the right half is its reflection."""
    P, L = _load_length(beam)
    v = np.full_like(x, P / 2.0)
    m = P * x / 2.0
    d = _deflection(P * x * _IN3 * (3 * L ** 2 - 4 * x ** 2), beam, 48.0)
    return v, m, d


def cantilever_uniform(beam: BeamInput, x: np.ndarray) -> StationValues:
    # x measured from the free end
    P, L = _load_length(beam)
    v = P * x
    m = P * x ** 2 / 2.0
    d = _deflection(P * _IN3 * (x ** 4 - 4 * L ** 3 * x + 3 * L ** 4), beam, 24.0)
    return v, m, d


def cantilever_end_point(beam: BeamInput, x: np.ndarray) -> StationValues:
    P, L = _load_length(beam)
    v = np.full_like(x, -P)
    m = -P * x
    d = _deflection(P * _IN3 * (2 * L ** 3 - 3 * L ** 2 * x + x ** 3), beam, 6.0)
    return v, m, d


def pin_fixed_uniform(beam: BeamInput, x: np.ndarray) -> StationValues:
    P, L = _load_length(beam)
    left_reaction = 3 * P * L / 8.0
    v = left_reaction - P * x
    m = left_reaction * x - P * x ** 2 / 2.0
    d = _deflection(P * x * _IN3 * (L ** 3 - 3 * L * x ** 2 + 2 * x ** 3), beam, 48.0)
    return v, m, d


def fixed_uniform(beam: BeamInput, x: np.ndarray) -> StationValues:
    P, L = _load_length(beam)
    v = P * (L / 2.0 - x)
    m = (P / 12.0) * (6 * L * x - L ** 2 - 6 * x ** 2)
    d = _deflection(P * x ** 2 * _IN3 * (L - x) ** 2, beam, 24.0)
    return v, m, d


def fixed_center_point(beam: BeamInput, x: np.ndarray) -> StationValues:
    """Left half (x < L/2); the right half is its reflection."""
    P, L = _load_length(beam)
    v = np.full_like(x, P / 2.0)
    m = (P / 8.0) * (4 * x - L)
    d = _deflection(P * x ** 2 * _IN3 * (3 * L - 4 * x), beam, 48.0)
    return v, m, d
