"""
Closed-form extreme values for each beam-load case (AISC Manual Table 3-23).

Each function returns a `SummaryResult` with shear, moments and deflection
populated; the L-over ratio is derived afterwards by `compute_summary`.
Deflections convert the span to inches (L * 12) and the distributed load to
k/in (w / 12). Formulas run on float64 so that overflow yields inf instead of
raising; `compute_summary` evaluates them under `np.errstate`.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ..core.inputs import BeamInput
from ..core.results import SummaryResult


def _load_length(beam: BeamInput) -> Tuple[np.float64, np.float64]:
    return np.float64(beam.load), np.float64(beam.length)


def _deflection(numerator: np.float64, beam: BeamInput) -> Optional[np.float64]:
    if not beam.has_stiffness:
        return None
    return numerator / np.float64(beam.stiffness)


def simple_uniform(beam: BeamInput) -> SummaryResult:
    P, L = _load_length(beam)
    return SummaryResult(
        positive_moment=P * L ** 2 / 8.0,
        shear=P * L / 2.0,
        deflection=_deflection((5 / 384.0) * (P / 12.0) * (L * 12) ** 4, beam),
    )


def simple_increasing(beam: BeamInput) -> SummaryResult:
    P, L = _load_length(beam)
    total_load = P * L * 0.5
    return SummaryResult(
        positive_moment=0.128 * total_load * L,
        shear=(2 / 3) * total_load,
        deflection=_deflection(0.01304 * total_load * (L * 12) ** 3, beam),
    )


def simple_center_point(beam: BeamInput) -> SummaryResult:
    P, L = _load_length(beam)
    return SummaryResult(
        positive_moment=P * L / 4.0,
        shear=P / 2.0,
        deflection=_deflection(P * (L * 12) ** 3 / 48.0, beam),
    )


def cantilever_uniform(beam: BeamInput) -> SummaryResult:
    P, L = _load_length(beam)
    return SummaryResult(
        negative_moment=P * L ** 2 / 2.0,
        shear=P * L,
        deflection=_deflection((P / 12.0) * (L * 12.0) ** 4 / 8.0, beam),
    )


def cantilever_end_point(beam: BeamInput) -> SummaryResult:
    P, L = _load_length(beam)
    return SummaryResult(
        negative_moment=P * L,
        shear=P,
        deflection=_deflection(P * (L * 12) ** 3 / 3.0, beam),
    )


def pin_fixed_uniform(beam: BeamInput) -> SummaryResult:
    P, L = _load_length(beam)
    return SummaryResult(
        positive_moment=(9 / 128.0) * (P * L ** 2),
        negative_moment=P * L ** 2 / 8.0,
        shear=(5 / 8.0) * (P * L),  # at the fixed support
        deflection=_deflection((P / 12.0) * (L * 12) ** 4 / 185.0, beam),
    )


def fixed_uniform(beam: BeamInput) -> SummaryResult:
    P, L = _load_length(beam)
    return SummaryResult(
        positive_moment=P * L ** 2 / 24.0,
        negative_moment=P * L ** 2 / 12.0,
        shear=P * L / 2.0,
        deflection=_deflection((1 / 384.0) * (P / 12.0) * (L * 12) ** 4, beam),
    )


def fixed_center_point(beam: BeamInput) -> SummaryResult:
    P, L = _load_length(beam)
    return SummaryResult(
        positive_moment=P * L / 8.0,
        negative_moment=P * L / 8.0,
        shear=P / 2.0,
        deflection=_deflection(P * (L * 12) ** 3 / 192.0, beam),
    )
