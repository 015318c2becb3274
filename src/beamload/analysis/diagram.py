"""
Shear, moment and deflection diagrams sampled along the span.

Symmetric cases (center point loads) evaluate the left-half formula directly
and reflect it for stations at or beyond midspan: x -> L - x with the shear
sign flipped.
"""

from __future__ import annotations

from typing import List, Optional, Union

import numpy as np

from ..cases.registry import BeamLoadCase, CaseId, get_case, is_unselected
from ..core.inputs import BeamInput
from ..core.results import DiagramPoint, DiagramSeries, SummaryResult
from .settings import DiagramSettings
from .stations import make_x_range


def sample_stations(case: BeamLoadCase, beam: BeamInput, xs: np.ndarray) -> List[DiagramPoint]:
    """Evaluate one case at every station in `xs` (ft)."""
    xs = np.asarray(xs, dtype=float)
    mirrored = np.zeros(xs.shape, dtype=bool)
    if case.symmetric:
        mirrored = xs >= beam.length / 2
    x_eval = np.where(mirrored, beam.length - xs, xs)

    with np.errstate(over="ignore", invalid="ignore"):
        v, m, d = case.station(beam, x_eval)
    v = np.where(mirrored, -v, v)

    points: List[DiagramPoint] = []
    for i, x in enumerate(xs):
        deflection = None
        if d is not None and np.isfinite(d[i]):
            deflection = float(d[i])
        points.append(
            DiagramPoint(beam_length=float(x), shear=float(v[i]), moment=float(m[i]), deflection=deflection)
        )
    return points


def generate_diagram(
    case_id: Union[CaseId, str, int, None],
    beam: BeamInput,
    summary: Optional[SummaryResult] = None,
    points: Optional[int] = None,
) -> DiagramSeries:
    """
    Sample a beam-load case at `points` stations.

    Args:
        case_id: Beam-load case; unknown or unselected ids give all-zero points
        beam: Beam properties
        summary: Accepted for callers that pass the summary along; not used
        points: Number of stations (defaults to `DiagramSettings.points`)

    A non-positive span with a case chosen yields a single zero point.
    Deflections that are undefined (I*E of zero) or overflow are None.
    """
    settings = DiagramSettings() if points is None else DiagramSettings(points=points)
    settings.validate()

    if not is_unselected(case_id) and beam.length <= 0:
        return DiagramSeries((DiagramPoint.zero(),))

    xs = make_x_range(beam.length, int(settings.points))
    case = get_case(case_id)
    if case is None:
        return DiagramSeries(tuple(DiagramPoint.zero(float(x)) for x in xs))

    return DiagramSeries(tuple(sample_stations(case, beam, xs)))
