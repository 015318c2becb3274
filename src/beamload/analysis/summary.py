from __future__ import annotations

import math
import warnings
from typing import Optional, Union

import numpy as np

from ..cases.registry import CaseId, get_case
from ..core.inputs import BeamInput
from ..core.results import SummaryResult


def compute_summary(
    case_id: Union[CaseId, str, int, None], beam: BeamInput
) -> Optional[SummaryResult]:
    """
    Maximum shear, moments, deflection and L-over ratio for a beam-load case.

    Returns None when no case is selected or the id is not a supported case.
    Deflection and L-over are None when I*E is zero or the deflection
    overflows. L-over is span (in) over deflection, doubled for cantilevers,
    and None when the deflection is zero or the ratio overflows.
    """
    case = get_case(case_id)
    if case is None:
        return None

    with np.errstate(over="ignore", invalid="ignore"):
        result = case.summary(beam)

    if result.deflection is None:
        result.l_over = None
        return result

    if not math.isfinite(result.deflection):
        warnings.warn(
            f"Case {case.case_id.value}: deflection overflowed ({result.deflection}); "
            f"reporting it as undefined.",
            RuntimeWarning,
        )
        result.deflection = None
        result.l_over = None
        return result

    if result.deflection == 0:
        result.l_over = None
        return result

    with np.errstate(over="ignore", divide="ignore"):
        l_over = (1 / np.float64(result.deflection)) * np.float64(beam.length) * 12
        if case.cantilever:
            l_over *= 2
    if not np.isfinite(l_over):
        warnings.warn(
            f"Case {case.case_id.value}: L-over overflowed for deflection "
            f"{result.deflection}; reporting it as undefined.",
            RuntimeWarning,
        )
        result.l_over = None
        return result

    result.l_over = float(l_over)
    return result
