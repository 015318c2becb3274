"""
Registry of the supported beam-load cases (BLC).

Case ids follow the numbering of the source beam-load catalogue, so the set is
deliberately sparse. Each entry binds a case id to its closed-form summary
evaluator and its per-station evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Literal, Optional, Union

from ..core.inputs import BeamInput
from ..core.results import SummaryResult
from . import stations, summary
from .stations import StationValues

LoadKind = Literal["uniform", "varying", "concentrated"]
SummaryFn = Callable[[BeamInput], SummaryResult]
StationFn = Callable[[BeamInput, float], StationValues]


class CaseId(str, Enum):
    ONE = "1"
    FIVE = "5"
    SEVEN = "7"
    TWELVE = "12"
    THIRTEEN = "13"
    FIFTEEN = "15"
    TWENTY_THREE = "23"
    TWENTY_FOUR = "24"


@dataclass(frozen=True)
class BeamLoadCase:
    """One support/loading configuration.

    Args:
        case_id: Catalogue id
        name: Slug describing supports and load
        aisc_case: Case number in AISC Manual Table 3-23
        load_kind: "uniform" (k/ft), "varying" (k/ft peak) or "concentrated" (k)
        symmetric: Diagram is symmetric about midspan; `station` covers the left half only
        cantilever: Serviceability ratio uses twice the span
        summary: Closed-form extreme values
        station: Shear, moment and deflection at a position x (ft)
    """

    case_id: CaseId
    name: str
    aisc_case: int
    load_kind: LoadKind
    summary: SummaryFn
    station: StationFn
    symmetric: bool = False
    cantilever: bool = False


CASES: Dict[CaseId, BeamLoadCase] = {
    CaseId.ONE: BeamLoadCase(
        case_id=CaseId.ONE,
        name="simple-beam-uniform-distributed-load",
        aisc_case=1,
        load_kind="uniform",
        summary=summary.simple_uniform,
        station=stations.simple_uniform,
    ),
    CaseId.FIVE: BeamLoadCase(
        case_id=CaseId.FIVE,
        name="simple-beam-linear-increasing-uniform-load",
        aisc_case=2,
        load_kind="varying",
        summary=summary.simple_increasing,
        station=stations.simple_increasing,
    ),
    CaseId.SEVEN: BeamLoadCase(
        case_id=CaseId.SEVEN,
        name="simple-beam-concentrated-load-at-center",
        aisc_case=7,
        load_kind="concentrated",
        summary=summary.simple_center_point,
        station=stations.simple_center_point,
        symmetric=True,
    ),
    CaseId.TWELVE: BeamLoadCase(
        case_id=CaseId.TWELVE,
        name="cantilever-beam-uniform-distributed-load",
        aisc_case=19,
        load_kind="uniform",
        summary=summary.cantilever_uniform,
        station=stations.cantilever_uniform,
        cantilever=True,
    ),
    CaseId.THIRTEEN: BeamLoadCase(
        case_id=CaseId.THIRTEEN,
        name="cantilever-beam-concentrated-load-at-free-end",
        aisc_case=22,
        load_kind="concentrated",
        summary=summary.cantilever_end_point,
        station=stations.cantilever_end_point,
        cantilever=True,
    ),
    CaseId.FIFTEEN: BeamLoadCase(
        case_id=CaseId.FIFTEEN,
        name="beam-pin-fixed-uniform-distributed-load",
        aisc_case=12,
        load_kind="uniform",
        summary=summary.pin_fixed_uniform,
        station=stations.pin_fixed_uniform,
    ),
    CaseId.TWENTY_THREE: BeamLoadCase(
        case_id=CaseId.TWENTY_THREE,
        name="beam-fixed-at-both-ends-uniform-distributed-load",
        aisc_case=15,
        load_kind="uniform",
        summary=summary.fixed_uniform,
        station=stations.fixed_uniform,
    ),
    CaseId.TWENTY_FOUR: BeamLoadCase(
        case_id=CaseId.TWENTY_FOUR,
        name="beam-fixed-at-both-ends-concentrated-load-at-center",
        aisc_case=16,
        load_kind="concentrated",
        summary=summary.fixed_center_point,
        station=stations.fixed_center_point,
        symmetric=True,
    ),
}


def parse_case_id(value: Union[CaseId, str, int, None]) -> Optional[CaseId]:
    """Return the matching `CaseId`, or None for unselected/unknown values."""
    if value is None:
        return None
    if isinstance(value, CaseId):
        return value
    token = str(value).strip()
    if not token:
        return None
    try:
        return CaseId(token)
    except ValueError:
        return None


def get_case(value: Union[CaseId, str, int, None]) -> Optional[BeamLoadCase]:
    """Look up a case; unselected or unknown ids give None (no-op path)."""
    case_id = parse_case_id(value)
    if case_id is None:
        return None
    return CASES[case_id]


def is_unselected(value: Union[CaseId, str, int, None]) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
