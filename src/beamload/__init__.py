"""
beamload - closed-form shear, moment and deflection for standard beam-load cases.

Supported cases (AISC Manual Table 3-23 configurations):
- 1  simple beam, uniform load
- 5  simple beam, load increasing uniformly to one end
- 7  simple beam, concentrated load at center
- 12 cantilever, uniform load
- 13 cantilever, concentrated load at free end
- 15 propped cantilever (pin-fixed), uniform load
- 23 fixed-fixed, uniform load
- 24 fixed-fixed, concentrated load at center

Units are fixed: load in k/ft or k, length in ft, inertia in in^4, E in ksi.
"""

from beamload.analysis import DiagramSettings, compute_summary, generate_diagram, make_x_range
from beamload.cases import CASES, BeamLoadCase, CaseId, get_case, parse_case_id
from beamload.core.inputs import BeamInput
from beamload.core.material import STEEL, Material
from beamload.core.results import DiagramPoint, DiagramSeries, Result, SummaryResult
from beamload.io import InputField, input_fields

__all__ = [
    "BeamInput",
    "Material",
    "STEEL",
    "CaseId",
    "BeamLoadCase",
    "CASES",
    "get_case",
    "parse_case_id",
    "SummaryResult",
    "DiagramPoint",
    "DiagramSeries",
    "Result",
    "DiagramSettings",
    "compute_summary",
    "generate_diagram",
    "make_x_range",
    "InputField",
    "input_fields",
]
