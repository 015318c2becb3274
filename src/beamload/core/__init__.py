from .material import Material, STEEL
from .inputs import BeamInput
from .results import Result, SummaryResult, DiagramPoint, DiagramSeries

__all__ = [
    "Material", "STEEL", "BeamInput",
    "Result", "SummaryResult", "DiagramPoint", "DiagramSeries",
]
