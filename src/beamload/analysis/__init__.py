from __future__ import annotations

from beamload.analysis.diagram import generate_diagram, sample_stations
from beamload.analysis.settings import DEFAULT_POINTS, DiagramSettings
from beamload.analysis.stations import make_x_range
from beamload.analysis.summary import compute_summary

__all__ = [
    "compute_summary",
    "generate_diagram",
    "sample_stations",
    "make_x_range",
    "DiagramSettings",
    "DEFAULT_POINTS",
]
