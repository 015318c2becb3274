from __future__ import annotations

import numpy as np

from .settings import DiagramSettings


def make_x_range(length: float, points: int) -> np.ndarray:
    """
    Stations along the span at which diagrams are sampled.

    Returns `points` evenly spaced positions from 0 to `length` inclusive,
    each clamped into [0, length]. A single point gives just the origin.

    Args:
        length: Span length (ft)
        points: Number of stations (>= 1)
    """
    DiagramSettings(points=points).validate()
    upper = max(float(length), 0.0)
    x = np.linspace(0.0, upper, points)
    return np.clip(x, 0.0, upper)
