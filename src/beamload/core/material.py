from __future__ import annotations
from dataclasses import dataclass

@dataclass
class Material:
    name: str
    E: float  # Young's modulus (ksi)


STEEL = Material(name="Steel", E=29000.0)
