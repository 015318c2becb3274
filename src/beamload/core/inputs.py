from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from sectiony import Section
    from .material import Material


Axis = Literal["y", "z"]


@dataclass(frozen=True)
class BeamInput:
    """Scalar beam properties shared by every beam-load case.

    Args:
        load: Applied load, k/ft for distributed cases or k for point loads
        length: Span length (ft)
        inertia: Moment of inertia (in^4)
        elasticity: Elastic modulus (ksi)

    Values are taken as given; sign and magnitude checks belong to the caller.
    """

    load: float
    length: float
    inertia: float
    elasticity: float

    @classmethod
    def from_section(
        cls,
        load: float,
        length: float,
        section: Section,
        material: Material,
        axis: Axis = "y",
    ) -> "BeamInput":
        """Build an input from a sectiony section bent about `axis`."""
        if axis == "y":
            inertia = section.Iy
        elif axis == "z":
            inertia = section.Iz
        else:
            raise ValueError(f"axis must be 'y' or 'z', got '{axis}'")
        return cls(
            load=float(load),
            length=float(length),
            inertia=float(inertia),
            elasticity=float(material.E),
        )

    @property
    def stiffness(self) -> float:
        """Flexural stiffness I*E (k-in^2)."""
        return self.inertia * self.elasticity

    @property
    def has_stiffness(self) -> bool:
        return self.stiffness != 0
