from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from ..cases.registry import CaseId, get_case


@dataclass(frozen=True)
class InputField:
    """Label for one user-entered beam property."""
    name: str
    description: str


_LENGTH_FT = InputField(name="length", description="Length, L (ft): ")

_FIELDS = {
    "uniform": [InputField(name="load", description="Uniform Load, w (k/ft): "), _LENGTH_FT],
    "concentrated": [InputField(name="load", description="Concentrated Load, P (k): "), _LENGTH_FT],
}

_GENERIC = [
    InputField(name="load", description="Load: "),
    InputField(name="length", description="Length: "),
]


def input_fields(case_id: Union[CaseId, str, int, None]) -> List[InputField]:
    """Load and length fields to show for a case.

    Cases without a dedicated label set (including the varying-load case and
    unknown ids) fall back to generic labels.
    """
    case = get_case(case_id)
    if case is None:
        return list(_GENERIC)
    return list(_FIELDS.get(case.load_kind, _GENERIC))
