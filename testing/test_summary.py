from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

# Allow running directly from repo root without installation.
SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC))

from beamload import CASES, BeamInput, CaseId, compute_summary


ALL_CASES = list(CaseId)


def _beam(load: float = 1.0, length: float = 10.0, inertia: float = 100.0, elasticity: float = 29000.0) -> BeamInput:
    return BeamInput(load=load, length=length, inertia=inertia, elasticity=elasticity)


def test_simple_uniform_reference_values() -> None:
    """1 k/ft over a 10 ft simple span: wL^2/8 and wL/2."""
    res = compute_summary("1", _beam())

    assert res is not None
    assert res.positive_moment == pytest.approx(12.5)
    assert res.shear == pytest.approx(5.0)
    assert res.negative_moment is None
    # 5 w L^4 / (384 E I) with w in k/in and L in inches
    expected = 5.0 * (1.0 / 12.0) * 120.0 ** 4 / (384.0 * 100.0 * 29000.0)
    assert res.deflection == pytest.approx(expected)
    assert res.l_over == pytest.approx(120.0 / expected)


@pytest.mark.parametrize(
    "case_id, shear, pos, neg",
    [
        ("5", (2 / 3) * 5.0, 0.128 * 5.0 * 10.0, None),
        ("7", 0.5, 2.5, None),
        ("12", 10.0, None, 50.0),
        ("13", 1.0, None, 10.0),
        ("15", 6.25, 9 / 128.0 * 100.0, 12.5),
        ("23", 5.0, 100.0 / 24.0, 100.0 / 12.0),
        ("24", 0.5, 1.25, 1.25),
    ],
)
def test_case_extrema(case_id: str, shear: float, pos, neg) -> None:
    res = compute_summary(case_id, _beam())

    assert res is not None
    assert res.shear == pytest.approx(shear)
    if pos is None:
        assert res.positive_moment is None
    else:
        assert res.positive_moment == pytest.approx(pos)
    if neg is None:
        assert res.negative_moment is None
    else:
        assert res.negative_moment == pytest.approx(neg)


def test_case_deflections() -> None:
    I, E = 100.0, 29000.0
    L_in = 120.0
    expected = {
        CaseId.FIVE: 0.01304 * 5.0 * L_in ** 3 / (I * E),
        CaseId.SEVEN: L_in ** 3 / (48 * I * E),
        CaseId.TWELVE: (1 / 12.0) * L_in ** 4 / (8 * E * I),
        CaseId.THIRTEEN: L_in ** 3 / (3 * I * E),
        CaseId.FIFTEEN: (1 / 12.0) * L_in ** 4 / (185.0 * I * E),
        CaseId.TWENTY_THREE: (1 / 384.0) * (1 / 12.0) * L_in ** 4 / (I * E),
        CaseId.TWENTY_FOUR: L_in ** 3 / (192.0 * I * E),
    }
    for case_id, deflection in expected.items():
        res = compute_summary(case_id, _beam(inertia=I, elasticity=E))
        assert res is not None
        assert res.deflection == pytest.approx(deflection), case_id


@pytest.mark.parametrize("case_id", ALL_CASES)
def test_l_over_doubles_only_for_cantilevers(case_id: CaseId) -> None:
    beam = _beam(load=2.0, length=14.0)
    res = compute_summary(case_id, beam)

    assert res is not None
    base = (1 / res.deflection) * beam.length * 12
    if case_id in (CaseId.TWELVE, CaseId.THIRTEEN):
        assert res.l_over == 2 * base
    else:
        assert res.l_over == base


@pytest.mark.parametrize("case_id", ALL_CASES)
@pytest.mark.parametrize("inertia, elasticity", [(0.0, 29000.0), (100.0, 0.0), (0.0, 0.0)])
def test_zero_stiffness_gives_undefined_deflection(case_id: CaseId, inertia: float, elasticity: float) -> None:
    res = compute_summary(case_id, _beam(inertia=inertia, elasticity=elasticity))

    assert res is not None
    assert res.deflection is None
    assert res.l_over is None
    # Forces are still reported
    assert res.shear is not None and math.isfinite(res.shear)


@pytest.mark.parametrize("case_id", ALL_CASES)
def test_zero_load_gives_zero_results(case_id: CaseId) -> None:
    res = compute_summary(case_id, _beam(load=0.0))

    assert res is not None
    for value in (res.shear, res.positive_moment, res.negative_moment):
        assert value is None or value == 0
    assert res.deflection == 0
    assert res.l_over is None


@pytest.mark.parametrize("case_id", ["", None, "99", "2", 99, "seven"])
def test_unselected_or_unknown_case_returns_none(case_id) -> None:
    assert compute_summary(case_id, _beam()) is None


def test_case_id_forms_are_equivalent() -> None:
    beam = _beam()
    by_enum = compute_summary(CaseId.TWENTY_THREE, beam)
    by_str = compute_summary("23", beam)
    by_int = compute_summary(23, beam)

    assert by_enum == by_str == by_int


def test_repeated_calls_are_identical() -> None:
    beam = _beam(load=3.2, length=22.5, inertia=510.0)
    for case_id in CASES:
        assert compute_summary(case_id, beam) == compute_summary(case_id, beam)


def test_overflowed_deflection_is_reported_as_undefined() -> None:
    """A subnormal stiffness overflows the division to inf."""
    beam = _beam(load=1.0, length=10.0, inertia=1e-300, elasticity=1e-10)

    with pytest.warns(RuntimeWarning, match="overflowed"):
        res = compute_summary("13", beam)

    assert res is not None
    assert res.deflection is None
    assert res.l_over is None
    assert res.shear == pytest.approx(1.0)


def test_summary_dict_and_rows() -> None:
    res = compute_summary("12", _beam())

    assert res is not None
    data = res.to_dict()
    assert set(data) == {"shear", "positiveMoment", "negativeMoment", "deflection", "lOver"}
    assert data["positiveMoment"] is None
    assert data["negativeMoment"] == pytest.approx(50.0)

    labels = [label for label, _, _ in res.rows()]
    assert labels == ["Max Shear", "Max Negative Moment", "Max Deflection", "'L-over' Value"]
    units = {label: unit for label, _, unit in res.rows()}
    assert units["Max Shear"] == "k"
    assert units["Max Deflection"] == "in."


def test_large_span_deflection_overflow_is_undefined() -> None:
    """(12 L)^4 exceeds the float range; forces stay finite."""
    beam = _beam(length=1e80)

    with pytest.warns(RuntimeWarning, match="overflowed"):
        res = compute_summary("1", beam)

    assert res is not None
    assert res.deflection is None
    assert res.l_over is None
    assert res.positive_moment == pytest.approx(1e160 / 8.0)
    assert res.shear == pytest.approx(5e79)


# Cases whose deflection carries L^4 (or a load scaled by L) overflow at this span.
@pytest.mark.parametrize("case_id", ["1", "5", "12", "15", "23"])
def test_large_span_never_raises(case_id: str) -> None:
    with pytest.warns(RuntimeWarning):
        res = compute_summary(case_id, _beam(length=1e80))

    assert res is not None
    assert res.deflection is None
    assert res.l_over is None


def test_tiny_deflection_l_over_overflow_is_undefined() -> None:
    """A subnormal deflection makes span / deflection overflow."""
    beam = _beam(load=1e-320)

    with pytest.warns(RuntimeWarning, match="L-over"):
        res = compute_summary("13", beam)

    assert res is not None
    assert res.deflection is not None and res.deflection > 0
    assert res.l_over is None


def test_summary_fields_are_plain_floats() -> None:
    res = compute_summary("15", _beam())

    assert res is not None
    for value in res.to_dict().values():
        assert type(value) is float


@pytest.mark.parametrize("case_id", ["7", "13", "24"])
def test_large_span_point_load_deflection_stays_finite(case_id: str) -> None:
    res = compute_summary(case_id, _beam(length=1e80))

    assert res is not None
    assert res.deflection is not None and math.isfinite(res.deflection)
    assert res.l_over is not None and math.isfinite(res.l_over)
