# File: tests/test_simply_supported.py
"""
TEST: SIMPLY SUPPORTED BEAM WITH UNIFORM DISTRIBUTED LOAD (UDL)
================================================================

Compares the sampled curves with the textbook closed-form results:
- Reactions:      wL/2 at each support (shear at the ends)
- Midspan moment: wL²/8 (sagging, negative in this convention)
- Midspan sag:    5wL⁴/(384EI)

Scenario used throughout: L = 4 m, w = 10 kN/m, EI = 2e9 N·mm².
"""

import math

import numpy as np
import pytest

from beam_analysis import Beam, Material, SimplySupported, InvalidGeometry
from beam_analysis.kernel.units import RIGIDITY_UNIT_SCALE, DEFLECTION_UNIT_SCALE


STEEL = Material("steel", {"EI": 2e9})
L = 4.0
W = 10.0


@pytest.fixture
def beam():
    return Beam(primary_span=L, secondary_span=0, material=STEEL)


@pytest.fixture
def analyzer():
    return SimplySupported()


def test_grid_has_101_samples_from_zero_to_span(beam, analyzer):
    for curve in (analyzer.deflection(beam, W), analyzer.bending_moment(beam, W), analyzer.shear_force(beam, W)):
        assert len(curve.xdata) == 101
        assert len(curve.ydata) == 101
        assert curve.xdata[0] == 0.0
        assert curve.xdata[-1] == L
        assert curve.xdata.count(0.0) == 1
        assert curve.xdata.count(L) == 1
        assert np.all(np.diff(curve.xdata) > 0)
        # Uniform step l/100
        np.testing.assert_allclose(np.diff(curve.xdata), L / 100, atol=0.011)


def test_curve_labels(beam, analyzer):
    assert analyzer.deflection(beam, W).analys == "deflection"
    assert analyzer.bending_moment(beam, W).analys == "bendingmoment"
    assert analyzer.shear_force(beam, W).analys == "shearforce"


def test_midspan_moment_and_end_shears(beam, analyzer):
    """M(2) = -(10·2/2)(4-2) = -20, V(0) = 20, V(4) = -20."""
    M = analyzer.bending_moment(beam, W)
    V = analyzer.shear_force(beam, W)

    assert M.xdata[50] == 2.0
    assert M.ydata[50] == -20.0
    assert V.ydata[0] == 20.0
    assert V.ydata[-1] == -20.0
    # Peak moment wL²/8
    assert min(M.ydata) == pytest.approx(-W * L**2 / 8)
    print("✓ Moment and shear match wL²/8 and wL/2")


def test_moment_zero_at_supports_and_symmetric(beam, analyzer):
    M = analyzer.bending_moment(beam, W)
    assert M.ydata[0] == 0.0
    assert M.ydata[-1] == 0.0
    y = np.array(M.ydata)
    np.testing.assert_allclose(y, y[::-1], atol=0.011)


def test_shear_antisymmetric_about_midspan(beam, analyzer):
    V = np.array(analyzer.shear_force(beam, W).ydata)
    # V(l/2 + d) = -V(l/2 - d)
    np.testing.assert_allclose(V, -V[::-1], atol=0.011)
    assert V[50] == 0.0


def test_midspan_deflection_matches_textbook(beam, analyzer):
    v = analyzer.deflection(beam, W)
    EI_scaled = STEEL.EI / RIGIDITY_UNIT_SCALE
    expected = -5 * W * L**4 / (384 * EI_scaled) * DEFLECTION_UNIT_SCALE

    assert v.xdata[50] == 2.0
    assert np.isclose(v.ydata[50], expected, atol=0.01)
    assert min(v.ydata) == v.ydata[50]
    assert v.ydata[0] == 0.0
    assert v.ydata[-1] == 0.0


def test_load_distribution_factor_scales_deflection_only(analyzer):
    base = Beam(L, 0.0, STEEL)
    doubled = Beam(L, 0.0, STEEL, load_distribution_factor=2.0)

    v1 = np.array(analyzer.deflection(base, W).ydata)
    v2 = np.array(analyzer.deflection(doubled, W).ydata)
    np.testing.assert_allclose(v2, 2 * v1, atol=0.02)

    assert analyzer.bending_moment(base, W) == analyzer.bending_moment(doubled, W)


def test_negative_load_flips_every_curve(beam, analyzer):
    for method in (analyzer.deflection, analyzer.bending_moment, analyzer.shear_force):
        down = method(beam, W)
        up = method(beam, -W)
        assert up.xdata == down.xdata
        np.testing.assert_allclose(up.ydata, [-y for y in down.ydata], atol=1e-9)


def test_zero_load_gives_flat_curves(beam, analyzer):
    for method in (analyzer.deflection, analyzer.bending_moment, analyzer.shear_force):
        curve = method(beam, 0.0)
        assert len(curve.xdata) == 101
        assert all(y == 0.0 for y in curve.ydata)
        # No negative zeros leak into the output
        assert all(math.copysign(1.0, y) == 1.0 for y in curve.ydata)


def test_secondary_span_is_ignored(analyzer):
    curve = analyzer.shear_force(Beam(L, 3.0, STEEL), W)
    assert curve.xdata[-1] == L


def test_results_are_deterministic(beam, analyzer):
    assert analyzer.deflection(beam, W) == analyzer.deflection(beam, W)
    assert analyzer.shear_force(beam, W) == analyzer.shear_force(beam, W)


@pytest.mark.parametrize("span", [0.0, -1.0, float("nan"), float("inf")])
def test_invalid_span_rejected(analyzer, span):
    with pytest.raises(InvalidGeometry, match="primary_span"):
        analyzer.bending_moment(Beam(span, 0.0, STEEL), W)


def test_missing_EI_is_a_caller_error(analyzer):
    beam = Beam(L, 0.0, Material("no-rigidity", {"GA": 1e6}))
    with pytest.raises(KeyError):
        analyzer.deflection(beam, W)
    # Moment and shear do not need EI
    assert analyzer.shear_force(beam, W).ydata[0] == 20.0


def test_custom_step_count_and_rounding():
    analyzer = SimplySupported(n_steps=10, decimals=3)
    curve = analyzer.bending_moment(Beam(L, 0.0, STEEL), W)
    assert len(curve.xdata) == 11
    assert curve.xdata[5] == 2.0
    assert curve.ydata[1] == round(-(W * 0.4 / 2) * (L - 0.4), 3)


def test_invalid_step_count():
    with pytest.raises(ValueError, match="n_steps"):
        SimplySupported(n_steps=0)
