# File: tests/test_viz.py
"""
Smoke tests for the plotting helpers (non-interactive backend).
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from beam_analysis import Beam, Material, Curve, analyze_all
from beam_analysis.viz import plot_curve, plot_beam_curves


STEEL = Material("steel", {"EI": 2e9})


@pytest.fixture
def results():
    return analyze_all(Beam(6.0, 4.0, STEEL), 10.0, "two-span-unequal")


def test_plot_curve_to_file(results, tmp_path):
    out = tmp_path / "plots" / "shear.png"
    plot_curve(results["shearforce"], outpath=str(out))
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_curve_into_existing_axes(results):
    fig, ax = plt.subplots()
    returned = plot_curve(results["bendingmoment"].equation, ax=ax)
    assert returned is ax
    assert ax.get_title() == "Bending Moment"
    line = ax.get_lines()[0]
    assert list(line.get_xdata()) == results["bendingmoment"].equation.xdata
    plt.close(fig)


def test_plot_beam_curves(results, tmp_path):
    out = tmp_path / "all.png"
    fig = plot_beam_curves(results, outpath=str(out), title="Two spans")
    assert out.exists()
    assert len(fig.axes) == 3


def test_plot_unknown_analys():
    with pytest.raises(ValueError, match="Unknown analys"):
        plot_curve(Curve("torsion", [0.0, 1.0], [0.0, 0.0]))


def test_plot_beam_curves_needs_a_curve():
    with pytest.raises(ValueError, match="No curves"):
        plot_beam_curves({})
