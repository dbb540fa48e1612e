# File: tests/test_postprocessing.py
"""
TEST: Curve summaries and export
================================

1. summarize_curve finds the peaks and where they are
2. get_beam_summary collects the headline values
3. DataFrame / CSV / JSON export keep every sample
"""

import io
import json

import pandas as pd
import pytest

from beam_analysis import Beam, Material, Curve, analyze_all, two_span_reactions
from beam_analysis.diagrams import summarize_curve, get_beam_summary
from beam_analysis.export import results_to_dataframe, results_to_csv, result_to_json


STEEL = Material("steel", {"EI": 2e9})


@pytest.fixture
def simple_results():
    return analyze_all(Beam(4.0, 0.0, STEEL), 10.0, "simply-supported")


@pytest.fixture
def two_span_results():
    return analyze_all(Beam(6.0, 4.0, STEEL), 10.0, "two-span-unequal")


def test_summarize_simply_supported_moment(simple_results):
    s = summarize_curve(simple_results["bendingmoment"])
    assert s.analys == "bendingmoment"
    assert s.min_value == -20.0
    assert s.x_at_min == 2.0
    assert s.max_value == 0.0
    assert s.max_abs == 20.0


def test_summarize_shear_first_peak_wins(simple_results):
    s = summarize_curve(simple_results["shearforce"].equation)
    assert s.max_abs == 20.0
    assert s.x_at_max_abs == 0.0
    assert s.x_at_min == 4.0


def test_summarize_empty_curve():
    with pytest.raises(ValueError, match="empty"):
        summarize_curve(Curve("deflection", [], []))


def test_beam_summary(two_span_results):
    summary = get_beam_summary(two_span_results)
    r = two_span_reactions(6.0, 4.0, 10.0)

    # Largest |moment| is the hogging moment over the support
    assert summary["max_moment"] == pytest.approx(-r.m1, abs=0.005)
    # Largest |shear| is the left limit at the support
    assert summary["max_shear"] == pytest.approx(abs(r.r1 - 60.0), abs=0.005)
    assert set(summary["curves"]) == {"deflection", "bendingmoment", "shearforce"}
    assert summary["curves"]["bendingmoment"]["x_at_max"] == 6.0


def test_beam_summary_partial(simple_results):
    summary = get_beam_summary({"shearforce": simple_results["shearforce"]})
    assert summary["max_shear"] == 20.0
    assert summary["max_deflection"] is None


def test_dataframe_keeps_every_sample(two_span_results):
    df = results_to_dataframe(two_span_results)
    assert list(df.columns) == ["quantity", "sample", "x", "y"]
    assert len(df) == sum(len(r.equation) for r in two_span_results.values())

    shear = df[df["quantity"] == "shearforce"]
    # Both limits at the middle support survive
    assert (shear["x"] == 6.0).sum() == 2


def test_dataframe_from_single_result(simple_results):
    df = results_to_dataframe(simple_results["deflection"])
    assert set(df["quantity"]) == {"deflection"}
    assert len(df) == 101


def test_csv_round_trips_through_pandas(simple_results):
    text = results_to_csv(simple_results)
    assert text.splitlines()[0] == "quantity,sample,x,y"
    df = pd.read_csv(io.StringIO(text))
    assert len(df) == 3 * 101


def test_result_to_json(simple_results):
    data = json.loads(result_to_json(simple_results["bendingmoment"]))
    assert data["load"] == 10.0
    assert data["equation"]["analys"] == "bendingmoment"
    assert data["equation"]["ydata"][50] == -20.0
