# beam_analysis/diagrams.py
"""
CURVE SUMMARIES
===============

Charts show the whole curve, but design checks need a handful of numbers:
peak deflection, peak hogging and sagging moment, peak shear, and where
they occur.

SIGN CONVENTIONS (as emitted by the analyzers):
-----------------------------------------------
- Deflection: upward positive (a sagging beam has negative values)
- Moment:     sagging negative, hogging positive
- Shear:      positive at the left end of a downward-loaded beam
"""

from dataclasses import dataclass, asdict
from typing import Dict, Mapping, Union

import numpy as np

from .model import AnalysisResult, Curve


@dataclass
class CurveSummary:
    """Extreme values of one curve."""
    analys: str
    max_value: float
    x_at_max: float
    min_value: float
    x_at_min: float
    max_abs: float
    x_at_max_abs: float


def _as_curve(item: Union[Curve, AnalysisResult]) -> Curve:
    return item.equation if isinstance(item, AnalysisResult) else item


def summarize_curve(item: Union[Curve, AnalysisResult]) -> CurveSummary:
    """
    Peak values and their positions for one curve.

    On ties (e.g., the flat curve of an unloaded beam) the first sample wins.
    """
    curve = _as_curve(item)
    if len(curve) == 0:
        raise ValueError(f"Cannot summarize an empty {curve.analys} curve")

    x = np.asarray(curve.xdata, dtype=float)
    y = np.asarray(curve.ydata, dtype=float)

    i_max = int(np.argmax(y))
    i_min = int(np.argmin(y))
    i_abs = int(np.argmax(np.abs(y)))

    return CurveSummary(
        analys=curve.analys,
        max_value=float(y[i_max]),
        x_at_max=float(x[i_max]),
        min_value=float(y[i_min]),
        x_at_min=float(x[i_min]),
        max_abs=float(abs(y[i_abs])),
        x_at_max_abs=float(x[i_abs]),
    )


def get_beam_summary(results: Mapping[str, Union[Curve, AnalysisResult]]) -> Dict:
    """
    Summary statistics for a set of curves keyed by quantity.

    Parameters:
    -----------
    results : Mapping[str, Curve | AnalysisResult]
        Typically the output of BeamAnalysis.analyze_all()

    Returns:
    --------
    Dict with one summary dict per quantity, plus the headline values
    max_deflection, max_moment and max_shear (absolute, None if missing)
    """
    summaries = {q: summarize_curve(item) for q, item in results.items()}

    def headline(quantity):
        s = summaries.get(quantity)
        return s.max_abs if s is not None else None

    return {
        "max_deflection": headline("deflection"),
        "max_moment": headline("bendingmoment"),
        "max_shear": headline("shearforce"),
        "curves": {q: asdict(s) for q, s in summaries.items()},
    }
