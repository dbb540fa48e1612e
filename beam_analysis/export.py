# beam_analysis/export.py
"""
Export of analysis results (DataFrame, CSV, JSON).
"""

import json
from typing import Mapping, Union

import pandas as pd

from .model import AnalysisResult, Curve


def _rows(quantity: str, curve: Curve):
    for i, (x, y) in enumerate(zip(curve.xdata, curve.ydata)):
        yield {"quantity": quantity, "sample": i, "x": x, "y": y}


def results_to_dataframe(results: Union[AnalysisResult, Mapping[str, AnalysisResult]]) -> pd.DataFrame:
    """
    Long-format table of one or more curves.

    Columns: quantity, sample, x, y. The sample index keeps the two shear
    values at a middle support apart even though they share an x.
    """
    if isinstance(results, AnalysisResult):
        results = {results.equation.analys: results}

    rows = []
    for quantity, result in results.items():
        rows.extend(_rows(quantity, result.equation))
    return pd.DataFrame(rows, columns=["quantity", "sample", "x", "y"])


def results_to_csv(results: Union[AnalysisResult, Mapping[str, AnalysisResult]]) -> str:
    """CSV text of results_to_dataframe()."""
    return results_to_dataframe(results).to_csv(index=False)


def result_to_json(result: AnalysisResult, indent: int = 2) -> str:
    return json.dumps(result.to_dict(), indent=indent)
