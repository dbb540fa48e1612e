# beam_analysis - Closed-form beam response curves under UDL
"""
BEAM-ANALYSIS: Deflection, Moment and Shear Curves
==================================================

This package provides:
- Closed-form analyzers for a uniformly loaded beam, one per support
  condition (simply supported, two unequal continuous spans)
- Critical-point-aware sampling that lands exactly on supports,
  zero-shear points and span ends
- A facade that dispatches by condition name and wraps the result
- Summaries, tabular export and matplotlib plotting of the curves

ARCHITECTURE:
-------------
    model.py        Value objects (Material, Beam, Curve, AnalysisResult)
    catalog.py      Standard materials (EI, GA from E, I, G, A)
    config.py       Defaults (sampling steps, rounding, logging, API)
    kernel/         Units, geometry validation, sampling
    conditions/     One analyzer per support condition
    analysis.py     BeamAnalysis facade
    diagrams.py     Peak values of a curve
    export.py       DataFrame / CSV / JSON
    viz.py          Plotting
"""

from .model import (
    Material, Beam, Curve, AnalysisResult,
    DEFLECTION, BENDING_MOMENT, SHEAR_FORCE, QUANTITIES,
)
from .kernel import InvalidGeometry
from .conditions import ANALYZERS, CONDITIONS, SimplySupported, TwoSpanUnequal, two_span_reactions
from .analysis import BeamAnalysis, UnsupportedCondition, UnsupportedQuantity, analyze, analyze_all

__version__ = "0.1.0"

__all__ = [
    'Material', 'Beam', 'Curve', 'AnalysisResult',
    'DEFLECTION', 'BENDING_MOMENT', 'SHEAR_FORCE', 'QUANTITIES',
    'InvalidGeometry',
    'ANALYZERS', 'CONDITIONS', 'SimplySupported', 'TwoSpanUnequal', 'two_span_reactions',
    'BeamAnalysis', 'UnsupportedCondition', 'UnsupportedQuantity', 'analyze', 'analyze_all',
]
