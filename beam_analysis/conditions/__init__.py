# beam_analysis/conditions - One analyzer per support condition
"""
CONDITIONS: CLOSED-FORM ANALYZERS
=================================

The set of support conditions is small and fixed:

- "simply-supported":  SimplySupported, one span, uniform grid sampling
- "two-span-unequal":  TwoSpanUnequal, continuous over a middle support,
                       critical-point-aware sampling

USAGE:
------
    from beam_analysis.conditions import ANALYZERS

    curve = ANALYZERS["two-span-unequal"].shear_force(beam, load=10.0)
"""

from .base import Analyzer
from .simply_supported import SimplySupported
from .two_span import TwoSpanUnequal, TwoSpanReactions, two_span_reactions

ANALYZERS = {
    SimplySupported.condition: SimplySupported(),
    TwoSpanUnequal.condition: TwoSpanUnequal(),
}

CONDITIONS = tuple(ANALYZERS)

__all__ = [
    'Analyzer',
    'SimplySupported',
    'TwoSpanUnequal',
    'TwoSpanReactions',
    'two_span_reactions',
    'ANALYZERS',
    'CONDITIONS',
]
