# beam_analysis/analysis.py
"""
ANALYSIS FACADE
===============

Resolves a support condition to its analyzer and wraps the returned curve
with the beam and load that produced it:

    result = BeamAnalysis().get_shear_force(beam, 10.0, "two-span-unequal")
    result.equation.analys   # "shearforce"
    result.equation.xdata    # [0.0, ..., 10.0]

No numbers are computed here; an unknown condition fails before any
analyzer runs.
"""

import logging
from typing import Dict, Mapping, Optional

from .conditions import ANALYZERS, Analyzer
from .model import AnalysisResult, Beam, QUANTITIES, DEFLECTION, BENDING_MOMENT, SHEAR_FORCE

logger = logging.getLogger(__name__)


class UnsupportedCondition(ValueError):
    """Raised when no analyzer is registered for the requested condition."""
    pass


class UnsupportedQuantity(ValueError):
    """Raised when the requested quantity is not one of QUANTITIES."""
    pass


class BeamAnalysis:
    """Dispatch (beam, load, condition) to the matching analyzer."""

    def __init__(self, analyzers: Optional[Mapping[str, Analyzer]] = None):
        self.analyzers: Dict[str, Analyzer] = dict(analyzers if analyzers is not None else ANALYZERS)

    @property
    def conditions(self):
        return list(self.analyzers)

    def _resolve(self, condition: str) -> Analyzer:
        analyzer = self.analyzers.get(condition)
        if analyzer is None:
            raise UnsupportedCondition(
                f"Unsupported condition {condition!r}. Available: {self.conditions}"
            )
        return analyzer

    def get_deflection(self, beam: Beam, load: float, condition: str) -> AnalysisResult:
        analyzer = self._resolve(condition)
        logger.debug("deflection: %s load=%s", condition, load)
        return AnalysisResult(beam=beam, load=load, equation=analyzer.deflection(beam, load))

    def get_bending_moment(self, beam: Beam, load: float, condition: str) -> AnalysisResult:
        analyzer = self._resolve(condition)
        logger.debug("bending moment: %s load=%s", condition, load)
        return AnalysisResult(beam=beam, load=load, equation=analyzer.bending_moment(beam, load))

    def get_shear_force(self, beam: Beam, load: float, condition: str) -> AnalysisResult:
        analyzer = self._resolve(condition)
        logger.debug("shear force: %s load=%s", condition, load)
        return AnalysisResult(beam=beam, load=load, equation=analyzer.shear_force(beam, load))

    def analyze(self, beam: Beam, load: float, condition: str, quantity: str) -> AnalysisResult:
        """Single entry point keyed by quantity name."""
        getters = {
            DEFLECTION: self.get_deflection,
            BENDING_MOMENT: self.get_bending_moment,
            SHEAR_FORCE: self.get_shear_force,
        }
        if quantity not in getters:
            raise UnsupportedQuantity(f"Unsupported quantity {quantity!r}. Available: {list(QUANTITIES)}")
        return getters[quantity](beam, load, condition)

    def analyze_all(self, beam: Beam, load: float, condition: str) -> Dict[str, AnalysisResult]:
        """All three curves for one beam, keyed by quantity."""
        self._resolve(condition)
        return {q: self.analyze(beam, load, condition, q) for q in QUANTITIES}


_DEFAULT = BeamAnalysis()


def analyze(beam: Beam, load: float, condition: str, quantity: str) -> AnalysisResult:
    """analyze() on a shared, read-only BeamAnalysis."""
    return _DEFAULT.analyze(beam, load, condition, quantity)


def analyze_all(beam: Beam, load: float, condition: str) -> Dict[str, AnalysisResult]:
    return _DEFAULT.analyze_all(beam, load, condition)
