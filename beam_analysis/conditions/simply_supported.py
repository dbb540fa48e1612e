# beam_analysis/conditions/simply_supported.py
"""
SIMPLY SUPPORTED BEAM UNDER UDL
===============================

Single span l, pinned at x = 0 and roller at x = l, uniform load w.

Closed-form results (textbook):
- Reactions:   R = w·l/2 at each support
- Shear:       V(x) = w·(l/2 - x)                   linear, zero at midspan
- Moment:      M(x) = -(w·x/2)·(l - x)              parabola, sagging negative
- Deflection:  v(x) = -(w·x / 24EI)·(l³ - 2lx² + x³) peak 5wl⁴/384EI at midspan

The moment sign (sagging negative) is the convention downstream charts
expect, so it is kept as written.
"""

import logging

import numpy as np

from ..kernel.geometry import single_span_length
from ..kernel.sampling import make_curve, uniform_grid
from ..kernel.units import scaled_rigidity, to_output_deflection
from ..model import Beam, Curve, DEFLECTION, BENDING_MOMENT, SHEAR_FORCE
from .base import Analyzer

logger = logging.getLogger(__name__)


class SimplySupported(Analyzer):
    condition = "simply-supported"

    def total_length(self, beam: Beam) -> float:
        return single_span_length(beam)

    def _grid(self, beam: Beam) -> np.ndarray:
        l = self.total_length(beam)
        if beam.secondary_span:
            logger.debug("secondary_span=%s ignored for %s", beam.secondary_span, self.condition)
        return uniform_grid(l, self.n_steps)

    def deflection(self, beam: Beam, load: float) -> Curve:
        x = self._grid(beam)
        l = x[-1]
        w = load
        Ei = scaled_rigidity(beam.material.properties["EI"])

        v = -(w * x / (24 * Ei)) * (l**3 - 2 * l * x**2 + x**3)
        v = to_output_deflection(v, beam.load_distribution_factor)

        return make_curve(DEFLECTION, x, v, self.decimals)

    def bending_moment(self, beam: Beam, load: float) -> Curve:
        x = self._grid(beam)
        l = x[-1]
        M = -(load * x / 2) * (l - x)
        return make_curve(BENDING_MOMENT, x, M, self.decimals)

    def shear_force(self, beam: Beam, load: float) -> Curve:
        x = self._grid(beam)
        l = x[-1]
        V = load * (l / 2 - x)
        return make_curve(SHEAR_FORCE, x, V, self.decimals)
