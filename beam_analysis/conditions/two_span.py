# beam_analysis/conditions/two_span.py
"""
TWO-SPAN CONTINUOUS BEAM (UNEQUAL SPANS) UNDER UDL
==================================================

    w (kN/m) over the whole length
    ↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓↓
    ================================
    △              △               ○
    x=0 (r1)       x=l1 (r2)       x=l (r3)

The middle support makes the beam statically indeterminate. The support
moment follows from compatibility (three-moment equation with both ends
pinned):

    m1 = -(w·l2³ + w·l1³) / (8·(l1 + l2))

and the reactions from statics of each span plus overall force balance:

    r1 = m1/l1 + w·l1/2
    r3 = m1/l2 + w·l2/2
    r2 = w·l1 + w·l2 - r1 - r3

With the reactions known, the internal forces are Macaulay expressions in x
(the r2 term switches on past the middle support):

    V(x) = r1 + r2·<x - l1>⁰ - w·x
    M(x) = -(r1·x + r2·<x - l1> - w·x²/2)
    EI·v(x) = r1·x³/6 + r2·<x - l1>³/6 - w·x⁴/24 + C·x,
              C = w·l1³/24 - r1·l1²/6   (from v(0) = v(l1) = 0)

EQUAL-SPAN CHECK:
-----------------
For l1 = l2 = L the formulas reduce to the textbook values
r1 = r3 = 0.375·w·L, r2 = 1.25·w·L, m1 = -w·L²/8.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..kernel.geometry import two_span_lengths
from ..kernel.sampling import Station, StationKind, critical_stations, make_curve
from ..kernel.units import scaled_rigidity, to_output_deflection
from ..model import Beam, Curve, DEFLECTION, BENDING_MOMENT, SHEAR_FORCE
from .base import Analyzer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoSpanReactions:
    """Support moment and reactions of a two-span beam under UDL."""
    m1: float   # Moment at the middle support (kN·m, hogging negative)
    r1: float   # Left end reaction (kN)
    r2: float   # Middle support reaction (kN)
    r3: float   # Right end reaction (kN)

    @property
    def total(self) -> float:
        return self.r1 + self.r2 + self.r3


def two_span_reactions(l1: float, l2: float, w: float) -> TwoSpanReactions:
    """
    Reactions of a continuous two-span beam with a UDL over both spans.

    Args:
        l1: Primary span (m)
        l2: Secondary span (m)
        w: Load intensity (kN/m)

    Returns:
        TwoSpanReactions with r1 + r2 + r3 == w·(l1 + l2)
    """
    m1 = -((w * l2**3) + (w * l1**3)) / (8 * (l1 + l2))
    r1 = (m1 / l1) + ((w * l1) / 2)
    r3 = (m1 / l2) + ((w * l2) / 2)
    r2 = (w * l1) + (w * l2) - r1 - r3
    return TwoSpanReactions(m1=m1, r1=r1, r2=r2, r3=r3)


def zero_shear_points(l1: float, l2: float, w: float, reactions: TwoSpanReactions) -> List[Tuple[float, StationKind]]:
    """
    Positions where the shear diagram crosses zero inside each span.

    Empty for w == 0: the crossing is undefined and the curves are flat, so
    sampling falls back to the grid plus support and end.
    """
    if w == 0:
        logger.debug("Zero load: no zero-shear points, grid sampling only")
        return []

    l = l1 + l2
    points = []
    x_left = reactions.r1 / w
    if 0 < x_left < l1:
        points.append((x_left, StationKind.ZERO_SHEAR_LEFT))
    x_right = l - reactions.r3 / w
    if l1 < x_right < l:
        points.append((x_right, StationKind.ZERO_SHEAR_RIGHT))
    return points


class TwoSpanUnequal(Analyzer):
    condition = "two-span-unequal"

    def total_length(self, beam: Beam) -> float:
        l1, l2 = two_span_lengths(beam)
        return l1 + l2

    def _prepare(self, beam: Beam, load: float):
        """Validate spans, compute reactions once, lay out the stations."""
        l1, l2 = two_span_lengths(beam)
        w = load
        reactions = two_span_reactions(l1, l2, w)
        logger.debug(
            "two-span l1=%s l2=%s w=%s -> m1=%.4f r1=%.4f r2=%.4f r3=%.4f",
            l1, l2, w, reactions.m1, reactions.r1, reactions.r2, reactions.r3,
        )

        critical = [(l1, StationKind.SUPPORT)] + zero_shear_points(l1, l2, w, reactions)
        stations = critical_stations(l1 + l2, critical, self.n_steps)
        return l1, l2, reactions, stations

    def reactions(self, beam: Beam, load: float) -> TwoSpanReactions:
        l1, l2 = two_span_lengths(beam)
        return two_span_reactions(l1, l2, load)

    def deflection(self, beam: Beam, load: float) -> Curve:
        l1, l2, reactions, stations = self._prepare(beam, load)
        r1, r2 = reactions.r1, reactions.r2
        w = load
        Ei = scaled_rigidity(beam.material.properties["EI"])
        j = beam.load_distribution_factor

        def span_one(x):
            return (x / (24 * Ei)) * (
                (4 * r1 * x**2) - (w * x**3) + (w * l1**3) - (4 * r1 * l1**2)
            )

        def span_two(x):
            term1 = (r1 * x / 6) * (x**2 - l1**2)
            term2 = (r2 * x / 6) * (x**2 - 3 * l1 * x + 3 * l1**2)
            term3 = (r2 * l1**3) / 6
            term4 = (w * x / 24) * (x**3 - l1**3)
            return (term1 + term2 - term3 - term4) / Ei

        xs = np.array([s.x for s in stations])
        # Branch on position, the physically meaningful boundary
        v = np.where(xs <= l1, span_one(xs), span_two(xs))
        v = to_output_deflection(v, j)

        return make_curve(DEFLECTION, xs, v, self.decimals)

    def bending_moment(self, beam: Beam, load: float) -> Curve:
        l1, l2, reactions, stations = self._prepare(beam, load)
        r1, r2 = reactions.r1, reactions.r2
        w = load

        ys = []
        for station in stations:
            x = station.x
            if station.kind in (StationKind.START, StationKind.END):
                M = 0.0
            elif station.kind is StationKind.SUPPORT:
                M = -(r1 * l1 - 0.5 * w * l1**2)
            elif x < l1:
                M = -(r1 * x - 0.5 * w * x**2)
            else:
                M = -((r1 * x + r2 * (x - l1)) - 0.5 * w * x**2)
            ys.append(M)

        return make_curve(BENDING_MOMENT, [s.x for s in stations], ys, self.decimals)

    def shear_force(self, beam: Beam, load: float) -> Curve:
        l1, l2, reactions, stations = self._prepare(beam, load)
        r1, r2 = reactions.r1, reactions.r2
        w = load
        l = l1 + l2

        xs, ys = [], []
        for station in stations:
            x = station.x
            if station.kind is StationKind.START:
                xs.append(x)
                ys.append(r1)
            elif station.kind is StationKind.END:
                xs.append(l)
                ys.append((r1 + r2) - w * l)
            elif station.kind is StationKind.SUPPORT:
                # Left and right limits: the jump of r2 is drawn, not averaged
                xs.extend([l1, l1])
                ys.extend([r1 - w * l1, (r1 + r2) - w * l1])
            elif x < l1:
                xs.append(x)
                ys.append(r1 - w * x)
            else:
                xs.append(x)
                ys.append((r1 + r2) - w * x)

        return make_curve(SHEAR_FORCE, xs, ys, self.decimals)

    def stations(self, beam: Beam, load: float) -> List[Station]:
        """Sampling stations used by all three curves (for inspection and plotting)."""
        return self._prepare(beam, load)[3]
