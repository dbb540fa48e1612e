# beam_analysis/kernel/sampling.py
"""
SAMPLING: WHERE ALONG THE BEAM DO WE EVALUATE?
==============================================

Two schemes:

1. uniform_grid(): n_steps + 1 equally spaced points from 0 to L. Enough for
   a simply supported beam, whose diagrams are smooth over the whole length.

2. critical_stations(): the same nominal step, but specific x-coordinates
   (interior support, zero-shear points, beam end) are landed on exactly.
   A plain grid would miss the shear jump at a support and the true moment
   and deflection peaks at zero-shear points.

STEPPING RULE:
--------------
    tolerance = L / n_steps
    nominal   = last_x + tolerance

    if the next pending critical point c satisfies c - nominal <= tolerance/2:
        emit c (snap), remember it, never land on it again
    else:
        emit nominal

So a critical point that the nominal step has reached, passed, or nearly
reached replaces that grid point. After a snap the grid continues from the
snapped position. The loop ends on the sample that equals L.

Each emitted Station carries a kind so the curve generators know what they
landed on (the shear generator emits two values at a SUPPORT station).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..model import Curve

# Relative slack used when comparing positions built by repeated addition
POSITION_RTOL = 1e-9


class StationKind(Enum):
    START = "start"
    GRID = "grid"
    SUPPORT = "support"
    ZERO_SHEAR_LEFT = "zero-shear-left"
    ZERO_SHEAR_RIGHT = "zero-shear-right"
    END = "end"


@dataclass(frozen=True)
class Station:
    """A sampling position and what it represents."""
    x: float
    kind: StationKind


@dataclass
class StepperState:
    """Position of the last emitted sample and the last critical point snapped to."""
    last_x: float = 0.0
    last_snap: Optional[float] = None


def uniform_grid(length: float, n_steps: int = 100) -> np.ndarray:
    """n_steps + 1 points from 0 to length, both ends exact."""
    return np.linspace(0.0, length, n_steps + 1)


def _pending_points(
    length: float,
    critical: Iterable[Tuple[float, StationKind]],
    slack: float,
) -> List[Station]:
    # Interior critical points only, sorted, duplicates merged (first kind wins)
    finite = [(x, kind) for x, kind in critical if x is not None and np.isfinite(x)]
    pending: List[Station] = []
    for x, kind in sorted(finite, key=lambda item: item[0]):
        if x <= slack or x >= length - slack:
            continue
        if pending and abs(pending[-1].x - x) <= slack:
            continue
        pending.append(Station(float(x), kind))
    return pending


def critical_stations(
    length: float,
    critical: Sequence[Tuple[float, StationKind]] = (),
    n_steps: int = 100,
) -> List[Station]:
    """
    Walk from 0 to length in nominal steps of length / n_steps, snapping to
    the given critical points.

    Args:
        length: Total beam length (> 0)
        critical: (x, kind) pairs. Points outside (0, length) are ignored;
            0 and length are always emitted as START and END.
        n_steps: Number of nominal steps over the length

    Returns:
        Stations in increasing x, first at 0, last at length.
    """
    tolerance = length / n_steps
    slack = length * POSITION_RTOL
    pending = _pending_points(length, critical, slack)

    state = StepperState()
    stations = [Station(0.0, StationKind.START)]

    while True:
        nominal = state.last_x + tolerance

        if pending and pending[0].x - nominal <= tolerance / 2:
            station = pending.pop(0)
            state.last_snap = station.x
        elif length - nominal <= tolerance / 2:
            station = Station(length, StationKind.END)
            state.last_snap = length
        else:
            station = Station(nominal, StationKind.GRID)

        stations.append(station)
        state.last_x = station.x

        if station.kind is StationKind.END:
            break

    return stations


def round_samples(values: Iterable[float], decimals: int = 2) -> List[float]:
    """Round each emitted sample; negative zero is folded to 0.0."""
    return [round(float(v), decimals) + 0.0 for v in values]


def make_curve(analys: str, xs: Iterable[float], ys: Iterable[float], decimals: int = 2) -> Curve:
    """Build a Curve from full-precision samples, rounding only the output."""
    xdata = round_samples(xs, decimals)
    ydata = round_samples(ys, decimals)
    if len(xdata) != len(ydata):
        raise ValueError(f"xdata and ydata lengths differ: {len(xdata)} != {len(ydata)}")
    return Curve(analys=analys, xdata=xdata, ydata=ydata)
