# beam_analysis/kernel - Condition-agnostic analysis plumbing
"""
KERNEL: SHARED PLUMBING FOR EVERY SUPPORT CONDITION
===================================================

The analyzers differ only in their closed-form formulas. What they share
lives here:
- units.py:    unit-conversion constants for deflection output
- geometry.py: span validation (InvalidGeometry)
- sampling.py: uniform grid, critical-point-aware stepping, output rounding
"""

from .geometry import InvalidGeometry
from .sampling import Station, StationKind, critical_stations, uniform_grid, make_curve
from .units import RIGIDITY_UNIT_SCALE, DEFLECTION_UNIT_SCALE

__all__ = [
    'InvalidGeometry',
    'Station',
    'StationKind',
    'critical_stations',
    'uniform_grid',
    'make_curve',
    'RIGIDITY_UNIT_SCALE',
    'DEFLECTION_UNIT_SCALE',
]
