# beam_analysis/kernel/units.py
"""
UNIT CONVERSION FOR CLOSED-FORM DEFLECTION
==========================================

Inputs use mixed engineering units:
- spans in m
- load w in kN/m (numerically equal to N/mm)
- flexural rigidity EI in N·mm²

Moment (kN·m) and shear (kN) come out of the formulas directly. Deflection
needs two conversions so the result lands in mm:

    v[mm] = f(x, w, l) / (EI / RIGIDITY_UNIT_SCALE) * DEFLECTION_UNIT_SCALE * j

where f is the textbook numerator (w·l⁴ order, m and kN) and j is the beam's
load_distribution_factor.
"""

RIGIDITY_UNIT_SCALE = 1000 ** 3
DEFLECTION_UNIT_SCALE = 1000


def scaled_rigidity(EI: float) -> float:
    """EI in N·mm² expressed in the units the deflection numerators use."""
    return EI / RIGIDITY_UNIT_SCALE


def to_output_deflection(value, factor: float = 1.0):
    """Scale a deflection computed with scaled_rigidity() to mm, times j."""
    return value * DEFLECTION_UNIT_SCALE * factor
