"""
CATALOG: STANDARD MATERIALS
===========================

PURPOSE:
--------
Analyzers only need rigidities (EI, optionally GA). Engineers think in terms
of a material and a cross-section, so this module turns (E, I, G, A) into a
Material and keeps a few common combinations ready to use by name.

UNITS:
------
- E, G: MPa (N/mm²)
- I:    mm⁴
- A:    mm²

which gives EI in N·mm² and GA in N, the units kernel.units expects.

For a rectangular section b × d (mm):
- A = b × d
- I = b × d³ / 12
"""

from typing import Dict, Optional

from .model import Material


def material_from_section(
    name: str,
    E: float,
    I: float,
    A: Optional[float] = None,
    G: Optional[float] = None,
) -> Material:
    """
    Build a Material from elastic moduli and section properties.

    GA is only added when both A and G are given.
    """
    if E <= 0:
        raise ValueError(f"E must be positive, got {E}")
    if I <= 0:
        raise ValueError(f"I must be positive, got {I}")

    properties = {"EI": E * I}
    if A is not None and G is not None:
        properties["GA"] = G * A
    return Material(name=name, properties=properties)


def rectangular_section(b: float, d: float):
    """(A, I) of a solid rectangle, b wide and d deep (mm)."""
    return b * d, b * d**3 / 12


# ============================================================================
# MATERIAL DEFINITIONS
# ============================================================================

_GLULAM_A, _GLULAM_I = rectangular_section(90.0, 270.0)
_CONCRETE_A, _CONCRETE_I = rectangular_section(300.0, 500.0)

MATERIALS: Dict[str, Material] = {
    # Hot-rolled steel IPE 200, S235
    "steel-ipe200": material_from_section(
        "Steel IPE 200", E=210000.0, I=19.43e6, A=2848.0, G=81000.0,
    ),
    # Glulam GL24h, 90 x 270 mm
    "glulam-90x270": material_from_section(
        "Glulam GL24h 90x270", E=11500.0, I=_GLULAM_I, A=_GLULAM_A, G=650.0,
    ),
    # Reinforced concrete C30/37, 300 x 500 mm, uncracked
    "concrete-300x500": material_from_section(
        "Concrete C30/37 300x500", E=33000.0, I=_CONCRETE_I, A=_CONCRETE_A, G=13750.0,
    ),
}

DEFAULT_MATERIAL = MATERIALS["steel-ipe200"]


def get_material(key: str) -> Material:
    if key not in MATERIALS:
        raise ValueError(f"Unknown material '{key}'. Available: {sorted(MATERIALS)}")
    return MATERIALS[key]
