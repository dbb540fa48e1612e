# Material, Beam, Curve and AnalysisResult value objects

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping

DEFLECTION = "deflection"
BENDING_MOMENT = "bendingmoment"
SHEAR_FORCE = "shearforce"

QUANTITIES = (DEFLECTION, BENDING_MOMENT, SHEAR_FORCE)


@dataclass(frozen=True)
class Material:
    """
    Named bundle of section/material properties.

    Parameters:
    -----------
    name : str
        Human-readable name (e.g., "Steel IPE 200")

    properties : Mapping[str, float]
        Rigidities used by the analyzers:
        - EI: flexural rigidity (N·mm²), required by every analyzer
        - GA: shear rigidity (N), optional

    The mapping is copied into a read-only view, so a Material can be shared
    between beams and threads without anyone changing it underneath.
    """
    name: str
    properties: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def EI(self) -> float:
        return self.properties["EI"]


@dataclass(frozen=True)
class Beam:
    """
    Beam geometry plus the material it is made of.

    Units follow the rest of the package: spans in m, load in kN/m,
    EI in N·mm², deflection in mm (see kernel.units).

    Parameters:
    -----------
    primary_span : float
        Length of the first (or only) span, must be > 0

    secondary_span : float
        Length of the second span. Only used by two-span conditions,
        0 for single-span beams.

    material : Material
        Section/material properties (needs at least EI)

    load_distribution_factor : float
        Opaque multiplier applied to deflection output (section or unit
        adjustment). 1.0 leaves the closed-form deflection unchanged.
    """
    primary_span: float
    secondary_span: float = 0.0
    material: Material = None
    load_distribution_factor: float = 1.0

    @property
    def total_length(self) -> float:
        return self.primary_span + self.secondary_span

    def to_dict(self) -> Dict:
        return {
            "primary_span": self.primary_span,
            "secondary_span": self.secondary_span,
            "material": {
                "name": self.material.name if self.material else None,
                "properties": dict(self.material.properties) if self.material else {},
            },
            "load_distribution_factor": self.load_distribution_factor,
        }


@dataclass(frozen=True)
class Curve:
    """
    One sampled response curve, the only thing the plotter reads.

    analys is one of QUANTITIES. xdata/ydata have equal length, xdata runs
    non-decreasing from 0 to the beam's total length.
    """
    analys: str
    xdata: List[float]
    ydata: List[float]

    def __len__(self):
        return len(self.xdata)

    def to_dict(self) -> Dict:
        return {"analys": self.analys, "xdata": list(self.xdata), "ydata": list(self.ydata)}


@dataclass(frozen=True)
class AnalysisResult:
    """Curve wrapped with the beam and load that produced it."""
    beam: Beam
    load: float
    equation: Curve

    def to_dict(self) -> Dict:
        return {
            "beam": self.beam.to_dict(),
            "load": self.load,
            "equation": self.equation.to_dict(),
        }
