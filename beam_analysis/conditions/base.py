# beam_analysis/conditions/base.py
"""Common interface of the per-condition analyzers."""

from abc import ABC, abstractmethod
from typing import Optional

from ..config import CONFIG
from ..model import Beam, Curve


class Analyzer(ABC):
    """
    One support condition, three pure curve generators.

    Every generator takes a Beam and a UDL intensity (kN/m, may be negative)
    and returns a fresh Curve. Instances hold only sampling settings, so a
    single analyzer can serve any number of beams and threads.
    """

    condition: str = ""

    def __init__(self, n_steps: Optional[int] = None, decimals: Optional[int] = None):
        self.n_steps = n_steps if n_steps is not None else CONFIG.n_steps
        self.decimals = decimals if decimals is not None else CONFIG.decimals
        if self.n_steps < 1:
            raise ValueError(f"n_steps must be >= 1, got {self.n_steps}")

    @abstractmethod
    def total_length(self, beam: Beam) -> float:
        """Validated length the curves span (raises InvalidGeometry)."""

    @abstractmethod
    def deflection(self, beam: Beam, load: float) -> Curve:
        ...

    @abstractmethod
    def bending_moment(self, beam: Beam, load: float) -> Curve:
        ...

    @abstractmethod
    def shear_force(self, beam: Beam, load: float) -> Curve:
        ...

    def __repr__(self):
        return f"{type(self).__name__}(n_steps={self.n_steps}, decimals={self.decimals})"
