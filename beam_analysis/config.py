# beam_analysis/config.py
"""
Analysis configuration and defaults.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class AnalysisConfig:
    """Global analysis configuration."""

    # Package metadata
    app_name: str = "Beam Analysis"
    app_subtitle: str = "UDL response curves for single and two-span beams"
    version: str = "0.1.0"

    # Sampling: nominal step is total_length / n_steps
    n_steps: int = 100
    # Emitted samples are rounded to this many decimals (display contract)
    decimals: int = 2

    default_condition: str = "simply-supported"
    default_material: str = "steel-ipe200"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    log_name: str = "beam_analysis.log"

    # API
    cors_origins: List[str] = None

    def __post_init__(self):
        if self.cors_origins is None:
            self.cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]


# Global config instance
CONFIG = AnalysisConfig()
