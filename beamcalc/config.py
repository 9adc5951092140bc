# beamcalc/config.py
"""
Analysis configuration and defaults.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class AnalysisConfig:
    """Numerical tolerances and defaults shared by every analysis run."""

    # Linear solver
    pivot_tol: float = 1e-12

    # One-sided limits: x is nudged by side_eps before evaluation
    side_eps: float = 1e-9
    # A concentrated load counts as "at x" within this distance
    coincidence_tol: float = 1e-6

    # Event positions / FEM nodes
    node_tol: float = 1e-9
    event_decimals: int = 9

    # Diagram sampling: sample_diagrams default, and the density used by a full run
    samples_per_segment: int = 20
    run_samples_per_segment: int = 100
    dedupe_tol: float = 1e-3

    # Key-point table
    keypoint_decimals: int = 3
    keypoint_match_tol: float = 1e-4

    # Report
    equilibrium_tol: float = 0.01
    moment_display_tol: float = 1e-3
    default_length_unit: str = "m"
    default_force_unit: str = "kN"


@dataclass
class ApiConfig:
    """HTTP API settings."""

    title: str = "beamcalc API"
    description: str = "Beam reactions, shear and moment diagrams"
    version: str = "0.1.0"
    cors_origins: Optional[List[str]] = None

    def __post_init__(self):
        if self.cors_origins is None:
            self.cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]


# Global config instances
CONFIG = AnalysisConfig()
API_CONFIG = ApiConfig()
