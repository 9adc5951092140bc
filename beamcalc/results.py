# Result records produced by one analysis run

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

import numpy as np


@dataclass(frozen=True)
class ReactionResult:
    support_id: str
    x: float
    Ry: float
    M: float = 0.0  # zero unless the support is fixed


@dataclass(frozen=True)
class EquilibriumCheck:
    """Residuals of global force and moment balance (moments about x = 0)."""
    sum_fy: float
    sum_m: float

    def is_balanced(self, tol: float = 0.01) -> bool:
        return abs(self.sum_fy) < tol and abs(self.sum_m) < tol


@dataclass(frozen=True)
class KeyPointResult:
    x: float
    shear_left: float
    shear_right: float
    moment_left: float
    moment_right: float
    description: str


@dataclass
class DiagramSamples:
    """Parallel x / V / M sequences ready for plotting."""
    x: List[float] = field(default_factory=list)
    shear: List[float] = field(default_factory=list)
    moment: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.x)

    def as_arrays(self):
        return (
            np.asarray(self.x, dtype=float),
            np.asarray(self.shear, dtype=float),
            np.asarray(self.moment, dtype=float),
        )


@dataclass(frozen=True)
class PeakMoment:
    x: float
    value: float  # absolute value


@dataclass
class AnalysisResults:
    method: str
    reactions: List[ReactionResult]
    checks: EquilibriumCheck
    diagram: DiagramSamples
    key_points: List[KeyPointResult]
    log: List[str]
    peak_moment: Optional[PeakMoment] = None

    def reaction(self, support_id: str) -> ReactionResult:
        for r in self.reactions:
            if r.support_id == support_id:
                return r
        raise KeyError(support_id)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
