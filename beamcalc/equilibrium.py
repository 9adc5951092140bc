# beamcalc/equilibrium.py
"""
EQUILIBRIUM SOLVER (ISOSTATIC BEAMS)
====================================

For a statically determinate beam the reactions follow from static
equilibrium alone. Each support contributes its reaction components as
unknowns (Ry for pinned/roller, Ry and M for fixed) and we write exactly as
many equations as unknowns:

    row 0:  ΣFy = 0
    row 1:  ΣM  = 0 about x = length

Rows beyond the second would reuse the same moment equation, so a beam with
more than two unknowns produces a singular system here. That is how an
indeterminate beam shows up if it is handed to this solver.

The solver returns an EquilibriumAttempt instead of raising, so the
orchestrator can check it once and move on to the FEM path.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import AnalysisConfig, CONFIG
from .errors import SingularSystemError
from .kernel.solve import solve_dense
from .loads import load_moment_about, total_vertical_load
from .model import Beam, Load, Support, SupportType
from .results import ReactionResult

logger = logging.getLogger(__name__)

RY = "Ry"
M = "M"


@dataclass(frozen=True)
class EquilibriumAttempt:
    """Outcome of the equilibrium solve: reactions on success, the error otherwise."""
    ok: bool
    reactions: List[ReactionResult] = field(default_factory=list)
    error: Optional[SingularSystemError] = None

    @classmethod
    def success(cls, reactions: List[ReactionResult]) -> "EquilibriumAttempt":
        return cls(ok=True, reactions=reactions)

    @classmethod
    def failure(cls, error: SingularSystemError) -> "EquilibriumAttempt":
        return cls(ok=False, error=error)


def reaction_unknowns(supports: Sequence[Support]) -> List[Tuple[int, str]]:
    """(support index, component) for every unknown, in support order."""
    unknowns = []
    for i, s in enumerate(supports):
        unknowns.append((i, RY))
        if s.type is SupportType.FIXED:
            unknowns.append((i, M))
    return unknowns


def build_equilibrium_system(
    beam: Beam,
    supports: Sequence[Support],
    loads: Sequence[Load],
) -> Tuple[np.ndarray, np.ndarray, List[Tuple[int, str]]]:
    """
    Assemble A·r = b for the reaction unknowns r.

    Returns:
        A: (n x n) coefficient matrix
        b: (n,) right-hand side (negated applied-load resultants)
        unknowns: (support index, component) for each column
    """
    unknowns = reaction_unknowns(supports)
    n = len(unknowns)
    L = float(beam.length)

    A = np.zeros((n, n), dtype=float)
    b = np.zeros(n, dtype=float)

    # Moment reference points: x=0 for the force row, x=L for the moment row
    eq_points = [0.0, L]

    for i in range(n):
        ref_x = eq_points[i] if i < len(eq_points) else eq_points[-1]

        for j, (s_idx, comp) in enumerate(unknowns):
            if comp == RY:
                A[i, j] = 1.0 if i == 0 else supports[s_idx].x - ref_x
            else:
                A[i, j] = 0.0 if i == 0 else 1.0

        if i == 0:
            b[i] = -total_vertical_load(loads)
        else:
            b[i] = -load_moment_about(loads, ref_x)

    return A, b, unknowns


def try_equilibrium(
    beam: Beam,
    supports: Sequence[Support],
    loads: Sequence[Load],
    config: AnalysisConfig = CONFIG,
) -> EquilibriumAttempt:
    """
    Solve the support reactions from ΣFy = 0 and ΣM = 0.

    Parameters:
    -----------
    beam : Beam
    supports : sequence of Support
    loads : sequence of Load
    config : AnalysisConfig
        Supplies the pivot threshold of the linear solver

    Returns:
    --------
    EquilibriumAttempt
        ok=True with one ReactionResult per support (in support order), or
        ok=False with the SingularSystemError describing the unstable geometry
    """
    if not supports:
        return EquilibriumAttempt.failure(
            SingularSystemError("No supports: structure is unstable.")
        )

    A, b, unknowns = build_equilibrium_system(beam, supports, loads)

    try:
        sol = solve_dense(A, b, pivot_tol=config.pivot_tol)
    except SingularSystemError as e:
        logger.debug("Equilibrium system singular for %d unknowns: %s", len(unknowns), e)
        return EquilibriumAttempt.failure(e)

    Ry = [0.0] * len(supports)
    Mr = [0.0] * len(supports)
    for value, (s_idx, comp) in zip(sol, unknowns):
        if comp == RY:
            Ry[s_idx] = float(value)
        else:
            Mr[s_idx] = float(value)

    reactions = [
        ReactionResult(support_id=s.id, x=float(s.x), Ry=Ry[i], M=Mr[i])
        for i, s in enumerate(supports)
    ]
    return EquilibriumAttempt.success(reactions)
