# internal shear / moment by superposition of reactions and loads

from typing import Sequence, Tuple

from .model import DistributedLoad, Load, MomentLoad, PointLoad
from .results import ReactionResult

SIDES = ("left", "right", "mid")


def internal_forces(
    x: float,
    reactions: Sequence[ReactionResult],
    loads: Sequence[Load],
    side: str = "mid",
    eps: float = 1e-9,
    coincidence_tol: float = 1e-6,
) -> Tuple[float, float]:
    """
    Shear V and moment M at position x, summing everything to the left of the cut.

    One-sided limits are taken by nudging x by eps before evaluation:
    "left" evaluates at x − eps, "right" at x + eps, "mid" at x itself.
    Concentrated loads exactly at x therefore belong to the right-hand limit,
    so V and M are right-continuous at point loads and moments.

    Parameters:
    -----------
    x : float
        Evaluation position
    reactions : sequence of ReactionResult
        Solved support reactions
    loads : sequence of Load
        Applied loads
    side : {"left", "right", "mid"}
    eps : float
        Nudge used for the one-sided limits
    coincidence_tol : float
        Distance within which a concentrated load counts as "at x"

    Returns:
    --------
    (V, M) : Tuple[float, float]
    """
    if side == "left":
        xp = x - eps
    elif side == "right":
        xp = x + eps
    elif side == "mid":
        xp = x
    else:
        raise ValueError(f"side must be one of {SIDES}, got {side!r}")

    V = 0.0
    M = 0.0

    for r in reactions:
        if r.x < xp:
            V += r.Ry
            M += r.Ry * (xp - r.x) + r.M

    for load in loads:
        if isinstance(load, PointLoad):
            if load.x < xp:
                V += load.magnitude
                M += load.magnitude * (xp - load.x)
            elif abs(load.x - x) < coincidence_tol and side == "right":
                V += load.magnitude
        elif isinstance(load, DistributedLoad):
            a = load.x_start
            if xp > a:
                eff_end = min(xp, load.x_end)
                span = eff_end - a
                load_mag = load.w * span
                V += load_mag
                centroid = a + span / 2
                M += load_mag * (xp - centroid)
        elif isinstance(load, MomentLoad):
            if load.x < xp:
                M += load.magnitude
            elif abs(load.x - x) < coincidence_tol and side == "right":
                M += load.magnitude

    return V, M
