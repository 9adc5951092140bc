# beamcalc/diagrams.py
"""
SHEAR / MOMENT DIAGRAMS AND KEY POINTS
======================================

This module turns solved reactions into plot-ready diagrams and a compact
table of internal forces at the positions an engineer cares about.

KEY CONCEPTS:
-------------
- Between two events V is constant (or linear under a UDL) and M is linear
  (or parabolic under a UDL), so a handful of samples per segment is enough.
- At a point load V jumps; at a concentrated moment M jumps. The sampler
  adds points just inside each segment end so the jump is drawn vertically.
- Key points are the events themselves: supports, load positions, UDL
  boundaries and the beam ends. For each one we report the left and right
  limits of V and M.

SIGN CONVENTIONS:
-----------------
Forces are positive upward. V and M at x are the sums of the effects of every
reaction and load to the left of x (see post.internal_forces).
"""

from typing import Dict, List, Optional, Sequence

from .config import AnalysisConfig, CONFIG
from .events import event_positions
from .model import DistributedLoad, Load, MomentLoad, PointLoad, Support
from .post import internal_forces
from .results import DiagramSamples, KeyPointResult, PeakMoment, ReactionResult


def _point_load_at(loads: Sequence[Load], x: float, tol: float) -> bool:
    return any(isinstance(ld, PointLoad) and abs(ld.x - x) < tol for ld in loads)


def segment_sample_positions(
    a: float,
    b: float,
    loads: Sequence[Load],
    samples_per_segment: int,
    eps: float = 1e-9,
) -> List[float]:
    """
    Sample positions for one segment [a, b].

    Segment ends, evenly spaced interior points, and an eps-offset point just
    inside each end that carries a point load.
    """
    points = [a]
    if _point_load_at(loads, a, eps):
        points.append(a + eps)

    n = samples_per_segment
    for k in range(1, n + 1):
        points.append(a + (b - a) * (k / (n + 1)))

    if _point_load_at(loads, b, eps):
        points.append(b - eps)
    points.append(b)
    return points


def sample_diagrams(
    length: float,
    supports: Sequence[Support],
    reactions: Sequence[ReactionResult],
    loads: Sequence[Load],
    samples_per_segment: Optional[int] = None,
    config: AnalysisConfig = CONFIG,
) -> DiagramSamples:
    """
    Build dense V(x), M(x) samples along the beam.

    Every event-to-event segment is sampled (see segment_sample_positions)
    and the left-side internal forces are evaluated at each point. Consecutive
    samples are then collapsed when x does not advance and V does not change
    by more than config.dedupe_tol, which keeps the vertical jump pairs and
    drops the repeated segment boundaries.

    Parameters:
    -----------
    length : float
        Beam length; samples outside [0, length] are dropped
    supports : sequence of Support
        Needed for the event positions
    reactions : sequence of ReactionResult
    loads : sequence of Load
    samples_per_segment : int, optional
        Interior points per segment (default config.samples_per_segment)

    Returns:
    --------
    DiagramSamples
        x ascending (non-decreasing), with matching shear and moment
    """
    if samples_per_segment is None:
        samples_per_segment = config.samples_per_segment
    eps = config.side_eps

    events = event_positions(length, supports, loads, config.event_decimals, config.node_tol)

    xs: List[float] = []
    vs: List[float] = []
    ms: List[float] = []
    for a, b in zip(events[:-1], events[1:]):
        for x in segment_sample_positions(a, b, loads, samples_per_segment, eps):
            if 0.0 <= x <= length:
                V, M = internal_forces(
                    x, reactions, loads, side="left",
                    eps=eps, coincidence_tol=config.coincidence_tol,
                )
                xs.append(x)
                vs.append(V)
                ms.append(M)

    out = DiagramSamples()
    if not xs:
        return out

    out.x.append(xs[0])
    out.shear.append(vs[0])
    out.moment.append(ms[0])
    for i in range(1, len(xs)):
        diff = xs[i] - xs[i - 1]
        if diff > eps or (diff < eps and abs(vs[i] - vs[i - 1]) > config.dedupe_tol):
            out.x.append(xs[i])
            out.shear.append(vs[i])
            out.moment.append(ms[i])

    return out


def peak_moment(samples: DiagramSamples) -> PeakMoment:
    """Largest |M| over the samples and where it first occurs."""
    max_m = float("-inf")
    max_x = 0.0
    for x, m in zip(samples.x, samples.moment):
        if abs(m) > max_m:
            max_m = abs(m)
            max_x = x
    if max_m == float("-inf"):
        max_m = 0.0
    return PeakMoment(x=max_x, value=max_m)


def event_descriptions(
    length: float,
    supports: Sequence[Support],
    loads: Sequence[Load],
    decimals: int = 3,
) -> Dict[float, List[str]]:
    """Labels of everything located at each (rounded) position."""
    descriptions: Dict[float, List[str]] = {}

    def add(x: float, label: str):
        key = round(x, decimals)
        labels = descriptions.setdefault(key, [])
        if label not in labels:
            labels.append(label)

    add(0.0, "Start")
    add(float(length), "End")
    for s in supports:
        add(s.x, f"Support {s.id}")
    for load in loads:
        if isinstance(load, PointLoad):
            add(load.x, f"Load {load.id}")
        elif isinstance(load, DistributedLoad):
            add(load.x_start, f"UDL {load.id} start")
            add(load.x_end, f"UDL {load.id} end")
        elif isinstance(load, MomentLoad):
            add(load.x, f"Moment {load.id}")
    return descriptions


def key_points(
    length: float,
    supports: Sequence[Support],
    reactions: Sequence[ReactionResult],
    loads: Sequence[Load],
    config: AnalysisConfig = CONFIG,
) -> List[KeyPointResult]:
    """
    One row per event position, ascending, with left/right limits of V and M
    and a comma-joined description of everything located there.
    """
    descriptions = event_descriptions(length, supports, loads, config.keypoint_decimals)
    events = event_positions(length, supports, loads, config.event_decimals, config.node_tol)

    rows = []
    for x in events:
        V_l, M_l = internal_forces(x, reactions, loads, side="left",
                                   eps=config.side_eps, coincidence_tol=config.coincidence_tol)
        V_r, M_r = internal_forces(x, reactions, loads, side="right",
                                   eps=config.side_eps, coincidence_tol=config.coincidence_tol)

        desc = ""
        for key, labels in descriptions.items():
            if abs(key - x) < config.keypoint_match_tol:
                desc = ", ".join(labels)
                break

        rows.append(KeyPointResult(
            x=x,
            shear_left=V_l,
            shear_right=V_r,
            moment_left=M_l,
            moment_right=M_r,
            description=desc,
        ))
    return rows
