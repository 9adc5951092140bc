# beamcalc/events.py
"""
EVENT POSITIONS
===============

An "event" is any position where loading or support conditions change:
the beam ends, every support, every point load and concentrated moment,
and both ends of every UDL.

The FEM mesher puts a node at every event, and the diagram sampler and
key-point table walk the same list, so both must agree on which positions
are "the same". Positions are compared after rounding to a fixed number of
decimals; the first value seen for a rounded key is kept as the
representative, so exact input coordinates survive deduplication. After
sorting, any position within `tol` of the previous kept position is merged
into it, so no two events are ever closer than the mesher's element-length
cutoff.
"""

from typing import Iterable, List, Sequence

from .model import DistributedLoad, Load, Support


def load_positions(load: Load) -> List[float]:
    if isinstance(load, DistributedLoad):
        return [float(load.x_start), float(load.x_end)]
    return [float(load.x)]


def unique_positions(xs: Iterable[float], decimals: int = 9, tol: float = 1e-9) -> List[float]:
    """Sorted positions, deduplicated by rounding to `decimals` places, then merged within tol."""
    seen = {}
    for x in xs:
        key = round(float(x), decimals)
        if key not in seen:
            seen[key] = float(x)

    merged: List[float] = []
    for x in sorted(seen.values()):
        if merged and x - merged[-1] <= tol:
            continue
        merged.append(x)
    return merged


def event_positions(
    length: float,
    supports: Sequence[Support],
    loads: Sequence[Load],
    decimals: int = 9,
    tol: float = 1e-9,
) -> List[float]:
    """
    Collect and deduplicate every event position along the beam.

    Parameters:
    -----------
    length : float
        Beam length; 0 and length are always events
    supports : sequence of Support
    loads : sequence of Load
    decimals : int
        Rounding precision used to decide that two positions coincide
    tol : float
        Positions closer than this to the previous event are merged into it

    Returns:
    --------
    List[float]
        Ascending event positions
    """
    xs = [0.0, float(length)]
    xs += [float(s.x) for s in supports]
    for load in loads:
        xs += load_positions(load)
    return unique_positions(xs, decimals, tol)


def find_node(nodes: Sequence[float], x: float, tol: float = 1e-9) -> int:
    """Index of the first node within tol of x (inclusive), or -1."""
    for i, n in enumerate(nodes):
        if abs(n - x) <= tol:
            return i
    return -1
