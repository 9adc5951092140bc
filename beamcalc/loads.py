# loads.py - Load resultants and equivalent nodal loads

import numpy as np
from typing import Sequence

from .model import DistributedLoad, Load, MomentLoad, PointLoad


def total_vertical_load(loads: Sequence[Load]) -> float:
    """
    Sum of all applied vertical forces.

    Point loads contribute their magnitude, UDLs contribute w × (x_end − x_start),
    concentrated moments contribute nothing.
    """
    total = 0.0
    for load in loads:
        if isinstance(load, PointLoad):
            total += load.magnitude
        elif isinstance(load, DistributedLoad):
            total += load.total
    return total


def load_moment_about(loads: Sequence[Load], ref_x: float) -> float:
    """
    Sum of applied-load moments about ref_x (counter-clockwise positive).

    - Point load P at x:   P × (x − ref_x)
    - UDL:                 (w × span) × (centroid − ref_x)
    - Concentrated moment: its magnitude, wherever it is applied
    """
    m = 0.0
    for load in loads:
        if isinstance(load, PointLoad):
            m += load.magnitude * (load.x - ref_x)
        elif isinstance(load, DistributedLoad):
            m += load.total * (load.centroid - ref_x)
        elif isinstance(load, MomentLoad):
            m += load.magnitude
    return m


def beam_equiv_nodal_load_udl(L: float, w: float) -> np.ndarray:
    """
    Compute the equivalent nodal load vector for a uniform distributed load (UDL)
    acting over the full length of one beam element.

    This converts a distributed load (w per unit length) into equivalent point
    forces and moments at the element's two nodes, so distributed loads can be
    handled by the same nodal solver as point loads.

    Physical meaning:
    - A uniform load w over length L creates a total force of w×L
    - This total force is split equally between the two end nodes: wL/2 each
    - The distributed nature also creates end moments: ±wL²/12
    - These equivalent loads produce the same nodal displacements as the
      actual distributed load would (for cubic beam elements)

    Parameters:
    -----------
    L : float
        Element length, positive
    w : float
        Load intensity (negative = downward)

    Returns:
    --------
    np.ndarray
        Shape (4,) array [Fy_i, Mz_i, Fy_j, Mz_j] = [wL/2, wL²/12, wL/2, −wL²/12]

    Examples:
    --------
    >>> beam_equiv_nodal_load_udl(4.0, -1000.0)
    array([-2000.        , -1333.33333333, -2000.        ,  1333.33333333])
    """
    force_per_node = w * L / 2.0
    moment_magnitude = w * L * L / 12.0

    return np.array([
        force_per_node,       # Fy_i
        moment_magnitude,     # Mz_i (+wL²/12)
        force_per_node,       # Fy_j
        -moment_magnitude,    # Mz_j (-wL²/12, opposite)
    ], dtype=float)


def udl_overlap(load: DistributedLoad, xa: float, xb: float) -> float:
    """Length of [xa, xb] covered by the UDL."""
    return min(load.x_end, xb) - max(load.x_start, xa)
