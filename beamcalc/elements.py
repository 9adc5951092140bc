# Euler-Bernoulli beam element stiffness

import numpy as np


def beam_element_length(xa: float, xb: float) -> float:
    L = float(xb - xa)
    if L <= 0.0:
        raise ValueError(f"Element [{xa}, {xb}] has zero or negative length.")
    return L


def beam_local_stiffness(EI: float, L: float) -> np.ndarray:
    """
    Stiffness matrix of a 2-node beam element (cubic Hermite interpolation).
    DOF order: [v_i, theta_i, v_j, theta_j]
    """
    k_factor = EI / (L * L * L)
    L2 = L * L

    k = np.array([
        [ 12.0,   6*L, -12.0,   6*L],
        [  6*L, 4*L2,   -6*L, 2*L2],
        [-12.0,  -6*L,  12.0,  -6*L],
        [  6*L, 2*L2,   -6*L, 4*L2],
    ], dtype=float)
    return k_factor * k
