# beamcalc/kernel/solve.py
"""Dense linear solver with partial pivoting, and partitioned solve with boundary conditions."""

import numpy as np

from ..errors import SingularSystemError


def solve_dense(A: np.ndarray, b: np.ndarray, pivot_tol: float = 1e-12) -> np.ndarray:
    """
    Solve A·x = b by Gaussian elimination with partial pivoting.

    At each column the row with the largest absolute value among the remaining
    rows is swapped into place, the pivot row is normalised, and the entries
    below it are eliminated. Back-substitution then recovers x.

    Args:
        A: Square coefficient matrix (n x n)
        b: Right-hand side (n,)
        pivot_tol: Smallest accepted pivot magnitude

    Returns:
        x: Solution vector (n,)

    Raises:
        SingularSystemError: If a pivot magnitude falls below pivot_tol
        ValueError: If A is not square or b does not match it
    """
    # Private copies: the caller's arrays are never touched
    M = np.array(A, dtype=float, copy=True)
    x = np.array(b, dtype=float, copy=True).reshape(-1)

    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise ValueError(f"Coefficient matrix must be square, got shape {M.shape}")
    n = M.shape[0]
    if x.shape[0] != n:
        raise ValueError(f"Right-hand side has length {x.shape[0]}, expected {n}")

    # Forward elimination
    for k in range(n):
        i_max = k + int(np.argmax(np.abs(M[k:, k])))

        if abs(M[i_max, k]) < pivot_tol:
            raise SingularSystemError("Singular matrix: structure may be unstable.")

        if i_max != k:
            M[[k, i_max]] = M[[i_max, k]]
            x[[k, i_max]] = x[[i_max, k]]

        pivot = M[k, k]
        M[k, k:] /= pivot
        x[k] /= pivot

        for i in range(k + 1, n):
            factor = M[i, k]
            M[i, k:] -= factor * M[k, k:]
            x[i] -= factor * x[k]

    # Back-substitution
    for k in range(n - 1, -1, -1):
        s = x[k] - M[k, k + 1:] @ x[k + 1:]
        x[k] = s / M[k, k]

    return x


def solve_linear(
    K: np.ndarray,
    F: np.ndarray,
    fixed_dofs: list[int],
    pivot_tol: float = 1e-12
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Solve K·d = F with fixed boundary conditions via partitioning.

    Args:
        K: Global stiffness matrix (ndof x ndof)
        F: Global load vector (ndof,)
        fixed_dofs: List of constrained DOF indices (displacement = 0)
        pivot_tol: Smallest accepted pivot in the reduced system

    Returns:
        d: Displacement vector (ndof,)
        R: Reaction vector (ndof,)
        free: Array of free DOF indices

    Raises:
        SingularSystemError: If the reduced system is singular (mechanism)
    """
    ndof = K.shape[0]

    # Partition DOFs
    fixed = set(fixed_dofs)
    free = np.array([i for i in range(ndof) if i not in fixed], dtype=int)

    # Extract reduced system
    Kff = K[np.ix_(free, free)]
    Ff = F[free]

    # Solve reduced system
    df = solve_dense(Kff, Ff, pivot_tol=pivot_tol)

    # Assemble full displacement
    d = np.zeros(ndof, dtype=float)
    d[free] = df

    # Compute reactions: R = K·d - F
    R = K @ d - F

    return d, R, free
