# beamcalc/kernel/assemble.py
"""
ASSEMBLY: Global Matrix Assembly
================================

PURPOSE:
--------
This module handles the assembly of element contributions into global matrices.
This is the scatter-add operation that builds K and F from element-level data.

Assembly doesn't care what the element is. It just needs:
- Total number of DOFs
- For each element: its DOF map and its stiffness matrix (or load vector)

USAGE:
------
    contributions = []
    for e, (xa, xb) in enumerate(zip(nodes[:-1], nodes[1:])):
        dof_map = dof.element_dof_map([e, e + 1])
        ke = beam_element_stiffness(EI, xb - xa)
        contributions.append((dof_map, ke))

    K = assemble_global_K(ndof, contributions)
"""

import numpy as np
from typing import List, Tuple


def assemble_global_K(
    ndof: int,
    contributions: List[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Assemble global stiffness matrix from element contributions.

    ALGORITHM:
    ----------
    K = zeros(ndof × ndof)
    for each element:
        for each (local_i, local_j) in element ke:
            global_i = dof_map[local_i]
            global_j = dof_map[local_j]
            K[global_i, global_j] += ke[local_i, local_j]

    Parameters:
    -----------
    ndof : int
        Total number of DOFs in the system (2 × n_nodes for a beam)

    contributions : List[Tuple[List[int], np.ndarray]]
        List of (dof_map, ke) tuples, one per element:
        - dof_map: global DOF indices for this element,
          e.g. [2, 3, 4, 5] for the element between nodes 1 and 2
        - ke: element stiffness matrix, shape (len(dof_map), len(dof_map))

    Returns:
    --------
    np.ndarray
        Global stiffness matrix K, shape (ndof, ndof)
        Symmetric positive semi-definite (becomes PD after BCs applied)
    """
    K = np.zeros((ndof, ndof), dtype=float)

    for dof_map, ke in contributions:
        n_element_dofs = len(dof_map)

        assert ke.shape == (n_element_dofs, n_element_dofs), \
            f"Element ke shape {ke.shape} doesn't match dof_map length {n_element_dofs}"

        for a in range(n_element_dofs):
            ia = dof_map[a]
            for b in range(n_element_dofs):
                ib = dof_map[b]
                K[ia, ib] += ke[a, b]

    return K


def assemble_global_F(
    ndof: int,
    contributions: List[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Assemble global load vector from element contributions.

    Same scatter-add logic as assemble_global_K, but for load vectors.
    Used for equivalent nodal loads from distributed loads.
    """
    F = np.zeros(ndof, dtype=float)

    for dof_map, fe in contributions:
        n_element_dofs = len(dof_map)

        assert fe.shape == (n_element_dofs,), \
            f"Element fe shape {fe.shape} doesn't match dof_map length {n_element_dofs}"

        for a in range(n_element_dofs):
            F[dof_map[a]] += fe[a]

    return F


def add_nodal_load(
    F: np.ndarray,
    node_id: int,
    load_vector: np.ndarray,
    dof_per_node: int
) -> None:
    """
    Add a nodal load to the global load vector (in-place).

    Parameters:
    -----------
    F : np.ndarray
        Global load vector (modified in-place)
    node_id : int
        Node to apply load to
    load_vector : np.ndarray
        Load components at the node, shape (dof_per_node,): [Fy, Mz]
    dof_per_node : int
        Number of DOFs per node

    Example:
    --------
    >>> F = np.zeros(6)  # 3 nodes, 2 DOF each
    >>> add_nodal_load(F, node_id=1, load_vector=np.array([-10.0, 0.0]), dof_per_node=2)
    >>> # Now F[2] = -10 (downward force at node 1)
    """
    base_dof = dof_per_node * node_id
    for i, val in enumerate(load_vector):
        F[base_dof + i] += val
