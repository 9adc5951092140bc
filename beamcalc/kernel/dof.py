# beamcalc/kernel/dof.py
"""
DOF MANAGER: Degree of Freedom Indexing for Beam Nodes
======================================================

PURPOSE:
--------
This module handles the mapping from (node_id, local_dof) to global DOF indices.

A straight Euler-Bernoulli beam carries two DOFs per node:

    local DOF 0: transverse deflection (v)
    local DOF 1: rotation (theta)

so node i owns global DOFs 2i and 2i+1. Keeping the indexing in one place
means assembly, load placement and boundary conditions all agree on it.

USAGE:
------
    dof = DOFManager(dof_per_node=2)

    # Global index for node 2, rotation
    global_idx = dof.idx(node_id=2, local_dof=ROTATION)  # → 5
"""

from dataclasses import dataclass
from typing import List

DEFLECTION = 0
ROTATION = 1


@dataclass
class DOFManager:
    """
    Manages degree-of-freedom indexing for the beam model.

    Attributes:
    -----------
    dof_per_node : int
        Number of DOFs per node (2 for a plane beam: v, theta)

    Examples:
    ---------
    >>> dof = DOFManager(dof_per_node=2)
    >>> dof.idx(1, 0)  # Node 1, deflection
    2
    >>> dof.ndof(4)    # Total DOFs for 4 nodes
    8
    """
    dof_per_node: int

    def idx(self, node_id: int, local_dof: int) -> int:
        """Global DOF index for a node's local DOF."""
        return self.dof_per_node * node_id + local_dof

    def ndof(self, n_nodes: int) -> int:
        """Total DOFs for a system with n_nodes."""
        return self.dof_per_node * n_nodes

    def node_dofs(self, node_id: int) -> List[int]:
        """
        All global DOF indices for a single node.

        >>> DOFManager(dof_per_node=2).node_dofs(2)
        [4, 5]
        """
        base = self.dof_per_node * node_id
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, node_ids: List[int]) -> List[int]:
        """
        DOF map for an element connecting several nodes.

        Returns the indices needed to scatter/gather element matrices
        into/from the global matrices.

        >>> DOFManager(dof_per_node=2).element_dof_map([1, 2])
        [2, 3, 4, 5]
        """
        result = []
        for node_id in node_ids:
            result.extend(self.node_dofs(node_id))
        return result


DOF_BEAM = DOFManager(dof_per_node=2)   # v, theta
