# beamcalc/fem.py
"""
STIFFNESS-MATRIX SOLVER (HYPERSTATIC BEAMS)
===========================================

When equilibrium alone cannot give the reactions, the beam is modelled with
Euler-Bernoulli finite elements and the reactions are recovered from the
solved displacements.

MESHING:
--------
Nodes are placed at every event position (beam ends, supports, concentrated
loads, UDL boundaries). Each interval between neighbouring nodes becomes one
2-node element with (v, theta) at each node. Because every load and support
sits exactly on a node, discontinuities are represented without a fine mesh,
and the system size follows the load/support layout, not plot resolution.

    nodes:     0 ---- 1 ---- 2 ---- 3
    elements:    [0]    [1]    [2]
    DOFs:     v0,t0  v1,t1  v2,t2  v3,t3

SOLUTION:
---------
1. K = Σ element stiffness (scatter-add)
2. F = UDL equivalent nodal loads + nodal point loads / moments
3. Constrain v at every support, and theta at fixed supports
4. Solve the free-DOF system, then R = K·u − F
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .config import AnalysisConfig, CONFIG
from .elements import beam_element_length, beam_local_stiffness
from .errors import MissingRigidityError, SingularSystemError
from .events import event_positions, find_node
from .kernel.assemble import add_nodal_load, assemble_global_F, assemble_global_K
from .kernel.dof import DOF_BEAM, DEFLECTION, ROTATION
from .kernel.solve import solve_linear
from .loads import beam_equiv_nodal_load_udl, udl_overlap
from .model import Beam, DistributedLoad, Load, MomentLoad, PointLoad, Support, SupportType
from .results import ReactionResult

logger = logging.getLogger(__name__)


@dataclass
class FEMSolution:
    nodes: List[float]
    displacements: np.ndarray   # [v0, t0, v1, t1, ...]
    R: np.ndarray               # reactions at every DOF
    reactions: List[ReactionResult]


def mesh_elements(nodes: Sequence[float], tol: float = 1e-9) -> List[tuple]:
    """(element index, x_start, x_end) for every interval longer than tol."""
    elements = []
    for e in range(len(nodes) - 1):
        xa, xb = nodes[e], nodes[e + 1]
        if xb - xa <= tol:
            continue
        elements.append((e, xa, xb))
    return elements


def assemble_beam_system(
    EI: float,
    nodes: Sequence[float],
    loads: Sequence[Load],
    tol: float = 1e-9,
):
    """
    Build the global stiffness matrix K and load vector F for the meshed beam.

    UDL equivalent loads use the full element length: nodes sit on every UDL
    boundary, so an element is either fully inside a UDL or outside it.
    """
    ndof = DOF_BEAM.ndof(len(nodes))
    udls = [ld for ld in loads if isinstance(ld, DistributedLoad)]

    k_contrib = []
    f_contrib = []
    for e, xa, xb in mesh_elements(nodes, tol):
        L = beam_element_length(xa, xb)
        dof_map = DOF_BEAM.element_dof_map([e, e + 1])
        k_contrib.append((dof_map, beam_local_stiffness(EI, L)))

        for udl in udls:
            if udl_overlap(udl, xa, xb) > tol:
                f_contrib.append((dof_map, beam_equiv_nodal_load_udl(L, udl.w)))

    K = assemble_global_K(ndof, k_contrib)
    F = assemble_global_F(ndof, f_contrib)

    for load in loads:
        if isinstance(load, (PointLoad, MomentLoad)):
            node = find_node(nodes, load.x, tol)
            if node == -1:
                logger.warning("Load %s at x=%g is not on a mesh node; ignored", load.id, load.x)
                continue
            nodal = np.zeros(DOF_BEAM.dof_per_node)
            nodal[DEFLECTION if isinstance(load, PointLoad) else ROTATION] = load.magnitude
            add_nodal_load(F, node, nodal, DOF_BEAM.dof_per_node)

    return K, F


def support_fixed_dofs(nodes: Sequence[float], supports: Sequence[Support], tol: float = 1e-9) -> List[int]:
    fixed = []
    for s in supports:
        node = find_node(nodes, s.x, tol)
        if node == -1:
            continue
        fixed.append(DOF_BEAM.idx(node, DEFLECTION))
        if s.type is SupportType.FIXED:
            fixed.append(DOF_BEAM.idx(node, ROTATION))
    return sorted(set(fixed))


def solve_fem(
    beam: Beam,
    supports: Sequence[Support],
    loads: Sequence[Load],
    config: AnalysisConfig = CONFIG,
) -> FEMSolution:
    """
    Solve the support reactions with the stiffness method.

    Parameters:
    -----------
    beam : Beam
        Must carry section properties with non-zero E and I
    supports : sequence of Support
    loads : sequence of Load
    config : AnalysisConfig

    Returns:
    --------
    FEMSolution
        Mesh nodes, nodal displacements, reaction vector and one
        ReactionResult per support (M only for fixed supports)

    Raises:
    -------
    MissingRigidityError
        If E or I is missing or zero
    SingularSystemError
        If the reduced stiffness system is singular (mechanism)
    """
    EI = beam.EI
    if not EI:
        raise MissingRigidityError(
            "FEM analysis requires flexural rigidity: supply non-zero E and I."
        )

    tol = config.node_tol
    nodes = event_positions(beam.length, supports, loads, config.event_decimals, tol)
    K, F = assemble_beam_system(EI, nodes, loads, tol)
    fixed = support_fixed_dofs(nodes, supports, tol)

    logger.debug("FEM mesh: %d nodes, %d DOFs, %d constrained", len(nodes), K.shape[0], len(fixed))

    try:
        u, R, _ = solve_linear(K, F, fixed, pivot_tol=config.pivot_tol)
    except SingularSystemError as e:
        raise SingularSystemError(f"FEM solve failed: {e}") from e

    reactions = []
    for s in supports:
        node = find_node(nodes, s.x, tol)
        Ry = 0.0
        Mr = 0.0
        if node != -1:
            Ry = float(R[DOF_BEAM.idx(node, DEFLECTION)])
            if s.type is SupportType.FIXED:
                Mr = float(R[DOF_BEAM.idx(node, ROTATION)])
        reactions.append(ReactionResult(support_id=s.id, x=float(s.x), Ry=Ry, M=Mr))

    return FEMSolution(nodes=nodes, displacements=u, R=R, reactions=reactions)
