# beamcalc/kernel - Linear algebra and assembly core
"""
KERNEL: THE NUMERICAL FOUNDATION
================================

Assembly and solving don't care about beams. They just need:
- A way to map (node_id, local_dof) → global_dof_index
- Element stiffness matrices
- Fixed DOF lists
- Load vectors

Both analysis methods share the dense solver here: the equilibrium method
solves its small reaction system with it, and the FEM method solves the
reduced stiffness system with it.
"""

from .dof import DOFManager, DOF_BEAM
from .assemble import assemble_global_K, assemble_global_F, add_nodal_load
from .solve import solve_dense, solve_linear

__all__ = [
    'DOFManager', 'DOF_BEAM',
    'assemble_global_K', 'assemble_global_F', 'add_nodal_load',
    'solve_dense', 'solve_linear',
]
