# beamcalc - Beam reactions, shear and moment diagrams
"""
BEAMCALC: Straight-Beam Structural Analysis
===========================================

This package provides:
- Support reactions for statically determinate beams (equilibrium equations)
- Support reactions for statically indeterminate beams (stiffness method)
- Shear / moment diagrams and a key-point table of internal forces

ARCHITECTURE:
-------------
    kernel/         Dense solver, DOF indexing, scatter-add assembly
    model.py        Beam, Section, Support, loads, BeamModel snapshot
    results.py      Reaction / check / key-point / result records
    events.py       Event positions shared by the mesher and the diagrams
    elements.py     Beam element stiffness
    loads.py        Load resultants and UDL equivalent nodal loads
    equilibrium.py  Isostatic solver
    fem.py          Stiffness-matrix solver
    post.py         Internal forces at a point
    diagrams.py     Diagram sampling, key points, peak moment
    report.py       Report text
    analysis.py     Orchestrator: run_analysis / analyze
"""

from .analysis import analyze, run_analysis, verify_equilibrium, AnalysisState
from .errors import (
    AnalysisError,
    SingularSystemError,
    MissingRigidityError,
    MethodUnavailableError,
)
from .model import (
    Beam,
    BeamModel,
    DistributedLoad,
    MomentLoad,
    PointLoad,
    Section,
    Support,
    SupportType,
    Units,
)
from .results import (
    AnalysisResults,
    DiagramSamples,
    EquilibriumCheck,
    KeyPointResult,
    PeakMoment,
    ReactionResult,
)

__version__ = "0.1.0"

__all__ = [
    'analyze', 'run_analysis', 'verify_equilibrium', 'AnalysisState',
    'AnalysisError', 'SingularSystemError', 'MissingRigidityError', 'MethodUnavailableError',
    'Beam', 'BeamModel', 'DistributedLoad', 'MomentLoad', 'PointLoad',
    'Section', 'Support', 'SupportType', 'Units',
    'AnalysisResults', 'DiagramSamples', 'EquilibriumCheck', 'KeyPointResult',
    'PeakMoment', 'ReactionResult',
]
