# beamcalc/analysis.py
"""
ANALYSIS ORCHESTRATOR
=====================

One entry point, run_analysis(), takes a beam configuration and returns the
complete AnalysisResults bundle, or raises a single AnalysisError.

STATE FLOW:
-----------
    IDLE → COUNTING_UNKNOWNS → TRY_EQUILIBRIUM → SOLVED
                                    │ (singular)
                                    ▼
                                 TRY_FEM ──→ SOLVED → REPORT_GENERATED
                                    │
                                    ▼
                                  FAILED (error raised)

- TRY_EQUILIBRIUM runs only with ≤ 2 unknowns; a singular system moves the
  run to TRY_FEM instead of aborting. This is the only recovery.
- TRY_FEM needs use_fem=True and E·I on the beam, otherwise the run fails
  with an actionable message.
- After SOLVED nothing can fail the run: equilibrium residuals are reported,
  not enforced.

The input is copied into an immutable BeamModel first, so a run is a pure
function of its inputs and repeated runs give identical results.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from .config import AnalysisConfig, CONFIG
from .diagrams import key_points, peak_moment, sample_diagrams
from .equilibrium import try_equilibrium
from .errors import AnalysisError, MethodUnavailableError, MissingRigidityError
from .fem import solve_fem
from .loads import load_moment_about, total_vertical_load
from .model import Beam, BeamModel, Load, Support, Units
from .report import equilibrium_lines, fem_properties_line, header_lines, reaction_lines
from .results import AnalysisResults, EquilibriumCheck, ReactionResult

logger = logging.getLogger(__name__)

METHOD_EQUILIBRIUM = "equilibrium"
METHOD_FEM = "fem"

FEM_GUIDANCE = (
    "Enable advanced FEM mode and supply Young's modulus (E) and moment of inertia (I)."
)


class AnalysisState(str, Enum):
    IDLE = "idle"
    COUNTING_UNKNOWNS = "counting_unknowns"
    TRY_EQUILIBRIUM = "try_equilibrium"
    TRY_FEM = "try_fem"
    SOLVED = "solved"
    FAILED = "failed"
    REPORT_GENERATED = "report_generated"


def verify_equilibrium(
    reactions: Sequence[ReactionResult],
    loads: Sequence[Load],
) -> EquilibriumCheck:
    """Global ΣFy and ΣM (about x = 0) of reactions plus applied loads."""
    sum_fy = sum(r.Ry for r in reactions) + total_vertical_load(loads)
    sum_m = sum(r.Ry * r.x + r.M for r in reactions) + load_moment_about(loads, 0.0)
    return EquilibriumCheck(sum_fy=sum_fy, sum_m=sum_m)


class _Run:
    """Bookkeeping for one run: current state and the report lines."""

    def __init__(self):
        self.state = AnalysisState.IDLE
        self.log = []

    def enter(self, state: AnalysisState):
        logger.debug("analysis state: %s -> %s", self.state.value, state.value)
        self.state = state


def analyze(
    model: BeamModel,
    use_fem: bool = False,
    config: AnalysisConfig = CONFIG,
) -> AnalysisResults:
    """
    Run the full pipeline on a BeamModel snapshot.

    Parameters:
    -----------
    model : BeamModel
        Beam, supports, loads and units
    use_fem : bool
        Allow the stiffness-matrix method ("advanced mode")
    config : AnalysisConfig

    Returns:
    --------
    AnalysisResults

    Raises:
    -------
    ValueError
        Invalid model (positions off the beam, duplicate support ids)
    MethodUnavailableError
        FEM needed but use_fem is False
    MissingRigidityError
        FEM needed but E or I is missing or zero
    SingularSystemError
        FEM system is singular (unstable supports)
    """
    model.validate()
    run = _Run()
    beam, supports, loads = model.beam, model.supports, model.loads

    run.enter(AnalysisState.COUNTING_UNKNOWNS)
    unknowns = model.count_unknowns()
    run.log.extend(header_lines(model, unknowns))
    logger.info("Analysing beam L=%g with %d supports, %d loads (%d unknowns)",
                beam.length, len(supports), len(loads), unknowns)

    reactions = None
    method = None

    if unknowns <= 2:
        run.enter(AnalysisState.TRY_EQUILIBRIUM)
        run.log.append("METHOD: Static equilibrium equations (isostatic)")
        run.log.append(
            f"Total applied vertical load: {total_vertical_load(loads):.3f} {model.units.force}"
        )
        attempt = try_equilibrium(beam, supports, loads, config)
        if attempt.ok:
            reactions = attempt.reactions
            method = METHOD_EQUILIBRIUM
        else:
            logger.warning("Equilibrium solver failed (%s); switching to FEM", attempt.error)
            run.log.append("The isostatic solver failed or the structure is unstable. Switching to FEM.")

    if reactions is None:
        run.enter(AnalysisState.TRY_FEM)
        if not use_fem:
            run.enter(AnalysisState.FAILED)
            logger.error("Hyperstatic system with FEM mode disabled")
            raise MethodUnavailableError(
                f"Statically indeterminate or unstable system ({unknowns} unknowns). {FEM_GUIDANCE}"
            )
        if not beam.EI:
            run.enter(AnalysisState.FAILED)
            logger.error("FEM mode requested without E/I")
            raise MissingRigidityError(
                f"FEM analysis requires flexural rigidity EI. {FEM_GUIDANCE}"
            )

        run.log.append("METHOD: Stiffness matrix (finite elements - FEM)")
        run.log.append(fem_properties_line(model))
        try:
            solution = solve_fem(beam, supports, loads, config)
        except AnalysisError:
            run.enter(AnalysisState.FAILED)
            raise
        reactions = solution.reactions
        method = METHOD_FEM

    run.enter(AnalysisState.SOLVED)
    checks = verify_equilibrium(reactions, loads)
    if not checks.is_balanced(config.equilibrium_tol):
        logger.warning("Equilibrium residuals: sum Fy=%.4g, sum M=%.4g", checks.sum_fy, checks.sum_m)

    run.log.extend(reaction_lines(reactions, model, config))
    run.log.extend(equilibrium_lines(checks, model, config))

    diagram = sample_diagrams(
        beam.length, supports, reactions, loads,
        samples_per_segment=config.run_samples_per_segment, config=config,
    )
    points = key_points(beam.length, supports, reactions, loads, config=config)
    peak = peak_moment(diagram)
    run.enter(AnalysisState.REPORT_GENERATED)

    logger.info("Solved with %s method: %d samples, peak |M|=%.4g at x=%g",
                method, len(diagram), peak.value, peak.x)

    return AnalysisResults(
        method=method,
        reactions=list(reactions),
        checks=checks,
        diagram=diagram,
        key_points=points,
        log=run.log,
        peak_moment=peak,
    )


def run_analysis(
    beam: Beam,
    supports: Sequence[Support],
    loads: Sequence[Load],
    use_fem: bool = False,
    units: Optional[Units] = None,
    config: AnalysisConfig = CONFIG,
) -> AnalysisResults:
    """
    Analyse a beam: reactions, equilibrium check, V/M diagrams, key points.

    Supports and loads are copied into an immutable snapshot; the caller's
    sequences are never kept or modified.
    """
    if units is None:
        units = Units(config.default_length_unit, config.default_force_unit)
    model = BeamModel(beam=beam, supports=tuple(supports), loads=tuple(loads), units=units)
    return analyze(model, use_fem=use_fem, config=config)
