# Text lines of the analysis report

from typing import List, Sequence

from .config import AnalysisConfig, CONFIG
from .model import BeamModel
from .results import EquilibriumCheck, ReactionResult

RULE = "-" * 50


def header_lines(model: BeamModel, unknowns: int) -> List[str]:
    u = model.units
    return [
        "### STRUCTURAL ANALYSIS REPORT ###",
        f"Units: length [{u.length}], force [{u.force}]",
        f"Beam length: {model.beam.length:g} {u.length}",
        f"Supports: {len(model.supports)} | Unknowns: {unknowns}",
        RULE,
    ]


def fem_properties_line(model: BeamModel) -> str:
    section = model.beam.section
    return f"Properties: E={section.E:g}, I={section.I:g} -> EI={model.beam.EI:g}"


def reaction_lines(
    reactions: Sequence[ReactionResult],
    model: BeamModel,
    config: AnalysisConfig = CONFIG,
) -> List[str]:
    u = model.units
    lines = ["", "SUPPORT REACTIONS:"]
    for r in reactions:
        m_text = ""
        if abs(r.M) > config.moment_display_tol:
            m_text = f", moment M = {r.M:.3f} {u.moment}"
        lines.append(
            f"   > Support {r.support_id} (x={r.x:g}{u.length}): Ry = {r.Ry:.3f} {u.force}{m_text}"
        )
    return lines


def _flag(value: float, tol: float) -> str:
    return "OK" if abs(value) < tol else "CHECK"


def equilibrium_lines(
    check: EquilibriumCheck,
    model: BeamModel,
    config: AnalysisConfig = CONFIG,
) -> List[str]:
    u = model.units
    tol = config.equilibrium_tol
    return [
        "",
        "GLOBAL EQUILIBRIUM CHECK:",
        f"   > Sum Fy: {check.sum_fy:.4f} {u.force} [{_flag(check.sum_fy, tol)}]",
        f"   > Sum M:  {check.sum_m:.4f} {u.moment} [{_flag(check.sum_m, tol)}]",
    ]
