# File: demos/run_continuous_beam.py
"""
DEMO: TWO-SPAN CONTINUOUS BEAM (STIFFNESS METHOD)
=================================================

PURPOSE:
--------
Three supports give three unknowns, one more than statics can provide.
The run needs the stiffness method, which needs E and I.

We run it twice:
1. Without FEM mode: the run stops with an actionable error
2. With FEM mode: the run solves it and we compare against the textbook
   reactions 3wl/8, 10wl/8, 3wl/8
"""

from beamcalc import (
    AnalysisError,
    Beam,
    DistributedLoad,
    Section,
    Support,
    run_analysis,
)
from beamcalc.logging_setup import setup_logging


def main():
    setup_logging(log_dir=None)

    print("=" * 70)
    print("DEMO: TWO-SPAN CONTINUOUS BEAM")
    print("=" * 70)
    print()

    l = 5.0         # Span length (m)
    w = -2.0        # UDL (kN/m)
    E = 210e9       # Young's modulus (Pa)
    I = 8.0e-6      # Moment of inertia (m⁴)

    beam = Beam(length=2 * l, section=Section(E=E, I=I))
    supports = [
        Support("A", 0.0, "pinned"),
        Support("B", l, "roller"),
        Support("C", 2 * l, "roller"),
    ]
    loads = [DistributedLoad("q1", 0.0, 2 * l, w)]

    # ========================================================================
    # RUN 1: FEM MODE OFF
    # ========================================================================
    print("RUN 1: FEM mode off")
    print("-" * 70)
    try:
        run_analysis(beam, supports, loads, use_fem=False)
    except AnalysisError as e:
        print(f"  [{e.kind}] {e}")
    print()

    # ========================================================================
    # RUN 2: FEM MODE ON
    # ========================================================================
    print("RUN 2: FEM mode on")
    print("-" * 70)
    res = run_analysis(beam, supports, loads, use_fem=True)
    for line in res.log:
        print(line)
    print()

    expected = {"A": -3 * w * l / 8, "B": -10 * w * l / 8, "C": -3 * w * l / 8}
    print("COMPARISON WITH THEORY")
    print("-" * 70)
    for r in res.reactions:
        err = abs(r.Ry - expected[r.support_id])
        print(f"  {r.support_id}: FEM {r.Ry:8.4f}  theory {expected[r.support_id]:8.4f}  |error| {err:.2e}")
    print()
    print(f"Peak |M| = {res.peak_moment.value:.3f} kN·m at x = {res.peak_moment.x:.3f} m")


if __name__ == "__main__":
    main()
