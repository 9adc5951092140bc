# File: demos/run_simply_supported.py
"""
DEMO: SIMPLY SUPPORTED BEAM (POINT LOAD + PARTIAL UDL)
======================================================

PURPOSE:
--------
Walk through an isostatic beam: two supports, two unknowns, so the reactions
come straight from ΣFy = 0 and ΣM = 0. No section properties needed.

PHYSICAL PROBLEM:
-----------------
A 10 m floor beam on a pin (left) and a roller (right):
- A 20 kN point load at midspan (e.g. a column above)
- A 2 kN/m UDL over the first 4 m (e.g. storage area)

We want to know:
- The support reactions (for the supports below)
- Where the shear changes sign and how large the moment gets
"""

from beamcalc import Beam, DistributedLoad, PointLoad, Support, Units, run_analysis
from beamcalc.logging_setup import setup_logging


def main():
    setup_logging(log_dir=None)

    print("=" * 70)
    print("DEMO: SIMPLY SUPPORTED BEAM")
    print("=" * 70)
    print()

    # ========================================================================
    # STEP 1: DEFINE THE PHYSICAL PROBLEM
    # ========================================================================
    L = 10.0    # Span (m)
    P = -20.0   # Point load (kN, negative = downward)
    w = -2.0    # UDL (kN/m, negative = downward)

    beam = Beam(length=L)
    supports = [
        Support("A", 0.0, "pinned"),
        Support("B", L, "roller"),
    ]
    loads = [
        PointLoad("P1", L / 2, P),
        DistributedLoad("q1", 0.0, 4.0, w),
    ]

    # ========================================================================
    # STEP 2: SOLVE
    # ========================================================================
    res = run_analysis(beam, supports, loads, units=Units("m", "kN"))

    for line in res.log:
        print(line)
    print()

    # ========================================================================
    # STEP 3: KEY POINTS
    # ========================================================================
    print("KEY POINTS")
    print("-" * 70)
    print(f"{'x':>8} {'V left':>10} {'V right':>10} {'M left':>10} {'M right':>10}  description")
    for kp in res.key_points:
        print(f"{kp.x:8.3f} {kp.shear_left:10.3f} {kp.shear_right:10.3f} "
              f"{kp.moment_left:10.3f} {kp.moment_right:10.3f}  {kp.description}")
    print()

    print(f"Peak |M| = {res.peak_moment.value:.3f} kN·m at x = {res.peak_moment.x:.3f} m")
    print(f"Diagram samples: {len(res.diagram)}")
    print()
    print("=" * 70)
    print("DEMO COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    main()
