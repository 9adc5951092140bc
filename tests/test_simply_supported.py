import numpy as np

from beamcalc import Beam, PointLoad, Section, Support, run_analysis
from beamcalc.equilibrium import try_equilibrium
from beamcalc.fem import solve_fem
from beamcalc.loads import load_moment_about


def test_simply_supported_midspan_pointload():
    """
    We're testing a beam that's supported at both ends (like a bridge deck).
    A weight is placed in the middle. We want to know:
    1. How much force each support pushes back with (reactions)
    2. Whether the forces balance (equilibrium check)
    3. How big the bending moment gets under the load

    WHY THIS MATTERS:
    - In real life: bridges, floor beams, shelves
    - We compare against textbook formulas (closed-form solutions)
    """

    # ========================================================================
    # STEP 1: DEFINE THE PHYSICAL PROBLEM
    # ========================================================================
    L = 10.0    # Beam length
    P = -20.0   # Applied load, negative = downward

    beam = Beam(length=L)
    supports = [
        Support("A", 0.0, "pinned"),
        Support("B", L, "roller"),
    ]
    loads = [PointLoad("P1", L / 2, P)]

    # ========================================================================
    # STEP 2: SOLVE
    # ========================================================================
    res = run_analysis(beam, supports, loads)

    # ========================================================================
    # STEP 3: COMPARE TO TEXTBOOK ANSWER
    # ========================================================================
    # Each support takes half the load (symmetry): R = P/2 upward
    R_expected = -P / 2.0
    # Maximum moment under the load: M = PL/4
    M_expected = abs(P) * L / 4.0

    assert res.method == "equilibrium"
    assert np.isclose(res.reaction("A").Ry, R_expected, atol=1e-9)
    assert np.isclose(res.reaction("B").Ry, R_expected, atol=1e-9)
    assert res.reaction("A").M == 0.0
    assert np.isclose(res.checks.sum_fy, 0.0, atol=1e-9)
    assert np.isclose(res.checks.sum_m, 0.0, atol=1e-9)

    assert np.isclose(res.peak_moment.value, M_expected, atol=1e-6)
    assert np.isclose(res.peak_moment.x, L / 2, atol=1e-6)

    print(f"✓ Reactions: {res.reaction('A').Ry:.2f}, {res.reaction('B').Ry:.2f} (expected {R_expected:.2f})")
    print(f"✓ Peak moment: {res.peak_moment.value:.2f} (expected {M_expected:.2f})")


def test_equilibrium_holds_about_any_reference_point():
    """
    WHAT IS THIS TEST?
    ==================
    The solver only writes ΣM about x = L, but a correct answer balances
    moments about EVERY point. We check several reference points with a mix
    of point loads and UDLs.
    """
    from beamcalc import DistributedLoad

    beam = Beam(length=12.0)
    supports = [Support("A", 1.5, "pinned"), Support("B", 9.0, "roller")]
    loads = [
        PointLoad("P1", 0.0, -4.0),
        PointLoad("P2", 7.25, -13.0),
        DistributedLoad("q1", 2.0, 11.0, -1.75),
        PointLoad("P3", 12.0, 3.0),
    ]

    attempt = try_equilibrium(beam, supports, loads)
    assert attempt.ok

    for ref in [0.0, 1.5, 3.3, 9.0, 12.0, -5.0]:
        m_reactions = sum(r.Ry * (r.x - ref) + r.M for r in attempt.reactions)
        m_loads = load_moment_about(loads, ref)
        assert abs(m_reactions + m_loads) < 1e-6, f"ΣM about x={ref} is {m_reactions + m_loads}"

    sum_fy = sum(r.Ry for r in attempt.reactions) + sum(
        ld.magnitude if isinstance(ld, PointLoad) else ld.total for ld in loads
    )
    assert abs(sum_fy) < 1e-6


def test_fem_agrees_with_equilibrium_for_determinate_beam():
    """
    Both methods must give the same reactions when both apply.

    Off-centre load so the two reactions differ:
        R_A = P·b/L, R_B = P·a/L
    """
    L = 10.0
    beam = Beam(length=L, section=Section(E=210e9, I=8.0e-6))
    supports = [Support("A", 0.0, "pinned"), Support("B", L, "roller")]
    loads = [PointLoad("P1", 3.0, -20.0)]

    attempt = try_equilibrium(beam, supports, loads)
    fem = solve_fem(beam, supports, loads)

    assert attempt.ok
    assert np.isclose(attempt.reactions[0].Ry, 14.0, atol=1e-9)
    assert np.isclose(attempt.reactions[1].Ry, 6.0, atol=1e-9)

    for r_eq, r_fem in zip(attempt.reactions, fem.reactions):
        assert r_eq.support_id == r_fem.support_id
        assert abs(r_eq.Ry - r_fem.Ry) < 1e-3
        assert abs(r_eq.M - r_fem.M) < 1e-3
