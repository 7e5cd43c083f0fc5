"""
Coefficient tables for the strength scoring formulas.

Polynomial formulas (DOTS, Wilks, Wilks2)
-----------------------------------------
  denominator = c0 + c1·bw + c2·bw² + … + cn·bwⁿ
  score       = numerator / denominator × total
  bw is clamped into [bw_min, bw_max] first.

IPF points (2019-2020 IPF formula)
----------------------------------
  score = 500 + 100 × (total − (c0·ln(bw) − c1)) / (c2·ln(bw) − c3)

IPF GL points (IPF Goodlift, 2020)
----------------------------------
  score = 100 / (c0 − c1·e^(−c2·bw)) × total

IPF and IPF GL tables are keyed by (gender, equipment, category):
  equipment: raw | equipped        category: full (3-lift) | bench (bench-only)
"""

from __future__ import annotations

from .models import Category, Equipment, Formula, Gender, IPFGLParams, IPFParams, PolynomialParams

# ---------------------------------------------------------------------------
# Polynomial formulas
# ---------------------------------------------------------------------------

DOTS: dict[str, PolynomialParams] = {
    "male": PolynomialParams(
        coefficients=(-307.75076, 24.0900756, -0.1918759221, 0.0007391293, -0.000001093),
        bw_min=40.0,
        bw_max=210.0,
        numerator=500.0,
    ),
    "female": PolynomialParams(
        coefficients=(-57.96288, 13.6175032, -0.1126655495, 0.0005158568, -0.0000010706),
        bw_min=40.0,
        bw_max=150.0,
        numerator=500.0,
    ),
}

WILKS: dict[str, PolynomialParams] = {
    "male": PolynomialParams(
        coefficients=(-216.0475144, 16.2606339, -0.002388645, -0.00113732, 7.01863e-6, -1.291e-8),
        bw_min=40.0,
        bw_max=201.9,
        numerator=500.0,
    ),
    "female": PolynomialParams(
        coefficients=(
            594.31747775582,
            -27.23842536447,
            0.82112226871,
            -0.00930733913,
            4.731582e-5,
            -9.054e-8,
        ),
        bw_min=26.51,
        bw_max=154.53,
        numerator=500.0,
    ),
}

WILKS2: dict[str, PolynomialParams] = {
    "male": PolynomialParams(
        coefficients=(
            47.4617885411949,
            8.47206137941125,
            0.073694103462609,
            -0.00139583381094385,
            7.07665973070743e-6,
            -1.20804336482315e-8,
        ),
        bw_min=40.0,
        bw_max=200.95,
        numerator=600.0,
    ),
    "female": PolynomialParams(
        coefficients=(
            -125.425539779509,
            13.7121941940668,
            -0.0330725063103405,
            -0.0010504000506583,
            9.38773881462799e-6,
            -2.3334613884954e-8,
        ),
        bw_min=40.0,
        bw_max=150.95,
        numerator=600.0,
    ),
}

_POLYNOMIAL_TABLES: dict[str, dict[str, PolynomialParams]] = {
    "dots": DOTS,
    "wilks": WILKS,
    "wilks2": WILKS2,
}

# ---------------------------------------------------------------------------
# IPF points
# ---------------------------------------------------------------------------

IPF: dict[tuple[str, str, str], IPFParams] = {
    ("male", "raw", "full"): IPFParams((310.67, 857.785, 53.216, 147.0835)),
    ("male", "raw", "bench"): IPFParams((86.4745, 259.155, 17.5785, 53.122)),
    ("male", "equipped", "full"): IPFParams((387.265, 1121.28, 80.6324, 222.4896)),
    ("male", "equipped", "bench"): IPFParams((133.94, 441.465, 35.3938, 113.0057)),
    ("female", "raw", "full"): IPFParams((125.1435, 228.03, 34.5246, 86.8301)),
    ("female", "raw", "bench"): IPFParams((25.0485, 43.848, 6.7172, 13.952)),
    ("female", "equipped", "full"): IPFParams((176.58, 373.315, 48.4534, 110.0103)),
    ("female", "equipped", "bench"): IPFParams((49.106, 124.209, 23.199, 67.4926)),
}

# ---------------------------------------------------------------------------
# IPF GL points
# ---------------------------------------------------------------------------

IPF_GL: dict[tuple[str, str, str], IPFGLParams] = {
    ("male", "raw", "full"): IPFGLParams((1199.72839, 1025.18162, 0.00921)),
    ("male", "raw", "bench"): IPFGLParams((320.98041, 281.40258, 0.01008)),
    ("male", "equipped", "full"): IPFGLParams((1236.25115, 1449.21864, 0.01644)),
    ("male", "equipped", "bench"): IPFGLParams((381.22073, 733.79378, 0.02398)),
    ("female", "raw", "full"): IPFGLParams((610.32796, 1045.59282, 0.03048)),
    ("female", "raw", "bench"): IPFGLParams((142.40398, 442.52671, 0.04724)),
    ("female", "equipped", "full"): IPFGLParams((758.63878, 949.31382, 0.02435)),
    ("female", "equipped", "bench"): IPFGLParams((221.82209, 357.00377, 0.02937)),
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def get_polynomial_params(formula: Formula, gender: Gender) -> PolynomialParams | None:
    """Return DOTS / Wilks / Wilks2 coefficients, or None for other formulas."""
    table = _POLYNOMIAL_TABLES.get(formula)
    if table is None:
        return None
    return table.get(gender)


def get_ipf_params(gender: Gender, equipment: Equipment, category: Category) -> IPFParams | None:
    """Return IPF points coefficients for the division, or None if unknown."""
    return IPF.get((gender, equipment, category))


def get_ipf_gl_params(
    gender: Gender, equipment: Equipment, category: Category
) -> IPFGLParams | None:
    """Return IPF GL coefficients for the division, or None if unknown."""
    return IPF_GL.get((gender, equipment, category))
