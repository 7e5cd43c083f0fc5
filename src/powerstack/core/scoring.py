"""
Strength scores from a lift total and bodyweight.

Five formulas are supported, selected by tag:

  dots    DOTS                      polynomial, numerator 500
  wilks   Wilks (pre-2020)          polynomial, numerator 500
  wilks2  Wilks 2020                polynomial, numerator 600
  ipf     IPF points                log-linear, by division
  ipf_gl  IPF GL (Goodlift) points  exponential decay, by division

Input handling is uniform: an empty, unparseable, non-positive or
non-finite total or bodyweight, or a typed bodyweight shorter than two
characters, makes the score unavailable (None).  Bodyweights outside a
polynomial formula's range are clamped, not rejected.  IPF and IPF GL have
a bodyweight floor below which the score is exactly 0.

No function here raises for bad input.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable

from .coefficients import get_ipf_gl_params, get_ipf_params, get_polynomial_params
from .config import IPF_GL_MIN_BODYWEIGHT_KG, IPF_MIN_BODYWEIGHT_KG, MIN_BODYWEIGHT_CHARS
from .formatting import format_score, parse_number
from .models import Formula, ScoreInput
from .units import convert

FORMULAS: tuple[Formula, ...] = ("dots", "wilks", "wilks2", "ipf", "ipf_gl")


def _parse_input(inp: ScoreInput) -> tuple[float, float] | None:
    """
    Return (total_kg, bodyweight_kg) or None if the input is unusable.
    """
    if isinstance(inp.bodyweight, str) and len(inp.bodyweight) < MIN_BODYWEIGHT_CHARS:
        return None

    total = parse_number(inp.total)
    bodyweight = parse_number(inp.bodyweight)
    if total is None or bodyweight is None:
        return None
    if total <= 0 or bodyweight <= 0:
        return None

    return convert(total, inp.unit, "kg"), convert(bodyweight, inp.unit, "kg")


# ---------------------------------------------------------------------------
# Formula evaluators (all weights in kg)
# ---------------------------------------------------------------------------

def polynomial_score(formula: Formula, total_kg: float, bodyweight_kg: float, inp: ScoreInput) -> float | None:
    """
    DOTS / Wilks / Wilks2.

    bw' = clip(bw, bw_min, bw_max)
    score = numerator / Σ(ci · bw'^i) × total
    """
    params = get_polynomial_params(formula, inp.gender)
    if params is None:
        return None

    bw = min(max(bodyweight_kg, params.bw_min), params.bw_max)
    coefficients = params.coefficients
    denominator = coefficients[0]
    for power, c in enumerate(coefficients[1:], start=1):
        denominator += c * bw**power

    if denominator == 0:
        return None
    return (params.numerator / denominator) * total_kg


def ipf_score(formula: Formula, total_kg: float, bodyweight_kg: float, inp: ScoreInput) -> float | None:
    """
    IPF points.

    score = 500 + 100 × (total − (c0·ln(bw) − c1)) / (c2·ln(bw) − c3)
    Returns 0 for bodyweights at or below 40 kg.
    """
    if bodyweight_kg <= IPF_MIN_BODYWEIGHT_KG:
        return 0.0

    params = get_ipf_params(inp.gender, inp.equipment, inp.category)
    if params is None:
        return None

    c0, c1, c2, c3 = params.coefficients
    ln_bw = math.log(bodyweight_kg)
    return 500 + 100 * ((total_kg - (c0 * ln_bw - c1)) / (c2 * ln_bw - c3))


def ipf_gl_score(formula: Formula, total_kg: float, bodyweight_kg: float, inp: ScoreInput) -> float | None:
    """
    IPF GL points.

    score = 100 / (c0 − c1·e^(−c2·bw)) × total
    Returns 0 for bodyweights at or below 35 kg.
    """
    if bodyweight_kg <= IPF_GL_MIN_BODYWEIGHT_KG:
        return 0.0

    params = get_ipf_gl_params(inp.gender, inp.equipment, inp.category)
    if params is None:
        return None

    c0, c1, c2 = params.coefficients
    denominator = c0 - c1 * math.exp(-c2 * bodyweight_kg)
    return (100 / denominator) * total_kg


_Evaluator = Callable[[Formula, float, float, ScoreInput], "float | None"]

_EVALUATORS: dict[str, _Evaluator] = {
    "dots": polynomial_score,
    "wilks": polynomial_score,
    "wilks2": polynomial_score,
    "ipf": ipf_score,
    "ipf_gl": ipf_gl_score,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def score(formula: Formula, inp: ScoreInput) -> float | None:
    """
    Compute one score.

    Args:
        formula: One of FORMULAS
        inp: Total, bodyweight, gender and division

    Returns:
        Unrounded score, or None when the input is unusable
    """
    evaluator = _EVALUATORS.get(formula)
    if evaluator is None:
        return None

    parsed = _parse_input(inp)
    if parsed is None:
        return None

    total_kg, bodyweight_kg = parsed
    return evaluator(formula, total_kg, bodyweight_kg, inp)


def compute_scores(
    inp: ScoreInput,
    formulas: Iterable[Formula] = FORMULAS,
) -> dict[Formula, str | None]:
    """
    Compute and format several scores at once.

    Returns:
        {formula: "412.37"} with None for unavailable scores
    """
    result: dict[Formula, str | None] = {}
    for formula in formulas:
        value = score(formula, inp)
        result[formula] = format_score(value) if value is not None else None
    return result
