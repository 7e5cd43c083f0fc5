"""
One-rep max estimation from a submaximal set.

Brzycki is the primary formula.  Epley, Lander and Lombardi are reported
alongside for comparison.  All formulas share the same input domain:

  weight > 20 (heavier than an empty bar)
  0 < reps ≤ 12

Outside the domain, or for unparseable input, there is no estimate (None).
A single rep is its own max under every formula.
"""

from __future__ import annotations

from .config import (
    BRZYCKI_A,
    BRZYCKI_B,
    LANDER_A,
    LANDER_B,
    LOMBARDI_EXPONENT,
    ONERM_MAX_REPS,
    ONERM_MIN_WEIGHT,
)
from .formatting import format_weight, parse_number

RECOMMENDED_FORMULA = "brzycki"


def _parse_set(weight: float | str | None, reps: float | str | None) -> tuple[float, float] | None:
    """Return (weight, reps) if both are inside the estimation domain."""
    w = parse_number(weight)
    r = parse_number(reps)
    if w is None or r is None:
        return None
    if w <= ONERM_MIN_WEIGHT or r <= 0 or r > ONERM_MAX_REPS:
        return None
    return w, r


def brzycki_1rm(weight: float | str | None, reps: float | str | None) -> float | None:
    """
    Estimate 1RM using the Brzycki formula.

    1RM = weight / (1.0278 − 0.0278 × reps)
    """
    parsed = _parse_set(weight, reps)
    if parsed is None:
        return None
    w, r = parsed
    if r == 1:
        return w
    return w / (BRZYCKI_A - BRZYCKI_B * r)


def epley_1rm(weight: float | str | None, reps: float | str | None) -> float | None:
    """
    Estimate 1RM using the Epley formula.

    1RM = weight × (1 + reps/30)
    """
    parsed = _parse_set(weight, reps)
    if parsed is None:
        return None
    w, r = parsed
    if r == 1:
        return w
    return w * (1 + r / 30)


def lander_1rm(weight: float | str | None, reps: float | str | None) -> float | None:
    """1RM = 100 × weight / (101.3 − 2.67123 × reps)"""
    parsed = _parse_set(weight, reps)
    if parsed is None:
        return None
    w, r = parsed
    if r == 1:
        return w
    return 100 * w / (LANDER_A - LANDER_B * r)


def lombardi_1rm(weight: float | str | None, reps: float | str | None) -> float | None:
    """1RM = weight × reps^0.10"""
    parsed = _parse_set(weight, reps)
    if parsed is None:
        return None
    w, r = parsed
    return w * r**LOMBARDI_EXPONENT


_FORMULAS = {
    "brzycki": brzycki_1rm,
    "epley": epley_1rm,
    "lander": lander_1rm,
    "lombardi": lombardi_1rm,
}


def estimate_1rm(weight: float | str | None, reps: float | str | None) -> dict | None:
    """
    Estimate 1RM with every formula.

    Returns:
        Dict with keys:
          weight, reps    : parsed inputs
          one_rep_max     : Brzycki estimate (recommended)
          display         : Brzycki estimate formatted for display
          formulas        : {name: estimate} for all formulas
          recommended     : name of the recommended formula
        None if the set is outside the estimation domain.
    """
    parsed = _parse_set(weight, reps)
    if parsed is None:
        return None
    w, r = parsed

    formulas = {name: fn(w, r) for name, fn in _FORMULAS.items()}
    best = formulas[RECOMMENDED_FORMULA]
    return {
        "weight": w,
        "reps": r,
        "one_rep_max": best,
        "display": format_weight(best) if best is not None else "",
        "formulas": formulas,
        "recommended": RECOMMENDED_FORMULA,
    }
