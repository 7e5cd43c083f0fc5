"""
Calculation core for powerstack.

Every function here is pure: no I/O, no settings lookups, no shared state.
"""

from .plates import solve, solve_plates, total_weight
from .scoring import FORMULAS, compute_scores, score

__all__ = [
    "FORMULAS",
    "compute_scores",
    "score",
    "solve",
    "solve_plates",
    "total_weight",
]
