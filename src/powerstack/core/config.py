"""
Configuration constants for the powerlifting calculators.

All adjustable parameters are centralized here for easy tuning.
Coefficient tables for the scoring formulas live in coefficients.py.
"""

from typing import Final

# =============================================================================
# UNIT CONVERSION
# =============================================================================

# Kept at four decimals (not 2.20462) so displayed weights match the app
LBS_PER_KG: Final[float] = 2.2046

UNIT_LABELS: Final[dict[str, str]] = {
    "kg": "kg",
    "lb": "lbs",
}

# Accepted spellings, normalized to "kg" | "lb"
UNIT_ALIASES: Final[dict[str, str]] = {
    "kg": "kg",
    "kgs": "kg",
    "lb": "lb",
    "lbs": "lb",
}

# =============================================================================
# PLATE LOADING
# =============================================================================

ROUNDING_STEP: Final[float] = 2.5  # Loadable grid, kg or lb
MAX_TOTAL: Final[dict[str, float]] = {
    "kg": 1000.0,
    "lb": 1500.0,
}

METRIC_BAR_KG: Final[float] = 20.0
COLLAR_KG: Final[float] = 2.5  # Per collar, two per bar
POUND_BAR_LB: Final[float] = 45.0

# (weight, label) pairs, heaviest first. Labels double as plate colours.
METRIC_PLATES: Final[list[tuple[float, str]]] = [
    (25.0, "red"),
    (20.0, "blue"),
    (15.0, "yellow"),
    (10.0, "green"),
    (5.0, "white"),
    (2.5, "black"),
    (1.25, "silver"),
]

POUND_PLATES: Final[list[tuple[float, str]]] = [
    (45.0, "45"),
    (35.0, "35"),
    (25.0, "25"),
    (10.0, "10"),
    (5.0, "5"),
    (2.5, "2.5"),
]

# =============================================================================
# SCORING
# =============================================================================

SCORE_DECIMALS: Final[int] = 2
WEIGHT_DECIMALS: Final[int] = 1

MIN_BODYWEIGHT_CHARS: Final[int] = 2  # Typed bodyweight shorter than this is incomplete

IPF_MIN_BODYWEIGHT_KG: Final[float] = 40.0  # IPF points are 0 at or below this
IPF_GL_MIN_BODYWEIGHT_KG: Final[float] = 35.0  # IPF GL points are 0 at or below this

FORMULA_LABELS: Final[dict[str, str]] = {
    "dots": "Dots",
    "wilks": "Old Wilks",
    "wilks2": "Wilks2",
    "ipf": "IPF",
    "ipf_gl": "IPF GL",
}

# =============================================================================
# ONE-REP MAX
# =============================================================================

ONERM_MIN_WEIGHT: Final[float] = 20.0  # Weight must exceed an empty bar
ONERM_MAX_REPS: Final[int] = 12  # Brzycki is unreliable past 12 reps

BRZYCKI_A: Final[float] = 1.0278
BRZYCKI_B: Final[float] = 0.0278

LANDER_A: Final[float] = 101.3
LANDER_B: Final[float] = 2.67123

LOMBARDI_EXPONENT: Final[float] = 0.10

# =============================================================================
# ATTEMPT SELECTION
# =============================================================================

ATTEMPT_MIN_INPUT: Final[float] = 45.0  # Third-attempt estimate must exceed this

ATTEMPT_PERCENTAGES: Final[dict[str, list[int]]] = {
    "1st Attempt": [90, 91, 92],
    "2nd Attempt": [95, 96, 97],
    "3rd Attempt": [99, 100, 102],
}

# =============================================================================
# PROGRESS
# =============================================================================

PROGRESS_MODES: Final[tuple[str, ...]] = ("percentage", "total", "hide")

# Fields of a lift record that carry weights (converted for display)
WEIGHT_FIELDS: Final[tuple[str, ...]] = ("squat", "bench", "deadlift", "total")
SCORE_FIELDS: Final[tuple[str, ...]] = ("dots",)
