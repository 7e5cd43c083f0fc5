"""
Display normalisation for weights and scores.

Weights show one decimal with a trailing ".0" dropped ("135", "135.5").
Scores always show two decimals ("0.00", "412.37").
"""

import math

from .config import SCORE_DECIMALS, WEIGHT_DECIMALS


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() rounds halves to even; loadable weights and progress
    percentages use standard rounding instead.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def parse_number(raw: float | int | str | None) -> float | None:
    """
    Parse a typed or numeric value into a finite float.

    Returns None for empty, unparseable or non-finite input.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        try:
            value = float(raw)
        except OverflowError:
            return None
    if not math.isfinite(value):
        return None
    return value


def format_value(value: float, decimals: int) -> str:
    """
    Format to a fixed number of decimals.

    With one decimal a trailing ".0" is stripped, so whole weights print
    without a fraction.
    """
    text = f"{value:.{decimals}f}"
    if decimals == 1 and text.endswith(".0"):
        return text[:-2]
    return text


def format_weight(value: float) -> str:
    """Format a weight for display ("100", "102.5")."""
    return format_value(value, WEIGHT_DECIMALS)


def format_score(value: float) -> str:
    """Format a score to exactly two decimals, never trimmed."""
    return f"{value:.{SCORE_DECIMALS}f}"
