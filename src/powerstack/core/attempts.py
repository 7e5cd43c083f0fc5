"""
Meet attempt selection from an estimated third attempt.

Each attempt is a percentage of the estimate, snapped to the 2.5 kg grid:

  1st: 90 / 91 / 92 %    2nd: 95 / 96 / 97 %    3rd: 99 / 100 / 102 %

Values are shown in both units as "kg / lb", one decimal each.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import ATTEMPT_MIN_INPUT, ATTEMPT_PERCENTAGES, ROUNDING_STEP
from .formatting import parse_number, round_half_away
from .models import Unit
from .units import convert, to_lb


@dataclass(frozen=True)
class AttemptOption:
    """One suggested attempt weight."""

    percentage: int
    kg: float
    lb: float

    @property
    def display(self) -> str:
        return f"{self.kg:.1f} / {self.lb:.1f}"


def attempt_weight_kg(estimate_kg: float, percentage: float) -> float:
    """Percentage of the estimate, rounded to the nearest 2.5 kg."""
    raw = estimate_kg * (percentage / 100)
    return round_half_away(raw / ROUNDING_STEP) * ROUNDING_STEP


def select_attempts(
    third_attempt: float | str | None,
    unit: Unit = "lb",
) -> dict[str, list[AttemptOption]]:
    """
    Suggest opener, second and third attempts.

    Args:
        third_attempt: Estimated third attempt as typed or numeric
        unit: Unit of the estimate

    Returns:
        {"1st Attempt": [AttemptOption, …], …}; empty if the estimate is
        missing or not above 45 in its unit
    """
    value = parse_number(third_attempt)
    if value is None or value <= ATTEMPT_MIN_INPUT:
        return {}

    estimate_kg = convert(value, unit, "kg")
    cards: dict[str, list[AttemptOption]] = {}
    for title, percentages in ATTEMPT_PERCENTAGES.items():
        options = []
        for pct in percentages:
            kg = attempt_weight_kg(estimate_kg, pct)
            options.append(AttemptOption(percentage=pct, kg=kg, lb=to_lb(kg)))
        cards[title] = options
    return cards
