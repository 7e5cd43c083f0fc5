"""
Parsing and validation of command-line values.

The calculators themselves accept anything and return empty results for
bad input; these helpers are for the CLI, which reports problems instead.
"""

import math
import re

from ..core.config import UNIT_ALIASES
from ..core.models import LiftRecord


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_unit(unit: str) -> str:
    """
    Normalize a unit name ("kg", "kgs", "lb", "lbs").

    Raises:
        ValidationError: If the unit is not recognised
    """
    normalized = UNIT_ALIASES.get(unit.strip().lower())
    if normalized is None:
        raise ValidationError(f"Invalid unit: {unit!r}. Use 'kg' or 'lb'.")
    return normalized


def validate_choice(value: str, choices: tuple[str, ...], name: str) -> str:
    """
    Validate that value is one of choices (case-insensitive).

    Raises:
        ValidationError: If value is not a valid choice
    """
    normalized = value.strip().lower()
    if normalized not in choices:
        raise ValidationError(f"Invalid {name}: {value!r}. Choose from: {', '.join(choices)}")
    return normalized


_PAIR_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[:→>-]\s*(\d+(?:\.\d+)?)\s*$")


def parse_progress_pair(text: str, name: str) -> tuple[float, float]:
    """
    Parse a "first:best" pair such as "180:215.5".

    "-" and ">" are accepted as separators too ("180-215", "180>215").

    Raises:
        ValidationError: If the pair cannot be parsed
    """
    m = _PAIR_RE.match(text)
    if not m:
        raise ValidationError(
            f"Invalid {name} value: {text!r}. Use first:best (e.g. 180:215)."
        )
    first = float(m.group(1))
    best = float(m.group(2))
    if not (math.isfinite(first) and math.isfinite(best)):
        raise ValidationError(f"Invalid {name} value: {text!r}. Number too large.")
    return first, best


def parse_progress_pairs(values: dict[str, str | None]) -> tuple[LiftRecord, LiftRecord]:
    """
    Parse {field: "first:best"} into (first, best) lift records.

    Missing fields count as 0 (not contested).

    Raises:
        ValidationError: If any pair is malformed or no field is given
    """
    firsts: dict[str, float] = {}
    bests: dict[str, float] = {}
    for name, text in values.items():
        if text is None:
            continue
        first, best = parse_progress_pair(text, name)
        firsts[name] = first
        bests[name] = best

    if not firsts:
        raise ValidationError("Give at least one of --squat, --bench, --deadlift, --total, --dots")

    return LiftRecord(**firsts), LiftRecord(**bests)
