"""
Progress between a lifter's first meet and their personal bests.

Meet rows come from the results lookup; this module only compares numbers.

  percentage:  round((best − first) / first × 100)
  total:       best − first, converted to the display unit
  hide:        no progress shown

A first value of 0 (lift not contested, bomb-out) gives 0 progress in every
mode rather than a division by zero.  A percentage too large to represent is
also reported as 0.
"""

from __future__ import annotations

import math
from typing import Sequence

from .config import SCORE_FIELDS, WEIGHT_FIELDS
from .formatting import round_half_away
from .models import LiftRecord, MeetResult, ProgressMode, Unit
from .units import convert


def progress_percentage(first: float, best: float) -> int:
    """Percentage progress from first to best, 0 when first is not positive."""
    if first <= 0:
        return 0
    ratio = (best - first) / first * 100
    if not math.isfinite(ratio):
        return 0
    return round_half_away(ratio)


def progress_absolute(first: float, best: float, unit: Unit = "kg", is_weight: bool = True) -> float:
    """
    Absolute progress from first to best.

    Args:
        first: First-meet value (kg for weights)
        best: Personal best (kg for weights)
        unit: Display unit for weights
        is_weight: False for scores, which are never converted

    Returns:
        best − first in the display unit, 0 when first is not positive
    """
    if first <= 0:
        return 0.0
    delta = best - first
    if not is_weight:
        return delta
    return convert(delta, "kg", unit)


def personal_bests(rows: Sequence[MeetResult]) -> LiftRecord | None:
    """Best value of each lift across all meets, or None without meets."""
    if not rows:
        return None
    return LiftRecord(
        squat=max(r.squat for r in rows),
        bench=max(r.bench for r in rows),
        deadlift=max(r.deadlift for r in rows),
        total=max(r.total for r in rows),
        dots=max(r.dots for r in rows),
    )


def first_meet(rows: Sequence[MeetResult]) -> MeetResult | None:
    """
    Earliest meet by date, or None without meets.

    Meets on the same date keep their input order.
    """
    if not rows:
        return None
    return min(rows, key=lambda r: r.date)


def progress_table(
    first: LiftRecord,
    best: LiftRecord,
    mode: ProgressMode = "percentage",
    unit: Unit = "kg",
) -> dict[str, float] | None:
    """
    Progress for every lift field.

    Returns:
        {field: progress} in WEIGHT_FIELDS + SCORE_FIELDS order, or None
        when the mode is "hide"
    """
    if mode == "hide":
        return None

    result: dict[str, float] = {}
    for name in WEIGHT_FIELDS + SCORE_FIELDS:
        f = getattr(first, name)
        b = getattr(best, name)
        if mode == "percentage":
            result[name] = progress_percentage(f, b)
        else:
            result[name] = progress_absolute(f, b, unit, is_weight=name in WEIGHT_FIELDS)
    return result


def lifter_progress(
    rows: Sequence[MeetResult],
    mode: ProgressMode = "percentage",
    unit: Unit = "kg",
) -> dict[str, float] | None:
    """Progress from a lifter's first meet to their personal bests."""
    start = first_meet(rows)
    best = personal_bests(rows)
    if start is None or best is None:
        return None
    return progress_table(start.to_record(), best, mode, unit)
