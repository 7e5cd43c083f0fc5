"""
Plate loading for a barbell.

Plates are loaded in symmetric pairs, one per side.  The decomposition is a
greedy largest-first pass over the plate catalog:

  target  = min(weight, max_total) rounded to the 2.5 grid
  remain  = target − bar
  for each plate (heaviest first):
      n = floor(remain / (2 × plate));  remain −= n × 2 × plate

Whatever is left below the smallest pair cannot be loaded and is dropped.
The greedy result is the defined answer, not an attempt at the fewest
plates for arbitrary catalogs.

Catalogs
--------
  Metric (kg): 25 / 20 / 15 / 10 / 5 / 2.5 / 1.25 on a 20 kg bar
               (25 kg counting two 2.5 kg collars)
  Pound  (lb): 45 / 35 / 25 / 10 / 5 / 2.5 on a 45 lb bar, no collars
"""

from __future__ import annotations

from dataclasses import replace as _dc_replace
from typing import Sequence

from .config import (
    COLLAR_KG,
    MAX_TOTAL,
    METRIC_BAR_KG,
    METRIC_PLATES,
    POUND_BAR_LB,
    POUND_PLATES,
    ROUNDING_STEP,
    UNIT_LABELS,
)
from .formatting import format_weight, parse_number, round_half_away
from .models import BarbellLoad, Distribution, Plate, PlateSet, Unit
from .units import convert, to_kg, to_lb


# ---------------------------------------------------------------------------
# Plate sets
# ---------------------------------------------------------------------------

METRIC_PLATE_SET = PlateSet(
    name="metric",
    unit="kg",
    bar_weight=METRIC_BAR_KG,
    plates=tuple(Plate(weight=w, label=label) for w, label in METRIC_PLATES),
)

POUND_PLATE_SET = PlateSet(
    name="pound",
    unit="lb",
    bar_weight=POUND_BAR_LB,
    plates=tuple(Plate(weight=w, label=label) for w, label in POUND_PLATES),
)


def get_plate_set(pound_plates: bool = False, has_collars: bool = False) -> PlateSet:
    """
    Return the plate set for the given hardware flags.

    Collars only exist for the metric set; they are ignored with pound plates.
    """
    if pound_plates:
        return POUND_PLATE_SET
    if has_collars:
        return _dc_replace(METRIC_PLATE_SET, bar_weight=METRIC_BAR_KG + 2 * COLLAR_KG)
    return METRIC_PLATE_SET


# ---------------------------------------------------------------------------
# Core decomposition
# ---------------------------------------------------------------------------

def _sanitize(weight: float | str | None) -> float:
    """Non-finite, unparseable or negative weights count as 0."""
    value = parse_number(weight)
    if value is None or value < 0:
        return 0.0
    return value


def round_to_grid(weight: float, unit: Unit) -> float:
    """
    Clamp to the unit's maximum total and round to the 2.5 grid.

    Halves round away from zero (101.25 kg → 102.5 kg).
    """
    capped = min(_sanitize(weight), MAX_TOTAL[unit])
    return round_half_away(capped / ROUNDING_STEP) * ROUNDING_STEP


def solve(
    target_weight: float,
    unit: Unit,
    bar_weight: float,
    catalog: Sequence[Plate],
) -> Distribution:
    """
    Decompose a target barbell weight into plates for one side.

    Args:
        target_weight: Requested total (bar + plates) in unit
        unit: Unit of target_weight, bar_weight and the catalog
        bar_weight: Weight of the bar (including collars, if any)
        catalog: Plates ordered heaviest first

    Returns:
        {label: count} per side, catalog order, zero counts omitted.
        Empty when the target does not exceed the bar.
    """
    remaining = round_to_grid(target_weight, unit) - bar_weight
    distribution: Distribution = {}
    if remaining <= 0:
        return distribution

    for plate in catalog:
        pair = plate.weight * 2
        if pair <= 0:
            continue
        count = int(remaining / pair)
        if count > 0:
            distribution[plate.label] = count
            remaining -= count * pair

    return distribution


def total_weight(distribution: Distribution, bar_weight: float, plate_set: PlateSet) -> float:
    """
    Loaded weight for a distribution: bar + 2 × Σ(count × plate).

    Args:
        distribution: {label: count} per side
        bar_weight: Weight of the bar (including collars)
        plate_set: Set the labels belong to

    Returns:
        Total weight in the plate set's unit
    """
    plates = sum(count * plate_set.plate_weight(label) for label, count in distribution.items())
    return bar_weight + 2 * plates


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def solve_plates(
    weight: float | str | None,
    weight_unit: Unit = "kg",
    pound_plates: bool = False,
    has_collars: bool = False,
) -> BarbellLoad:
    """
    Load a barbell for a weight entered in weight_unit.

    When the entry unit differs from the plate unit the weight is converted
    first, then clamped and rounded in the plate unit.

    Args:
        weight: Target weight as typed or numeric
        weight_unit: Unit the weight was entered in
        pound_plates: Use the pound plate set instead of metric plates
        has_collars: Count 2 × 2.5 kg collars (metric plates only)

    Returns:
        BarbellLoad with the per-side distribution (empty for no input)
    """
    plate_set = get_plate_set(pound_plates, has_collars)
    target = convert(_sanitize(weight), weight_unit, plate_set.unit)
    distribution = solve(target, plate_set.unit, plate_set.bar_weight, plate_set.plates)
    return BarbellLoad(plate_set=plate_set, distribution=distribution)


def load_total(load: BarbellLoad) -> float:
    """Total weight of a barbell load in its plate unit."""
    return total_weight(load.distribution, load.bar_weight, load.plate_set)


def load_totals(load: BarbellLoad) -> dict[str, float]:
    """Total weight of a barbell load in both units: {"kg": …, "lb": …}."""
    total = load_total(load)
    if load.unit == "kg":
        return {"kg": total, "lb": to_lb(total)}
    return {"kg": to_kg(total), "lb": total}


def format_load_total(load: BarbellLoad) -> str:
    """Render the total as "100 kg / 220.5 lbs"."""
    totals = load_totals(load)
    return (
        f"{format_weight(totals['kg'])} {UNIT_LABELS['kg']} / "
        f"{format_weight(totals['lb'])} {UNIT_LABELS['lb']}"
    )


def describe(distribution: Distribution, plate_set: PlateSet) -> str:
    """
    Human-readable plate list for one side.

    Metric: "2 reds, 1 yellow"     Pound: "45x2, 10x1"
    """
    parts: list[str] = []
    for plate in plate_set.plates:
        count = distribution.get(plate.label, 0)
        if count <= 0:
            continue
        if plate_set.unit == "lb":
            parts.append(f"{format_weight(plate.weight)}x{count}")
        else:
            name = f"{plate.label}s" if count > 1 else plate.label
            parts.append(f"{count} {name}")
    return ", ".join(parts)
