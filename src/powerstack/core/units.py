"""
Kilogram / pound conversion.

Uses the fixed ratio LBS_PER_KG.  No rounding happens here; callers round
or format as needed.
"""

from .config import LBS_PER_KG
from .models import Unit


def to_lb(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LBS_PER_KG


def to_kg(lb: float) -> float:
    """Convert pounds to kilograms."""
    return lb / LBS_PER_KG


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """
    Convert a weight between units.

    Args:
        value: Weight in from_unit
        from_unit: "kg" or "lb"
        to_unit: "kg" or "lb"

    Returns:
        Weight in to_unit (unchanged when the units match)
    """
    if from_unit == to_unit:
        return value
    if to_unit == "lb":
        return to_lb(value)
    return to_kg(value)
