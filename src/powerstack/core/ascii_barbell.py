"""
ASCII side view of a loaded barbell sleeve.

Creates a terminal-friendly picture of one side of the bar: the shaft, the
plates heaviest-first from the inside out, and the collar if one is used.
Plate height scales with plate weight.
"""

from .config import METRIC_BAR_KG
from .formatting import round_half_away
from .models import BarbellLoad

SHAFT_WIDTH = 8
SLEEVE_END_WIDTH = 3


def _half_height(weight: float, heaviest: float, max_half_height: int) -> int:
    """Rows above (and below) the bar line that a plate covers."""
    if heaviest <= 0:
        return 1
    return max(1, round_half_away(max_half_height * weight / heaviest))


def create_barbell_plot(load: BarbellLoad, max_half_height: int = 4) -> str:
    """
    Draw one loaded sleeve.

    Args:
        load: Barbell load to draw
        max_half_height: Rows above the bar line for the heaviest plate

    Returns:
        ASCII art string
    """
    if load.is_empty:
        return "Empty bar, no plates needed."

    heaviest = max(p.weight for p in load.plate_set.plates)

    # (char, half height) per column, inside out
    columns: list[tuple[str, int]] = []
    for plate in load.plate_set.plates:
        count = load.distribution.get(plate.label, 0)
        half = _half_height(plate.weight, heaviest, max_half_height)
        columns.extend([("█", half)] * count)

    if load.unit == "kg" and load.bar_weight > METRIC_BAR_KG:
        columns.append(("▌", 1))

    lines = []
    for row in range(2 * max_half_height + 1):
        distance = abs(row - max_half_height)
        on_bar = distance == 0
        line = ("═" if on_bar else " ") * SHAFT_WIDTH
        line += "┃" if distance <= 1 else " "
        line += "".join(ch if distance <= half else " " for ch, half in columns)
        line += ("═" if on_bar else " ") * SLEEVE_END_WIDTH
        lines.append(line.rstrip())

    return "\n".join(lines)
