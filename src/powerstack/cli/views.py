"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of calculator results.
"""

from rich.console import Console
from rich.table import Table

from ..core.ascii_barbell import create_barbell_plot
from ..core.attempts import AttemptOption
from ..core.config import FORMULA_LABELS, SCORE_FIELDS, UNIT_LABELS, WEIGHT_FIELDS
from ..core.formatting import format_score, format_weight
from ..core.models import BarbellLoad, LiftRecord, ProgressMode, Unit
from ..core.plates import describe, format_load_total
from ..core.units import convert
from ..io.settings import Settings

console = Console()

UNAVAILABLE = "—"


def format_plate_table(load: BarbellLoad) -> Table:
    """
    Create a Rich table of the plates on one side of the bar.

    Args:
        load: Barbell load to display

    Returns:
        Rich Table object
    """
    unit = UNIT_LABELS[load.unit]
    table = Table(title=f"Plates per side ({load.plate_set.name})")

    table.add_column("Plate", style="cyan")
    table.add_column(f"Weight({unit})", justify="right")
    table.add_column("Count", justify="right", style="bold")

    for plate in load.plate_set.plates:
        count = load.distribution.get(plate.label, 0)
        if count <= 0:
            continue
        table.add_row(plate.label, format_weight(plate.weight), str(count))

    return table


def print_barbell(load: BarbellLoad) -> None:
    """
    Print a loaded barbell: drawing, plate table and totals.

    Args:
        load: Barbell load to display
    """
    console.print()
    console.print(create_barbell_plot(load))
    console.print()

    if not load.is_empty:
        console.print(format_plate_table(load))
        console.print(f"  {describe(load.distribution, load.plate_set)}")

    bar = f"{format_weight(load.bar_weight)} {UNIT_LABELS[load.unit]}"
    console.print(f"  Bar: {bar}")
    console.print(f"  [bold]{format_load_total(load)}[/bold]")
    console.print()


def format_score_table(scores: dict[str, str | None]) -> Table:
    """
    Create a Rich table of strength scores.

    Args:
        scores: {formula: formatted score or None}

    Returns:
        Rich Table object
    """
    table = Table(title="Powerlifting Scores")

    table.add_column("Formula", style="cyan")
    table.add_column("Score", justify="right", style="bold")

    for formula, value in scores.items():
        table.add_row(FORMULA_LABELS.get(formula, formula), value if value is not None else UNAVAILABLE)

    return table


def print_scores(scores: dict[str, str | None]) -> None:
    """Print strength scores, or a hint when nothing could be computed."""
    if all(v is None for v in scores.values()):
        print_warning("Enter a positive total and bodyweight to compute scores.")
        return
    console.print(format_score_table(scores))


def print_onerm(result: dict) -> None:
    """
    Print a one-rep max estimate with all formulas.

    Args:
        result: Output of estimate_1rm()
    """
    rec = result["recommended"]

    console.print()
    console.print("[bold cyan]One-Rep Max Estimate[/bold cyan]")
    console.print(
        f"  Set:          {format_weight(result['weight'])} × {format_weight(result['reps'])} reps"
    )
    console.print(f"  Estimated 1RM: [bold]{result['display']}[/bold]")
    console.print()

    sep = "  " + "─" * 30
    console.print(f"  {'Formula':<12}{'1RM':>10}")
    console.print(sep)
    for name, value in result["formulas"].items():
        val_str = format_weight(value) if value is not None else UNAVAILABLE
        star = " ★" if name == rec else ""
        console.print(f"  {name.capitalize():<12}{val_str:>10}{star}")
    console.print(sep)
    console.print(f"  ★ = recommended ({rec.capitalize()})")
    console.print()


def print_attempts(cards: dict[str, list[AttemptOption]]) -> None:
    """
    Print attempt selection cards.

    Args:
        cards: Output of select_attempts()
    """
    table = Table(title="Attempt Selection")

    table.add_column("Attempt", style="magenta")
    table.add_column("%", justify="right")
    table.add_column(f"{UNIT_LABELS['kg']} / {UNIT_LABELS['lb']}", justify="right", style="bold")

    for title, options in cards.items():
        for i, option in enumerate(options):
            table.add_row(title if i == 0 else "", f"{option.percentage}%", option.display)

    console.print(table)


def _fmt_progress(value: float, name: str, mode: ProgressMode, unit: Unit) -> str:
    if mode == "percentage":
        return f"{value:+.0f}%"
    if name in WEIGHT_FIELDS:
        return f"{value:+.1f} {UNIT_LABELS[unit]}"
    return f"{value:+.2f}"


def _fmt_lift(value: float, name: str, unit: Unit) -> str:
    if name in SCORE_FIELDS:
        return format_score(value)
    return format_weight(convert(value, "kg", unit))


def format_progress_table(
    first: LiftRecord,
    best: LiftRecord,
    progress: dict[str, float] | None,
    mode: ProgressMode,
    unit: Unit,
) -> Table:
    """
    Create a Rich table comparing first meet and personal bests.

    Args:
        first: First-meet results (kg)
        best: Personal bests (kg)
        progress: Output of progress_table(), None when hidden
        mode: Progress mode used
        unit: Display unit for weights

    Returns:
        Rich Table object
    """
    table = Table(title="Progress")

    table.add_column("", style="cyan")
    names = WEIGHT_FIELDS + SCORE_FIELDS
    for name in names:
        table.add_column(name.capitalize(), justify="right")

    table.add_row("First meet", *(_fmt_lift(getattr(first, n), n, unit) for n in names))
    table.add_row("Best", *(_fmt_lift(getattr(best, n), n, unit) for n in names), style="bold")
    if progress is not None:
        table.add_row(
            "Progress",
            *(_fmt_progress(progress[n], n, mode, unit) for n in names),
            style="green",
        )

    return table


def print_settings(settings: Settings, source: str) -> None:
    """Print the effective settings and where they came from."""
    table = Table(title="Settings")

    table.add_column("Key", style="cyan")
    table.add_column("Value", style="bold")

    for key, value in settings.to_dict().items():
        table.add_row(key, str(value).lower() if isinstance(value, bool) else str(value))

    console.print(table)
    console.print(f"  Source: {source}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")
