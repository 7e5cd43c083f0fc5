"""Training tools: 1rm, attempts, progress, settings."""

import json
from typing import Annotated, Optional

import typer

from ...core.attempts import select_attempts
from ...core.config import PROGRESS_MODES, WEIGHT_FIELDS
from ...core.onerm import estimate_1rm
from ...core.models import LiftRecord
from ...core.progress import progress_table
from ...core.units import convert
from ...io.parsers import ValidationError, parse_progress_pairs, validate_choice
from ...io.settings import get_user_settings_path
from .. import views
from ..app import JsonOption, SettingsPathOption, UnitOption, app, get_settings, resolve_unit


@app.command("1rm")
def onerepmax(
    weight: Annotated[float, typer.Argument(help="Weight lifted")],
    reps: Annotated[float, typer.Argument(help="Reps performed (1-12)")],
    json_out: JsonOption = False,
) -> None:
    """
    Estimate a one-rep max from a set.

    Uses the Brzycki formula; Epley, Lander and Lombardi are shown for
    comparison. Needs more than 20 (kg or lb) and 1-12 reps.
    """
    result = estimate_1rm(weight, reps)

    if result is None:
        views.print_error("Enter a weight above 20 and between 1 and 12 reps.")
        raise typer.Exit(1)

    if json_out:
        print(json.dumps({
            "weight": result["weight"],
            "reps": result["reps"],
            "one_rep_max": round(result["one_rep_max"], 2),
            "display": result["display"],
            "recommended": result["recommended"],
            "formulas": {
                k: round(v, 2) if v is not None else None
                for k, v in result["formulas"].items()
            },
        }, indent=2))
        return

    views.print_onerm(result)


@app.command()
def attempts(
    third_attempt: Annotated[float, typer.Argument(help="Estimated third attempt")],
    unit: Annotated[
        str,
        typer.Option("--unit", "-u", help="Unit of the estimate: kg or lb"),
    ] = "lb",
    json_out: JsonOption = False,
) -> None:
    """
    Suggest opener, second and third attempts.

    Percentages of the estimated third attempt, rounded to 2.5 kg:
    1st 90-92 %, 2nd 95-97 %, 3rd 99-102 %.
    """
    try:
        estimate_unit = resolve_unit(unit, "lb")
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    cards = select_attempts(third_attempt, estimate_unit)  # type: ignore[arg-type]

    if not cards:
        views.print_error("The estimated third attempt must be above 45.")
        raise typer.Exit(1)

    if json_out:
        print(json.dumps({
            title: [
                {"percentage": o.percentage, "kg": o.kg, "lb": round(o.lb, 2), "display": o.display}
                for o in options
            ]
            for title, options in cards.items()
        }, indent=2))
        return

    views.print_attempts(cards)


def _record_to_dict(record: LiftRecord, unit: str) -> dict[str, float]:
    """Lift values in the display unit; the Dots score is kept as is."""
    data = {
        n: round(convert(getattr(record, n), "kg", unit), 2)  # type: ignore[arg-type]
        for n in WEIGHT_FIELDS
    }
    data["dots"] = record.dots
    return data


@app.command()
def progress(
    squat: Annotated[Optional[str], typer.Option("--squat", help="first:best in kg")] = None,
    bench: Annotated[Optional[str], typer.Option("--bench", help="first:best in kg")] = None,
    deadlift: Annotated[Optional[str], typer.Option("--deadlift", help="first:best in kg")] = None,
    total: Annotated[Optional[str], typer.Option("--total", help="first:best in kg")] = None,
    dots: Annotated[Optional[str], typer.Option("--dots", help="first:best Dots score")] = None,
    mode: Annotated[
        Optional[str],
        typer.Option("--mode", "-m", help="percentage, total or hide (default from settings)"),
    ] = None,
    unit: UnitOption = None,
    json_out: JsonOption = False,
    settings_path: SettingsPathOption = None,
) -> None:
    """
    Compare first-meet results with personal bests.

    Each lift is given as first:best in kg, e.g. --squat 180:215.
    Lifts that are left out count as not contested (no progress).
    """
    settings = get_settings(settings_path)
    try:
        first, best = parse_progress_pairs({
            "squat": squat,
            "bench": bench,
            "deadlift": deadlift,
            "total": total,
            "dots": dots,
        })
        progress_mode = validate_choice(mode, PROGRESS_MODES, "mode") if mode else settings.progress_mode
        display_unit = resolve_unit(unit, settings.weight_unit)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    result = progress_table(first, best, progress_mode, display_unit)  # type: ignore[arg-type]

    if json_out:
        print(json.dumps({
            "mode": progress_mode,
            "unit": display_unit,
            "first": _record_to_dict(first, display_unit),
            "best": _record_to_dict(best, display_unit),
            "progress": result,
        }, indent=2))
        return

    views.console.print(
        views.format_progress_table(first, best, result, progress_mode, display_unit)  # type: ignore[arg-type]
    )


@app.command("settings")
def show_settings(settings_path: SettingsPathOption = None) -> None:
    """
    Show the effective settings.

    Settings are read from ~/.powerstack/settings.yaml when it exists.
    Command-line options always take precedence.
    """
    settings = get_settings(settings_path)
    path = settings_path if settings_path is not None else get_user_settings_path()
    source = str(path) if path.exists() else "built-in defaults"
    views.print_settings(settings, source)
