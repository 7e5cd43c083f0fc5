"""Plate loading command."""

import json
from typing import Annotated, Optional

import typer

from ...core.plates import describe, format_load_total, load_totals, solve_plates
from ...io.parsers import ValidationError
from .. import views
from ..app import JsonOption, SettingsPathOption, UnitOption, app, get_settings, resolve_unit


@app.command()
def plates(
    weight: Annotated[float, typer.Argument(help="Target barbell weight (bar included)")],
    unit: UnitOption = None,
    pound_plates: Annotated[
        Optional[bool],
        typer.Option("--pound-plates/--metric-plates", help="Plate set to load"),
    ] = None,
    collars: Annotated[
        Optional[bool],
        typer.Option("--collars/--no-collars", help="Count 2 × 2.5 kg collars (metric plates only)"),
    ] = None,
    json_out: JsonOption = False,
    settings_path: SettingsPathOption = None,
) -> None:
    """
    Show which plates to load on each side of the bar.

    The weight is rounded to the nearest 2.5 and capped at 1000 kg / 1500 lb.
    Whatever cannot be made with the available plates is left off.
    """
    settings = get_settings(settings_path)
    try:
        weight_unit = resolve_unit(unit, settings.weight_unit)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    use_pound_plates = settings.pound_plates if pound_plates is None else pound_plates
    has_collars = settings.has_collars if collars is None else collars
    if use_pound_plates and has_collars:
        views.print_warning("Collars are not used with pound plates; ignoring --collars.")
        has_collars = False

    load = solve_plates(weight, weight_unit, use_pound_plates, has_collars)

    if json_out:
        totals = load_totals(load)
        print(json.dumps({
            "plate_set": load.plate_set.name,
            "unit": load.unit,
            "bar_weight": load.bar_weight,
            "distribution": load.distribution,
            "description": describe(load.distribution, load.plate_set),
            "total_kg": round(totals["kg"], 2),
            "total_lb": round(totals["lb"], 2),
            "display": format_load_total(load),
        }, indent=2))
        return

    views.print_barbell(load)
