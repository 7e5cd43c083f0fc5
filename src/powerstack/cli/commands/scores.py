"""Strength score command."""

import json
from typing import Annotated

import typer

from ...core.models import ScoreInput
from ...core.scoring import compute_scores
from ...io.parsers import ValidationError, validate_choice
from .. import views
from ..app import JsonOption, SettingsPathOption, UnitOption, app, get_settings, resolve_unit

_EQUIPMENT_ALIASES = {"raw": "raw", "classic": "raw", "equipped": "equipped"}
_CATEGORY_ALIASES = {"full": "full", "3-lift": "full", "pl": "full", "bench": "bench", "bn": "bench"}


@app.command()
def score(
    total: Annotated[str, typer.Argument(help="Meet total (or bench for bench-only)")],
    bodyweight: Annotated[str, typer.Argument(help="Bodyweight")],
    gender: Annotated[
        str,
        typer.Option("--gender", "-g", help="male or female"),
    ] = "male",
    equipment: Annotated[
        str,
        typer.Option("--equipment", "-e", help="raw or equipped (IPF / IPF GL only)"),
    ] = "raw",
    category: Annotated[
        str,
        typer.Option("--category", "-c", help="full (3-lift) or bench (IPF / IPF GL only)"),
    ] = "full",
    unit: UnitOption = None,
    json_out: JsonOption = False,
    settings_path: SettingsPathOption = None,
) -> None:
    """
    Compute DOTS, Wilks, Wilks2, IPF and IPF GL points.

    Bodyweights outside a formula's range are clamped to the range.
    IPF points are 0 at or below 40 kg, IPF GL points at or below 35 kg.
    """
    settings = get_settings(settings_path)
    try:
        score_unit = resolve_unit(unit, settings.score_weight_unit)
        gender_value = validate_choice(gender, ("male", "female"), "gender")
        equipment_value = _EQUIPMENT_ALIASES[
            validate_choice(equipment, tuple(_EQUIPMENT_ALIASES), "equipment")
        ]
        category_value = _CATEGORY_ALIASES[
            validate_choice(category, tuple(_CATEGORY_ALIASES), "category")
        ]
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    inp = ScoreInput(
        total=total,
        bodyweight=bodyweight,
        gender=gender_value,  # type: ignore[arg-type]
        equipment=equipment_value,  # type: ignore[arg-type]
        category=category_value,  # type: ignore[arg-type]
        unit=score_unit,  # type: ignore[arg-type]
    )
    scores = compute_scores(inp)

    if json_out:
        print(json.dumps({
            "unit": score_unit,
            "gender": gender_value,
            "equipment": equipment_value,
            "category": category_value,
            "scores": scores,
        }, indent=2))
        return

    views.print_scores(scores)
