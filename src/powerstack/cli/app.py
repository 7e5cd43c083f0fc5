"""Shared Typer app object, shared option types, and settings utility."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..io.parsers import validate_unit
from ..io.settings import Settings, load_settings

# Shared --unit option type used by the weight-entry commands
UnitOption = Annotated[
    Optional[str],
    typer.Option("--unit", "-u", help="Entry unit: kg or lb (default from settings)"),
]

JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

SettingsPathOption = Annotated[
    Optional[Path],
    typer.Option("--settings", "-s", help="Path to settings YAML file"),
]

app = typer.Typer(
    name="powerstack",
    help="Powerlifting calculators: plate loading, scores, 1RM, attempts and progress.",
    no_args_is_help=False,
    invoke_without_command=True,
)


def get_settings(settings_path: Path | None = None) -> Settings:
    """Get settings from path or the default location."""
    return load_settings(settings_path)


def resolve_unit(unit: str | None, default: str) -> str:
    """Return the --unit value normalized, or the settings default when omitted.

    Raises ValidationError for an unknown unit.
    """
    if unit is None:
        return default
    return validate_unit(unit)
