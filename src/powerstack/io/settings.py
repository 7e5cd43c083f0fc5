"""
YAML → typed settings loader.

Built-in defaults live in the Settings dataclass.  An optional user file at
~/.powerstack/settings.yaml is deep-merged over them:

    weight_unit: kg            # kg | lb, default lb  (plate calculator entry unit)
    score_weight_unit: kg      # kg | lb, default kg  (score calculator entry unit)
    has_collars: false         # count 2 × 2.5 kg collars on the metric bar
    pound_plates: false        # load pound plates instead of metric plates
    progress_mode: percentage  # percentage | total | hide

Units may also be spelled "kgs" or "lbs".  Unknown keys are ignored.  If the
user file cannot be parsed, or holds an invalid value, a warning is issued
and the defaults are used.

Usage:
    from powerstack.io.settings import load_settings
    settings = load_settings()
    settings.weight_unit
"""

from __future__ import annotations

import os
import warnings
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from ..core.config import UNIT_ALIASES

_UNITS = ("kg", "lb")
_UNIT_KEYS = ("weight_unit", "score_weight_unit")
_PROGRESS_MODES = ("percentage", "total", "hide")


@dataclass(frozen=True)
class Settings:
    """Effective calculator settings."""

    weight_unit: str = "lb"
    score_weight_unit: str = "kg"
    has_collars: bool = False
    pound_plates: bool = False
    progress_mode: str = "percentage"

    def __post_init__(self) -> None:
        """Validate settings values."""
        if self.weight_unit not in _UNITS:
            raise ValueError(f"Invalid weight_unit: {self.weight_unit!r}. Must be 'kg' or 'lb'.")
        if self.score_weight_unit not in _UNITS:
            raise ValueError(
                f"Invalid score_weight_unit: {self.score_weight_unit!r}. Must be 'kg' or 'lb'."
            )
        if self.progress_mode not in _PROGRESS_MODES:
            raise ValueError(
                f"Invalid progress_mode: {self.progress_mode!r}. "
                "Must be 'percentage', 'total', or 'hide'."
            )
        if not isinstance(self.has_collars, bool):
            raise ValueError("has_collars must be true or false")
        if not isinstance(self.pound_plates, bool):
            raise ValueError("pound_plates must be true or false")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML file; warn and return {} on any error."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"powerstack: ignoring settings file {path} ({exc})", stacklevel=2)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        warnings.warn(
            f"powerstack: ignoring settings file {path} (expected a mapping)",
            stacklevel=2,
        )
        return {}
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_user_settings_path() -> Path:
    """Return ~/.powerstack/settings.yaml (whether or not it exists)."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    return home / ".powerstack" / "settings.yaml"


def settings_from_dict(d: dict[str, Any]) -> Settings:
    """
    Build Settings from a raw dict, ignoring unknown keys.

    Unit spellings such as "lbs" or "kgs" are normalized first.

    Raises ValueError on invalid values.
    """
    known = {f.name for f in fields(Settings)}
    values = {k: v for k, v in d.items() if k in known}
    for key in _UNIT_KEYS:
        if isinstance(values.get(key), str):
            values[key] = UNIT_ALIASES.get(values[key].strip().lower(), values[key])
    return Settings(**values)


def load_settings(path: Path | None = None) -> Settings:
    """
    Load settings, merging the user file over the defaults.

    Args:
        path: Settings file to read (default: ~/.powerstack/settings.yaml)

    Returns:
        Effective Settings; defaults when the file is absent or invalid
    """
    defaults = Settings()
    if path is None:
        path = get_user_settings_path()
    if not path.exists():
        return defaults

    user_cfg = _load_yaml_file(path)
    if not user_cfg:
        return defaults

    merged = _deep_merge(defaults.to_dict(), user_cfg)
    try:
        return settings_from_dict(merged)
    except (TypeError, ValueError) as exc:
        warnings.warn(
            f"powerstack: invalid settings in {path} ({exc}); using defaults.",
            stacklevel=2,
        )
        return defaults
