"""
Minimal smoke tests for the powerstack CLI.

Tests basic functionality:
- App runs without errors
- Each calculator command produces output (text and JSON)
- Bad options exit with code 1
- The settings file is honoured
"""

import json

import pytest
from typer.testing import CliRunner

from powerstack.cli.main import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at an empty directory so no user settings leak in."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def settings_file(tmp_path):
    """Write a settings YAML file and return its path."""
    def _write(text: str):
        path = tmp_path / "settings.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


def _json(result) -> dict:
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        """Test that app runs and shows help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "powerstack" in result.output or "powerlifting" in result.output.lower()

    def test_plates_text(self):
        result = runner.invoke(app, ["plates", "100", "--unit", "kg"])
        assert result.exit_code == 0
        assert "1 red, 1 yellow" in result.output
        assert "100 kg / 220.5 lbs" in result.output

    def test_plates_json(self):
        data = _json(runner.invoke(app, ["plates", "100", "--unit", "kg", "--json"]))
        assert data["plate_set"] == "metric"
        assert data["bar_weight"] == 20.0
        assert data["distribution"] == {"red": 1, "yellow": 1}
        assert data["total_kg"] == 100.0
        assert data["display"] == "100 kg / 220.5 lbs"

    def test_plates_pound_plates(self):
        data = _json(runner.invoke(app, ["plates", "315", "-u", "lb", "--pound-plates", "--json"]))
        assert data["plate_set"] == "pound"
        assert data["distribution"] == {"45": 3}
        assert data["description"] == "45x3"

    def test_plates_collars(self):
        data = _json(runner.invoke(app, ["plates", "100", "-u", "kg", "--collars", "--json"]))
        assert data["bar_weight"] == 25.0
        assert data["distribution"] == {"red": 1, "green": 1, "black": 1}

    def test_plates_collars_ignored_with_pound_plates(self):
        result = runner.invoke(app, ["plates", "225", "-u", "lb", "--pound-plates", "--collars"])
        assert result.exit_code == 0
        assert "Collars are not used" in result.output

    def test_plates_bar_only(self):
        result = runner.invoke(app, ["plates", "15", "--unit", "kg"])
        assert result.exit_code == 0
        assert "Empty bar" in result.output

    def test_plates_bad_unit(self):
        result = runner.invoke(app, ["plates", "100", "--unit", "stone"])
        assert result.exit_code == 1
        assert "Invalid unit" in result.output

    def test_score_json(self):
        data = _json(runner.invoke(app, ["score", "500", "100", "--unit", "kg", "--json"]))
        assert data["scores"]["dots"] == "307.76"
        assert set(data["scores"]) == {"dots", "wilks", "wilks2", "ipf", "ipf_gl"}

    def test_score_text(self):
        result = runner.invoke(app, ["score", "500", "100"])
        assert result.exit_code == 0
        assert "307.76" in result.output

    def test_score_ipf_floor(self):
        data = _json(runner.invoke(app, ["score", "300", "38", "--json"]))
        assert data["scores"]["ipf"] == "0.00"

    def test_score_unavailable(self):
        data = _json(runner.invoke(app, ["score", "500", "8", "--json"]))
        assert all(v is None for v in data["scores"].values())

    def test_score_unavailable_text_warns(self):
        result = runner.invoke(app, ["score", "500", "abc"])
        assert result.exit_code == 0
        assert "Enter a positive total" in result.output

    def test_score_aliases(self):
        data = _json(runner.invoke(app, [
            "score", "250", "90", "-e", "classic", "-c", "bn", "-g", "female", "--json",
        ]))
        assert data["equipment"] == "raw"
        assert data["category"] == "bench"
        assert data["gender"] == "female"

    def test_score_bad_gender(self):
        result = runner.invoke(app, ["score", "500", "100", "--gender", "x"])
        assert result.exit_code == 1
        assert "Invalid gender" in result.output

    def test_onerm_json(self):
        data = _json(runner.invoke(app, ["1rm", "100", "5", "--json"]))
        assert data["display"] == "112.5"
        assert data["recommended"] == "brzycki"

    def test_onerm_text(self):
        result = runner.invoke(app, ["1rm", "100", "5"])
        assert result.exit_code == 0
        assert "112.5" in result.output

    def test_onerm_out_of_range(self):
        result = runner.invoke(app, ["1rm", "100", "15"])
        assert result.exit_code == 1

    def test_attempts_json(self):
        data = _json(runner.invoke(app, ["attempts", "500", "--json"]))
        assert list(data) == ["1st Attempt", "2nd Attempt", "3rd Attempt"]
        assert data["1st Attempt"][0]["display"] == "205.0 / 451.9"

    def test_attempts_kg(self):
        data = _json(runner.invoke(app, ["attempts", "200", "--unit", "kg", "--json"]))
        assert data["3rd Attempt"][1]["kg"] == 200.0

    def test_attempts_too_light(self):
        result = runner.invoke(app, ["attempts", "40"])
        assert result.exit_code == 1

    def test_progress_json(self):
        data = _json(runner.invoke(app, [
            "progress", "--total", "500:600", "--squat", "180:216", "--json",
        ]))
        assert data["mode"] == "percentage"
        assert data["progress"]["total"] == 20
        assert data["progress"]["squat"] == 20
        assert data["progress"]["bench"] == 0

    def test_progress_total_mode(self):
        data = _json(runner.invoke(app, [
            "progress", "--total", "500:600", "--mode", "total", "--unit", "kg", "--json",
        ]))
        assert data["progress"]["total"] == 100

    def test_progress_hidden(self):
        data = _json(runner.invoke(app, ["progress", "--total", "500:600", "-m", "hide", "--json"]))
        assert data["progress"] is None

    def test_progress_text(self):
        result = runner.invoke(app, ["progress", "--total", "500:600"])
        assert result.exit_code == 0
        assert "20%" in result.output

    def test_progress_needs_values(self):
        result = runner.invoke(app, ["progress"])
        assert result.exit_code == 1

    def test_progress_number_too_large(self):
        result = runner.invoke(app, ["progress", "--squat", "1:" + "9" * 400])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_progress_bad_pair(self):
        result = runner.invoke(app, ["progress", "--total", "lots"])
        assert result.exit_code == 1
        assert "first:best" in result.output

    def test_settings_defaults(self):
        result = runner.invoke(app, ["settings"])
        assert result.exit_code == 0
        assert "built-in defaults" in result.output
        assert "weight_unit" in result.output

    def test_settings_file_is_used(self, settings_file):
        path = settings_file("weight_unit: kg\npound_plates: true\n")
        data = _json(runner.invoke(app, ["plates", "100", "--json", "--settings", str(path)]))
        assert data["plate_set"] == "pound"
        assert data["distribution"] == {"45": 1, "35": 1, "5": 1, "2.5": 1}

    def test_options_override_settings(self, settings_file):
        path = settings_file("weight_unit: lb\npound_plates: true\n")
        data = _json(runner.invoke(app, [
            "plates", "100", "-u", "kg", "--metric-plates", "--json", "-s", str(path),
        ]))
        assert data["plate_set"] == "metric"
        assert data["distribution"] == {"red": 1, "yellow": 1}

    def test_user_settings_in_home(self, isolated_home):
        cfg_dir = isolated_home / ".powerstack"
        cfg_dir.mkdir()
        (cfg_dir / "settings.yaml").write_text("weight_unit: kg\n", encoding="utf-8")
        data = _json(runner.invoke(app, ["plates", "100", "--json"]))
        assert data["distribution"] == {"red": 1, "yellow": 1}

        result = runner.invoke(app, ["settings"])
        assert "built-in defaults" not in result.output


class TestInteractiveMenu:
    """Running without a command opens the menu."""

    def test_quit(self):
        result = runner.invoke(app, [], input="0\n")
        assert result.exit_code == 0
        assert "Plate calculator" in result.output

    def test_unknown_choice(self):
        result = runner.invoke(app, [], input="9\n")
        assert result.exit_code == 1

    def test_plates_from_menu(self):
        result = runner.invoke(app, [], input="1\n225\n")
        assert result.exit_code == 0
        assert "lbs" in result.output

    def test_onerm_from_menu(self):
        result = runner.invoke(app, [], input="3\n100\n5\n")
        assert result.exit_code == 0
        assert "112.5" in result.output

    def test_score_from_menu(self):
        result = runner.invoke(app, [], input="2\n500\n100\n")
        assert result.exit_code == 0
        assert "307.76" in result.output

    def test_progress_from_menu(self):
        result = runner.invoke(app, [], input="5\n500:600\n")
        assert result.exit_code == 0
        assert "20%" in result.output

    def test_progress_menu_needs_values(self):
        result = runner.invoke(app, [], input="5\n\n")
        assert result.exit_code == 1

    def test_not_a_number(self):
        result = runner.invoke(app, [], input="1\nheavy\n")
        assert result.exit_code == 1
