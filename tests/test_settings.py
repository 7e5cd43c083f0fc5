"""Tests for the YAML settings loader and the CLI value parsers."""

import pytest

from powerstack.io.parsers import (
    ValidationError,
    parse_progress_pair,
    parse_progress_pairs,
    validate_choice,
    validate_unit,
)
from powerstack.io.settings import (
    Settings,
    _deep_merge,
    get_user_settings_path,
    load_settings,
    settings_from_dict,
)


def _write(tmp_path, text: str):
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestSettingsDefaults:
    def test_defaults(self):
        s = Settings()
        assert s.weight_unit == "lb"
        assert s.score_weight_unit == "kg"
        assert s.has_collars is False
        assert s.pound_plates is False
        assert s.progress_mode == "percentage"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.yaml") == Settings()

    def test_empty_file_gives_defaults(self, tmp_path):
        assert load_settings(_write(tmp_path, "")) == Settings()

    def test_user_path_under_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_user_settings_path() == tmp_path / ".powerstack" / "settings.yaml"


class TestSettingsFile:
    def test_values_override_defaults(self, tmp_path):
        path = _write(tmp_path, "weight_unit: kg\nhas_collars: true\nprogress_mode: total\n")
        s = load_settings(path)
        assert s.weight_unit == "kg"
        assert s.has_collars is True
        assert s.progress_mode == "total"
        assert s.score_weight_unit == "kg"  # untouched default

    def test_unknown_keys_ignored(self, tmp_path):
        s = load_settings(_write(tmp_path, "weight_unit: kg\ntheme: dark\n"))
        assert s.weight_unit == "kg"

    def test_invalid_value_warns_and_uses_defaults(self, tmp_path):
        path = _write(tmp_path, "weight_unit: stone\n")
        with pytest.warns(UserWarning, match="invalid settings"):
            s = load_settings(path)
        assert s == Settings()

    def test_unit_spellings_normalized(self, tmp_path):
        path = _write(tmp_path, "weight_unit: lbs\nscore_weight_unit: KGS\nhas_collars: true\n")
        s = load_settings(path)
        assert s.weight_unit == "lb"
        assert s.score_weight_unit == "kg"
        assert s.has_collars is True

    def test_pound_spelling_keeps_other_settings(self, tmp_path):
        path = _write(tmp_path, "score_weight_unit: lbs\nprogress_mode: hide\n")
        s = load_settings(path)
        assert s.score_weight_unit == "lb"
        assert s.progress_mode == "hide"

    def test_non_bool_flag_warns(self, tmp_path):
        path = _write(tmp_path, "has_collars: sometimes\n")
        with pytest.warns(UserWarning):
            assert load_settings(path) == Settings()

    def test_broken_yaml_warns(self, tmp_path):
        path = _write(tmp_path, "weight_unit: [kg\n")
        with pytest.warns(UserWarning, match="ignoring settings file"):
            assert load_settings(path) == Settings()

    def test_non_mapping_warns(self, tmp_path):
        path = _write(tmp_path, "- kg\n- lb\n")
        with pytest.warns(UserWarning, match="expected a mapping"):
            assert load_settings(path) == Settings()

    def test_from_dict_raises_on_bad_mode(self):
        with pytest.raises(ValueError):
            settings_from_dict({"progress_mode": "sometimes"})

    def test_deep_merge_is_non_destructive(self):
        base = {"a": 1, "nested": {"x": 1, "y": 2}}
        merged = _deep_merge(base, {"nested": {"y": 3}, "b": 2})
        assert merged == {"a": 1, "b": 2, "nested": {"x": 1, "y": 3}}
        assert base == {"a": 1, "nested": {"x": 1, "y": 2}}


class TestParsers:
    @pytest.mark.parametrize("raw,expected", [
        ("kg", "kg"), ("KGS", "kg"), (" lb ", "lb"), ("lbs", "lb"),
    ])
    def test_unit_aliases(self, raw, expected):
        assert validate_unit(raw) == expected

    def test_bad_unit(self):
        with pytest.raises(ValidationError):
            validate_unit("stone")

    def test_choice_case_insensitive(self):
        assert validate_choice("Female", ("male", "female"), "gender") == "female"

    def test_bad_choice(self):
        with pytest.raises(ValidationError, match="gender"):
            validate_choice("x", ("male", "female"), "gender")

    @pytest.mark.parametrize("text", ["180:215", "180 : 215", "180-215", "180>215", "180→215"])
    def test_pair_separators(self, text):
        assert parse_progress_pair(text, "squat") == (180.0, 215.0)

    def test_pair_decimals(self):
        assert parse_progress_pair("102.5:110", "bench") == (102.5, 110.0)

    @pytest.mark.parametrize("text", ["", "180", "abc:def", "-5:10", "1:2:3"])
    def test_bad_pair(self, text):
        with pytest.raises(ValidationError):
            parse_progress_pair(text, "squat")

    def test_pair_too_large(self):
        with pytest.raises(ValidationError, match="too large"):
            parse_progress_pair("1:" + "9" * 400, "squat")

    def test_pairs_to_records(self):
        first, best = parse_progress_pairs({"squat": "180:200", "bench": None, "dots": "350:400"})
        assert first.squat == 180 and best.squat == 200
        assert first.bench == 0 and best.bench == 0
        assert first.dots == 350 and best.dots == 400

    def test_pairs_need_one_value(self):
        with pytest.raises(ValidationError):
            parse_progress_pairs({"squat": None, "total": None})
