"""Tests for the colour configuration loader and the theme built from it."""

import pytest
from rich.style import Style

import paths
from config_manager import ColorConfig, ConfigError, load_config, normalize_color, parse_colors
from theme import Theme

VALID = """\
[colors]
title = "#FAFAFA"
normal_text = "#DDDDDD"
cursor = "#7D56F4"
selected = "#04B575"
border = "#874BFD"
instruction = "#626262"
active_column_bg = "#1E1E2E"
"""


def write(tmp_path, text, name="config.toml"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


class TestLoadConfig:

    def test_valid_file(self, tmp_path):
        colors = load_config(write(tmp_path, VALID))
        assert colors == ColorConfig(
            title="#fafafa",
            normal_text="#dddddd",
            cursor="#7d56f4",
            selected="#04b575",
            border="#874bfd",
            instruction="#626262",
            active_column_bg="#1e1e2e",
        )

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError, match="No configuration file found"):
            load_config(str(tmp_path / "absent.toml"))

    def test_explicit_path_does_not_fall_back(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        write(tmp_path, VALID)
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "other.toml"))

    def test_found_in_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        write(tmp_path, VALID)
        assert load_config().cursor == "#7d56f4"

    def test_falls_back_to_user_config(self, tmp_path, monkeypatch):
        workdir = tmp_path / "work"
        workdir.mkdir()
        monkeypatch.chdir(workdir)
        user_file = write(tmp_path, VALID, "user.toml")
        monkeypatch.setattr(paths, "USER_CONFIG_FILE_PATH", user_file)
        assert load_config().border == "#874bfd"

    def test_invalid_toml(self, tmp_path):
        with pytest.raises(ConfigError, match="invalid TOML"):
            load_config(write(tmp_path, "[colors\ntitle = "))

    def test_missing_key(self, tmp_path):
        text = VALID.replace('border = "#874BFD"\n', "")
        with pytest.raises(ConfigError, match="colors.border"):
            load_config(write(tmp_path, text))

    def test_invalid_colour(self, tmp_path):
        text = VALID.replace('"#7D56F4"', '"not a colour"')
        with pytest.raises(ConfigError, match="colors.cursor"):
            load_config(write(tmp_path, text))

    def test_missing_colors_table(self, tmp_path):
        with pytest.raises(ConfigError, match=r"\[colors\]"):
            load_config(write(tmp_path, "[colours]\ntitle = 'red'\n"))


class TestNormalizeColor:

    def test_hex_is_lowercased(self):
        assert normalize_color("#ABCDEF", "x") == "#abcdef"

    def test_names_and_rgb(self):
        assert normalize_color("rgb(255,0,0)", "x") == "#ff0000"
        assert normalize_color("red", "x").startswith("#")

    def test_ansi_numbers(self):
        assert normalize_color("205", "x") == normalize_color("color(205)", "x")
        assert normalize_color(205, "x") == normalize_color("205", "x")

    def test_out_of_range_ansi_number(self):
        with pytest.raises(ConfigError):
            normalize_color("300", "x")

    @pytest.mark.parametrize("value", [None, "", "   ", True, 1.5, ["#fff"]])
    def test_rejects_non_colours(self, value):
        with pytest.raises(ConfigError):
            normalize_color(value, "x")


def test_parse_colors_reports_source():
    with pytest.raises(ConfigError, match="^inline:"):
        parse_colors({}, "inline")


def test_theme_from_config(color_config):
    theme = Theme.from_config(color_config)
    assert theme.title == Style(bold=True, color="#fafafa")
    assert theme.cursor == Style(bold=True, color="#1e1e2e", bgcolor="#7d56f4")
    assert theme.selected.bgcolor == Style(bgcolor="#04b575").bgcolor
    assert theme.title_rule == Style(color="#874bfd")
    assert theme.border_color == "#874bfd"
    assert theme.active_column_bg == "#1e1e2e"
