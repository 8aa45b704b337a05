"""Tests for config loading and command-line overrides."""

from __future__ import annotations

import pathlib

import pytest

from main import apply_overrides, load_config, parse_args


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("drop_interval: 600\nneon_glow: false\n")
    assert load_config(path) == {"drop_interval": 600, "neon_glow": False}


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_shipped_config_loads():
    config = load_config(pathlib.Path(__file__).resolve().parent.parent / "config" / "settings.yaml")
    assert config["board_width"] == 12
    assert config["board_height"] == 20
    assert config["game_over_delay"] == 800


def test_flags_override_config():
    args = parse_args(["--performance", "--no-glow", "--drop-interval", "300", "--log-level", "DEBUG"])
    config = apply_overrides({"performance_mode": False, "neon_glow": True, "drop_interval": 1000}, args)
    assert config == {
        "performance_mode": True,
        "neon_glow": False,
        "drop_interval": 300,
        "log_level": "DEBUG",
    }


def test_no_flags_leave_config_alone():
    original = {"drop_interval": 1000}
    assert apply_overrides(original, parse_args([])) == original
