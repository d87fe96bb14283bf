"""Tests for the command-line interface."""

import argparse
from pathlib import Path

import pytest

from scroll_selector import cli


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command with temp XDG dirs and no local config.toml."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("SCROLL_SELECTOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SCROLL_SELECTOR_STIFFNESS", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli.config, "_find_project_config", lambda: None)
    return tmp_path


class TestParseArguments:
    """Tests for argument converters."""

    def test_parse_distance(self):
        assert cli.parse_distance("120") == 120.0
        assert cli.parse_distance("none") is None
        assert cli.parse_distance("-") is None

    def test_parse_distance_rejects_negative(self):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_distance("-5")

    def test_parse_distance_rejects_garbage(self):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_distance("far")

    def test_parse_interval(self):
        assert cli.parse_interval("0.2,0.8") == (0.2, 0.8)
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_interval("0.2")

    def test_format_ratio(self):
        assert cli.format_ratio(None) == "none"
        assert cli.format_ratio(0.25) == "0.250000"


class TestRatioCommand:
    """Tests for `scroll-selector ratio`."""

    def test_neutral(self, capsys):
        assert cli.main(["ratio", "--top", "none", "--bottom", "none"]) == 0
        assert capsys.readouterr().out.strip() == "0.500000"

    def test_symmetric_midpoint(self, capsys):
        assert cli.main(["ratio", "--top", "1250", "--bottom", "1250"]) == 0
        assert capsys.readouterr().out.strip() == "0.500000"

    def test_flags_override_config(self, capsys):
        assert cli.main(["ratio", "--mid", "0.3"]) == 0
        assert capsys.readouterr().out.strip() == "0.300000"

    def test_interval(self, capsys):
        assert cli.main(["ratio", "--interval", "10,20"]) == 0
        assert capsys.readouterr().out.strip() == "15.000000"

    def test_undeterminable(self, capsys):
        assert cli.main(["ratio", "--top", "9000"]) == 0
        assert capsys.readouterr().out.strip() == "none"

    def test_invalid_params_fail(self, capsys):
        assert cli.main(["ratio", "--stiffness", "4"]) == 1
        assert "stiffness" in capsys.readouterr().out

    def test_writes_log_file(self, isolated_env: Path):
        cli.main(["ratio"])
        assert (isolated_env / "data" / "scroll-selector" / "scroll-selector.log").exists()


class TestTableCommands:
    """Tests for the sweep and curve tables."""

    def test_sweep(self, capsys):
        args = ["sweep", "--items", "30", "--item-height", "100", "--viewport", "1000", "--step", "1000"]
        assert cli.main(args) == 0
        out = capsys.readouterr().out
        assert "Selection ratio sweep" in out
        assert "2000" in out

    def test_sweep_invalid_layout(self, capsys):
        assert cli.main(["sweep", "--viewport", "0"]) == 1

    def test_curve(self, capsys):
        assert cli.main(["curve", "--samples", "3"]) == 0
        out = capsys.readouterr().out
        assert "0.250000" in out
        assert "0.500000" in out


class TestInitConfig:
    """Tests for `scroll-selector init-config`."""

    def test_writes_default_config(self, isolated_env: Path):
        assert cli.main(["init-config"]) == 0
        assert (isolated_env / "config" / "scroll-selector" / "config.toml").exists()
