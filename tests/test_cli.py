"""
Tests for the command line interface.
"""

from typer.testing import CliRunner

from tablefinder import __version__
from tablefinder.cli.app import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_restaurants_uses_sample_data(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("tablefinder.config.get_default_config_path", lambda: tmp_path / "config.yaml")

    result = runner.invoke(app, ["list-restaurants"])

    assert result.exit_code == 0
    assert "Restaurants" in result.output
    assert "09:00:00" in result.output


def test_check_prints_availability(tmp_path, monkeypatch):
    monkeypatch.setattr("tablefinder.config.get_default_config_path", lambda: tmp_path / "config.yaml")

    result = runner.invoke(
        app,
        ["check", "vivaan-fine-indian-cuisine-ottawa", "--day", "2023-02-03", "--time", "15:00:00", "-n", "8"],
    )

    assert result.exit_code == 0
    assert "15:30:00" in result.output


def test_check_unknown_restaurant_fails(tmp_path, monkeypatch):
    monkeypatch.setattr("tablefinder.config.get_default_config_path", lambda: tmp_path / "config.yaml")

    result = runner.invoke(
        app,
        ["check", "nowhere", "--day", "2023-02-03", "--time", "15:00:00", "-n", "2"],
    )

    assert result.exit_code == 1
    assert "Invalid data provided" in result.output


def test_missing_config_file_fails(tmp_path):
    result = runner.invoke(app, ["list-restaurants", "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Config file not found" in result.output
