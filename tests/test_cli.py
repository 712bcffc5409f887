"""Tests for the track-geo command line interface."""

from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from track_geo.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCoordinateCommands:
    def test_distance(self, runner):
        result = runner.invoke(cli, ["distance", "0", "0", "0", "1"])
        assert result.exit_code == 0
        assert "111194.9 m" in result.output

    def test_bearing(self, runner):
        result = runner.invoke(cli, ["bearing", "0", "0", "0", "1"])
        assert result.exit_code == 0
        assert "90.00" in result.output

    def test_negative_coordinates(self, runner):
        result = runner.invoke(cli, ["bearing", "0", "0", "0", "-1"])
        assert result.exit_code == 0
        assert "270.00" in result.output

    def test_negative_coordinates_after_separator(self, runner):
        result = runner.invoke(cli, ["bearing", "--", "0", "0", "0", "-1"])
        assert result.exit_code == 0
        assert "270.00" in result.output

    def test_leg_shows_both_bearings(self, runner):
        result = runner.invoke(cli, ["leg", "0", "0", "1", "0"])
        assert result.exit_code == 0
        assert "0.00" in result.output
        assert "180.00" in result.output

    def test_non_numeric_rejected(self, runner):
        result = runner.invoke(cli, ["distance", "north", "0", "0", "1"])
        assert result.exit_code == 2

    def test_out_of_range_warns_but_computes(self, runner, caplog):
        caplog.set_level(logging.WARNING, logger="track_geo.cli")
        result = runner.invoke(cli, ["distance", "95", "0", "0", "0"])
        assert result.exit_code == 0
        assert " m (" in result.output
        assert any("latitude 95.0 out of range" in r.getMessage() for r in caplog.records)


class TestSmoothCommand:
    def test_turn_weight(self, runner):
        result = runner.invoke(
            cli, ["smooth", "10", "20", "--direction-change", "40", "--accuracy", "10"]
        )
        assert result.exit_code == 0
        assert "0.2" in result.output
        assert "12.00" in result.output

    def test_defaults_are_steady(self, runner):
        result = runner.invoke(cli, ["smooth", "10", "20"])
        assert result.exit_code == 0
        assert "15.00" in result.output

    def test_negative_current_speed(self, runner):
        result = runner.invoke(cli, ["smooth", "10", "-1"])
        assert result.exit_code == 0
        assert "standstill" in result.output
        assert "0.00" in result.output

    def test_negative_direction_change(self, runner):
        result = runner.invoke(cli, ["smooth", "10", "20", "--direction-change", "-40"])
        assert result.exit_code == 0
        assert "15.00" in result.output

    def test_standstill(self, runner):
        result = runner.invoke(cli, ["smooth", "10", "0.3"])
        assert result.exit_code == 0
        assert "standstill" in result.output
        assert "0.00" in result.output


class TestLogLevel:
    def test_critical_accepted(self, runner):
        result = runner.invoke(cli, ["--log-level", "critical", "distance", "0", "0", "0", "1"])
        assert result.exit_code == 0

    def test_unknown_level_rejected(self, runner):
        result = runner.invoke(cli, ["--log-level", "warn", "distance", "0", "0", "0", "1"])
        assert result.exit_code == 2

    def test_help_names_environment_variable(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "TRACK_GEO_LOG_LEVEL" in result.output
