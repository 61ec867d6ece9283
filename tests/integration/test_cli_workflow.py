"""Integration tests for end-to-end CLI workflows."""

import json
import os
import tempfile

import pytest
from click.testing import CliRunner

from moistair.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tmp_dir():
    with tempfile.TemporaryDirectory() as d:
        yield d


class TestStateWorkflow:
    """Test the state → save → info pipeline."""

    def test_state_prints_table(self, runner):
        result = runner.invoke(cli, ["state", "--t", "298.15", "--kind", "rh", "--value", "0.5"])
        assert result.exit_code == 0, result.output
        assert "Humidity Ratio" in result.output
        assert "Wetbulb" in result.output

    def test_state_saves_json(self, runner, tmp_dir):
        out = os.path.join(tmp_dir, "state.json")
        result = runner.invoke(cli, [
            "state", "--t", "298.15", "--kind", "RH", "--value", "0.5",
            "--name", "Office", "-o", out,
        ])
        assert result.exit_code == 0, result.output
        assert os.path.exists(out)

        with open(out) as f:
            data = json.load(f)
        assert data["meta"]["name"] == "Office"
        assert data["dewpoint"] <= data["wetbulb"] <= data["drybulb"]
        assert 0.005 < data["humidity_ratio"] < 0.015

    def test_info_from_saved_state(self, runner, tmp_dir):
        out = os.path.join(tmp_dir, "state.json")
        result = runner.invoke(cli, [
            "state", "--t", "298.15", "--kind", "w", "--value", "0.01",
            "--name", "Lab", "-o", out,
        ])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["info", out])
        assert result.exit_code == 0, result.output
        assert "Lab" in result.output
        assert "humidity_ratio" in result.output

    def test_below_freezing_note(self, runner):
        result = runner.invoke(cli, ["state", "--t", "263.15", "--kind", "rh", "--value", "0.5"])
        assert result.exit_code == 0, result.output
        assert "Note" in result.output

    def test_verbose_flag(self, runner):
        result = runner.invoke(cli, [
            "-v", "state", "--t", "298.15", "--kind", "dpt", "--value", "285",
        ])
        assert result.exit_code == 0, result.output


class TestStateErrors:
    def test_invalid_kind_rejected(self, runner):
        result = runner.invoke(cli, ["state", "--t", "298.15", "--kind", "xyz", "--value", "0.5"])
        assert result.exit_code != 0

    def test_relative_humidity_out_of_range(self, runner):
        result = runner.invoke(cli, ["state", "--t", "298.15", "--kind", "rh", "--value", "1.5"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_supersaturated_reports_error(self, runner):
        result = runner.invoke(cli, ["state", "--t", "298.15", "--kind", "w", "--value", "0.05"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestPsat:
    def test_psat_values(self, runner):
        result = runner.invoke(cli, ["psat", "273.15", "298.15"])
        assert result.exit_code == 0, result.output
        assert "0.611" in result.output

    def test_psat_out_of_range(self, runner):
        result = runner.invoke(cli, ["psat", "500"])
        assert result.exit_code == 1
        assert "Error" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
