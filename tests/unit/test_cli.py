"""Unit tests for the command-line interface."""

import json
from pathlib import Path

import pandas as pd
import pytest
from click.testing import CliRunner

from swim_score.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def hour_stream(tmp_path: Path) -> Path:
    """One hour at 1.25 m/s."""
    path = tmp_path / "stream_10.csv"
    pd.DataFrame({"time": range(3600), "velocity_smooth": [1.25] * 3600}).to_csv(
        path, index=False
    )
    return path


class TestComputeCommand:
    """Test the compute command."""

    def test_json_output(self, runner: CliRunner, hour_stream: Path):
        result = runner.invoke(
            main,
            [
                "compute",
                str(hour_stream),
                "--weight",
                "70",
                "--threshold-speed",
                "1.25",
                "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        values = json.loads(result.stdout)
        assert values["swimscore"]["value"] == pytest.approx(100.0)
        assert values["swimscore_xpower"]["count"] == 3600.0

    def test_table_output(self, runner: CliRunner, hour_stream: Path):
        result = runner.invoke(
            main, ["compute", str(hour_stream), "--threshold-speed", "1.25"]
        )

        assert result.exit_code == 0, result.output
        assert "SwimScore" in result.output
        assert "min/100m" in result.output

    def test_imperial_output(self, runner: CliRunner, hour_stream: Path):
        result = runner.invoke(main, ["compute", str(hour_stream), "--imperial"])

        assert result.exit_code == 0, result.output
        assert "min/100yd" in result.output

    def test_bad_stream_aborts(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "bad.csv"
        path.write_text("time,heartrate\n0,120\n")

        result = runner.invoke(main, ["compute", str(path)])

        assert result.exit_code != 0

    def test_ride_without_speed(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "ride.csv"
        path.write_text("time,heartrate,watts\n0,120,180\n1,121,185\n")

        result = runner.invoke(
            main, ["compute", str(path), "--discipline", "bike", "--json"]
        )

        assert result.exit_code == 0, result.output
        values = json.loads(result.stdout)
        assert values["swimscore"]["value"] == 0.0
        assert values["triscore"]["value"] == 0.0


class TestProcessCommand:
    """Test the batch process command."""

    def test_process_to_csv(self, runner: CliRunner, tmp_path: Path, hour_stream: Path):
        activities = tmp_path / "activities.csv"
        pd.DataFrame(
            {
                "id": [10],
                "type": ["Swim"],
                "start_date": ["2024-03-01"],
                "threshold_speed": [1.25],
            }
        ).to_csv(activities, index=False)
        output = tmp_path / "out.csv"

        result = runner.invoke(
            main,
            [
                "process",
                str(activities),
                "--streams-dir",
                str(tmp_path),
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        df = pd.read_csv(output)
        assert df.loc[0, "swimscore"] == pytest.approx(100.0)


class TestMetricsCommand:
    """Test listing registered metrics."""

    def test_lists_metrics(self, runner: CliRunner):
        result = runner.invoke(main, ["metrics"])

        assert result.exit_code == 0
        assert "swimscore_xpower" in result.output
        assert "triscore" in result.output
