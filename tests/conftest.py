"""
Shared pytest fixtures for SwimScore tests.

This module provides reusable fixtures for:
- Settings configurations
- Athlete contexts
- Sample streams and activities
- Temporary stream files
"""

from datetime import date
from pathlib import Path

import pandas as pd
import pytest
import yaml

from swim_score.models import Activity, AthleteContext, Discipline, Sample
from swim_score.settings import Settings

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def sample_config_dict() -> dict:
    """Provide a sample configuration dictionary."""
    return {
        "athlete_weight_kg": 70.0,
        "imperial": False,
        "threshold_ranges": [
            {
                "start_date": "2024-01-01",
                "end_date": "2024-06-30",
                "threshold_speed": 1.25,
            },
            {"start_date": "2024-07-01", "threshold_speed": 1.35},
        ],
    }


@pytest.fixture
def sample_config_file(temp_config_file: Path, sample_config_dict: dict) -> Path:
    """Create a temporary config file with sample data."""
    with open(temp_config_file, "w") as f:
        yaml.dump(sample_config_dict, f)
    return temp_config_file


@pytest.fixture
def settings(sample_config_dict: dict) -> Settings:
    """Provide settings for a 70 kg athlete with two threshold ranges."""
    return Settings(**sample_config_dict)


@pytest.fixture
def athlete() -> AthleteContext:
    """Provide a 70 kg athlete with a 1.25 m/s critical swim speed."""
    return AthleteContext(weight_kg=70.0, threshold_speed=1.25)


# ============================================================================
# Data Fixtures - Streams
# ============================================================================


@pytest.fixture
def steady_samples() -> list[Sample]:
    """Ten minutes of steady swimming at 1.2 m/s, one sample per second."""
    return [Sample(time=float(t), speed=1.2) for t in range(600)]


@pytest.fixture
def interval_samples() -> list[Sample]:
    """
    Alternating 30 s hard / 30 s easy swimming for ten minutes.

    Useful for checking that smoothing penalizes variability.
    """
    return [
        Sample(time=float(t), speed=1.5 if (t // 30) % 2 == 0 else 0.9)
        for t in range(600)
    ]


@pytest.fixture
def swim_activity(steady_samples: list[Sample]) -> Activity:
    """Provide a steady swim activity."""
    return Activity(
        discipline=Discipline.SWIM,
        start_date=date(2024, 3, 15),
        samples=steady_samples,
        recording_interval=1.0,
    )


@pytest.fixture
def run_activity() -> Activity:
    """Provide a run with host computed scores and a speed stream."""
    return Activity(
        discipline=Discipline.RUN,
        start_date=date(2024, 3, 16),
        samples=[Sample(time=float(t), speed=3.0) for t in range(60)],
        recording_interval=1.0,
        provided_scores={"govss": 60.0, "skiba_bike_score": 70.0},
    )


@pytest.fixture
def stream_df() -> pd.DataFrame:
    """Provide a Strava-style swim stream."""
    return pd.DataFrame(
        {
            "time": [0, 1, 2, 3, 4, 5],
            "velocity_smooth": [1.1, 1.2, 1.3, 1.2, 1.1, 1.2],
            "distance": [0.0, 1.2, 2.5, 3.7, 4.8, 6.0],
        }
    )


@pytest.fixture
def stream_file(tmp_path: Path, stream_df: pd.DataFrame) -> Path:
    """Write the sample stream to a CSV file."""
    path = tmp_path / "stream_1.csv"
    stream_df.to_csv(path, index=False)
    return path
