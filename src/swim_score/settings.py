"""Application settings and athlete profile configuration."""

import logging
from datetime import date
from pathlib import Path

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models import Activity, AthleteContext, ThresholdRange

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings for SwimScore.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. Values passed explicitly (e.g. from a YAML config file)
    2. Environment variables (e.g., SWIM_SCORE_ATHLETE_WEIGHT_KG)
    3. .env file (if found)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="SWIM_SCORE_", env_file=".env", extra="ignore"
    )

    # --- Athlete Profile ---
    athlete_weight_kg: float = 70.0  # Used when the activity carries no weight

    # Critical swim speed (m/s) per date range, like the host's pace zone ranges
    threshold_ranges: list[ThresholdRange] = []

    # --- Display ---
    imperial: bool = False  # Report pace per 100 yd instead of per 100 m

    # --- Stream Files ---
    streams_dir: Path = Path("Streams")  # Holds stream_<id>.csv files for batches
    stream_separator: str = ","  # Separator of stream and activities CSV files

    @field_validator("athlete_weight_kg")
    @classmethod
    def check_weight(cls, v: float) -> float:
        """Validate athlete weight is physically meaningful."""
        if v < 0:
            raise ValueError("Athlete weight must not be negative")
        return v

    def threshold_speed_for(self, day: date | None) -> float:
        """
        Find the configured critical swim speed for a given day.

        When several ranges contain the day, the one starting last wins.

        Args:
            day: Activity date, or None when unknown

        Returns:
            Threshold speed in m/s, 0.0 if none is configured for that day
        """
        if day is None:
            return 0.0

        matching = [r for r in self.threshold_ranges if r.contains(day)]
        if not matching:
            return 0.0
        return max(matching, key=lambda r: r.start_date).threshold_speed

    def athlete_context(self, activity: Activity) -> AthleteContext:
        """
        Resolve the athlete data that applies to an activity.

        The activity's own threshold override takes precedence over the
        configured ranges; the activity's recorded weight takes precedence over
        the profile weight.
        """
        weight = (
            activity.weight_kg
            if activity.weight_kg is not None
            else self.athlete_weight_kg
        )

        threshold = activity.threshold_speed_override or 0.0
        if not threshold:
            threshold = self.threshold_speed_for(activity.start_date)
        if not threshold:
            logger.debug("No threshold speed set for activity on %s", activity.start_date)

        return AthleteContext(weight_kg=weight, threshold_speed=threshold)


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    if config_file:
        try:
            with open(config_file, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Could not read config file {config_file}: {e}"
            ) from e

        if not isinstance(yaml_settings, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a mapping"
            )

        # Relative stream directories are relative to the config file
        if (
            "streams_dir" in yaml_settings
            and not Path(yaml_settings["streams_dir"]).is_absolute()
        ):
            yaml_settings["streams_dir"] = str(
                config_file.parent / yaml_settings["streams_dir"]
            )

        # Create a Settings object from YAML, then merge with env vars/defaults
        try:
            return Settings(**yaml_settings)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings in {config_file}: {e}") from e

    return Settings()
