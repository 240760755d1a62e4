"""
Stream loading functionality.

This module reads activity streams from CSV files and turns them into the
speed samples consumed by the metric graph.
"""

import logging
from datetime import date
from pathlib import Path

import pandas as pd

from ..constants import CSVConstants
from ..exceptions import DataLoadError, StreamDataError
from ..models import Activity, Discipline, Sample
from ..settings import Settings

logger = logging.getLogger(__name__)


class StreamLoader:
    """
    Loads speed streams and builds activities from them.

    Streams need a `time` column in seconds and one speed column, either
    `velocity_smooth` or `speed` in m/s, or `speed_kph` in km/h.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the stream loader.

        Args:
            settings: Application settings
        """
        self.settings = settings

    def load_stream(self, stream_file: Path) -> pd.DataFrame:
        """
        Load a stream CSV file.

        Args:
            stream_file: Path to the stream file

        Returns:
            DataFrame containing the stream

        Raises:
            DataLoadError: If the file is missing or cannot be parsed
        """
        if not stream_file.exists():
            raise DataLoadError(f"Stream file not found: {stream_file}")

        try:
            logger.debug(f"Loading stream data from {stream_file}")
            df = pd.read_csv(
                stream_file,
                sep=self.settings.stream_separator,
                encoding=CSVConstants.DEFAULT_ENCODING,
            )
        except (OSError, ValueError) as e:
            raise DataLoadError(f"Failed to load stream {stream_file}: {e}") from e

        logger.info(f"Loaded {len(df)} samples from {stream_file}")
        return df

    def speed_series(self, stream_df: pd.DataFrame) -> pd.Series:
        """
        Extract speed in m/s from the first available speed column.

        Missing readings are treated as standing still.

        Raises:
            StreamDataError: If the stream has no speed column
        """
        for column, factor in CSVConstants.SPEED_COLUMNS:
            if column in stream_df.columns:
                speed = pd.to_numeric(stream_df[column], errors="coerce")
                return speed.fillna(0.0) * factor

        columns = ", ".join(c for c, _ in CSVConstants.SPEED_COLUMNS)
        raise StreamDataError(f"Stream has no speed column (expected one of {columns})")

    def has_speed(self, stream_df: pd.DataFrame) -> bool:
        """Return True if the stream has a time column and a speed column."""
        return CSVConstants.TIME_COLUMN in stream_df.columns and any(
            column in stream_df.columns for column, _ in CSVConstants.SPEED_COLUMNS
        )

    def to_samples(self, stream_df: pd.DataFrame) -> list[Sample]:
        """
        Convert a stream DataFrame to ordered speed samples.

        Rows without a valid timestamp are dropped. Samples are kept in file
        order; a warning is logged if time goes backwards.

        Raises:
            StreamDataError: If the time or speed column is missing
        """
        if CSVConstants.TIME_COLUMN not in stream_df.columns:
            raise StreamDataError(
                f"Stream has no '{CSVConstants.TIME_COLUMN}' column"
            )

        time = pd.to_numeric(stream_df[CSVConstants.TIME_COLUMN], errors="coerce")
        speed = self.speed_series(stream_df)

        valid = time.notna()
        if not valid.all():
            logger.warning(f"Dropping {int((~valid).sum())} samples without time")
        time = time[valid]
        speed = speed[valid]

        if not time.is_monotonic_increasing:
            logger.warning("Stream time is not monotonic, xPower gap filling may be off")

        return [
            Sample(time=float(t), speed=float(s))
            for t, s in zip(time, speed, strict=True)
        ]

    def recording_interval(self, stream_df: pd.DataFrame) -> float:
        """
        Estimate the recording interval as the median positive time step.

        Returns:
            Interval in seconds, 1.0 when it cannot be estimated
        """
        if CSVConstants.TIME_COLUMN not in stream_df.columns:
            return 1.0

        time = pd.to_numeric(stream_df[CSVConstants.TIME_COLUMN], errors="coerce")
        steps = time.dropna().diff()
        steps = steps[steps > 0]
        if steps.empty:
            return 1.0
        return float(steps.median())

    def load_activity(
        self,
        stream_file: Path,
        discipline: Discipline,
        start_date: date | None = None,
        threshold_speed_override: float | None = None,
        weight_kg: float | None = None,
        provided_scores: dict[str, float] | None = None,
    ) -> Activity:
        """
        Load a stream file and wrap it as an Activity.

        Only swims need a speed stream. Other disciplines without one, such as
        an indoor ride or a heart rate only run, get no samples.

        Args:
            stream_file: Path to the stream file
            discipline: Discipline of the activity
            start_date: Activity date, used to pick the threshold range
            threshold_speed_override: Critical swim speed for this activity (m/s)
            weight_kg: Athlete weight recorded with the activity
            provided_scores: Run/bike scores computed elsewhere

        Returns:
            Activity ready for metric computation

        Raises:
            StreamDataError: If a swim stream has no time or speed column
        """
        stream_df = self.load_stream(stream_file)

        samples: list[Sample] = []
        if discipline == Discipline.SWIM or self.has_speed(stream_df):
            samples = self.to_samples(stream_df)
        else:
            logger.debug(f"No speed in {discipline.value} stream {stream_file}")

        return Activity(
            discipline=discipline,
            start_date=start_date,
            samples=samples,
            recording_interval=self.recording_interval(stream_df),
            threshold_speed_override=threshold_speed_override,
            weight_kg=weight_kg,
            provided_scores=provided_scores or {},
        )
