"""
Activity processing pipeline.

Resolves the athlete context of each activity, runs the metric graph once per
activity and collects the results, either for a single activity or for a
batch described by an activities DataFrame.
"""

import logging
from collections.abc import Iterable

import pandas as pd

from .constants import MetricSymbols
from .data import StreamLoader
from .exceptions import InvalidDataError, SwimScoreError
from .metrics import MetricGraph, aggregate_values, default_graph
from .models import Activity, Discipline, MetricValue
from .settings import Settings

logger = logging.getLogger(__name__)


class Pipeline:
    """
    Computes SwimScore metrics for activities.

    The metric graph is built once and shared by every activity processed.
    """

    def __init__(self, settings: Settings, graph: MetricGraph | None = None):
        """
        Initialize the pipeline.

        Args:
            settings: Application settings
            graph: Metric graph to evaluate, the default graph if not given
        """
        self.settings = settings
        self.graph = graph if graph is not None else default_graph()
        self.loader = StreamLoader(settings)

    def process_activity(self, activity: Activity) -> dict[str, MetricValue]:
        """
        Compute every registered metric for one activity.

        Args:
            activity: Activity to process

        Returns:
            Metric values keyed by symbol
        """
        athlete = self.settings.athlete_context(activity)
        values = self.graph.compute(activity, athlete)
        logger.debug(
            "Processed %s activity: %s",
            activity.discipline.value,
            ", ".join(f"{s}={v.value:.2f}" for s, v in values.items()),
        )
        return values

    def process_activities(self, activities_df: pd.DataFrame) -> pd.DataFrame:
        """
        Process a batch of activities.

        Expected columns are `id`, `type` and `start_date`. Optional columns
        `threshold_speed`, `weight_kg`, `govss` and `skiba_bike_score` feed
        the corresponding activity fields. Streams are read from
        `streams_dir/stream_<id>.csv`.

        Args:
            activities_df: One row per activity

        Returns:
            DataFrame with the activity id and one column per metric

        Raises:
            InvalidDataError: If required columns are missing
        """
        missing = [c for c in ("id", "type") if c not in activities_df.columns]
        if missing:
            raise InvalidDataError(f"Activities are missing columns: {missing}")

        rows = []
        for _, row in activities_df.iterrows():
            try:
                activity = self._activity_from_row(row)
                values = self.process_activity(activity)
            except SwimScoreError as e:
                logger.error(f"Skipping activity {row['id']}: {e}")
                continue

            record: dict[str, object] = {"id": row["id"]}
            record.update({symbol: v.value for symbol, v in values.items()})
            rows.append(record)

        logger.info(f"Processed {len(rows)} of {len(activities_df)} activities")
        return pd.DataFrame(rows, columns=["id", *self.graph.order])

    def summarize(
        self, results: Iterable[dict[str, MetricValue]]
    ) -> dict[str, float]:
        """
        Aggregate per activity metric values over several activities.

        Args:
            results: Outputs of process_activity

        Returns:
            Aggregated value per metric symbol
        """
        results = list(results)
        return {
            symbol: aggregate_values(
                definition, (r[symbol] for r in results if symbol in r)
            )
            for symbol, definition in self.graph.definitions().items()
        }

    def _activity_from_row(self, row: pd.Series) -> Activity:
        """Build an Activity from one row of the activities DataFrame."""
        discipline = Discipline.from_activity_type(str(row["type"]))

        start_date = None
        if "start_date" in row and pd.notna(row["start_date"]):
            start_date = pd.Timestamp(row["start_date"]).date()

        # Only swims are scored from their stream
        samples, interval = [], 1.0
        if discipline == Discipline.SWIM:
            stream_file = self.settings.streams_dir / f"stream_{row['id']}.csv"
            if stream_file.exists():
                stream_df = self.loader.load_stream(stream_file)
                samples = self.loader.to_samples(stream_df)
                interval = self.loader.recording_interval(stream_df)
            else:
                logger.warning(f"No stream for swim activity {row['id']}")

        provided = {}
        for symbol in (MetricSymbols.GOVSS, MetricSymbols.BIKESCORE):
            score = _optional_float(row, symbol)
            if score is not None:
                provided[symbol] = score

        return Activity(
            discipline=discipline,
            start_date=start_date,
            samples=samples,
            recording_interval=interval,
            threshold_speed_override=_optional_float(row, "threshold_speed"),
            weight_kg=_optional_float(row, "weight_kg"),
            provided_scores=provided,
        )


def _optional_float(row: pd.Series, column: str) -> float | None:
    """
    Read a float column that may be absent or empty.

    Raises:
        InvalidDataError: If the cell is not a number
    """
    if column not in row or pd.isna(row[column]):
        return None
    try:
        return float(row[column])
    except (TypeError, ValueError) as e:
        raise InvalidDataError(
            f"Column '{column}' of activity {row.get('id')} is not a number: "
            f"{row[column]!r}"
        ) from e
