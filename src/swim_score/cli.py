"""
Command-line interface for the SwimScore package.

This module provides commands to compute SwimScore and TriScore metrics for a
single stream file or for a batch of activities.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

import click
import pandas as pd

from .exceptions import SwimScoreError
from .metrics import default_graph
from .models import Discipline
from .pipeline import Pipeline
from .settings import load_settings


# Configure basic logging
def configure_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@click.group()
def main():
    """
    Compute swim training load metrics.

    SwimScore rates the training stress of a swim from its speed stream, and
    TriScore reports the matching score for every discipline of a triathlete.
    """


@main.command()
@click.argument(
    "stream_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--discipline",
    type=click.Choice([d.value for d in Discipline]),
    default=Discipline.SWIM.value,
    show_default=True,
    help="Discipline of the activity",
)
@click.option(
    "--date",
    "start_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Activity date (YYYY-MM-DD), selects the threshold range",
)
@click.option("--weight", type=float, help="Athlete weight in kg (overrides config)")
@click.option(
    "--threshold-speed",
    type=float,
    help="Critical swim speed in m/s for this activity",
)
@click.option(
    "--imperial/--metric",
    default=None,
    help="Display pace per 100 yd instead of per 100 m",
)
@click.option("--json", "as_json", is_flag=True, help="Print raw values as JSON")
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Enable verbose output",
)
def compute(
    stream_file: Path,
    config: Path | None,
    discipline: str,
    start_date: datetime | None,
    weight: float | None,
    threshold_speed: float | None,
    imperial: bool | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Compute metrics for a single activity stream."""
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        pipeline = Pipeline(settings)

        activity = pipeline.loader.load_activity(
            stream_file,
            Discipline(discipline),
            start_date=start_date.date() if start_date else None,
            threshold_speed_override=threshold_speed,
            weight_kg=weight,
        )
        values = pipeline.process_activity(activity)

    except SwimScoreError as e:
        logger.error(f"Computation failed: {str(e)}")
        raise click.Abort() from e

    if as_json:
        click.echo(
            json.dumps(
                {s: {"value": v.value, "count": v.count} for s, v in values.items()},
                indent=2,
            )
        )
        return

    use_imperial = settings.imperial if imperial is None else imperial
    definitions = pipeline.graph.definitions()

    click.echo(f"\n{discipline.title()} Activity Metrics")
    click.echo("=" * 40)
    for symbol, value in values.items():
        definition = definitions[symbol]
        units = definition.units(use_imperial)
        shown = value.display(definition, imperial=use_imperial)
        click.echo(f"{definition.name:<12} {shown:>10.{definition.precision}f} {units}")


@main.command()
@click.argument(
    "activities_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--streams-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Path to streams directory (overrides config)",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write per activity metrics to this CSV file",
)
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Enable verbose output",
)
def process(
    activities_file: Path,
    config: Path | None,
    streams_dir: Path | None,
    output: Path | None,
    verbose: bool,
) -> None:
    """
    Compute metrics for every activity in an activities CSV file.

    Each activity's stream is read from STREAMS_DIR/stream_<id>.csv.
    """
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        if streams_dir is not None:
            settings.streams_dir = streams_dir

        activities_df = pd.read_csv(activities_file, sep=settings.stream_separator)
        result_df = Pipeline(settings).process_activities(activities_df)

    except SwimScoreError as e:
        logger.error(f"Processing failed: {str(e)}")
        raise click.Abort() from e
    except (OSError, ValueError) as e:
        logger.error(f"Could not read {activities_file}: {str(e)}")
        raise click.Abort() from e

    if output is not None:
        result_df.to_csv(output, index=False)
        logger.info(f"Metrics saved to {output}")
    else:
        click.echo(result_df.to_string(index=False))


@main.command(name="metrics")
def list_metrics() -> None:
    """List the registered metrics in evaluation order."""
    graph = default_graph()
    for symbol, definition in graph.definitions().items():
        deps = ", ".join(graph.node(symbol).dependencies) or "-"
        click.echo(f"{symbol:<20} {definition.name:<14} depends on: {deps}")


if __name__ == "__main__":
    main()
