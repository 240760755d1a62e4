"""SwimScore - swim training load metrics and triathlon TriScore."""

__version__ = "0.3.0"

from . import constants, data, exceptions, metrics, models
from .data import StreamLoader
from .metrics import (
    MetricGraph,
    SmoothedPowerEngine,
    build_default_graph,
    default_graph,
    swimming_power,
    swimming_speed,
)
from .models import (
    Activity,
    AthleteContext,
    Discipline,
    MetricDefinition,
    MetricType,
    MetricValue,
    Sample,
    ThresholdRange,
)
from .pipeline import Pipeline
from .settings import Settings, load_settings


def get_version() -> str:
    """Get the current version of swim_score."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "swim-score",
        "version": __version__,
        "description": "Swim training load metrics (SwimScore) and TriScore",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Models
    "Activity",
    "AthleteContext",
    "Discipline",
    "MetricDefinition",
    "MetricType",
    "MetricValue",
    "Sample",
    "ThresholdRange",
    # Metrics
    "MetricGraph",
    "SmoothedPowerEngine",
    "build_default_graph",
    "default_graph",
    "swimming_power",
    "swimming_speed",
    # Data Layer
    "StreamLoader",
    # Settings
    "Settings",
    "load_settings",
    # Pipeline
    "Pipeline",
    # Modules
    "constants",
    "data",
    "exceptions",
    "metrics",
    "models",
]
