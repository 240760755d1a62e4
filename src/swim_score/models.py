"""
Data models for the SwimScore package.

This module defines all the core data structures used throughout the application,
ensuring type safety and data validation using Pydantic models.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Discipline(str, Enum):
    """Disciplines distinguished by the triathlon aggregate score."""

    SWIM = "swim"
    RUN = "run"
    BIKE = "bike"

    @classmethod
    def from_activity_type(cls, activity_type: str) -> "Discipline":
        """
        Map a free-form activity type (e.g. Strava's 'Swim', 'VirtualRide') to a
        discipline. Anything that is neither a swim nor a run counts as bike.
        """
        normalized = activity_type.strip().lower()
        if "swim" in normalized:
            return cls.SWIM
        if normalized in {"run", "trailrun", "virtualrun", "trail_run", "virtual_run"}:
            return cls.RUN
        return cls.BIKE


class MetricType(str, Enum):
    """How a metric combines across several activities."""

    AVERAGE = "average"
    TOTAL = "total"


class Sample(BaseModel):
    """A single speed reading from an activity stream."""

    model_config = ConfigDict(frozen=True)

    time: float = Field(..., description="Elapsed time in seconds")
    speed: float = Field(..., description="Speed in m/s")


class AthleteContext(BaseModel):
    """Athlete data used by a single metric computation."""

    model_config = ConfigDict(frozen=True)

    weight_kg: float = Field(..., description="Athlete weight in kg")
    threshold_speed: float = Field(
        0.0, description="Critical swim speed in m/s, 0 when unset"
    )


class ThresholdRange(BaseModel):
    """Critical swim speed configured for a date range."""

    start_date: date = Field(..., description="First day the threshold applies")
    end_date: date | None = Field(
        None, description="Last day the threshold applies, open ended if unset"
    )
    threshold_speed: float = Field(..., description="Critical swim speed in m/s")

    @field_validator("threshold_speed")
    @classmethod
    def check_speed(cls, v: float) -> float:
        """Validate threshold speed is not negative."""
        if v < 0:
            raise ValueError("Threshold speed must not be negative")
        return v

    @model_validator(mode="after")
    def check_dates(self) -> "ThresholdRange":
        """Validate the range is not inverted."""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def contains(self, day: date) -> bool:
        """Return True if the given day falls within this range."""
        if day < self.start_date:
            return False
        return self.end_date is None or day <= self.end_date


class Activity(BaseModel):
    """Everything the metric graph needs to know about one activity."""

    discipline: Discipline = Field(..., description="Activity discipline")
    start_date: date | None = Field(None, description="Activity start date")
    samples: list[Sample] = Field(
        default_factory=list, description="Speed samples ordered by time"
    )
    recording_interval: float = Field(
        1.0, description="Sampling interval of the stream in seconds"
    )
    threshold_speed_override: float | None = Field(
        None, description="Critical swim speed in m/s set on the activity itself"
    )
    weight_kg: float | None = Field(
        None, description="Athlete weight recorded with the activity"
    )
    provided_scores: dict[str, float] = Field(
        default_factory=dict,
        description="Scores computed by the host for other disciplines",
    )

    @property
    def is_swim(self) -> bool:
        """Return True for swim activities."""
        return self.discipline == Discipline.SWIM


class MetricDefinition(BaseModel):
    """Display metadata for a registered metric."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Unique metric symbol")
    name: str = Field(..., description="Human readable metric name")
    metric_type: MetricType = Field(
        MetricType.AVERAGE, description="Aggregation across activities"
    )
    metric_units: str = Field("", description="Units in metric mode")
    imperial_units: str = Field("", description="Units in imperial mode")
    precision: int = Field(0, description="Decimal places shown")
    conversion: float = Field(
        1.0, description="Factor converting the metric value to imperial units"
    )

    def units(self, imperial: bool = False) -> str:
        """Get the units label for the requested unit system."""
        return self.imperial_units if imperial else self.metric_units


class MetricValue(BaseModel):
    """Computed value of one metric for one activity."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Metric symbol")
    value: float = Field(0.0, description="Metric value")
    count: float = Field(
        0.0, description="Seconds of data supporting the value"
    )

    @classmethod
    def zero(cls, symbol: str) -> "MetricValue":
        """Value reported when a metric does not apply to an activity."""
        return cls(symbol=symbol, value=0.0, count=0.0)

    def display(self, definition: MetricDefinition, imperial: bool = False) -> float:
        """Value converted to the requested units and rounded for display."""
        value = self.value * definition.conversion if imperial else self.value
        return round(value, definition.precision)
