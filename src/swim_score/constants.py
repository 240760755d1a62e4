"""
Constants used throughout the SwimScore package.

This module centralizes all magic numbers and commonly used values to improve
maintainability and clarity.
"""

from typing import Final


# === Time Constants ===
class TimeConstants:
    """Time-related constants in seconds."""

    SECONDS_PER_MINUTE: Final[int] = 60
    SECONDS_PER_HOUR: Final[int] = 3600


# === Swimming Power Model (Skiba, SwimScore) ===
class SwimPowerModel:
    """Drag model parameters for converting swim speed to power."""

    DRAG_WEIGHT_FACTOR: Final[float] = 0.35  # Drag factor K = 0.35 * kg + 2 (Eq. 6)
    DRAG_OFFSET: Final[float] = 2.0
    PROPELLING_EFFICIENCY: Final[float] = 0.6  # Toussaint's propelling efficiency


# === xPower Smoothing ===
class SmoothingConstants:
    """Constants for the exponentially weighted xPower calculation."""

    WINDOW_SECONDS: Final[float] = 25.0  # Smoothing window length
    EPSILON: Final[float] = 0.1  # Slack before a time step counts as a gap
    NEGLIGIBLE: Final[float] = 0.1  # Stop gap filling once power decays below this


# === Score Calculation ===
class ScoreConstants:
    """Constants for SwimScore calculations."""

    SCORE_NORMALIZATION_FACTOR: Final[float] = 100.0  # One hour at threshold = 100
    SCORE_HOUR_DIVISOR: Final[int] = TimeConstants.SECONDS_PER_HOUR


# === Units ===
class UnitConversions:
    """Unit conversion factors."""

    KPH_TO_MPS: Final[float] = 1 / 3.6
    METERS_PER_YARD: Final[float] = 0.9144
    PACE_DISTANCE: Final[float] = 100.0  # Pace is reported per 100 m (or yd)


# === Metric Symbols ===
class MetricSymbols:
    """Symbols under which metrics are registered in the metric graph."""

    XPOWER: Final[str] = "swimscore_xpower"
    XPACE: Final[str] = "swimscore_xpace"
    THRESHOLD_POWER: Final[str] = "swimscore_tp"
    RELATIVE_INTENSITY: Final[str] = "swimscore_ri"
    SWIMSCORE: Final[str] = "swimscore"
    GOVSS: Final[str] = "govss"
    BIKESCORE: Final[str] = "skiba_bike_score"
    TRISCORE: Final[str] = "triscore"


# === CSV Parsing ===
class CSVConstants:
    """Constants for stream file parsing."""

    DEFAULT_ENCODING: Final[str] = "utf-8"
    TIME_COLUMN: Final[str] = "time"
    # Speed columns in order of preference, with the factor converting to m/s
    SPEED_COLUMNS: Final[tuple[tuple[str, float], ...]] = (
        ("velocity_smooth", 1.0),
        ("speed", 1.0),
        ("speed_kph", UnitConversions.KPH_TO_MPS),
    )
