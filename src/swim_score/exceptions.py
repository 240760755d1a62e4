"""
Exceptions raised by the SwimScore package.

A metric that does not apply to an activity is not an error: it evaluates to
zero. These exceptions cover bad configuration, unusable input and a metric
graph that cannot be evaluated.
"""


class SwimScoreError(Exception):
    """Base exception for all SwimScore errors."""


class ConfigurationError(SwimScoreError):
    """Raised when the settings or config file cannot be used."""


class InvalidDataError(SwimScoreError):
    """Raised when activity or athlete input is out of range or malformed."""


class StreamError(SwimScoreError):
    """Base exception for problems with an activity stream."""


class DataLoadError(StreamError):
    """Raised when a stream file is missing or cannot be parsed."""


class StreamDataError(StreamError):
    """Raised when a swim stream lacks the time or speed column."""


class MetricGraphError(SwimScoreError):
    """Raised when the metric dependency graph cannot be built."""
