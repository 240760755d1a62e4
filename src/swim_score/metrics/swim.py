"""
Swimming training load metrics.

This module implements the SwimScore family of metrics:
- xPower Swim: smoothed normalized swimming power
- xPace Swim: constant pace that requires the same xPower
- STP: swimming threshold power at critical swim speed
- SRI: swimming relative intensity (xPower / STP)
- SwimScore: training stress, 100 for one hour at threshold
"""

import logging
from collections.abc import Mapping

from ..constants import (
    MetricSymbols,
    ScoreConstants,
    TimeConstants,
    UnitConversions,
)
from ..models import (
    Activity,
    AthleteContext,
    MetricDefinition,
    MetricType,
    MetricValue,
)
from .base import MetricNode
from .power_model import swimming_power, swimming_speed
from .xpower import SmoothedPowerEngine

logger = logging.getLogger(__name__)


class XPowerSwim(MetricNode):
    """Normalized swimming power from the smoothed speed stream."""

    definition = MetricDefinition(
        symbol=MetricSymbols.XPOWER,
        name="xPower Swim",
        metric_type=MetricType.AVERAGE,
        metric_units="watts",
        imperial_units="watts",
    )

    def calculate(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        engine = SmoothedPowerEngine(activity.recording_interval, athlete.weight_kg)
        result = engine.compute(activity.samples)
        return self._value(result.power, result.seconds)


class XPaceSwim(MetricNode):
    """Constant pace requiring the same power as xPower Swim, in min/100m."""

    definition = MetricDefinition(
        symbol=MetricSymbols.XPACE,
        name="xPace Swim",
        metric_type=MetricType.AVERAGE,
        metric_units="min/100m",
        imperial_units="min/100yd",
        precision=1,
        conversion=UnitConversions.METERS_PER_YARD,
    )
    dependencies = (MetricSymbols.XPOWER,)

    def calculate(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        xpower = deps[MetricSymbols.XPOWER]
        speed = float(swimming_speed(athlete.weight_kg, xpower.value))

        pace = (
            (UnitConversions.PACE_DISTANCE / TimeConstants.SECONDS_PER_MINUTE) / speed
            if speed
            else 0.0
        )
        return self._value(pace, xpower.count)


class ThresholdPowerSwim(MetricNode):
    """Swimming threshold power (STP) at the athlete's critical swim speed."""

    definition = MetricDefinition(
        symbol=MetricSymbols.THRESHOLD_POWER,
        name="STP",
        metric_type=MetricType.AVERAGE,
        metric_units="watts",
        imperial_units="watts",
        precision=0,
    )
    dependencies = (MetricSymbols.XPOWER,)

    def calculate(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        if not athlete.threshold_speed:
            logger.debug("Threshold speed not set, STP is 0")
        watts = float(swimming_power(athlete.weight_kg, athlete.threshold_speed))
        return self._value(watts, deps[MetricSymbols.XPOWER].count)


class RelativeIntensitySwim(MetricNode):
    """Swimming relative intensity (SRI), xPower as a fraction of STP."""

    definition = MetricDefinition(
        symbol=MetricSymbols.RELATIVE_INTENSITY,
        name="SRI",
        metric_type=MetricType.AVERAGE,
        precision=2,
    )
    dependencies = (MetricSymbols.XPOWER, MetricSymbols.THRESHOLD_POWER)

    def calculate(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        xpower = deps[MetricSymbols.XPOWER]
        stp = deps[MetricSymbols.THRESHOLD_POWER].value

        intensity = xpower.value / stp if stp else 0.0
        return self._value(intensity, xpower.count)


class SwimScore(MetricNode):
    """
    SwimScore training stress.

    Normalized work weighted by relative intensity, expressed as a percentage
    of the work done in one hour at threshold power.
    """

    definition = MetricDefinition(
        symbol=MetricSymbols.SWIMSCORE,
        name="SwimScore",
        metric_type=MetricType.TOTAL,
    )
    dependencies = (
        MetricSymbols.XPOWER,
        MetricSymbols.THRESHOLD_POWER,
        MetricSymbols.RELATIVE_INTENSITY,
    )

    def calculate(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        xpower = deps[MetricSymbols.XPOWER]
        intensity = deps[MetricSymbols.RELATIVE_INTENSITY].value
        stp = deps[MetricSymbols.THRESHOLD_POWER].value

        normalized_work = xpower.value * xpower.count
        raw_score = normalized_work * intensity
        work_in_an_hour_at_stp = stp * ScoreConstants.SCORE_HOUR_DIVISOR

        score = (
            raw_score / work_in_an_hour_at_stp * ScoreConstants.SCORE_NORMALIZATION_FACTOR
            if work_in_an_hour_at_stp
            else 0.0
        )
        return self._value(score, xpower.count)
