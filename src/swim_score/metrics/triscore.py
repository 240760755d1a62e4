"""
Cross-discipline training stress for triathletes.

TriScore reports the discipline-specific score of each activity under a
single symbol: SwimScore for swims, GOVSS for runs and BikeScore for
everything else. Run and bike scores are computed by the host application
and handed in through `Activity.provided_scores`.
"""

from collections.abc import Mapping

from ..constants import MetricSymbols
from ..models import (
    Activity,
    AthleteContext,
    Discipline,
    MetricDefinition,
    MetricType,
    MetricValue,
)
from .base import MetricNode


class ProvidedScore(MetricNode):
    """A score computed outside this package for one discipline."""

    def __init__(self, symbol: str, name: str, discipline: Discipline):
        self.definition = MetricDefinition(
            symbol=symbol, name=name, metric_type=MetricType.TOTAL
        )
        self.discipline = discipline

    def is_relevant(self, activity: Activity) -> bool:
        return activity.discipline == self.discipline

    def calculate(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        return self._value(activity.provided_scores.get(self.symbol, 0.0))


class TriScore(MetricNode):
    """Selects the score matching the activity's discipline. Not a blend."""

    definition = MetricDefinition(
        symbol=MetricSymbols.TRISCORE,
        name="TriScore",
        metric_type=MetricType.TOTAL,
    )
    dependencies = (
        MetricSymbols.SWIMSCORE,
        MetricSymbols.GOVSS,
        MetricSymbols.BIKESCORE,
    )

    _source_by_discipline = {
        Discipline.SWIM: MetricSymbols.SWIMSCORE,
        Discipline.RUN: MetricSymbols.GOVSS,
        Discipline.BIKE: MetricSymbols.BIKESCORE,
    }

    def is_relevant(self, activity: Activity) -> bool:
        return True

    def calculate(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        source = deps[self._source_by_discipline[activity.discipline]]
        return self._value(source.value, source.count)
