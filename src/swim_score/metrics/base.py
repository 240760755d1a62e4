"""
Base classes for metric graph nodes.

Defines the interface that all metrics registered in a MetricGraph follow.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from ..models import Activity, AthleteContext, MetricDefinition, MetricType, MetricValue


class MetricNode(ABC):
    """
    Abstract base class for a metric in the dependency graph.

    Subclasses declare a definition (symbol, name, units) and the symbols of
    the metrics they read. The graph guarantees that every declared
    dependency is present in `deps` when `calculate` is called.
    """

    definition: MetricDefinition
    dependencies: tuple[str, ...] = ()

    @property
    def symbol(self) -> str:
        """Symbol the metric is registered under."""
        return self.definition.symbol

    def is_relevant(self, activity: Activity) -> bool:
        """Whether the metric applies to the activity. Defaults to swims only."""
        return activity.is_swim

    def compute(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        """
        Compute the metric, or its zero value if it does not apply.

        Args:
            activity: Activity being processed
            athlete: Athlete data resolved for this activity
            deps: Values of the declared dependencies

        Returns:
            MetricValue for this metric
        """
        if not self.is_relevant(activity):
            return MetricValue.zero(self.symbol)
        return self.calculate(activity, athlete, deps)

    @abstractmethod
    def calculate(
        self,
        activity: Activity,
        athlete: AthleteContext,
        deps: Mapping[str, MetricValue],
    ) -> MetricValue:
        """Compute the metric for a relevant activity."""
        raise NotImplementedError("Subclasses must implement calculate()")

    def _value(self, value: float, count: float = 0.0) -> MetricValue:
        """Wrap a computed value under this metric's symbol."""
        return MetricValue(symbol=self.symbol, value=float(value), count=float(count))


def aggregate_values(
    definition: MetricDefinition, values: Iterable[MetricValue]
) -> float:
    """
    Combine one metric computed over several activities.

    Totals are summed. Averages are weighted by each value's supporting
    duration, so activities without support do not contribute.

    Args:
        definition: Definition of the metric being aggregated
        values: Per activity values of that metric

    Returns:
        Aggregated value, 0.0 when there is nothing to aggregate
    """
    values = list(values)
    if definition.metric_type == MetricType.TOTAL:
        return float(sum(v.value for v in values))

    total_count = sum(v.count for v in values)
    if total_count == 0:
        return 0.0
    return float(sum(v.value * v.count for v in values) / total_count)
