"""
Metric dependency graph.

Metrics are registered explicitly, their dependencies are validated once when
the graph is built, and every activity is then evaluated in the cached
topological order.
"""

import logging
from collections.abc import Iterable
from functools import lru_cache
from graphlib import CycleError, TopologicalSorter

from ..constants import MetricSymbols
from ..exceptions import MetricGraphError
from ..models import Activity, AthleteContext, Discipline, MetricDefinition, MetricValue
from .base import MetricNode
from .swim import (
    RelativeIntensitySwim,
    SwimScore,
    ThresholdPowerSwim,
    XPaceSwim,
    XPowerSwim,
)
from .triscore import ProvidedScore, TriScore

logger = logging.getLogger(__name__)


class MetricGraph:
    """
    A validated, dependency ordered set of metrics.

    The graph is immutable once built and holds no per activity state, so a
    single instance can be reused for every activity.
    """

    def __init__(self, nodes: Iterable[MetricNode]):
        """
        Build and validate the graph.

        Args:
            nodes: Metrics to register

        Raises:
            MetricGraphError: On duplicate symbols, unknown dependencies or cycles
        """
        self._nodes: dict[str, MetricNode] = {}
        for node in nodes:
            if node.symbol in self._nodes:
                raise MetricGraphError(f"Metric '{node.symbol}' registered twice")
            self._nodes[node.symbol] = node

        for node in self._nodes.values():
            missing = [d for d in node.dependencies if d not in self._nodes]
            if missing:
                raise MetricGraphError(
                    f"Metric '{node.symbol}' depends on unregistered metrics: "
                    f"{', '.join(missing)}"
                )

        sorter = TopologicalSorter(
            {symbol: node.dependencies for symbol, node in self._nodes.items()}
        )
        try:
            self._order = tuple(sorter.static_order())
        except CycleError as e:
            raise MetricGraphError(
                f"Metric dependencies form a cycle: {' -> '.join(e.args[1])}"
            ) from e

        logger.debug("Metric evaluation order: %s", ", ".join(self._order))

    @property
    def order(self) -> tuple[str, ...]:
        """Symbols in evaluation order."""
        return self._order

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, symbol: str) -> MetricNode:
        """Get a registered metric by symbol."""
        try:
            return self._nodes[symbol]
        except KeyError as e:
            raise MetricGraphError(f"Unknown metric '{symbol}'") from e

    def definitions(self) -> dict[str, MetricDefinition]:
        """Display metadata of every metric, in evaluation order."""
        return {symbol: self._nodes[symbol].definition for symbol in self._order}

    def compute(
        self, activity: Activity, athlete: AthleteContext
    ) -> dict[str, MetricValue]:
        """
        Evaluate every metric for one activity.

        Args:
            activity: Activity to evaluate
            athlete: Athlete data resolved for the activity

        Returns:
            Metric values keyed by symbol, in evaluation order
        """
        values: dict[str, MetricValue] = {}
        for symbol in self._order:
            node = self._nodes[symbol]
            deps = {dep: values[dep] for dep in node.dependencies}
            values[symbol] = node.compute(activity, athlete, deps)
        return values


def build_default_graph() -> MetricGraph:
    """Register the SwimScore metrics and the TriScore aggregate."""
    return MetricGraph(
        [
            XPowerSwim(),
            ThresholdPowerSwim(),
            XPaceSwim(),
            RelativeIntensitySwim(),
            SwimScore(),
            ProvidedScore(MetricSymbols.GOVSS, "GOVSS", Discipline.RUN),
            ProvidedScore(MetricSymbols.BIKESCORE, "BikeScore", Discipline.BIKE),
            TriScore(),
        ]
    )


@lru_cache(maxsize=1)
def default_graph() -> MetricGraph:
    """Shared default graph, built on first use."""
    return build_default_graph()
