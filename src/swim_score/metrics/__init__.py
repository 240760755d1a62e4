"""
Metrics calculation modules.

This package contains all metric calculation logic:
- power_model: Swim speed <-> power conversion (Skiba drag model)
- xpower: Exponentially smoothed normalized power engine
- swim: SwimScore metrics (xPower, xPace, STP, SRI, SwimScore)
- triscore: Cross-discipline TriScore and host provided scores
- graph: Dependency ordered metric registration and evaluation
"""

from .base import MetricNode, aggregate_values
from .graph import MetricGraph, build_default_graph, default_graph
from .power_model import drag_factor, swimming_power, swimming_speed
from .swim import (
    RelativeIntensitySwim,
    SwimScore,
    ThresholdPowerSwim,
    XPaceSwim,
    XPowerSwim,
)
from .triscore import ProvidedScore, TriScore
from .xpower import SmoothedPowerEngine, SmoothedPowerResult

__all__ = [
    "MetricNode",
    "MetricGraph",
    "build_default_graph",
    "default_graph",
    "aggregate_values",
    "SmoothedPowerEngine",
    "SmoothedPowerResult",
    "XPowerSwim",
    "XPaceSwim",
    "ThresholdPowerSwim",
    "RelativeIntensitySwim",
    "SwimScore",
    "ProvidedScore",
    "TriScore",
    "drag_factor",
    "swimming_power",
    "swimming_speed",
]
