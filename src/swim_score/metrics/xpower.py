"""
Exponentially weighted normalized power for swimming (xPower Swim).

The speed stream is converted to power sample by sample and smoothed with an
exponential moving average over a 25 second window. Gaps in the recording are
filled by letting the average decay one interval at a time until it becomes
negligible. The result is the cubic mean of the smoothed power.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from ..constants import SmoothingConstants
from ..exceptions import InvalidDataError
from ..models import Sample
from .power_model import swimming_power

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmoothedPowerResult:
    """
    Result of a smoothing pass.

    Attributes:
        power: Normalized (cubic mean) power in watts
        seconds: Duration supporting the value, count * recording interval
        count: Number of accumulated steps, real and synthetic
        synthetic_steps: Steps synthesized to fill recording gaps
    """

    power: float
    seconds: float
    count: int
    synthetic_steps: int = 0


class SmoothedPowerEngine:
    """
    Single pass, constant memory xPower calculation.

    Samples must be ordered by non-decreasing time. Out of order or duplicated
    timestamps are not detected here; they only shorten the gap checks.
    """

    def __init__(self, recording_interval: float, weight_kg: float):
        """
        Initialize the engine.

        Args:
            recording_interval: Sampling interval of the stream in seconds
            weight_kg: Athlete weight in kg, used by the power model

        Raises:
            InvalidDataError: If the recording interval is not positive
        """
        if not recording_interval > 0:
            raise InvalidDataError(
                f"Recording interval must be positive, got {recording_interval}"
            )

        self.recording_interval = float(recording_interval)
        self.weight_kg = weight_kg

        samples_per_window = SmoothingConstants.WINDOW_SECONDS / self.recording_interval
        self.attenuation = samples_per_window / (
            samples_per_window + self.recording_interval
        )
        self.sample_weight = self.recording_interval / (
            samples_per_window + self.recording_interval
        )

    def compute(self, samples: Iterable[Sample]) -> SmoothedPowerResult:
        """
        Run the smoothing pass over a speed stream.

        Args:
            samples: Speed samples ordered by time

        Returns:
            SmoothedPowerResult, with zero power for an empty stream
        """
        delta = self.recording_interval
        gap_limit = delta + SmoothingConstants.EPSILON

        last_time = 0.0
        weighted = 0.0
        total = 0.0
        count = 0
        synthetic = 0

        for sample in samples:
            power = swimming_power(self.weight_kg, sample.speed)

            if count == 0:
                # The average starts at the first sample's own power
                weighted = power
            else:
                while (
                    weighted > SmoothingConstants.NEGLIGIBLE
                    and sample.time > last_time + gap_limit
                ):
                    weighted *= self.attenuation
                    last_time += delta
                    total += weighted**3
                    count += 1
                    synthetic += 1

                weighted = weighted * self.attenuation + self.sample_weight * power

            last_time = sample.time
            total += weighted**3
            count += 1

        if count == 0:
            logger.debug("Empty stream, xPower is 0")
            return SmoothedPowerResult(power=0.0, seconds=0.0, count=0)

        if synthetic:
            logger.debug("Filled recording gaps with %d decay steps", synthetic)

        return SmoothedPowerResult(
            power=float(np.cbrt(total / count)),
            seconds=count * delta,
            count=count,
            synthetic_steps=synthetic,
        )
