"""
Swimming power model.

Converts between swim speed and mechanical power following the drag model
from Skiba's SwimScore paper ("Calculating Power Output and Training Stress
in Swimmers: The Development of the SwimScore Algorithm"):

    K = 0.35 * weight + 2          (Eq. 6, drag factor)
    P = (K / ep) * v^3             (Eq. 5, ep = propelling efficiency)

Both functions accept scalars, numpy arrays or pandas Series. Weight and
speed are expected to be non-negative; other inputs are not rejected but the
result has no physical meaning.
"""

import numpy as np
import numpy.typing as npt

from ..constants import SwimPowerModel

ArrayOrFloat = float | npt.NDArray[np.float64]


def drag_factor(weight_kg: float) -> float:
    """Drag factor K for an athlete of the given weight."""
    return SwimPowerModel.DRAG_WEIGHT_FACTOR * weight_kg + SwimPowerModel.DRAG_OFFSET


def swimming_power(weight_kg: float, speed: ArrayOrFloat) -> ArrayOrFloat:
    """
    Calculate swimming power from speed.

    Args:
        weight_kg: Athlete weight in kg
        speed: Speed in m/s

    Returns:
        Power in watts
    """
    k = drag_factor(weight_kg)
    return (k / SwimPowerModel.PROPELLING_EFFICIENCY) * np.power(speed, 3)


def swimming_speed(weight_kg: float, power: ArrayOrFloat) -> ArrayOrFloat:
    """
    Calculate the swimming speed that requires the given power.

    Inverse of swimming_power.

    Args:
        weight_kg: Athlete weight in kg
        power: Power in watts

    Returns:
        Speed in m/s
    """
    k = drag_factor(weight_kg)
    return np.cbrt((SwimPowerModel.PROPELLING_EFFICIENCY / k) * power)
