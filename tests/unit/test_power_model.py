"""Unit tests for the swimming power model."""

import numpy as np
import pandas as pd
import pytest

from swim_score.metrics.power_model import drag_factor, swimming_power, swimming_speed


class TestSwimmingPower:
    """Test speed to power conversion."""

    def test_drag_factor(self):
        """Drag factor grows linearly with weight."""
        assert drag_factor(70.0) == pytest.approx(26.5)
        assert drag_factor(0.0) == pytest.approx(2.0)

    def test_power_at_one_meter_per_second(self):
        """At 1 m/s power equals K / efficiency."""
        assert swimming_power(70.0, 1.0) == pytest.approx(26.5 / 0.6)

    def test_power_is_cubic_in_speed(self):
        """Doubling speed multiplies power by eight."""
        assert swimming_power(70.0, 2.0) == pytest.approx(
            8 * swimming_power(70.0, 1.0)
        )

    def test_zero_speed_gives_zero_power(self):
        """A swimmer standing still produces no power."""
        assert swimming_power(70.0, 0.0) == 0.0

    def test_heavier_athlete_needs_more_power(self):
        """More drag means more power at the same speed."""
        assert swimming_power(80.0, 1.3) > swimming_power(60.0, 1.3)

    def test_vectorised_series(self):
        """Power model accepts pandas Series."""
        speeds = pd.Series([0.0, 1.0, 2.0])

        powers = swimming_power(70.0, speeds)

        assert list(powers) == pytest.approx([0.0, 26.5 / 0.6, 8 * 26.5 / 0.6])


class TestSwimmingSpeed:
    """Test power to speed conversion."""

    @pytest.mark.parametrize("weight", [0.0, 45.0, 70.0, 95.5])
    @pytest.mark.parametrize("speed", [0.0, 0.4, 1.0, 1.37, 2.1])
    def test_round_trip(self, weight: float, speed: float):
        """Speed recovered from power matches the input speed."""
        power = swimming_power(weight, speed)

        assert swimming_speed(weight, power) == pytest.approx(speed, abs=1e-12)

    def test_zero_power_gives_zero_speed(self):
        """No power means no speed."""
        assert swimming_speed(70.0, 0.0) == 0.0

    def test_vectorised_array(self):
        """Speed model accepts numpy arrays."""
        speeds = np.array([0.5, 1.0, 1.5])

        recovered = swimming_speed(70.0, swimming_power(70.0, speeds))

        np.testing.assert_allclose(recovered, speeds)
