"""Tests for the saturation pressure module."""

import numpy as np
import pytest

from moistair.core.errors import InvalidTemperature
from moistair.core.saturation import saturation_pressure


class TestSaturationPressure:
    """Test the ASHRAE saturation pressure correlations."""

    def test_triple_point(self):
        """p_ws at 273.15 K should be ~0.6112 kPa."""
        assert saturation_pressure(273.15) == pytest.approx(0.6112, rel=5e-3)

    def test_boiling_point(self):
        """p_ws at 373.15 K should be ~101.42 kPa."""
        assert saturation_pressure(373.15) == pytest.approx(101.42, rel=5e-3)

    def test_room_temperature(self):
        """p_ws at 25 °C should be ~3.17 kPa."""
        assert saturation_pressure(298.15) == pytest.approx(3.1699, rel=5e-3)

    def test_over_ice(self):
        """p_ws at -10 °C over ice should be ~0.2600 kPa."""
        assert saturation_pressure(263.15) == pytest.approx(0.2600, rel=5e-3)

    def test_continuous_at_triple_point(self):
        """Ice and liquid branches should meet at 273.15 K."""
        below = saturation_pressure(273.15 - 1e-9)
        above = saturation_pressure(273.15)
        assert below == pytest.approx(above, rel=5e-3)

    def test_monotonically_increasing(self):
        temps = np.linspace(173.16, 473.14, 500)
        values = np.array([saturation_pressure(T) for T in temps])
        assert np.all(np.diff(values) > 0)

    def test_positive_near_limits(self):
        assert saturation_pressure(173.16) > 0
        assert saturation_pressure(473.14) > 0


class TestSaturationDomain:
    """Test out-of-range temperatures."""

    @pytest.mark.parametrize("T", [100.0, 500.0, 173.15, 473.15, float("nan")])
    def test_invalid_temperature(self, T):
        with pytest.raises(InvalidTemperature):
            saturation_pressure(T)

    def test_invalid_temperature_is_value_error(self):
        with pytest.raises(ValueError):
            saturation_pressure(-5.0)

    def test_error_carries_temperature(self):
        with pytest.raises(InvalidTemperature) as exc_info:
            saturation_pressure(500.0)
        assert exc_info.value.temperature == 500.0
        assert "500.0" in str(exc_info.value)
