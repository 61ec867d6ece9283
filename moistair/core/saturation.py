"""Saturation vapour pressure of water.

ASHRAE Handbook — Fundamentals, Chapter 1. Two correlations of the form

    ln(p_ws) = C1/T + C2 + C3·T + C4·T² + C5·T³ + C6·T⁴ + C7·ln(T)

are used: one over ice below the triple point (273.15 K) and one over
liquid water from the triple point up to 473.15 K.
"""

from __future__ import annotations

import math

from moistair.core.errors import InvalidTemperature
from moistair.utils.constants import T_CELSIUS_OFFSET, T_SAT_MAX, T_SAT_MIN

# C1..C7, saturation over ice (173.15 K < T < 273.15 K)
_ICE_COEFFS = (
    -5.6745359e03,
    6.3925247,
    -9.6778430e-03,
    6.2215701e-07,
    2.0747825e-09,
    -9.4840240e-13,
    4.1635019,
)

# C8..C13, saturation over liquid water (273.15 K <= T < 473.15 K)
_LIQUID_COEFFS = (
    -5.8002206e03,
    1.3914993,
    -4.8640239e-02,
    4.1764768e-05,
    -1.4452093e-08,
    6.5459673,
)


def _ln_pws_ice(T: float) -> float:
    c1, c2, c3, c4, c5, c6, c7 = _ICE_COEFFS
    return c1 / T + c2 + c3 * T + c4 * T**2 + c5 * T**3 + c6 * T**4 + c7 * math.log(T)


def _ln_pws_liquid(T: float) -> float:
    c8, c9, c10, c11, c12, c13 = _LIQUID_COEFFS
    return c8 / T + c9 + c10 * T + c11 * T**2 + c12 * T**3 + c13 * math.log(T)


def saturation_pressure(T: float) -> float:
    """Saturation pressure of water vapour [kPa].

    Args:
        T: Temperature [K], strictly between 173.15 and 473.15.

    Returns:
        Saturation pressure in kPa.

    Raises:
        InvalidTemperature: If T is outside (173.15, 473.15), boundaries
            included, or is not finite.
    """
    if not (T_SAT_MIN < T < T_SAT_MAX):
        raise InvalidTemperature(T, T_SAT_MIN, T_SAT_MAX)

    if T < T_CELSIUS_OFFSET:
        ln_pws = _ln_pws_ice(T)
    else:
        ln_pws = _ln_pws_liquid(T)

    # Correlation is in Pa
    return math.exp(ln_pws) / 1000.0
