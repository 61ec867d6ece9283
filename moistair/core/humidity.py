"""Humidity input normalisation.

Converts any of the four accepted humidity representations (relative
humidity, wetbulb temperature, dewpoint temperature, humidity ratio) into
the canonical humidity ratio ``w`` [kg water / kg dry air].
"""

from __future__ import annotations

import math
from enum import Enum

from moistair.core.errors import InvalidHumidityKind, NonPhysicalInput
from moistair.core.saturation import saturation_pressure
from moistair.utils.constants import (
    CP_DRY_AIR,
    CP_ICE,
    CP_LIQUID,
    CP_VAPOR,
    H_FG_0,
    H_SG_0,
    MW_RATIO,
    T_CELSIUS_OFFSET,
    WBT_ICE_SLOPE,
    WBT_LIQUID_SLOPE,
)


class HumidityKind(Enum):
    """Humidity representation accepted as input."""

    RH = "rh"  # relative humidity, fraction 0–1
    WBT = "wbt"  # wetbulb temperature, K
    DPT = "dpt"  # dewpoint temperature, K
    W = "w"  # humidity ratio, kg/kg

    @classmethod
    def parse(cls, kind: HumidityKind | str) -> HumidityKind:
        """Resolve an enum member or a case-insensitive string tag."""
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind.strip().lower())
            except ValueError:
                pass
        raise InvalidHumidityKind(kind)


def _check_pressure(p: float) -> None:
    if not (p > 0 and math.isfinite(p)):
        raise NonPhysicalInput(f"Total pressure must be positive and finite, got {p} kPa")


def _ratio_from_partial(p: float, p_w: float) -> float:
    """w = 0.621945·p_w / (p − p_w)."""
    denom = p - p_w
    if denom <= 0:
        raise NonPhysicalInput(
            f"Vapour pressure {p_w:.6g} kPa is not below total pressure {p} kPa"
        )
    return MW_RATIO * p_w / denom


def saturation_humidity_ratio(p: float, t: float) -> float:
    """Humidity ratio of saturated air at pressure p [kPa], temperature t [K]."""
    _check_pressure(p)
    return _ratio_from_partial(p, saturation_pressure(t))


def wetbulb_humidity_ratio(p: float, t: float, wbt: float) -> float:
    """Humidity ratio implied by a psychrometric wetbulb reading.

    Enthalpy balance of an adiabatic saturation process. The bulb is
    taken as wetted by liquid water when t >= 273.15 K, otherwise as
    covered in ice.

    The result is not checked for sign; a wetbulb temperature far below
    the drybulb gives a negative value. Used as the residual of the
    wetbulb solver.
    """
    ws_wbt = _ratio_from_partial(p, saturation_pressure(wbt))
    dt = t - T_CELSIUS_OFFSET
    db = wbt - T_CELSIUS_OFFSET

    if t >= T_CELSIUS_OFFSET:
        num = (H_FG_0 - WBT_LIQUID_SLOPE * db) * ws_wbt - CP_DRY_AIR * (dt - db)
        den = H_FG_0 + CP_VAPOR * dt - CP_LIQUID * db
    else:
        num = (H_SG_0 - WBT_ICE_SLOPE * db) * ws_wbt - CP_DRY_AIR * (dt - db)
        den = H_SG_0 + CP_VAPOR * dt - CP_ICE * db
    return num / den


def humidity_ratio(p: float, t: float, kind: HumidityKind | str, value: float) -> float:
    """Humidity ratio [kg/kg dry air] from any supported humidity input.

    Args:
        p: Total pressure [kPa].
        t: Drybulb temperature [K].
        kind: Representation of ``value``: ``"rh"``, ``"wbt"``, ``"dpt"``
            or ``"w"`` (case-insensitive) or a HumidityKind.
        value: Relative humidity fraction, wetbulb [K], dewpoint [K] or
            humidity ratio [kg/kg], according to ``kind``.

    Raises:
        InvalidHumidityKind: For an unrecognised ``kind``.
        InvalidTemperature: If a temperature needed for saturation
            pressure is out of range.
        NonPhysicalInput: For non-positive pressure, vapour pressure at or
            above total pressure, or a negative/non-finite result.
    """
    kind = HumidityKind.parse(kind)

    if kind is HumidityKind.W:
        return value

    _check_pressure(p)
    if kind is HumidityKind.RH:
        w = _ratio_from_partial(p, value * saturation_pressure(t))
    elif kind is HumidityKind.DPT:
        w = _ratio_from_partial(p, saturation_pressure(value))
    else:
        w = wetbulb_humidity_ratio(p, t, value)

    if not math.isfinite(w) or w < 0:
        raise NonPhysicalInput(
            f"{kind.name} = {value} gives non-physical humidity ratio {w} "
            f"at p = {p} kPa, t = {t} K"
        )
    return w


def vapor_partial_pressure(p: float, w: float) -> float:
    """Partial pressure of water vapour [kPa] for humidity ratio w."""
    if w == 0:
        return 0.0
    return p / (MW_RATIO / w + 1.0)


def relative_humidity(p: float, t: float, w: float) -> float:
    """Relative humidity fraction of air with humidity ratio w at (p, t)."""
    _check_pressure(p)
    return vapor_partial_pressure(p, w) / saturation_pressure(t)
