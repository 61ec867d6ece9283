"""Derived properties of moist air: density, specific volume and enthalpy.

All entry points accept the same (p, t, kind, value) inputs as
:func:`moistair.core.humidity.humidity_ratio`.
"""

from __future__ import annotations

from moistair.core.config import MoistAirState, ProjectMeta, SolverSettings
from moistair.core.humidity import (
    HumidityKind,
    humidity_ratio,
    relative_humidity,
    vapor_partial_pressure,
)
from moistair.core.saturation import saturation_pressure
from moistair.core.solvers import dewpoint, wetbulb
from moistair.utils.constants import (
    CP_DRY_AIR,
    CP_VAPOR,
    H_FG_0,
    R_DRY_AIR,
    T_CELSIUS_OFFSET,
    VOLUME_FACTOR,
)


def _specific_volume(p: float, t: float, w: float) -> float:
    return R_DRY_AIR * t * (1.0 + VOLUME_FACTOR * w) / p


def _enthalpy(t: float, w: float) -> float:
    tc = t - T_CELSIUS_OFFSET
    return CP_DRY_AIR * tc + w * (H_FG_0 + CP_VAPOR * tc)


def specific_volume_moistair(
    p: float, t: float, kind: HumidityKind | str, value: float
) -> float:
    """Specific volume of moist air [m³/kg dry air].

    v = 0.287042 · t · (1 + 1.607858 · w) / p
    """
    w = humidity_ratio(p, t, kind, value)
    return _specific_volume(p, t, w)


def density_moistair(p: float, t: float, kind: HumidityKind | str, value: float) -> float:
    """Density of moist air [kg/m³].

    Args:
        p: Total pressure [kPa].
        t: Drybulb temperature [K].
        kind: ``"rh"``, ``"wbt"``, ``"dpt"`` or ``"w"``.
        value: Value of the humidity input.

    Returns:
        1 / v, the reciprocal of the specific volume per kg dry air.
    """
    return 1.0 / specific_volume_moistair(p, t, kind, value)


def enthalpy_moistair(p: float, t: float, kind: HumidityKind | str, value: float) -> float:
    """Specific enthalpy of moist air [kJ/kg dry air], zero at 0 °C dry air.

    h = 1.006 · (t − 273.15) + w · (2501 + 1.86 · (t − 273.15))
    """
    w = humidity_ratio(p, t, kind, value)
    return _enthalpy(t, w)


def compute_moist_air_state(
    p: float,
    t: float,
    kind: HumidityKind | str,
    value: float,
    settings: SolverSettings | None = None,
    meta: ProjectMeta | None = None,
) -> MoistAirState:
    """Evaluate every psychrometric property at a single state point.

    Args:
        p: Total pressure [kPa].
        t: Drybulb temperature [K].
        kind: Humidity input tag or HumidityKind.
        value: Value of the humidity input.
        settings: Root finder settings for dewpoint/wetbulb.
        meta: Optional metadata attached to the result.

    Returns:
        MoistAirState with all properties populated.
    """
    kind = HumidityKind.parse(kind)
    w = humidity_ratio(p, t, kind, value)

    # Solve from the canonical humidity ratio so both solvers see the
    # same w regardless of the input representation.
    dpt = value if kind is HumidityKind.DPT else dewpoint(p, t, HumidityKind.W, w, settings)
    wbt = value if kind is HumidityKind.WBT else wetbulb(p, t, HumidityKind.DPT, dpt, settings)

    v = _specific_volume(p, t, w)
    return MoistAirState(
        pressure=p,
        drybulb=t,
        humidity_ratio=w,
        relative_humidity=relative_humidity(p, t, w),
        saturation_pressure=saturation_pressure(t),
        vapor_pressure=vapor_partial_pressure(p, w),
        dewpoint=dpt,
        wetbulb=wbt,
        density=1.0 / v,
        specific_volume=v,
        enthalpy=_enthalpy(t, w),
        meta=meta or ProjectMeta(),
    )
