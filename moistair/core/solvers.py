"""Implicit psychrometric inversions.

Dewpoint and wetbulb temperatures have no closed form in terms of the
humidity ratio; both are found with a bracketed Brent root finder.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from scipy.optimize import brentq

from moistair.core.config import DEFAULT_SOLVER_SETTINGS, SolverSettings
from moistair.core.errors import ConvergenceFailure, NonPhysicalInput, RootNotBracketed
from moistair.core.humidity import (
    HumidityKind,
    humidity_ratio,
    vapor_partial_pressure,
    wetbulb_humidity_ratio,
)
from moistair.core.saturation import saturation_pressure
from moistair.utils.constants import T_SAT_MIN

logger = logging.getLogger(__name__)

# Keeps the lowest dewpoint bracket inside the open saturation domain
_DOMAIN_MARGIN = 1e-6  # K

# Vapour pressure this close to p_ws(t) is treated as saturation
_SATURATION_RTOL = 1e-12


def _check_not_above_drybulb(name: str, value: float, t: float) -> None:
    if value > t:
        raise NonPhysicalInput(f"{name} {value} K is above drybulb temperature {t} K")


def find_root(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    settings: SolverSettings | None = None,
) -> float:
    """Find a root of ``func`` in [lower, upper].

    Args:
        func: Continuous scalar function.
        lower: Lower bracket end.
        upper: Upper bracket end.
        settings: Tolerances and iteration cap (defaults if None).

    Returns:
        The root.

    Raises:
        RootNotBracketed: If func(lower) and func(upper) share a sign.
        ConvergenceFailure: If the iteration cap is reached first.
    """
    cfg = settings or DEFAULT_SOLVER_SETTINGS

    f_lower = func(lower)
    f_upper = func(upper)
    if f_lower == 0.0:
        return lower
    if f_upper == 0.0:
        return upper
    if math.copysign(1.0, f_lower) == math.copysign(1.0, f_upper):
        raise RootNotBracketed(lower, upper, f_lower, f_upper)

    root, info = brentq(
        func,
        lower,
        upper,
        xtol=cfg.xtol,
        rtol=cfg.rtol,
        maxiter=cfg.maxiter,
        full_output=True,
        disp=False,
    )
    if not info.converged:
        raise ConvergenceFailure(info.iterations, root)

    logger.debug(
        "Root %.10g in [%.6g, %.6g] after %d iterations",
        root, lower, upper, info.iterations,
    )
    return root


def dewpoint(
    p: float,
    t: float,
    kind: HumidityKind | str,
    value: float,
    settings: SolverSettings | None = None,
) -> float:
    """Dewpoint temperature [K] of moist air.

    Solves saturation_pressure(t_dpt) = p_w on (t − bracket_span, t), the
    lower end clipped to the saturation correlation domain.

    Args:
        p: Total pressure [kPa].
        t: Drybulb temperature [K].
        kind: ``"rh"``, ``"wbt"`` or ``"w"``. ``"dpt"`` returns ``value``.
        value: Value of the humidity input.
        settings: Root finder settings.

    Raises:
        NonPhysicalInput: If the humidity ratio is zero (dry air has no
            dewpoint).
    """
    kind = HumidityKind.parse(kind)
    cfg = settings or DEFAULT_SOLVER_SETTINGS

    w = humidity_ratio(p, t, kind, value)
    if kind is HumidityKind.DPT:
        _check_not_above_drybulb("Dewpoint", value, t)
        return value
    if not w > 0:
        raise NonPhysicalInput(f"Dewpoint is undefined for humidity ratio {w}")

    p_w = vapor_partial_pressure(p, w)
    # Saturated air
    if math.isclose(p_w, saturation_pressure(t), rel_tol=_SATURATION_RTOL):
        return t

    lower = max(t - cfg.bracket_span, T_SAT_MIN + _DOMAIN_MARGIN)
    logger.debug("Dewpoint search: p_w = %.6g kPa, bracket [%.4f, %.4f]", p_w, lower, t)

    return find_root(lambda x: saturation_pressure(x) - p_w, lower, t, cfg)


def wetbulb(
    p: float,
    t: float,
    kind: HumidityKind | str,
    value: float,
    settings: SolverSettings | None = None,
) -> float:
    """Wetbulb temperature [K] of moist air.

    Solves humidity_ratio(p, t, "wbt", t_wbt) = w between the dewpoint
    and the drybulb temperature.

    Args:
        p: Total pressure [kPa].
        t: Drybulb temperature [K].
        kind: ``"rh"``, ``"dpt"`` or ``"w"``. ``"wbt"`` returns ``value``.
        value: Value of the humidity input.
        settings: Root finder settings.
    """
    kind = HumidityKind.parse(kind)
    cfg = settings or DEFAULT_SOLVER_SETTINGS

    w = humidity_ratio(p, t, kind, value)
    if kind is HumidityKind.WBT:
        _check_not_above_drybulb("Wetbulb", value, t)
        return value

    if kind is HumidityKind.DPT:
        dpt = value
    else:
        dpt = dewpoint(p, t, kind, value, cfg)

    _check_not_above_drybulb("Dewpoint", dpt, t)
    if dpt == t:
        return t

    # Above the boiling point at p the saturated humidity ratio at the
    # bulb is undefined; the wetbulb lies below that temperature.
    upper = t
    if saturation_pressure(t) >= p:
        t_boil = find_root(lambda x: saturation_pressure(x) - p, dpt, t, cfg)
        upper = t_boil - _DOMAIN_MARGIN

    logger.debug("Wetbulb search: w = %.6g, bracket [%.4f, %.4f]", w, dpt, upper)
    return find_root(lambda x: wetbulb_humidity_ratio(p, t, x) - w, dpt, upper, cfg)
