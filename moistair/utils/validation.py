"""Input plausibility checks for MoistAir."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from moistair.core.errors import InvalidHumidityKind
from moistair.core.humidity import HumidityKind
from moistair.utils.constants import T_CELSIUS_OFFSET, T_SAT_MAX, T_SAT_MIN

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value falls within [low, high]."""
    if value < low or value > high:
        result.add(
            severity, name, f"{name} = {value} is outside [{low}, {high}]",
            value=value, limit=(low, high),
        )


def validate_temperature(name: str, value: float, result: ValidationResult) -> None:
    """Validate a temperature against the open saturation correlation domain."""
    if not (T_SAT_MIN < value < T_SAT_MAX):
        result.error(
            name,
            f"{name} = {value} K is outside the saturation range ({T_SAT_MIN}, {T_SAT_MAX}) K",
            value=value,
            limit=(T_SAT_MIN, T_SAT_MAX),
        )


def validate_state_inputs(
    p: float, t: float, kind: HumidityKind | str, value: float
) -> ValidationResult:
    """Run plausibility checks on a (p, t, kind, value) input set.

    Flags problems before any property evaluation so that callers (the
    CLI in particular) can report all of them at once.
    """
    result = ValidationResult()

    validate_positive("pressure", p, result)
    if p > 0:
        validate_range("pressure", p, 50.0, 110.0, result, Severity.WARNING)

    validate_temperature("drybulb", t, result)
    if T_SAT_MIN < t < T_CELSIUS_OFFSET:
        result.info("drybulb", f"Drybulb {t} K is below freezing; wetbulb assumes an ice-covered bulb")

    try:
        kind = HumidityKind.parse(kind)
    except InvalidHumidityKind as exc:
        result.error("kind", str(exc), value=kind)
        return result

    if kind is HumidityKind.RH:
        validate_range("relative_humidity", value, 0.0, 1.0, result)
    elif kind is HumidityKind.W:
        if value < 0:
            result.error("humidity_ratio", f"humidity_ratio must be >= 0, got {value}", value=value)
        elif value > 0.1:
            result.warning("humidity_ratio", f"Humidity ratio {value} kg/kg is unusually high")
    else:
        name = "wetbulb" if kind is HumidityKind.WBT else "dewpoint"
        validate_temperature(name, value, result)
        if value > t:
            result.error(name, f"{name} {value} K exceeds drybulb {t} K", value=value, limit=t)

    for msg in result.messages:
        logger.debug("%s: %s", msg.severity.value, msg.message)
    return result
