"""Exception hierarchy for moist air property calculations."""

from __future__ import annotations


class MoistAirError(Exception):
    """Base class for all MoistAir calculation errors."""


class InvalidTemperature(MoistAirError, ValueError):
    """Raised when a temperature lies outside the saturation correlation domain."""

    def __init__(self, temperature: float, low: float, high: float):
        self.temperature = temperature
        self.low = low
        self.high = high
        super().__init__(
            f"Temperature {temperature} K is outside the valid range ({low}, {high}) K"
        )


class InvalidHumidityKind(MoistAirError, ValueError):
    """Raised for an unrecognised humidity input tag."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(
            f"Unknown humidity kind {kind!r}: use 'rh' for relative humidity, "
            "'wbt' for wet bulb temperature, 'dpt' for dew point temperature "
            "or 'w' for humidity ratio"
        )


class NonPhysicalInput(MoistAirError, ValueError):
    """Raised when inputs lead to a degenerate or non-physical state."""


class RootNotBracketed(MoistAirError):
    """Raised when a search interval does not contain a sign change."""

    def __init__(self, lower: float, upper: float, f_lower: float, f_upper: float):
        self.lower = lower
        self.upper = upper
        self.f_lower = f_lower
        self.f_upper = f_upper
        super().__init__(
            f"Root not bracketed in [{lower}, {upper}]: "
            f"f(lower) = {f_lower:.6g}, f(upper) = {f_upper:.6g}"
        )


class ConvergenceFailure(MoistAirError):
    """Raised when the root finder exhausts its iteration budget."""

    def __init__(self, iterations: int, estimate: float):
        self.iterations = iterations
        self.estimate = estimate
        super().__init__(
            f"Root finder did not converge after {iterations} iterations "
            f"(last estimate {estimate})"
        )
