"""MoistAir — psychrometric properties of moist air (ASHRAE, SI units)."""

__app_name__ = "moistair"
__version__ = "0.1.0"

from moistair.core.errors import (  # noqa: E402
    ConvergenceFailure,
    InvalidHumidityKind,
    InvalidTemperature,
    MoistAirError,
    NonPhysicalInput,
    RootNotBracketed,
)
from moistair.core.humidity import HumidityKind, humidity_ratio, relative_humidity  # noqa: E402
from moistair.core.properties import (  # noqa: E402
    compute_moist_air_state,
    density_moistair,
    enthalpy_moistair,
    specific_volume_moistair,
)
from moistair.core.saturation import saturation_pressure  # noqa: E402
from moistair.core.solvers import dewpoint, wetbulb  # noqa: E402

__all__ = [
    "__app_name__",
    "__version__",
    "ConvergenceFailure",
    "HumidityKind",
    "InvalidHumidityKind",
    "InvalidTemperature",
    "MoistAirError",
    "NonPhysicalInput",
    "RootNotBracketed",
    "compute_moist_air_state",
    "density_moistair",
    "dewpoint",
    "enthalpy_moistair",
    "humidity_ratio",
    "relative_humidity",
    "saturation_pressure",
    "specific_volume_moistair",
    "wetbulb",
]
