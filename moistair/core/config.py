"""Solver settings and state persistence for MoistAir.

Holds the root-finder configuration shared by the dewpoint and wetbulb
solvers, and saves/loads computed moist air states as JSON.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


# --- Solver configuration ---


@dataclass(frozen=True)
class SolverSettings:
    """Convergence policy for the bracketed root finder."""

    xtol: float = 1e-10  # K — absolute tolerance on the root
    rtol: float = 4 * np.finfo(float).eps  # relative tolerance on the root
    maxiter: int = 100
    bracket_span: float = 100.0  # K — dewpoint search depth below drybulb


DEFAULT_SOLVER_SETTINGS = SolverSettings()


# --- State metadata ---


@dataclass
class ProjectMeta:
    """Metadata stored alongside a saved state."""

    name: str = "Untitled"
    description: str = ""
    author: str = ""
    version: str = "0.1.0"
    created: str = ""
    modified: str = ""
    unit_system: str = "SI"  # kPa, K, kJ/kg

    def touch(self) -> None:
        """Update the modified timestamp."""
        self.modified = datetime.now(timezone.utc).isoformat()


@dataclass
class MoistAirState:
    """Complete psychrometric state at one pressure and drybulb temperature."""

    pressure: float  # kPa
    drybulb: float  # K
    humidity_ratio: float  # kg/kg dry air
    relative_humidity: float  # fraction
    saturation_pressure: float  # kPa at drybulb
    vapor_pressure: float  # kPa
    dewpoint: float  # K
    wetbulb: float  # K
    density: float  # kg/m³
    specific_volume: float  # m³/kg dry air
    enthalpy: float  # kJ/kg dry air

    meta: ProjectMeta = field(default_factory=ProjectMeta)


# --- JSON serialization ---


class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        return super().default(obj)


def save_state_json(state: MoistAirState, path: str | Path) -> None:
    """Save a moist air state to a JSON file."""
    path = Path(path)
    if not state.meta.created:
        state.meta.created = datetime.now(timezone.utc).isoformat()
    state.meta.touch()

    with open(path, "w") as f:
        json.dump(asdict(state), f, indent=2, cls=_NumpyEncoder)

    logger.info("Saved state to %s", path)


def load_state_json(path: str | Path) -> MoistAirState:
    """Load a moist air state from a JSON file."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    meta = ProjectMeta(**data.pop("meta", {}))
    return MoistAirState(meta=meta, **data)
