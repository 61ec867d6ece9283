"""Tests for solver settings and state persistence."""

import json

import numpy as np
import pytest

from moistair.core.config import (
    DEFAULT_SOLVER_SETTINGS,
    MoistAirState,
    ProjectMeta,
    SolverSettings,
    load_state_json,
    save_state_json,
)
from moistair.core.properties import compute_moist_air_state


class TestSolverSettings:
    def test_defaults(self):
        assert DEFAULT_SOLVER_SETTINGS.maxiter == 100
        assert DEFAULT_SOLVER_SETTINGS.bracket_span == pytest.approx(100.0)
        assert DEFAULT_SOLVER_SETTINGS.xtol > 0

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_SOLVER_SETTINGS.maxiter = 5

    def test_override(self):
        cfg = SolverSettings(maxiter=10)
        assert cfg.maxiter == 10
        assert cfg.xtol == DEFAULT_SOLVER_SETTINGS.xtol


class TestProjectMeta:
    def test_meta_touch(self):
        meta = ProjectMeta(name="Test")
        meta.touch()
        assert meta.modified != ""


class TestJsonPersistence:
    def test_save_and_load(self, tmp_path):
        state = compute_moist_air_state(
            101.325, 298.15, "rh", 0.5, meta=ProjectMeta(name="Office", author="HVAC")
        )
        path = tmp_path / "state.json"
        save_state_json(state, path)

        loaded = load_state_json(path)
        assert isinstance(loaded, MoistAirState)
        assert loaded.meta.name == "Office"
        assert loaded.meta.author == "HVAC"
        assert loaded.meta.created != ""
        assert loaded.humidity_ratio == pytest.approx(state.humidity_ratio)
        assert loaded.wetbulb == pytest.approx(state.wetbulb)

    def test_numpy_serialization(self, tmp_path):
        """Numpy scalars should be serialized as plain numbers."""
        state = compute_moist_air_state(101.325, 298.15, "w", np.float64(0.01))
        path = tmp_path / "state_np.json"
        save_state_json(state, path)

        with open(path) as f:
            data = json.load(f)
        assert data["humidity_ratio"] == pytest.approx(0.01)
        assert data["meta"]["unit_system"] == "SI"
