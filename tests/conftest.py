"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is in path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fov.config import FovConfig, GForceProfile
from fov.model import CalculatorState, CameraCategory


@pytest.fixture
def linear_config():
    """80-110 deg over 0-300 km/h, no g-force, no smoothing."""
    return FovConfig(
        min_fov=80.0,
        max_fov=110.0,
        max_speed=300.0,
        speed_curve_exponent=1.0,
        g_force_enabled=False,
        smoothing_enabled=False,
    )


@pytest.fixture
def directional_config():
    return FovConfig(
        min_fov=80.0,
        max_fov=110.0,
        max_speed=300.0,
        g_force_enabled=True,
        g_force_profile=GForceProfile.DIRECTIONAL,
        g_force_factor_multiplier=0.05,
        g_force_curve_exponent=1.5,
        g_force_positive_factor=0.5,
        g_force_negative_factor=5.0,
        smoothing_enabled=False,
        deceleration_overshoot=10.0,
    )


@pytest.fixture
def initial_state():
    return CalculatorState(previous_fov=80.0)


@pytest.fixture
def host_defaults():
    return {
        CameraCategory.FIRST_PERSON: 56.0,
        CameraCategory.THIRD_PERSON: 60.0,
    }


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "dynamic_fov.ini"
