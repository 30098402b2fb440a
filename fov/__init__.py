"""
Speed and g-force driven camera FOV.
"""
from fov.model import (
    CalculatorState,
    CameraCategory,
    CameraMode,
    DrivableCamera,
    TelemetrySample,
)
from fov.exceptions import ConfigurationError, FovError, TelemetryError, UnknownSettingError
from fov.config import FIELDS, ControlType, FieldDescriptor, FovConfig, GForceProfile
from fov.calculator import FovCalculator, compute

__all__ = [
    'CalculatorState',
    'CameraCategory',
    'CameraMode',
    'DrivableCamera',
    'TelemetrySample',
    'FovError',
    'ConfigurationError',
    'UnknownSettingError',
    'TelemetryError',
    'FIELDS',
    'ControlType',
    'FieldDescriptor',
    'FovConfig',
    'GForceProfile',
    'FovCalculator',
    'compute',
]
