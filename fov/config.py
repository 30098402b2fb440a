"""
FOV configuration record and the declarative description of its fields.

`FIELDS` drives both the settings store (defaults, bounds, persistence
types) and the generic settings form in the UI.
"""
import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import ConfigurationError, UnknownSettingError


# =============================================================================
# Defaults
# =============================================================================

FOV_RANGE_OVER_HOST_DEFAULT = 30.0

DEFAULT_MAX_SPEED = 300.0
DEFAULT_SPEED_CURVE_EXPONENT = 1.0
DEFAULT_G_FORCE_ENABLED = True
DEFAULT_G_FORCE_FACTOR_MULTIPLIER = 0.05
DEFAULT_G_FORCE_CURVE_EXPONENT = 1.5
DEFAULT_G_FORCE_POSITIVE_FACTOR = 0.5
DEFAULT_G_FORCE_NEGATIVE_FACTOR = 5.0
DEFAULT_SMOOTHING_ENABLED = True
DEFAULT_SMOOTHING_FACTOR = 0.10
DEFAULT_DECELERATION_OVERSHOOT = 10.0


class GForceProfile(str, Enum):
    MULTIPLICATIVE = "multiplicative"  # factor only
    DIRECTIONAL = "directional"        # offset by sign of g, then factor

    @classmethod
    def parse(cls, value) -> "GForceProfile":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError([f"unknown g-force profile '{value}'"]) from None


@dataclass(frozen=True)
class FovConfig:
    min_fov: float
    max_fov: float
    max_speed: float = DEFAULT_MAX_SPEED
    speed_curve_exponent: float = DEFAULT_SPEED_CURVE_EXPONENT
    g_force_enabled: bool = DEFAULT_G_FORCE_ENABLED
    g_force_profile: GForceProfile = GForceProfile.DIRECTIONAL
    g_force_factor_multiplier: float = DEFAULT_G_FORCE_FACTOR_MULTIPLIER
    g_force_curve_exponent: float = DEFAULT_G_FORCE_CURVE_EXPONENT
    g_force_positive_factor: float = DEFAULT_G_FORCE_POSITIVE_FACTOR
    g_force_negative_factor: float = DEFAULT_G_FORCE_NEGATIVE_FACTOR
    smoothing_enabled: bool = DEFAULT_SMOOTHING_ENABLED
    smoothing_factor: float = DEFAULT_SMOOTHING_FACTOR
    deceleration_overshoot: float = DEFAULT_DECELERATION_OVERSHOOT

    @classmethod
    def for_host_fov(cls, host_fov: float, **overrides) -> "FovConfig":
        """Default configuration seeded from the camera's original FOV."""
        values = dict(min_fov=host_fov, max_fov=host_fov + FOV_RANGE_OVER_HOST_DEFAULT)
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], base: "FovConfig") -> "FovConfig":
        """
        Build a config from loosely typed key/value pairs.

        Missing keys fall back to `base`; values are coerced to the field's
        type and clamped to its bounds. Unknown keys raise.
        """
        coerced = {}
        for name, value in values.items():
            descriptor = field_descriptor(name)
            coerced[name] = descriptor.coerce(value)
        return replace(base, **coerced)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def clamped(self) -> "FovConfig":
        """Copy with every numeric field clamped into its descriptor bounds."""
        return replace(self, **{d.name: d.coerce(getattr(self, d.name)) for d in FIELDS})

    def validate(self) -> List[str]:
        """List configuration problems. An empty list means the config is sound."""
        issues = []
        if not self.max_speed > 0:
            issues.append(f"max_speed must be positive (got {self.max_speed})")
        if self.min_fov > self.max_fov:
            issues.append(f"min_fov {self.min_fov} is above max_fov {self.max_fov}")
        for descriptor in FIELDS:
            if descriptor.control is not ControlType.SLIDER:
                continue
            value = getattr(self, descriptor.name)
            if not math.isfinite(value):
                issues.append(f"{descriptor.name} is not finite")
            elif not descriptor.minimum <= value <= descriptor.maximum:
                issues.append(
                    f"{descriptor.name}={value} outside "
                    f"[{descriptor.minimum}, {descriptor.maximum}]"
                )
        return issues

    def check(self) -> "FovConfig":
        issues = self.validate()
        if issues:
            raise ConfigurationError(issues)
        return self


# =============================================================================
# Field descriptors
# =============================================================================

def to_bool(value) -> bool:
    """Interpret a stored flag; INI-backed settings hand booleans back as strings."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ControlType(str, Enum):
    SLIDER = "slider"
    CHECKBOX = "checkbox"
    CHOICE = "choice"


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    label: str
    control: ControlType
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    decimals: int = 0
    advanced: bool = False
    choices: tuple = ()

    def coerce(self, value):
        """Convert a stored/programmatic value to this field's type, clamped."""
        if self.control is ControlType.CHECKBOX:
            return to_bool(value)
        if self.control is ControlType.CHOICE:
            return GForceProfile.parse(value)
        value = float(value)
        if math.isnan(value):
            return float(self.minimum)
        return float(max(self.minimum, min(value, self.maximum)))


FIELDS = (
    FieldDescriptor("min_fov", "Minimum FOV", ControlType.SLIDER, 10, 150),
    FieldDescriptor("max_fov", "Maximum FOV", ControlType.SLIDER, 10, 150),
    FieldDescriptor("max_speed", "Maximum Speed", ControlType.SLIDER, 10, 500),
    FieldDescriptor("speed_curve_exponent", "Speed Curve Exponent", ControlType.SLIDER, 0.1, 4, decimals=2),
    FieldDescriptor("g_force_enabled", "Enable G-Force Effects", ControlType.CHECKBOX),
    FieldDescriptor("g_force_profile", "G-Force Profile", ControlType.CHOICE, advanced=True,
                    choices=tuple(GForceProfile)),
    FieldDescriptor("g_force_factor_multiplier", "G-Force Factor Multiplier", ControlType.SLIDER, 0, 0.1,
                    decimals=2, advanced=True),
    FieldDescriptor("g_force_curve_exponent", "G-Force Curve Exponent", ControlType.SLIDER, 1, 2,
                    decimals=2, advanced=True),
    FieldDescriptor("g_force_positive_factor", "Acceleration Factor", ControlType.SLIDER, 0, 1,
                    decimals=2, advanced=True),
    FieldDescriptor("g_force_negative_factor", "Deceleration Factor", ControlType.SLIDER, 0, 10,
                    advanced=True),
    FieldDescriptor("smoothing_enabled", "Enable Smoothing", ControlType.CHECKBOX, advanced=True),
    FieldDescriptor("smoothing_factor", "Smoothing Factor Precision", ControlType.SLIDER, 0, 0.5,
                    decimals=2, advanced=True),
    FieldDescriptor("deceleration_overshoot", "Deceleration Overshoot Factor", ControlType.SLIDER, 0, 20,
                    advanced=True),
)

_FIELDS_BY_NAME = {d.name: d for d in FIELDS}


def field_descriptor(name: str) -> FieldDescriptor:
    try:
        return _FIELDS_BY_NAME[name]
    except KeyError:
        raise UnknownSettingError(name) from None
