"""
Per-frame FOV calculation.

compute() runs the four stages in a fixed order:
    speed curve -> g-force adjustment -> clamp -> smoothing
Reordering them changes the result.
"""
import logging
import math
from typing import Optional, Tuple

from .config import FovConfig, GForceProfile
from .model import CalculatorState, TelemetrySample

logger = logging.getLogger(__name__)


def _power(base: float, exponent: float) -> float:
    # 0 ** negative would raise; a zero input contributes nothing
    if base == 0.0:
        return 0.0
    return base ** exponent


def fov_range(config: FovConfig) -> Tuple[float, float]:
    """Effective (low, high) FOV range, tolerating swapped bounds."""
    return min(config.min_fov, config.max_fov), max(config.min_fov, config.max_fov)


def output_bounds(config: FovConfig) -> Tuple[float, float]:
    """Bounds every computed FOV falls within."""
    low, high = fov_range(config)
    return low - max(config.deceleration_overshoot, 0.0), high


def speed_fov(config: FovConfig, speed_kmh: float) -> float:
    low, high = fov_range(config)
    if config.max_speed <= 0:
        # Misconfigured top speed: sit at the top of the curve
        ratio = 1.0
    else:
        ratio = min(max(speed_kmh, 0.0) / config.max_speed, 1.0)
    curved = _power(ratio, config.speed_curve_exponent)
    if curved >= 1.0:
        return high
    return low + curved * (high - low)


def g_force_fov(config: FovConfig, fov: float, longitudinal_g: float) -> float:
    if not config.g_force_enabled:
        return fov

    factor = 1 + _power(abs(longitudinal_g), config.g_force_curve_exponent) * config.g_force_factor_multiplier

    if config.g_force_profile is GForceProfile.DIRECTIONAL:
        if longitudinal_g > 0:
            fov = fov + longitudinal_g * config.g_force_positive_factor
        elif longitudinal_g < 0:
            fov = fov - abs(longitudinal_g) * config.g_force_negative_factor

    return fov * factor


def clamp_fov(config: FovConfig, fov: float) -> float:
    lower, upper = output_bounds(config)
    return max(lower, min(fov, upper))


def smoothing_active(config: FovConfig) -> bool:
    return config.smoothing_enabled and config.smoothing_factor > 0


def smooth_fov(config: FovConfig, fov: float, previous_fov: float) -> float:
    """Cap the change from the previous frame at `smoothing_factor`."""
    delta = fov - previous_fov
    if abs(delta) > config.smoothing_factor:
        fov = previous_fov + math.copysign(config.smoothing_factor, delta)
    return fov


def compute(config: FovConfig, sample: TelemetrySample,
            state: CalculatorState) -> Tuple[float, CalculatorState]:
    """
    Compute the target FOV for one frame.

    Args:
        config: Configuration snapshot for the sample's camera category
        sample: Telemetry for this frame
        state: Smoothing history from the previous frame

    Returns:
        (fov, new_state). With smoothing inactive the returned state is the
        input state unchanged.
    """
    if not (math.isfinite(sample.speed_kmh) and math.isfinite(sample.longitudinal_g)):
        logger.debug("Non-finite telemetry (speed=%s, g=%s), holding FOV",
                     sample.speed_kmh, sample.longitudinal_g)
        return clamp_fov(config, state.previous_fov), state

    fov = speed_fov(config, sample.speed_kmh)
    fov = g_force_fov(config, fov, sample.longitudinal_g)
    fov = clamp_fov(config, fov)

    if smoothing_active(config):
        # History from before a bounds edit is pulled inside the current range
        fov = smooth_fov(config, fov, clamp_fov(config, state.previous_fov))
        return fov, CalculatorState(previous_fov=fov)

    return fov, state


class FovCalculator:
    """
    Holds the smoothing history for one camera category.

    The configuration is not stored; callers pass the current snapshot each
    frame so edits made between frames take effect immediately.
    """

    def __init__(self, initial_fov: float):
        self.state = CalculatorState(previous_fov=initial_fov)

    @classmethod
    def for_config(cls, config: FovConfig) -> "FovCalculator":
        return cls(fov_range(config)[0])

    @property
    def previous_fov(self) -> float:
        return self.state.previous_fov

    def update(self, config: FovConfig, sample: TelemetrySample) -> float:
        fov, self.state = compute(config, sample, self.state)
        return fov

    def reset(self, fov: Optional[float] = None, config: Optional[FovConfig] = None):
        """Re-seed the smoothing history, from `fov` or the config's minimum."""
        if fov is None:
            if config is None:
                raise ValueError("reset() needs either a FOV value or a config")
            fov = fov_range(config)[0]
        self.state = CalculatorState(previous_fov=fov)
