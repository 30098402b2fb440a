"""
Composes the FOV calculator with camera classification and the camera sink.

One FovController serves both camera categories. Each category keeps its
own enabled flag, configuration source and smoothing history.
"""
import logging
from typing import Callable, Dict, Mapping, Optional

from PyQt5 import QtCore

from .calculator import FovCalculator
from .config import FovConfig
from .model import CameraCategory, CameraMode, DrivableCamera, TelemetrySample
from telemetry.model import TelemetryFrame

logger = logging.getLogger(__name__)

CHASE_CAMERAS = frozenset({DrivableCamera.CHASE, DrivableCamera.CHASE2})
ADJUSTABLE_CATEGORIES = (CameraCategory.FIRST_PERSON, CameraCategory.THIRD_PERSON)


def classify_camera(mode: Optional[CameraMode],
                    drivable_camera: Optional[DrivableCamera] = None) -> CameraCategory:
    """Map the host camera mode onto the category whose FOV we drive."""
    if mode == CameraMode.COCKPIT:
        return CameraCategory.FIRST_PERSON
    if mode == CameraMode.DRIVABLE:
        if drivable_camera in CHASE_CAMERAS:
            return CameraCategory.THIRD_PERSON
        return CameraCategory.FIRST_PERSON
    return CameraCategory.OTHER


# ===================== CAMERA SINKS =====================

class CameraSink:
    """Receives FOV values for the host's cameras."""

    def set_fov(self, category: CameraCategory, fov: float) -> None:
        raise NotImplementedError


class LoggingCameraSink(CameraSink):
    """Sink used when no host camera is attached; keeps the last value per category."""

    def __init__(self):
        self.last_fov: Dict[CameraCategory, float] = {}

    def set_fov(self, category: CameraCategory, fov: float) -> None:
        self.last_fov[category] = fov
        logger.debug("%s FOV -> %.2f", category.value, fov)


class QtCameraSink(QtCore.QObject, CameraSink):
    """Forwards FOV values as a Qt signal so the UI can display them."""
    fov_changed = QtCore.pyqtSignal(str, float)  # (category, fov)

    def set_fov(self, category: CameraCategory, fov: float) -> None:
        self.fov_changed.emit(category.value, fov)


# ===================== CONTROLLER =====================

class FovController:
    """
    Drives per-category FOV from telemetry frames.

    Args:
        config_source: Callable returning the current FovConfig for a category.
            Called at the start of every update so settings edits made
            between frames apply on the next frame.
        host_defaults: The host's original FOV per category, captured once at
            startup; restored when a category is disabled
        sink: Where computed FOV values go (a LoggingCameraSink if omitted)
        enabled: Initial enabled flag per category (all enabled if omitted)
    """

    def __init__(
        self,
        config_source: Callable[[CameraCategory], FovConfig],
        host_defaults: Mapping[CameraCategory, float],
        sink: Optional[CameraSink] = None,
        enabled: Optional[Mapping[CameraCategory, bool]] = None,
    ):
        self.config_source = config_source
        self.sink = sink if sink is not None else LoggingCameraSink()
        self.host_defaults = dict(host_defaults)
        self.enabled = {c: True for c in ADJUSTABLE_CATEGORIES}
        if enabled:
            self.enabled.update(enabled)
        self.calculators = {
            c: FovCalculator.for_config(config_source(c)) for c in ADJUSTABLE_CATEGORIES
        }
        self.active_category = CameraCategory.OTHER

    def is_enabled(self, category: CameraCategory) -> bool:
        return self.enabled.get(category, False)

    def set_enabled(self, category: CameraCategory, enabled: bool):
        if category not in self.calculators:
            raise ValueError(f"Camera category '{category.value}' has no adjustable FOV")
        if self.enabled[category] == enabled:
            return
        self.enabled[category] = enabled
        logger.info("%s dynamic FOV %s", category.value, "enabled" if enabled else "disabled")
        if not enabled:
            self.sink.set_fov(category, self.host_defaults[category])
        self.reset(category)

    def reset(self, category: CameraCategory):
        """Forget the smoothing history of a category."""
        self.calculators[category].reset(config=self.config_source(category))

    def update(self, frame: TelemetryFrame) -> Optional[float]:
        """
        Compute and apply the FOV for one telemetry frame.

        Returns the FOV sent to the sink, or None when the active camera is
        not adjustable or its category is disabled.
        """
        category = classify_camera(frame.camera_mode, frame.drivable_camera)
        if category != self.active_category:
            logger.debug("Camera category changed: %s -> %s",
                         self.active_category.value, category.value)
            self.active_category = category

        if category is CameraCategory.OTHER or not self.is_enabled(category):
            return None

        config = self.config_source(category)
        sample = TelemetrySample(
            speed_kmh=frame.speed_kmh,
            longitudinal_g=frame.longitudinal_g,
            camera_category=category,
        )
        fov = self.calculators[category].update(config, sample)
        self.sink.set_fov(category, fov)
        return fov
