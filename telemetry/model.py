# telemetry/model.py
from dataclasses import dataclass
from typing import Optional

from fov.model import CameraMode, DrivableCamera


@dataclass
class TelemetryFrame:
    t: float                    # seconds since source start
    speed_kmh: float            # km/h
    longitudinal_g: float       # accG z: > 0 accelerating, < 0 braking
    camera_mode: Optional[CameraMode] = CameraMode.COCKPIT
    drivable_camera: Optional[DrivableCamera] = None
