"""
Core data types shared by the FOV calculator and its collaborators.
"""
from dataclasses import dataclass
from enum import Enum, IntEnum


class CameraCategory(str, Enum):
    FIRST_PERSON = "first_person"
    THIRD_PERSON = "third_person"
    OTHER = "other"


class CameraMode(IntEnum):
    """Host camera modes, numbered as the game reports them."""
    COCKPIT = 0
    CAR = 1
    DRIVABLE = 2
    TRACK = 3
    HELICOPTER = 4
    ON_BOARD_FREE = 5
    FREE = 6
    DEPRECATED = 7
    IMAGE_GENERATOR = 8
    START = 9


class DrivableCamera(IntEnum):
    """Cameras cycled through while in DRIVABLE mode."""
    CHASE = 0
    CHASE2 = 1
    BONNET = 2
    BUMPER = 3
    DASH = 4


@dataclass(frozen=True)
class TelemetrySample:
    speed_kmh: float          # km/h, never negative
    longitudinal_g: float     # g, > 0 accelerating, < 0 braking
    camera_category: CameraCategory = CameraCategory.FIRST_PERSON


@dataclass(frozen=True)
class CalculatorState:
    """FOV history carried between frames for one camera category."""
    previous_fov: float
