import ctypes as ct
import logging
import mmap
from enum import IntEnum
from typing import Optional

from fov.exceptions import TelemetryError
from .model import TelemetryFrame
from .worker import TelemetryWorker

logger = logging.getLogger(__name__)


# ===================== PHYSICS SHARED MEMORY =====================

class SPageFilePhysics(ct.Structure):
    _fields_ = [
        ("packetId", ct.c_int),
        ("gas", ct.c_float),
        ("brake", ct.c_float),
        ("fuel", ct.c_float),
        ("gear", ct.c_int),
        ("rpms", ct.c_int),
        ("steerAngle", ct.c_float),
        ("speedKmh", ct.c_float),
        ("velocity", ct.c_float * 3),
        ("accG", ct.c_float * 3),
    ]


# ===================== GRAPHICS SHARED MEMORY =====================

class SPageFileGraphics(ct.Structure):
    _fields_ = [
        ("packetId", ct.c_int),
        ("status", ct.c_int),
        ("session", ct.c_int),
    ]


class AcStatus(IntEnum):
    OFF = 0
    REPLAY = 1
    LIVE = 2
    PAUSE = 3


SHM_NAME_PHYSICS = "acpmf_physics"
SHM_NAME_GRAPHICS = "acpmf_graphics"
PHYSICS_SIZE = ct.sizeof(SPageFilePhysics)
GRAPHICS_SIZE = ct.sizeof(SPageFileGraphics)

# accG axes: 0 = lateral, 1 = vertical, 2 = longitudinal
LONGITUDINAL_AXIS = 2


# ===================== SHARED MEMORY HELPERS =====================

def open_shared_memory(name: str, size: int) -> Optional[mmap.mmap]:
    """Open an existing named shared memory region created by Assetto Corsa."""
    try:
        return mmap.mmap(0, size, tagname=name, access=mmap.ACCESS_READ)
    except (OSError, TypeError) as e:
        # TypeError: tagname is only accepted on Windows
        logger.error("Could not open shared memory '%s': %s", name, e)
        return None


def _read_page(mm: mmap.mmap, size: int) -> bytes:
    mm.seek(0)
    raw = mm.read(size)
    if len(raw) < size:
        raise TelemetryError(f"Short shared memory read: {len(raw)} of {size} bytes")
    return raw


def read_physics(mm: mmap.mmap) -> SPageFilePhysics:
    raw = _read_page(mm, PHYSICS_SIZE)
    return SPageFilePhysics.from_buffer_copy(raw)


def read_graphics(mm: mmap.mmap) -> SPageFileGraphics:
    raw = _read_page(mm, GRAPHICS_SIZE)
    return SPageFileGraphics.from_buffer_copy(raw)


# ===================== TELEMETRY THREAD =====================

class AcTelemetryWorker(TelemetryWorker):
    """
    Reads speed and longitudinal g from Assetto Corsa's physics shared memory.

    Frames are only emitted while the session is live, so the FOV holds
    still in menus, replays and pause.
    """

    def __init__(self, poll_hz: float = 60.0, parent=None):
        super().__init__(poll_hz, parent)
        self._mm_phys: Optional[mmap.mmap] = None
        self._mm_graph: Optional[mmap.mmap] = None
        self._last_packet_id = None

    def open(self) -> bool:
        self.status_update.emit("Connecting to Assetto Corsa...")

        self._mm_phys = open_shared_memory(SHM_NAME_PHYSICS, PHYSICS_SIZE)
        self._mm_graph = open_shared_memory(SHM_NAME_GRAPHICS, GRAPHICS_SIZE)

        if self._mm_phys is None or self._mm_graph is None:
            self._release()
            self.status_update.emit(
                "ERROR: Could not connect to AC shared memory. "
                "Make sure Assetto Corsa is running and you're in a session."
            )
            return False

        logger.info("Connected to AC shared memory")
        self.status_update.emit("Connected! Start driving...")
        return True

    def read_frame(self, elapsed: float) -> Optional[TelemetryFrame]:
        gfx = read_graphics(self._mm_graph)
        if gfx.status != AcStatus.LIVE:
            return None

        phys = read_physics(self._mm_phys)
        # Physics page is not rewritten while the sim is stalled
        if phys.packetId == self._last_packet_id:
            return None
        self._last_packet_id = phys.packetId

        return self.stamp(elapsed, phys.speedKmh, phys.accG[LONGITUDINAL_AXIS])

    def _release(self):
        for mm in (self._mm_phys, self._mm_graph):
            if mm is not None:
                mm.close()
        self._mm_phys = None
        self._mm_graph = None

    def close(self):
        self._release()
        self.status_update.emit("Disconnected from Assetto Corsa.")
