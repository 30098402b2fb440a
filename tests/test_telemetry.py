"""
Telemetry source tests: shared memory page decoding, synthetic cycle and
camera stamping. No game or display needed.
"""

import ctypes as ct
import mmap

import numpy as np
import pytest

from fov.exceptions import TelemetryError
from fov.model import CameraMode, DrivableCamera
from telemetry.ac_shared_memory import (
    LONGITUDINAL_AXIS,
    PHYSICS_SIZE,
    SPageFilePhysics,
    read_physics,
)
from telemetry.synthetic import (
    CORNER_SPEED_KMH,
    CYCLE_SECONDS,
    MAX_ACCEL_G,
    MAX_BRAKE_G,
    TOP_SPEED_KMH,
    SyntheticTelemetryWorker,
    synthetic_frame,
)


class TestSharedMemoryDecoding:

    def test_reads_speed_and_longitudinal_g(self):
        page = SPageFilePhysics()
        page.packetId = 42
        page.speedKmh = 187.5
        page.accG[LONGITUDINAL_AXIS] = -1.25

        mm = mmap.mmap(-1, PHYSICS_SIZE)
        try:
            mm.write(bytes(page))
            phys = read_physics(mm)
        finally:
            mm.close()

        assert phys.packetId == 42
        assert phys.speedKmh == pytest.approx(187.5)
        assert phys.accG[LONGITUDINAL_AXIS] == pytest.approx(-1.25)

    def test_short_page_raises(self):
        mm = mmap.mmap(-1, ct.sizeof(ct.c_int) * 2)
        try:
            with pytest.raises(TelemetryError):
                read_physics(mm)
        finally:
            mm.close()


class TestSyntheticCycle:

    def test_envelope(self):
        for t in np.linspace(0, 2 * CYCLE_SECONDS, 2401):
            speed, g = synthetic_frame(float(t))
            assert CORNER_SPEED_KMH - 1e-9 <= speed <= TOP_SPEED_KMH + 1e-9
            assert MAX_BRAKE_G <= g <= MAX_ACCEL_G

    def test_repeats(self):
        assert synthetic_frame(3.3) == pytest.approx(synthetic_frame(3.3 + CYCLE_SECONDS))

    def test_has_braking_and_acceleration(self):
        gs = [synthetic_frame(float(t))[1] for t in np.linspace(0, CYCLE_SECONDS, 401)]
        assert min(gs) < -2.0
        assert max(gs) > 0.5


class TestCameraStamping:

    def test_default_camera_is_cockpit(self):
        worker = SyntheticTelemetryWorker()
        frame = worker.read_frame(1.0)
        assert frame.camera_mode is CameraMode.COCKPIT
        assert frame.drivable_camera is None
        assert frame.t == 1.0

    def test_set_camera(self):
        worker = SyntheticTelemetryWorker(poll_hz=30.0)
        worker.set_camera(CameraMode.DRIVABLE, DrivableCamera.CHASE2)
        frame = worker.read_frame(4.0)
        assert frame.camera_mode is CameraMode.DRIVABLE
        assert frame.drivable_camera is DrivableCamera.CHASE2
        assert worker.poll_interval == pytest.approx(1 / 30.0)
