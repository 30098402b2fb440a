"""
Common QThread plumbing for telemetry sources.
"""
import logging
import time
from typing import Optional

from PyQt5 import QtCore

from fov.model import CameraMode, DrivableCamera
from .model import TelemetryFrame

logger = logging.getLogger(__name__)


class TelemetryWorker(QtCore.QThread):
    """
    Background thread that polls a telemetry source and emits TelemetryFrame
    objects. Subclasses implement open(), read_frame() and close().

    The host camera is not part of the physics telemetry, so it is tracked
    here and stamped onto every frame; set_camera() may be called from the
    GUI thread at any time.
    """
    frame_ready = QtCore.pyqtSignal(object)   # TelemetryFrame
    status_update = QtCore.pyqtSignal(str)    # status message

    def __init__(self, poll_hz: float = 60.0, parent=None):
        super().__init__(parent)
        self.poll_interval = 1.0 / poll_hz
        self.running = False
        self.camera_mode: Optional[CameraMode] = CameraMode.COCKPIT
        self.drivable_camera: Optional[DrivableCamera] = None

    @QtCore.pyqtSlot(object, object)
    def set_camera(self, mode: Optional[CameraMode], drivable_camera: Optional[DrivableCamera] = None):
        self.camera_mode = mode
        self.drivable_camera = drivable_camera

    def stamp(self, t: float, speed_kmh: float, longitudinal_g: float) -> TelemetryFrame:
        return TelemetryFrame(
            t=t,
            speed_kmh=speed_kmh,
            longitudinal_g=longitudinal_g,
            camera_mode=self.camera_mode,
            drivable_camera=self.drivable_camera,
        )

    def open(self) -> bool:
        return True

    def read_frame(self, elapsed: float) -> Optional[TelemetryFrame]:
        raise NotImplementedError

    def close(self):
        pass

    def run(self):
        if not self.open():
            return

        t0 = time.time()
        self.running = True
        frame_count = 0

        try:
            while self.running:
                frame = self.read_frame(time.time() - t0)
                if frame is not None:
                    self.frame_ready.emit(frame)
                    frame_count += 1
                    # ~1 second at 60Hz
                    if frame_count % 60 == 0:
                        logger.debug("Frame #%05d | Speed: %6.1f km/h | G: %+.2f",
                                     frame_count, frame.speed_kmh, frame.longitudinal_g)
                time.sleep(self.poll_interval)
        except Exception as e:
            logger.error("Error in telemetry loop: %s", e, exc_info=True)
            self.status_update.emit(f"Error in telemetry loop: {e}")
        finally:
            self.close()

    def stop(self):
        self.running = False
