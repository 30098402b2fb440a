"""
Synthetic telemetry for running the addon without the game.

Produces a repeating lap-like cycle: a long pull up to top speed, a hard
stop into a corner, a short squirt, another brake zone.
"""
import math

from .model import TelemetryFrame
from .worker import TelemetryWorker

CYCLE_SECONDS = 20.0
TOP_SPEED_KMH = 280.0
CORNER_SPEED_KMH = 90.0
MAX_ACCEL_G = 0.9
MAX_BRAKE_G = -3.0

# (end time in cycle, start speed, end speed)
_PHASES = (
    (9.0, CORNER_SPEED_KMH, TOP_SPEED_KMH),      # straight
    (12.0, TOP_SPEED_KMH, CORNER_SPEED_KMH),     # heavy braking
    (13.5, CORNER_SPEED_KMH, CORNER_SPEED_KMH),  # apex
    (17.0, CORNER_SPEED_KMH, 180.0),             # short straight
    (18.5, 180.0, CORNER_SPEED_KMH),             # braking
    (CYCLE_SECONDS, CORNER_SPEED_KMH, CORNER_SPEED_KMH),
)


def synthetic_frame(t: float):
    """
    Speed (km/h) and longitudinal g at time `t` seconds.

    Speed eases between phase endpoints with a half-cosine so g, its
    derivative, is continuous inside each phase.
    """
    t_cycle = t % CYCLE_SECONDS
    start = 0.0
    for end, v0, v1 in _PHASES:
        if t_cycle < end:
            break
        start = end
    duration = end - start
    progress = (t_cycle - start) / duration

    speed = v0 + (v1 - v0) * 0.5 * (1 - math.cos(math.pi * progress))

    # dv/dt in km/h per s -> m/s^2 -> g
    dv_dt = (v1 - v0) * 0.5 * math.pi * math.sin(math.pi * progress) / duration
    g = (dv_dt / 3.6) / 9.81
    g = max(MAX_BRAKE_G, min(g, MAX_ACCEL_G))
    return speed, g


class SyntheticTelemetryWorker(TelemetryWorker):
    """Emits the synthetic cycle at the poll rate."""

    def open(self) -> bool:
        self.status_update.emit("Demo telemetry running")
        return True

    def read_frame(self, elapsed: float) -> TelemetryFrame:
        speed, g = synthetic_frame(elapsed)
        return self.stamp(elapsed, speed, g)
