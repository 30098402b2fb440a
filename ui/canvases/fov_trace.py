"""
Rolling FOV trace for the active camera.
"""
import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ui.styles import (
    ACCENT_BLUE,
    ACCENT_RED,
    ACCENT_YELLOW,
    BG_COLOR,
    BG_COLOR_LIGHT,
    GRID_COLOR,
    TEXT_COLOR_DIM,
)


class TraceBuffer:
    """Fixed-size ring of (t, value) pairs, oldest first when read."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._t = np.zeros(capacity, dtype=float)
        self._y = np.zeros(capacity, dtype=float)
        self._next = 0
        self._size = 0

    def __len__(self):
        return self._size

    def append(self, t: float, y: float):
        self._t[self._next] = t
        self._y[self._next] = y
        self._next = (self._next + 1) % self.capacity
        self._size = min(self._size + 1, self.capacity)

    def clear(self):
        self._next = 0
        self._size = 0

    def arrays(self):
        if self._size < self.capacity:
            return self._t[:self._size].copy(), self._y[:self._size].copy()
        order = np.r_[self._next:self.capacity, 0:self._next]
        return self._t[order], self._y[order]


class FovTraceCanvas(FigureCanvas):
    """
    Matplotlib canvas showing the last few seconds of output FOV, with the
    configured minimum, maximum and overshoot floor as guide lines.
    """

    def __init__(self, parent=None, window_seconds=10.0, sample_hz=60.0,
                 width=5, height=2.5, dpi=100):
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.window_seconds = window_seconds
        self.buffer = TraceBuffer(int(window_seconds * sample_hz))

        self.fig.patch.set_facecolor(BG_COLOR)
        self.ax.set_facecolor(BG_COLOR_LIGHT)

        for spine in self.ax.spines.values():
            spine.set_color(TEXT_COLOR_DIM)
        self.ax.tick_params(colors=TEXT_COLOR_DIM, labelsize=7)
        self.ax.title.set_color("#FFFFFF")
        self.ax.set_title("Output FOV [deg]", fontsize=8)
        self.ax.grid(True, color=GRID_COLOR, alpha=0.6)
        self.ax.set_xlabel("Time [s]", fontsize=7, color=TEXT_COLOR_DIM)

        self.line, = self.ax.plot([], [], linewidth=1.5, color=ACCENT_BLUE)
        self.min_line = self.ax.axhline(0, linestyle="--", linewidth=0.8, color=ACCENT_YELLOW)
        self.max_line = self.ax.axhline(0, linestyle="--", linewidth=0.8, color=ACCENT_YELLOW)
        self.floor_line = self.ax.axhline(0, linestyle=":", linewidth=0.8, color=ACCENT_RED)

        self.fig.tight_layout(pad=0.5)

    def set_bounds(self, min_fov: float, max_fov: float, floor: float):
        self.min_line.set_ydata([min_fov, min_fov])
        self.max_line.set_ydata([max_fov, max_fov])
        self.floor_line.set_ydata([floor, floor])
        self.ax.set_ylim(floor - 2, max_fov + 2)

    def add_point(self, t: float, fov: float):
        self.buffer.append(t, fov)

    def clear(self):
        self.buffer.clear()
        self.line.set_data([], [])
        self.draw_idle()

    def refresh(self):
        """Redraw the trace; call at a lower rate than add_point."""
        t, y = self.buffer.arrays()
        if t.size == 0:
            return
        self.line.set_data(t, y)
        self.ax.set_xlim(max(t[-1] - self.window_seconds, 0.0), max(t[-1], self.window_seconds))
        self.draw_idle()
