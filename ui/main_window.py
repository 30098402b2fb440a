"""
Main window for the dynamic FOV addon.
"""
from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QCheckBox,
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from fov.calculator import output_bounds, fov_range
from fov.controller import ADJUSTABLE_CATEGORIES, FovController, classify_camera
from fov.model import CameraCategory, CameraMode, DrivableCamera
from fov.settings_store import SettingsStore
from ui.canvases import FovTraceCanvas
from ui.settings_form import SettingsForm
from ui.styles import DARK_STYLESHEET

# (label, mode, drivable camera)
HOST_CAMERAS = [
    ("Cockpit", CameraMode.COCKPIT, None),
    ("Chase", CameraMode.DRIVABLE, DrivableCamera.CHASE),
    ("Chase 2", CameraMode.DRIVABLE, DrivableCamera.CHASE2),
    ("Bonnet", CameraMode.DRIVABLE, DrivableCamera.BONNET),
    ("Bumper", CameraMode.DRIVABLE, DrivableCamera.BUMPER),
    ("Dash", CameraMode.DRIVABLE, DrivableCamera.DASH),
    ("Car", CameraMode.CAR, None),
    ("Track", CameraMode.TRACK, None),
    ("Helicopter", CameraMode.HELICOPTER, None),
    ("Free", CameraMode.FREE, None),
]

CATEGORY_TITLES = {
    CameraCategory.FIRST_PERSON: "First Person",
    CameraCategory.THIRD_PERSON: "Third Person",
    CameraCategory.OTHER: "Not adjusted",
}

# Labels refresh every N frames (~6 times/sec at 60Hz)
LABEL_EVERY = 10


class MainWindow(QMainWindow):
    """
    Settings and live view for the dynamic FOV addon.

    Displays:
    - One settings tab per camera category
    - Host camera selector (the physics telemetry does not carry it)
    - Live speed / g-force / FOV readout
    - Rolling FOV trace
    """
    camera_selected = QtCore.pyqtSignal(object, object)  # (CameraMode, DrivableCamera)

    def __init__(self, store: SettingsStore, controller: FovController):
        super().__init__()
        self.store = store
        self.controller = controller
        self.frame_count = 0
        self.last_fov = {}

        self.setWindowTitle("Dynamic FOV")
        self.resize(1100, 650)

        central = QWidget()
        self.setCentralWidget(central)

        root_layout = QHBoxLayout()
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(10)
        central.setLayout(root_layout)

        root_layout.addLayout(self._build_settings_column(), 2)
        root_layout.addLayout(self._build_live_column(), 3)

        self.setStyleSheet(DARK_STYLESHEET)
        self._update_trace_bounds()

    def _build_settings_column(self):
        col = QVBoxLayout()

        self.advanced_box = QCheckBox("Advanced Settings")
        self.advanced_box.setChecked(self.store.advanced_settings)
        self.advanced_box.toggled.connect(self._on_advanced_toggled)
        col.addWidget(self.advanced_box)

        self.tabs = QTabWidget()
        self.forms = {}
        for category in ADJUSTABLE_CATEGORIES:
            form = SettingsForm(self.store, category, self)
            form.enabled_changed.connect(
                lambda enabled, c=category: self.controller.set_enabled(c, enabled)
            )
            form.reset_requested.connect(lambda c=category: self._on_reset(c))
            form.settings_changed.connect(self._update_trace_bounds)
            self.forms[category] = form
            self.tabs.addTab(form, CATEGORY_TITLES[category])
        col.addWidget(self.tabs)

        return col

    def _build_live_column(self):
        col = QVBoxLayout()

        camera_group = QGroupBox("Host Camera")
        camera_layout = QVBoxLayout()
        camera_group.setLayout(camera_layout)
        self.camera_combo = QComboBox()
        for label, _mode, _drivable in HOST_CAMERAS:
            self.camera_combo.addItem(label)
        self.camera_combo.currentIndexChanged.connect(self._on_camera_selected)
        camera_layout.addWidget(self.camera_combo)
        self.category_label = QLabel(f"Category: {CATEGORY_TITLES[CameraCategory.FIRST_PERSON]}")
        camera_layout.addWidget(self.category_label)
        col.addWidget(camera_group)

        live_group = QGroupBox("Live")
        live_layout = QVBoxLayout()
        live_group.setLayout(live_layout)
        self.status_label = QLabel("Status: ⏸️ WAITING")
        self.speed_label = QLabel("Speed: -- km/h")
        self.g_label = QLabel("G-Force: --")
        self.fov_label = QLabel("FOV: --")
        for label in (self.status_label, self.speed_label, self.g_label, self.fov_label):
            live_layout.addWidget(label)
        col.addWidget(live_group)

        self.trace_canvas = FovTraceCanvas(self)
        col.addWidget(self.trace_canvas, 1)

        return col

    # ==========================================================================
    # Slots
    # ==========================================================================

    def handle_status(self, message: str):
        self.status_label.setText(f"Status: {message}")

    def handle_fov(self, category: str, fov: float):
        """Track what the camera sink last applied per category."""
        self.last_fov[CameraCategory(category)] = fov

    def handle_frame(self, frame):
        """Run the FOV controller for one telemetry frame and update the view."""
        fov = self.controller.update(frame)
        self.frame_count += 1

        if fov is not None:
            self.trace_canvas.add_point(frame.t, fov)

        if self.frame_count % LABEL_EVERY == 0:
            self.speed_label.setText(f"Speed: {frame.speed_kmh:.1f} km/h")
            self.g_label.setText(f"G-Force: {frame.longitudinal_g:+.2f} g")
            applied = self.last_fov.get(self._active_category())
            self.fov_label.setText(f"FOV: {applied:.2f}" if applied is not None else "FOV: --")
            self.trace_canvas.refresh()

    def _active_category(self) -> CameraCategory:
        _label, mode, drivable = HOST_CAMERAS[self.camera_combo.currentIndex()]
        return classify_camera(mode, drivable)

    def _on_camera_selected(self, index: int):
        _label, mode, drivable = HOST_CAMERAS[index]
        category = classify_camera(mode, drivable)
        self.category_label.setText(f"Category: {CATEGORY_TITLES[category]}")
        if category in self.forms:
            self.tabs.setCurrentWidget(self.forms[category])
        self.trace_canvas.clear()
        self._update_trace_bounds()
        self.camera_selected.emit(mode, drivable)

    def _on_advanced_toggled(self, checked: bool):
        self.store.advanced_settings = checked
        for form in self.forms.values():
            form.set_advanced_visible(checked)

    def _on_reset(self, category: CameraCategory):
        self.controller.set_enabled(category, True)
        self.controller.reset(category)

    def _update_trace_bounds(self):
        category = self._active_category()
        if category is CameraCategory.OTHER:
            return
        config = self.store.config(category)
        low, high = fov_range(config)
        floor, _ = output_bounds(config)
        self.trace_canvas.set_bounds(low, high, floor)
