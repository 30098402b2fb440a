"""
Generic settings form rendered from the FOV field descriptors.
"""
from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from fov.config import FIELDS, ControlType, FieldDescriptor, GForceProfile
from fov.model import CameraCategory
from fov.settings_store import SettingsStore


def slider_scale(descriptor: FieldDescriptor) -> int:
    """QSlider is integer-only; scale values by the descriptor's precision."""
    return 10 ** descriptor.decimals


def to_slider(descriptor: FieldDescriptor, value: float) -> int:
    return int(round(value * slider_scale(descriptor)))


def from_slider(descriptor: FieldDescriptor, position: int) -> float:
    return position / slider_scale(descriptor)


def format_value(descriptor: FieldDescriptor, value) -> str:
    if descriptor.control is ControlType.SLIDER:
        return f"{value:.{descriptor.decimals}f}"
    if descriptor.control is ControlType.CHOICE:
        return value.value.capitalize()
    return "On" if value else "Off"


class SettingsForm(QWidget):
    """
    One control per FieldDescriptor for a single camera category.

    Every edit is written straight to the SettingsStore; the FOV controller
    picks it up on the next frame.
    """
    enabled_changed = QtCore.pyqtSignal(bool)
    settings_changed = QtCore.pyqtSignal()
    reset_requested = QtCore.pyqtSignal()

    def __init__(self, store: SettingsStore, category: CameraCategory, parent=None):
        super().__init__(parent)
        self.store = store
        self.category = category
        self._controls = {}
        self._value_labels = {}
        self._rows = {}
        self._syncing = False

        root = QVBoxLayout()
        self.setLayout(root)

        self.enabled_box = QCheckBox("Enabled")
        self.enabled_box.setChecked(store.is_enabled(category))
        self.enabled_box.toggled.connect(self._on_enabled_toggled)
        root.addWidget(self.enabled_box)

        self.form = QFormLayout()
        root.addLayout(self.form)
        for descriptor in FIELDS:
            self._add_row(descriptor)

        reset_btn = QPushButton("Reset")
        reset_btn.clicked.connect(self._on_reset)
        root.addWidget(reset_btn)
        root.addStretch()

        self.set_advanced_visible(store.advanced_settings)

    # ------------------ Building ------------------ #

    def _add_row(self, descriptor: FieldDescriptor):
        value = getattr(self.store.config(self.category), descriptor.name)

        if descriptor.control is ControlType.SLIDER:
            control = QSlider(QtCore.Qt.Horizontal)
            control.setRange(to_slider(descriptor, descriptor.minimum),
                             to_slider(descriptor, descriptor.maximum))
            control.setValue(to_slider(descriptor, value))
            control.valueChanged.connect(
                lambda pos, d=descriptor: self._on_edit(d, from_slider(d, pos))
            )
            value_label = QLabel(format_value(descriptor, value))
            value_label.setMinimumWidth(40)
            self._value_labels[descriptor.name] = value_label

            row = QWidget()
            row_layout = QHBoxLayout()
            row_layout.setContentsMargins(0, 0, 0, 0)
            row.setLayout(row_layout)
            row_layout.addWidget(control, 1)
            row_layout.addWidget(value_label)
            widget = row

        elif descriptor.control is ControlType.CHECKBOX:
            control = QCheckBox()
            control.setChecked(bool(value))
            control.toggled.connect(lambda checked, d=descriptor: self._on_edit(d, checked))
            widget = control

        else:
            control = QComboBox()
            for profile in descriptor.choices:
                control.addItem(format_value(descriptor, profile), profile.value)
            control.setCurrentIndex(control.findData(value.value))
            control.currentIndexChanged.connect(
                lambda index, d=descriptor, c=control: self._on_edit(d, GForceProfile(c.itemData(index)))
            )
            widget = control

        label = QLabel(descriptor.label)
        self.form.addRow(label, widget)
        self._controls[descriptor.name] = control
        self._rows[descriptor.name] = (label, widget)

    # ------------------ Behaviour ------------------ #

    def set_advanced_visible(self, visible: bool):
        for descriptor in FIELDS:
            if descriptor.advanced:
                label, widget = self._rows[descriptor.name]
                label.setVisible(visible)
                widget.setVisible(visible)

    def refresh(self):
        """Pull current values from the store into the controls."""
        self._syncing = True
        try:
            config = self.store.config(self.category)
            self.enabled_box.setChecked(self.store.is_enabled(self.category))
            for descriptor in FIELDS:
                value = getattr(config, descriptor.name)
                control = self._controls[descriptor.name]
                if descriptor.control is ControlType.SLIDER:
                    control.setValue(to_slider(descriptor, value))
                    self._value_labels[descriptor.name].setText(format_value(descriptor, value))
                elif descriptor.control is ControlType.CHECKBOX:
                    control.setChecked(bool(value))
                else:
                    control.setCurrentIndex(control.findData(value.value))
        finally:
            self._syncing = False

    def _on_edit(self, descriptor: FieldDescriptor, value):
        if self._syncing:
            return
        config = self.store.set_value(self.category, descriptor.name, value)
        if descriptor.name in self._value_labels:
            self._value_labels[descriptor.name].setText(
                format_value(descriptor, getattr(config, descriptor.name))
            )
        self.settings_changed.emit()

    def _on_enabled_toggled(self, checked: bool):
        if self._syncing:
            return
        self.store.set_enabled(self.category, checked)
        self.enabled_changed.emit(checked)

    def _on_reset(self):
        self.store.reset(self.category)
        self.refresh()
        self.reset_requested.emit()
        self.settings_changed.emit()
