#!/usr/bin/env python3
"""
Dynamic FOV - Main Entry Point

Adjusts camera field-of-view from speed and longitudinal g-force to
heighten the sense of speed in Assetto Corsa.

Usage:
    python main.py              # Read telemetry from Assetto Corsa
    python main.py --demo       # Synthetic telemetry, no game needed
"""
import sys
import logging
from PyQt5 import QtWidgets

# Configure logging FIRST - before any other imports
logging.basicConfig(
    level=logging.INFO,
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

from app_config import AppConfig
from fov.controller import ADJUSTABLE_CATEGORIES, FovController, QtCameraSink
from fov.exceptions import ConfigurationError
from fov.settings_store import SettingsStore
from telemetry.ac_shared_memory import AcTelemetryWorker
from telemetry.synthetic import SyntheticTelemetryWorker
from ui.main_window import MainWindow

logger = logging.getLogger("dynamic_fov")


def select_source(config: AppConfig, argv) -> str:
    if "--demo" in argv:
        return "demo"
    if "--ac" in argv:
        return "ac"
    return config.source


def main(config: AppConfig, source: str):
    """
    Entry point for the FOV window.

    Args:
        config: Application configuration
        source: "ac" for Assetto Corsa shared memory, "demo" for synthetic telemetry
    """
    logger.info("Starting dynamic FOV (%s telemetry)", source.upper())
    app = QtWidgets.QApplication(sys.argv)

    if config.settings_path:
        store = SettingsStore.from_path(config.settings_path, config.host_defaults)
    else:
        store = SettingsStore(config.host_defaults)

    sink = QtCameraSink()
    controller = FovController(
        config_source=store.config,
        sink=sink,
        host_defaults=config.host_defaults,
        enabled={c: store.is_enabled(c) for c in ADJUSTABLE_CATEGORIES},
    )

    window = MainWindow(store, controller)

    if source == "ac":
        telemetry_thread = AcTelemetryWorker(poll_hz=config.poll_hz)
    elif source == "demo":
        telemetry_thread = SyntheticTelemetryWorker(poll_hz=config.poll_hz)
    else:
        raise ValueError(f"Unknown telemetry source '{source}'. Use 'ac' or 'demo'.")

    # Frames cross from the worker thread into the GUI thread here, so every
    # FOV computation and every settings edit run on the same thread.
    telemetry_thread.frame_ready.connect(window.handle_frame)
    telemetry_thread.status_update.connect(window.handle_status)
    telemetry_thread.status_update.connect(lambda msg: logger.info("[Status] %s", msg))
    window.camera_selected.connect(telemetry_thread.set_camera)
    sink.fov_changed.connect(window.handle_fov)

    telemetry_thread.start()
    window.show()

    print("\n" + "=" * 60)
    print("✅ DYNAMIC FOV READY")
    print("=" * 60 + "\n")

    result = app.exec_()

    # Clean shutdown
    telemetry_thread.stop()
    telemetry_thread.wait()
    store.sync()

    # Hand the cameras back at their original FOV
    for category in ADJUSTABLE_CATEGORIES:
        sink.set_fov(category, config.host_defaults[category])

    return result


def run():
    try:
        app_config = AppConfig.from_env()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(2)

    logging.getLogger().setLevel(app_config.log_level)

    try:
        sys.exit(main(app_config, select_source(app_config, sys.argv)))
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    run()
