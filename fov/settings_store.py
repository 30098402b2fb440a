"""
Persistent per-category FOV settings backed by QSettings.

Layout:
    advanced_settings = false
    [first_person]
    enabled = true
    min_fov = 56
    ...
    [third_person]
    ...

Resolved configs are cached so per-frame reads never touch the backing
store; writes go through set_value() which updates both.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from PyQt5 import QtCore

from .config import FIELDS, FovConfig, field_descriptor, to_bool
from .controller import ADJUSTABLE_CATEGORIES
from .exceptions import ConfigurationError
from .model import CameraCategory

logger = logging.getLogger(__name__)

ORGANIZATION = "dynamic-fov"
APPLICATION = "dynamic-fov"
ADVANCED_KEY = "advanced_settings"
ENABLED_KEY = "enabled"


class SettingsStore:
    """
    Key-value persistence of the FOV configuration for each camera category.

    Args:
        host_defaults: The host's original FOV per category; seeds the
            default min/max FOV on first run and on reset
        qsettings: Backing store. Defaults to the platform's native store.
    """

    def __init__(
        self,
        host_defaults: Mapping[CameraCategory, float],
        qsettings: Optional[QtCore.QSettings] = None,
    ):
        self.host_defaults = dict(host_defaults)
        self.qsettings = qsettings or QtCore.QSettings(ORGANIZATION, APPLICATION)
        self._configs: Dict[CameraCategory, FovConfig] = {}
        for category in ADJUSTABLE_CATEGORIES:
            self._seed(category)
            self._configs[category] = self._load(category)

    @classmethod
    def from_path(cls, path: Union[str, Path],
                  host_defaults: Mapping[CameraCategory, float]) -> "SettingsStore":
        """Store settings in an INI file at `path`."""
        return cls(host_defaults, QtCore.QSettings(str(path), QtCore.QSettings.IniFormat))

    # ------------------ Reading ------------------ #

    def defaults(self, category: CameraCategory) -> FovConfig:
        """Host-seeded defaults, clamped like every stored value."""
        return FovConfig.for_host_fov(self.host_defaults[category]).clamped()

    def config(self, category: CameraCategory) -> FovConfig:
        """Resolved configuration for a category, clamped to field bounds."""
        return self._configs[category]

    def is_enabled(self, category: CameraCategory) -> bool:
        return to_bool(self.qsettings.value(self._key(category, ENABLED_KEY), True))

    @property
    def advanced_settings(self) -> bool:
        return to_bool(self.qsettings.value(ADVANCED_KEY, False))

    # ------------------ Writing ------------------ #

    def set_value(self, category: CameraCategory, name: str, value: Any) -> FovConfig:
        """
        Update one field. The value is clamped to the field's bounds.

        Raises:
            UnknownSettingError: if `name` is not a configuration field
        """
        value = field_descriptor(name).coerce(value)
        self.qsettings.setValue(self._key(category, name), self._stored(value))
        self._configs[category] = FovConfig.from_mapping({name: value}, self._configs[category])
        logger.debug("%s.%s = %s", category.value, name, value)
        return self._configs[category]

    def set_enabled(self, category: CameraCategory, enabled: bool):
        self.qsettings.setValue(self._key(category, ENABLED_KEY), bool(enabled))

    @advanced_settings.setter
    def advanced_settings(self, visible: bool):
        self.qsettings.setValue(ADVANCED_KEY, bool(visible))

    def reset(self, category: Optional[CameraCategory] = None):
        """Restore defaults and re-enable one category, or all of them."""
        categories = ADJUSTABLE_CATEGORIES if category is None else (category,)
        for cat in categories:
            self._write_config(cat, self.defaults(cat))
            self.set_enabled(cat, True)
            self._configs[cat] = self.defaults(cat)
            logger.info("Reset %s FOV settings to defaults", cat.value)

    def sync(self):
        self.qsettings.sync()

    # ------------------ Internals ------------------ #

    @staticmethod
    def _key(category: CameraCategory, name: str) -> str:
        return f"{category.value}/{name}"

    @staticmethod
    def _stored(value):
        # enums persist as their plain string value
        return getattr(value, "value", value)

    def _write_config(self, category: CameraCategory, config: FovConfig):
        for name, value in config.as_dict().items():
            self.qsettings.setValue(self._key(category, name), self._stored(value))

    def _seed(self, category: CameraCategory):
        if self.qsettings.contains(self._key(category, "min_fov")):
            return
        logger.info("Seeding %s FOV settings from host FOV %.1f",
                    category.value, self.host_defaults[category])
        self._write_config(category, self.defaults(category))
        self.set_enabled(category, True)

    def _load(self, category: CameraCategory) -> FovConfig:
        stored = {}
        for descriptor in FIELDS:
            key = self._key(category, descriptor.name)
            if not self.qsettings.contains(key):
                continue
            raw = self.qsettings.value(key)
            try:
                stored[descriptor.name] = descriptor.coerce(raw)
            except (ValueError, TypeError, ConfigurationError):
                logger.warning("Ignoring unreadable setting %s=%r, using the default", key, raw)
        return FovConfig.from_mapping(stored, self.defaults(category))
