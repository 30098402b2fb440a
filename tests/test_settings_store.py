"""
Settings store tests against an INI-backed QSettings file.
"""

import pytest

from fov.config import GForceProfile
from fov.exceptions import UnknownSettingError
from fov.model import CameraCategory
from fov.settings_store import SettingsStore

FP = CameraCategory.FIRST_PERSON
TP = CameraCategory.THIRD_PERSON


@pytest.fixture
def store(settings_path, host_defaults):
    return SettingsStore.from_path(settings_path, host_defaults)


def reopen(settings_path, host_defaults):
    return SettingsStore.from_path(settings_path, host_defaults)


class TestFirstRun:

    def test_defaults_seeded_from_host_fov(self, store):
        assert store.config(FP).min_fov == 56.0
        assert store.config(FP).max_fov == 86.0
        assert store.config(TP).min_fov == 60.0
        assert store.config(TP).max_fov == 90.0

    def test_enabled_and_basic_view(self, store):
        assert store.is_enabled(FP)
        assert store.is_enabled(TP)
        assert store.advanced_settings is False

    def test_seed_written_to_disk(self, store, settings_path):
        store.sync()
        text = settings_path.read_text()
        assert "[first_person]" in text
        assert "[third_person]" in text

    def test_changed_host_fov_does_not_override_saved(self, store, settings_path):
        store.sync()
        other = reopen(settings_path, {FP: 70.0, TP: 75.0})
        assert other.config(FP).min_fov == 56.0


class TestEditing:

    def test_set_value_updates_config(self, store):
        config = store.set_value(FP, "max_speed", 250)
        assert config.max_speed == 250.0
        assert store.config(FP).max_speed == 250.0
        assert store.config(TP).max_speed == 300.0

    def test_set_value_clamps(self, store):
        assert store.set_value(FP, "smoothing_factor", 3.0).smoothing_factor == 0.5
        assert store.set_value(FP, "max_speed", 0).max_speed == 10.0

    def test_unknown_field(self, store):
        with pytest.raises(UnknownSettingError):
            store.set_value(FP, "warp_factor", 9)

    def test_values_persist(self, store, settings_path, host_defaults):
        store.set_value(FP, "speed_curve_exponent", 1.75)
        store.set_value(FP, "g_force_enabled", False)
        store.set_value(TP, "g_force_profile", GForceProfile.MULTIPLICATIVE)
        store.set_enabled(TP, False)
        store.advanced_settings = True
        store.sync()

        reloaded = reopen(settings_path, host_defaults)
        assert reloaded.config(FP).speed_curve_exponent == pytest.approx(1.75)
        assert reloaded.config(FP).g_force_enabled is False
        assert reloaded.config(TP).g_force_profile is GForceProfile.MULTIPLICATIVE
        assert reloaded.is_enabled(TP) is False
        assert reloaded.is_enabled(FP) is True
        assert reloaded.advanced_settings is True

    def test_hand_edited_out_of_range_value_is_clamped(self, store, settings_path, host_defaults):
        store.qsettings.setValue("first_person/deceleration_overshoot", 99)
        store.sync()
        reloaded = reopen(settings_path, host_defaults)
        assert reloaded.config(FP).deceleration_overshoot == 20.0

    def test_unreadable_values_fall_back_to_defaults(self, store, settings_path, host_defaults):
        store.set_value(FP, "max_speed", 250)
        store.qsettings.setValue("first_person/min_fov", "wide")
        store.qsettings.setValue("first_person/g_force_profile", "quadratic")
        store.sync()

        reloaded = reopen(settings_path, host_defaults)
        assert reloaded.config(FP).min_fov == 56.0
        assert reloaded.config(FP).g_force_profile is GForceProfile.DIRECTIONAL
        assert reloaded.config(FP).max_speed == 250.0


class TestReset:

    def test_reset_one_category(self, store):
        store.set_value(FP, "min_fov", 40)
        store.set_value(TP, "min_fov", 45)
        store.set_enabled(FP, False)

        store.reset(FP)

        assert store.config(FP).min_fov == 56.0
        assert store.is_enabled(FP)
        assert store.config(TP).min_fov == 45.0

    def test_reset_all(self, store):
        store.set_value(FP, "g_force_negative_factor", 1)
        store.set_value(TP, "smoothing_factor", 0.3)
        store.set_enabled(TP, False)

        store.reset()

        assert store.config(FP) == store.defaults(FP)
        assert store.config(TP) == store.defaults(TP)
        assert store.is_enabled(TP)

    def test_reset_persists(self, store, settings_path, host_defaults):
        store.set_value(FP, "max_fov", 120)
        store.reset(FP)
        store.sync()
        assert reopen(settings_path, host_defaults).config(FP).max_fov == 86.0

    def test_wide_host_fov_is_clamped_on_every_path(self, tmp_path):
        path = tmp_path / "wide.ini"
        wide = {FP: 140.0, TP: 60.0}
        store = SettingsStore.from_path(path, wide)
        assert store.config(FP).max_fov == 150.0

        store.reset(FP)
        assert store.config(FP).max_fov == 150.0
        assert store.config(FP) == store.defaults(FP)
        assert store.config(FP).validate() == []

        store.sync()
        assert reopen(path, wide).config(FP) == store.config(FP)
