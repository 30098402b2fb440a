"""
Environment configuration tests.
"""

import logging

import pytest

from app_config import AppConfig
from fov.exceptions import ConfigurationError
from fov.model import CameraCategory
from main import select_source


def test_defaults_from_empty_env():
    config = AppConfig.from_env(env={})
    assert config.source == "ac"
    assert config.first_person_default_fov == 56.0
    assert config.third_person_default_fov == 60.0
    assert config.settings_path is None
    assert config.log_level == logging.INFO
    assert config.poll_hz == 60.0


def test_values_from_env():
    config = AppConfig.from_env(env={
        "FOV_SOURCE": "Demo",
        "FOV_FIRST_PERSON_DEFAULT": "62.5",
        "FOV_THIRD_PERSON_DEFAULT": "70",
        "FOV_SETTINGS_PATH": "/tmp/fov.ini",
        "FOV_LOG_LEVEL": "debug",
        "FOV_POLL_HZ": "120",
    })
    assert config.source == "demo"
    assert config.host_defaults == {
        CameraCategory.FIRST_PERSON: 62.5,
        CameraCategory.THIRD_PERSON: 70.0,
    }
    assert config.settings_path == "/tmp/fov.ini"
    assert config.log_level == logging.DEBUG
    assert config.poll_hz == 120.0


def test_all_problems_reported_together():
    with pytest.raises(ConfigurationError) as excinfo:
        AppConfig.from_env(env={
            "FOV_SOURCE": "iracing",
            "FOV_FIRST_PERSON_DEFAULT": "wide",
            "FOV_LOG_LEVEL": "LOUD",
            "FOV_POLL_HZ": "0",
        })
    assert len(excinfo.value.issues) == 4


@pytest.mark.parametrize("argv,expected", [
    (["main.py"], "ac"),
    (["main.py", "--demo"], "demo"),
    (["main.py", "--ac"], "ac"),
])
def test_select_source_flags(argv, expected):
    assert select_source(AppConfig(source="ac"), argv) == expected


def test_env_source_used_without_flags():
    assert select_source(AppConfig(source="demo"), ["main.py"]) == "demo"
