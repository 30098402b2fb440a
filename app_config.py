"""
Application configuration read from the environment (and a .env file).
"""
import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv

from fov.exceptions import ConfigurationError
from fov.model import CameraCategory

SOURCES = ("ac", "demo")

# Assetto Corsa's stock FOV values
DEFAULT_FIRST_PERSON_FOV = 56.0
DEFAULT_THIRD_PERSON_FOV = 60.0


@dataclass(frozen=True)
class AppConfig:
    source: str = "ac"
    first_person_default_fov: float = DEFAULT_FIRST_PERSON_FOV
    third_person_default_fov: float = DEFAULT_THIRD_PERSON_FOV
    settings_path: Optional[str] = None
    log_level: int = logging.INFO
    poll_hz: float = 60.0

    @classmethod
    def from_env(cls, env=None, dotenv: bool = True) -> "AppConfig":
        """
        Build the config from environment variables.

        Args:
            env: Mapping to read instead of os.environ
            dotenv: Load a .env file into os.environ first
        """
        if dotenv and env is None:
            load_dotenv()
        env = os.environ if env is None else env

        issues = []

        def number(name: str, default: float) -> float:
            raw = env.get(name, "")
            if raw == "":
                return default
            try:
                return float(raw)
            except ValueError:
                issues.append(f"{name} must be a number (got '{raw}')")
                return default

        source = env.get("FOV_SOURCE", "ac").strip().lower()
        if source not in SOURCES:
            issues.append(f"FOV_SOURCE must be one of {SOURCES} (got '{source}')")

        level_name = env.get("FOV_LOG_LEVEL", "INFO").strip().upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            issues.append(f"FOV_LOG_LEVEL '{level_name}' is not a logging level")
            log_level = logging.INFO

        poll_hz = number("FOV_POLL_HZ", 60.0)
        if poll_hz <= 0:
            issues.append(f"FOV_POLL_HZ must be positive (got {poll_hz})")

        config = cls(
            source=source,
            first_person_default_fov=number("FOV_FIRST_PERSON_DEFAULT", DEFAULT_FIRST_PERSON_FOV),
            third_person_default_fov=number("FOV_THIRD_PERSON_DEFAULT", DEFAULT_THIRD_PERSON_FOV),
            settings_path=env.get("FOV_SETTINGS_PATH") or None,
            log_level=log_level,
            poll_hz=poll_hz,
        )
        if issues:
            raise ConfigurationError(issues)
        return config

    @property
    def host_defaults(self) -> Dict[CameraCategory, float]:
        return {
            CameraCategory.FIRST_PERSON: self.first_person_default_fov,
            CameraCategory.THIRD_PERSON: self.third_person_default_fov,
        }
