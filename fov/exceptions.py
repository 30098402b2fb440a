"""
Exception classes for the dynamic FOV addon.
"""


class FovError(Exception):
    """Base exception for all FOV-related errors."""
    pass


class ConfigurationError(FovError):
    """Raised when a FOV configuration is unusable."""

    def __init__(self, issues: list):
        self.issues = issues
        msg = "Invalid FOV configuration:\n"
        msg += "\n".join(f"  - {issue}" for issue in issues)
        super().__init__(msg)


class UnknownSettingError(FovError):
    """Raised when a settings key does not match any configuration field."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unknown setting '{field}'")


class TelemetryError(FovError):
    """Errors reading telemetry from the host."""
    pass
