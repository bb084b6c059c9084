"""Custom exceptions for layered settings loading."""

from typing import Optional


class AppSettingsError(Exception):
    """Base exception for settings loading errors.

    ``stage`` names the pipeline stage that failed once the loader has
    wrapped the error (e.g. ``"load base config"``).
    """

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage


class EnvironmentResolutionError(AppSettingsError):
    """Raised when the fallback config directory cannot be determined."""
    pass


class FileReadError(AppSettingsError):
    """Raised when a config file exists but cannot be read."""

    def __init__(self, message: str, path=None, stage: Optional[str] = None):
        super().__init__(message, stage=stage)
        self.path = path


class ParseError(AppSettingsError):
    """Raised when a config file is not a valid JSON object."""

    def __init__(self, message: str, path=None, stage: Optional[str] = None):
        super().__init__(message, stage=stage)
        self.path = path


class ProjectionError(AppSettingsError):
    """Raised when the merged overlay cannot be converted into the schema type."""
    pass
