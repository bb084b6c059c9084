"""
Layered application settings.

Merges ``config.json``, ``config.<env>.json``, environment entries and
command-line arguments (in increasing priority) into a typed settings object.

Typical use:

    from appsettings import AppSettings, environ_entries

    settings = (
        AppSettings(ServiceSettings)
        .with_environment("prod")
        .with_env_vars(environ_entries())
        .with_args(sys.argv[1:])
        .load()
    )
"""

from .config import (
    AppSettings,
    LoaderOptions,
    build_overlay,
    environ_entries,
    infer_value,
    load_settings,
)
from .errors import (
    AppSettingsError,
    EnvironmentResolutionError,
    FileReadError,
    ParseError,
    ProjectionError,
)

__all__ = [
    "AppSettings",
    "LoaderOptions",
    "build_overlay",
    "environ_entries",
    "infer_value",
    "load_settings",
    # Errors
    "AppSettingsError",
    "EnvironmentResolutionError",
    "FileReadError",
    "ParseError",
    "ProjectionError",
]
