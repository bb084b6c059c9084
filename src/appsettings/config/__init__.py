"""Layered settings loading: directory resolution, sources and projection."""

from .directory import resolve_config_directory
from .files import config_file_name, load_config_file
from .inference import infer_value
from .loader import (
    AppSettings,
    LoaderOptions,
    build_overlay,
    load_settings,
)
from .projection import project
from .sources import apply_args, apply_env_vars, environ_entries

__all__ = [
    "AppSettings",
    "LoaderOptions",
    "build_overlay",
    "load_settings",
    "resolve_config_directory",
    "config_file_name",
    "load_config_file",
    "infer_value",
    "apply_env_vars",
    "apply_args",
    "environ_entries",
    "project",
]
