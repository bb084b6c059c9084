"""Resolve the directory that holds ``config.json`` files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from ..errors import EnvironmentResolutionError


def program_directory() -> Path:
    """
    Return the directory of the running program.

    The program is the entry script (``sys.argv[0]``) when it points at an
    existing file, otherwise the interpreter executable.

    Raises:
        EnvironmentResolutionError: If neither can be determined.
    """
    entry = sys.argv[0] if sys.argv else ""
    if entry:
        entry_path = Path(entry)
        if entry_path.is_file():
            return entry_path.resolve().parent

    if not sys.executable:
        raise EnvironmentResolutionError(
            "cannot determine the running program's executable path"
        )
    return Path(sys.executable).resolve().parent


def resolve_config_directory(override: Optional[str] = None) -> Path:
    """
    Resolve the config directory.

    Args:
        override: Explicit directory; returned verbatim, without an
            existence check.

    Returns:
        The override, or the running program's directory.
    """
    if override is not None:
        return Path(override)
    return program_directory()
