"""JSON config file overlays (``config.json`` and ``config.<env>.json``)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from ..shared.json_utils import read_json_object
from ..shared.logging_utils import get_logger

logger = get_logger(__name__)

BASE_CONFIG_NAME = "config"
CONFIG_SUFFIX = ".json"


def config_file_name(environment: Optional[str] = None) -> str:
    """
    Build a config file name.

    Examples:
        >>> config_file_name()
        'config.json'
        >>> config_file_name("dev")
        'config.dev.json'
    """
    if environment is None:
        return f"{BASE_CONFIG_NAME}{CONFIG_SUFFIX}"
    return f"{BASE_CONFIG_NAME}.{environment}{CONFIG_SUFFIX}"


def load_config_file(path: str | Path, overlay: Dict[str, Any]) -> bool:
    """
    Merge the top-level keys of a JSON config file into ``overlay``.

    Values keep their JSON types; nested objects replace whole keys rather
    than being merged. A missing file is not an error.

    Args:
        path: Path to the JSON file.
        overlay: Overlay mapping to modify in-place.

    Returns:
        True if the file existed and was merged, False if it was absent.

    Raises:
        FileReadError: If the file exists but cannot be read.
        ParseError: If the file is not a JSON object.
    """
    file_config = read_json_object(path)
    if file_config is None:
        logger.debug("Config file not found, skipping: %s", path)
        return False

    overlay.update(file_config)
    logger.debug("Loaded %d keys from %s", len(file_config), path)
    return True
