from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json

from ..errors import FileReadError, ParseError


def read_json_object(path: str | Path) -> Optional[Dict[str, Any]]:
    """
    Read a JSON object from disk, returning ``None`` if the file is missing.

    Args:
        path: Path to a JSON file.

    Returns:
        Parsed top-level object, or ``None`` when ``path`` does not exist.

    Raises:
        FileReadError: If the path exists but cannot be read (directory,
            permission denied, ...).
        ParseError: If the content is not valid JSON or its top level is not
            an object.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise FileReadError(f"cannot read {path}: {exc}", path=path) from exc

    try:
        parsed = json.loads(data)
    except (UnicodeDecodeError, ValueError) as exc:
        raise ParseError(f"invalid JSON in {path}: {exc}", path=path) from exc

    if not isinstance(parsed, dict):
        raise ParseError(
            f"expected a JSON object in {path}, got {type(parsed).__name__}",
            path=path,
        )
    return parsed
