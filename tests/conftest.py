"""Shared pytest fixtures for all tests."""

import json
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_config(temp_dir) -> Callable[..., Path]:
    """Write a config file into ``temp_dir``.

    ``write_config({"port": 1})`` writes ``config.json``;
    ``write_config({...}, environment="dev")`` writes ``config.dev.json``.
    Strings are written verbatim.
    """

    def _write(content: Any, environment: Optional[str] = None) -> Path:
        name = "config.json" if environment is None else f"config.{environment}.json"
        path = temp_dir / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
