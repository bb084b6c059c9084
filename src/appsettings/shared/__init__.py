"""Shared utilities used across the settings loader."""

from .json_utils import read_json_object
from .logging_utils import get_logger

__all__ = [
    "get_logger",
    "read_json_object",
]
