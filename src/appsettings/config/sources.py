"""
@meta
name: settings_sources
type: utility
domain: config
responsibility:
  - Overlay NAME=VALUE environment entries onto the settings overlay
  - Overlay --key value / --flag arguments onto the settings overlay
inputs:
  - Raw environment entries (caller supplied)
  - Raw argument list (caller supplied)
outputs:
  - Updated overlay mapping (in place)
tags:
  - utility
  - config
  - overrides
lifecycle:
  status: active
"""

"""String-valued settings sources: environment variables and arguments."""

import os
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .inference import infer_value
from ..shared.logging_utils import get_logger

logger = get_logger(__name__)

FLAG_PREFIX = "--"
ENV_SEPARATOR = "="


def is_flag(token: str) -> bool:
    """Return True if ``token`` starts with the flag prefix."""
    return token.startswith(FLAG_PREFIX)


def apply_env_vars(
    entries: Optional[Sequence[str]],
    overlay: Dict[str, Any],
) -> None:
    """
    Overlay ``NAME=VALUE`` entries onto ``overlay``.

    Names are lower-cased and otherwise kept as-is; values go through
    :func:`infer_value`. Entries without ``=`` are skipped.

    Args:
        entries: Environment entries, or None when not configured.
        overlay: Overlay mapping to modify in-place.
    """
    if entries is None:
        return

    applied = 0
    for entry in entries:
        name, sep, raw_value = entry.partition(ENV_SEPARATOR)
        if not sep:
            continue
        overlay[name.lower()] = infer_value(raw_value)
        applied += 1

    logger.debug("Applied %d of %d environment entries", applied, len(entries))


def apply_args(
    args: Optional[Sequence[str]],
    overlay: Dict[str, Any],
) -> None:
    """
    Overlay ``--key value`` and ``--flag`` arguments onto ``overlay``.

    A flag followed by a non-flag token takes that token as its value;
    a flag followed by another flag, or by nothing, is stored as ``True``.
    Tokens that are neither flags nor consumed values are ignored.

    Args:
        args: Argument list, or None when not configured.
        overlay: Overlay mapping to modify in-place.
    """
    if args is None:
        return

    index = 0
    keys: List[str] = []
    while index < len(args):
        token = args[index]
        index += 1
        if not is_flag(token):
            continue

        key = token[len(FLAG_PREFIX):].lower()
        if index < len(args) and not is_flag(args[index]):
            overlay[key] = infer_value(args[index])
            index += 1
        else:
            overlay[key] = True
        keys.append(key)

    logger.debug("Applied %d argument overrides: %s", len(keys), keys)


def environ_entries(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Format an environment mapping as ``NAME=VALUE`` entries.

    Args:
        environ: Mapping to format (default: ``os.environ``).

    Returns:
        List of entries suitable for ``AppSettings.with_env_vars``.
    """
    if environ is None:
        environ = os.environ
    return [f"{name}{ENV_SEPARATOR}{value}" for name, value in environ.items()]
