"""
@meta
name: settings_loader
type: utility
domain: config
responsibility:
  - Resolve the config directory
  - Merge config.json, config.<env>.json, environment entries and arguments
  - Project the merged overlay into a typed settings object
inputs:
  - config.json / config.<env>.json
  - Environment entries and argument list (caller supplied)
outputs:
  - Instance of the caller's settings schema
tags:
  - utility
  - config
  - loading
lifecycle:
  status: active
"""

"""Layered settings loader.

Priority, highest first: arguments > environment entries >
``config.<env>.json`` > ``config.json``.
"""

import dataclasses
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, Optional, Sequence, Tuple, Type, TypeVar

from .directory import resolve_config_directory
from .files import config_file_name, load_config_file
from .projection import project
from .sources import apply_args, apply_env_vars
from ..errors import AppSettingsError
from ..shared.logging_utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

STAGE_CONFIG_DIRECTORY = "get config directory"
STAGE_BASE_CONFIG = "load base config"
STAGE_ENV_CONFIG = "load env config"
STAGE_ENV_VARS = "load env vars"
STAGE_ARGS = "load args"
STAGE_PROJECTION = "unmarshal config"


@dataclass(frozen=True)
class LoaderOptions:
    """
    Inputs for one settings load.

    Every field is optional; ``None`` means the source is not used.
    """

    args: Optional[Tuple[str, ...]] = None
    env_vars: Optional[Tuple[str, ...]] = None
    environment: Optional[str] = None
    config_directory: Optional[str] = None


@contextmanager
def stage(name: str) -> Iterator[None]:
    """Re-raise loader errors with the failing stage attached."""
    try:
        yield
    except AppSettingsError as exc:
        error = type(exc)(f"failed to {name}: {exc}", stage=name)
        if hasattr(exc, "path"):
            error.path = exc.path
        raise error from exc


def build_overlay(options: LoaderOptions) -> Dict[str, Any]:
    """
    Merge every configured source into a fresh overlay.

    Args:
        options: Loader inputs.

    Returns:
        Untyped overlay (lower-cased keys for string sources, file keys
        as written).

    Raises:
        AppSettingsError: Subclass describing the first stage that failed.
    """
    overlay: Dict[str, Any] = {}

    with stage(STAGE_CONFIG_DIRECTORY):
        config_dir = resolve_config_directory(options.config_directory)
    logger.debug("Using config directory %s", config_dir)

    with stage(STAGE_BASE_CONFIG):
        load_config_file(config_dir / config_file_name(), overlay)

    if options.environment is not None:
        with stage(STAGE_ENV_CONFIG):
            load_config_file(config_dir / config_file_name(options.environment), overlay)

    with stage(STAGE_ENV_VARS):
        apply_env_vars(options.env_vars, overlay)

    with stage(STAGE_ARGS):
        apply_args(options.args, overlay)

    return overlay


def load_settings(
    schema: Type[T],
    *,
    args: Optional[Sequence[str]] = None,
    env_vars: Optional[Sequence[str]] = None,
    environment: Optional[str] = None,
    config_directory: Optional[str] = None,
) -> T:
    """
    Load settings into ``schema`` in one call.

    See :class:`AppSettings` for the builder form.
    """
    settings = AppSettings(schema)
    if args is not None:
        settings = settings.with_args(args)
    if env_vars is not None:
        settings = settings.with_env_vars(env_vars)
    if environment is not None:
        settings = settings.with_environment(environment)
    if config_directory is not None:
        settings = settings.with_config_directory(config_directory)
    return settings.load()


class AppSettings(Generic[T]):
    """
    Builder for loading layered settings into a typed schema.

    Each ``with_*`` call returns a new builder; the receiver is left
    unchanged, so a configured builder can be shared and loaded from
    several threads.

    Example:
        >>> settings = (
        ...     AppSettings(ServiceSettings)
        ...     .with_environment("prod")
        ...     .with_env_vars(environ_entries())
        ...     .with_args(sys.argv[1:])
        ...     .load()
        ... )  # doctest: +SKIP
    """

    def __init__(self, schema: Type[T], options: Optional[LoaderOptions] = None):
        self.schema = schema
        self.options = options or LoaderOptions()

    def __repr__(self) -> str:
        return f"AppSettings({getattr(self.schema, '__name__', self.schema)}, {self.options!r})"

    def _replace(self, **changes: Any) -> "AppSettings[T]":
        return AppSettings(self.schema, dataclasses.replace(self.options, **changes))

    def with_args(self, args: Sequence[str]) -> "AppSettings[T]":
        """Use ``args`` (e.g. ``sys.argv[1:]``) as the highest-priority source."""
        return self._replace(args=tuple(args))

    def with_env_vars(self, env_vars: Sequence[str]) -> "AppSettings[T]":
        """Use ``NAME=VALUE`` entries as a source."""
        return self._replace(env_vars=tuple(env_vars))

    def with_environment(self, environment: str) -> "AppSettings[T]":
        """Also load ``config.<environment>.json``."""
        return self._replace(environment=environment)

    def with_config_directory(self, config_directory: str) -> "AppSettings[T]":
        """Read config files from ``config_directory`` instead of the program directory."""
        return self._replace(config_directory=str(config_directory))

    def build_overlay(self) -> Dict[str, Any]:
        """Merge all sources without projecting them."""
        return build_overlay(self.options)

    def load(self) -> T:
        """
        Load settings.

        Returns:
            Fresh instance of the schema type.

        Raises:
            AppSettingsError: Subclass describing the first stage that failed;
                no partial result is returned.
        """
        try:
            overlay = build_overlay(self.options)
            with stage(STAGE_PROJECTION):
                result = project(self.schema, overlay)
        except AppSettingsError as exc:
            logger.error("Settings load failed at stage %r: %s", exc.stage, exc)
            raise

        logger.debug("Loaded settings with %d keys", len(overlay))
        return result
