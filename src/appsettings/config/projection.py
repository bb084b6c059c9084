"""Project a merged overlay into a caller-supplied schema type."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticInvalidForJsonSchema

from ..errors import ProjectionError
from ..shared.logging_utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

ADAPTER_CACHE_SIZE = 128


@lru_cache(maxsize=ADAPTER_CACHE_SIZE)
def get_adapter(schema: Type[T]) -> TypeAdapter[T]:
    """Return a cached ``TypeAdapter`` for ``schema``."""
    return TypeAdapter(schema)


def object_schema(adapter: TypeAdapter[Any]) -> Dict[str, Any]:
    """
    Return the adapter's JSON schema, or ``{}`` if it has none.

    An empty schema disables key folding.
    """
    try:
        return adapter.json_schema()
    except PydanticInvalidForJsonSchema:
        logger.debug("Schema has no JSON schema; skipping key folding")
        return {}


def resolve_schema(node: Dict[str, Any], defs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Follow ``$ref`` and ``allOf``/``anyOf``/``oneOf`` wrappers to the node
    that describes an object (``properties``) or array (``items``).

    Nodes that resolve to neither are returned unchanged.
    """
    if "$ref" in node:
        name = node["$ref"].rsplit("/", 1)[-1]
        return resolve_schema(defs.get(name, {}), defs)

    for combinator in ("allOf", "anyOf", "oneOf"):
        for option in node.get(combinator, []):
            resolved = resolve_schema(option, defs)
            if "properties" in resolved or "items" in resolved:
                return resolved
    return node


def fold_value(value: Any, node: Dict[str, Any], defs: Dict[str, Any]) -> Any:
    """Fold keys inside ``value`` against the schema ``node``."""
    resolved = resolve_schema(node, defs)
    if isinstance(value, dict) and "properties" in resolved:
        return fold_keys(value, resolved, defs)
    if isinstance(value, list) and isinstance(resolved.get("items"), dict):
        return [fold_value(item, resolved["items"], defs) for item in value]
    return value


def fold_keys(
    overlay: Dict[str, Any],
    schema: Dict[str, Any],
    defs: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Map overlay keys onto schema property names, ignoring case.

    Nested objects (and lists of objects) are folded against their own
    sub-schemas. Keys are visited in sorted order and the last key landing
    on a property wins. Keys matching no property pass through unchanged.

    Args:
        overlay: Mapping to fold.
        schema: JSON schema of the target object.
        defs: ``$defs`` used to resolve references (default: ``schema["$defs"]``).

    Examples:
        >>> fold_keys(
        ...     {"databaseURL": "a", "databaseurl": "b"},
        ...     {"properties": {"databaseURL": {"type": "string"}}},
        ... )
        {'databaseURL': 'b'}
    """
    if defs is None:
        defs = schema.get("$defs", {})
    properties = resolve_schema(schema, defs).get("properties", {})

    by_lower: Dict[str, str] = {}
    for key in properties:
        by_lower.setdefault(key.lower(), key)

    folded: Dict[str, Any] = {}
    for key in sorted(overlay):
        target = key if key in properties else by_lower.get(key.lower(), key)
        value = overlay[key]
        if target in properties:
            value = fold_value(value, properties[target], defs)
        folded[target] = value
    return folded


def project(schema: Type[T], overlay: Dict[str, Any]) -> T:
    """
    Build a fresh ``schema`` instance from ``overlay``.

    The overlay is re-encoded as JSON and decoded through pydantic in strict
    mode, so any type ``pydantic.TypeAdapter`` supports (``BaseModel``,
    dataclasses, ``TypedDict``) can be used as the schema. Values are not
    coerced across JSON types: a boolean or a numeric string does not fill
    an ``int`` field, while an integer still fills a ``float`` field.

    Args:
        schema: Target type.
        overlay: Merged overlay.

    Returns:
        Validated instance of ``schema``.

    Raises:
        ProjectionError: If the overlay cannot be encoded as JSON or does not
            validate against ``schema``.
    """
    adapter = get_adapter(schema)
    folded = fold_keys(overlay, object_schema(adapter))

    try:
        document = json.dumps(folded, sort_keys=True, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ProjectionError(f"cannot encode settings overlay: {exc}") from exc

    try:
        return adapter.validate_json(document, strict=True)
    except ValidationError as exc:
        raise ProjectionError(
            f"settings do not match {getattr(schema, '__name__', schema)}: {exc}"
        ) from exc
