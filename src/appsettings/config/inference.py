"""Type inference for string-valued settings sources.

Environment variables and command-line arguments only ever carry text. Before
they are merged into the overlay, each value is tried in a fixed order and the
first parse that succeeds wins:

1. boolean (``1``, ``t``, ``true``, ``0``, ``f``, ``false``; any case)
2. signed base-10 integer that fits in 64 bits
3. 64-bit float (decimal, exponent, hex-float, ``inf``/``nan``)
4. the original string

``"0"`` and ``"1"`` are therefore booleans, never integers.
"""

from __future__ import annotations

import math
import re
from typing import Union

InferredValue = Union[bool, int, float, str]

TRUE_LITERALS = frozenset({"1", "t", "true"})
FALSE_LITERALS = frozenset({"0", "f", "false"})

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOATS = frozenset(
    sign + name for sign in ("", "+", "-") for name in ("inf", "infinity", "nan")
)


def parse_bool(raw: str) -> bool:
    """Parse a boolean literal; raises ``ValueError`` for anything else."""
    lowered = raw.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal: {raw!r}")


def parse_int(raw: str) -> int:
    """Parse a signed base-10 integer within int64 range."""
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"invalid integer literal: {raw!r}")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    return value


def parse_float(raw: str) -> float:
    """Parse a 64-bit float; finite text that overflows is rejected."""
    if raw.lower() in _SPECIAL_FLOATS:
        return float(raw)
    if _HEX_FLOAT_RE.fullmatch(raw):
        try:
            value = float.fromhex(raw)
        except OverflowError as exc:
            raise ValueError(f"float out of range: {raw!r}") from exc
    elif _DECIMAL_FLOAT_RE.fullmatch(raw):
        value = float(raw)
    else:
        raise ValueError(f"invalid float literal: {raw!r}")
    if math.isinf(value):
        raise ValueError(f"float out of range: {raw!r}")
    return value


def infer_value(raw: str) -> InferredValue:
    """
    Infer the most specific type for a raw string value.

    Args:
        raw: Text taken from an environment variable or argument.

    Returns:
        ``bool``, ``int``, ``float`` or the unchanged string.

    Examples:
        >>> infer_value("False")
        False
        >>> infer_value("0")
        False
        >>> infer_value("123")
        123
        >>> infer_value("-45.6")
        -45.6
        >>> infer_value("123abc")
        '123abc'
    """
    for parser in (parse_bool, parse_int, parse_float):
        try:
            return parser(raw)
        except ValueError:
            continue
    return raw
