"""String-to-scalar coercion rules.

Accepted spellings:
- ``str``: any text, verbatim.
- ``bool``: ``true`` / ``false``, ASCII case-insensitive. Nothing else.
- ``int``: ``[+-]?[0-9]+``; range-checked against the field's bounds.
- ``float``: decimal or exponential notation, plus ``inf``, ``infinity``
  and ``nan`` (case-insensitive, optional sign).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from dotprops.domain.types import DEFAULT_INT_BOUNDS, IntBounds

SCALAR_TYPES: tuple[type, ...] = (bool, int, float, str)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIALS = frozenset({"inf", "infinity", "nan"})
_TRUE = "true"
_FALSE = "false"


class CoercionError(ValueError):
    """A raw string could not be converted to the requested scalar type."""


@dataclass(frozen=True)
class ScalarSpec:
    """Target scalar type plus the integer range, when relevant."""

    type: type
    bounds: IntBounds | None = None

    @property
    def type_name(self) -> str:
        if self.type is int and self.bounds is not None and self.bounds != DEFAULT_INT_BOUNDS:
            return f"int[{self.bounds.min}..{self.bounds.max}]"
        return self.type.__name__


def parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered == _TRUE:
        return True
    if lowered == _FALSE:
        return False
    raise CoercionError(f"invalid boolean {raw!r} (expected 'true' or 'false')")


def _max_digits(bounds: IntBounds) -> int:
    return len(str(max(abs(bounds.min), abs(bounds.max))))


def parse_int(raw: str, bounds: IntBounds | None = None) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise CoercionError(f"invalid integer {raw!r}")
    limits = bounds or DEFAULT_INT_BOUNDS
    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > _max_digits(limits):
        raise CoercionError(
            f"integer of {len(digits)} digits out of range [{limits.min}, {limits.max}]"
        )
    value = int(raw)
    if value not in limits:
        raise CoercionError(f"integer {raw} out of range [{limits.min}, {limits.max}]")
    return value


def parse_float(raw: str) -> float:
    if raw.lstrip("+-").lower() in _FLOAT_SPECIALS and len(raw) - len(raw.lstrip("+-")) <= 1:
        return float(raw)
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise CoercionError(f"invalid float {raw!r}")
    value = float(raw)
    if math.isinf(value):
        raise CoercionError(f"float {raw} out of range")
    return value


def coerce_scalar(raw: str, spec: ScalarSpec) -> bool | int | float | str:
    """Convert *raw* to ``spec.type``.

    Raises:
        CoercionError: If the text is not a valid literal of that type.
    """
    if spec.type is str:
        return raw
    if spec.type is bool:
        return parse_bool(raw)
    if spec.type is int:
        return parse_int(raw, spec.bounds)
    if spec.type is float:
        return parse_float(raw)
    raise CoercionError(f"unsupported scalar type {spec.type.__name__}")
