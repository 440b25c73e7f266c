"""Field kinds, error codes, and fixed-width integer markers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated


class FieldKind(StrEnum):
    """How the decoder treats a bound record field."""

    SCALAR = "scalar"
    OPTIONAL_SCALAR = "optional_scalar"
    NESTED_RECORD = "nested_record"
    OPTIONAL_NESTED_RECORD = "optional_nested_record"
    UNSUPPORTED = "unsupported"


class ErrorCode(StrEnum):
    """Stable codes carried by decode failures."""

    INVALID_TARGET = "INVALID_TARGET"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    UNSUPPORTED_FIELD_TYPE = "UNSUPPORTED_FIELD_TYPE"


@dataclass(frozen=True)
class IntBounds:
    """Inclusive range an integer field accepts.

    Attach with ``Annotated[int, IntBounds(lo, hi)]`` or use one of the
    aliases below.
    """

    min: int
    max: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max


def _signed(bits: int) -> IntBounds:
    return IntBounds(-(2 ** (bits - 1)), 2 ** (bits - 1) - 1)


def _unsigned(bits: int) -> IntBounds:
    return IntBounds(0, 2**bits - 1)


# Bare ``int`` fields use the machine width.
DEFAULT_INT_BOUNDS = _signed(64)

Int8 = Annotated[int, _signed(8)]
Int16 = Annotated[int, _signed(16)]
Int32 = Annotated[int, _signed(32)]
Int64 = Annotated[int, _signed(64)]
UInt8 = Annotated[int, _unsigned(8)]
UInt16 = Annotated[int, _unsigned(16)]
UInt32 = Annotated[int, _unsigned(32)]
UInt64 = Annotated[int, _unsigned(64)]
