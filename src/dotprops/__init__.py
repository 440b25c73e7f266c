"""dotprops — decode dotted ``key=value`` properties into typed records."""

from dotprops.api import decode, decode_entries, unmarshal, unmarshal_entries, unmarshal_file
from dotprops.domain.entries import FlatEntry
from dotprops.domain.tags import Property, prop
from dotprops.domain.types import (
    ErrorCode,
    Int8,
    Int16,
    Int32,
    Int64,
    IntBounds,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from dotprops.errors import DecodeError, DotpropsError, InvalidTargetError, MalformedInputError
from dotprops.extractor import extract_entries
from dotprops.result import DecodeResult, FieldError

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "DecodeResult",
    "DotpropsError",
    "ErrorCode",
    "FieldError",
    "FlatEntry",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "IntBounds",
    "InvalidTargetError",
    "MalformedInputError",
    "Property",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "__version__",
    "decode",
    "decode_entries",
    "extract_entries",
    "prop",
    "unmarshal",
    "unmarshal_entries",
    "unmarshal_file",
]
