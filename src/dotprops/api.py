"""Public decode entry points."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from dotprops.config.models import ExtractorConfig
from dotprops.decoder import decode_entries
from dotprops.domain.entries import FlatEntry
from dotprops.errors import DecodeError
from dotprops.extractor import extract_entries
from dotprops.result import DecodeResult

__all__ = ["decode", "decode_entries", "unmarshal", "unmarshal_entries", "unmarshal_file"]


def decode(data: bytes | str, target: Any, *, config: ExtractorConfig | None = None) -> DecodeResult:
    """Decode properties text into *target* and report the outcome.

    Field failures are returned in the result rather than raised.

    Raises:
        InvalidTargetError: If *target* is not a mutable record instance.
        MalformedInputError: If *data* is not UTF-8.
    """
    return decode_entries(extract_entries(data, config), target)


def unmarshal(data: bytes | str, target: Any, *, config: ExtractorConfig | None = None) -> None:
    """Decode properties text into *target*, raising if any field failed.

    Fields without a matching key keep their defaults. Fields that could
    bind are populated even when others fail.

    Raises:
        InvalidTargetError: If *target* is not a mutable record instance.
        MalformedInputError: If *data* is not UTF-8.
        DecodeError: If one or more fields failed to bind.
    """
    result = decode(data, target, config=config)
    if not result.ok:
        raise DecodeError(result.errors)


def unmarshal_file(
    path: str | Path,
    target: Any,
    *,
    config: ExtractorConfig | None = None,
) -> None:
    """Read a properties file and :func:`unmarshal` it into *target*."""
    unmarshal(Path(path).read_bytes(), target, config=config)


def unmarshal_entries(entries: Iterable[FlatEntry], target: Any) -> None:
    """Like :func:`unmarshal`, for entries that were already extracted."""
    result = decode_entries(entries, target)
    if not result.ok:
        raise DecodeError(result.errors)
