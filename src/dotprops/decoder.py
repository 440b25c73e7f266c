"""Structural decoder — bind flat entries onto a record tree.

Walks a record's descriptor, matches each field's full dotted key against
the entry index, coerces scalars, and recurses into nested records. Field
failures are collected bottom-up and never stop sibling fields from being
attempted; a failed field keeps whatever value it had before the call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from dotprops.domain.coercion import CoercionError, coerce_scalar
from dotprops.domain.descriptor import (
    FieldDescriptor,
    is_frozen,
    is_record_type,
    resolve_descriptor,
)
from dotprops.domain.entries import EntryIndex, FlatEntry, join_key
from dotprops.domain.types import ErrorCode, FieldKind
from dotprops.errors import InvalidTargetError
from dotprops.result import DecodeResult, FieldError

logger = logging.getLogger(__name__)


def check_target(target: Any) -> None:
    """Reject anything that is not a mutable record instance.

    Raises:
        InvalidTargetError: If *target* is None, a class, not a dataclass or
            pydantic model instance, or frozen.
    """
    if target is None:
        raise InvalidTargetError("decode target must not be None")
    if isinstance(target, type):
        msg = f"decode target must be an instance, got the class {target.__name__}"
        raise InvalidTargetError(msg)
    record_type = type(target)
    if not is_record_type(record_type):
        msg = f"decode target must be a dataclass or pydantic model, got {record_type.__name__}"
        raise InvalidTargetError(msg)
    if is_frozen(record_type):
        msg = f"decode target {record_type.__name__} is frozen"
        raise InvalidTargetError(msg)


def _mismatch(
    fd: FieldDescriptor,
    key: str,
    field_path: tuple[str, ...],
    raw: str,
    reason: str,
) -> FieldError:
    return FieldError(
        code=ErrorCode.TYPE_MISMATCH,
        key=key,
        field=".".join(field_path),
        message=f"cannot decode into {fd.type_name}: {reason}",
        value=raw,
    )


class _DecodeRun:
    """State for one decode call: the index plus the keys bound so far."""

    def __init__(self, index: EntryIndex) -> None:
        self._index = index
        self.matched: set[str] = set()

    def decode_record(self, record: Any, prefix: str, path: tuple[str, ...]) -> list[FieldError]:
        descriptor = resolve_descriptor(type(record))
        errors: list[FieldError] = []
        for fd in descriptor.fields:
            key = join_key(prefix, fd.key)
            field_path = (*path, fd.name)
            if fd.kind in (FieldKind.SCALAR, FieldKind.OPTIONAL_SCALAR):
                error = self._decode_scalar(record, fd, key, field_path)
                if error is not None:
                    errors.append(error)
            elif fd.kind is FieldKind.NESTED_RECORD:
                nested = self._nested_instance(record, fd)
                errors.extend(self.decode_record(nested, key, field_path))
            elif fd.kind is FieldKind.OPTIONAL_NESTED_RECORD:
                if not self._index.has_prefix(key):
                    continue
                nested = self._nested_instance(record, fd)
                errors.extend(self.decode_record(nested, key, field_path))
            elif fd.kind is FieldKind.UNSUPPORTED:
                error = self._check_unsupported(fd, key, field_path)
                if error is not None:
                    errors.append(error)
        return errors

    def _decode_scalar(
        self,
        record: Any,
        fd: FieldDescriptor,
        key: str,
        field_path: tuple[str, ...],
    ) -> FieldError | None:
        raw = self._index.get(key)
        if raw is None:
            return None
        self.matched.add(key)
        if fd.scalar is None:
            msg = f"scalar field {fd.name} has no scalar spec"
            raise TypeError(msg)
        try:
            value = coerce_scalar(raw, fd.scalar)
        except CoercionError as exc:
            return _mismatch(fd, key, field_path, raw, str(exc))
        try:
            setattr(record, fd.name, value)
        except ValidationError as exc:
            # validate_assignment models may reject a well-formed literal
            reason = "; ".join(err["msg"] for err in exc.errors())
            return _mismatch(fd, key, field_path, raw, reason)
        return None

    def _nested_instance(self, record: Any, fd: FieldDescriptor) -> Any:
        """Current nested value of *fd*, allocating and assigning one if absent."""
        if fd.record_type is None:
            msg = f"nested field {fd.name} has no record type"
            raise TypeError(msg)
        current = getattr(record, fd.name, None)
        if isinstance(current, fd.record_type):
            return current
        nested = fd.record_type()
        setattr(record, fd.name, nested)
        return nested

    def _check_unsupported(
        self,
        fd: FieldDescriptor,
        key: str,
        field_path: tuple[str, ...],
    ) -> FieldError | None:
        targeted = self._index.matching(key)
        if not targeted:
            return None
        self.matched.update(targeted)
        return FieldError(
            code=ErrorCode.UNSUPPORTED_FIELD_TYPE,
            key=key,
            field=".".join(field_path),
            message=f"field type {fd.type_name} is not supported",
            value=self._index.get(key),
        )


def decode_entries(entries: Iterable[FlatEntry], target: Any) -> DecodeResult:
    """Decode *entries* into *target* in place.

    Raises:
        InvalidTargetError: If *target* is not a mutable record instance.
    """
    check_target(target)
    index = EntryIndex(entries)
    run = _DecodeRun(index)
    errors = run.decode_record(target, prefix="", path=())

    matched = [key for key in index if key in run.matched]
    unused = [key for key in index if key not in run.matched]
    if unused:
        logger.debug("Unused keys for %s: %s", type(target).__name__, ", ".join(unused))
    logger.debug(
        "Decoded %s: %d entries, %d matched, %d errors",
        type(target).__name__,
        len(index),
        len(matched),
        len(errors),
    )
    return DecodeResult(errors=errors, matched_keys=matched, unused_keys=unused)
