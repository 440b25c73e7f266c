"""Target descriptors — the per-type field table the decoder walks.

A descriptor lists a record type's bound fields in declaration order,
each classified into a :class:`FieldKind`. Classification never fails:
types the decoder cannot represent become ``UNSUPPORTED`` and only turn
into an error when input actually targets them.

Records are dataclasses or pydantic models that are mutable (not frozen).
A record used as a nested field must also be constructible with no
arguments, since the decoder allocates nested values on demand.

String annotations that name an unreachable class (a record defined inside
a function, under postponed evaluation) stay text and classify as
``UNSUPPORTED``.
"""

from __future__ import annotations

import dataclasses
import functools
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, Union

from pydantic import BaseModel

from dotprops.domain.coercion import SCALAR_TYPES, ScalarSpec
from dotprops.domain.tags import binding_key
from dotprops.domain.types import FieldKind, IntBounds
from dotprops.errors import InvalidTargetError


@dataclass(frozen=True)
class FieldDescriptor:
    """One bound field of a record type."""

    name: str
    key: str
    kind: FieldKind
    annotation: Any
    scalar: ScalarSpec | None = None
    record_type: type | None = None

    @property
    def type_name(self) -> str:
        if self.scalar is not None:
            return self.scalar.type_name
        if self.record_type is not None:
            return self.record_type.__name__
        return _describe(self.annotation)


@dataclass(frozen=True)
class TargetDescriptor:
    """Ordered bound fields of one record type."""

    record_type: type
    fields: tuple[FieldDescriptor, ...]

    def field(self, name: str) -> FieldDescriptor | None:
        for fd in self.fields:
            if fd.name == name:
                return fd
        return None

    @property
    def keys(self) -> list[str]:
        return [fd.key for fd in self.fields]


def is_record_type(tp: Any) -> bool:
    """True for dataclass types and pydantic model classes."""
    if not isinstance(tp, type):
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def is_frozen(tp: type) -> bool:
    """True if instances of record type *tp* reject attribute assignment."""
    if dataclasses.is_dataclass(tp):
        return bool(tp.__dataclass_params__.frozen)  # type: ignore[attr-defined]
    if issubclass(tp, BaseModel):
        return bool(tp.model_config.get("frozen", False))
    return False


def _is_default_constructible(tp: type) -> bool:
    if dataclasses.is_dataclass(tp):
        return all(
            f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING
            for f in dataclasses.fields(tp)
            if f.init
        )
    if issubclass(tp, BaseModel):
        return not any(info.is_required() for info in tp.model_fields.values())
    return False


def _is_nestable(tp: Any) -> bool:
    return is_record_type(tp) and not is_frozen(tp) and _is_default_constructible(tp)


def _describe(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def _unwrap_annotated(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    if typing.get_origin(annotation) is Annotated:
        base, *metadata = typing.get_args(annotation)
        return base, tuple(metadata)
    return annotation, ()


def _classify(annotation: Any) -> tuple[FieldKind, ScalarSpec | None, type | None]:
    base, metadata = _unwrap_annotated(annotation)
    origin = typing.get_origin(base)

    if origin is Union or origin is types.UnionType:
        args = typing.get_args(base)
        present = [arg for arg in args if arg is not type(None)]
        if len(present) != 1 or len(args) != 2:
            return FieldKind.UNSUPPORTED, None, None
        kind, scalar, record_type = _classify(present[0])
        if kind is FieldKind.SCALAR:
            return FieldKind.OPTIONAL_SCALAR, scalar, None
        if kind is FieldKind.NESTED_RECORD:
            return FieldKind.OPTIONAL_NESTED_RECORD, None, record_type
        return FieldKind.UNSUPPORTED, None, None

    if base in SCALAR_TYPES:
        bounds = None
        if base is int:
            bounds = next((m for m in metadata if isinstance(m, IntBounds)), None)
        return FieldKind.SCALAR, ScalarSpec(type=base, bounds=bounds), None

    if _is_nestable(base):
        return FieldKind.NESTED_RECORD, None, base

    return FieldKind.UNSUPPORTED, None, None


def _resolve_field(record_type: type, f: dataclasses.Field[Any]) -> Any:
    """Resolve one field annotation; names that stay unresolvable are returned as text."""
    if not isinstance(f.type, str):
        return f.type
    holder = type(
        record_type.__name__,
        (),
        {"__annotations__": {f.name: f.type}, "__module__": record_type.__module__},
    )
    try:
        hints = typing.get_type_hints(holder, include_extras=True)
    except NameError:
        return f.type
    return hints[f.name]


def _declared_fields(record_type: type) -> list[tuple[str, Any, dict[str, Any]]]:
    """``(name, annotation, dataclass metadata)`` in declaration order.

    Pydantic strips ``Annotated`` into ``FieldInfo.metadata``; it is rebuilt
    here so both record flavours classify the same way.
    """
    if dataclasses.is_dataclass(record_type):
        try:
            hints = typing.get_type_hints(record_type, include_extras=True)
        except NameError:
            hints = {f.name: _resolve_field(record_type, f) for f in dataclasses.fields(record_type)}
        return [
            (f.name, hints.get(f.name, Any), dict(f.metadata))
            for f in dataclasses.fields(record_type)
        ]
    declared: list[tuple[str, Any, dict[str, Any]]] = []
    for name, info in record_type.model_fields.items():  # type: ignore[attr-defined]
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]  # type: ignore[valid-type]
        declared.append((name, annotation, {}))
    return declared


@functools.lru_cache(maxsize=256)
def resolve_descriptor(record_type: type) -> TargetDescriptor:
    """Build (and cache) the descriptor for *record_type*.

    Raises:
        InvalidTargetError: If *record_type* is not a dataclass or pydantic model.
    """
    if not is_record_type(record_type):
        msg = f"{_describe(record_type)} is not a dataclass or pydantic model"
        raise InvalidTargetError(msg)

    fields: list[FieldDescriptor] = []
    for name, annotation, field_metadata in _declared_fields(record_type):
        _, annotation_metadata = _unwrap_annotated(annotation)
        key = binding_key(annotation_metadata, field_metadata)
        if key is None:
            continue
        kind, scalar, nested = _classify(annotation)
        fields.append(
            FieldDescriptor(
                name=name,
                key=key,
                kind=kind,
                annotation=annotation,
                scalar=scalar,
                record_type=nested,
            )
        )
    return TargetDescriptor(record_type=record_type, fields=tuple(fields))
