"""Binding-key declarations for record fields.

A field binds to a dotted key in one of two ways::

    @dataclass
    class AppConfig:
        name: Annotated[str, Property("app.name")] = ""
        port: int = prop("app.port", default=0)

``Annotated`` markers work on dataclasses and pydantic models alike;
``prop()`` is the dataclass shorthand that stores the key in the field's
metadata. A field with no declaration, or an empty key, is never bound.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

PROPERTY_METADATA_KEY = "property"


@dataclass(frozen=True)
class Property:
    """Annotated marker naming the dotted key a field binds to."""

    key: str


def prop(
    key: str,
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field bound to *key*.

    Extra keyword arguments are forwarded to :func:`dataclasses.field`;
    any caller-supplied ``metadata`` is preserved alongside the key.
    """
    metadata = {**kwargs.pop("metadata", {}), PROPERTY_METADATA_KEY: key}
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata=metadata,
        **kwargs,
    )


def binding_key(annotation_metadata: Iterable[Any], field_metadata: Mapping[str, Any]) -> str | None:
    """Return the field's binding key, or None when the field is unbound.

    The ``Annotated`` marker takes precedence over dataclass metadata.
    """
    for item in annotation_metadata:
        if isinstance(item, Property):
            return item.key or None
    key = field_metadata.get(PROPERTY_METADATA_KEY)
    if isinstance(key, str) and key:
        return key
    return None
