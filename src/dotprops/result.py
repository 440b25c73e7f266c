"""DecodeResult and FieldError — what a decode call reports back.

INVARIANT: ``ok`` is True exactly when ``errors`` is empty.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from dotprops.domain.types import ErrorCode


class FieldError(BaseModel):
    """A field that matched input but could not be assigned.

    Attributes:
        code: ``TYPE_MISMATCH`` or ``UNSUPPORTED_FIELD_TYPE``.
        key: Full dotted key the field binds to (e.g. ``database.port``).
        field: Attribute path from the root record (e.g. ``database.port``).
        message: Human-readable reason.
        value: Raw input value, when a single value was involved.
    """

    model_config = {"frozen": True}

    code: ErrorCode
    key: str
    field: str
    message: str
    value: str | None = None


class DecodeResult(BaseModel):
    """Outcome of decoding one input into one target.

    Attributes:
        errors: Field-scoped failures collected across the whole record tree.
        matched_keys: Input keys some field bound to, successful or not.
        unused_keys: Input keys no field bound to. Never an error.
    """

    model_config = {"frozen": True}

    errors: list[FieldError] = Field(default_factory=list)
    matched_keys: list[str] = Field(default_factory=list)
    unused_keys: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.errors
