"""Exception hierarchy for dotprops.

Only two things are raised while decoding: :class:`InvalidTargetError`,
before any field is touched, and :class:`DecodeError`, after every field
has been attempted. Individual field failures are collected as
:class:`~dotprops.result.FieldError` records and never raised on their own.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotprops.domain.types import ErrorCode
    from dotprops.result import FieldError


class DotpropsError(Exception):
    """Base class for all dotprops errors."""


class InvalidTargetError(DotpropsError, TypeError):
    """The decode target is not a mutable record instance."""


class MalformedInputError(DotpropsError, ValueError):
    """The input bytes are not valid UTF-8 text."""


class DecodeError(DotpropsError):
    """One or more fields failed to bind.

    Every field that could bind did so before this was raised.

    Attributes:
        errors: The field-scoped failures, in decode order.
    """

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors: tuple[FieldError, ...] = tuple(errors)
        super().__init__(self._summary())

    def _summary(self) -> str:
        details = "; ".join(f"{e.key}: {e.message}" for e in self.errors)
        return f"{len(self.errors)} field(s) failed to decode: {details}"

    @property
    def keys(self) -> list[str]:
        """Dotted keys of the offending fields."""
        return [e.key for e in self.errors]

    def by_code(self, code: ErrorCode) -> list[FieldError]:
        return [e for e in self.errors if e.code == code]
