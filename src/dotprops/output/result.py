"""CommandResult and CommandError — what every CLI command emits.

INVARIANT: All commands hand a CommandResult to ``AppContext.emit``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CommandError(BaseModel):
    """Structured error payload within a CommandResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class CommandResult(BaseModel):
    """Return type for CLI commands.

    Attributes:
        ok: Whether the command succeeded.
        op: Name of the operation (e.g. ``"decode"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: CommandError | None = None
