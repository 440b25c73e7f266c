"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dotprops.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class ExtractorConfig(BaseModel):
    """[extractor] section — how properties text is split into entries."""

    model_config = {"frozen": True}

    comment_prefixes: tuple[str, ...] = ("#", "!")
    line_continuation: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
