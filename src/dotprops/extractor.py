"""Key/value extraction — raw properties text to ordered flat entries.

One ``key=value`` declaration per logical line. Keys and values are
whitespace-trimmed; blank lines and comment lines are skipped; a line
ending in an odd number of backslashes continues onto the next one.
When a key repeats, the last value wins and the entry keeps the position
of its first occurrence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from dotprops.config.models import ExtractorConfig
from dotprops.domain.entries import FlatEntry
from dotprops.errors import MalformedInputError

logger = logging.getLogger(__name__)

_SEPARATOR = "="
_BOM = "\ufeff"


def _decode_text(data: bytes | str) -> str:
    if isinstance(data, str):
        return data.removeprefix(_BOM)
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        msg = f"input is not valid UTF-8 (byte {exc.start})"
        raise MalformedInputError(msg) from exc


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _physical_lines(text: str) -> list[str]:
    """Split on LF only; a trailing CR is dropped. Other Unicode breaks stay in values."""
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def logical_lines(
    text: str,
    *,
    continuation: bool = True,
    comment_prefixes: tuple[str, ...] = (),
) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, logical_line)`` pairs, joining continued lines.

    The line number is that of the first physical line. Comment lines
    never continue.
    """
    pending: list[str] = []
    start = 0
    for number, physical in enumerate(_physical_lines(text), start=1):
        part = physical.lstrip() if pending else physical
        if not pending:
            start = number
            if part.lstrip().startswith(comment_prefixes):
                yield start, part
                continue
        stripped = part.rstrip()
        if continuation and _continues(stripped):
            pending.append(stripped[:-1])
            continue
        pending.append(part)
        yield start, "".join(pending)
        pending = []
    if pending:
        yield start, "".join(pending)


def extract_entries(data: bytes | str, config: ExtractorConfig | None = None) -> list[FlatEntry]:
    """Turn properties text into flat entries.

    Args:
        data: UTF-8 bytes or already-decoded text.
        config: Comment and continuation rules (defaults when omitted).

    Raises:
        MalformedInputError: If *data* is bytes that are not UTF-8.
    """
    cfg = config or ExtractorConfig()
    text = _decode_text(data)

    values: dict[str, str] = {}
    lines = logical_lines(
        text,
        continuation=cfg.line_continuation,
        comment_prefixes=cfg.comment_prefixes,
    )
    for number, line in lines:
        content = line.strip()
        if not content or content.startswith(cfg.comment_prefixes):
            continue
        key, _, value = content.partition(_SEPARATOR)
        key = key.strip()
        if not key:
            logger.warning("Skipping line %d: empty key", number)
            continue
        if key in values:
            logger.debug("Line %d overrides earlier value for %s", number, key)
        values[key] = value.strip()

    return [FlatEntry.from_key(key, value) for key, value in values.items()]
