"""Command: decode a properties file into a record class."""

from __future__ import annotations

import dataclasses
import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import structlog
from pydantic import BaseModel

from dotprops.api import decode as decode_data
from dotprops.commands._base import DotpropsCommand
from dotprops.domain.types import ErrorCode
from dotprops.errors import InvalidTargetError, MalformedInputError
from dotprops.output.result import CommandError, CommandResult

if TYPE_CHECKING:
    from dotprops.commands._context import AppContext
    from dotprops.config.models import ExtractorConfig


def load_record_class(spec: str) -> Any:
    """Import ``module:Class`` (the class part may be dotted).

    Raises:
        click.BadParameter: If *spec* is malformed or cannot be imported.
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"expected 'module:Class', got {spec!r}"
        raise click.BadParameter(msg, param_hint="--target")
    try:
        obj: Any = importlib.import_module(module_name)
        for part in attr_path.split("."):
            obj = getattr(obj, part)
    except (ImportError, AttributeError) as exc:
        msg = f"cannot import {spec!r}: {exc}"
        raise click.BadParameter(msg, param_hint="--target") from exc
    return obj


def record_to_dict(record: Any) -> dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    return dataclasses.asdict(record)


def _failure(code: str, message: str, **detail: Any) -> CommandResult:
    return CommandResult(
        ok=False,
        op="decode",
        error=CommandError(code=code, message=message, detail=detail),
    )


def decode_file(path: Path, record_class: Any, *, config: ExtractorConfig) -> CommandResult:
    """Decode *path* into a fresh instance of *record_class*."""
    try:
        target = record_class()
    except Exception as exc:
        return _failure(
            ErrorCode.INVALID_TARGET.value,
            f"cannot instantiate {getattr(record_class, '__name__', record_class)!s}: {exc}",
        )

    try:
        with structlog.contextvars.bound_contextvars(path=str(path)):
            result = decode_data(path.read_bytes(), target, config=config)
    except InvalidTargetError as exc:
        return _failure(ErrorCode.INVALID_TARGET.value, str(exc))
    except MalformedInputError as exc:
        return _failure("MALFORMED_INPUT", str(exc), path=str(path))

    if not result.ok:
        return _failure(
            "DECODE_FAILED",
            f"{len(result.errors)} field(s) failed to decode",
            path=str(path),
            errors=[e.model_dump(mode="json") for e in result.errors],
            record=record_to_dict(target),
        )

    warnings: list[str] = []
    if result.unused_keys:
        warnings.append(f"keys not bound to any field: {', '.join(result.unused_keys)}")

    return CommandResult(
        ok=True,
        op="decode",
        data={
            "path": str(path),
            "record": record_to_dict(target),
            "unused_keys": result.unused_keys,
        },
        warnings=warnings,
    )


@click.command(
    cls=DotpropsCommand,
    examples="""\
  dotprops decode app.properties --target myapp.config:AppConfig
  dotprops --json decode app.properties -t myapp.config:AppConfig""",
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-t",
    "--target",
    "target",
    required=True,
    help="Record class to decode into, as 'module:Class'.",
)
@click.pass_obj
def decode(app: AppContext, file: Path, target: str) -> None:
    """Decode FILE into the record class named by --target."""
    record_class = load_record_class(target)
    app.emit(decode_file(file, record_class, config=app.settings.extractor))
