"""Record types shared by the decoder, API, and CLI tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any

from pydantic import BaseModel, Field

from dotprops import Int8, Property, UInt16, prop


@dataclass
class SimpleConfig:
    app_name: str = prop("app.name", default="")
    port: int = prop("app.port", default=0)
    debug: bool = prop("app.debug", default=False)


@dataclass
class DatabaseConfig:
    host: str = prop("host", default="")
    port: int = prop("port", default=0)
    username: str = prop("username", default="")
    password: str = prop("password", default="")


@dataclass
class NestedConfig:
    app_name: str = prop("app.name", default="")
    database: DatabaseConfig = prop("database", default_factory=DatabaseConfig)


@dataclass
class OptionalConfig:
    app_name: str | None = prop("app.name", default=None)
    port: int | None = prop("app.port", default=None)
    debug: bool | None = prop("app.debug", default=None)


@dataclass
class ConfigWithPointer:
    app_name: str = prop("app.name", default="")
    database: DatabaseConfig | None = prop("database", default=None)


@dataclass
class UnsupportedConfig:
    data: list[str] | None = prop("data", default=None)


@dataclass
class MixedConfig:
    """Bound, untagged, empty-tagged, and unsupported fields side by side."""

    name: Annotated[str, Property("service.name")] = ""
    ratio: float = prop("service.ratio", default=0.0)
    untagged: str = "keep"
    empty_tag: str = prop("", default="keep")
    labels: dict[str, str] = prop("service.labels", default_factory=dict)
    anything: Any = prop("service.anything", default=None)


@dataclass
class WidthConfig:
    small: Int8 = prop("limits.small", default=0)
    port: UInt16 = prop("limits.port", default=0)
    big: int = prop("limits.big", default=0)


@dataclass
class DeepConfig:
    outer: NestedConfig = prop("outer", default_factory=NestedConfig)
    spare: ConfigWithPointer | None = prop("spare", default=None)


@dataclass(frozen=True)
class FrozenConfig:
    name: str = prop("name", default="")


@dataclass
class RequiredArgs:
    name: str = prop("name")


@dataclass
class HoldsUnusableNested:
    frozen: FrozenConfig = prop("frozen", default_factory=FrozenConfig)
    required: RequiredArgs | None = prop("required", default=None)


class ServerModel(BaseModel):
    host: Annotated[str, Property("host")] = "0.0.0.0"
    port: Annotated[UInt16, Property("port")] = 80
    tls: Annotated[bool | None, Property("tls")] = None


class AppModel(BaseModel):
    name: Annotated[str, Property("app.name")] = ""
    server: Annotated[ServerModel, Property("server")] = Field(default_factory=ServerModel)
    backup: Annotated[ServerModel | None, Property("backup")] = None
    notes: str = ""
