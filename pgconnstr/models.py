"""Shared dataclasses passed between the tokenizer and the normalizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class HostType(str, Enum):
    """How a host entry should be reached."""

    TCP = "tcp"
    SOCKET = "socket"


@dataclass(frozen=True, slots=True)
class HostEntry:
    """Single host taken from the authority section."""

    name: str
    port: int | None = None
    type: HostType = HostType.TCP


@dataclass(frozen=True, slots=True)
class ConnectionDescriptor:
    """Structured decomposition of a raw connection string."""

    scheme: str | None = None
    user: str | None = None
    password: str | None = None
    hosts: tuple[HostEntry, ...] = ()
    path_segments: tuple[str, ...] = ()
    params: Mapping[str, str] = field(default_factory=dict)
    repeated_params: tuple[str, ...] = ()

    @property
    def first_host(self) -> HostEntry | None:
        """Only the first host is honored when building a config."""

        return self.hosts[0] if self.hosts else None


@dataclass(frozen=True, slots=True)
class SslCredentials:
    """SSL material read from the files named in the connection string."""

    cert: str | None = None
    key: str | None = None
    ca: str | None = None

    def as_dict(self) -> dict[str, str]:
        values = {"cert": self.cert, "key": self.key, "ca": self.ca}
        return {name: value for name, value in values.items() if value is not None}


SslSetting = bool | str | SslCredentials


@dataclass(frozen=True, slots=True)
class NormalizedConfig:
    """Canonical connection settings plus passthrough query parameters."""

    host: str | None = None
    port: int | None = None
    database: str | None = None
    user: str | None = None
    password: str | None = None
    client_encoding: str | None = None
    ssl: SslSetting | None = None
    params: Mapping[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Flatten into the mapping handed to a client constructor."""

        result: dict[str, Any] = dict(self.params)
        for name in ("host", "port", "database", "user", "password", "client_encoding"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        if isinstance(self.ssl, SslCredentials):
            result["ssl"] = self.ssl.as_dict()
        elif self.ssl is not None:
            result["ssl"] = self.ssl
        return result


__all__ = [
    "ConnectionDescriptor",
    "HostEntry",
    "HostType",
    "NormalizedConfig",
    "SslCredentials",
    "SslSetting",
]
