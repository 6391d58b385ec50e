"""Parser settings and the TOML loader for them."""

from __future__ import annotations

from pathlib import Path

import tomllib

from pydantic import BaseModel, field_validator

DEFAULT_SOCKET_SUFFIXES: tuple[str, ...] = (".sock", ".socket")


class ParserConfig(BaseModel):
    """Knobs controlling how connection strings are normalized."""

    socket_suffixes: tuple[str, ...] = DEFAULT_SOCKET_SUFFIXES
    ssl_file_encoding: str = "utf-8"
    # The socket parameter overrides the host but leaves any promoted port alone.
    keep_port_with_socket_param: bool = True

    @field_validator("socket_suffixes")
    @classmethod
    def validate_socket_suffixes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """An empty suffix would match every host."""
        if any(not suffix for suffix in value):
            raise ValueError("socket suffixes must be non-empty")
        return value

    def with_socket_suffixes(self, *suffixes: str) -> ParserConfig:
        """Return a copy recognizing the given host suffixes as unix sockets."""

        return type(self)(**{**self.model_dump(), "socket_suffixes": tuple(suffixes)})


def load_config(path: Path) -> ParserConfig:
    """Load settings from a TOML file; fall back to defaults if missing."""

    try:
        data = _read_config_file(path)
    except (tomllib.TOMLDecodeError, OSError):
        return ParserConfig()
    return ParserConfig(**data)


def _read_config_file(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    suffixes = raw.get("socket_suffixes")
    if isinstance(suffixes, list):
        data["socket_suffixes"] = tuple(str(suffix) for suffix in suffixes if str(suffix))
    encoding = raw.get("ssl_file_encoding")
    if isinstance(encoding, str) and encoding:
        data["ssl_file_encoding"] = encoding
    keep_port = raw.get("keep_port_with_socket_param")
    if isinstance(keep_port, bool):
        data["keep_port_with_socket_param"] = keep_port
    return data


__all__ = ["DEFAULT_SOCKET_SUFFIXES", "ParserConfig", "load_config"]
