"""Tests for ParserConfig helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pgconnstr import parse
from pgconnstr.config import DEFAULT_SOCKET_SUFFIXES, ParserConfig, load_config


def test_defaults() -> None:
    config = ParserConfig()

    assert config.socket_suffixes == DEFAULT_SOCKET_SUFFIXES
    assert config.ssl_file_encoding == "utf-8"
    assert config.keep_port_with_socket_param is True


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    result = load_config(tmp_path / "pgconnstr.toml")

    assert result == ParserConfig()


def test_load_config_reads_values(tmp_path: Path) -> None:
    config_path = tmp_path / "pgconnstr.toml"
    config_path.write_text(
        """
socket_suffixes = [".sock", ".pipe"]
ssl_file_encoding = "latin-1"
keep_port_with_socket_param = false
"""
    )

    result = load_config(config_path)

    assert result.socket_suffixes == (".sock", ".pipe")
    assert result.ssl_file_encoding == "latin-1"
    assert result.keep_port_with_socket_param is False


def test_load_config_ignores_badly_typed_values(tmp_path: Path) -> None:
    config_path = tmp_path / "pgconnstr.toml"
    config_path.write_text('socket_suffixes = ".sock"\nkeep_port_with_socket_param = "no"\n')

    result = load_config(config_path)

    assert result == ParserConfig()


def test_load_config_handles_toml_errors(tmp_path: Path) -> None:
    config_path = tmp_path / "pgconnstr.toml"
    config_path.write_text("socket_suffixes = [unterminated")

    result = load_config(config_path)

    assert result == ParserConfig()


def test_with_socket_suffixes_returns_copy() -> None:
    config = ParserConfig()

    updated = config.with_socket_suffixes(".pipe")

    assert updated.socket_suffixes == (".pipe",)
    assert config.socket_suffixes == DEFAULT_SOCKET_SUFFIXES


def test_empty_socket_suffix_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ParserConfig(socket_suffixes=("",))


def test_with_socket_suffixes_rejects_empty_suffix() -> None:
    with pytest.raises(ValidationError):
        ParserConfig().with_socket_suffixes(".sock", "")


def test_tcp_host_keeps_port_and_ssl_with_custom_suffixes() -> None:
    config = ParserConfig().with_socket_suffixes(".pipe")

    subject = parse("pg://h:5432/db?ssl=1", config=config)

    assert subject == {"host": "h", "port": 5432, "database": "db", "ssl": True}
