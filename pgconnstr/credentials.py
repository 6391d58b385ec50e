"""SSL flag coercion and materialization of key/cert/CA files."""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from .models import SslCredentials, SslSetting

LOG = logging.getLogger(__name__)

FileReader = Callable[[str], str]

SSL_TRUE_VALUES = ("true", "1")
SSL_FALSE_VALUES = ("0",)

# Query parameter -> SslCredentials field.
SSL_FILE_PARAMS: tuple[tuple[str, str], ...] = (
    ("sslcert", "cert"),
    ("sslkey", "key"),
    ("sslrootcert", "ca"),
)


def read_text_file(path: str, *, encoding: str = "utf-8") -> str:
    """Read a file as text without translating line endings.

    Undecodable bytes become U+FFFD, so only OS-level failures raise.
    """

    with open(path, encoding=encoding, errors="replace", newline="") as handle:
        return handle.read()


class CredentialMaterializer:
    """Turns `ssl*` query parameters into the value stored under `ssl`."""

    def __init__(self, reader: FileReader | None = None, *, encoding: str = "utf-8") -> None:
        self._reader = reader or self._read_with_encoding
        self._encoding = encoding

    def resolve(self, params: Mapping[str, str]) -> SslSetting | None:
        """Return `True`/`False`, the raw string, a credential record or `None`."""

        ssl: SslSetting | None = params.get("ssl")
        if ssl in SSL_TRUE_VALUES:
            ssl = True
        elif ssl in SSL_FALSE_VALUES:
            ssl = False
        if any(params.get(name) for name, _ in SSL_FILE_PARAMS):
            return self.materialize(params)
        return ssl

    def materialize(self, params: Mapping[str, str]) -> SslCredentials:
        """Read every referenced SSL file; read errors propagate."""

        contents: dict[str, str] = {}
        for name, field_name in SSL_FILE_PARAMS:
            path = params.get(name)
            if not path:
                continue
            LOG.debug("Reading SSL material", extra={"parameter": name, "path": path})
            contents[field_name] = self._reader(path)
        return SslCredentials(**contents)

    def _read_with_encoding(self, path: str) -> str:
        return read_text_file(path, encoding=self._encoding)


__all__ = [
    "CredentialMaterializer",
    "FileReader",
    "SSL_FILE_PARAMS",
    "read_text_file",
]
