"""Public `parse` entry point."""

from __future__ import annotations

from typing import Any

from .config import ParserConfig
from .credentials import CredentialMaterializer, FileReader
from .normalizer import ConfigNormalizer
from .tokenizer import ConnectionDescriptorTokenizer


def parse(
    connection_string: str,
    *,
    config: ParserConfig | None = None,
    reader: FileReader | None = None,
) -> dict[str, Any]:
    """Parse a connection string into keyword arguments for a PostgreSQL client.

    `reader` replaces the filesystem access used for `sslcert`, `sslkey` and
    `sslrootcert`; it receives the decoded path and returns the file's text.
    """

    settings = config or ParserConfig()
    tokenizer = ConnectionDescriptorTokenizer(socket_suffixes=settings.socket_suffixes)
    materializer = CredentialMaterializer(reader, encoding=settings.ssl_file_encoding)
    normalizer = ConfigNormalizer(materializer, config=settings)
    return normalizer.normalize(tokenizer.tokenize(connection_string)).as_dict()


# Supports both `from pgconnstr import parse` and `parse.parse(...)` call styles.
parse.parse = parse  # type: ignore[attr-defined]


__all__ = ["parse"]
