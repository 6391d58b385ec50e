"""PostgreSQL connection string normalization."""

from __future__ import annotations

from .config import ParserConfig, load_config
from .credentials import CredentialMaterializer, read_text_file
from .models import ConnectionDescriptor, HostEntry, HostType, NormalizedConfig, SslCredentials
from .normalizer import ConfigNormalizer, DuplicateParameterError
from .parsing import parse
from .tokenizer import ConnectionDescriptorTokenizer, ConnectionStringError, tokenize

__version__ = "0.1.0"

__all__ = [
    "ConfigNormalizer",
    "ConnectionDescriptor",
    "ConnectionDescriptorTokenizer",
    "ConnectionStringError",
    "CredentialMaterializer",
    "DuplicateParameterError",
    "HostEntry",
    "HostType",
    "NormalizedConfig",
    "ParserConfig",
    "SslCredentials",
    "load_config",
    "parse",
    "read_text_file",
    "tokenize",
    "__version__",
]
