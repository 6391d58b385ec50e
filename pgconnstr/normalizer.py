"""Descriptor -> client configuration normalization."""

from __future__ import annotations

import logging

from .config import ParserConfig
from .credentials import CredentialMaterializer
from .models import ConnectionDescriptor, HostType, NormalizedConfig
from .tokenizer import ConnectionStringError

LOG = logging.getLogger(__name__)

# Fields owned by the normalizer; same-named query parameters never reach the output.
MANAGED_PARAMS = frozenset({"host", "port", "database", "user", "password", "client_encoding", "ssl"})


class DuplicateParameterError(ConnectionStringError):
    """Raised when a query parameter appears more than once."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f'Parameter "{parameter}" is repeated.')
        self.parameter = parameter


class ConfigNormalizer:
    """Builds a `NormalizedConfig` from a tokenized connection string."""

    def __init__(
        self,
        materializer: CredentialMaterializer | None = None,
        *,
        config: ParserConfig | None = None,
    ) -> None:
        self._config = config or ParserConfig()
        self._materializer = materializer or CredentialMaterializer(encoding=self._config.ssl_file_encoding)

    def normalize(self, descriptor: ConnectionDescriptor) -> NormalizedConfig:
        if descriptor.repeated_params:
            parameter = descriptor.repeated_params[0]
            LOG.warning("Rejecting repeated connection parameter", extra={"parameter": parameter})
            raise DuplicateParameterError(parameter)

        params = dict(descriptor.params)
        passthrough = {name: value for name, value in params.items() if name not in MANAGED_PARAMS}

        first = descriptor.first_host
        host = first.name if first else None
        port = first.port if first and first.type is HostType.TCP else None
        database = descriptor.path_segments[0] if descriptor.path_segments else None
        client_encoding = params.get("encoding") or params.get("client_encoding")
        fields = {
            "host": host,
            "port": port,
            "database": database or None,
            "user": descriptor.user,
            "password": descriptor.password,
            "client_encoding": client_encoding,
            "params": passthrough,
        }

        socket = params.get("socket")
        if socket:
            LOG.debug("Using socket parameter as host", extra={"socket": socket})
            fields["host"] = socket
            if not self._config.keep_port_with_socket_param:
                fields["port"] = None
            return NormalizedConfig(**fields)
        if first is not None and first.type is HostType.SOCKET:
            LOG.debug("Using unix socket host", extra={"host": first.name})
            return NormalizedConfig(**fields)

        return NormalizedConfig(ssl=self._materializer.resolve(params), **fields)


__all__ = ["ConfigNormalizer", "DuplicateParameterError", "MANAGED_PARAMS"]
