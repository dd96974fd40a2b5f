"""Credential resolution with environment-over-file precedence.

A HiBob service user is identified by two values, the service ID and the
API token. Each is resolved independently:

1. The environment variable (``HIBOB_SERVICE_ID`` / ``HIBOB_API_TOKEN``)
   wins unconditionally when set to a non-empty value.
2. Otherwise the persisted config file written by ``bob auth login`` is
   consulted.
3. Otherwise resolution fails with :class:`~bobcli.exceptions.MissingCredentialError`.

Both sources are injected into :class:`CredentialResolver` so tests never
need to mutate ``os.environ`` or touch the real home directory. Nothing is
cached: every call re-reads the config file.
"""

from __future__ import annotations

import base64
import os
from typing import Callable, Mapping, Optional

from bobcli.config import read_config
from bobcli.exceptions import MissingCredentialError
from bobcli.models import AuthSources, CredentialSource, StoredConfig

SERVICE_ID_ENV = "HIBOB_SERVICE_ID"
API_TOKEN_ENV = "HIBOB_API_TOKEN"

ConfigReader = Callable[[], Optional[StoredConfig]]


class CredentialResolver:
    """Resolve HiBob credentials from the environment and the config file.

    Args:
        environ: Mapping consulted for environment variables. Defaults to
            ``os.environ``.
        config_reader: Callable returning the stored config or ``None``.
            Defaults to :func:`bobcli.config.read_config`.

    Example::

        resolver = CredentialResolver(environ={"HIBOB_SERVICE_ID": "svc"})
        resolver.sources().service_id  # CredentialSource.ENV
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        config_reader: Optional[ConfigReader] = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._config_reader = config_reader or read_config

    def get_service_id(self) -> str:
        """Return the service ID.

        Raises:
            MissingCredentialError: If neither source provides one.
        """
        value = self._environ.get(SERVICE_ID_ENV)
        if value:
            return value
        config = self._config_reader()
        if config is not None:
            return config.service_id
        raise MissingCredentialError("service ID", SERVICE_ID_ENV)

    def get_api_token(self) -> str:
        """Return the API token.

        Raises:
            MissingCredentialError: If neither source provides one.
        """
        value = self._environ.get(API_TOKEN_ENV)
        if value:
            return value
        config = self._config_reader()
        if config is not None:
            return config.api_token
        raise MissingCredentialError("API token", API_TOKEN_ENV)

    def get_auth_header(self) -> str:
        """Build the ``Authorization: Basic`` value for the service user."""
        raw = f"{self.get_service_id()}:{self.get_api_token()}"
        return "Basic " + base64.b64encode(raw.encode("utf-8")).decode("ascii")

    def sources(self) -> AuthSources:
        """Report where each credential would come from, without using it."""
        config = self._config_reader()

        def _source(env_var: str) -> CredentialSource:
            if self._environ.get(env_var):
                return CredentialSource.ENV
            if config is not None:
                return CredentialSource.CONFIG
            return CredentialSource.NONE

        return AuthSources(
            service_id=_source(SERVICE_ID_ENV),
            api_token=_source(API_TOKEN_ENV),
        )
