"""Authentication for the HiBob API.

HiBob service users authenticate with HTTP Basic auth built from a service
ID and an API token. :class:`CredentialResolver` locates both values and
reports their provenance for ``bob auth status``.
"""

from bobcli.auth.resolver import (
    API_TOKEN_ENV,
    SERVICE_ID_ENV,
    CredentialResolver,
)

__all__ = ["API_TOKEN_ENV", "SERVICE_ID_ENV", "CredentialResolver"]
