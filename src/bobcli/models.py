"""Canonical models shared across bobcli modules.

**Persisted models** -- serialised as JSON in the user's config directory:
    :class:`StoredConfig`.

**Resolution models** -- computed per invocation, never persisted:
    :class:`CredentialSource`, :class:`AuthSources`.

**Presentation types** -- select projection and rendering behaviour:
    :class:`EntityType`, :class:`OutputOptions`.

Upstream API records are deliberately *not* modelled here: their shape is
not contractually fixed, so they stay plain dicts and are read through
:mod:`bobcli.normalize`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pydantic import BaseModel, Field


class StoredConfig(BaseModel):
    """Service user credentials persisted by ``bob auth login``.

    Example::

        StoredConfig(service_id="SERVICE-123", api_token="s3cr3t")
    """

    service_id: str = Field(description="HiBob service user ID")
    api_token: str = Field(description="HiBob service user API token")


class CredentialSource(str, enum.Enum):
    """Where a credential value came from."""

    ENV = "env"
    CONFIG = "config"
    NONE = "none"


class AuthSources(BaseModel):
    """Per-field provenance reported by ``bob auth status``."""

    service_id: CredentialSource = CredentialSource.NONE
    api_token: CredentialSource = CredentialSource.NONE


class EntityType(str, enum.Enum):
    """Closed tag selecting the candidate tables and essential-field list."""

    PERSON = "person"
    TIMEOFF = "timeoff"


@dataclass
class OutputOptions:
    """Output-mode flags shared by every list and item command.

    ``json`` wins over ``ndjson`` when both are set; ``full`` disables the
    essential-field projection for either machine format.
    """

    json: bool = False
    ndjson: bool = False
    full: bool = False
