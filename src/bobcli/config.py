"""Persisted credential file with XDG paths and atomic, owner-only writes.

The only state bobcli keeps between invocations is the service user's
credentials:

* **Path** -- ``$XDG_CONFIG_HOME/bob-cli/config.json``, defaulting to
  ``~/.config/bob-cli/config.json``. See :func:`get_config_path`.
* **Read** -- :func:`read_config` treats a missing, unparsable, or
  incomplete file as "not configured" and returns ``None``. Permission
  errors are *not* swallowed.
* **Write** -- :func:`write_config` creates the directory with ``0o700``
  and writes the file atomically with ``0o600`` so the token is never
  world-readable, even momentarily.
* **Delete** -- :func:`delete_config` is idempotent.

Crash logs live under the data directory (:func:`get_data_dir`).
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from bobcli.models import StoredConfig

_APP_NAME = "bob-cli"
_CONFIG_FILENAME = "config.json"


# --- XDG path resolution ---


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Return ``$<env_var>`` if set, else ``$HOME`` joined with *default_segments*."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory (not created).

    ``$XDG_CONFIG_HOME/bob-cli/`` with a default of ``~/.config/bob-cli/``.
    """
    return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME


def get_config_path() -> Path:
    """Return the path of the persisted credential file."""
    return get_config_dir() / _CONFIG_FILENAME


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    ``$XDG_DATA_HOME/bob-cli/`` with a default of ``~/.local/share/bob-cli/``.
    """
    path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str, mode: int = 0o600) -> None:
    """Replace *path* with *data* in one rename, never leaving a partial file.

    The temp file sits beside *path* so ``os.replace`` stays on one
    filesystem, and gets *mode* before the first byte is written.
    """
    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        os.chmod(tmp_path, mode)
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Credential file ---


def read_config(path: Optional[Path] = None) -> Optional[StoredConfig]:
    """Load the stored credentials.

    Args:
        path: Override for the config file location (tests).

    Returns:
        The validated :class:`~bobcli.models.StoredConfig`, or ``None`` if
        the file does not exist, is not UTF-8 JSON, has the wrong shape,
        or either field is empty.

    Raises:
        OSError: For filesystem errors other than a missing file, such as
            permission denied.
    """
    path = path or get_config_path()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except UnicodeDecodeError:
        return None
    try:
        config = StoredConfig.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError):
        return None
    if not config.service_id or not config.api_token:
        return None
    return config


def write_config(service_id: str, api_token: str, path: Optional[Path] = None) -> Path:
    """Persist credentials as pretty JSON with a trailing newline.

    Args:
        service_id: HiBob service user ID.
        api_token: HiBob service user API token.
        path: Override for the config file location (tests).

    Returns:
        The path that was written.
    """
    path = path or get_config_path()
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    data = StoredConfig(service_id=service_id, api_token=api_token).model_dump(mode="json")
    _atomic_write(path, json.dumps(data, indent=2) + "\n")
    return path


def delete_config(path: Optional[Path] = None) -> None:
    """Remove the stored credentials. A no-op when the file does not exist."""
    path = path or get_config_path()
    try:
        path.unlink()
    except FileNotFoundError:
        pass
