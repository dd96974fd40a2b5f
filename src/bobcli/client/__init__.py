"""HTTP client for the HiBob API.

Commands obtain a client through :func:`open_client`, which applies the
root ``--no-spinner`` option; tests replace this factory to inject an
:class:`httpx.MockTransport`.

Example::

    from bobcli.client import open_client

    with open_client() as client:
        payload = client.get("/timeoff/outtoday")
"""

from __future__ import annotations

from bobcli.client.sync_client import BASE_URL, HiBobClient, build_url


def open_client(show_spinner: bool = True) -> HiBobClient:
    """Create a :class:`HiBobClient` with default credentials resolution."""
    return HiBobClient(show_spinner=show_spinner)


__all__ = ["BASE_URL", "HiBobClient", "build_url", "open_client"]
