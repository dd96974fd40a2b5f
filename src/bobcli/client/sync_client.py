"""Synchronous HiBob API client.

:class:`HiBobClient` wraps :class:`httpx.Client` with the pieces every
command needs and nothing more:

- **Auth injection** -- an ``Authorization: Basic`` header built by
  :class:`~bobcli.auth.CredentialResolver` when the client is opened.
- **Spinner** -- each request runs inside :func:`bobcli.spinner.spinner`.
- **Error mapping** -- non-2xx responses raise
  :class:`~bobcli.exceptions.ApiError` with the upstream message; transport
  failures raise :class:`~bobcli.exceptions.ConnectionError_`.

Every command performs exactly one request. There is no retry, caching,
or pagination.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from bobcli.auth import CredentialResolver
from bobcli.client.response import describe_failure, parse_response_body
from bobcli.exceptions import ApiError, ConnectionError_
from bobcli.output import get_output
from bobcli.spinner import spinner, spinner_text

BASE_URL = "https://api.hibob.com/v1"
DEFAULT_TIMEOUT = 30.0


def build_url(path: str, base_url: str = BASE_URL) -> str:
    """Join *path* onto *base_url* without dropping the base's own path.

    ``build_url("/people/search")`` and ``build_url("people/search")`` both
    give ``https://api.hibob.com/v1/people/search``. Query strings in *path*
    are kept as-is.
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class HiBobClient:
    """Synchronous HTTP client for the HiBob API.

    Must be used as a context manager so that credentials are resolved and
    the underlying transport is opened and closed.

    Args:
        resolver: Source of the service user's credentials. Defaults to a
            resolver over ``os.environ`` and the config file.
        base_url: API root, without a trailing slash.
        show_spinner: Set to ``False`` for ``--no-spinner``.
        transport: Optional httpx transport (tests use
            :class:`httpx.MockTransport`).

    Example::

        with HiBobClient() as client:
            people = client.post("/people/search", {})
    """

    def __init__(
        self,
        resolver: Optional[CredentialResolver] = None,
        base_url: str = BASE_URL,
        show_spinner: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._resolver = resolver or CredentialResolver()
        self._base_url = base_url
        self._show_spinner = show_spinner
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> HiBobClient:
        auth_header = self._resolver.get_auth_header()
        self._client = httpx.Client(
            headers={"Authorization": auth_header, "Accept": "application/json"},
            timeout=DEFAULT_TIMEOUT,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json_body: Optional[Any] = None,
    ) -> Any:
        """Send one request and return the decoded body.

        Args:
            method: HTTP method.
            path: Path relative to the API root, e.g. ``/people/search``.
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON-serialisable body. When given, the request is
                sent with ``Content-Type: application/json``.

        Returns:
            Decoded JSON, raw text, or ``None`` for empty/204 responses.

        Raises:
            ApiError: On any non-2xx response.
            ConnectionError_: On network or timeout errors.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        method = method.upper()
        url = build_url(path, self._base_url)
        query = {k: v for k, v in (params or {}).items() if v is not None}
        output = get_output()
        output.debug(f"{method} {url}")

        kwargs: dict[str, Any] = {"params": query or None}
        if json_body is not None:
            kwargs["json"] = json_body

        try:
            with spinner(spinner_text(method, path), enabled=self._show_spinner):
                response = self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            raise ConnectionError_(f"Request to {url} failed: {exc}") from exc

        output.debug(f"HTTP {response.status_code} {response.reason_phrase}")
        body = parse_response_body(response)
        if not response.is_success:
            raise ApiError(response.status_code, describe_failure(response, body))
        return body

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Send a GET request and return the decoded body."""
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Optional[Any] = None) -> Any:
        """Send a POST request with an optional JSON body and return the decoded body."""
        return self.request("POST", path, json_body=body)
