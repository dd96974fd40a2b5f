"""Loading spinner shown on stderr while a request is in flight.

The spinner is purely presentational: :func:`spinner` is a scoped
begin/end wrapper around one network call and carries no data. It stays
silent whenever its output could get in the way of a consumer: when stderr
is not a terminal, when machine output was requested, under CI, or when the
user opted out.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from bobcli.output import get_output

DEFAULT_TEXT = "Loading"

# (method, path or path prefix ending in "/", text)
SPINNER_TEXTS = (
    ("POST", "/people/search", "Fetching people"),
    ("POST", "/people/", "Fetching person"),
    ("GET", "/timeoff/whosout", "Fetching who's out"),
    ("GET", "/timeoff/outtoday", "Fetching out today"),
)


def spinner_text(method: str, path: str) -> str:
    """Return the label for a request, matching exact paths or ``/``-suffixed prefixes."""
    for config_method, config_path, text in SPINNER_TEXTS:
        if config_method != method.upper():
            continue
        if config_path.endswith("/") and path.startswith(config_path):
            return text
        if config_path == path:
            return text
    return DEFAULT_TEXT


def spinner_disabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Whether ``BOB_SPINNER=false`` or a CI environment opts out of the spinner.

    Command-line opt-outs (``--no-spinner``, ``--json``, ``--ndjson``) arrive
    as ``enabled=False`` from the client instead.
    """
    environ = os.environ if environ is None else environ
    return environ.get("BOB_SPINNER") == "false" or bool(environ.get("CI"))


@contextmanager
def spinner(text: str, enabled: bool = True) -> Iterator[None]:
    """Show a Rich status spinner on stderr for the duration of the block."""
    console = get_output().stderr_console
    if not enabled or not console.is_terminal or spinner_disabled():
        yield
        return
    with console.status(f"[blue]{text}[/blue]", spinner="dots"):
        yield
