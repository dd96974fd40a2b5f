"""Option declarations and helpers shared by the data commands.

Every list and item command accepts the same three output-mode flags, so
they are declared once here and reused as parameter defaults.
"""

from __future__ import annotations

from typing import Optional

import typer

from bobcli.client import HiBobClient
from bobcli.models import OutputOptions

JSON_OPTION = typer.Option(False, "--json", help="JSON output (essential fields).")
NDJSON_OPTION = typer.Option(False, "--ndjson", help="NDJSON output (essential fields).")
FULL_OPTION = typer.Option(False, "--full", help="Include all fields in JSON output.")


def output_options(json_output: bool, ndjson_output: bool, full: bool) -> OutputOptions:
    return OutputOptions(json=json_output, ndjson=ndjson_output, full=full)


def make_client(ctx: Optional[typer.Context], options: OutputOptions) -> HiBobClient:
    """Open a client, without a spinner under ``--no-spinner`` or machine output."""
    from bobcli import client

    no_spinner = bool(ctx and ctx.obj and ctx.obj.get("no_spinner"))
    machine_output = options.json or options.ndjson
    return client.open_client(show_spinner=not (no_spinner or machine_output))
