"""Time-off commands -- who is out, who is out today, and balances.

Typical usage::

    bob whosout --from 2024-01-15 --to 2024-01-20
    bob outtoday --date 2024-01-15 --json
    bob timeoff 3332883884017713238
"""

from __future__ import annotations

import json
from typing import Any, Optional

import typer
from rich.markup import escape

from bobcli.commands.common import (
    FULL_OPTION,
    JSON_OPTION,
    NDJSON_OPTION,
    make_client,
    output_options,
)
from bobcli.exceptions import InvalidUsageError
from bobcli.models import EntityType
from bobcli.normalize import RawRecord, extract_timeoff
from bobcli.normalize.resolver import (
    UNKNOWN_NAME,
    timeoff_balances,
    timeoff_date_range,
    timeoff_display_name,
    timeoff_email,
    timeoff_type,
)
from bobcli.output import output_item, output_list


def whosout_command(
    ctx: typer.Context,
    from_date: Optional[str] = typer.Option(None, "--from", help="Start date (YYYY-MM-DD)."),
    to_date: Optional[str] = typer.Option(None, "--to", help="End date (YYYY-MM-DD)."),
    json_output: bool = JSON_OPTION,
    ndjson_output: bool = NDJSON_OPTION,
    full: bool = FULL_OPTION,
) -> None:
    """Who is out of office."""
    options = output_options(json_output, ndjson_output, full)
    with make_client(ctx, options) as client:
        response = client.get("/timeoff/whosout", params={"from": from_date, "to": to_date})

    output_list(
        extract_timeoff(response),
        options,
        EntityType.TIMEOFF,
        render_timeoff_row,
    )


def outtoday_command(
    ctx: typer.Context,
    date: Optional[str] = typer.Option(None, "--date", help="Specific date (YYYY-MM-DD)."),
    json_output: bool = JSON_OPTION,
    ndjson_output: bool = NDJSON_OPTION,
    full: bool = FULL_OPTION,
) -> None:
    """Who is out today."""
    options = output_options(json_output, ndjson_output, full)
    with make_client(ctx, options) as client:
        response = client.get("/timeoff/outtoday", params={"date": date})

    output_list(
        extract_timeoff(response),
        options,
        EntityType.TIMEOFF,
        render_timeoff_row,
    )


def timeoff_command(
    ctx: typer.Context,
    employee_id: str = typer.Argument(..., metavar="ID", help="Employee id."),
    json_output: bool = JSON_OPTION,
    ndjson_output: bool = NDJSON_OPTION,
    full: bool = FULL_OPTION,
) -> None:
    """Time off balance for an employee."""
    if not employee_id.strip():
        raise InvalidUsageError("Employee id is required.")

    options = output_options(json_output, ndjson_output, full)
    with make_client(ctx, options) as client:
        response = client.get(f"/timeoff/employees/{employee_id}/balance")

    entry = response if isinstance(response, dict) else {"value": response}
    output_item(
        entry,
        options,
        EntityType.TIMEOFF,
        render_timeoff_balance,
    )


# ---------------------------------------------------------------------------
# Human rendering
# ---------------------------------------------------------------------------


def render_timeoff_row(entry: Any) -> str:
    """One line per absence: bold name, then email, type, and dates."""
    record = RawRecord(entry)
    details: list[str] = []
    email = timeoff_email(record)
    if email:
        details.append(f"[dim]{escape(email)}[/dim]")
    kind = timeoff_type(record)
    if kind:
        details.append(f"[cyan]{escape(kind)}[/cyan]")
    dates = timeoff_date_range(record)
    if dates:
        details.append(f"[yellow]{escape(dates)}[/yellow]")

    parts = [f"[bold]{escape(timeoff_display_name(record))}[/bold]"]
    if details:
        parts.append("  ".join(details))
    return "  ".join(parts)


def render_timeoff_balance(entry: Any) -> str:
    """Name header plus one ``label: amount`` line per balance.

    Falls back to the verbatim JSON when there is nothing to show.
    """
    record = RawRecord(entry)
    lines: list[str] = []
    name = timeoff_display_name(record)
    if name != UNKNOWN_NAME:
        lines.extend([f"[bold]{escape(name)}[/bold]", ""])

    for label, amount in timeoff_balances(record):
        lines.append(f"{escape(label)}: {escape(str(amount))}")

    if not lines:
        lines.append(escape(json.dumps(entry, indent=2, ensure_ascii=False, default=str)))
    return "\n".join(lines)
