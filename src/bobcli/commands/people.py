"""People commands -- search the employee directory and view one employee.

HiBob's search endpoint only filters by ID or email, so the name and
department filters of ``bob people`` are applied locally to the returned
records, as is the active-status filter.

Typical usage::

    bob people                           # active employees
    bob people "ava" --department eng    # local filters
    bob people --inactive --ndjson       # everyone, one JSON object per line
    bob person 3332883884017713238
"""

from __future__ import annotations

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
from bobcli.normalize import RawRecord, extract_people, extract_person
from bobcli.normalize.resolver import (
    person_department,
    person_display_name,
    person_email,
    person_id,
    person_is_active,
    person_site,
    person_title,
)
from bobcli.output import output_item, output_list

PEOPLE_HELP_NOTE = (
    "Note: HiBob search only supports ID/email filters. "
    "Name and department filters are applied locally."
)


def people_command(
    ctx: typer.Context,
    query: Optional[str] = typer.Argument(None, help="Name search (local filter)."),
    department: Optional[str] = typer.Option(
        None, "--department", help="Filter by department (local filter)."
    ),
    inactive: bool = typer.Option(False, "--inactive", help="Include inactive employees."),
    json_output: bool = JSON_OPTION,
    ndjson_output: bool = NDJSON_OPTION,
    full: bool = FULL_OPTION,
) -> None:
    """List or search employees."""
    body: dict[str, Any] = {}
    if inactive:
        body["showInactive"] = True

    options = output_options(json_output, ndjson_output, full)
    with make_client(ctx, options) as client:
        response = client.post("/people/search", body)

    people = filter_people(extract_people(response), query, department, inactive)
    output_list(
        people,
        options,
        EntityType.PERSON,
        render_person_row,
    )


def person_command(
    ctx: typer.Context,
    person_id_arg: str = typer.Argument(..., metavar="ID", help="Employee id."),
    json_output: bool = JSON_OPTION,
    ndjson_output: bool = NDJSON_OPTION,
    full: bool = FULL_OPTION,
) -> None:
    """View a single employee."""
    if not person_id_arg.strip():
        raise InvalidUsageError("Person id is required.")

    options = output_options(json_output, ndjson_output, full)
    with make_client(ctx, options) as client:
        response = client.post(f"/people/{person_id_arg}")

    output_item(
        extract_person(response),
        options,
        EntityType.PERSON,
        render_person_view,
    )


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def _normalize(value: str) -> str:
    return value.strip().lower()


def matches_filter(value: str, needle: str) -> bool:
    """Case-insensitive substring match; an empty *value* never matches."""
    if not value:
        return False
    return _normalize(needle) in _normalize(value)


def filter_people(
    people: list[Any],
    query: Optional[str] = None,
    department: Optional[str] = None,
    include_inactive: bool = False,
) -> list[Any]:
    """Apply the local name, department, and active-status filters.

    People whose status cannot be determined are kept.
    """
    if query:
        people = [p for p in people if matches_filter(person_display_name(p), query)]
    if department:
        people = [p for p in people if matches_filter(person_department(p), department)]
    if not include_inactive:
        people = [p for p in people if person_is_active(p) is not False]
    return people


# ---------------------------------------------------------------------------
# Human rendering
# ---------------------------------------------------------------------------


def render_person_row(person: Any) -> str:
    """One line per person: bold name, then the non-empty details."""
    record = RawRecord(person)
    details: list[str] = []
    email = person_email(record)
    if email:
        details.append(f"[dim]{escape(email)}[/dim]")
    department = person_department(record)
    if department:
        details.append(f"[cyan]{escape(department)}[/cyan]")
    title = person_title(record)
    if title:
        details.append(f"[yellow]{escape(title)}[/yellow]")
    site = person_site(record)
    if site:
        details.append(f"[magenta]{escape(site)}[/magenta]")
    pid = person_id(record)
    if pid:
        details.append(f"[dim]id:{escape(pid)}[/dim]")

    parts = [f"[bold]{escape(person_display_name(record))}[/bold]"]
    if details:
        parts.append("  ".join(details))
    return "  ".join(parts)


def render_person_view(person: Any) -> str:
    """Multi-line detail view; empty attributes are left out."""
    record = RawRecord(person)
    lines = [f"[bold]{escape(person_display_name(record))}[/bold]", ""]

    raw_id = record.get("id")
    if raw_id:
        lines.append(f"ID:          {escape(str(raw_id))}")
    for label, value in (
        ("Email:", person_email(record)),
        ("Department:", person_department(record)),
        ("Title:", person_title(record)),
        ("Site:", person_site(record)),
    ):
        if value:
            lines.append(f"{label:<13}{escape(value)}")
    return "\n".join(lines)
