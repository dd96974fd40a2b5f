"""Project records down to their essential fields for machine output.

``--json`` and ``--ndjson`` default to a small, documented subset of each
entity's fields so that scripts see a stable shape no matter how much the
upstream payload grows. ``--full`` turns the projection off.

Projection rules:

* Only paths listed in :data:`ESSENTIAL_FIELDS` for the entity type survive.
* A path that does not resolve in the source is omitted, never emitted as
  ``null``. A source ``null`` is a value and is kept.
* Nested paths keep their nesting: ``work.department`` is written back as
  ``{"work": {"department": ...}}``.
* The source record is never modified.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional, Sequence

from bobcli.models import EntityType
from bobcli.normalize.paths import MISSING, get_path, set_path, split_path

PERSON_ESSENTIAL_FIELDS = (
    "id",
    "displayName",
    "email",
    "work.department",
    "work.title",
    "work.site",
)

TIMEOFF_ESSENTIAL_FIELDS = (
    "id",
    "employeeId",
    "employeeDisplayName",
    "displayName",
    "employeeEmail",
    "email",
    "policyTypeDisplayName",
    "type",
    "policyType",
    "status",
    "startDate",
    "endDate",
    "start",
    "end",
    "from",
    "to",
    "date",
    "balance",
    "hours",
    "days",
    "amount",
)

ESSENTIAL_FIELDS: dict[EntityType, tuple[str, ...]] = {
    EntityType.PERSON: PERSON_ESSENTIAL_FIELDS,
    EntityType.TIMEOFF: TIMEOFF_ESSENTIAL_FIELDS,
}


def get_essential_fields(entity_type: EntityType) -> tuple[str, ...]:
    return ESSENTIAL_FIELDS[EntityType(entity_type)]


def pick_fields(record: Any, fields: Iterable[str]) -> dict[str, Any]:
    """Build a new dict holding only the resolvable *fields* of *record*."""
    result: dict[str, Any] = {}
    for field in fields:
        path = split_path(field)
        value = get_path(record, path)
        if value is not MISSING:
            set_path(result, path, value)
    return result


def project(data: Any, entity_type: Optional[EntityType] = None, full: bool = False) -> Any:
    """Reduce one record or a list of records to their essential fields.

    Args:
        data: A record dict or a list of record dicts.
        entity_type: Which essential-field list applies. ``None`` disables
            projection.
        full: When ``True``, *data* is returned unchanged.

    Returns:
        *data* itself when projection is disabled, otherwise new projected
        structures.
    """
    if full or entity_type is None:
        return data
    fields = get_essential_fields(entity_type)
    if isinstance(data, list):
        return [pick_fields(item, fields) for item in data]
    return pick_fields(data, fields)


def format_json(data: Any, entity_type: Optional[EntityType] = None, full: bool = False) -> str:
    """Serialise the projection of *data* as one pretty-printed JSON document."""
    return json.dumps(project(data, entity_type, full), indent=2, ensure_ascii=False)


def format_ndjson(
    items: Sequence[Any],
    entity_type: Optional[EntityType] = None,
    full: bool = False,
) -> str:
    """Serialise *items* as newline-delimited compact JSON, one line per record.

    An empty sequence produces an empty string. There is no trailing newline.
    """
    projected = project(list(items), entity_type, full)
    return "\n".join(
        json.dumps(item, ensure_ascii=False, separators=(",", ":")) for item in projected
    )
