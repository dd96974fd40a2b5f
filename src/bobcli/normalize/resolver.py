"""Canonical display attributes resolved from ordered candidate paths.

HiBob endpoints and API versions disagree on field names: a person's name may
be ``displayName``, ``fullName`` or ``name``; a time-off entry may nest the
employee under ``employee`` or flatten it. Each canonical attribute is
therefore described by a *candidate list*, an ordered tuple of dotted paths.
The first path holding a non-empty string wins.

The tables below are data, not code, and their order is part of the CLI's
observable output: reordering a tuple changes what users see.

All resolvers are pure reads. They accept either a raw dict or a
:class:`~bobcli.normalize.record.RawRecord`, never raise, and fall back to a
documented default (``"Unknown"`` for names, ``""`` for free text, ``None``
for an unknown active status).
"""

from __future__ import annotations

from typing import Any, Optional, Union

from bobcli.normalize.record import RawRecord

UNKNOWN_NAME = "Unknown"

# --- Person candidates ---

PERSON_NAME_FIELDS = ("displayName", "fullName", "name")
PERSON_EMAIL_FIELDS = ("email", "work.email")
PERSON_DEPARTMENT_FIELDS = ("work.department", "department")
PERSON_TITLE_FIELDS = ("work.title", "title")
PERSON_SITE_FIELDS = ("work.site", "site")
PERSON_ACTIVE_FLAG_FIELDS = ("active", "isActive")
PERSON_STATUS_FIELDS = ("status", "employmentStatus")

STATUS_VALUES = {
    "active": True,
    "inactive": False,
    "terminated": False,
}

# --- Time-off candidates ---

TIMEOFF_NAME_FIELDS = (
    "employeeDisplayName",
    "displayName",
    "name",
    "employeeName",
    "employee.displayName",
    "employee.name",
)
TIMEOFF_EMAIL_FIELDS = ("email", "employeeEmail", "employee.email")
TIMEOFF_TYPE_FIELDS = (
    "policyTypeDisplayName",
    "type",
    "policyType",
    "timeOffType",
    "reason",
    "policy.name",
)
TIMEOFF_START_FIELDS = ("startDate", "start", "from", "date", "start.date", "time.startDate")
TIMEOFF_END_FIELDS = ("endDate", "end", "to", "date", "end.date", "time.endDate")

BALANCE_LABEL_FIELDS = ("policyType", "type", "name")
BALANCE_AMOUNT_FIELDS = ("balance", "amount", "days", "hours")
DEFAULT_BALANCE_LABEL = "Balance"

RecordLike = Union[RawRecord, Any]


def _wrap(record: RecordLike) -> RawRecord:
    return record if isinstance(record, RawRecord) else RawRecord(record)


# --- Person ---


def person_display_name(record: RecordLike) -> str:
    return _wrap(record).first_string(PERSON_NAME_FIELDS) or UNKNOWN_NAME


def person_email(record: RecordLike) -> str:
    return _wrap(record).first_string(PERSON_EMAIL_FIELDS) or ""


def person_department(record: RecordLike) -> str:
    return _wrap(record).first_string(PERSON_DEPARTMENT_FIELDS) or ""


def person_title(record: RecordLike) -> str:
    return _wrap(record).first_string(PERSON_TITLE_FIELDS) or ""


def person_site(record: RecordLike) -> str:
    return _wrap(record).first_string(PERSON_SITE_FIELDS) or ""


def person_id(record: RecordLike) -> str:
    return _wrap(record).get_string("id") or ""


def person_is_active(record: RecordLike) -> Optional[bool]:
    """Return whether the person is active, or ``None`` when it cannot be told.

    Boolean flags (``active``, ``isActive``) are consulted first. Then the
    string fields ``status`` and ``employmentStatus`` are matched
    case-insensitively against ``active`` / ``inactive`` / ``terminated``;
    an unrecognised value moves on to the next field.
    """
    raw = _wrap(record)
    flag = raw.first_bool(PERSON_ACTIVE_FLAG_FIELDS)
    if flag is not None:
        return flag
    for path in PERSON_STATUS_FIELDS:
        value = raw.get_string(path)
        if value is None:
            continue
        mapped = STATUS_VALUES.get(value.lower())
        if mapped is not None:
            return mapped
    return None


# --- Time off ---


def timeoff_display_name(record: RecordLike) -> str:
    return _wrap(record).first_string(TIMEOFF_NAME_FIELDS) or UNKNOWN_NAME


def timeoff_email(record: RecordLike) -> str:
    return _wrap(record).first_string(TIMEOFF_EMAIL_FIELDS) or ""


def timeoff_type(record: RecordLike) -> str:
    return _wrap(record).first_string(TIMEOFF_TYPE_FIELDS) or ""


def timeoff_date_range(record: RecordLike) -> str:
    """Render the entry's dates as ``"<start> - <end>"``, a single date, or ``""``.

    Start and end are resolved independently; for each, the first candidate
    holding a string is taken. A single-day entry (``date`` only, or equal
    start and end) is rendered once.
    """
    raw = _wrap(record)
    start = raw.first_string(TIMEOFF_START_FIELDS, allow_empty=True)
    end = raw.first_string(TIMEOFF_END_FIELDS, allow_empty=True)
    if start and end and start != end:
        return f"{start} - {end}"
    return start or end or ""


def timeoff_balances(record: RecordLike) -> list[tuple[str, Any]]:
    """Return ``(label, amount)`` pairs from the record's ``balances`` list.

    Entries that are not objects, or that carry no usable amount (missing,
    zero, empty), are skipped.
    """
    balances = _wrap(record).get("balances")
    if not isinstance(balances, list):
        return []
    rows: list[tuple[str, Any]] = []
    for item in balances:
        if not isinstance(item, dict):
            continue
        entry = RawRecord(item)
        label = entry.first_string(BALANCE_LABEL_FIELDS) or DEFAULT_BALANCE_LABEL
        amount = _first_amount(entry)
        if amount is not None:
            rows.append((label, amount))
    return rows


def _first_amount(entry: RawRecord) -> Optional[Union[str, int, float]]:
    for path in BALANCE_AMOUNT_FIELDS:
        value = entry.get(path)
        if isinstance(value, bool):
            continue
        if isinstance(value, (str, int, float)) and value:
            return value
    return None
