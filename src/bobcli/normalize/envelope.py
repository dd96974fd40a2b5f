"""Unwrap API response envelopes into plain record lists.

The HiBob API wraps its payloads inconsistently across endpoints and
versions: ``{"employees": [...]}``, ``{"results": [...]}``, a bare array,
and so on. All knowledge of those wrapper keys lives here so that command
code never inspects a response's shape directly.
"""

from __future__ import annotations

from typing import Any, Sequence

PEOPLE_LIST_KEYS = ("employees", "people", "results", "items")
TIMEOFF_LIST_KEYS = ("results", "items", "timeOff", "timeoff", "outs", "people", "employees")
PERSON_ITEM_KEYS = ("employee", "person")


def extract_list(payload: Any, keys: Sequence[str]) -> list[Any]:
    """Return the record list carried by *payload*.

    A bare list is returned as-is. For a dict, the first of *keys* whose
    value is a list wins. Anything else yields ``[]``.
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []
    for key in keys:
        candidate = payload.get(key)
        if isinstance(candidate, list):
            return candidate
    return []


def extract_item(payload: Any, keys: Sequence[str] = PERSON_ITEM_KEYS) -> Any:
    """Return the single record carried by *payload*.

    The first of *keys* holding a dict wins; otherwise *payload* itself is
    returned, or ``{}`` when it is empty.
    """
    if isinstance(payload, dict):
        for key in keys:
            candidate = payload.get(key)
            if isinstance(candidate, dict):
                return candidate
    return payload or {}


def extract_people(payload: Any) -> list[Any]:
    return extract_list(payload, PEOPLE_LIST_KEYS)


def extract_timeoff(payload: Any) -> list[Any]:
    return extract_list(payload, TIMEOFF_LIST_KEYS)


def extract_person(payload: Any) -> Any:
    return extract_item(payload, PERSON_ITEM_KEYS)
