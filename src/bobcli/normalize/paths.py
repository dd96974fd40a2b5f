"""Dotted-path access over loosely typed JSON records.

Paths are strings such as ``"work.department"``; each segment indexes one
level of nested dicts. Lists and scalars are never traversed, so
``"employees.0"`` does not resolve.

Reads are total: :func:`get_path` returns :data:`MISSING` instead of
raising. A JSON ``null`` is a present value (``None``) and is distinct from
:data:`MISSING`.
"""

from __future__ import annotations

from typing import Any, Sequence, Union


class _Missing:
    """Sentinel type for a path that does not resolve."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()

PathLike = Union[str, Sequence[str]]


def split_path(path: PathLike) -> tuple[str, ...]:
    """Normalise *path* to a tuple of segments."""
    if isinstance(path, str):
        return tuple(path.split("."))
    return tuple(path)


def get_path(record: Any, path: PathLike) -> Any:
    """Return the value at *path* inside *record*, or :data:`MISSING`.

    Resolution stops with :data:`MISSING` as soon as a segment is absent or
    the current value is not a dict.
    """
    current = record
    for key in split_path(path):
        if not isinstance(current, dict) or key not in current:
            return MISSING
        current = current[key]
    return current


def set_path(target: dict[str, Any], path: PathLike, value: Any) -> None:
    """Write *value* at *path* inside *target*, creating dicts as needed.

    *target* is mutated in place. An intermediate segment holding a
    non-dict value is replaced by a fresh empty dict, so writing never
    fails.
    """
    segments = split_path(path)
    current = target
    for key in segments[:-1]:
        child = current.get(key)
        if not isinstance(child, dict):
            child = {}
            current[key] = child
        current = child
    current[segments[-1]] = value
