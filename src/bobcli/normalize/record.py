"""Safe, total accessors over a single untyped API record."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from bobcli.normalize.paths import PathLike, get_path


class RawRecord:
    """Read-only view over one API entity.

    Every accessor returns ``None`` rather than raising when a field is
    absent or has an unexpected type. The wrapped dict is never modified.
    Non-dict payloads are accepted and behave as an empty record.

    Args:
        data: The decoded JSON value for one entity.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any) -> None:
        self._data = data

    @property
    def data(self) -> Any:
        """The wrapped value, unchanged."""
        return self._data

    def get(self, path: PathLike) -> Any:
        return get_path(self._data, path)

    def get_string(self, path: PathLike) -> Optional[str]:
        """Return the value at *path* if it is a string (possibly empty)."""
        value = get_path(self._data, path)
        return value if isinstance(value, str) else None

    def get_bool(self, path: PathLike) -> Optional[bool]:
        value = get_path(self._data, path)
        return value if isinstance(value, bool) else None

    def first_string(self, paths: Iterable[PathLike], allow_empty: bool = False) -> Optional[str]:
        """Return the first string found along *paths*, in order.

        Empty strings are skipped unless *allow_empty* is set.
        """
        for path in paths:
            value = self.get_string(path)
            if value is None:
                continue
            if value or allow_empty:
                return value
        return None

    def first_bool(self, paths: Iterable[PathLike]) -> Optional[bool]:
        for path in paths:
            value = self.get_bool(path)
            if value is not None:
                return value
        return None

    def __repr__(self) -> str:
        return f"RawRecord({self._data!r})"
