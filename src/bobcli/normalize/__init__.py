"""Normalisation of loosely-typed HiBob API payloads.

The HiBob API does not commit to one response shape, so this package turns
whatever arrives into something the CLI can present predictably:

* :mod:`~bobcli.normalize.paths` -- dotted-path get/set over nested dicts.
* :mod:`~bobcli.normalize.record` -- :class:`RawRecord`, total typed accessors.
* :mod:`~bobcli.normalize.resolver` -- ordered candidate tables for names,
  emails, departments, dates, and balances.
* :mod:`~bobcli.normalize.envelope` -- unwrap ``{"employees": [...]}`` style
  envelopes into record lists.
* :mod:`~bobcli.normalize.projector` -- reduce records to essential fields
  for ``--json`` / ``--ndjson``.

Every function here is pure and never raises on malformed input.
"""

from bobcli.normalize.envelope import (
    extract_item,
    extract_list,
    extract_people,
    extract_person,
    extract_timeoff,
)
from bobcli.normalize.paths import MISSING, get_path, set_path
from bobcli.normalize.projector import format_json, format_ndjson, project
from bobcli.normalize.record import RawRecord

__all__ = [
    "MISSING",
    "RawRecord",
    "extract_item",
    "extract_list",
    "extract_people",
    "extract_person",
    "extract_timeoff",
    "format_json",
    "format_ndjson",
    "get_path",
    "project",
    "set_path",
]
