"""bobcli -- a command-line client for the HiBob HR REST API.

The CLI authenticates with a HiBob service user, issues a small set of fixed
requests, and renders the loosely-typed JSON it gets back either for humans
(coloured one-line rows and detail views) or for machines (``--json`` and
``--ndjson`` projected down to a stable set of essential fields).

Typical workflow::

    bob auth login                 # store service user credentials
    bob people "ava" --json        # search the directory
    bob whosout --from 2024-01-15  # who is out of office

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models and small value types shared across the package.
    config: XDG-aware persisted credential file.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stdout/stderr discipline and the ``--json``/``--ndjson`` router.
    normalize: Envelope extraction, attribute resolution, and projection.
"""

__version__ = "0.3.0"
