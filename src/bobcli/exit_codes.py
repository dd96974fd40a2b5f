"""Numeric process exit codes.

Every failure the CLI knows about exits with :data:`EXIT_GENERIC_FAILURE`;
shell wrappers only need to distinguish success from failure. Ctrl-C uses
the conventional ``128 + SIGINT`` value.

Example::

    $ bob person ""
    $ echo $?
    1
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""Any failure: missing credentials, bad arguments, or an API/network error."""

EXIT_CANCELLED = 130
"""The user interrupted the command (Ctrl-C)."""
