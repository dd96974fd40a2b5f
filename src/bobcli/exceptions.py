"""Exception hierarchy for bobcli.

All exceptions inherit from :class:`BobError`, which carries an
``exit_code`` attribute. The top-level handler in :func:`bobcli.app.main`
catches ``BobError``, prints its message to stderr and exits with that code.
Nothing below the dispatcher retries or swallows these errors.

Subclass hierarchy::

    BobError (exit 1)
    +-- InvalidUsageError       missing or empty required argument
    +-- MissingCredentialError  no service ID / API token available
    +-- ApiError                non-2xx response from the HiBob API
    +-- ConnectionError_        network-level failure
"""

from __future__ import annotations

from typing import Optional

from bobcli.exit_codes import EXIT_GENERIC_FAILURE


class BobError(Exception):
    """Base exception for all bobcli errors.

    Args:
        message: Shown to the user as ``Error: <message>``.
        exit_code: Overrides the class default for this instance.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(BobError):
    """Raised for a missing required argument, before any request is sent."""


class MissingCredentialError(BobError):
    """Raised when a credential is set neither in the environment nor the config file.

    Args:
        field: Human label of the missing credential (``"service ID"``).
        env_var: Environment variable that would have supplied it.
    """

    def __init__(self, field: str, env_var: str):
        self.field = field
        self.env_var = env_var
        super().__init__(
            f"Missing {field}. Set {env_var} or run `bob auth login` to save credentials."
        )


class ApiError(BobError):
    """Raised when the HiBob API answers with a non-2xx status.

    Args:
        status_code: HTTP status of the failed response.
        message: Upstream message when one could be extracted, otherwise
            ``"<status> <reason>"``.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class ConnectionError_(BobError):
    """Raised when the request never got an HTTP answer (DNS, refused, timeout).

    The trailing underscore keeps the built-in ``ConnectionError`` usable.
    """