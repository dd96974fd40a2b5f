"""Auth commands -- manage the stored HiBob service user credentials.

Credentials come from ``HIBOB_SERVICE_ID`` / ``HIBOB_API_TOKEN`` when set,
otherwise from the config file written by ``bob auth login``.

Typical workflow::

    bob auth login    # prompt and save to ~/.config/bob-cli/config.json
    bob auth status   # show where each credential comes from
    bob auth logout   # delete the saved file
"""

from __future__ import annotations

import typer

from bobcli.exceptions import InvalidUsageError
from bobcli.models import CredentialSource
from bobcli.output import info, print_data, success, warning


auth_app = typer.Typer(no_args_is_help=True)

_SOURCE_LABELS = {
    CredentialSource.ENV: "environment variable",
    CredentialSource.CONFIG: "config file",
    CredentialSource.NONE: "not configured",
}


@auth_app.command("login")
def auth_login() -> None:
    """Save credentials to the config file.

    Prompts for the service ID and, without echo, the API token. Either
    value being empty aborts without writing anything.

    Raises:
        InvalidUsageError: If the service ID or API token is empty.

    Example::

        bob auth login
    """
    from bobcli.config import write_config

    info("Enter your HiBob service user credentials.")
    info("You can find these in HiBob under Settings > Integrations > Service Users.\n")

    service_id = typer.prompt("Service ID", default="", show_default=False).strip()
    if not service_id:
        raise InvalidUsageError("Service ID cannot be empty.")

    api_token = typer.prompt(
        "API Token", default="", show_default=False, hide_input=True
    ).strip()
    if not api_token:
        raise InvalidUsageError("API Token cannot be empty.")

    path = write_config(service_id, api_token)
    success(f"Credentials saved to {path}")


@auth_app.command("status")
def auth_status() -> None:
    """Show where the service ID and API token are read from.

    Nothing is sent to the API; only the environment and the config file
    are inspected.

    Example::

        bob auth status
    """
    from bobcli.auth import API_TOKEN_ENV, SERVICE_ID_ENV, CredentialResolver

    sources = CredentialResolver().sources()

    if sources.service_id is CredentialSource.NONE and sources.api_token is CredentialSource.NONE:
        warning("Not authenticated.")
        info(
            f"Run `bob auth login` or set {SERVICE_ID_ENV} and "
            f"{API_TOKEN_ENV} environment variables."
        )
        return

    print_data(f"Service ID: {_SOURCE_LABELS[sources.service_id]}")
    print_data(f"API Token:  {_SOURCE_LABELS[sources.api_token]}")

    if sources.service_id is CredentialSource.NONE:
        warning("Service ID is not configured.")
    if sources.api_token is CredentialSource.NONE:
        warning("API Token is not configured.")


@auth_app.command("logout")
def auth_logout() -> None:
    """Remove saved credentials from the config file.

    Safe to run when nothing is saved. Environment variables are left
    untouched.

    Example::

        bob auth logout
    """
    from bobcli.config import delete_config

    delete_config()
    success("Config file credentials removed.")
    info("Note: environment variables (if set) are not affected.")
