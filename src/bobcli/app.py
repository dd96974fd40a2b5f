"""The ``bob`` command: root options, sub-command registration, entry point.

Data commands (``people``, ``person``, ``whosout``, ``outtoday``,
``timeoff``) hang directly off the root; credentials and agent skills live
in the ``auth`` and ``skill`` groups.

Errors are not handled inside commands. They travel up to :func:`main`,
which turns a :class:`~bobcli.exceptions.BobError` or :class:`OSError` into
``Error: <message>`` on stderr and exit status 1. Anything else is a bug:
its traceback is saved under the data directory and the path is printed.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator, NoReturn

import click
import typer
from typer.core import TyperGroup

from bobcli import __version__
from bobcli.exit_codes import EXIT_CANCELLED, EXIT_GENERIC_FAILURE

AGENT_NOTE = (
    "Note for AI/LLM agents: use --json or --ndjson for unambiguous, parseable output. "
    "Default JSON shows essential fields; use --full for all fields."
)


@contextmanager
def _usage_errors_exit_1() -> Iterator[None]:
    try:
        yield
    except click.UsageError as exc:
        exc.exit_code = EXIT_GENERIC_FAILURE
        raise


class BobGroup(TyperGroup):
    """Root group that exits 1 on usage errors such as a missing argument."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        with _usage_errors_exit_1():
            return super().parse_args(ctx, args)

    def invoke(self, ctx: click.Context) -> Any:
        with _usage_errors_exit_1():
            return super().invoke(ctx)


app = typer.Typer(
    name="bob",
    cls=BobGroup,
    help="HiBob CLI.",
    epilog=AGENT_NOTE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

from bobcli.commands.auth import auth_app  # noqa: E402
from bobcli.commands.people import PEOPLE_HELP_NOTE, people_command, person_command  # noqa: E402
from bobcli.commands.skill import skill_app  # noqa: E402
from bobcli.commands.timeoff import (  # noqa: E402
    outtoday_command,
    timeoff_command,
    whosout_command,
)

app.command("people", epilog=PEOPLE_HELP_NOTE)(people_command)
app.command("person")(person_command)
app.command("whosout")(whosout_command)
app.command("outtoday")(outtoday_command)
app.command("timeoff")(timeoff_command)
app.add_typer(auth_app, name="auth", help="Manage authentication credentials.")
app.add_typer(skill_app, name="skill", help="Install the HiBob skill for coding agents.")


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"bob {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Print the bob version.",
    ),
    no_spinner: bool = typer.Option(
        False, "--no-spinner", help="Disable loading animations."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Plain output without colours."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Trace requests on stderr."
    ),
) -> None:
    """Apply the root options before any sub-command runs.

    Installs the :class:`~bobcli.output.OutputManager` for this invocation
    and leaves ``no_spinner`` and ``verbose`` in ``ctx.obj`` for the
    commands that open an API client.

    Args:
        ctx: Click context shared with the sub-command.
        version: Eager flag handled by :func:`_print_version`.
        no_spinner: Never show the request spinner.
        no_color: Strip colour from both streams.
        verbose: Show request traces and library debug logging.
    """
    from bobcli.output import OutputManager, set_output

    set_output(OutputManager(no_color=no_color, verbose=verbose))
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="[debug] %(name)s: %(message)s",
        )

    ctx.ensure_object(dict)
    ctx.obj.update(no_spinner=no_spinner, verbose=verbose)


def _cancel() -> NoReturn:
    sys.stderr.write("\nCancelled.\n")
    sys.exit(EXIT_CANCELLED)


def _setup_signal_handlers() -> None:
    """Exit with status 130 on Ctrl-C instead of dumping a traceback."""

    def _on_sigint(signum: int, frame: Any) -> None:  # noqa: ANN401
        _cancel()

    signal.signal(signal.SIGINT, _on_sigint)


def _write_crash_log(exc: BaseException) -> Path:
    """Save the traceback of *exc* under ``<data dir>/logs`` and return the file."""
    from bobcli.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"crash-{datetime.now():%Y%m%d-%H%M%S}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        encoding="utf-8",
    )
    return log_path


def main() -> None:
    """Console-script entry point for ``bob``.

    Raises:
        SystemExit: On every path. Success exits 0, failures (usage errors
            included) exit with the error's code, Ctrl-C with 130.
    """
    from bobcli.exceptions import BobError
    from bobcli.output import error

    _setup_signal_handlers()
    try:
        app()
    except KeyboardInterrupt:
        _cancel()
    except BobError as exc:
        error(str(exc))
        sys.exit(exc.exit_code)
    except OSError as exc:
        error(str(exc))
        sys.exit(EXIT_GENERIC_FAILURE)
    except Exception as exc:
        log_path = _write_crash_log(exc)
        error(f"Unexpected error: {exc}. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
