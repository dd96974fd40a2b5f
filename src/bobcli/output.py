"""Terminal output for ``bob``: where each kind of text goes and how it looks.

Two streams, two jobs:

* **stdout** receives records and nothing else, so ``bob people --ndjson``
  can be piped straight into ``jq`` or a script.
* **stderr** receives everything addressed to the person at the keyboard:
  progress, confirmations, warnings, errors, and ``--verbose`` traces.

Colour is used only when stdout is a terminal and nobody asked for it to be
off (``--no-color``, ``NO_COLOR`` of any value, ``TERM=dumb``). Human
renderers write Rich markup; without colour the tags are stripped and the
plain text is written instead.

Commands never print directly. They hand records to :func:`output_list` or
:func:`output_item`, which pick ``--json``, ``--ndjson``, the command's
render function, or verbatim JSON, in that order. The active
:class:`OutputManager` is installed once per invocation by
:func:`bobcli.app.main_callback`.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from rich.console import Console
from rich.text import Text

from bobcli.models import EntityType, OutputOptions
from bobcli.normalize.projector import format_json, format_ndjson

Renderer = Callable[[Any], str]


class OutputFormat(str, Enum):
    """Style of human-readable output.

    ``AUTO`` becomes ``RICH`` on a colour-capable terminal and ``PLAIN``
    everywhere else. Machine formats are selected per command through
    :class:`~bobcli.models.OutputOptions` and never carry colour.
    """

    AUTO = "auto"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Owns the stdout and stderr consoles for one invocation.

    Args:
        format: Human output style; ``AUTO`` is resolved immediately.
        no_color: Force colour off regardless of the environment.
        verbose: Let :meth:`debug` messages through.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _color_disabled_by_env()
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            rich_ok = _stdout_is_terminal() and not self._no_color
            format = OutputFormat.RICH if rich_ok else OutputFormat.PLAIN
        self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=format == OutputFormat.RICH,
            highlight=False,
            emoji=False,
        )
        self._stderr = Console(
            file=sys.stderr,
            stderr=True,
            no_color=self._no_color,
            highlight=False,
            emoji=False,
        )

    @property
    def format(self) -> OutputFormat:
        return self._format

    @property
    def stderr_console(self) -> Console:
        """Console bound to stderr, used by the request spinner."""
        return self._stderr

    # --- stdout ---

    def print_data(self, text: str) -> None:
        """Write *text* and a newline to stdout, untouched."""
        print(text, file=sys.stdout, flush=True)

    def print_markup(self, markup: str) -> None:
        """Write Rich markup to stdout, coloured or reduced to plain text.

        Args:
            markup: Text such as ``"[bold]Ava[/bold]"``. Values taken from
                API records must already be passed through
                :func:`rich.markup.escape`. Emoji codes such as
                ``:smile:`` are left as written.
        """
        if self._format == OutputFormat.RICH:
            self._stdout.print(markup, soft_wrap=True)
        else:
            self.print_data(Text.from_markup(markup, emoji=False).plain)

    # --- stderr ---

    def _emit(self, message: str, prefix: str = "", style: str = "") -> None:
        if self._no_color:
            label = f"{prefix} " if prefix else ""
            print(f"{label}{message}", file=sys.stderr, flush=True)
        elif prefix:
            self._stderr.print(Text.assemble((prefix, style), " ", message))
        else:
            self._stderr.print(Text(message, style=style))

    def info(self, message: str) -> None:
        self._emit(message)

    def success(self, message: str) -> None:
        self._emit(message, style="green")

    def warning(self, message: str) -> None:
        self._emit(message, prefix="Warning:", style="yellow")

    def error(self, message: str) -> None:
        """Report a failure. Shown even without ``--verbose``."""
        self._emit(message, prefix="Error:", style="bold red")

    def debug(self, message: str) -> None:
        """Trace output, dropped unless ``--verbose`` was given."""
        if self._verbose:
            self._emit(f"[debug] {message}", style="dim")

    # --- record routing ---

    def output_item(
        self,
        item: Any,
        options: OutputOptions,
        entity_type: Optional[EntityType] = None,
        render: Optional[Renderer] = None,
    ) -> None:
        """Write one record.

        ``--json`` gives the projected record as pretty JSON, ``--ndjson``
        gives it as a single compact line, otherwise *render* is used, and
        without a renderer the record is dumped verbatim.
        """
        if options.json:
            self.print_data(format_json(item, entity_type, options.full))
        elif options.ndjson:
            self.print_data(format_ndjson([item], entity_type, options.full))
        elif render is not None:
            self.print_markup(render(item))
        else:
            self.print_data(_dump_verbatim(item))

    def output_list(
        self,
        items: Sequence[Any],
        options: OutputOptions,
        entity_type: Optional[EntityType] = None,
        render: Optional[Renderer] = None,
    ) -> None:
        """Write a sequence of records, choosing the mode like :meth:`output_item`.

        ``--json`` always prints a document, ``[]`` included. An empty
        sequence under ``--ndjson`` or human rendering prints nothing.
        """
        if options.json:
            self.print_data(format_json(list(items), entity_type, options.full))
        elif options.ndjson:
            if items:
                self.print_data(format_ndjson(items, entity_type, options.full))
        elif render is not None:
            if items:
                self.print_markup("\n".join(render(item) for item in items))
        else:
            self.print_data(_dump_verbatim(list(items)))


def _dump_verbatim(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _stdout_is_terminal() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _color_disabled_by_env() -> bool:
    """``NO_COLOR`` set to anything, or a dumb terminal."""
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


# --- process-wide manager ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed manager, installing a default one on first use."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager so the next call builds a fresh one."""
    global _output
    _output = None


def output_item(
    item: Any,
    options: OutputOptions,
    entity_type: Optional[EntityType] = None,
    render: Optional[Renderer] = None,
) -> None:
    get_output().output_item(item, options, entity_type, render)


def output_list(
    items: Sequence[Any],
    options: OutputOptions,
    entity_type: Optional[EntityType] = None,
    render: Optional[Renderer] = None,
) -> None:
    get_output().output_list(items, options, entity_type, render)


def print_data(text: str) -> None:
    get_output().print_data(text)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def warning(message: str) -> None:
    get_output().warning(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
