"""CLI sub-commands for bobcli.

* :mod:`~bobcli.commands.people` -- ``people`` and ``person``.
* :mod:`~bobcli.commands.timeoff` -- ``whosout``, ``outtoday``, ``timeoff``.
* :mod:`~bobcli.commands.auth` -- ``auth login|status|logout``.
* :mod:`~bobcli.commands.skill` -- ``skill list|install|uninstall``.
* :mod:`~bobcli.commands.common` -- shared output-mode options.

Multi-command groups export a :class:`typer.Typer` sub-application; single
commands export a plain callback registered directly on the root app.
"""
