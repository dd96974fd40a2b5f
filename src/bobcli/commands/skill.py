"""Skill commands -- install a ``SKILL.md`` that teaches coding agents to use ``bob``.

Usage::

    bob skill list
    bob skill install claude-code
    bob skill install cursor --local --force
    bob skill uninstall codex
"""

from __future__ import annotations

import typer

from bobcli.exceptions import InvalidUsageError
from bobcli.output import info, print_data, success
from bobcli.skills import SKILL_INSTALLERS, SkillInstaller, get_installer, list_agents

skill_app = typer.Typer(no_args_is_help=True)
"""Typer application for the ``skill`` command group."""

_LOCAL_OPTION = typer.Option(
    False, "--local", help="Use the current project instead of the home directory."
)


def _resolve(agent: str) -> SkillInstaller:
    installer = get_installer(agent)
    if installer is None:
        raise InvalidUsageError(
            f"Unknown agent '{agent}'. Supported agents: {', '.join(list_agents())}"
        )
    return installer


@skill_app.command("list")
def skill_list() -> None:
    """List supported agents and whether the skill is installed for each."""
    for name, installer in SKILL_INSTALLERS.items():
        marker = " (installed)" if installer.is_installed() else ""
        print_data(f"{name:<12} {installer.description}{marker}")


@skill_app.command("install")
def skill_install(
    agent: str = typer.Argument(help="Agent name, see `bob skill list`."),
    local: bool = _LOCAL_OPTION,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing skill."),
) -> None:
    """Install the HiBob skill for an agent.

    Raises:
        InvalidUsageError: For an unknown agent.
        SkillExistsError: If the skill is already installed and ``--force``
            was not given.
    """
    installer = _resolve(agent)
    path = installer.install(local=local, force=force)
    success(f"Installed {agent} skill at {path}")


@skill_app.command("uninstall")
def skill_uninstall(
    agent: str = typer.Argument(help="Agent name, see `bob skill list`."),
    local: bool = _LOCAL_OPTION,
) -> None:
    """Remove the HiBob skill for an agent. Safe to run when it is not installed."""
    installer = _resolve(agent)
    if installer.uninstall(local=local):
        success(f"Removed {agent} skill.")
    else:
        info(f"No {agent} skill installed.")
