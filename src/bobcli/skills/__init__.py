"""Agent skill installers for the ``bob skill`` command group.

Exports:
    SKILL_INSTALLERS: Registry of supported agents keyed by name.
    get_installer: Look up an installer by agent name.
    list_agents: Names of all supported agents.
"""

from __future__ import annotations

from typing import Optional

from bobcli.skills.installer import SkillExistsError, SkillInstaller

SKILL_INSTALLERS: dict[str, SkillInstaller] = {
    "claude-code": SkillInstaller(
        name="claude-code",
        description="Claude Code skill for HiBob CLI",
        dir_name=".claude",
    ),
    "codex": SkillInstaller(
        name="codex",
        description="Codex skill for HiBob CLI",
        dir_name=".codex",
    ),
    "cursor": SkillInstaller(
        name="cursor",
        description="Cursor skill for HiBob CLI",
        dir_name=".cursor",
    ),
}


def get_installer(agent: str) -> Optional[SkillInstaller]:
    return SKILL_INSTALLERS.get(agent)


def list_agents() -> list[str]:
    return list(SKILL_INSTALLERS)


__all__ = ["SKILL_INSTALLERS", "SkillExistsError", "SkillInstaller", "get_installer", "list_agents"]
