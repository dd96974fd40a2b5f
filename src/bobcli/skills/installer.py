"""Install the bundled skill into a coding agent's skills directory.

Each supported agent keeps skills under a dot-directory, either in the
user's home (global) or in the current project (``--local``)::

    ~/.claude/skills/hibob/SKILL.md
    ./.cursor/skills/hibob/SKILL.md
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bobcli.exceptions import BobError
from bobcli.skills.content import SKILL_NAME, render_skill

logger = logging.getLogger(__name__)


class SkillExistsError(BobError):
    """Raised when installing over an existing skill without ``force``."""


@dataclass(frozen=True)
class SkillInstaller:
    """Installer for one agent.

    Attributes:
        name: Agent identifier used on the command line (``claude-code``).
        description: One-line summary for ``bob skill list``.
        dir_name: The agent's dot-directory (``.claude``).
    """

    name: str
    description: str
    dir_name: str

    def skill_dir(self, local: bool = False, base: Optional[Path] = None) -> Path:
        """Directory holding the skill, under *base*, the cwd, or the home directory."""
        if base is None:
            base = Path.cwd() if local else Path.home()
        return base / self.dir_name / "skills" / SKILL_NAME

    def skill_path(self, local: bool = False, base: Optional[Path] = None) -> Path:
        return self.skill_dir(local, base) / "SKILL.md"

    def is_installed(self, local: bool = False, base: Optional[Path] = None) -> bool:
        return self.skill_path(local, base).is_file()

    def install(self, local: bool = False, force: bool = False, base: Optional[Path] = None) -> Path:
        """Write ``SKILL.md`` and return its path.

        Raises:
            SkillExistsError: If the file exists and *force* is not set.
        """
        path = self.skill_path(local, base)
        if path.exists() and not force:
            raise SkillExistsError(f"Skill already installed at {path}")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_skill(), encoding="utf-8")
        logger.debug("Installed %s skill at %s", self.name, path)
        return path

    def uninstall(self, local: bool = False, base: Optional[Path] = None) -> bool:
        """Remove the skill directory. Returns ``False`` if nothing was installed."""
        directory = self.skill_dir(local, base)
        if not directory.is_dir():
            return False
        shutil.rmtree(directory)
        logger.debug("Removed %s skill from %s", self.name, directory)
        return True
