"""Rendering of the bundled ``SKILL.md`` that teaches coding agents to use ``bob``."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from bobcli.auth import API_TOKEN_ENV, SERVICE_ID_ENV

TEMPLATE_DIR = Path(__file__).parent / "templates"

SKILL_NAME = "hibob"
SKILL_DESCRIPTION = "Query HiBob HR data: employee directory and who's out via the bob CLI"

COMMANDS = (
    {"usage": "bob people", "summary": "List employees"},
    {"usage": 'bob people "john"', "summary": "Search employees by name (local filter)"},
    {"usage": "bob person <id>", "summary": "View a single employee"},
    {"usage": "bob whosout", "summary": "Who is out of office"},
    {"usage": "bob outtoday", "summary": "Who is out today"},
    {"usage": "bob timeoff <id>", "summary": "Time off balance for an employee"},
    {"usage": "bob skill list", "summary": "List supported agents"},
)

EXAMPLES = (
    "bob people --json",
    'bob people "Ava" --department "Engineering"',
    "bob person 12345",
    "bob whosout --from 2024-01-15 --to 2024-01-20",
    "bob outtoday --date 2024-01-15",
)


def render_skill() -> str:
    """Render the ``SKILL.md`` body."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(disabled_extensions=("md.j2",)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    return env.get_template("skill.md.j2").render(
        name=SKILL_NAME,
        description=SKILL_DESCRIPTION,
        commands=COMMANDS,
        examples=EXAMPLES,
        service_id_env=SERVICE_ID_ENV,
        api_token_env=API_TOKEN_ENV,
    )
