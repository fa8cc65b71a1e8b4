"""Markdown rendering of the profile README."""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateError

from src.domain.repository import AICredit, Repository

logger = logging.getLogger(__name__)

CARD_STYLE = "border: 1px solid #e1e4e8; border-radius: 6px; padding: 16px; margin: 8px; width: 320px;"
TEMPLATES_DIR = Path(__file__).with_name("templates")


class RenderFailure(Exception):
    """Raised when the README cannot be rendered or written."""
    pass


def format_date(value: Optional[datetime]) -> str:
    return value.strftime("%b %d, %Y") if value else "never"


class ReadmeRenderer:
    """Renders ordered repositories into a profile README document."""

    def __init__(self, title: str = "My Repositories", templates_dir: Optional[Path] = None):
        self.title = title
        self._env = self._create_env(templates_dir or TEMPLATES_DIR)

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.filters["format_date"] = format_date
        return env

    def render(
        self,
        repositories: Sequence[Repository],
        contact_lines: Sequence[str] = (),
        ai_credits: Sequence[AICredit] = (),
    ) -> str:
        """
        Render the README text.

        Args:
            repositories: Repositories in display order
            contact_lines: Freeform lines for the contact section, emitted verbatim
            ai_credits: Annotations attached to repositories by name

        Returns:
            The complete Markdown document

        Raises:
            RenderFailure: If the template cannot be loaded or rendered
        """
        credits_by_name: Dict[str, AICredit] = {}
        for credit in ai_credits:
            credits_by_name.setdefault(credit.normalized_name, credit)

        cards = [
            {"repo": repo, "credit": credits_by_name.get(repo.normalized_name)}
            for repo in repositories
        ]

        try:
            template = self._env.get_template("readme.md.j2")
            content = template.render(
                title=self.title,
                card_style=CARD_STYLE,
                cards=cards,
                contact_lines=list(contact_lines),
            )
        except TemplateError as e:
            raise RenderFailure(f"Cannot render README template: {e}") from e

        return content.rstrip("\n") + "\n"

    def write(self, content: str, output_file: str) -> None:
        """
        Write rendered content to disk.

        The document goes to a temporary sibling first and is then moved into
        place, so a failed write never leaves a truncated output file.

        Raises:
            RenderFailure: If the file cannot be written
        """
        tmp_file = f"{output_file}.tmp"
        try:
            with open(tmp_file, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_file, output_file)
        except OSError as e:
            if os.path.exists(tmp_file):
                os.remove(tmp_file)
            raise RenderFailure(f"Cannot write {output_file}: {e}") from e
        logger.info(f"Wrote {len(content)} characters to {output_file}")
