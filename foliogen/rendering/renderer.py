"""Renders project pages and gallery cards from Jinja2 templates."""

from __future__ import annotations

import re
import time
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..models import ProjectRecord

PAGE_TEMPLATE = "project.html.j2"
CARD_TEMPLATE = "card.html.j2"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_FIRST_INTEGER = re.compile(r"\d+")
FALLBACK_SLUG = "project"


def slugify(title: str) -> str:
    """Lower-case the title and collapse non-alphanumeric runs into single hyphens."""
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


def generate_filename(title: str, project_number: str | None) -> str:
    """Return ``day-<number>-<slug>.html`` for a project."""
    match = _FIRST_INTEGER.search(project_number or "")
    number = match.group(0) if match else str(int(time.time() * 1000))
    slug = slugify(title) or FALLBACK_SLUG
    return f"day-{number}-{slug}.html"


class TemplateRenderer:
    """Fills the page and card templates with a ProjectRecord."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        projects_dir: str = "projects",
        gallery_page: str = "browse.html",
    ) -> None:
        self.templates_dir = templates_dir
        self.projects_dir = projects_dir.strip("/")
        self.gallery_page = gallery_page
        self._env = self._create_env(templates_dir)

    def render_page(self, record: ProjectRecord) -> str:
        """Render the standalone project page."""
        template = self._env.get_template(PAGE_TEMPLATE)
        html = template.render(project=record, gallery_page=self.gallery_page)
        return html.rstrip() + "\n"

    def render_card(self, record: ProjectRecord, filename: str) -> str:
        """Render the gallery card; demo and social links appear only when set."""
        template = self._env.get_template(CARD_TEMPLATE)
        html = template.render(
            project=record,
            filename=filename,
            projects_dir=self.projects_dir,
        )
        return html.rstrip("\n")

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        return Environment(
            loader=FileSystemLoader(directories),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["TemplateRenderer", "generate_filename", "slugify"]
