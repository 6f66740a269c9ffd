"""Template rendering for project pages and gallery cards."""

from __future__ import annotations

from .renderer import TemplateRenderer, generate_filename, slugify

__all__ = ["TemplateRenderer", "generate_filename", "slugify"]
