"""Analyzers that turn fetched repository data into portfolio content."""

from __future__ import annotations

from .readme import ReadmeAnalyzer
from .tech_stack import TECH_BADGES, TechStackDetector

__all__ = ["ReadmeAnalyzer", "TECH_BADGES", "TechStackDetector"]
