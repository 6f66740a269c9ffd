"""Heuristic README scraping for description, features and install steps."""

from __future__ import annotations

import re
from typing import List, Optional

from ..models import ReadmeContent

MAX_FEATURES = 6
MAX_DESCRIPTION_LENGTH = 500
MIN_DESCRIPTION_LENGTH = 50

_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n+")
_LEADING_HEADING = re.compile(r"^#+\s+.+\n?")
_FEATURES_SECTION = re.compile(
    r"^#{1,6}\s*(?:Features|Key Features|What it does)[^\n]*\n(.*?)(?=^##|\Z)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)
_INSTALL_SECTION = re.compile(
    r"^#{1,6}\s*(?:Installation|Getting Started|Quick Start|Setup)[^\n]*\n(.*?)(?=^##|\Z)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)
_BULLET = re.compile(r"^[-*]\s+(.+)$", re.MULTILINE)
_CODE_BLOCK = re.compile(r"```[^\n`]*\n?(.*?)```", re.DOTALL)


class ReadmeAnalyzer:
    """Extracts portfolio-friendly content from unstructured markdown.

    This is pattern matching, not a markdown parser: headings are located with
    regular expressions and sections end at the next ``##`` heading.
    """

    def analyze(self, readme: Optional[str]) -> ReadmeContent:
        if not readme or not readme.strip():
            return ReadmeContent()
        text = readme.replace("\r\n", "\n")
        return ReadmeContent(
            description=self.extract_description(text),
            features=self.extract_features(text),
            installation=self.extract_installation(text),
        )

    @staticmethod
    def extract_description(text: str) -> str:
        for paragraph in _PARAGRAPH_SPLIT.split(text):
            cleaned = _LEADING_HEADING.sub("", paragraph.strip(), count=1).strip()
            if not cleaned or cleaned.startswith(("#", "```")):
                continue
            if len(cleaned) <= MIN_DESCRIPTION_LENGTH:
                continue
            return cleaned.replace("\n", " ")[:MAX_DESCRIPTION_LENGTH]
        return ""

    @staticmethod
    def extract_features(text: str) -> List[str]:
        match = _FEATURES_SECTION.search(text)
        if not match:
            return []
        bullets = [bullet.strip() for bullet in _BULLET.findall(match.group(1))]
        return [bullet for bullet in bullets if bullet][:MAX_FEATURES]

    @staticmethod
    def extract_installation(text: str) -> List[str]:
        match = _INSTALL_SECTION.search(text)
        if not match:
            return []
        commands = [block.strip() for block in _CODE_BLOCK.findall(match.group(1))]
        return [command for command in commands if command]


__all__ = ["ReadmeAnalyzer"]
