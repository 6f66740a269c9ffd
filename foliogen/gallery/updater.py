"""Splices project cards into the static gallery page."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..logging import get_logger

_PROJECT_FILE = re.compile(r"^day-(\d+)")


class AnchorNotFoundError(RuntimeError):
    """Raised when the gallery page has no recognisable insertion point."""


@dataclass
class SpliceResult:
    """Updated gallery text plus the anchor that was used."""

    content: str
    anchor: str


class GalleryUpdater:
    """Inserts cards before a fixed anchor, leaving the rest of the page untouched.

    The primary anchor is the closing-tag run that ends the card grid
    (``</div> </div> </section>``) directly followed by the comment that opens
    the next section. Pages may instead carry an explicit insertion marker,
    which is used when the closing-tag run is not found.
    """

    def __init__(
        self,
        *,
        section_marker: str = "Professional Experience",
        insert_marker: str = "<!-- foliogen:cards -->",
    ) -> None:
        self.section_marker = section_marker
        self.insert_marker = insert_marker
        self.logger = get_logger("gallery")

    def splice(self, content: str, card: str) -> str:
        return self.splice_with_anchor(content, card).content

    def splice_with_anchor(self, content: str, card: str) -> SpliceResult:
        for label, pattern in self._anchors():
            match = pattern.search(content)
            if match is None:
                continue
            return SpliceResult(
                content=self._insert(content, match.start(), card),
                anchor=label,
            )
        raise AnchorNotFoundError(
            "Could not find insertion point in gallery page: expected closing tags before "
            f"'<!-- {self.section_marker} -->' or the marker '{self.insert_marker}'"
        )

    def prepare(self, path: Path, card: str) -> SpliceResult:
        """Read the page and compute the spliced text without writing it."""
        return self.splice_with_anchor(path.read_text(encoding="utf-8"), card)

    def write(self, path: Path, result: SpliceResult) -> None:
        path.write_text(result.content, encoding="utf-8")
        self.logger.debug("Inserted card into %s using %s anchor", path, result.anchor)

    @staticmethod
    def next_project_number(projects_dir: Path) -> int:
        """Return one more than the highest ``day-<n>`` page number, or 1."""
        if not projects_dir.is_dir():
            return 1
        numbers: List[int] = []
        for entry in projects_dir.iterdir():
            if not entry.is_file() or entry.suffix != ".html":
                continue
            match = _PROJECT_FILE.match(entry.name)
            if match:
                numbers.append(int(match.group(1)))
        return max(numbers, default=0) + 1

    def _anchors(self) -> List[tuple[str, re.Pattern[str]]]:
        closing_run = re.compile(
            r"</div>\s*</div>\s*</section>\s*<!--\s*"
            + re.escape(self.section_marker)
            + r"\s*-->"
        )
        anchors = [("closing-tags", closing_run)]
        if self.insert_marker:
            anchors.append(("marker", re.compile(re.escape(self.insert_marker))))
        return anchors

    @staticmethod
    def _insert(content: str, position: int, card: str) -> str:
        line_start = content.rfind("\n", 0, position) + 1
        indent = content[line_start:position]
        if not indent.strip():
            # Anchor starts its own line: place the card on the lines above it.
            return f"{content[:line_start]}{card}\n{content[line_start:]}"
        return f"{content[:position]}{card}{content[position:]}"


__all__ = ["AnchorNotFoundError", "GalleryUpdater", "SpliceResult"]
