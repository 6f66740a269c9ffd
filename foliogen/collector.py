"""Operator prompts for fields the repository could not supply."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Callable, Optional


@dataclass
class CollectedAnswers:
    """Operator-confirmed values for the project record."""

    title: str
    tagline: str
    description: str
    demo_url: str
    social_url: str
    image_url: str


class InteractiveCollector:
    """Asks for each field with a default; returns defaults when not interactive."""

    def __init__(
        self,
        *,
        interactive: Optional[bool] = None,
        input_func: Callable[[str], str] | None = None,
    ) -> None:
        self._input = input_func or input
        if interactive is None:
            interactive = input_func is not None or sys.stdin.isatty()
        self.interactive = interactive

    def collect(self, defaults: CollectedAnswers) -> CollectedAnswers:
        if not self.interactive:
            if not defaults.title.strip():
                raise ValueError("Title is required")
            return replace(defaults)

        title = self._ask_required("Project title", defaults.title)
        return CollectedAnswers(
            title=title,
            tagline=self._ask("Tagline (short description)", defaults.tagline),
            description=self._ask("Full description", defaults.description),
            demo_url=self._ask("YouTube demo URL (optional)", defaults.demo_url),
            social_url=self._ask("LinkedIn post URL (optional)", defaults.social_url),
            image_url=self._ask("Card image URL", defaults.image_url),
        )

    def _ask(self, label: str, default: str) -> str:
        prompt = f"{label} [{_preview(default)}]: " if default else f"{label}: "
        answer = self._input(prompt).strip()
        return answer or default

    def _ask_required(self, label: str, default: str) -> str:
        while True:
            answer = self._ask(label, default).strip()
            if answer:
                return answer
            print("Title is required", file=sys.stderr)


def _preview(value: str, limit: int = 60) -> str:
    flat = " ".join(value.split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 3] + "..."


__all__ = ["CollectedAnswers", "InteractiveCollector"]
