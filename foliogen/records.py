"""Assembly of a ProjectRecord from fetched and operator-supplied data."""

from __future__ import annotations

import re
from datetime import date
from typing import List, Optional, Sequence

from .models import (
    PLACEHOLDER_BADGE,
    Badge,
    Feature,
    InstallStep,
    ProjectRecord,
)

CTA_DESCRIPTION = "Check out the full project on GitHub for documentation and source code."
INSTALL_STEP_DESCRIPTION = "Run the following command:"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_title(name: str) -> str:
    """Turn a repository name such as ``my-coolApp`` into ``My Cool App``."""
    spaced = re.sub(r"[-_]", " ", name)
    spaced = re.sub(r"([a-z])([A-Z])", r"\1 \2", spaced)
    return " ".join(word[:1].upper() + word[1:].lower() for word in spaced.split())


def format_date(value: date) -> str:
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def build_record(
    *,
    project_number: str,
    title: str,
    tagline: str,
    description: str,
    github_url: str,
    image_url: str,
    tech_stack: Sequence[Badge],
    features: Sequence[str],
    installation: Sequence[str],
    demo_url: Optional[str] = None,
    social_url: Optional[str] = None,
    today: Optional[date] = None,
) -> ProjectRecord:
    """Build the record the renderer consumes, filling derived fields."""
    clean_title = title.strip()
    badges: List[Badge] = list(tech_stack) or [PLACEHOLDER_BADGE]
    return ProjectRecord(
        project_number=project_number,
        date=format_date(today or date.today()),
        title=clean_title,
        tagline=tagline,
        description=description,
        github_url=github_url,
        image_url=image_url,
        demo_url=demo_url or None,
        social_url=social_url or None,
        tech_stack=badges,
        features=[
            Feature(title=" ".join(feature.split()[:3]), description=feature)
            for feature in features
        ],
        install_steps=[
            InstallStep(
                title=f"Step {index}",
                description=INSTALL_STEP_DESCRIPTION,
                command=command,
            )
            for index, command in enumerate(installation, start=1)
        ],
        cta_title=f"Ready to try {clean_title}?",
        cta_description=CTA_DESCRIPTION,
    )


__all__ = ["build_record", "format_date", "format_title"]
