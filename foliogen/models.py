"""Core data models shared across foliogen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

MAX_TECH_STACK = 4
DEFAULT_BADGE_COLOR = "linear-gradient(135deg, #E50914 0%, #ff4d4d 100%)"


@dataclass(frozen=True)
class RepoRef:
    """Owner/name pair identifying a hosted repository."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class RepositoryData:
    """Metadata and manifest contents fetched for one repository."""

    name: str
    description: str
    url: str
    homepage: Optional[str] = None
    topics: List[str] = field(default_factory=list)
    languages: Dict[str, int] = field(default_factory=dict)
    readme: Optional[str] = None
    package_json: Optional[Dict[str, Any]] = None
    requirements: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    stars: int = 0
    forks: int = 0

    def top_languages(self, limit: int = 3) -> List[str]:
        """Return language names ordered by byte count, largest first."""
        ordered = sorted(self.languages.items(), key=lambda item: item[1], reverse=True)
        return [name for name, _ in ordered[:limit]]


@dataclass
class ReadmeContent:
    """Fields scraped from a README."""

    description: str = ""
    features: List[str] = field(default_factory=list)
    installation: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Badge:
    """Display descriptor for one technology in the tech stack."""

    abbr: str
    name: str
    description: str
    color: str


PLACEHOLDER_BADGE = Badge(
    abbr="Code",
    name="Open Source",
    description="Project",
    color=DEFAULT_BADGE_COLOR,
)


@dataclass
class Feature:
    title: str
    description: str


@dataclass
class InstallStep:
    title: str
    description: str
    command: str


@dataclass
class ProjectRecord:
    """Everything the renderer needs for one portfolio entry."""

    project_number: str
    date: str
    title: str
    tagline: str
    description: str
    github_url: str
    image_url: str
    demo_url: Optional[str] = None
    social_url: Optional[str] = None
    tech_stack: List[Badge] = field(default_factory=list)
    features: List[Feature] = field(default_factory=list)
    install_steps: List[InstallStep] = field(default_factory=list)
    cta_title: str = ""
    cta_description: str = ""

    def __post_init__(self) -> None:
        self.title = self.title.strip()
        if not self.title:
            raise ValueError("Project title must not be empty")
        self.tech_stack = list(self.tech_stack[:MAX_TECH_STACK])

    @property
    def stats(self) -> List[str]:
        first = self.tech_stack[0].name if self.tech_stack else "Modern"
        second = self.tech_stack[1].name if len(self.tech_stack) > 1 else "Stack"
        return [first, second, "Open Source"]

    @property
    def badge_color(self) -> str:
        if self.tech_stack:
            return self.tech_stack[0].color
        return DEFAULT_BADGE_COLOR
