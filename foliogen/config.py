"""Configuration loading for foliogen (.foliogen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".foliogen.yml"

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1555066931-4365d14bab8c?w=400&h=250&fit=crop"
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitHubConfig:
    """GitHub API access settings."""

    api_url: str = "https://api.github.com"
    request_timeout: float = 30.0


@dataclass
class GalleryConfig:
    """Anchors used when splicing cards into the gallery page."""

    section_marker: str = "Professional Experience"
    insert_marker: str = "<!-- foliogen:cards -->"


@dataclass
class PublishConfig:
    """Remote and branch names used when pushing."""

    remote: str = "origin"
    branches: List[str] = field(default_factory=lambda: ["main", "master"])


@dataclass
class FoliogenConfig:
    """Represents the settings defined in .foliogen.yml."""

    root: Path
    projects_dir: str = "projects"
    gallery_page: str = "browse.html"
    default_image: str = DEFAULT_IMAGE_URL
    github: GitHubConfig = field(default_factory=GitHubConfig)
    gallery: GalleryConfig = field(default_factory=GalleryConfig)
    publish: PublishConfig = field(default_factory=PublishConfig)
    templates_dir: Optional[Path] = None

    @property
    def projects_path(self) -> Path:
        return self.root / self.projects_dir

    @property
    def gallery_path(self) -> Path:
        return self.root / self.gallery_page


def load_config(config_path: Path) -> FoliogenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return FoliogenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = FoliogenConfig(root=root)

    portfolio_data = _as_dict(data.get("portfolio"))
    config.projects_dir = _as_str(portfolio_data.get("projects_dir")) or config.projects_dir
    config.gallery_page = _as_str(portfolio_data.get("gallery_page")) or config.gallery_page
    config.default_image = _as_str(portfolio_data.get("default_image")) or config.default_image

    github_data = _as_dict(data.get("github"))
    if github_data:
        config.github.api_url = (
            _as_str(github_data.get("api_url")) or config.github.api_url
        ).rstrip("/")
        timeout = _as_float(github_data.get("request_timeout"))
        if timeout is not None:
            config.github.request_timeout = timeout

    gallery_data = _as_dict(data.get("gallery"))
    if gallery_data:
        config.gallery.section_marker = (
            _as_str(gallery_data.get("section_marker")) or config.gallery.section_marker
        )
        config.gallery.insert_marker = (
            _as_str(gallery_data.get("insert_marker")) or config.gallery.insert_marker
        )

    templates_data = _as_dict(data.get("templates"))
    templates_dir = _as_str(templates_data.get("dir")) if templates_data else None
    if templates_dir:
        config.templates_dir = root / templates_dir

    publish_data = _as_dict(data.get("publish"))
    if publish_data:
        config.publish.remote = _as_str(publish_data.get("remote")) or config.publish.remote
        branches = _as_str_list(publish_data.get("branches"))
        if branches:
            config.publish.branches = branches

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir() or config_path.name != CONFIG_FILENAME:
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
